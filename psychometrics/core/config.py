"""Configuration management for the psychometric scoring engine.

This module handles configuration loading and validation using Pydantic
Settings for type safety and environment variable support.
"""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from psychometrics.utils.constants import ScoringConstants
from psychometrics.utils.logger import setup_logging


class Settings(BaseSettings):
    """Engine settings with validation and type hints."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application Settings
    APP_NAME: str = Field(default="Psychometrics", description="Application name")
    APP_ENV: str = Field(
        default="development",
        description="Application environment",
        pattern="^(development|test|staging|production)$",
    )

    # Logging Configuration
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Log level",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )

    # Scoring Configuration
    SCORING_VERSION: str = Field(
        default="1.0.0", description="Version stamped on every scoring result"
    )
    LIKERT_MIN: int = Field(
        default=ScoringConstants.LIKERT_MIN, description="Lowest Likert value", ge=0
    )
    LIKERT_MAX: int = Field(
        default=ScoringConstants.LIKERT_MAX, description="Highest Likert value", ge=1
    )
    ALLOW_INCOMPLETE_DEFAULT: bool = Field(
        default=False,
        description="Score partial submissions unless the caller says otherwise",
    )

    @field_validator("APP_ENV")
    def validate_app_env(cls, v: str) -> str:
        """Validate application environment."""
        valid_envs = ["development", "test", "staging", "production"]
        if v not in valid_envs:
            raise ValueError(f"APP_ENV must be one of {valid_envs}")
        return v

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Validate settings after all fields are set."""
        if self.LIKERT_MIN >= self.LIKERT_MAX:
            raise ValueError("LIKERT_MIN must be lower than LIKERT_MAX")

        return self


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Application settings instance
    """
    settings = Settings()

    # Setup logging based on settings
    setup_logging(environment=settings.APP_ENV, log_level=settings.LOG_LEVEL)

    return settings

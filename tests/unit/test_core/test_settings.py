"""Unit tests for engine settings."""

import pytest
from pydantic import ValidationError

from psychometrics.core.config import Settings


class TestSettings:
    """Test settings validation."""

    def test_defaults(self):
        """Test the default Likert scale."""
        settings = Settings(_env_file=None)

        assert (settings.LIKERT_MIN, settings.LIKERT_MAX) == (1, 5)
        assert settings.ALLOW_INCOMPLETE_DEFAULT is False

    @pytest.mark.parametrize("likert_min, likert_max", [(5, 5), (7, 1)])
    def test_likert_range_must_be_increasing(self, likert_min, likert_max):
        """Test an empty or inverted Likert range."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, LIKERT_MIN=likert_min, LIKERT_MAX=likert_max)

    def test_production_keeps_configured_log_level(self):
        """Test that the log level is used as given in every environment."""
        settings = Settings(_env_file=None, APP_ENV="production", LOG_LEVEL="DEBUG")

        assert settings.LOG_LEVEL == "DEBUG"

    @pytest.mark.parametrize("field, value", [("APP_ENV", "qa"), ("LOG_LEVEL", "VERBOSE")])
    def test_invalid_values(self, field, value):
        """Test values outside the accepted sets."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **{field: value})

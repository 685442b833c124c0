"""Base model classes for the scoring engine.

This module provides the base classes for every engine model: immutable
input records (question banks, submissions), immutable catalog entries and
the scoring result.
"""

from types import MappingProxyType
from typing import Annotated, Any, Dict, Mapping, Type, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer


T = TypeVar("T", bound="EngineModel")


def freeze_mapping(value: Mapping[str, Any]) -> Mapping[str, Any]:
    """Wrap a validated mapping in a read-only view."""
    return MappingProxyType(dict(value))


def thaw_mapping(value: Mapping[str, Any]) -> Dict[str, Any]:
    return dict(value)


# Mapping fields of frozen models, defaults included; item assignment raises TypeError
ReadOnlyScores = Annotated[
    Mapping[str, float],
    Field(validate_default=True),
    AfterValidator(freeze_mapping),
    PlainSerializer(thaw_mapping, return_type=Dict[str, float]),
]
ReadOnlyLabels = Annotated[
    Mapping[str, str],
    Field(validate_default=True),
    AfterValidator(freeze_mapping),
    PlainSerializer(thaw_mapping, return_type=Dict[str, str]),
]
ReadOnlyMetadata = Annotated[
    Mapping[str, Any],
    Field(validate_default=True),
    AfterValidator(freeze_mapping),
    PlainSerializer(thaw_mapping, return_type=Dict[str, Any]),
]


class EngineModel(BaseModel):
    """Base model for all engine records.

    Instances are frozen once validated; fields may be populated either by
    their Python name or by their camelCase alias.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        use_enum_values=False,
        extra="ignore",
    )

    def to_dict(self, **kwargs: Any) -> Dict[str, Any]:
        """Convert model to a JSON-compatible dictionary.

        Args:
            **kwargs: Additional arguments for model_dump

        Returns:
            Dict[str, Any]: Dictionary representation of the model
        """
        return self.model_dump(mode="json", **kwargs)

    def to_json(self, **kwargs: Any) -> str:
        """Convert model to JSON string.

        Args:
            **kwargs: Additional arguments for model_dump_json

        Returns:
            str: JSON string representation of the model
        """
        return self.model_dump_json(**kwargs)

    @classmethod
    def from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
        """Create model instance from dictionary.

        Args:
            data: Dictionary containing model data

        Returns:
            Model instance
        """
        return cls.model_validate(data)


class CatalogEntry(BaseModel):
    """Base model for immutable interpretation catalog entries."""

    model_config = ConfigDict(frozen=True, extra="forbid")

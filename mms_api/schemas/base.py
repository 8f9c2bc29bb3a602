"""
Base Schemas.

Every API resource is an immutable pydantic model decoded from one JSON
object. Field names are snake_case; the API's camelCase keys are generated
as aliases. Parent references (group, cluster) are attached at decode time
and declared with exclude=True so they never reach to_hash().
"""

from datetime import datetime, timezone
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from mms_api.core.exceptions import ResourceError


def format_value(value: Any) -> str:
    """Render a field value for a table cell."""
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    return str(value)


def format_api_datetime(value: datetime) -> str:
    """Render a datetime the way the API expects it (UTC, second precision)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def check_reference(reference: Any, expected_id: str, name: str) -> None:
    """
    Verify that a resolved parent reference matches the owner's foreign key.

    Raises:
        ValueError: If the reference points to a different parent.
    """
    if reference is not None and reference.id != expected_id:
        raise ValueError(f"{name} reference {reference.id} does not match {name}Id {expected_id}")


class ApiModel(BaseModel):
    """Immutable model with camelCase API aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class ApiResource(ApiModel):
    """
    Base class for top-level API resources.

    Subclasses declare table_title and table_header and implement
    table_section(); to_hash() is shared.
    """

    table_title: ClassVar[str] = ""
    table_header: ClassVar[list[str]] = []

    id: str

    @classmethod
    def from_api(cls, payload: Any, **references: Any) -> Self:
        """
        Decode one JSON object, attaching already-known parent references.

        Raises:
            ResourceError: If the payload is not an object or fails validation.
        """
        if not isinstance(payload, dict):
            raise ResourceError(
                f"{cls.__name__} payload must be a JSON object, got {type(payload).__name__}",
                resource=cls.__name__,
                payload=payload,
            )
        try:
            return cls.model_validate({**payload, **references})
        except PydanticValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc']) or cls.__name__}: {error['msg']}"
                for error in e.errors()
            )
            raise ResourceError(
                f"Invalid {cls.__name__} payload ({problems}): {payload}",
                resource=cls.__name__,
                payload=payload,
            ) from e

    def to_hash(self) -> dict[str, Any]:
        """Flat JSON-compatible field map keyed by API field names."""
        return self.model_dump(mode="json", by_alias=True)

    def table_section(self) -> list[list[str]]:
        """Rows this resource contributes to a human-readable table."""
        raise NotImplementedError


class SnapshotTimestamp(ApiModel):
    """Composite timestamp: wall-clock date plus logical increment."""

    date: datetime
    increment: int = 0

    def __str__(self) -> str:
        return f"{format_value(self.date)} ({self.increment})"

"""
Restore Job Schemas.

A restore job recreates a cluster's data either from a stored snapshot or
from a point in time. RestoreSource classifies the user-supplied source
string and builds the matching request body.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar

from pydantic import Field, TypeAdapter, model_validator
from pydantic import ValidationError as PydanticValidationError

from mms_api.core.exceptions import ValidationError
from mms_api.schemas.base import (
    ApiModel,
    ApiResource,
    SnapshotTimestamp,
    check_reference,
    format_api_datetime,
    format_value,
)
from mms_api.schemas.cluster import Cluster
from mms_api.schemas.group import Group

SNAPSHOT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")
NOW = "now"

_datetime_adapter = TypeAdapter(datetime)


class RestoreSourceKind(str, Enum):
    NOW = "now"
    TIMESTAMP = "timestamp"
    SNAPSHOT = "snapshot"


@dataclass(frozen=True)
class RestoreSource:
    """Where a restore job takes its data from."""

    kind: RestoreSourceKind
    snapshot_id: str | None = None
    timestamp: datetime | None = None

    @classmethod
    def parse(cls, source: str, now: datetime | None = None) -> "RestoreSource":
        """
        Classify a source string.

        Args:
            source: "now", a 24 character snapshot id, or an ISO-8601 timestamp.
            now: Reference time for "now"; defaults to the current UTC time.

        Raises:
            ValidationError: If the source is none of the above.
        """
        value = source.strip()
        if value.lower() == NOW:
            return cls(kind=RestoreSourceKind.NOW, timestamp=now or datetime.now(timezone.utc))
        if SNAPSHOT_ID_PATTERN.match(value):
            return cls(kind=RestoreSourceKind.SNAPSHOT, snapshot_id=value)
        try:
            timestamp = _datetime_adapter.validate_python(value)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Restore source `{source}` is neither `now`, a snapshot id nor a timestamp",
                details={"source": source},
            ) from e
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return cls(kind=RestoreSourceKind.TIMESTAMP, timestamp=timestamp)

    def to_payload(self) -> dict[str, Any]:
        """Request body for POST .../restoreJobs."""
        if self.kind is RestoreSourceKind.SNAPSHOT:
            return {"snapshotId": self.snapshot_id}
        return {"timestamp": {"date": format_api_datetime(self.timestamp), "increment": 0}}


class RestoreDelivery(ApiModel):
    """How the restored data is handed over."""

    method_name: str | None = None
    status_name: str | None = None
    url: str | None = None
    expires: datetime | None = None


class RestoreJob(ApiResource):
    """Restore job of a cluster."""

    table_title: ClassVar[str] = "Restore jobs"
    table_header: ClassVar[list[str]] = [
        "RestoreId",
        "SnapshotId / Cluster / Group",
        "Name (created)",
        "Status",
        "Point in time",
        "Delivery",
        "Restore status",
    ]

    group_id: str
    cluster_id: str
    status_name: str
    snapshot_id: str | None = None
    timestamp: SnapshotTimestamp | None = None
    created: datetime | None = None
    point_in_time: bool = False
    delivery: RestoreDelivery | None = None

    group: Group | None = Field(default=None, exclude=True)
    cluster: Cluster | None = Field(default=None, exclude=True)

    @model_validator(mode="after")
    def _check_references(self) -> "RestoreJob":
        check_reference(self.group, self.group_id, "group")
        check_reference(self.cluster, self.cluster_id, "cluster")
        return self

    @property
    def status(self) -> str:
        return self.status_name

    def table_section(self) -> list[list[str]]:
        cluster_name = self.cluster.name if self.cluster else self.cluster_id
        group_name = self.group.name if self.group and self.group.name else self.group_id
        delivery = self.delivery or RestoreDelivery()
        return [
            [
                self.id,
                format_value(self.snapshot_id),
                format_value(self.created),
                self.status_name,
                format_value(self.point_in_time),
                format_value(delivery.method_name),
                format_value(delivery.status_name),
            ],
            ["", cluster_name, "", "", "", "", ""],
            ["", group_name, "", "", "", "", ""],
            ["", format_value(delivery.url), "", "", "", "", ""],
        ]

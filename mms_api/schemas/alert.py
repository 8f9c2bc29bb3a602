"""
Alert Schemas.

Alerts belong to a group; depending on the alert type they also point at a
host, a replica set or a cluster by id and name.
"""

from datetime import datetime
from typing import ClassVar

from pydantic import Field, model_validator

from mms_api.schemas.base import ApiModel, ApiResource, check_reference, format_value
from mms_api.schemas.group import Group

OPEN_STATUS = "OPEN"


class AlertValue(ApiModel):
    """Metric reading that triggered a metric alert."""

    number: float | None = None
    units: str | None = None

    def __str__(self) -> str:
        if self.number is None:
            return "-"
        return f"{self.number:g} {self.units or ''}".strip()


class Alert(ApiResource):
    """Group alert."""

    table_title: ClassVar[str] = "Alerts"
    table_header: ClassVar[list[str]] = [
        "Group",
        "Type",
        "Event name",
        "Status",
        "Target",
        "Created",
        "Last notified",
        "Value",
        "AlertId",
    ]

    group_id: str
    type_name: str
    status: str
    event_type_name: str | None = None
    created: datetime | None = None
    updated: datetime | None = None
    resolved: datetime | None = None
    last_notified: datetime | None = None
    acknowledged_until: datetime | None = None
    acknowledgement_comment: str | None = None
    acknowledging_username: str | None = None
    host_id: str | None = None
    hostname_and_port: str | None = None
    replica_set_name: str | None = None
    cluster_id: str | None = None
    cluster_name: str | None = None
    metric_name: str | None = None
    current_value: AlertValue | None = None

    group: Group | None = Field(default=None, exclude=True)

    @model_validator(mode="after")
    def _check_group(self) -> "Alert":
        check_reference(self.group, self.group_id, "group")
        return self

    @property
    def is_open(self) -> bool:
        return self.status == OPEN_STATUS

    @property
    def target(self) -> str | None:
        """Most specific thing the alert is about."""
        return self.hostname_and_port or self.replica_set_name or self.cluster_name

    def table_section(self) -> list[list[str]]:
        group_name = self.group.name if self.group and self.group.name else self.group_id
        return [[
            group_name,
            self.type_name,
            format_value(self.event_type_name),
            self.status,
            format_value(self.target),
            format_value(self.created),
            format_value(self.last_notified),
            format_value(self.current_value),
            self.id,
        ]]

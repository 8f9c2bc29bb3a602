"""
Host Schemas.

Hosts are monitored mongod/mongos processes within a group. HostOptions is
the request structure for host creation and partial updates.
"""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from mms_api.schemas.base import ApiResource, check_reference, format_value
from mms_api.schemas.group import Group


class HostOptions(BaseModel):
    """
    Recognized host settings for create and update requests.

    Unset options are omitted from the request body, so an update only
    touches the settings given here.
    """

    ssl_enabled: bool | None = Field(default=None, description="Connect to the host over SSL")
    logs_enabled: bool | None = Field(default=None, description="Collect host logs")
    alerts_enabled: bool | None = Field(default=None, description="Send alerts for the host")
    profiler_enabled: bool | None = Field(default=None, description="Collect profiler data")
    journaling_enabled: bool | None = Field(default=None, description="Collect journaling metrics")
    host_enabled: bool | None = Field(default=None, description="Monitor the host")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    def to_payload(self) -> dict[str, Any]:
        """Request body fragment with the options that were set."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def is_empty(self) -> bool:
        return not self.to_payload()


class Host(ApiResource):
    """Monitored host."""

    table_title: ClassVar[str] = "Hosts"
    table_header: ClassVar[list[str]] = [
        "Group",
        "Type",
        "Hostname",
        "IP",
        "Port",
        "Last ping",
        "Alerts enabled",
        "HostId",
        "Shard",
        "Replica",
    ]

    group_id: str
    hostname: str
    port: int
    type_name: str | None = None
    ip_address: str | None = None
    replica_set_name: str | None = None
    shard_name: str | None = None
    version: str | None = None
    deactivated: bool = False
    ssl_enabled: bool = False
    logs_enabled: bool = False
    host_enabled: bool = True
    journaling_enabled: bool = False
    alerts_enabled: bool = True
    profiler_enabled: bool = False
    created: datetime | None = None
    last_ping: datetime | None = None

    group: Group | None = Field(default=None, exclude=True)

    @model_validator(mode="after")
    def _check_group(self) -> "Host":
        check_reference(self.group, self.group_id, "group")
        return self

    @property
    def address(self) -> str:
        return f"{self.hostname}:{self.port}"

    def table_section(self) -> list[list[str]]:
        group_name = self.group.name if self.group and self.group.name else self.group_id
        return [[
            group_name,
            format_value(self.type_name),
            self.hostname,
            format_value(self.ip_address),
            str(self.port),
            format_value(self.last_ping),
            format_value(self.alerts_enabled),
            self.id,
            format_value(self.shard_name),
            format_value(self.replica_set_name),
        ]]

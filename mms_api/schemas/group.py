"""
Group Schemas.

Groups are the root of the ownership hierarchy: hosts, clusters, alerts and
(through clusters) snapshots and restore jobs all belong to one group.
"""

from datetime import datetime
from typing import ClassVar, Self

from mms_api.schemas.base import ApiResource, format_value


class Group(ApiResource):
    """MMS group (project)."""

    table_title: ClassVar[str] = "Groups"
    table_header: ClassVar[list[str]] = [
        "Name",
        "Active Agents",
        "Replicas count",
        "Shards count",
        "Last Active Agent",
        "GroupId",
    ]

    name: str | None = None
    last_active_agent: datetime | None = None
    active_agent_count: int | None = None
    replica_set_count: int | None = None
    shard_count: int | None = None

    @classmethod
    def stub(cls, group_id: str) -> Self:
        """Group known only by id, e.g. when the caller supplied just the id."""
        return cls(id=group_id)

    @property
    def is_stub(self) -> bool:
        return self.name is None

    def table_section(self) -> list[list[str]]:
        return [[
            format_value(self.name),
            format_value(self.active_agent_count),
            format_value(self.replica_set_count),
            format_value(self.shard_count),
            format_value(self.last_active_agent),
            self.id,
        ]]

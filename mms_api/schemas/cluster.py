"""
Cluster Schemas.
"""

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar

from pydantic import Field, model_validator

from mms_api.schemas.base import ApiResource, check_reference, format_value
from mms_api.schemas.group import Group


class ClusterType(str, Enum):
    """Cluster topology as reported by the API."""

    REPLICA_SET = "REPLICA_SET"
    SHARDED_REPLICA_SET = "SHARDED_REPLICA_SET"
    SHARDED = "SHARDED"
    MASTER_SLAVE = "MASTER_SLAVE"
    CONFIG_SERVER_REPLICA_SET = "CONFIG_SERVER_REPLICA_SET"


class Cluster(ApiResource):
    """Replica set or sharded cluster within a group."""

    table_title: ClassVar[str] = "Clusters"
    table_header: ClassVar[list[str]] = [
        "Group",
        "Cluster",
        "Shard name",
        "Replica name",
        "Type",
        "Last heartbeat",
        "Cluster Id",
    ]

    group_id: str
    type_name: ClusterType | str = Field(union_mode="left_to_right")
    name: str = Field(alias="clusterName")
    replica_set_name: str | None = None
    shard_name: str | None = None
    last_heartbeat: datetime | None = None
    links: list[dict[str, Any]] = Field(default_factory=list)

    group: Group | None = Field(default=None, exclude=True)

    @model_validator(mode="after")
    def _check_group(self) -> "Cluster":
        check_reference(self.group, self.group_id, "group")
        return self

    @property
    def type_label(self) -> str:
        """Type name as sent by the API, also for types not in ClusterType."""
        return self.type_name.value if isinstance(self.type_name, ClusterType) else self.type_name

    @property
    def is_sharded(self) -> bool:
        return self.type_name in (ClusterType.SHARDED, ClusterType.SHARDED_REPLICA_SET)

    def table_section(self) -> list[list[str]]:
        group_name = self.group.name if self.group and self.group.name else self.group_id
        return [[
            group_name,
            self.name,
            format_value(self.shard_name),
            format_value(self.replica_set_name),
            self.type_label,
            format_value(self.last_heartbeat),
            self.id,
        ]]

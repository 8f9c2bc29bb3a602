"""
Snapshot Schemas.

A snapshot is a backup of one cluster. Each part covers one replica set:
a replica-set snapshot has a single part, a sharded-cluster snapshot has one
part per shard plus the config servers.
"""

from datetime import datetime
from enum import Enum
from typing import ClassVar

from pydantic import Field, model_validator

from mms_api.schemas.base import ApiModel, ApiResource, SnapshotTimestamp, check_reference, format_value
from mms_api.schemas.cluster import Cluster
from mms_api.schemas.group import Group


class SnapshotKind(str, Enum):
    """Classification by number of parts."""

    EMPTY = "empty"
    REPLICA = "replica"
    CLUSTER = "cluster"


class SnapshotPart(ApiModel):
    """One replica set's share of a snapshot. Owned by its snapshot."""

    type_name: str
    cluster_id: str | None = None
    replica_set_name: str | None = None
    mongod_version: str | None = None
    data_size_bytes: int | None = None
    storage_size_bytes: int | None = None
    file_size_bytes: int | None = None


class Snapshot(ApiResource):
    """Backup snapshot of a cluster."""

    table_title: ClassVar[str] = "Snapshots"
    table_header: ClassVar[list[str]] = [
        "Group",
        "Cluster",
        "SnapshotId",
        "Complete",
        "Created increment",
        "Name (created date)",
        "Expires",
    ]

    group_id: str
    cluster_id: str
    created: SnapshotTimestamp
    expires: datetime | None = None
    complete: bool = False
    parts: list[SnapshotPart] = Field(default_factory=list)

    cluster: Cluster | None = Field(default=None, exclude=True)

    @model_validator(mode="after")
    def _check_cluster(self) -> "Snapshot":
        check_reference(self.cluster, self.cluster_id, "cluster")
        if self.cluster is not None:
            check_reference(self.cluster.group, self.group_id, "group")
        return self

    @property
    def group(self) -> Group | None:
        return self.cluster.group if self.cluster else None

    @property
    def kind(self) -> SnapshotKind:
        if not self.parts:
            return SnapshotKind.EMPTY
        if len(self.parts) == 1:
            return SnapshotKind.REPLICA
        return SnapshotKind.CLUSTER

    @property
    def is_cluster(self) -> bool:
        return self.kind is SnapshotKind.CLUSTER

    @property
    def is_replica(self) -> bool:
        return self.kind is SnapshotKind.REPLICA

    @property
    def replica_name(self) -> str | None:
        return self.parts[0].replica_set_name if self.is_replica else None

    @property
    def source_name(self) -> str:
        """Replica set name for single-part snapshots, cluster name otherwise."""
        if self.is_replica and self.replica_name:
            return self.replica_name
        if self.cluster is not None:
            return self.cluster.name
        return self.cluster_id

    def table_section(self) -> list[list[str]]:
        group = self.group
        rows = [[
            group.name if group and group.name else self.group_id,
            self.source_name,
            self.id,
            format_value(self.complete),
            str(self.created.increment),
            format_value(self.created.date),
            format_value(self.expires),
        ]]
        for part in self.parts:
            rows.append([
                "",
                f"  {part.type_name}",
                format_value(part.replica_set_name),
                format_value(part.mongod_version),
                f"data {format_value(part.data_size_bytes)}",
                f"storage {format_value(part.storage_size_bytes)}",
                f"files {format_value(part.file_size_bytes)}",
            ])
        return rows

# Pydantic resource models
from mms_api.schemas.alert import Alert, AlertValue
from mms_api.schemas.base import ApiResource, SnapshotTimestamp
from mms_api.schemas.cluster import Cluster, ClusterType
from mms_api.schemas.group import Group
from mms_api.schemas.host import Host, HostOptions
from mms_api.schemas.restorejob import RestoreDelivery, RestoreJob, RestoreSource, RestoreSourceKind
from mms_api.schemas.snapshot import Snapshot, SnapshotKind, SnapshotPart

__all__ = [
    "Alert",
    "AlertValue",
    "ApiResource",
    "Cluster",
    "ClusterType",
    "Group",
    "Host",
    "HostOptions",
    "RestoreDelivery",
    "RestoreJob",
    "RestoreSource",
    "RestoreSourceKind",
    "Snapshot",
    "SnapshotKind",
    "SnapshotPart",
    "SnapshotTimestamp",
]

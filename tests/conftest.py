"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

API payloads mirror what the MMS public API returns: camelCase keys,
ISO-8601 UTC timestamps and 24 character object ids.
"""

from typing import Any

import pytest

GROUP_ID = "5196d3628d022db4cbc11111"
OTHER_GROUP_ID = "5196d3628d022db4cbc22222"
HOST_ID = "56e9378f601dc49360a40949c8a6df6c"
CLUSTER_ID = "533d7d4730040be257defe88"
SNAPSHOT_ID = "53bd5fb5e4b0774946a16fad"
ALERT_ID = "53569159300495c7702ee3a3"
RESTORE_JOB_ID = "53bd7f38e4b0a7304bd2c7e1"


# =============================================================================
# API Payload Fixtures
# =============================================================================


@pytest.fixture
def group_payload() -> dict[str, Any]:
    return {
        "id": GROUP_ID,
        "name": "mms-group-1",
        "lastActiveAgent": "2014-04-03T18:18:12Z",
        "activeAgentCount": 1,
        "replicaSetCount": 3,
        "shardCount": 2,
    }


@pytest.fixture
def other_group_payload() -> dict[str, Any]:
    return {
        "id": OTHER_GROUP_ID,
        "name": "mms-group-2",
        "lastActiveAgent": "2014-04-03T11:18:12Z",
        "activeAgentCount": 1,
        "replicaSetCount": 3,
        "shardCount": 2,
    }


@pytest.fixture
def host_payload() -> dict[str, Any]:
    return {
        "id": HOST_ID,
        "groupId": GROUP_ID,
        "hostname": "localhost",
        "port": 26000,
        "deactivated": False,
        "sslEnabled": True,
        "logsEnabled": False,
        "created": "2014-04-22T19:56:50Z",
        "hostEnabled": True,
        "journalingEnabled": False,
        "alertsEnabled": True,
        "profilerEnabled": False,
    }


@pytest.fixture
def cluster_payload() -> dict[str, Any]:
    return {
        "id": CLUSTER_ID,
        "groupId": GROUP_ID,
        "typeName": "SHARDED_REPLICA_SET",
        "clusterName": "Animals",
        "lastHeartbeat": "2014-04-03T15:26:58Z",
        "links": [],
    }


@pytest.fixture
def snapshot_part_payload() -> dict[str, Any]:
    return {
        "typeName": "REPLICA_SET",
        "clusterId": CLUSTER_ID,
        "replicaSetName": "rs0",
        "mongodVersion": "2.6.3",
        "dataSizeBytes": 17344,
        "storageSizeBytes": 10502144,
        "fileSizeBytes": 67108864,
    }


@pytest.fixture
def snapshot_payload(snapshot_part_payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": SNAPSHOT_ID,
        "groupId": GROUP_ID,
        "clusterId": CLUSTER_ID,
        "created": {"date": "2014-07-09T15:24:37Z", "increment": 1},
        "expires": "2014-07-11T15:24:37Z",
        "complete": True,
        "parts": [snapshot_part_payload],
    }


@pytest.fixture
def alert_payload() -> dict[str, Any]:
    return {
        "id": ALERT_ID,
        "groupId": GROUP_ID,
        "typeName": "HOST_METRIC",
        "eventTypeName": "OUTSIDE_METRIC_THRESHOLD",
        "status": "OPEN",
        "created": "2014-04-22T15:57:13Z",
        "updated": "2014-04-22T20:14:11Z",
        "lastNotified": "2014-04-22T15:57:24Z",
        "hostId": HOST_ID,
        "hostnameAndPort": "localhost:26000",
        "metricName": "ASSERT_REGULAR",
        "currentValue": {"number": 0.0, "units": "RAW"},
    }


@pytest.fixture
def restorejob_payload() -> dict[str, Any]:
    return {
        "id": RESTORE_JOB_ID,
        "groupId": GROUP_ID,
        "clusterId": CLUSTER_ID,
        "snapshotId": SNAPSHOT_ID,
        "statusName": "FINISHED",
        "created": "2014-07-09T17:42:16Z",
        "pointInTime": False,
        "timestamp": {"date": "2014-07-09T09:24:37Z", "increment": 1},
        "delivery": {
            "methodName": "HTTP",
            "statusName": "READY",
            "url": "https://mms.mongodb.com/backup/restore/v2/pull/ae6bc7a8bfdd5a99a0c118c73845dc75/53bd7f13e4b0a7304bd2c7e0/rs0-1404927637.tar.gz",
            "expires": "2014-07-09T18:42:16Z",
        },
    }

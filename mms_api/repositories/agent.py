"""
MMS Agent.

Resource repository exposing one method per API operation. Calls the
APIClient, decodes JSON into resource models and resolves parent references.

List operations accept already-known parents (groups=..., clusters=...) and
fetch them only when absent, so a single call never queries the same parent
twice. Nothing is cached between calls.
"""

from datetime import datetime, timezone

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from mms_api.cli.client import APIClient
from mms_api.core.exceptions import ResourceError, ValidationError
from mms_api.core.logging import get_logger, log_with_source
from mms_api.repositories.base import BaseRepository
from mms_api.schemas.alert import OPEN_STATUS, Alert
from mms_api.schemas.base import format_api_datetime
from mms_api.schemas.cluster import Cluster
from mms_api.schemas.group import Group
from mms_api.schemas.host import Host, HostOptions
from mms_api.schemas.restorejob import RestoreJob, RestoreSource
from mms_api.schemas.snapshot import Snapshot

logger = get_logger(__name__)

ALL_ALERTS = "all"
ACK_NOW = "now"
ACK_FOREVER = "forever"
FOREVER = datetime(4000, 1, 1, tzinfo=timezone.utc)

_datetime_adapter = TypeAdapter(datetime)


def resolve_ack_until(postpone_until: str | datetime, now: datetime | None = None) -> datetime:
    """
    Turn an acknowledgement deadline into a datetime.

    Accepts "now", "forever" (year 4000), an ISO-8601 string or a datetime.

    Raises:
        ValidationError: If the string is not a timestamp.
    """
    if isinstance(postpone_until, datetime):
        return postpone_until
    value = postpone_until.strip().lower()
    if value == ACK_NOW:
        return now or datetime.now(timezone.utc)
    if value == ACK_FOREVER:
        return FOREVER
    try:
        return _datetime_adapter.validate_python(postpone_until.strip())
    except PydanticValidationError as e:
        raise ValidationError(
            f"Acknowledge timestamp `{postpone_until}` is not `now`, `forever` or a timestamp",
            details={"timestamp": postpone_until},
        ) from e


class Agent(BaseRepository):
    """
    Entry point for all MMS API operations.

    Usage:
        agent = Agent(APIClient(config.apiurl, config.username, config.apikey))
        for host in agent.list_hosts():
            print(host.group.name, host.address)
    """

    def __init__(self, client: APIClient) -> None:
        super().__init__(client)

    # -- API URL -------------------------------------------------------------

    def get_api_url(self) -> str:
        return self.client.base_url

    def set_api_url(self, url: str) -> str:
        """
        Point this agent's client at another API URL.

        Returns:
            The previous URL, so callers can restore it.
        """
        previous = self.client.base_url
        self.client.base_url = url
        log_with_source(logger, "agent", "debug", "API url changed", previous=previous, url=url)
        return previous

    # -- groups --------------------------------------------------------------

    def list_groups(self) -> list[Group]:
        return self.fetch_list(Group, "/groups")

    def find_group(self, group_id: str) -> Group:
        return self.fetch(Group, f"/groups/{group_id}")

    def _groups(self, groups: list[Group] | None) -> list[Group]:
        return self.list_groups() if groups is None else groups

    # -- hosts ---------------------------------------------------------------

    def list_hosts(self, groups: list[Group] | None = None) -> list[Host]:
        """
        List hosts of every group, in group order then host order.

        Args:
            groups: Already-known groups; fetched when None.
        """
        hosts: list[Host] = []
        for group in self._groups(groups):
            hosts.extend(self.fetch_list(Host, f"/groups/{group.id}/hosts", group=group))
        return hosts

    def find_host(self, group_id: str, host_id: str, group: Group | None = None) -> Host:
        group = group or self.find_group(group_id)
        return self.fetch(Host, f"/groups/{group_id}/hosts/{host_id}", group=group)

    def create_host(
        self,
        group_id: str,
        hostname: str,
        port: int,
        options: HostOptions | None = None,
    ) -> Host:
        """
        Add a host to a group.

        The returned host references a group stub carrying only the id.
        """
        body = {"hostname": hostname, "port": port}
        if options is not None:
            body.update(options.to_payload())

        payload = self.client.post(f"/groups/{group_id}/hosts", body)
        host = self.decode(Host, payload, group=Group.stub(group_id))
        log_with_source(logger, "agent", "info", "Host created", group_id=group_id, host_id=host.id)
        return host

    def update_host(self, group_id: str, host_id: str, options: HostOptions) -> Host:
        """
        Change host settings. Only the options that are set are sent.

        Raises:
            ValidationError: If no option is set.
        """
        if options.is_empty():
            raise ValidationError("No host option given to update", details={"host_id": host_id})

        payload = self.client.patch(f"/groups/{group_id}/hosts/{host_id}", options.to_payload())
        host = self.decode(Host, payload, group=Group.stub(group_id))
        log_with_source(logger, "agent", "info", "Host updated", group_id=group_id, host_id=host_id)
        return host

    def delete_host(self, group_id: str, host_id: str) -> bool:
        """Remove a host. True when the server answers with an empty payload."""
        payload = self.client.delete(f"/groups/{group_id}/hosts/{host_id}")
        deleted = payload in ({}, [], None)
        log_with_source(
            logger, "agent", "info", "Host deleted", group_id=group_id, host_id=host_id, deleted=deleted
        )
        return deleted

    # -- clusters ------------------------------------------------------------

    def list_clusters(self, groups: list[Group] | None = None) -> list[Cluster]:
        clusters: list[Cluster] = []
        for group in self._groups(groups):
            clusters.extend(self.fetch_list(Cluster, f"/groups/{group.id}/clusters", group=group))
        return clusters

    def find_cluster(self, group_id: str, cluster_id: str, group: Group | None = None) -> Cluster:
        group = group or self.find_group(group_id)
        return self.fetch(Cluster, f"/groups/{group_id}/clusters/{cluster_id}", group=group)

    def update_cluster(self, group_id: str, cluster_id: str, new_name: str) -> Cluster:
        """
        Rename a cluster.

        Raises:
            ValidationError: If the new name is empty.
        """
        if not new_name or not new_name.strip():
            raise ValidationError("Cluster name must not be empty", details={"cluster_id": cluster_id})

        payload = self.client.patch(
            f"/groups/{group_id}/clusters/{cluster_id}",
            {"clusterName": new_name},
        )
        cluster = self.decode(Cluster, payload, group=Group.stub(group_id))
        log_with_source(
            logger, "agent", "info", "Cluster renamed", cluster_id=cluster_id, name=cluster.name
        )
        return cluster

    def _clusters(self, clusters: list[Cluster] | None) -> list[Cluster]:
        return self.list_clusters() if clusters is None else clusters

    # -- alerts --------------------------------------------------------------

    def list_alerts(self, groups: list[Group] | None = None, status: str | None = None) -> list[Alert]:
        """
        List alerts of every group.

        Args:
            groups: Already-known groups; fetched when None.
            status: Optional status filter, e.g. OPEN or CLOSED.
        """
        params = {"status": status} if status else None
        alerts: list[Alert] = []
        for group in self._groups(groups):
            alerts.extend(
                self.fetch_list(Alert, f"/groups/{group.id}/alerts", params=params, group=group)
            )
        return alerts

    def find_alert(self, group_id: str, alert_id: str, group: Group | None = None) -> Alert:
        group = group or self.find_group(group_id)
        return self.fetch(Alert, f"/groups/{group_id}/alerts/{alert_id}", group=group)

    def ack_alert(
        self,
        alert_id: str,
        postpone_until: str | datetime,
        group_id: str | None,
        comment: str | None = None,
    ) -> None:
        """
        Acknowledge an alert until the given time.

        Args:
            alert_id: Alert id, or "all" for every open alert of the group.
            postpone_until: "now", "forever", an ISO-8601 string or a datetime.
            group_id: Owning group.
            comment: Acknowledgement comment stored with the alert.

        Raises:
            ValidationError: If the group id or the timestamp is missing or invalid.
        """
        if not group_id:
            raise ValidationError("Group id is required to acknowledge alerts")

        until = format_api_datetime(resolve_ack_until(postpone_until))

        if alert_id == ALL_ALERTS:
            alerts = self.list_alerts(groups=[Group.stub(group_id)], status=OPEN_STATUS)
            alert_ids = [alert.id for alert in alerts]
            comment = comment or "Triggered by CLI for all alerts."
        else:
            alert_ids = [alert_id]
            comment = comment or "Triggered by CLI."

        for current_id in alert_ids:
            self.client.patch(
                f"/groups/{group_id}/alerts/{current_id}",
                {"acknowledgedUntil": until, "acknowledgementComment": comment},
            )

        log_with_source(
            logger, "agent", "info", "Alerts acknowledged", group_id=group_id, count=len(alert_ids), until=until
        )

    # -- snapshots -----------------------------------------------------------

    def list_snapshots(self, clusters: list[Cluster] | None = None) -> list[Snapshot]:
        """
        List snapshots of every cluster.

        Args:
            clusters: Already-known clusters (with their groups); fetched when None.
        """
        snapshots: list[Snapshot] = []
        for cluster in self._clusters(clusters):
            snapshots.extend(
                self.fetch_list(
                    Snapshot,
                    f"/groups/{cluster.group_id}/clusters/{cluster.id}/snapshots",
                    cluster=cluster,
                )
            )
        return snapshots

    def find_snapshot(
        self,
        group_id: str,
        cluster_id: str,
        snapshot_id: str,
        cluster: Cluster | None = None,
    ) -> Snapshot:
        cluster = cluster or self.find_cluster(group_id, cluster_id)
        return self.fetch(
            Snapshot,
            f"/groups/{group_id}/clusters/{cluster_id}/snapshots/{snapshot_id}",
            cluster=cluster,
        )

    # -- restore jobs --------------------------------------------------------

    def list_restorejobs(self, clusters: list[Cluster] | None = None) -> list[RestoreJob]:
        jobs: list[RestoreJob] = []
        for cluster in self._clusters(clusters):
            jobs.extend(
                self.fetch_list(
                    RestoreJob,
                    f"/groups/{cluster.group_id}/clusters/{cluster.id}/restoreJobs",
                    cluster=cluster,
                    group=cluster.group,
                )
            )
        return jobs

    def create_restorejob(self, source: str, group_id: str | None, cluster_id: str | None) -> RestoreJob:
        """
        Start a restore of a cluster.

        Args:
            source: "now", an ISO-8601 timestamp (point in time) or a snapshot id.
            group_id: Owning group.
            cluster_id: Cluster to restore.

        Returns:
            The created job. For sharded clusters the server creates one job
            per shard; the first one is returned.

        Raises:
            ValidationError: If an id is missing or the source is not recognized.
        """
        if not group_id or not cluster_id:
            raise ValidationError("Group id and cluster id are required to create a restore job")

        restore_source = RestoreSource.parse(source)
        cluster = self.find_cluster(group_id, cluster_id)

        payload = self.client.post(
            f"/groups/{group_id}/clusters/{cluster_id}/restoreJobs",
            restore_source.to_payload(),
        )
        if isinstance(payload, dict) and "results" in payload:
            jobs = self.decode_list(RestoreJob, payload, cluster=cluster, group=cluster.group)
            if not jobs:
                raise ResourceError("Server created no restore job", resource=RestoreJob.__name__, payload=payload)
            job = jobs[0]
        else:
            job = self.decode(RestoreJob, payload, cluster=cluster, group=cluster.group)

        log_with_source(
            logger,
            "agent",
            "info",
            "Restore job created",
            cluster_id=cluster_id,
            restore_source=restore_source.kind.value,
            job_id=job.id,
        )
        return job

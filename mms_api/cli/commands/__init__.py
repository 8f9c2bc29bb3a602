"""
CLI Commands.

Organized by resource collection.
"""

from mms_api.cli.commands.alerts import app as alerts_app
from mms_api.cli.commands.clusters import app as clusters_app
from mms_api.cli.commands.groups import app as groups_app
from mms_api.cli.commands.hosts import app as hosts_app
from mms_api.cli.commands.restorejobs import app as restorejobs_app
from mms_api.cli.commands.snapshots import app as snapshots_app

__all__ = [
    "alerts_app",
    "clusters_app",
    "groups_app",
    "hosts_app",
    "restorejobs_app",
    "snapshots_app",
]

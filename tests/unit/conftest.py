"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests never open a network connection.
"""

from typing import Any
from unittest.mock import MagicMock

import pytest

from mms_api.cli.client import APIClient
from mms_api.repositories.agent import Agent
from mms_api.schemas.cluster import Cluster
from mms_api.schemas.group import Group


# =============================================================================
# Client Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_client() -> MagicMock:
    """
    Mock API client for unit tests.

    Usage:
        def test_list(mock_client, agent):
            mock_client.get.return_value = [...]
            agent.list_groups()
    """
    client = MagicMock(spec=APIClient)
    client.base_url = "https://mms.mongodb.com/api/public/v1.0"
    return client


@pytest.fixture
def agent(mock_client: MagicMock) -> Agent:
    """Agent wired to the mocked client."""
    return Agent(mock_client)


# =============================================================================
# Decoded Resource Fixtures
# =============================================================================


@pytest.fixture
def group(group_payload: dict[str, Any]) -> Group:
    return Group.from_api(group_payload)


@pytest.fixture
def cluster(cluster_payload: dict[str, Any], group: Group) -> Cluster:
    return Cluster.from_api(cluster_payload, group=group)

"""
Base Repository.

Base class for repositories reading API resources through an APIClient.
Handles list envelopes and decoding into resource models.
"""

from typing import Any, TypeVar

from mms_api.cli.client import APIClient
from mms_api.core.exceptions import ResourceError
from mms_api.core.logging import get_logger
from mms_api.schemas.base import ApiResource

logger = get_logger(__name__)

ResourceType = TypeVar("ResourceType", bound=ApiResource)


def unwrap_list(payload: Any, resource: str) -> list[Any]:
    """
    Extract the items of a list response.

    The API answers list requests with {"results": [...], "totalCount": n};
    a bare JSON array is accepted as well.

    Raises:
        ResourceError: If the payload is neither.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("results"), list):
        return payload["results"]
    raise ResourceError(
        f"Expected a list of {resource} objects, got: {payload}",
        resource=resource,
        payload=payload,
    )


class BaseRepository:
    """
    Base repository with common read helpers.

    Subclasses add one method per API operation:

        class GroupRepository(BaseRepository):
            def list_groups(self) -> list[Group]:
                return self.fetch_list(Group, "/groups")
    """

    def __init__(self, client: APIClient) -> None:
        self.client = client

    def decode(self, model: type[ResourceType], payload: Any, **references: Any) -> ResourceType:
        """Decode one object, attaching the given parent references."""
        return model.from_api(payload, **references)

    def decode_list(
        self,
        model: type[ResourceType],
        payload: Any,
        **references: Any,
    ) -> list[ResourceType]:
        """Decode a list response in server order."""
        items = unwrap_list(payload, model.__name__)
        return [model.from_api(item, **references) for item in items]

    def fetch(self, model: type[ResourceType], path: str, **references: Any) -> ResourceType:
        """GET one resource."""
        return self.decode(model, self.client.get(path), **references)

    def fetch_list(
        self,
        model: type[ResourceType],
        path: str,
        params: dict[str, Any] | None = None,
        **references: Any,
    ) -> list[ResourceType]:
        """GET a collection."""
        resources = self.decode_list(model, self.client.get(path, params=params), **references)
        logger.debug("Resources fetched", resource=model.__name__, path=path, count=len(resources))
        return resources

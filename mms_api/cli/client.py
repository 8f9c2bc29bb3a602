"""
HTTP Client for the MMS public API.

Synchronous client authenticating every request with HTTP digest
credentials (username + API key). Returns decoded JSON or raises one of the
transport errors from mms_api.core.exceptions.
"""

from typing import Any

import httpx

from mms_api import __version__
from mms_api.core.exceptions import ApiError, AuthError, TransportError
from mms_api.core.logging import get_logger, log_with_source

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0
AUTH_FAILURE_CODES = frozenset({401, 403})


class APIClient:
    """
    HTTP client for MMS API communication.

    Features:
    - Per-instance base URL, reconfigurable at any time
    - Digest authentication from username + API key
    - Structured logging of requests/responses
    - Typed errors for HTTP and transport failures

    Usage:
        client = APIClient("https://mms.mongodb.com/api/public/v1.0", "user", "key")
        groups = client.get("/groups")
        host = client.post("/groups/123/hosts", {"hostname": "db1", "port": 27017})
    """

    def __init__(
        self,
        base_url: str,
        username: str | None = None,
        apikey: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Full API URL including version, e.g. https://host/api/public/v1.0.
            username: MMS username.
            apikey: MMS API key.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests.
        """
        self._base_url = base_url.rstrip("/")
        self.username = username
        self.apikey = apikey
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self._transport = transport
        self._client: httpx.Client | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @base_url.setter
    def base_url(self, url: str) -> None:
        """Point this client at another API URL. The open connection is dropped."""
        self.close()
        self._base_url = url.rstrip("/")

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            auth = None
            if self.username is not None and self.apikey is not None:
                auth = httpx.DigestAuth(self.username, self.apikey)
            self._client = httpx.Client(
                base_url=self._base_url,
                auth=auth,
                timeout=self.timeout,
                headers={
                    "Accept": "application/json",
                    "User-Agent": f"mms-api/{__version__}",
                },
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
        self._client = None

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """
        Make an HTTP request to the API and decode the JSON answer.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            path: API path relative to the base URL (e.g., /groups)
            body: Optional object serialized as the JSON request body
            params: Optional query parameters

        Returns:
            Decoded JSON (object or array); {} for an empty body.

        Raises:
            AuthError: On 401/403
            ApiError: On any other non-2xx status
            TransportError: On connection failures or undecodable bodies
        """
        client = self._get_client()

        log_with_source(logger, "api", "debug", "API request", method=method, path=path)

        try:
            response = client.request(method, path, json=body, params=params)
        except httpx.RequestError as e:
            log_with_source(
                logger,
                "api",
                "error",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise TransportError(
                f"Request {method} {self._base_url}{path} failed: {e}",
                request=e.request,
            ) from e

        log_with_source(
            logger,
            "api",
            "debug",
            "API response",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        if response.status_code in AUTH_FAILURE_CODES:
            raise AuthError(response.request, response)
        if not response.is_success:
            raise ApiError(response.request, response)

        if not response.content.strip():
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                f"Response of {method} {path} is not valid JSON",
                request=response.request,
                response=response,
            ) from e

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Make a GET request."""
        return self.request("GET", path, params=params)

    def post(self, path: str, body: Any = None) -> Any:
        """Make a POST request."""
        return self.request("POST", path, body=body)

    def patch(self, path: str, body: Any = None) -> Any:
        """Make a PATCH request."""
        return self.request("PATCH", path, body=body)

    def delete(self, path: str) -> Any:
        """Make a DELETE request."""
        return self.request("DELETE", path)

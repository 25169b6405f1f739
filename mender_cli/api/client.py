"""
HTTP Client for the Mender management API.

Thin async wrapper around httpx. Requests are awaited one at a time; the
client never issues a second request before the previous one completed.

Transport-level failures (connection, TLS, DNS, timeouts) are logged and
re-raised unchanged as httpx.TransportError. HTTP-level failures are turned
into FetchError by get_json and post_checked.
"""

import ssl
from functools import lru_cache
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from mender_cli.core.config import Settings, get_app_config
from mender_cli.core.exceptions import ConfigError, FetchError
from mender_cli.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


@lru_cache
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def _ssl_context(certificate: bytes) -> ssl.SSLContext:
    """Build a verifying SSL context trusting the given PEM certificate(s)."""
    try:
        return ssl.create_default_context(cadata=certificate.decode("ascii"))
    except (ssl.SSLError, UnicodeDecodeError, ValueError) as e:
        raise ConfigError(f"Invalid PEM certificate: {e}") from e


def decode_response(response: httpx.Response, endpoint: str, type_: Any) -> Any:
    """
    Decode a JSON response body into `type_`.

    Raises:
        FetchError: If the body is not valid JSON of the expected shape.
    """
    try:
        return _adapter(type_).validate_json(response.content)
    except ValidationError as e:
        log_with_source(
            logger,
            "api",
            "error",
            "Undecodable response body",
            endpoint=endpoint,
            status_code=response.status_code,
            error=str(e),
        )
        raise FetchError(endpoint, response.status_code, response.text) from e


class MenderClient:
    """
    HTTP client for Mender management API communication.

    Features:
    - Bearer token authentication on every request
    - Certificate validation against the platform store or a supplied PEM
    - Structured logging of requests/responses
    - FetchError carrying endpoint, status and body on non-success answers

    Usage:
        client = MenderClient("https://mender.example.com", token=token)
        devices = await client.get_json(paths.INVENTORY_DEVICES, list[InventoryDevice])
        await client.close()
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        certificate: bytes | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Mender server base URL.
            token: Bearer token. Omit for the login request.
            certificate: PEM bytes used as root of trust. None uses the system store.
            timeout: Request timeout in seconds.
            transport: Alternative httpx transport (used by tests).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._token = token
        self._verify: ssl.SSLContext | bool = (
            _ssl_context(certificate) if certificate is not None else True
        )
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            headers = {"Accept": "application/json"}
            if self._token:
                headers["Authorization"] = f"Bearer {self._token}"
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=headers,
                verify=self._verify,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an HTTP request to the server.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API path (e.g., /api/management/v1/inventory/devices)
            **kwargs: Additional arguments for httpx

        Returns:
            httpx.Response

        Raises:
            httpx.TransportError: On connection failure
        """
        client = self._get_client()

        log_with_source(
            logger,
            "api",
            "debug",
            "API request",
            method=method,
            path=path,
            params=kwargs.get("params"),
        )

        try:
            response = await client.request(method, path, **kwargs)

            log_with_source(
                logger,
                "api",
                "debug",
                "API response",
                method=method,
                path=path,
                status_code=response.status_code,
            )

            return response

        except httpx.TransportError as e:
            log_with_source(
                logger,
                "api",
                "error",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a GET request."""
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a POST request."""
        return await self.request("POST", path, **kwargs)

    async def get_json(self, path: str, type_: Any, **kwargs: Any) -> Any:
        """GET `path` and decode the body into `type_`."""
        response = _require_success(await self.get(path, **kwargs), "GET", path)
        return decode_response(response, path, type_)

    async def post_checked(self, path: str, **kwargs: Any) -> httpx.Response:
        """POST to `path`, requiring a 2xx answer."""
        return _require_success(await self.post(path, **kwargs), "POST", path)


def _require_success(response: httpx.Response, method: str, path: str) -> httpx.Response:
    """
    Pass a 2xx response through.

    Raises:
        FetchError: On any non-success status.
    """
    if not response.is_success:
        log_with_source(
            logger,
            "api",
            "warning",
            "API error response",
            method=method,
            path=path,
            status_code=response.status_code,
        )
        raise FetchError(path, response.status_code, response.text)
    return response


def create_client(settings: Settings, authenticated: bool = True) -> MenderClient:
    """
    Build a MenderClient from settings.

    Args:
        settings: Connection settings from the environment.
        authenticated: Attach the bearer token from settings.
    """
    return MenderClient(
        base_url=settings.server_url,
        token=settings.token if authenticated else None,
        certificate=settings.read_certificate(),
        timeout=get_app_config().application.timeouts.http,
    )

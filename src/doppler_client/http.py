"""
HTTP transport for the Doppler API.

Endpoint clients describe each call as an ApiRequest and hand it to a
RequestExecutor, which returns the raw response body. The default executor
is built on httpx and handles:
- Base URL management
- Bearer token injection
- Mapping of error responses and transport failures to exceptions

No retries are performed; every failure is raised to the caller.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
import logging

import httpx
from pydantic import BaseModel, field_validator

from doppler_client import __version__
from doppler_client.exceptions import (
    RateLimitError,
    RequestBuildError,
    NetworkError,
    ConnectionError as ClientConnectionError,
    TimeoutError as ClientTimeoutError,
    exception_from_response,
)

logger = logging.getLogger(__name__)

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})

USER_AGENT = f"doppler-client-python/{__version__}"


class ApiRequest(BaseModel):
    """A prepared API call, relative to the configured API host."""
    method: str
    path: str
    params: Optional[Dict[str, Any]] = None
    json_data: Optional[Dict[str, Any]] = None

    @field_validator("method")
    @classmethod
    def _known_method(cls, value: str) -> str:
        method = value.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"unsupported HTTP method: {value}")
        return method

    @field_validator("path")
    @classmethod
    def _absolute_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError(f"path must start with '/': {value!r}")
        return value

    @classmethod
    def build(
        cls,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> "ApiRequest":
        """Build a request, raising RequestBuildError if it is malformed."""
        try:
            return cls(method=method, path=path, params=params, json_data=json_data)
        except ValueError as e:
            raise RequestBuildError(f"Invalid request {method} {path}: {e}") from e


class RequestExecutor(ABC):
    """Sends an ApiRequest and returns the raw response body."""

    @abstractmethod
    def execute(self, request: ApiRequest) -> bytes:
        """
        Execute the request.

        Raises:
            DopplerClientError: On error responses and transport failures
        """
        ...


class AuthProvider(ABC):
    """Abstract base class for authentication providers."""

    @abstractmethod
    def get_access_token(self) -> Optional[str]:
        """Get the current access token."""
        ...

    @abstractmethod
    def is_authenticated(self) -> bool:
        """Check if a token is available."""
        ...


class TokenAuthProvider(AuthProvider):
    """Static token authentication provider."""

    def __init__(self, access_token: Optional[str] = None):
        self._access_token = access_token

    def get_access_token(self) -> Optional[str]:
        return self._access_token

    def is_authenticated(self) -> bool:
        return bool(self._access_token)

    def set_token(self, access_token: str) -> None:
        """Replace the access token."""
        self._access_token = access_token

    def clear_token(self) -> None:
        """Forget the access token."""
        self._access_token = None


class HTTPRequestExecutor(RequestExecutor):
    """
    Synchronous httpx-backed request executor.

    The underlying httpx.Client is created on first use and reused until
    close() is called.
    """

    def __init__(
        self,
        base_url: str,
        auth_provider: Optional[AuthProvider] = None,
        timeout: float = 30.0,
        verify_tls: bool = True,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the executor.

        Args:
            base_url: API host (e.g., "https://api.doppler.com")
            auth_provider: Supplies the bearer token
            timeout: Request timeout in seconds
            verify_tls: Whether to verify server certificates
            headers: Additional headers to include in all requests
            transport: Custom httpx transport
        """
        self.base_url = base_url.rstrip("/")
        self.auth_provider = auth_provider or TokenAuthProvider()
        self.timeout = timeout
        self.verify_tls = verify_tls
        self._default_headers = headers or {}
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    def _get_client(self) -> httpx.Client:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                verify=self.verify_tls,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
        self._client = None

    def __enter__(self) -> "HTTPRequestExecutor":
        self._get_client()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _build_headers(self, has_body: bool) -> Dict[str, str]:
        """Build request headers with authentication."""
        headers = {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
            **self._default_headers,
        }
        if has_body:
            headers["Content-Type"] = "application/json"
        if self.auth_provider.is_authenticated():
            token = self.auth_provider.get_access_token()
            if token:
                headers["Authorization"] = f"Bearer {token}"
        return headers

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Convert an HTTP error response to the matching exception."""
        status_code = response.status_code

        # Doppler error bodies are {"messages": [...], "success": false}
        details: Dict[str, Any] = {}
        try:
            error_data = response.json()
        except ValueError:
            error_data = None

        if isinstance(error_data, dict):
            details = error_data
            messages = error_data.get("messages")
            if isinstance(messages, list) and messages:
                detail = "; ".join(str(m) for m in messages)
            else:
                detail = error_data.get("detail") or error_data.get("message") or str(error_data)
        else:
            detail = response.text or f"HTTP {status_code}"

        logger.warning("Doppler API error %s: %s", status_code, detail)

        if status_code == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                detail,
                status_code=status_code,
                details=details,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            )
        raise exception_from_response(status_code, detail, details)

    def execute(self, request: ApiRequest) -> bytes:
        """
        Send the request and return the response body.

        Raises:
            DopplerClientError: On HTTP error responses
            TimeoutError: On request timeout
            ConnectionError: On connection failures
            NetworkError: On any other transport failure
        """
        client = self._get_client()

        params = None
        if request.params:
            params = {k: v for k, v in request.params.items() if v is not None}

        logger.debug("%s %s params=%s", request.method, request.path, params)
        try:
            response = client.request(
                method=request.method,
                url=request.path,
                params=params,
                json=request.json_data,
                headers=self._build_headers(request.json_data is not None),
            )
        except httpx.TimeoutException as e:
            raise ClientTimeoutError(f"Request timed out: {e}") from e
        except httpx.ConnectError as e:
            raise ClientConnectionError(f"Connection failed: {e}") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Request failed: {e}") from e

        logger.debug("%s %s -> %s", request.method, request.path, response.status_code)
        if not response.is_success:
            self._handle_error_response(response)
        return response.content


"""
Main Doppler API client.

This module provides the DopplerClient class, the primary entry point for
interacting with the Doppler API. It owns the request executor and hands it
to the endpoint clients.
"""

from typing import Dict, Optional
import logging

from doppler_client.config import DEFAULT_API_HOST, DEFAULT_TIMEOUT, DopplerSettings
from doppler_client.http import HTTPRequestExecutor, RequestExecutor, TokenAuthProvider
from doppler_client.service_accounts import ServiceAccountsClient

logger = logging.getLogger(__name__)


class DopplerClient:
    """
    Main client for the Doppler API.

    Example usage:
        ```python
        with DopplerClient(token="dp.sa.xxx") as client:
            accounts = client.service_accounts.list(page=1, limit=50)
            created = client.service_accounts.create(
                ServiceAccountBodyParams(
                    name="ci-runner",
                    workplace_role=RoleByIdentifier(identifier="collaborator"),
                )
            )
        ```

    A custom executor can be passed in place of the default httpx one,
    e.g. a fake in tests. The client does not close executors it did not
    create.
    """

    def __init__(
        self,
        api_host: str = DEFAULT_API_HOST,
        *,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        verify_tls: bool = True,
        headers: Optional[Dict[str, str]] = None,
        executor: Optional[RequestExecutor] = None,
    ):
        """
        Initialize the Doppler client.

        Args:
            api_host: Base URL for the API
            token: API token sent as a bearer token
            timeout: Request timeout in seconds
            verify_tls: Whether to verify server certificates
            headers: Additional headers to include in all requests
            executor: Request executor to use instead of the httpx one
        """
        self._api_host = api_host.rstrip("/")
        self._auth_provider = TokenAuthProvider(access_token=token)
        self._owns_executor = executor is None

        if executor is None:
            executor = HTTPRequestExecutor(
                base_url=self._api_host,
                auth_provider=self._auth_provider,
                timeout=timeout,
                verify_tls=verify_tls,
                headers=headers,
            )
        self._executor = executor

        self._service_accounts: Optional[ServiceAccountsClient] = None

    @classmethod
    def from_settings(cls, settings: DopplerSettings) -> "DopplerClient":
        """Create a client from a settings object."""
        return cls(
            settings.api_host,
            token=settings.token,
            timeout=settings.timeout,
            verify_tls=settings.verify_tls,
            headers=settings.headers,
        )

    @classmethod
    def from_env(cls) -> "DopplerClient":
        """Create a client configured from DOPPLER_* environment variables."""
        return cls.from_settings(DopplerSettings.from_env())

    @property
    def api_host(self) -> str:
        """Get the base URL for the API."""
        return self._api_host

    @property
    def executor(self) -> RequestExecutor:
        return self._executor

    @property
    def is_authenticated(self) -> bool:
        """Check if a token is configured."""
        return self._auth_provider.is_authenticated()

    def set_token(self, token: str) -> None:
        """Replace the token used for subsequent requests."""
        self._auth_provider.set_token(token)

    @property
    def service_accounts(self) -> ServiceAccountsClient:
        """Service account endpoints."""
        if self._service_accounts is None:
            self._service_accounts = ServiceAccountsClient(self._executor)
        return self._service_accounts

    def close(self) -> None:
        """Close the client and release resources."""
        if self._owns_executor and isinstance(self._executor, HTTPRequestExecutor):
            self._executor.close()
        logger.debug("Doppler client closed")

    def __enter__(self) -> "DopplerClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        auth_status = "authenticated" if self.is_authenticated else "not authenticated"
        return f"DopplerClient(api_host={self._api_host!r}, {auth_status})"

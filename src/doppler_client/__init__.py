"""
Doppler Client Library.

A typed HTTP client for the Doppler workplace service account API.

Example usage:
    ```python
    from doppler_client import DopplerClient, ServiceAccountBodyParams

    with DopplerClient.from_env() as client:
        accounts = client.service_accounts.list()
        account = client.service_accounts.retrieve("ci-runner")
        client.service_accounts.update(
            "ci-runner",
            ServiceAccountBodyParams(workplace_role={"permissions": ["workplace_read"]}),
        )
        client.service_accounts.delete("ci-runner")
    ```
"""

__version__ = "0.1.0"

# Main client
from doppler_client.client import DopplerClient
from doppler_client.config import DopplerSettings

# Transport components (for custom executors and tests)
from doppler_client.http import (
    ApiRequest,
    AuthProvider,
    HTTPRequestExecutor,
    RequestExecutor,
    TokenAuthProvider,
)

# Endpoint clients and models
from doppler_client.service_accounts import ServiceAccountsClient
from doppler_client.models import (
    RoleByIdentifier,
    RoleByPermissions,
    ServiceAccount,
    ServiceAccountBodyParams,
    ServiceAccountModel,
    ServiceAccounts,
    WorkplaceRole,
    WorkplaceRoleObject,
)

# Exceptions
from doppler_client.exceptions import (
    DopplerClientError,
    RequestBuildError,
    ValidationError,
    WorkplaceRoleConflictError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ConflictError,
    RateLimitError,
    ServerError,
    ServiceUnavailableError,
    NetworkError,
    TimeoutError,
    ConnectionError,
    exception_from_response,
)

__all__ = [
    # Version
    "__version__",
    # Main client
    "DopplerClient",
    "DopplerSettings",
    # Transport
    "ApiRequest",
    "AuthProvider",
    "HTTPRequestExecutor",
    "RequestExecutor",
    "TokenAuthProvider",
    # Endpoints and models
    "ServiceAccountsClient",
    "RoleByIdentifier",
    "RoleByPermissions",
    "ServiceAccount",
    "ServiceAccountBodyParams",
    "ServiceAccountModel",
    "ServiceAccounts",
    "WorkplaceRole",
    "WorkplaceRoleObject",
    # Exceptions
    "DopplerClientError",
    "RequestBuildError",
    "ValidationError",
    "WorkplaceRoleConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "ServerError",
    "ServiceUnavailableError",
    "NetworkError",
    "TimeoutError",
    "ConnectionError",
    "exception_from_response",
]

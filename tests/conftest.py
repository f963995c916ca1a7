"""Pytest configuration and fixtures for doppler-client tests."""

import json
from typing import Any, List, Optional

import pytest

from doppler_client.http import ApiRequest, RequestExecutor


# ============================================================================
# Fake executor
# ============================================================================


class FakeExecutor(RequestExecutor):
    """Records requests and replies with a canned body or error."""

    def __init__(self, body: bytes = b"", error: Optional[Exception] = None):
        self.body = body
        self.error = error
        self.requests: List[ApiRequest] = []

    def reply_json(self, data: Any) -> None:
        self.body = json.dumps(data).encode()

    def execute(self, request: ApiRequest) -> bytes:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.body

    @property
    def last_request(self) -> ApiRequest:
        assert self.requests, "no request was executed"
        return self.requests[-1]


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def api_host():
    """Default API host for testing."""
    return "https://api.doppler.test"


@pytest.fixture
def executor():
    return FakeExecutor()


@pytest.fixture
def make_executor():
    """Factory for executors with a custom body or error."""
    return FakeExecutor


@pytest.fixture
def service_account_data():
    """A service account as the API returns it."""
    return {
        "name": "ci-runner",
        "slug": "7a1c2f0e-ci-runner",
        "created_at": "2024-03-01T12:00:00.000Z",
        "workplace_role": {
            "identifier": "collaborator",
            "name": "Collaborator",
            "permissions": ["workplace_read"],
            "is_custom_role": False,
            "is_inline_role": False,
        },
    }


@pytest.fixture
def service_account_response(service_account_data):
    return {"service_account": service_account_data, "success": True}


@pytest.fixture
def service_accounts_response(service_account_data):
    return {
        "service_accounts": [
            service_account_data,
            {"name": "deployer", "slug": "deployer-slug"},
        ],
        "success": True,
    }


@pytest.fixture
def error_response():
    """Doppler error body."""
    return {"messages": ["Could not find requested service account"], "success": False}

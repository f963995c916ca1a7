"""Tests for the exception hierarchy."""

import pytest

from doppler_client.exceptions import (
    AuthenticationError,
    ConflictError,
    ConnectionError as ClientConnectionError,
    DopplerClientError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RequestBuildError,
    ServerError,
    ServiceUnavailableError,
    TimeoutError as ClientTimeoutError,
    ValidationError,
    WorkplaceRoleConflictError,
    exception_from_response,
)


class TestDopplerClientError:

    def test_str_with_status(self):
        error = DopplerClientError("Invalid token", status_code=401)
        assert str(error) == "Invalid token (HTTP 401)"

    def test_str_without_status(self):
        assert str(DopplerClientError("boom")) == "boom"

    def test_repr(self):
        error = NotFoundError("gone")
        assert repr(error) == "NotFoundError(message='gone', status_code=404)"

    def test_details_default(self):
        assert DopplerClientError("x").details == {}


class TestHierarchy:

    @pytest.mark.parametrize(
        "exception_class,parent",
        [
            (WorkplaceRoleConflictError, ValidationError),
            (RequestBuildError, DopplerClientError),
            (ServiceUnavailableError, ServerError),
            (ClientTimeoutError, NetworkError),
            (ClientConnectionError, NetworkError),
            (RateLimitError, DopplerClientError),
        ],
    )
    def test_subclasses(self, exception_class, parent):
        assert issubclass(exception_class, parent)

    def test_workplace_role_conflict_message(self):
        error = WorkplaceRoleConflictError()
        assert error.message == "you may provide an identifier OR permissions, but not both"
        assert error.status_code is None

    def test_network_errors_have_no_status(self):
        assert ClientTimeoutError().status_code is None


class TestExceptionFromResponse:

    @pytest.mark.parametrize(
        "status_code,exception_class",
        [
            (400, ValidationError),
            (401, AuthenticationError),
            (404, NotFoundError),
            (409, ConflictError),
            (429, RateLimitError),
            (503, ServiceUnavailableError),
            (599, ServerError),
            (422, DopplerClientError),
        ],
    )
    def test_mapping(self, status_code, exception_class):
        error = exception_from_response(status_code, "msg", {"success": False})
        assert type(error) is exception_class
        assert error.status_code == status_code
        assert error.details == {"success": False}

"""Tests for service account models."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from doppler_client.exceptions import ValidationError, WorkplaceRoleConflictError
from doppler_client.models import (
    RoleByIdentifier,
    RoleByPermissions,
    ServiceAccountBodyParams,
    ServiceAccountModel,
    ServiceAccounts,
    WorkplaceRole,
)


class TestServiceAccountBodyParams:
    """Tests for request body validation and serialization."""

    def test_identifier_dict_becomes_variant(self):
        params = ServiceAccountBodyParams(workplace_role={"identifier": "viewer"})
        assert isinstance(params.workplace_role, RoleByIdentifier)

    def test_permissions_dict_becomes_variant(self):
        params = ServiceAccountBodyParams(workplace_role={"permissions": ["workplace_read"]})
        assert isinstance(params.workplace_role, RoleByPermissions)

    def test_both_set_is_rejected(self):
        with pytest.raises(WorkplaceRoleConflictError) as exc_info:
            ServiceAccountBodyParams.model_validate(
                {"workplace_role": {"identifier": "viewer", "permissions": ["workplace_read"]}}
            )
        assert isinstance(exc_info.value, ValidationError)
        assert exc_info.value.status_code is None

    def test_empty_identifier_with_permissions_is_allowed(self):
        params = ServiceAccountBodyParams(
            workplace_role={"identifier": "", "permissions": ["workplace_read"]}
        )
        assert params.to_payload() == {"workplace_role": {"permissions": ["workplace_read"]}}

    def test_identifier_with_null_permissions_is_allowed(self):
        params = ServiceAccountBodyParams(workplace_role={"identifier": "viewer", "permissions": None})
        assert params.to_payload() == {"workplace_role": {"identifier": "viewer"}}

    def test_decoded_role_with_identifier_and_permissions_is_rejected(self):
        role = WorkplaceRole(identifier="collaborator", name="Collaborator", permissions=["workplace_read"])

        with pytest.raises(WorkplaceRoleConflictError):
            ServiceAccountBodyParams(name="copy", workplace_role=role)

    def test_decoded_role_with_identifier_only(self):
        role = WorkplaceRole(identifier="viewer", name="Viewer", is_custom_role=False)

        params = ServiceAccountBodyParams(workplace_role=role)

        assert params.to_payload() == {"workplace_role": {"identifier": "viewer"}}

    def test_unknown_role_key_is_rejected(self):
        with pytest.raises(PydanticValidationError):
            ServiceAccountBodyParams(workplace_role={"role": "viewer"})

    def test_empty_values_are_omitted(self):
        assert ServiceAccountBodyParams().to_payload() == {}
        assert ServiceAccountBodyParams(name="").to_payload() == {}
        assert ServiceAccountBodyParams(workplace_role={}).to_payload() == {}

    def test_empty_permissions_are_omitted(self):
        params = ServiceAccountBodyParams(name="ci", workplace_role=RoleByPermissions(permissions=[]))
        assert params.to_payload() == {"name": "ci"}


class TestEnvelopes:
    """Tests for response decoding."""

    def test_null_service_accounts(self):
        result = ServiceAccounts.model_validate_json('{"service_accounts": null, "success": true}')
        assert result.service_accounts == []

    def test_null_service_account(self):
        result = ServiceAccountModel.model_validate_json('{"service_account": null, "success": true}')
        assert result.success is True
        assert result.service_account.name is None

    def test_missing_fields_use_defaults(self):
        result = ServiceAccountModel.model_validate_json("{}")
        assert result.success is False
        assert result.service_account.slug is None

    def test_unknown_fields_are_ignored(self):
        result = ServiceAccountModel.model_validate_json(
            '{"service_account": {"name": "a", "slug": "s", "api_tokens": []}, "success": true}'
        )
        assert result.service_account.name == "a"

"""
Service account DTOs for the Doppler workplace API.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from doppler_client.exceptions import WorkplaceRoleConflictError


# =============================================================================
# Response models
# =============================================================================


class WorkplaceRole(BaseModel):
    """Workplace role as returned by the API."""
    identifier: Optional[str] = Field(None, description="Role identifier (e.g. 'admin', 'collaborator')")
    name: Optional[str] = None
    permissions: Optional[List[str]] = None
    is_custom_role: Optional[bool] = None
    is_inline_role: Optional[bool] = None
    created_at: Optional[str] = None


class ServiceAccount(BaseModel):
    """A non-human workplace identity."""
    name: Optional[str] = None
    slug: Optional[str] = Field(None, description="Unique identifier within the workplace")
    created_at: Optional[str] = Field(None, description="ISO-8601 creation timestamp")
    workplace_role: Optional[WorkplaceRole] = None


class ServiceAccounts(BaseModel):
    """List envelope returned by the list endpoint."""
    service_accounts: List[ServiceAccount] = Field(default_factory=list)
    success: bool = False

    @field_validator("service_accounts", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class ServiceAccountModel(BaseModel):
    """Single-account envelope returned by retrieve, create and update."""
    service_account: ServiceAccount = Field(default_factory=ServiceAccount)
    success: bool = False

    @field_validator("service_account", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return ServiceAccount() if value is None else value


# =============================================================================
# Request models
# =============================================================================


class RoleByIdentifier(BaseModel):
    """Reference an existing workplace role by its identifier."""
    model_config = ConfigDict(extra="forbid")

    identifier: str = Field(..., min_length=1)


class RoleByPermissions(BaseModel):
    """Grant a list of workplace permissions directly."""
    model_config = ConfigDict(extra="forbid")

    permissions: List[str]


WorkplaceRoleObject = Union[RoleByIdentifier, RoleByPermissions]


class ServiceAccountBodyParams(BaseModel):
    """
    Body of create and update requests.

    ``workplace_role`` takes either a role identifier or a permission list.
    Raw dicts (and WorkplaceRole objects decoded from a response) carrying
    both a non-empty ``identifier`` and a non-null ``permissions`` are
    rejected with WorkplaceRoleConflictError.
    """
    name: Optional[str] = None
    workplace_role: Optional[WorkplaceRoleObject] = None

    @model_validator(mode="before")
    @classmethod
    def _split_workplace_role(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        role = data.get("workplace_role")
        if isinstance(role, WorkplaceRole):
            role = role.model_dump(include={"identifier", "permissions"})
        if not isinstance(role, dict):
            return data

        identifier = role.get("identifier")
        permissions = role.get("permissions")
        if identifier and permissions is not None:
            raise WorkplaceRoleConflictError(details={"workplace_role": role})

        # Unknown keys are kept so the variant models reject them.
        cleaned = {k: v for k, v in role.items() if k not in ("identifier", "permissions")}
        if identifier:
            cleaned["identifier"] = identifier
        if permissions is not None:
            cleaned["permissions"] = permissions
        return {**data, "workplace_role": cleaned or None}

    def to_payload(self) -> Dict[str, Any]:
        """Dump to a JSON-ready dict with empty values omitted."""
        return _omit_empty(self.model_dump(mode="json", exclude_none=True))


def _omit_empty(value: Any) -> Any:
    if isinstance(value, dict):
        pruned = {k: _omit_empty(v) for k, v in value.items()}
        return {k: v for k, v in pruned.items() if v not in (None, "", [], {})}
    return value

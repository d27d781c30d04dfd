"""Role request and response schemas."""

from enum import StrEnum
from typing import List, Optional

from pydantic import Field, field_validator

from akamai_iam.schemas.common import IAMModel, NonBlankStr, PositiveID


class RoleType(StrEnum):
    STANDARD = "standard"
    CUSTOM = "custom"


class GrantedRoleID(IAMModel):
    granted_role_id: PositiveID = Field(..., alias="grantedRoleId")


class RoleAction(IAMModel):
    edit: bool = False
    delete: bool = False


class RoleGrantedRole(IAMModel):
    """A role granted by another role."""

    granted_role_id: int = Field(0, alias="grantedRoleId")
    granted_role_name: str = Field("", alias="grantedRoleName")
    granted_role_description: str = Field("", alias="grantedRoleDescription")


class RoleUser(IAMModel):
    identity_id: str = Field("", alias="uiIdentityId")
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    account_id: str = Field("", alias="accountId")
    email: str = ""
    last_login_date: str = Field("", alias="lastLoginDate")


class Role(IAMModel):
    # Dates are kept as the strings the API returns.
    role_id: int = Field(0, alias="roleId")
    role_name: str = Field("", alias="roleName")
    role_description: str = Field("", alias="roleDescription")
    type: Optional[RoleType] = None
    created_date: str = Field("", alias="createdDate")
    created_by: str = Field("", alias="createdBy")
    modified_date: str = Field("", alias="modifiedDate")
    modified_by: str = Field("", alias="modifiedBy")
    actions: Optional[RoleAction] = None
    granted_roles: List[RoleGrantedRole] = Field(
        default_factory=list, alias="grantedRoles"
    )
    users: List[RoleUser] = Field(default_factory=list)


class RoleRequestBody(IAMModel):
    """Fields of a role that can be changed; unset ones are not sent."""

    omit_if_none = frozenset({"role_name", "role_description", "granted_roles"})

    role_name: Optional[str] = Field(None, alias="roleName")
    role_description: Optional[str] = Field(None, alias="roleDescription")
    granted_roles: Optional[List[GrantedRoleID]] = Field(None, alias="grantedRoles")

    @field_validator("role_name", "role_description")
    @classmethod
    def blank_is_absent(cls, v: Optional[str]) -> Optional[str]:
        return v or None


class CreateRoleRequest(RoleRequestBody):
    """Body of the create role call."""

    role_name: NonBlankStr = Field(..., alias="roleName")
    granted_roles: List[GrantedRoleID] = Field(
        ..., min_length=1, alias="grantedRoles"
    )


class GetRoleRequest(IAMModel):
    role_id: PositiveID
    actions: bool = False
    granted_roles: bool = False
    users: bool = False


class UpdateRoleRequest(IAMModel):
    role_id: PositiveID
    body: RoleRequestBody = Field(default_factory=RoleRequestBody)


class DeleteRoleRequest(IAMModel):
    role_id: PositiveID


class ListRolesRequest(IAMModel):
    group_id: Optional[int] = None
    actions: bool = False
    ignore_context: bool = False
    users: bool = False


__all__ = [
    "CreateRoleRequest",
    "DeleteRoleRequest",
    "GetRoleRequest",
    "GrantedRoleID",
    "ListRolesRequest",
    "Role",
    "RoleAction",
    "RoleGrantedRole",
    "RoleRequestBody",
    "RoleType",
    "RoleUser",
    "UpdateRoleRequest",
]

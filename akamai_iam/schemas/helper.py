"""Schemas of the user-centric helper endpoints used when building API clients."""

from typing import List, Optional

from pydantic import Field, model_validator

from akamai_iam.schemas.common import AccessLevel, ClientType, IAMModel, NonBlankStr


class AllowedCPCodesGroup(IAMModel):
    omit_if_none = frozenset(
        {
            "group_id",
            "role_id",
            "group_name",
            "is_blocked",
            "parent_group_id",
            "role_description",
            "role_name",
            "sub_groups",
        }
    )

    group_id: Optional[int] = Field(None, alias="groupId")
    role_id: Optional[int] = Field(None, alias="roleId")
    group_name: Optional[str] = Field(None, alias="groupName")
    is_blocked: Optional[bool] = Field(None, alias="isBlocked")
    parent_group_id: Optional[int] = Field(None, alias="parentGroupId")
    role_description: Optional[str] = Field(None, alias="roleDescription")
    role_name: Optional[str] = Field(None, alias="roleName")
    sub_groups: Optional[List["AllowedCPCodesGroup"]] = Field(None, alias="subGroups")


class ListAllowedCPCodesRequestBody(IAMModel):
    client_type: ClientType = Field(..., alias="clientType")
    groups: List[AllowedCPCodesGroup] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_groups(self) -> "ListAllowedCPCodesRequestBody":
        if self.client_type == ClientType.SERVICE_ACCOUNT and not self.groups:
            raise ValueError("groups: cannot be blank for SERVICE_ACCOUNT clients")
        return self


class ListAllowedCPCodesRequest(IAMModel):
    user_name: NonBlankStr
    body: ListAllowedCPCodesRequestBody


class AllowedCPCode(IAMModel):
    name: str = ""
    value: int = 0


class AuthorizedUser(IAMModel):
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    username: str = ""
    email: str = ""
    identity_id: str = Field("", alias="uiIdentityId")


class ListAllowedAPIsRequest(IAMModel):
    user_name: NonBlankStr
    client_type: Optional[ClientType] = None
    allow_account_switch: bool = False


class AllowedAPI(IAMModel):
    access_levels: List[AccessLevel] = Field(default_factory=list, alias="accessLevels")
    api_id: int = Field(0, alias="apiId")
    api_name: str = Field("", alias="apiName")
    description: str = ""
    documentation_url: str = Field("", alias="documentationUrl")
    endpoint: str = ""
    has_access: bool = Field(False, alias="hasAccess")
    service_provider_id: int = Field(0, alias="serviceProviderId")


class ListAccessibleGroupsRequest(IAMModel):
    user_name: NonBlankStr


class AccessibleSubGroup(IAMModel):
    group_id: int = Field(0, alias="groupId")
    group_name: str = Field("", alias="groupName")
    parent_group_id: int = Field(0, alias="parentGroupId")
    sub_groups: List["AccessibleSubGroup"] = Field(default_factory=list, alias="subGroups")


class AccessibleGroup(IAMModel):
    """Group the user can hand out to an API client, with the user's role in it."""

    group_id: int = Field(0, alias="groupId")
    role_id: int = Field(0, alias="roleId")
    group_name: str = Field("", alias="groupName")
    role_name: str = Field("", alias="roleName")
    is_blocked: bool = Field(False, alias="isBlocked")
    role_description: str = Field("", alias="roleDescription")
    sub_groups: List[AccessibleSubGroup] = Field(default_factory=list, alias="subGroups")


__all__ = [
    "AccessibleGroup",
    "AccessibleSubGroup",
    "AllowedAPI",
    "AllowedCPCode",
    "AllowedCPCodesGroup",
    "AuthorizedUser",
    "ListAccessibleGroupsRequest",
    "ListAllowedAPIsRequest",
    "ListAllowedCPCodesRequest",
    "ListAllowedCPCodesRequestBody",
]

"""API client request and response schemas."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator, model_validator

from akamai_iam.schemas.common import (
    AccessLevel,
    ClientType,
    CredentialStatus,
    IAMModel,
    NonBlankStr,
    PositiveID,
)
from akamai_iam.schemas.credentials import CredentialActions


class API(IAMModel):
    """One API an API client can reach."""

    access_level: Optional[AccessLevel] = Field(None, alias="accessLevel")
    api_id: int = Field(0, alias="apiId")
    api_name: str = Field("", alias="apiName")
    description: str = ""
    documentation_url: str = Field("", alias="documentationUrl")
    end_point: str = Field("", alias="endPoint")


class APIAccess(IAMModel):
    all_accessible_apis: bool = Field(False, alias="allAccessibleApis")
    apis: List[API] = Field(default_factory=list)


class ClientGroup(IAMModel):
    """Group and role an API client is granted."""

    group_id: int = Field(0, alias="groupId")
    group_name: str = Field("", alias="groupName")
    is_blocked: bool = Field(False, alias="isBlocked")
    parent_group_id: int = Field(0, alias="parentGroupId")
    role_description: str = Field("", alias="roleDescription")
    role_id: int = Field(0, alias="roleId")
    role_name: str = Field("", alias="roleName")
    subgroups: List["ClientGroup"] = Field(default_factory=list)


class GroupAccess(IAMModel):
    clone_authorized_user_groups: bool = Field(
        False, alias="cloneAuthorizedUserGroups"
    )
    groups: List[ClientGroup] = Field(default_factory=list)


class IPACL(IAMModel):
    """IP access control list of an API client."""

    cidr: List[str] = Field(default_factory=list)
    enable: bool = False


class CPCodeAccess(IAMModel):
    all_current_and_new_cpcodes: bool = Field(False, alias="allCurrentAndNewCpcodes")
    cpcodes: Optional[List[int]] = None


class PurgeOptions(IAMModel):
    can_purge_by_cache_tag: bool = Field(False, alias="canPurgeByCacheTag")
    can_purge_by_cpcode: bool = Field(False, alias="canPurgeByCpcode")
    cpcode_access: CPCodeAccess = Field(
        default_factory=CPCodeAccess, alias="cpcodeAccess"
    )


# Request-side variants. They add the rules the API enforces on input and
# are never used to decode responses.


class RequestedAPI(API):
    access_level: AccessLevel = Field(..., alias="accessLevel")
    api_id: PositiveID = Field(..., alias="apiId")


class RequestedAPIAccess(APIAccess):
    apis: List[RequestedAPI] = Field(default_factory=list)

    @model_validator(mode="after")
    def require_apis(self) -> "RequestedAPIAccess":
        if not self.all_accessible_apis and not self.apis:
            raise ValueError("apis cannot be blank unless allAccessibleApis is set")
        return self


class RequestedClientGroup(ClientGroup):
    group_id: PositiveID = Field(..., alias="groupId")
    role_id: PositiveID = Field(..., alias="roleId")


class RequestedGroupAccess(GroupAccess):
    groups: List[RequestedClientGroup] = Field(default_factory=list)

    @model_validator(mode="after")
    def require_groups(self) -> "RequestedGroupAccess":
        if not self.clone_authorized_user_groups and not self.groups:
            raise ValueError(
                "groups cannot be blank unless cloneAuthorizedUserGroups is set"
            )
        return self


class RequestedCPCodeAccess(CPCodeAccess):
    @model_validator(mode="after")
    def require_cpcodes(self) -> "RequestedCPCodeAccess":
        if not self.all_current_and_new_cpcodes and self.cpcodes is None:
            raise ValueError(
                "cpcodes is required unless allCurrentAndNewCpcodes is set"
            )
        return self


class RequestedPurgeOptions(PurgeOptions):
    cpcode_access: RequestedCPCodeAccess = Field(..., alias="cpcodeAccess")


class _APIClientBody(IAMModel):
    omit_if_none = frozenset({"ip_acl", "purge_options"})

    allow_account_switch: bool = Field(False, alias="allowAccountSwitch")
    api_access: RequestedAPIAccess = Field(..., alias="apiAccess")
    authorized_users: List[NonBlankStr] = Field(
        ..., min_length=1, alias="authorizedUsers"
    )
    can_auto_create_credential: bool = Field(False, alias="canAutoCreateCredential")
    client_description: str = Field("", alias="clientDescription")
    client_name: str = Field("", alias="clientName")
    client_type: ClientType = Field(..., alias="clientType")
    group_access: RequestedGroupAccess = Field(..., alias="groupAccess")
    ip_acl: Optional[IPACL] = Field(None, alias="ipAcl")
    notification_emails: List[str] = Field(
        default_factory=list, alias="notificationEmails"
    )
    purge_options: Optional[RequestedPurgeOptions] = Field(None, alias="purgeOptions")

    @field_validator("client_type")
    @classmethod
    def client_type_allowed(cls, v: ClientType) -> ClientType:
        if v not in (ClientType.CLIENT, ClientType.USER_CLIENT):
            raise ValueError(
                f"value '{v}' is invalid. Must be one of: 'CLIENT' or 'USER_CLIENT'"
            )
        return v


class CreateAPIClientRequest(_APIClientBody):
    """Body of the create API client call."""

    create_credential: bool = Field(False, alias="createCredential")


class UpdateAPIClientBody(_APIClientBody):
    """Body of the update API client call."""


class UpdateAPIClientRequest(IAMModel):
    client_id: Optional[str] = None
    body: UpdateAPIClientBody


class LockAPIClientRequest(IAMModel):
    client_id: Optional[str] = None


class UnlockAPIClientRequest(IAMModel):
    client_id: NonBlankStr


class ListAPIClientsRequest(IAMModel):
    actions: bool = False


class GetAPIClientRequest(IAMModel):
    client_id: Optional[str] = None
    actions: bool = False
    api_access: bool = False
    credentials: bool = False
    group_access: bool = False
    ip_acl: bool = False


class DeleteAPIClientRequest(IAMModel):
    client_id: Optional[str] = None


# Responses


class APIClient(IAMModel):
    """API client returned by the lock and unlock endpoints."""

    access_token: str = Field("", alias="accessToken")
    active_credential_count: int = Field(0, alias="activeCredentialCount")
    allow_account_switch: bool = Field(False, alias="allowAccountSwitch")
    authorized_users: List[str] = Field(default_factory=list, alias="authorizedUsers")
    can_auto_create_credential: bool = Field(False, alias="canAutoCreateCredential")
    client_description: str = Field("", alias="clientDescription")
    client_id: str = Field("", alias="clientId")
    client_name: str = Field("", alias="clientName")
    client_type: str = Field("", alias="clientType")
    created_by: str = Field("", alias="createdBy")
    created_date: Optional[datetime] = Field(None, alias="createdDate")
    is_locked: bool = Field(False, alias="isLocked")
    notification_emails: List[str] = Field(
        default_factory=list, alias="notificationEmails"
    )
    service_consumer_token: str = Field("", alias="serviceConsumerToken")


class ListAPIClientsActions(IAMModel):
    delete: bool = False
    deactivate_all: bool = Field(False, alias="deactivateAll")
    edit: bool = False
    lock: bool = False
    transfer: bool = False
    unlock: bool = False


class APIClientActions(ListAPIClientsActions):
    edit_apis: bool = Field(False, alias="editApis")
    edit_auth: bool = Field(False, alias="editAuth")
    edit_groups: bool = Field(False, alias="editGroups")
    edit_ip_acl: bool = Field(False, alias="editIpAcl")
    edit_switch_account: bool = Field(False, alias="editSwitchAccount")


class ListAPIClientsItem(APIClient):
    actions: Optional[ListAPIClientsActions] = None


class APIClientCredential(IAMModel):
    actions: CredentialActions = Field(default_factory=CredentialActions)
    client_token: str = Field("", alias="clientToken")
    created_on: Optional[datetime] = Field(None, alias="createdOn")
    credential_id: int = Field(0, alias="credentialId")
    description: str = ""
    expires_on: Optional[datetime] = Field(None, alias="expiresOn")
    status: Optional[CredentialStatus] = None


class CreateAPIClientCredential(APIClientCredential):
    client_secret: str = Field("", alias="clientSecret")


class GetAPIClientResponse(APIClient):
    """Full API client details."""

    actions: Optional[APIClientActions] = None
    api_access: APIAccess = Field(default_factory=APIAccess, alias="apiAccess")
    base_url: str = Field("", alias="baseURL")
    credentials: List[APIClientCredential] = Field(default_factory=list)
    group_access: GroupAccess = Field(default_factory=GroupAccess, alias="groupAccess")
    ip_acl: IPACL = Field(default_factory=IPACL, alias="ipAcl")
    purge_options: PurgeOptions = Field(
        default_factory=PurgeOptions, alias="purgeOptions"
    )
    service_provider_id: int = Field(0, alias="serviceProviderId")


class CreateAPIClientResponse(GetAPIClientResponse):
    """API client as created; credentials include their secrets."""

    credentials: List[CreateAPIClientCredential] = Field(default_factory=list)


class UpdateAPIClientResponse(GetAPIClientResponse):
    pass


__all__ = [
    "API",
    "APIAccess",
    "APIClient",
    "APIClientActions",
    "APIClientCredential",
    "ClientGroup",
    "CPCodeAccess",
    "CreateAPIClientCredential",
    "CreateAPIClientRequest",
    "CreateAPIClientResponse",
    "DeleteAPIClientRequest",
    "GetAPIClientRequest",
    "GetAPIClientResponse",
    "GroupAccess",
    "IPACL",
    "ListAPIClientsActions",
    "ListAPIClientsItem",
    "ListAPIClientsRequest",
    "LockAPIClientRequest",
    "PurgeOptions",
    "RequestedAPI",
    "RequestedAPIAccess",
    "RequestedClientGroup",
    "RequestedCPCodeAccess",
    "RequestedGroupAccess",
    "RequestedPurgeOptions",
    "UnlockAPIClientRequest",
    "UpdateAPIClientBody",
    "UpdateAPIClientRequest",
    "UpdateAPIClientResponse",
]

"""
Schemas Package

Pydantic request and response models for every IAM resource.
"""

# ruff: noqa: F401  # All imports are re-exported via __all__

from .common import (
    AccessLevel,
    ClientType,
    CredentialStatus,
    IAMModel,
    NonBlankStr,
    PositiveID,
)
from .api_clients import (
    API,
    APIAccess,
    APIClient,
    APIClientActions,
    APIClientCredential,
    ClientGroup,
    CPCodeAccess,
    CreateAPIClientCredential,
    CreateAPIClientRequest,
    CreateAPIClientResponse,
    DeleteAPIClientRequest,
    GetAPIClientRequest,
    GetAPIClientResponse,
    GroupAccess,
    IPACL,
    ListAPIClientsActions,
    ListAPIClientsItem,
    ListAPIClientsRequest,
    LockAPIClientRequest,
    PurgeOptions,
    RequestedAPI,
    RequestedAPIAccess,
    RequestedClientGroup,
    RequestedCPCodeAccess,
    RequestedGroupAccess,
    RequestedPurgeOptions,
    UnlockAPIClientRequest,
    UpdateAPIClientBody,
    UpdateAPIClientRequest,
    UpdateAPIClientResponse,
)
from .credentials import (
    CreateCredentialRequest,
    CreateCredentialResponse,
    Credential,
    CredentialActions,
    DeactivateCredentialRequest,
    DeactivateCredentialsRequest,
    DeleteCredentialRequest,
    GetCredentialRequest,
    ListCredentialsRequest,
    UpdateCredentialRequest,
    UpdateCredentialRequestBody,
    UpdateCredentialResponse,
    format_expiry,
)
from .cidr import (
    CIDR,
    CIDRActions,
    CIDRBlock,
    CreateCIDRBlockRequest,
    DeleteCIDRBlockRequest,
    GetCIDRBlockRequest,
    IPAllowlistStatus,
    ListCIDRBlocksRequest,
    UpdateCIDRBlockRequest,
    UpdateCIDRBlockRequestBody,
    ValidateCIDRBlockRequest,
    validate_cidr,
)
from .groups import (
    AffectedUserType,
    CreateGroupRequest,
    GetGroupRequest,
    Group,
    GroupActions,
    GroupUser,
    ListAffectedUsersRequest,
    ListGroupsRequest,
    MoveGroupRequest,
    RemoveGroupRequest,
    UpdateGroupNameRequest,
)
from .roles import (
    CreateRoleRequest,
    DeleteRoleRequest,
    GetRoleRequest,
    GrantedRoleID,
    ListRolesRequest,
    Role,
    RoleAction,
    RoleGrantedRole,
    RoleRequestBody,
    RoleType,
    RoleUser,
    UpdateRoleRequest,
)
from .properties import (
    BlockUserItem,
    BlockUsersRequest,
    GetPropertyRequest,
    GetPropertyResponse,
    ListBlockedPropertiesRequest,
    ListPropertiesRequest,
    ListUsersForPropertyRequest,
    MapPropertyIDToNameRequest,
    MapPropertyNameToIDRequest,
    MovePropertyRequest,
    MovePropertyRequestBody,
    Property,
    PropertyActions,
    PropertyUser,
    PropertyUserType,
    UpdateBlockedPropertiesRequest,
)
from .users import (
    AuthGrant,
    AuthGrantRequest,
    CreateUserRequest,
    GetUserRequest,
    ListUsersRequest,
    LockUserRequest,
    MFAValue,
    NewUserInfo,
    RemoveUserRequest,
    ResetMFARequest,
    ResetUserPasswordRequest,
    ResetUserPasswordResponse,
    SetUserPasswordRequest,
    TFAActionType,
    UnlockUserRequest,
    UpdateMFARequest,
    UpdateTFARequest,
    UpdateUserAuthGrantsRequest,
    UpdateUserInfoRequest,
    UpdateUserNotificationsRequest,
    User,
    UserActions,
    UserBasicInfo,
    UserInfoUpdate,
    UserListItem,
    UserNotificationOptions,
    UserNotifications,
)
from .support import (
    AccountSwitchKey,
    ListAccountSwitchKeysRequest,
    ListStatesRequest,
    PasswordPolicy,
    TimeoutPolicy,
    Timezone,
)
from .helper import (
    AccessibleGroup,
    AccessibleSubGroup,
    AllowedAPI,
    AllowedCPCode,
    AllowedCPCodesGroup,
    AuthorizedUser,
    ListAccessibleGroupsRequest,
    ListAllowedAPIsRequest,
    ListAllowedCPCodesRequest,
    ListAllowedCPCodesRequestBody,
)

__all__ = [
    "AccessibleGroup",
    "AccessibleSubGroup",
    "AccessLevel",
    "AccountSwitchKey",
    "AffectedUserType",
    "AllowedAPI",
    "AllowedCPCode",
    "AllowedCPCodesGroup",
    "API",
    "APIAccess",
    "APIClient",
    "APIClientActions",
    "APIClientCredential",
    "AuthGrant",
    "AuthGrantRequest",
    "AuthorizedUser",
    "BlockUserItem",
    "BlockUsersRequest",
    "CIDR",
    "CIDRActions",
    "CIDRBlock",
    "ClientGroup",
    "ClientType",
    "CPCodeAccess",
    "CreateAPIClientCredential",
    "CreateAPIClientRequest",
    "CreateAPIClientResponse",
    "CreateCIDRBlockRequest",
    "CreateCredentialRequest",
    "CreateCredentialResponse",
    "CreateGroupRequest",
    "CreateRoleRequest",
    "CreateUserRequest",
    "Credential",
    "CredentialActions",
    "CredentialStatus",
    "DeactivateCredentialRequest",
    "DeactivateCredentialsRequest",
    "DeleteAPIClientRequest",
    "DeleteCIDRBlockRequest",
    "DeleteCredentialRequest",
    "DeleteRoleRequest",
    "format_expiry",
    "GetAPIClientRequest",
    "GetAPIClientResponse",
    "GetCIDRBlockRequest",
    "GetCredentialRequest",
    "GetGroupRequest",
    "GetPropertyRequest",
    "GetPropertyResponse",
    "GetRoleRequest",
    "GetUserRequest",
    "GrantedRoleID",
    "Group",
    "GroupAccess",
    "GroupActions",
    "GroupUser",
    "IAMModel",
    "IPACL",
    "IPAllowlistStatus",
    "ListAccessibleGroupsRequest",
    "ListAccountSwitchKeysRequest",
    "ListAffectedUsersRequest",
    "ListAllowedAPIsRequest",
    "ListAllowedCPCodesRequest",
    "ListAllowedCPCodesRequestBody",
    "ListAPIClientsActions",
    "ListAPIClientsItem",
    "ListAPIClientsRequest",
    "ListBlockedPropertiesRequest",
    "ListCIDRBlocksRequest",
    "ListCredentialsRequest",
    "ListGroupsRequest",
    "ListPropertiesRequest",
    "ListRolesRequest",
    "ListStatesRequest",
    "ListUsersForPropertyRequest",
    "ListUsersRequest",
    "LockAPIClientRequest",
    "LockUserRequest",
    "MapPropertyIDToNameRequest",
    "MapPropertyNameToIDRequest",
    "MFAValue",
    "MoveGroupRequest",
    "MovePropertyRequest",
    "MovePropertyRequestBody",
    "NewUserInfo",
    "NonBlankStr",
    "PasswordPolicy",
    "PositiveID",
    "Property",
    "PropertyActions",
    "PropertyUser",
    "PropertyUserType",
    "PurgeOptions",
    "RemoveGroupRequest",
    "RemoveUserRequest",
    "RequestedAPI",
    "RequestedAPIAccess",
    "RequestedClientGroup",
    "RequestedCPCodeAccess",
    "RequestedGroupAccess",
    "RequestedPurgeOptions",
    "ResetMFARequest",
    "ResetUserPasswordRequest",
    "ResetUserPasswordResponse",
    "Role",
    "RoleAction",
    "RoleGrantedRole",
    "RoleRequestBody",
    "RoleType",
    "RoleUser",
    "SetUserPasswordRequest",
    "TFAActionType",
    "TimeoutPolicy",
    "Timezone",
    "UnlockAPIClientRequest",
    "UnlockUserRequest",
    "UpdateAPIClientBody",
    "UpdateAPIClientRequest",
    "UpdateAPIClientResponse",
    "UpdateBlockedPropertiesRequest",
    "UpdateCIDRBlockRequest",
    "UpdateCIDRBlockRequestBody",
    "UpdateCredentialRequest",
    "UpdateCredentialRequestBody",
    "UpdateCredentialResponse",
    "UpdateGroupNameRequest",
    "UpdateMFARequest",
    "UpdateRoleRequest",
    "UpdateTFARequest",
    "UpdateUserAuthGrantsRequest",
    "UpdateUserInfoRequest",
    "UpdateUserNotificationsRequest",
    "User",
    "UserActions",
    "UserBasicInfo",
    "UserInfoUpdate",
    "UserListItem",
    "UserNotificationOptions",
    "UserNotifications",
    "ValidateCIDRBlockRequest",
    "validate_cidr",
]

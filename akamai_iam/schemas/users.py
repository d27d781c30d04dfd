"""User identity, lock, password and authentication schemas."""

from enum import StrEnum
from typing import Annotated, List, Optional

from pydantic import Field, StringConstraints

from akamai_iam.schemas.common import IAMModel, NonBlankStr, PositiveID

EmailStr = Annotated[
    str, StringConstraints(min_length=1, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
]


class TFAActionType(StrEnum):
    ENABLE = "enable"
    DISABLE = "disable"
    RESET = "reset"


class MFAValue(StrEnum):
    """Additional authentication method of a user."""

    TFA = "TFA"
    MFA = "MFA"
    NONE = "NONE"


class UserBasicInfo(IAMModel):
    """Profile fields shared by the create, get and update endpoints."""

    omit_if_none = frozenset(
        {
            "user_name",
            "phone",
            "time_zone",
            "secondary_email",
            "mobile_phone",
            "address",
            "city",
            "state",
            "zip_code",
            "contact_type",
            "preferred_language",
            "session_time_out",
        }
    )

    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    user_name: Optional[str] = Field(None, alias="uiUserName")
    email: str = ""
    phone: Optional[str] = None
    time_zone: Optional[str] = Field(None, alias="timeZone")
    job_title: str = Field("", alias="jobTitle")
    tfa_enabled: bool = Field(False, alias="tfaEnabled")
    secondary_email: Optional[str] = Field(None, alias="secondaryEmail")
    mobile_phone: Optional[str] = Field(None, alias="mobilePhone")
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = Field(None, alias="zipCode")
    country: str = ""
    contact_type: Optional[str] = Field(None, alias="contactType")
    preferred_language: Optional[str] = Field(None, alias="preferredLanguage")
    session_time_out: Optional[int] = Field(None, alias="sessionTimeOut")


class NewUserInfo(UserBasicInfo):
    first_name: NonBlankStr = Field(..., alias="firstName")
    last_name: NonBlankStr = Field(..., alias="lastName")
    email: EmailStr
    country: NonBlankStr


class UserInfoUpdate(UserBasicInfo):
    first_name: NonBlankStr = Field(..., alias="firstName")
    last_name: NonBlankStr = Field(..., alias="lastName")
    country: NonBlankStr
    time_zone: NonBlankStr = Field(..., alias="timeZone")
    preferred_language: NonBlankStr = Field(..., alias="preferredLanguage")
    session_time_out: int = Field(..., alias="sessionTimeOut")


class UserActions(IAMModel):
    api_client: bool = Field(False, alias="apiClient")
    delete: bool = False
    edit: bool = False
    is_cloneable: bool = Field(False, alias="isCloneable")
    reset_password: bool = Field(False, alias="resetPassword")
    third_party_access: bool = Field(False, alias="thirdPartyAccess")
    can_edit_tfa: bool = Field(False, alias="canEditTFA")
    edit_profile: bool = Field(False, alias="editProfile")


class AuthGrant(IAMModel):
    """Role a user holds in one group."""

    group_id: int = Field(0, alias="groupId")
    group_name: str = Field("", alias="groupName")
    is_blocked: bool = Field(False, alias="isBlocked")
    role_description: str = Field("", alias="roleDescription")
    role_id: Optional[int] = Field(None, alias="roleId")
    role_name: str = Field("", alias="roleName")
    sub_groups: List["AuthGrant"] = Field(default_factory=list, alias="subGroups")


class AuthGrantRequest(IAMModel):
    omit_if_none = frozenset({"role_id", "sub_groups"})

    group_id: PositiveID = Field(..., alias="groupId")
    is_blocked: bool = Field(False, alias="isBlocked")
    role_id: Optional[int] = Field(None, alias="roleId")
    sub_groups: Optional[List["AuthGrantRequest"]] = Field(None, alias="subGroups")


class UserNotificationOptions(IAMModel):
    new_user_notification: bool = Field(False, alias="newUserNotification")
    password_expiry: bool = Field(False, alias="passwordExpiry")
    proactive: List[str] = Field(default_factory=list)
    upgrade: List[str] = Field(default_factory=list)


class UserNotifications(IAMModel):
    enable_email_notifications: bool = Field(False, alias="enableEmailNotifications")
    options: UserNotificationOptions = Field(default_factory=UserNotificationOptions)


class User(UserBasicInfo):
    identity_id: str = Field("", alias="uiIdentityId")
    is_locked: bool = Field(False, alias="isLocked")
    last_login_date: Optional[str] = Field(None, alias="lastLoginDate")
    password_expiry_date: Optional[str] = Field(None, alias="passwordExpiryDate")
    tfa_configured: bool = Field(False, alias="tfaConfigured")
    email_update_pending: bool = Field(False, alias="emailUpdatePending")
    auth_grants: List[AuthGrant] = Field(default_factory=list, alias="authGrants")
    notifications: Optional[UserNotifications] = None


class UserListItem(IAMModel):
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    user_name: Optional[str] = Field(None, alias="uiUserName")
    email: str = ""
    tfa_enabled: bool = Field(False, alias="tfaEnabled")
    identity_id: str = Field("", alias="uiIdentityId")
    is_locked: bool = Field(False, alias="isLocked")
    last_login_date: Optional[str] = Field(None, alias="lastLoginDate")
    tfa_configured: bool = Field(False, alias="tfaConfigured")
    account_id: str = Field("", alias="accountId")
    actions: Optional[UserActions] = None
    auth_grants: List[AuthGrant] = Field(default_factory=list, alias="authGrants")


class CreateUserRequest(IAMModel):
    """
    New user profile plus initial role assignments.

    ``user`` is sent flattened into the body next to ``authGrants`` and
    ``notifications``; ``send_email`` travels as a query parameter.
    """

    user: NewUserInfo
    auth_grants: List[AuthGrantRequest] = Field(..., min_length=1, alias="authGrants")
    notifications: UserNotifications
    send_email: bool = False

    def to_body(self) -> dict:
        body = self.user.to_body()
        body["authGrants"] = [grant.to_body() for grant in self.auth_grants]
        body["notifications"] = self.notifications.to_body()
        return body


class GetUserRequest(IAMModel):
    identity_id: NonBlankStr
    actions: bool = False
    auth_grants: bool = False
    notifications: bool = False


class ListUsersRequest(IAMModel):
    group_id: Optional[int] = None
    auth_grants: bool = False
    actions: bool = False


class RemoveUserRequest(IAMModel):
    identity_id: NonBlankStr


class UpdateUserInfoRequest(IAMModel):
    identity_id: NonBlankStr
    user: UserInfoUpdate


class UpdateUserNotificationsRequest(IAMModel):
    identity_id: NonBlankStr
    notifications: UserNotifications


class UpdateUserAuthGrantsRequest(IAMModel):
    identity_id: NonBlankStr
    auth_grants: List[AuthGrantRequest] = Field(..., min_length=1)


class UpdateTFARequest(IAMModel):
    identity_id: NonBlankStr
    action: TFAActionType


class UpdateMFARequest(IAMModel):
    identity_id: NonBlankStr
    value: MFAValue


class ResetMFARequest(IAMModel):
    identity_id: NonBlankStr


class LockUserRequest(IAMModel):
    identity_id: NonBlankStr


class UnlockUserRequest(IAMModel):
    identity_id: NonBlankStr


class ResetUserPasswordRequest(IAMModel):
    identity_id: NonBlankStr
    send_email: bool = False


class ResetUserPasswordResponse(IAMModel):
    new_password: str = Field("", alias="newPassword")


class SetUserPasswordRequest(IAMModel):
    identity_id: NonBlankStr
    new_password: NonBlankStr = Field(..., alias="newPassword")


__all__ = [
    "AuthGrant",
    "AuthGrantRequest",
    "CreateUserRequest",
    "GetUserRequest",
    "ListUsersRequest",
    "LockUserRequest",
    "MFAValue",
    "NewUserInfo",
    "RemoveUserRequest",
    "ResetMFARequest",
    "ResetUserPasswordRequest",
    "ResetUserPasswordResponse",
    "SetUserPasswordRequest",
    "TFAActionType",
    "UnlockUserRequest",
    "UpdateMFARequest",
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
]

"""
User Service

User identities: profile, role grants, notifications, two-factor and
additional authentication, locking and passwords.
"""

from typing import Any, List

from akamai_iam.core.error_codes import UserErrorCode
from akamai_iam.schemas.users import (
    AuthGrant,
    CreateUserRequest,
    GetUserRequest,
    ListUsersRequest,
    LockUserRequest,
    RemoveUserRequest,
    ResetMFARequest,
    ResetUserPasswordRequest,
    ResetUserPasswordResponse,
    SetUserPasswordRequest,
    UnlockUserRequest,
    UpdateMFARequest,
    UpdateTFARequest,
    UpdateUserAuthGrantsRequest,
    UpdateUserInfoRequest,
    UpdateUserNotificationsRequest,
    User,
    UserBasicInfo,
    UserListItem,
    UserNotifications,
)
from akamai_iam.services.base import BaseService, Params

IDENTITIES_V2 = "/v2/user-admin/ui-identities"
IDENTITIES_V3 = "/v3/user-admin/ui-identities"


class UserService(BaseService):
    """Operations on user identities."""

    def create_user(self, params: Params = None, **fields: Any) -> User:
        op = UserErrorCode.CREATE_USER
        with self._operation(op):
            request = self._parse(op, CreateUserRequest, params, fields)
            return self._send(
                op,
                "POST",
                IDENTITIES_V2,
                accepted=(201,),
                query=self._query(sendEmail=request.send_email),
                body=request.to_body(),
                result=User,
            )

    def get_user(self, params: Params = None, **fields: Any) -> User:
        op = UserErrorCode.GET_USER
        with self._operation(op):
            request = self._parse(op, GetUserRequest, params, fields)
            query = self._query(
                actions=request.actions,
                authGrants=request.auth_grants,
                notifications=request.notifications,
            )
            return self._send(
                op,
                "GET",
                f"{IDENTITIES_V2}/{request.identity_id}",
                query=query,
                result=User,
            )

    def list_users(self, params: Params = None, **fields: Any) -> List[UserListItem]:
        op = UserErrorCode.LIST_USERS
        with self._operation(op):
            request = self._parse(op, ListUsersRequest, params, fields)
            query = self._query(
                actions=request.actions,
                authGrants=request.auth_grants,
                groupId=request.group_id,
            )
            return self._send(
                op, "GET", IDENTITIES_V2, query=query, result=List[UserListItem]
            )

    def remove_user(self, params: Params = None, **fields: Any) -> None:
        op = UserErrorCode.REMOVE_USER
        with self._operation(op):
            request = self._parse(op, RemoveUserRequest, params, fields)
            self._send(
                op,
                "DELETE",
                f"{IDENTITIES_V2}/{request.identity_id}",
                accepted=(200, 204),
            )

    def update_user_auth_grants(
        self, params: Params = None, **fields: Any
    ) -> List[AuthGrant]:
        op = UserErrorCode.UPDATE_USER_AUTH_GRANTS
        with self._operation(op):
            request = self._parse(op, UpdateUserAuthGrantsRequest, params, fields)
            return self._send(
                op,
                "PUT",
                f"{IDENTITIES_V2}/{request.identity_id}/auth-grants",
                body=[grant.to_body() for grant in request.auth_grants],
                result=List[AuthGrant],
            )

    def update_user_info(self, params: Params = None, **fields: Any) -> UserBasicInfo:
        op = UserErrorCode.UPDATE_USER_INFO
        with self._operation(op):
            request = self._parse(op, UpdateUserInfoRequest, params, fields)
            return self._send(
                op,
                "PUT",
                f"{IDENTITIES_V2}/{request.identity_id}/basic-info",
                body=request.user.to_body(),
                result=UserBasicInfo,
            )

    def update_user_notifications(
        self, params: Params = None, **fields: Any
    ) -> UserNotifications:
        op = UserErrorCode.UPDATE_USER_NOTIFICATIONS
        with self._operation(op):
            request = self._parse(op, UpdateUserNotificationsRequest, params, fields)
            return self._send(
                op,
                "PUT",
                f"{IDENTITIES_V2}/{request.identity_id}/notifications",
                body=request.notifications.to_body(),
                result=UserNotifications,
            )

    def update_tfa(self, params: Params = None, **fields: Any) -> None:
        """Enable, disable or reset two-factor authentication."""
        op = UserErrorCode.UPDATE_TFA
        with self._operation(op):
            request = self._parse(op, UpdateTFARequest, params, fields)
            self._send(
                op,
                "PUT",
                f"{IDENTITIES_V2}/{request.identity_id}/tfa",
                accepted=(204,),
                query=self._query(action=request.action),
            )

    def update_mfa(self, params: Params = None, **fields: Any) -> None:
        """Switch the additional authentication method (TFA, MFA or NONE)."""
        op = UserErrorCode.UPDATE_MFA
        with self._operation(op):
            request = self._parse(op, UpdateMFARequest, params, fields)
            self._send(
                op,
                "PUT",
                f"{IDENTITIES_V3}/{request.identity_id}/additionalAuthentication",
                accepted=(204,),
                body={"value": request.value.value},
            )

    def reset_mfa(self, params: Params = None, **fields: Any) -> None:
        op = UserErrorCode.RESET_MFA
        with self._operation(op):
            request = self._parse(op, ResetMFARequest, params, fields)
            self._send(
                op,
                "PUT",
                f"{IDENTITIES_V3}/{request.identity_id}/additionalAuthentication/reset",
                accepted=(204,),
            )

    def lock_user(self, params: Params = None, **fields: Any) -> None:
        op = UserErrorCode.LOCK_USER
        with self._operation(op):
            request = self._parse(op, LockUserRequest, params, fields)
            self._send(
                op,
                "POST",
                f"{IDENTITIES_V3}/{request.identity_id}/lock",
                accepted=(200, 204),
            )

    def unlock_user(self, params: Params = None, **fields: Any) -> None:
        op = UserErrorCode.UNLOCK_USER
        with self._operation(op):
            request = self._parse(op, UnlockUserRequest, params, fields)
            self._send(
                op,
                "POST",
                f"{IDENTITIES_V3}/{request.identity_id}/unlock",
                accepted=(200, 204),
            )

    def reset_user_password(
        self, params: Params = None, **fields: Any
    ) -> ResetUserPasswordResponse:
        """
        Reset a user's password.

        With ``send_email`` the new password is mailed to the user and the API
        answers 204; otherwise it is returned in the response.
        """
        op = UserErrorCode.RESET_USER_PASSWORD
        with self._operation(op):
            request = self._parse(op, ResetUserPasswordRequest, params, fields)
            response = self._send(
                op,
                "POST",
                f"{IDENTITIES_V3}/{request.identity_id}/reset-password",
                accepted=(200, 204),
                query=self._query(sendEmail=request.send_email),
                result=ResetUserPasswordResponse,
            )
            return response or ResetUserPasswordResponse()

    def set_user_password(self, params: Params = None, **fields: Any) -> None:
        op = UserErrorCode.SET_USER_PASSWORD
        with self._operation(op):
            request = self._parse(op, SetUserPasswordRequest, params, fields)
            self._send(
                op,
                "POST",
                f"{IDENTITIES_V3}/{request.identity_id}/set-password",
                accepted=(204,),
                body={"newPassword": request.new_password},
            )

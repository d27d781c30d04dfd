"""
Group Service

Create, read, rename, move and remove groups of the account hierarchy.
"""

from typing import Any, List

from akamai_iam.core.error_codes import GroupErrorCode
from akamai_iam.schemas.groups import (
    CreateGroupRequest,
    GetGroupRequest,
    Group,
    GroupUser,
    ListAffectedUsersRequest,
    ListGroupsRequest,
    MoveGroupRequest,
    RemoveGroupRequest,
    UpdateGroupNameRequest,
)
from akamai_iam.services.base import BaseService, Params

GROUPS_PATH = "/v3/user-admin/groups"


class GroupService(BaseService):
    """Operations on groups."""

    def create_group(self, params: Params = None, **fields: Any) -> Group:
        """Create a subgroup under ``group_id``."""
        op = GroupErrorCode.CREATE_GROUP
        with self._operation(op):
            request = self._parse(op, CreateGroupRequest, params, fields)
            return self._send(
                op,
                "POST",
                f"{GROUPS_PATH}/{request.group_id}",
                accepted=(201,),
                body={"groupName": request.group_name},
                result=Group,
            )

    def get_group(self, params: Params = None, **fields: Any) -> Group:
        op = GroupErrorCode.GET_GROUP
        with self._operation(op):
            request = self._parse(op, GetGroupRequest, params, fields)
            return self._send(
                op,
                "GET",
                f"{GROUPS_PATH}/{request.group_id}",
                query=self._query(actions=request.actions),
                result=Group,
            )

    def list_affected_users(
        self, params: Params = None, **fields: Any
    ) -> List[GroupUser]:
        """Users that would gain or lose access if the group moved."""
        op = GroupErrorCode.LIST_AFFECTED_USERS
        with self._operation(op):
            request = self._parse(op, ListAffectedUsersRequest, params, fields)
            return self._send(
                op,
                "GET",
                f"{GROUPS_PATH}/move/{request.source_group_id}"
                f"/{request.destination_group_id}/affected-users",
                query=self._query(userType=request.user_type),
                result=List[GroupUser],
            )

    def list_groups(self, params: Params = None, **fields: Any) -> List[Group]:
        op = GroupErrorCode.LIST_GROUPS
        with self._operation(op):
            request = self._parse(op, ListGroupsRequest, params, fields)
            return self._send(
                op,
                "GET",
                GROUPS_PATH,
                query=self._query(actions=request.actions),
                result=List[Group],
            )

    def remove_group(self, params: Params = None, **fields: Any) -> None:
        op = GroupErrorCode.REMOVE_GROUP
        with self._operation(op):
            request = self._parse(op, RemoveGroupRequest, params, fields)
            self._send(
                op, "DELETE", f"{GROUPS_PATH}/{request.group_id}", accepted=(204,)
            )

    def update_group_name(self, params: Params = None, **fields: Any) -> Group:
        op = GroupErrorCode.UPDATE_GROUP_NAME
        with self._operation(op):
            request = self._parse(op, UpdateGroupNameRequest, params, fields)
            return self._send(
                op,
                "PUT",
                f"{GROUPS_PATH}/{request.group_id}",
                body={"groupName": request.group_name},
                result=Group,
            )

    def move_group(self, params: Params = None, **fields: Any) -> None:
        op = GroupErrorCode.MOVE_GROUP
        with self._operation(op):
            request = self._parse(op, MoveGroupRequest, params, fields)
            self._send(
                op,
                "POST",
                f"{GROUPS_PATH}/move",
                accepted=(204,),
                body=request.to_body(),
            )

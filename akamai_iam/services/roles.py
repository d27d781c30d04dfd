"""
Role Service

Custom role management and the catalogue of grantable roles.
"""

from typing import Any, List

from akamai_iam.core.error_codes import RoleErrorCode
from akamai_iam.schemas.roles import (
    CreateRoleRequest,
    DeleteRoleRequest,
    GetRoleRequest,
    ListRolesRequest,
    Role,
    RoleGrantedRole,
    UpdateRoleRequest,
)
from akamai_iam.services.base import BaseService, Params

ROLES_PATH = "/v2/user-admin/roles"


class RoleService(BaseService):
    """Operations on roles."""

    def create_role(self, params: Params = None, **fields: Any) -> Role:
        op = RoleErrorCode.CREATE_ROLE
        with self._operation(op):
            request = self._parse(op, CreateRoleRequest, params, fields)
            return self._send(
                op,
                "POST",
                ROLES_PATH,
                accepted=(201,),
                body=request.to_body(),
                result=Role,
            )

    def get_role(self, params: Params = None, **fields: Any) -> Role:
        op = RoleErrorCode.GET_ROLE
        with self._operation(op):
            request = self._parse(op, GetRoleRequest, params, fields)
            query = self._query(
                actions=request.actions,
                grantedRoles=request.granted_roles,
                users=request.users,
            )
            return self._send(
                op, "GET", f"{ROLES_PATH}/{request.role_id}", query=query, result=Role
            )

    def update_role(self, params: Params = None, **fields: Any) -> Role:
        op = RoleErrorCode.UPDATE_ROLE
        with self._operation(op):
            request = self._parse(op, UpdateRoleRequest, params, fields)
            return self._send(
                op,
                "PUT",
                f"{ROLES_PATH}/{request.role_id}",
                body=request.body.to_body(),
                result=Role,
            )

    def delete_role(self, params: Params = None, **fields: Any) -> None:
        op = RoleErrorCode.DELETE_ROLE
        with self._operation(op):
            request = self._parse(op, DeleteRoleRequest, params, fields)
            self._send(op, "DELETE", f"{ROLES_PATH}/{request.role_id}", accepted=(204,))

    def list_roles(self, params: Params = None, **fields: Any) -> List[Role]:
        op = RoleErrorCode.LIST_ROLES
        with self._operation(op):
            request = self._parse(op, ListRolesRequest, params, fields)
            query = self._query(
                actions=request.actions,
                groupId=request.group_id,
                ignoreContext=request.ignore_context,
                users=request.users,
            )
            return self._send(op, "GET", ROLES_PATH, query=query, result=List[Role])

    def list_grantable_roles(self) -> List[RoleGrantedRole]:
        """Roles the caller may grant when building a custom role."""
        op = RoleErrorCode.LIST_GRANTABLE_ROLES
        with self._operation(op):
            return self._send(
                op,
                "GET",
                f"{ROLES_PATH}/grantable-roles",
                result=List[RoleGrantedRole],
            )

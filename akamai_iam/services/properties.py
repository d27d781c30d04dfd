"""
Property Service

Properties as seen by IAM, the users that can reach them, and the
per-user blocked property lists.
"""

from typing import Any, List

from akamai_iam.core.error_codes import BlockedPropertyErrorCode, PropertyErrorCode
from akamai_iam.core.exceptions import IAMException, RequestException
from akamai_iam.schemas.properties import (
    BlockUsersRequest,
    GetPropertyRequest,
    GetPropertyResponse,
    ListBlockedPropertiesRequest,
    ListPropertiesRequest,
    ListUsersForPropertyRequest,
    MapPropertyIDToNameRequest,
    MapPropertyNameToIDRequest,
    MovePropertyRequest,
    Property,
    PropertyUser,
    UpdateBlockedPropertiesRequest,
)
from akamai_iam.services.base import BaseService, Params

PROPERTIES_PATH = "/v3/user-admin/properties"


class PropertyService(BaseService):
    """Operations on properties."""

    def list_properties(self, params: Params = None, **fields: Any) -> List[Property]:
        op = PropertyErrorCode.LIST_PROPERTIES
        with self._operation(op):
            request = self._parse(op, ListPropertiesRequest, params, fields)
            return self._send(
                op,
                "GET",
                PROPERTIES_PATH,
                query=self._query(actions=request.actions, groupId=request.group_id),
                result=List[Property],
            )

    def list_users_for_property(
        self, params: Params = None, **fields: Any
    ) -> List[PropertyUser]:
        op = PropertyErrorCode.LIST_USERS_FOR_PROPERTY
        with self._operation(op):
            request = self._parse(op, ListUsersForPropertyRequest, params, fields)
            return self._send(
                op,
                "GET",
                f"{PROPERTIES_PATH}/{request.property_id}/users",
                query=self._query(userType=request.user_type),
                result=List[PropertyUser],
            )

    def get_property(
        self, params: Params = None, **fields: Any
    ) -> GetPropertyResponse:
        op = PropertyErrorCode.GET_PROPERTY
        with self._operation(op):
            request = self._parse(op, GetPropertyRequest, params, fields)
            return self._send(
                op,
                "GET",
                f"{PROPERTIES_PATH}/{request.property_id}",
                query=self._query(groupId=request.group_id),
                result=GetPropertyResponse,
            )

    def move_property(self, params: Params = None, **fields: Any) -> None:
        op = PropertyErrorCode.MOVE_PROPERTY
        with self._operation(op):
            request = self._parse(op, MovePropertyRequest, params, fields)
            self._send(
                op,
                "PUT",
                f"{PROPERTIES_PATH}/{request.property_id}",
                accepted=(204,),
                body=request.body.to_body(),
            )

    def block_users(
        self, params: Params = None, **fields: Any
    ) -> List[PropertyUser]:
        op = PropertyErrorCode.BLOCK_USERS
        with self._operation(op):
            request = self._parse(op, BlockUsersRequest, params, fields)
            return self._send(
                op,
                "PUT",
                f"{PROPERTIES_PATH}/{request.property_id}/users/block",
                body=[item.to_body() for item in request.body],
                result=List[PropertyUser],
            )

    def map_property_id_to_name(self, params: Params = None, **fields: Any) -> str:
        """Resolve a property id to its name through get_property."""
        op = PropertyErrorCode.MAP_PROPERTY_ID_TO_NAME
        with self._operation(op):
            request = self._parse(op, MapPropertyIDToNameRequest, params, fields)
            try:
                prop = self.get_property(
                    property_id=request.property_id, group_id=request.group_id
                )
            except IAMException as exc:
                raise RequestException.wrap(
                    exc, f"{op}: request failed: {exc}", op
                ) from exc
            return prop.property_name

    def map_property_name_to_id(self, params: Params = None, **fields: Any) -> int:
        """
        Resolve a property name to its id within a group through list_properties.

        Raises:
            IAMException: No property in the group has that name
        """
        op = PropertyErrorCode.MAP_PROPERTY_NAME_TO_ID
        with self._operation(op):
            request = self._parse(op, MapPropertyNameToIDRequest, params, fields)
            try:
                properties = self.list_properties(group_id=request.group_id)
            except IAMException as exc:
                raise RequestException.wrap(
                    exc, f"{op}: request failed: {exc}", op
                ) from exc

            for prop in properties:
                if prop.property_name == request.property_name:
                    return prop.property_id

            raise IAMException(
                f"{op}: no such property: {request.property_name}",
                op,
                details={"group_id": request.group_id},
            )


class BlockedPropertyService(BaseService):
    """Properties a user is blocked from within one group."""

    @staticmethod
    def _path(identity_id: str, group_id: int) -> str:
        return (
            f"/v2/user-admin/ui-identities/{identity_id}"
            f"/groups/{group_id}/blocked-properties"
        )

    def list_blocked_properties(
        self, params: Params = None, **fields: Any
    ) -> List[int]:
        op = BlockedPropertyErrorCode.LIST_BLOCKED_PROPERTIES
        with self._operation(op):
            request = self._parse(op, ListBlockedPropertiesRequest, params, fields)
            return self._send(
                op,
                "GET",
                self._path(request.identity_id, request.group_id),
                result=List[int],
            )

    def update_blocked_properties(
        self, params: Params = None, **fields: Any
    ) -> List[int]:
        """Replace the blocked property list of a user in a group."""
        op = BlockedPropertyErrorCode.UPDATE_BLOCKED_PROPERTIES
        with self._operation(op):
            request = self._parse(op, UpdateBlockedPropertiesRequest, params, fields)
            return self._send(
                op,
                "PUT",
                self._path(request.identity_id, request.group_id),
                body=list(request.properties),
                result=List[int],
            )

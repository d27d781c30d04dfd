"""
Helper Service

User-centric lookups that feed API client creation: which CP codes, APIs
and groups a user may hand out, and who may authorize a client.
"""

from typing import Any, List

from akamai_iam.core.error_codes import HelperErrorCode
from akamai_iam.schemas.helper import (
    AccessibleGroup,
    AllowedAPI,
    AllowedCPCode,
    AuthorizedUser,
    ListAccessibleGroupsRequest,
    ListAllowedAPIsRequest,
    ListAllowedCPCodesRequest,
)
from akamai_iam.services.base import BaseService, Params

USERS_PATH = "/v3/users"


class HelperService(BaseService):
    """Lookups scoped to one user name."""

    def list_allowed_cpcodes(
        self, params: Params = None, **fields: Any
    ) -> List[AllowedCPCode]:
        op = HelperErrorCode.LIST_ALLOWED_CPCODES
        with self._operation(op):
            request = self._parse(op, ListAllowedCPCodesRequest, params, fields)
            return self._send(
                op,
                "POST",
                f"{USERS_PATH}/{request.user_name}/allowed-cpcodes",
                body=request.body.to_body(),
                result=List[AllowedCPCode],
            )

    def list_authorized_users(self) -> List[AuthorizedUser]:
        op = HelperErrorCode.LIST_AUTHORIZED_USERS
        with self._operation(op):
            return self._send(op, "GET", USERS_PATH, result=List[AuthorizedUser])

    def list_allowed_apis(
        self, params: Params = None, **fields: Any
    ) -> List[AllowedAPI]:
        op = HelperErrorCode.LIST_ALLOWED_APIS
        with self._operation(op):
            request = self._parse(op, ListAllowedAPIsRequest, params, fields)
            query = self._query(
                allowAccountSwitch=request.allow_account_switch,
                clientType=request.client_type,
            )
            return self._send(
                op,
                "GET",
                f"{USERS_PATH}/{request.user_name}/allowed-apis",
                query=query,
                result=List[AllowedAPI],
            )

    def list_accessible_groups(
        self, params: Params = None, **fields: Any
    ) -> List[AccessibleGroup]:
        op = HelperErrorCode.LIST_ACCESSIBLE_GROUPS
        with self._operation(op):
            request = self._parse(op, ListAccessibleGroupsRequest, params, fields)
            return self._send(
                op,
                "GET",
                f"{USERS_PATH}/{request.user_name}/group-access",
                result=List[AccessibleGroup],
            )

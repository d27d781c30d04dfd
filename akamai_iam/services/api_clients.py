"""
API Client Service

Lock, unlock, list, read, create, update and delete IAM API clients.
"""

from typing import Any, List

from akamai_iam.core.error_codes import APIClientErrorCode
from akamai_iam.schemas.api_clients import (
    APIClient,
    CreateAPIClientRequest,
    CreateAPIClientResponse,
    DeleteAPIClientRequest,
    GetAPIClientRequest,
    GetAPIClientResponse,
    ListAPIClientsItem,
    ListAPIClientsRequest,
    LockAPIClientRequest,
    UnlockAPIClientRequest,
    UpdateAPIClientRequest,
    UpdateAPIClientResponse,
)
from akamai_iam.services.base import BaseService, Params, client_segment

BASE_PATH = "/v3/api-clients"


class APIClientService(BaseService):
    """Operations on API clients. An unset client id targets the caller's own client."""

    def lock_api_client(self, params: Params = None, **fields: Any) -> APIClient:
        op = APIClientErrorCode.LOCK_API_CLIENT
        with self._operation(op):
            request = self._parse(op, LockAPIClientRequest, params, fields)
            return self._send(
                op,
                "PUT",
                f"{BASE_PATH}/{client_segment(request.client_id)}/lock",
                result=APIClient,
            )

    def unlock_api_client(self, params: Params = None, **fields: Any) -> APIClient:
        op = APIClientErrorCode.UNLOCK_API_CLIENT
        with self._operation(op):
            request = self._parse(op, UnlockAPIClientRequest, params, fields)
            return self._send(
                op, "PUT", f"{BASE_PATH}/{request.client_id}/unlock", result=APIClient
            )

    def list_api_clients(
        self, params: Params = None, **fields: Any
    ) -> List[ListAPIClientsItem]:
        op = APIClientErrorCode.LIST_API_CLIENTS
        with self._operation(op):
            request = self._parse(op, ListAPIClientsRequest, params, fields)
            return self._send(
                op,
                "GET",
                BASE_PATH,
                query=self._query(actions=request.actions),
                result=List[ListAPIClientsItem],
            )

    def get_api_client(
        self, params: Params = None, **fields: Any
    ) -> GetAPIClientResponse:
        op = APIClientErrorCode.GET_API_CLIENT
        with self._operation(op):
            request = self._parse(op, GetAPIClientRequest, params, fields)
            query = self._query(
                actions=request.actions,
                apiAccess=request.api_access,
                credentials=request.credentials,
                groupAccess=request.group_access,
                ipAcl=request.ip_acl,
            )
            return self._send(
                op,
                "GET",
                f"{BASE_PATH}/{client_segment(request.client_id)}",
                query=query,
                result=GetAPIClientResponse,
            )

    def create_api_client(
        self, params: Params = None, **fields: Any
    ) -> CreateAPIClientResponse:
        op = APIClientErrorCode.CREATE_API_CLIENT
        with self._operation(op):
            request = self._parse(op, CreateAPIClientRequest, params, fields)
            return self._send(
                op,
                "POST",
                BASE_PATH,
                accepted=(201,),
                body=request.to_body(),
                result=CreateAPIClientResponse,
            )

    def update_api_client(
        self, params: Params = None, **fields: Any
    ) -> UpdateAPIClientResponse:
        op = APIClientErrorCode.UPDATE_API_CLIENT
        with self._operation(op):
            request = self._parse(op, UpdateAPIClientRequest, params, fields)
            return self._send(
                op,
                "PUT",
                f"{BASE_PATH}/{client_segment(request.client_id)}",
                body=request.body.to_body(),
                result=UpdateAPIClientResponse,
            )

    def delete_api_client(self, params: Params = None, **fields: Any) -> None:
        op = APIClientErrorCode.DELETE_API_CLIENT
        with self._operation(op):
            request = self._parse(op, DeleteAPIClientRequest, params, fields)
            self._send(
                op,
                "DELETE",
                f"{BASE_PATH}/{client_segment(request.client_id)}",
                accepted=(204,),
            )

"""
Credential Service

Manage the credentials of an API client.
"""

from typing import Any, List

from akamai_iam.core.error_codes import CredentialErrorCode
from akamai_iam.schemas.credentials import (
    CreateCredentialRequest,
    CreateCredentialResponse,
    Credential,
    DeactivateCredentialRequest,
    DeactivateCredentialsRequest,
    DeleteCredentialRequest,
    GetCredentialRequest,
    ListCredentialsRequest,
    UpdateCredentialRequest,
    UpdateCredentialResponse,
)
from akamai_iam.services.base import BaseService, Params, client_segment


def _credentials_path(client_id) -> str:
    return f"/v3/api-clients/{client_segment(client_id)}/credentials"


class CredentialService(BaseService):
    """Operations on API client credentials."""

    def create_credential(
        self, params: Params = None, **fields: Any
    ) -> CreateCredentialResponse:
        op = CredentialErrorCode.CREATE_CREDENTIAL
        with self._operation(op):
            request = self._parse(op, CreateCredentialRequest, params, fields)
            return self._send(
                op,
                "POST",
                _credentials_path(request.client_id),
                accepted=(201,),
                result=CreateCredentialResponse,
            )

    def list_credentials(
        self, params: Params = None, **fields: Any
    ) -> List[Credential]:
        op = CredentialErrorCode.LIST_CREDENTIALS
        with self._operation(op):
            request = self._parse(op, ListCredentialsRequest, params, fields)
            return self._send(
                op,
                "GET",
                _credentials_path(request.client_id),
                query=self._query(actions=request.actions),
                result=List[Credential],
            )

    def get_credential(self, params: Params = None, **fields: Any) -> Credential:
        op = CredentialErrorCode.GET_CREDENTIAL
        with self._operation(op):
            request = self._parse(op, GetCredentialRequest, params, fields)
            return self._send(
                op,
                "GET",
                f"{_credentials_path(request.client_id)}/{request.credential_id}",
                query=self._query(actions=request.actions),
                result=Credential,
            )

    def update_credential(
        self, params: Params = None, **fields: Any
    ) -> UpdateCredentialResponse:
        """
        Change the expiry, status or description of a credential.

        Whole-second expiries are sent one nanosecond later; see
        ``format_expiry``.
        """
        op = CredentialErrorCode.UPDATE_CREDENTIAL
        with self._operation(op):
            request = self._parse(op, UpdateCredentialRequest, params, fields)
            return self._send(
                op,
                "PUT",
                f"{_credentials_path(request.client_id)}/{request.credential_id}",
                body=request.body.to_body(),
                result=UpdateCredentialResponse,
            )

    def delete_credential(self, params: Params = None, **fields: Any) -> None:
        op = CredentialErrorCode.DELETE_CREDENTIAL
        with self._operation(op):
            request = self._parse(op, DeleteCredentialRequest, params, fields)
            self._send(
                op,
                "DELETE",
                f"{_credentials_path(request.client_id)}/{request.credential_id}",
                accepted=(204,),
            )

    def deactivate_credential(self, params: Params = None, **fields: Any) -> None:
        op = CredentialErrorCode.DEACTIVATE_CREDENTIAL
        with self._operation(op):
            request = self._parse(op, DeactivateCredentialRequest, params, fields)
            self._send(
                op,
                "POST",
                f"{_credentials_path(request.client_id)}"
                f"/{request.credential_id}/deactivate",
                accepted=(204,),
            )

    def deactivate_credentials(self, params: Params = None, **fields: Any) -> None:
        """Deactivate every credential of the API client."""
        op = CredentialErrorCode.DEACTIVATE_CREDENTIALS
        with self._operation(op):
            request = self._parse(op, DeactivateCredentialsRequest, params, fields)
            self._send(
                op,
                "POST",
                f"{_credentials_path(request.client_id)}/deactivate",
                accepted=(204,),
            )

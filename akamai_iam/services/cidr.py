"""
CIDR Allowlist Service

CIDR blocks of the account IP allowlist and the allowlist on/off switch.
"""

from typing import Any, List

from akamai_iam.core.error_codes import CIDRErrorCode, IPAllowlistErrorCode
from akamai_iam.schemas.cidr import (
    CIDRBlock,
    CreateCIDRBlockRequest,
    DeleteCIDRBlockRequest,
    GetCIDRBlockRequest,
    IPAllowlistStatus,
    ListCIDRBlocksRequest,
    UpdateCIDRBlockRequest,
    ValidateCIDRBlockRequest,
)
from akamai_iam.services.base import BaseService, Params

ALLOWLIST_PATH = "/v3/user-admin/ip-acl/allowlist"


class CIDRService(BaseService):
    """Operations on CIDR blocks of the IP allowlist."""

    def list_cidr_blocks(self, params: Params = None, **fields: Any) -> List[CIDRBlock]:
        op = CIDRErrorCode.LIST_CIDR_BLOCKS
        with self._operation(op):
            request = self._parse(op, ListCIDRBlocksRequest, params, fields)
            return self._send(
                op,
                "GET",
                ALLOWLIST_PATH,
                query=self._query(actions=request.actions),
                result=List[CIDRBlock],
            )

    def create_cidr_block(self, params: Params = None, **fields: Any) -> CIDRBlock:
        op = CIDRErrorCode.CREATE_CIDR_BLOCK
        with self._operation(op):
            request = self._parse(op, CreateCIDRBlockRequest, params, fields)
            return self._send(
                op,
                "POST",
                ALLOWLIST_PATH,
                accepted=(201,),
                body=request.to_body(),
                result=CIDRBlock,
            )

    def get_cidr_block(self, params: Params = None, **fields: Any) -> CIDRBlock:
        op = CIDRErrorCode.GET_CIDR_BLOCK
        with self._operation(op):
            request = self._parse(op, GetCIDRBlockRequest, params, fields)
            return self._send(
                op,
                "GET",
                f"{ALLOWLIST_PATH}/{request.cidr_block_id}",
                query=self._query(actions=request.actions),
                result=CIDRBlock,
            )

    def update_cidr_block(self, params: Params = None, **fields: Any) -> CIDRBlock:
        op = CIDRErrorCode.UPDATE_CIDR_BLOCK
        with self._operation(op):
            request = self._parse(op, UpdateCIDRBlockRequest, params, fields)
            return self._send(
                op,
                "PUT",
                f"{ALLOWLIST_PATH}/{request.cidr_block_id}",
                body=request.body.to_body(),
                result=CIDRBlock,
            )

    def delete_cidr_block(self, params: Params = None, **fields: Any) -> None:
        op = CIDRErrorCode.DELETE_CIDR_BLOCK
        with self._operation(op):
            request = self._parse(op, DeleteCIDRBlockRequest, params, fields)
            self._send(
                op,
                "DELETE",
                f"{ALLOWLIST_PATH}/{request.cidr_block_id}",
                accepted=(204,),
            )

    def validate_cidr_block(self, params: Params = None, **fields: Any) -> None:
        """Ask the API whether a CIDR block would be accepted."""
        op = CIDRErrorCode.VALIDATE_CIDR_BLOCK
        with self._operation(op):
            request = self._parse(op, ValidateCIDRBlockRequest, params, fields)
            self._send(
                op,
                "GET",
                f"{ALLOWLIST_PATH}/validate",
                accepted=(204,),
                query=self._query(cidrblock=request.cidr_block),
            )


class IPAllowlistService(BaseService):
    """Enable, disable and inspect the account IP allowlist."""

    def disable_ip_allowlist(self) -> None:
        op = IPAllowlistErrorCode.DISABLE_IP_ALLOWLIST
        with self._operation(op):
            self._send(op, "POST", f"{ALLOWLIST_PATH}/disable", accepted=(204,))

    def enable_ip_allowlist(self) -> None:
        op = IPAllowlistErrorCode.ENABLE_IP_ALLOWLIST
        with self._operation(op):
            self._send(op, "POST", f"{ALLOWLIST_PATH}/enable", accepted=(204,))

    def get_ip_allowlist_status(self) -> IPAllowlistStatus:
        op = IPAllowlistErrorCode.GET_IP_ALLOWLIST_STATUS
        with self._operation(op):
            return self._send(
                op, "GET", f"{ALLOWLIST_PATH}/status", result=IPAllowlistStatus
            )

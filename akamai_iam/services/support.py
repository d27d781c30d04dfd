"""
Support Service

Read-only reference data used when filling in user profiles, plus the
account switch keys available to an API client.
"""

from typing import Any, List

from akamai_iam.core.error_codes import SupportErrorCode
from akamai_iam.schemas.support import (
    AccountSwitchKey,
    ListAccountSwitchKeysRequest,
    ListStatesRequest,
    PasswordPolicy,
    TimeoutPolicy,
    Timezone,
)
from akamai_iam.services.base import BaseService, Params, client_segment

COMMON_PATH = "/v3/user-admin/common"


class SupportService(BaseService):
    """Lookups of supported values."""

    def get_password_policy(self) -> PasswordPolicy:
        op = SupportErrorCode.GET_PASSWORD_POLICY
        with self._operation(op):
            return self._send(
                op, "GET", f"{COMMON_PATH}/password-policy", result=PasswordPolicy
            )

    def supported_countries(self) -> List[str]:
        op = SupportErrorCode.SUPPORTED_COUNTRIES
        with self._operation(op):
            return self._send(op, "GET", f"{COMMON_PATH}/countries", result=List[str])

    def supported_contact_types(self) -> List[str]:
        op = SupportErrorCode.SUPPORTED_CONTACT_TYPES
        with self._operation(op):
            return self._send(
                op, "GET", f"{COMMON_PATH}/contact-types", result=List[str]
            )

    def supported_languages(self) -> List[str]:
        op = SupportErrorCode.SUPPORTED_LANGUAGES
        with self._operation(op):
            return self._send(
                op, "GET", f"{COMMON_PATH}/supported-languages", result=List[str]
            )

    def supported_timezones(self) -> List[Timezone]:
        op = SupportErrorCode.SUPPORTED_TIMEZONES
        with self._operation(op):
            return self._send(
                op, "GET", f"{COMMON_PATH}/timezones", result=List[Timezone]
            )

    def list_products(self) -> List[str]:
        """Products a user can subscribe to notifications for."""
        op = SupportErrorCode.LIST_PRODUCTS
        with self._operation(op):
            return self._send(
                op, "GET", f"{COMMON_PATH}/notification-products", result=List[str]
            )

    def list_timeout_policies(self) -> List[TimeoutPolicy]:
        op = SupportErrorCode.LIST_TIMEOUT_POLICIES
        with self._operation(op):
            return self._send(
                op, "GET", f"{COMMON_PATH}/timeout-policies", result=List[TimeoutPolicy]
            )

    def list_states(self, params: Params = None, **fields: Any) -> List[str]:
        op = SupportErrorCode.LIST_STATES
        with self._operation(op):
            request = self._parse(op, ListStatesRequest, params, fields)
            return self._send(
                op,
                "GET",
                f"{COMMON_PATH}/countries/{request.country}/states",
                result=List[str],
            )

    def list_account_switch_keys(
        self, params: Params = None, **fields: Any
    ) -> List[AccountSwitchKey]:
        op = SupportErrorCode.LIST_ACCOUNT_SWITCH_KEYS
        with self._operation(op):
            request = self._parse(op, ListAccountSwitchKeysRequest, params, fields)
            return self._send(
                op,
                "GET",
                f"/v3/api-clients/{client_segment(request.client_id)}"
                "/account-switch-keys",
                query=self._query(search=request.search),
                result=List[AccountSwitchKey],
            )

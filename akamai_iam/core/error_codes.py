"""
Error Codes

Operation codes for akamai-iam.

Every IAM operation owns one code. Exceptions raised by an operation carry its
code as ``error_code`` so callers can classify failures coarsely, e.g.
``exc.matches(GroupErrorCode.CREATE_GROUP)``, without inspecting messages.
Code values are the human-readable operation names that prefix exception
messages ("create group: API error: ...").
"""

from enum import StrEnum
from types import MappingProxyType
from typing import Any, Dict, Mapping


class ErrorCode(StrEnum):
    """Base error code enum (string-based)."""


class ConfigurationErrorCode(ErrorCode):
    """Configuration-related error codes."""

    INVALID_CONFIG = "invalid configuration"


class APIClientErrorCode(ErrorCode):
    """API client operation codes."""

    LOCK_API_CLIENT = "lock api client"
    UNLOCK_API_CLIENT = "unlock api client"
    LIST_API_CLIENTS = "list api clients"
    GET_API_CLIENT = "get api client"
    CREATE_API_CLIENT = "create api client"
    UPDATE_API_CLIENT = "update api client"
    DELETE_API_CLIENT = "delete api client"


class CredentialErrorCode(ErrorCode):
    """API client credential operation codes."""

    CREATE_CREDENTIAL = "create credential"
    LIST_CREDENTIALS = "list credentials"
    GET_CREDENTIAL = "get credential"
    UPDATE_CREDENTIAL = "update credential"
    DELETE_CREDENTIAL = "delete credential"
    DEACTIVATE_CREDENTIAL = "deactivate credential"
    DEACTIVATE_CREDENTIALS = "deactivate credentials"


class CIDRErrorCode(ErrorCode):
    """CIDR allowlist operation codes."""

    LIST_CIDR_BLOCKS = "list CIDR blocks"
    CREATE_CIDR_BLOCK = "create CIDR block"
    GET_CIDR_BLOCK = "get CIDR block"
    UPDATE_CIDR_BLOCK = "update CIDR block"
    DELETE_CIDR_BLOCK = "delete CIDR block"
    VALIDATE_CIDR_BLOCK = "validate CIDR block"


class IPAllowlistErrorCode(ErrorCode):
    """IP allowlist toggle operation codes."""

    DISABLE_IP_ALLOWLIST = "disable ip allowlist"
    ENABLE_IP_ALLOWLIST = "enable ip allowlist"
    GET_IP_ALLOWLIST_STATUS = "get ip allowlist status"


class GroupErrorCode(ErrorCode):
    """Group operation codes."""

    CREATE_GROUP = "create group"
    GET_GROUP = "get group"
    LIST_AFFECTED_USERS = "list affected users"
    LIST_GROUPS = "list groups"
    REMOVE_GROUP = "remove group"
    UPDATE_GROUP_NAME = "update group name"
    MOVE_GROUP = "move group"


class RoleErrorCode(ErrorCode):
    """Role operation codes."""

    CREATE_ROLE = "create a role"
    GET_ROLE = "get a role"
    UPDATE_ROLE = "update a role"
    DELETE_ROLE = "delete a role"
    LIST_ROLES = "list roles"
    LIST_GRANTABLE_ROLES = "list grantable roles"


class PropertyErrorCode(ErrorCode):
    """Property operation codes."""

    LIST_PROPERTIES = "list properties"
    LIST_USERS_FOR_PROPERTY = "list users for property"
    GET_PROPERTY = "get property"
    MOVE_PROPERTY = "move property"
    MAP_PROPERTY_ID_TO_NAME = "map property by id"
    MAP_PROPERTY_NAME_TO_ID = "map property by name"
    BLOCK_USERS = "block users"


class BlockedPropertyErrorCode(ErrorCode):
    """Blocked property operation codes."""

    LIST_BLOCKED_PROPERTIES = "list blocked properties"
    UPDATE_BLOCKED_PROPERTIES = "update blocked properties"


class UserErrorCode(ErrorCode):
    """User identity operation codes."""

    CREATE_USER = "create user"
    GET_USER = "get user"
    LIST_USERS = "list users"
    REMOVE_USER = "remove user"
    UPDATE_USER_AUTH_GRANTS = "update user auth grants"
    UPDATE_USER_INFO = "update user info"
    UPDATE_USER_NOTIFICATIONS = "update user notifications"
    UPDATE_TFA = "update user's two-factor authentication"
    UPDATE_MFA = "update user's authentication method"
    RESET_MFA = "reset user's authentication method"
    LOCK_USER = "lock user"
    UNLOCK_USER = "unlock user"
    RESET_USER_PASSWORD = "reset user password"
    SET_USER_PASSWORD = "set user password"


class SupportErrorCode(ErrorCode):
    """Support (common data) operation codes."""

    GET_PASSWORD_POLICY = "get password policy"
    SUPPORTED_COUNTRIES = "supported countries"
    SUPPORTED_CONTACT_TYPES = "supported contact types"
    SUPPORTED_LANGUAGES = "supported languages"
    SUPPORTED_TIMEZONES = "supported timezones"
    LIST_PRODUCTS = "list products"
    LIST_TIMEOUT_POLICIES = "list timeout policies"
    LIST_STATES = "list states"
    LIST_ACCOUNT_SWITCH_KEYS = "list account switch keys"


class HelperErrorCode(ErrorCode):
    """User lookup helper operation codes."""

    LIST_ALLOWED_CPCODES = "list allowed CP codes"
    LIST_AUTHORIZED_USERS = "list authorized users"
    LIST_ALLOWED_APIS = "list allowed APIs"
    LIST_ACCESSIBLE_GROUPS = "list accessible groups"


# Operation code to upstream API family
#
# CONVENTIONS FOR ADDING NEW OPERATION CODES:
# 1. Member names mirror the client method name in UPPER_SNAKE_CASE
# 2. Values are the lower-case operation name used as the message prefix
# 3. Every code belongs to exactly one family below
#
ERROR_CODE_FAMILY: Mapping[type, str] = MappingProxyType(
    {
        ConfigurationErrorCode: "configuration",
        APIClientErrorCode: "api-clients",
        CredentialErrorCode: "credentials",
        CIDRErrorCode: "cidr-allowlist",
        IPAllowlistErrorCode: "ip-allowlist",
        GroupErrorCode: "groups",
        RoleErrorCode: "roles",
        PropertyErrorCode: "properties",
        BlockedPropertyErrorCode: "blocked-properties",
        UserErrorCode: "users",
        SupportErrorCode: "support",
        HelperErrorCode: "helpers",
    }
)


def get_error_family(error_code: ErrorCode | str) -> str:
    """
    Get the API family an error code belongs to.

    Args:
        error_code: Error code enum or string value

    Returns:
        Family name (``"unknown"`` if the code is not registered)
    """
    if not isinstance(error_code, ErrorCode):
        for code_cls in ERROR_CODE_FAMILY:
            for member in code_cls:
                if member.value == error_code:
                    return ERROR_CODE_FAMILY[code_cls]
        return "unknown"
    return ERROR_CODE_FAMILY.get(type(error_code), "unknown")


def get_error_info(error_code: ErrorCode | str) -> Dict[str, Any]:
    """
    Get error information including the API family.

    Args:
        error_code: Error code enum or string

    Returns:
        Dictionary with error information
    """
    code_value = error_code.value if isinstance(error_code, ErrorCode) else error_code
    return {"error_code": code_value, "family": get_error_family(error_code)}

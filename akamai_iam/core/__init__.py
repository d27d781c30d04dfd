"""
Core Package

Configuration, error codes, exceptions, logging and the HTTP session
shared by every IAM service.
"""

# ruff: noqa: F401  # All imports are re-exported via __all__

from .config import Settings, create_settings, get_settings  # noqa: F401
from .error_codes import (  # noqa: F401
    ERROR_CODE_FAMILY,
    APIClientErrorCode,
    BlockedPropertyErrorCode,
    CIDRErrorCode,
    ConfigurationErrorCode,
    CredentialErrorCode,
    ErrorCode,
    GroupErrorCode,
    HelperErrorCode,
    IPAllowlistErrorCode,
    PropertyErrorCode,
    RoleErrorCode,
    SupportErrorCode,
    UserErrorCode,
    get_error_family,
    get_error_info,
)
from .exceptions import (  # noqa: F401
    APIException,
    ConfigurationException,
    IAMException,
    RequestException,
    ValidationException,
)
from .logfire_config import (  # noqa: F401
    initialize_logfire,
    instrument_httpx,
    setup_logfire,
)
from .logger import get_logger, operation_context, setup_logging  # noqa: F401
from .session import build_session  # noqa: F401

__all__ = [
    # Configuration
    "Settings",
    "create_settings",
    "get_settings",
    # Error codes
    "ERROR_CODE_FAMILY",
    "ErrorCode",
    "APIClientErrorCode",
    "BlockedPropertyErrorCode",
    "CIDRErrorCode",
    "ConfigurationErrorCode",
    "CredentialErrorCode",
    "GroupErrorCode",
    "HelperErrorCode",
    "IPAllowlistErrorCode",
    "PropertyErrorCode",
    "RoleErrorCode",
    "SupportErrorCode",
    "UserErrorCode",
    "get_error_family",
    "get_error_info",
    # Exceptions
    "IAMException",
    "ConfigurationException",
    "ValidationException",
    "RequestException",
    "APIException",
    # Logging
    "get_logger",
    "operation_context",
    "setup_logging",
    "initialize_logfire",
    "instrument_httpx",
    "setup_logfire",
    # Session
    "build_session",
]

"""
akamai-iam Package

Typed client for the Akamai Identity and Access Management API, built on
httpx sessions and pydantic models.
"""

from akamai_iam.client import IAM
from akamai_iam.core.exceptions import (
    APIException,
    IAMException,
    RequestException,
    ValidationException,
)
from akamai_iam.errors import APIError

__version__ = "0.1.0"

__all__ = [
    "IAM",
    "APIError",
    "APIException",
    "IAMException",
    "RequestException",
    "ValidationException",
    "core",
    "schemas",
    "services",
]

"""
Services Package

One service class per IAM resource family, all sharing BaseService.
"""

from .api_clients import APIClientService
from .base import BaseService
from .cidr import CIDRService, IPAllowlistService
from .credentials import CredentialService
from .groups import GroupService
from .helper import HelperService
from .properties import BlockedPropertyService, PropertyService
from .roles import RoleService
from .support import SupportService
from .users import UserService

__all__ = [
    "BaseService",
    "APIClientService",
    "BlockedPropertyService",
    "CIDRService",
    "CredentialService",
    "GroupService",
    "HelperService",
    "IPAllowlistService",
    "PropertyService",
    "RoleService",
    "SupportService",
    "UserService",
]

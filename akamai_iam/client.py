"""
IAM Client

Aggregate entry point exposing one service per IAM resource family.

Usage:
    from akamai_iam import IAM

    with IAM(auth=edgegrid_auth) as iam:
        group = iam.groups.create_group(group_id=12345, group_name="Sub")
"""

from typing import Any, Optional

import httpx

from akamai_iam.core.config import Settings, get_settings
from akamai_iam.core.logfire_config import initialize_logfire
from akamai_iam.core.logger import get_logger
from akamai_iam.core.session import build_session
from akamai_iam.services.api_clients import APIClientService
from akamai_iam.services.cidr import CIDRService, IPAllowlistService
from akamai_iam.services.credentials import CredentialService
from akamai_iam.services.groups import GroupService
from akamai_iam.services.helper import HelperService
from akamai_iam.services.properties import BlockedPropertyService, PropertyService
from akamai_iam.services.roles import RoleService
from akamai_iam.services.support import SupportService
from akamai_iam.services.users import UserService

logger = get_logger(__name__)


class IAM:
    """
    Client for the Akamai Identity and Access Management API.

    A session built here is owned and closed by the client; an injected
    session is left open for its owner to close.
    """

    def __init__(
        self,
        session: Optional[httpx.Client] = None,
        settings: Optional[Settings] = None,
        *,
        auth: Optional[httpx.Auth] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self._owns_session = session is None
        self.session = session or build_session(
            self.settings, auth=auth, transport=transport
        )

        if self.settings.logfire__enabled:
            initialize_logfire(self.session)

        self.api_clients = APIClientService(self.session)
        self.credentials = CredentialService(self.session)
        self.cidr = CIDRService(self.session)
        self.ip_allowlist = IPAllowlistService(self.session)
        self.groups = GroupService(self.session)
        self.roles = RoleService(self.session)
        self.properties = PropertyService(self.session)
        self.blocked_properties = BlockedPropertyService(self.session)
        self.users = UserService(self.session)
        self.support = SupportService(self.session)
        self.helper = HelperService(self.session)

        logger.debug(
            "IAM client ready - base_url: %s, owns_session: %s",
            self.session.base_url,
            self._owns_session,
        )

    def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "IAM":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

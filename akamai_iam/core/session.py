"""
Session Builder

Creates the httpx.Client every IAM service sends its requests through.
Request signing is not done here: pass an ``httpx.Auth`` implementing
EdgeGrid (or any other scheme) as ``auth``.
"""

from typing import Dict, Optional

import httpx

from akamai_iam.core.config import Settings, get_settings


def build_session(
    settings: Optional[Settings] = None,
    *,
    auth: Optional[httpx.Auth] = None,
    transport: Optional[httpx.BaseTransport] = None,
    extra_headers: Optional[Dict[str, str]] = None,
) -> httpx.Client:
    """
    Build an ``httpx.Client`` pointed at the configured IAM host.

    Args:
        settings: Settings to read host, timeout and headers from
        auth: Request signer applied to every request
        transport: Transport override, mainly for tests
        extra_headers: Headers merged over the defaults

    Returns:
        httpx.Client: Client with base URL, timeout and default headers set
    """
    settings = settings or get_settings()
    headers: Dict[str, str] = {
        "User-Agent": settings.iam__user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)

    params = {}
    if settings.iam__account_switch_key:
        params["accountSwitchKey"] = settings.iam__account_switch_key

    return httpx.Client(
        base_url=settings.iam__host,
        timeout=httpx.Timeout(settings.iam__timeout),
        headers=headers,
        params=params,
        auth=auth,
        transport=transport,
    )

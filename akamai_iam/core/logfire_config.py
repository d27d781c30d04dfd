"""
Logfire Configuration Module

Configures Logfire from settings and traces the httpx session IAM requests
go through.

Usage:
    from akamai_iam.core.logfire_config import initialize_logfire

    results = initialize_logfire(session)  # idempotent
    # results: {"configured": bool, "instrumentation": {"httpx": bool}}
"""

import logging
from typing import Any, Dict, Optional, Set

import httpx
import logfire

from akamai_iam.core.config import get_settings
from akamai_iam.core.logger import setup_logfire_handler, setup_logging

logger = logging.getLogger("akamai_iam.logfire")


class _LogfireState:
    """What this process has already done with Logfire."""

    def __init__(self) -> None:
        self.configured = False
        # id() of each instrumented session, None for the global hook
        self.sessions: Set[Optional[int]] = set()

    def session_key(self, session: Optional[httpx.Client]) -> Optional[int]:
        return None if session is None else id(session)

    def is_traced(self, session: Optional[httpx.Client]) -> bool:
        return None in self.sessions or self.session_key(session) in self.sessions


_state = _LogfireState()


def setup_logfire() -> bool:
    """
    Configure Logfire once per process.

    Returns:
        bool: Whether Logfire is configured
    """
    settings = get_settings()
    if not settings.logfire__enabled or _state.configured:
        return _state.configured

    options: Dict[str, Any] = {
        "service_name": settings.logfire__service_name,
        "environment": settings.logfire__environment,
    }
    if settings.logfire__token:
        options["token"] = settings.logfire__token.get_secret_value()

    try:
        logfire.configure(**options)
    except (TypeError, ValueError) as e:
        logger.error("Logfire configuration rejected: %s", e)
        return False

    setup_logging()
    setup_logfire_handler()
    logger.info("Logfire configured for service %s", settings.logfire__service_name)
    _state.configured = True
    return True


def instrument_httpx(session: Optional[httpx.Client] = None) -> bool:
    """
    Trace IAM requests with Logfire.

    Args:
        session: Session to trace; every httpx client when omitted

    Returns:
        bool: Whether requests sent through ``session`` are traced
    """
    settings = get_settings()
    if not settings.logfire__enabled or not settings.logfire__instrument__httpx:
        return False
    if _state.is_traced(session):
        return True

    capture_all = settings.logfire__httpx_capture_all
    try:
        if session is None:
            logfire.instrument_httpx(capture_all=capture_all)
        else:
            logfire.instrument_httpx(session, capture_all=capture_all)
    except (ImportError, RuntimeError, TypeError) as e:
        logger.warning("Could not trace IAM requests with Logfire: %s", e)
        return False

    logger.info("Tracing IAM requests (capture_all=%s)", capture_all)
    _state.sessions.add(_state.session_key(session))
    return True


def initialize_logfire(session: Optional[httpx.Client] = None) -> Dict[str, Any]:
    """
    Configure Logfire and trace ``session``.

    Returns:
        dict: ``configured`` plus the status of each instrumentation
    """
    configured = setup_logfire()
    return {
        "configured": configured,
        "instrumentation": {"httpx": instrument_httpx(session) if configured else False},
    }

"""
Core Logger Module

Logging for akamai-iam. Every record is stamped with the IAM operation that
emitted it (``create group``, ``lock user``...), shown on the console and in
the optional rotating file, and forwarded to Logfire as a tag when Logfire
is enabled. The first get_logger() call installs the handlers.
"""

import logging
import logging.config
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import logfire

from akamai_iam.core.config import Settings, get_settings

LOGGER_NAME = "akamai_iam"

# Attribute names whose values never leave the process unredacted
SENSITIVE_MARKERS = (
    "password",
    "secret",
    "token",
    "authorization",
    "switchkey",
    "switch_key",
)


def _redact(attrs: Dict[str, Any]) -> Dict[str, Any]:
    """Scalar-only copy of ``attrs`` with credentials masked."""
    safe: Dict[str, Any] = {}
    for name, value in attrs.items():
        if any(marker in name.lower() for marker in SENSITIVE_MARKERS):
            safe[name] = "<redacted>"
        elif value is None or isinstance(value, (str, int, float, bool)):
            safe[name] = value
        else:
            safe[name] = repr(value)
    return safe


# Name of the IAM operation currently running in this context
_operation_context: ContextVar[Optional[str]] = ContextVar("operation", default=None)


def get_operation() -> Optional[str]:
    """Get the IAM operation running in the current context."""
    return _operation_context.get()


@contextmanager
def operation_context(operation: str) -> Iterator[None]:
    """Tag every log record emitted inside the block with ``operation``."""
    token = _operation_context.set(operation)
    try:
        yield
    finally:
        _operation_context.reset(token)


class OperationFilter(logging.Filter):
    """Copy the running operation onto the record as ``iam_operation``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.iam_operation = get_operation() or "-"
        return True


# LogRecord internals that are not forwarded as Logfire attributes
_RECORD_INTERNALS = frozenset(vars(logging.makeLogRecord({}))) | {
    "message",
    "iam_operation",
}


class OperationAwareLogfireHandler(logging.Handler):
    """
    Forward records to Logfire tagged ``op:<operation>``.

    Records Logfire refuses are written by ``fallback`` instead.
    """

    def __init__(
        self,
        level: int | str = logging.NOTSET,
        fallback: Optional[logging.Handler] = None,
        logfire_instance: Any = None,
    ) -> None:
        super().__init__(level=level)
        self.fallback = fallback or logging.StreamHandler(sys.stderr)
        self.logfire_instance = logfire_instance or logfire

    def emit(self, record: logging.LogRecord) -> None:
        operation = get_operation()
        target = self.logfire_instance
        if operation:
            target = target.with_tags(f"op:{operation}")

        attributes = _redact(
            {k: v for k, v in vars(record).items() if k not in _RECORD_INTERNALS}
        )
        attributes.update(
            {
                "code.filepath": record.pathname,
                "code.lineno": record.lineno,
                "code.function": record.funcName,
            }
        )
        if operation:
            attributes["iam.operation"] = operation

        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            message = str(record.msg)

        try:
            target.log(
                level=record.levelname.lower(),
                msg_template=message,
                attributes=attributes,
                exc_info=record.exc_info,
            )
        except (AttributeError, TypeError, ValueError):
            self.fallback.emit(record)


def get_logging_config(settings: Optional[Settings] = None) -> Dict[str, Any]:
    """
    Build the dictConfig for the package logger.

    The console handler is always present; a rotating file handler is added
    when ``log__file_enabled`` is set. Logfire is attached separately by
    setup_logfire_handler().
    """
    settings = settings or get_settings()
    level = settings.log_level.upper()

    handlers: Dict[str, Dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "console",
            "filters": ["operation"],
            "stream": sys.stderr,
        },
    }

    if settings.log__file_enabled:
        log_file = settings.log__file_path
        if log_file is None:
            log_dir = Path(settings.log__dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file = str(log_dir / "akamai_iam.log")
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": settings.log__file_level,
            "formatter": "file",
            "filters": ["operation"],
            "filename": log_file,
            "maxBytes": settings.log__file_max_bytes,
            "backupCount": settings.log__file_backup_count,
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {"operation": {"()": OperationFilter}},
        "formatters": {
            "console": {
                "format": "%(asctime)s %(levelname)s [%(iam_operation)s] %(message)s",
                "datefmt": "%H:%M:%S",
            },
            "file": {
                "format": (
                    "%(asctime)s %(levelname)s %(name)s [%(iam_operation)s] "
                    "%(module)s:%(lineno)d %(message)s"
                ),
                "datefmt": "%Y-%m-%dT%H:%M:%S",
            },
        },
        "handlers": handlers,
        "loggers": {
            LOGGER_NAME: {
                "level": level,
                "handlers": list(handlers),
                "propagate": False,
            },
            # Transport chatter only when something goes wrong
            "httpx": {"level": "WARNING", "propagate": True},
            "httpcore": {"level": "WARNING", "propagate": True},
        },
    }


def setup_logfire_handler() -> bool:
    """
    Attach the Logfire handler to the package logger.

    Call after logfire.configure() and setup_logging(), otherwise dictConfig
    drops the handler. Idempotent.
    """
    settings = get_settings()
    if not settings.logfire__enabled:
        return False

    package_logger = logging.getLogger(LOGGER_NAME)
    if any(isinstance(h, OperationAwareLogfireHandler) for h in package_logger.handlers):
        return True

    fallback = logging.StreamHandler(sys.stderr)
    fallback.addFilter(OperationFilter())
    fallback.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s [%(iam_operation)s] %(message)s")
    )
    package_logger.addHandler(
        OperationAwareLogfireHandler(level=settings.log_level.upper(), fallback=fallback)
    )
    logging.getLogger(f"{LOGGER_NAME}.logfire").info("Logfire log forwarding enabled")
    return True


@lru_cache(maxsize=1)
def setup_logging() -> None:
    """Apply the logging configuration once per process."""
    settings = get_settings()
    logging.config.dictConfig(get_logging_config(settings))
    logging.getLogger(f"{LOGGER_NAME}.startup").debug(
        "Logging ready - environment: %s, level: %s, host: %s, logfire: %s",
        settings.environment,
        settings.log_level,
        settings.iam__host,
        settings.logfire__enabled,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the ``akamai_iam`` namespace.

    Args:
        name: Usually ``__name__``; prefixed with ``akamai_iam.`` when outside it

    Example:
        logger = get_logger(__name__)
        logger.debug("%s", GroupErrorCode.CREATE_GROUP)
    """
    setup_logging()

    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)

"""
Custom Exceptions

Exception classes raised by IAM operations.

USAGE GUIDELINES:
- Always pass an ErrorCode enum member naming the failing operation
- ValidationException: the request failed local validation, nothing was sent
- RequestException: the request could not be sent or its response decoded
- APIException: the API answered with a status the operation does not accept;
  the decoded APIError is available as ``error`` and as ``__cause__``
- Use matches() rather than comparing messages to classify a failure
"""

import json
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from pydantic import ValidationError

    from akamai_iam.core.error_codes import ErrorCode
    from akamai_iam.errors import APIError


def _safe_serialize(obj: Any) -> Any:
    """Safely serialize an object for JSON, using repr() for non-serializable objects."""
    try:
        json.dumps(obj)
        return obj
    except (TypeError, ValueError):
        return repr(obj)


class IAMException(Exception):
    """Base exception for IAM client errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional["ErrorCode | str"] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization with safe handling."""
        safe_details = {k: _safe_serialize(v) for k, v in self.details.items()}

        result = {
            "message": self.message,
            "code": (
                self.error_code.value
                if self.error_code is not None and hasattr(self.error_code, "value")
                else self.error_code
            ),
            "details": safe_details,
        }

        # Priority: custom cause > __cause__ > __context__
        cause = (
            self.cause
            or getattr(self, "__cause__", None)
            or getattr(self, "__context__", None)
        )
        if cause:
            result["cause"] = {"type": cause.__class__.__name__, "message": str(cause)}

        return result

    @classmethod
    def wrap(
        cls,
        exc: BaseException,
        message: str,
        error_code: Optional["ErrorCode"] = None,
        **context: Any,
    ) -> "IAMException":
        """
        Wrap a lower-level exception while preserving the exception chain.

        Args:
            exc: The original exception to wrap
            message: Operation-level error message
            error_code: ErrorCode enum member of the failing operation
            **context: Additional context to include in details

        Returns:
            New exception instance with preserved exception chain

        Example:
            try:
                response = session.request("GET", path)
            except httpx.HTTPError as e:
                raise RequestException.wrap(
                    e, f"get group: request failed: {e}",
                    GroupErrorCode.GET_GROUP,
                    path=path,
                ) from e
        """
        return cls(message=message, error_code=error_code, details=context, cause=exc)

    def matches(self, target: "ErrorCode | str | BaseException") -> bool:
        """
        Report whether this error, or any error in its chain, is ``target``.

        ``target`` may be an operation code (compared with ``error_code``) or an
        exception such as an APIError (compared with ``==``).
        """
        seen = set()
        current: Optional[BaseException] = self
        while current is not None and id(current) not in seen:
            seen.add(id(current))
            if isinstance(target, BaseException):
                if current == target:
                    return True
            elif getattr(current, "error_code", None) == target:
                return True
            current = current.__cause__ or getattr(current, "cause", None)
        return False

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r}, "
            f"cause={self.cause!r})"
        )


class ConfigurationException(IAMException):
    """Exception raised when settings cannot be loaded."""


class ValidationException(IAMException):
    """Exception raised when a request fails local validation."""

    def __init__(
        self,
        message: str,
        error_code: Optional["ErrorCode | str"] = None,
        details: Optional[Dict[str, Any]] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, details, **kwargs)
        self.errors = errors or []

    @classmethod
    def from_validation_error(
        cls, error_code: "ErrorCode", exc: "ValidationError"
    ) -> "ValidationException":
        """Build one aggregated exception out of every pydantic violation."""
        errors = [
            {
                "field": ".".join(str(part) for part in err["loc"]) or "request",
                "message": err["msg"],
                "type": err["type"],
            }
            for err in exc.errors(include_url=False)
        ]
        errors.sort(key=lambda item: item["field"])
        lines = "\n".join(f"{item['field']}: {item['message']}" for item in errors)
        return cls(
            f"{error_code}: struct validation:\n{lines}",
            error_code,
            errors=errors,
            cause=exc,
        )


class RequestException(IAMException):
    """Exception raised when a request cannot be sent or its response decoded."""


class APIException(IAMException):
    """Exception raised when the API answers with an unexpected status."""

    def __init__(
        self,
        error_code: "ErrorCode",
        error: "APIError",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(f"{error_code}: {error}", error_code, details, cause=error)
        self.error = error

    @property
    def status_code(self) -> int:
        """Transport-level HTTP status of the failed response."""
        return self.error.status_code

"""Uniform error type decoded from IAM problem responses."""

import json
from typing import Any, Dict, Optional

import httpx

from akamai_iam.core.logger import get_logger

logger = get_logger(__name__)

UNMARSHAL_ERROR_TITLE = (
    "Failed to unmarshal error body. IAM API failed. "
    "Check details for more information."
)


class APIError(Exception):
    """
    Problem details returned by the IAM API.

    ``status_code`` is always the transport status of the response, while
    ``http_status`` keeps whatever status the payload itself claimed; the two
    are not reconciled. Two errors are equal when their status codes and
    rendered messages match.
    """

    def __init__(
        self,
        type: str = "",
        title: str = "",
        detail: str = "",
        status_code: int = 0,
        instance: str = "",
        http_status: int = 0,
        errors: Any = None,
    ) -> None:
        self.type = type
        self.title = title
        self.detail = detail
        self.status_code = status_code
        self.instance = instance
        self.http_status = http_status
        self.errors = errors
        super().__init__(str(self))

    @classmethod
    def from_response(cls, response: httpx.Response) -> "APIError":
        """Decode an error response, falling back to the raw body text."""
        body = response.read()
        text = body.decode("utf-8", errors="replace")
        try:
            payload = json.loads(text)
            if not isinstance(payload, dict):
                raise ValueError(f"unexpected error payload type {type(payload).__name__}")
        except ValueError as exc:
            logger.error("could not unmarshal API error: %s", exc)
            return cls(
                title=UNMARSHAL_ERROR_TITLE,
                detail=text,
                status_code=response.status_code,
            )

        return cls(
            type=_as_str(payload.get("type")),
            title=_as_str(payload.get("title")),
            detail=_as_str(payload.get("detail")),
            instance=_as_str(payload.get("instance")),
            http_status=_as_int(payload.get("httpStatus")),
            errors=payload.get("errors"),
            status_code=response.status_code,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Wire-style representation with empty optional fields dropped."""
        result: Dict[str, Any] = {
            "type": self.type,
            "title": self.title,
        }
        if self.instance:
            result["instance"] = self.instance
        result["detail"] = self.detail
        result["statusCode"] = self.status_code
        if self.http_status:
            result["httpStatus"] = self.http_status
        if self.errors is not None:
            result["errors"] = self.errors
        return result

    def __str__(self) -> str:
        return "API error: \n" + json.dumps(self.to_dict(), indent="\t")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, APIError):
            return NotImplemented
        return self.status_code == other.status_code and str(self) == str(other)

    def __hash__(self) -> int:
        return hash((self.status_code, str(self)))

    def __repr__(self) -> str:
        return (
            f"APIError(type={self.type!r}, title={self.title!r}, "
            f"detail={self.detail!r}, status_code={self.status_code!r})"
        )


def _as_str(value: Optional[Any]) -> str:
    return "" if value is None else str(value)


def _as_int(value: Optional[Any]) -> int:
    try:
        return int(value) if value is not None else 0
    except (TypeError, ValueError):
        return 0


__all__ = ["APIError", "UNMARSHAL_ERROR_TITLE"]

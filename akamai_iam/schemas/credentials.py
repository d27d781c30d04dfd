"""API client credential request and response schemas."""

import re
from datetime import datetime, timedelta, timezone
from typing import Any, Optional, Tuple

from pydantic import (
    Field,
    PrivateAttr,
    ValidatorFunctionWrapHandler,
    field_serializer,
    field_validator,
    model_validator,
)

from akamai_iam.schemas.common import CredentialStatus, IAMModel, PositiveID

# Fractional seconds of an RFC 3339 timestamp
_FRACTION = re.compile(r"[Tt ]\d{2}:\d{2}:\d{2}\.(\d+)")


def format_expiry(value: datetime, fraction: Optional[str] = None) -> str:
    """
    Render an expiry as RFC 3339.

    ``fraction`` holds the sub-second digits to send as they were written;
    without it the microseconds of ``value`` are used with trailing zeros
    trimmed. The credential update endpoint rejects whole-second timestamps,
    so an expiry without sub-second precision is sent one nanosecond later
    (``2026-05-14T11:10:25.000000001Z``). Naive datetimes are taken as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    if fraction is None:
        fraction = f"{value.microsecond:06d}".rstrip("0")
    if not fraction.strip("0"):
        fraction = "000000001"

    offset = value.utcoffset() or timedelta(0)
    if offset == timedelta(0):
        suffix = "Z"
    else:
        minutes = int(offset.total_seconds()) // 60
        sign = "+" if minutes >= 0 else "-"
        hours, minutes = divmod(abs(minutes), 60)
        suffix = f"{sign}{hours:02d}:{minutes:02d}"

    return f"{value.strftime('%Y-%m-%dT%H:%M:%S')}.{fraction}{suffix}"


class CredentialActions(IAMModel):
    """Actions the caller may perform on a credential."""

    deactivate: bool = False
    delete: bool = False
    activate: bool = False
    edit_description: bool = Field(False, alias="editDescription")
    edit_expiration: bool = Field(False, alias="editExpiration")


class Credential(IAMModel):
    """Credential as returned by the list and get endpoints."""

    client_token: str = Field("", alias="clientToken")
    created_on: Optional[datetime] = Field(None, alias="createdOn")
    credential_id: int = Field(0, alias="credentialId")
    description: str = ""
    expires_on: Optional[datetime] = Field(None, alias="expiresOn")
    status: Optional[CredentialStatus] = None
    max_allowed_expiry: Optional[datetime] = Field(None, alias="maxAllowedExpiry")
    actions: Optional[CredentialActions] = None


class CreateCredentialResponse(IAMModel):
    """Newly created credential, including its one-time secret."""

    client_secret: str = Field("", alias="clientSecret")
    client_token: str = Field("", alias="clientToken")
    created_on: Optional[datetime] = Field(None, alias="createdOn")
    credential_id: int = Field(0, alias="credentialId")
    description: str = ""
    expires_on: Optional[datetime] = Field(None, alias="expiresOn")
    status: Optional[CredentialStatus] = None


class UpdateCredentialResponse(IAMModel):
    """Credential state after an update; ``description`` may be null."""

    status: Optional[CredentialStatus] = None
    expires_on: Optional[datetime] = Field(None, alias="expiresOn")
    description: Optional[str] = None


class CreateCredentialRequest(IAMModel):
    client_id: Optional[str] = None


class ListCredentialsRequest(IAMModel):
    client_id: Optional[str] = None
    actions: bool = False


class GetCredentialRequest(IAMModel):
    credential_id: PositiveID
    client_id: Optional[str] = None
    actions: bool = False


class UpdateCredentialRequestBody(IAMModel):
    """
    Body of the credential update call.

    An ``expiresOn`` given as text keeps its fractional digits (up to
    nanoseconds) on the wire even though ``expires_on`` itself only holds
    microseconds.
    """

    omit_if_none = frozenset({"description"})

    description: Optional[str] = None
    expires_on: datetime = Field(..., alias="expiresOn")
    status: CredentialStatus

    # (expiry the digits belong to, fractional digits as written)
    _expiry_fraction: Optional[Tuple[datetime, str]] = PrivateAttr(default=None)

    @model_validator(mode="wrap")
    @classmethod
    def keep_fraction_digits(
        cls, data: Any, handler: ValidatorFunctionWrapHandler
    ) -> "UpdateCredentialRequestBody":
        if isinstance(data, cls):
            data = data.model_dump(by_alias=True, exclude_unset=True)

        fraction = None
        if isinstance(data, dict):
            key = "expiresOn" if "expiresOn" in data else "expires_on"
            raw = data.get(key)
            match = _FRACTION.search(raw) if isinstance(raw, str) else None
            if match:
                fraction = match.group(1)
                if len(fraction) > 9:
                    raise ValueError(
                        f"expiresOn: at most 9 fractional digits allowed, got '{raw}'"
                    )
                # datetime parsing stops at microseconds
                truncated = raw[: match.start(1)] + fraction[:6] + raw[match.end(1) :]
                data = {**data, key: truncated}

        model = handler(data)
        if fraction is not None:
            model._expiry_fraction = (model.expires_on, fraction)
        return model

    @field_validator("description")
    @classmethod
    def blank_description_is_absent(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    @field_serializer("expires_on")
    def serialize_expires_on(self, value: datetime) -> str:
        fraction = None
        if self._expiry_fraction is not None and self._expiry_fraction[0] == value:
            fraction = self._expiry_fraction[1]
        return format_expiry(value, fraction)


class UpdateCredentialRequest(IAMModel):
    credential_id: PositiveID
    client_id: Optional[str] = None
    body: UpdateCredentialRequestBody


class DeleteCredentialRequest(IAMModel):
    credential_id: PositiveID
    client_id: Optional[str] = None


class DeactivateCredentialRequest(IAMModel):
    credential_id: PositiveID
    client_id: Optional[str] = None


class DeactivateCredentialsRequest(IAMModel):
    client_id: Optional[str] = None


__all__ = [
    "CreateCredentialRequest",
    "CreateCredentialResponse",
    "Credential",
    "CredentialActions",
    "DeactivateCredentialRequest",
    "DeactivateCredentialsRequest",
    "DeleteCredentialRequest",
    "GetCredentialRequest",
    "ListCredentialsRequest",
    "UpdateCredentialRequest",
    "UpdateCredentialRequestBody",
    "UpdateCredentialResponse",
    "format_expiry",
]

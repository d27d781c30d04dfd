"""CIDR allowlist and IP allowlist schemas."""

import ipaddress
from datetime import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, Field

from akamai_iam.schemas.common import IAMModel, NonBlankStr, PositiveID


def validate_cidr(value: str) -> str:
    """
    Accept an IPv4 or IPv6 address followed by a decimal prefix length.

    Netmask and hostmask suffixes (``/255.255.255.0``) and IPv6 zones
    (``fe80::1%eth0/64``) are refused.
    """
    address, slash, prefix = value.partition("/")
    if (
        not slash
        or "%" in address
        or not (prefix.isascii() and prefix.isdigit())
        or (len(prefix) > 1 and prefix.startswith("0"))
    ):
        raise ValueError(f"invalid CIDR address: {value}")
    try:
        ipaddress.ip_network(value, strict=False)
    except ValueError as exc:
        raise ValueError(f"invalid CIDR address: {value}") from exc
    return value


CIDR = Annotated[NonBlankStr, AfterValidator(validate_cidr)]


class CIDRActions(IAMModel):
    delete: bool = False
    edit: bool = False


class CIDRBlock(IAMModel):
    """
    One allowlist entry.

    ``comments`` is nullable: check ``"comments" in block.model_fields_set`` to
    tell an explicit null from an absent field.
    """

    actions: Optional[CIDRActions] = None
    cidr_block: str = Field("", alias="cidrBlock")
    cidr_block_id: int = Field(0, alias="cidrBlockId")
    comments: Optional[str] = None
    created_by: str = Field("", alias="createdBy")
    created_date: Optional[datetime] = Field(None, alias="createdDate")
    enabled: bool = False
    modified_by: str = Field("", alias="modifiedBy")
    modified_date: Optional[datetime] = Field(None, alias="modifiedDate")


class ListCIDRBlocksRequest(IAMModel):
    actions: bool = False


class CreateCIDRBlockRequest(IAMModel):
    """Body of the create CIDR block call."""

    omit_if_none = frozenset({"comments"})

    cidr_block: CIDR = Field(..., alias="cidrBlock")
    comments: Optional[str] = None
    enabled: bool = False


class GetCIDRBlockRequest(IAMModel):
    cidr_block_id: PositiveID
    actions: bool = False


class UpdateCIDRBlockRequestBody(IAMModel):
    omit_if_none = frozenset({"comments"})

    cidr_block: CIDR = Field(..., alias="cidrBlock")
    comments: Optional[str] = None
    enabled: bool = False


class UpdateCIDRBlockRequest(IAMModel):
    cidr_block_id: PositiveID
    body: UpdateCIDRBlockRequestBody


class DeleteCIDRBlockRequest(IAMModel):
    cidr_block_id: PositiveID


class ValidateCIDRBlockRequest(IAMModel):
    cidr_block: CIDR


class IPAllowlistStatus(IAMModel):
    enabled: bool = False


__all__ = [
    "CIDR",
    "CIDRActions",
    "CIDRBlock",
    "CreateCIDRBlockRequest",
    "DeleteCIDRBlockRequest",
    "GetCIDRBlockRequest",
    "IPAllowlistStatus",
    "ListCIDRBlocksRequest",
    "UpdateCIDRBlockRequest",
    "UpdateCIDRBlockRequestBody",
    "ValidateCIDRBlockRequest",
    "validate_cidr",
]

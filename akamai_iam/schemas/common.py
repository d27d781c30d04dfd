"""Shared base model, enumerations and constrained types."""

from enum import StrEnum
from typing import Annotated, Any, ClassVar, Dict, FrozenSet

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    StringConstraints,
    model_serializer,
)

NonBlankStr = Annotated[str, StringConstraints(min_length=1)]
PositiveID = Annotated[int, Field(gt=0)]


class IAMModel(BaseModel):
    """
    Base for IAM payloads: camelCase aliases on the wire, snake_case in Python.

    Fields named in ``omit_if_none`` are left out of serialized output while
    they are None; every other None goes out as ``null``. Instances handed
    back in for validation are validated again, so a request changed after
    construction is still checked.
    """

    model_config = ConfigDict(
        populate_by_name=True, extra="ignore", revalidate_instances="always"
    )

    omit_if_none: ClassVar[FrozenSet[str]] = frozenset()

    @model_serializer(mode="wrap")
    def drop_omitted_none(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> Dict[str, Any]:
        data = handler(self)
        fields = type(self).model_fields
        for name in self.omit_if_none:
            key = (fields[name].alias or name) if info.by_alias else name
            if key in data and data[key] is None:
                del data[key]
        return data

    def to_body(self) -> Dict[str, Any]:
        """Serialize as a JSON request body."""
        return self.model_dump(mode="json", by_alias=True)


class ClientType(StrEnum):
    """Kind of API client."""

    CLIENT = "CLIENT"
    USER_CLIENT = "USER_CLIENT"
    SERVICE_ACCOUNT = "SERVICE_ACCOUNT"


class AccessLevel(StrEnum):
    """Access an API client has to one API."""

    READ_ONLY = "READ-ONLY"
    READ_WRITE = "READ-WRITE"


class CredentialStatus(StrEnum):
    """Lifecycle state of an API client credential."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    DELETED = "DELETED"


__all__ = [
    "AccessLevel",
    "ClientType",
    "CredentialStatus",
    "IAMModel",
    "NonBlankStr",
    "PositiveID",
]

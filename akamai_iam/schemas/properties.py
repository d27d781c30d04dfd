"""Property and blocked-property schemas."""

from datetime import datetime
from enum import StrEnum
from typing import List, Optional

from pydantic import Field

from akamai_iam.schemas.common import IAMModel, NonBlankStr, PositiveID


class PropertyUserType(StrEnum):
    """Filter for the users listed against a property."""

    ALL = "all"
    ASSIGNED = "assigned"
    BLOCKED = "blocked"


class PropertyActions(IAMModel):
    move: bool = False


class Property(IAMModel):
    property_id: int = Field(0, alias="propertyId")
    property_name: str = Field("", alias="propertyName")
    property_type_description: str = Field("", alias="propertyTypeDescription")
    group_id: int = Field(0, alias="groupId")
    group_name: str = Field("", alias="groupName")
    actions: PropertyActions = Field(default_factory=PropertyActions)


class GetPropertyResponse(IAMModel):
    arl_config_file: str = Field("", alias="arlConfigFile")
    created_by: str = Field("", alias="createdBy")
    created_date: Optional[datetime] = Field(None, alias="createdDate")
    group_id: int = Field(0, alias="groupId")
    group_name: str = Field("", alias="groupName")
    modified_by: str = Field("", alias="modifiedBy")
    modified_date: Optional[datetime] = Field(None, alias="modifiedDate")
    property_id: int = Field(0, alias="propertyId")
    property_name: str = Field("", alias="propertyName")


class PropertyUser(IAMModel):
    """User as listed for a property, also returned by block users."""

    first_name: str = Field("", alias="firstName")
    is_blocked: bool = Field(False, alias="isBlocked")
    last_name: str = Field("", alias="lastName")
    identity_id: str = Field("", alias="uiIdentityId")
    user_name: str = Field("", alias="uiUserName")


class ListPropertiesRequest(IAMModel):
    group_id: Optional[int] = None
    actions: bool = False


class GetPropertyRequest(IAMModel):
    property_id: PositiveID
    group_id: PositiveID


class ListUsersForPropertyRequest(IAMModel):
    property_id: PositiveID
    user_type: Optional[PropertyUserType] = None


class MovePropertyRequestBody(IAMModel):
    destination_group_id: PositiveID = Field(..., alias="destinationGroupId")
    source_group_id: PositiveID = Field(..., alias="sourceGroupId")


class MovePropertyRequest(IAMModel):
    property_id: PositiveID
    body: MovePropertyRequestBody


class MapPropertyIDToNameRequest(IAMModel):
    property_id: PositiveID
    group_id: PositiveID


class MapPropertyNameToIDRequest(IAMModel):
    property_name: NonBlankStr
    group_id: PositiveID


class BlockUserItem(IAMModel):
    identity_id: NonBlankStr = Field(..., alias="uiIdentityId")


class BlockUsersRequest(IAMModel):
    property_id: PositiveID
    body: List[BlockUserItem] = Field(..., min_length=1)


class ListBlockedPropertiesRequest(IAMModel):
    identity_id: NonBlankStr
    group_id: PositiveID


class UpdateBlockedPropertiesRequest(IAMModel):
    identity_id: NonBlankStr
    group_id: PositiveID
    properties: List[int] = Field(default_factory=list)


__all__ = [
    "BlockUserItem",
    "BlockUsersRequest",
    "GetPropertyRequest",
    "GetPropertyResponse",
    "ListBlockedPropertiesRequest",
    "ListPropertiesRequest",
    "ListUsersForPropertyRequest",
    "MapPropertyIDToNameRequest",
    "MapPropertyNameToIDRequest",
    "MovePropertyRequest",
    "MovePropertyRequestBody",
    "Property",
    "PropertyActions",
    "PropertyUser",
    "PropertyUserType",
    "UpdateBlockedPropertiesRequest",
]

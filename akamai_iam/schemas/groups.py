"""Group request and response schemas."""

from datetime import datetime
from enum import StrEnum
from typing import List, Optional

from pydantic import Field

from akamai_iam.schemas.common import IAMModel, NonBlankStr, PositiveID


class AffectedUserType(StrEnum):
    """Which users to report for a pending group move."""

    LOST_ACCESS = "lostAccess"
    GAIN_ACCESS = "gainAccess"


class GroupActions(IAMModel):
    delete: bool = False
    edit: bool = False


class Group(IAMModel):
    actions: Optional[GroupActions] = None
    created_by: str = Field("", alias="createdBy")
    created_date: Optional[datetime] = Field(None, alias="createdDate")
    group_id: int = Field(0, alias="groupId")
    group_name: str = Field("", alias="groupName")
    modified_by: str = Field("", alias="modifiedBy")
    modified_date: Optional[datetime] = Field(None, alias="modifiedDate")
    parent_group_id: int = Field(0, alias="parentGroupId")
    sub_groups: List["Group"] = Field(default_factory=list, alias="subGroups")


class GroupUser(IAMModel):
    """User whose access changes when a group moves."""

    identity_id: str = Field("", alias="uiIdentityId")
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    account_id: str = Field("", alias="accountId")
    email: str = ""
    user_name: str = Field("", alias="uiUserName")
    last_login_date: Optional[datetime] = Field(None, alias="lastLoginDate")


class CreateGroupRequest(IAMModel):
    """Create ``group_name`` as a subgroup of ``group_id``."""

    group_id: PositiveID
    group_name: NonBlankStr = Field(..., alias="groupName")


class GetGroupRequest(IAMModel):
    group_id: PositiveID
    actions: bool = False


class ListGroupsRequest(IAMModel):
    actions: bool = False


class ListAffectedUsersRequest(IAMModel):
    source_group_id: PositiveID
    destination_group_id: PositiveID
    user_type: Optional[AffectedUserType] = None


class RemoveGroupRequest(IAMModel):
    group_id: PositiveID


class UpdateGroupNameRequest(IAMModel):
    group_id: PositiveID
    group_name: NonBlankStr = Field(..., alias="groupName")


class MoveGroupRequest(IAMModel):
    """Body of the move group call."""

    source_group_id: PositiveID = Field(..., alias="sourceGroupId")
    destination_group_id: PositiveID = Field(..., alias="destinationGroupId")


__all__ = [
    "AffectedUserType",
    "CreateGroupRequest",
    "GetGroupRequest",
    "Group",
    "GroupActions",
    "GroupUser",
    "ListAffectedUsersRequest",
    "ListGroupsRequest",
    "MoveGroupRequest",
    "RemoveGroupRequest",
    "UpdateGroupNameRequest",
]

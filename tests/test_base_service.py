from enum import StrEnum

import httpx
import pytest

from akamai_iam.core.error_codes import GroupErrorCode
from akamai_iam.core.exceptions import (
    APIException,
    RequestException,
    ValidationException,
)
from akamai_iam.schemas.groups import CreateGroupRequest
from akamai_iam.services.base import PATH_PREFIX, BaseService, client_segment
from akamai_iam.services.groups import GroupService
from akamai_iam.services.roles import RoleService


class Color(StrEnum):
    RED = "red"


def test_query_sorts_keys_and_renders_booleans():
    query = BaseService._query(users=False, actions=True, groupId=None, kind=Color.RED)

    assert query == [("actions", "true"), ("kind", "red"), ("users", "false")]


def test_query_is_stable_for_same_input():
    first = BaseService._query(b=1, a=True)
    second = BaseService._query(a=True, b=1)

    assert first == second == [("a", "true"), ("b", "1")]


def test_same_get_twice_sends_identical_urls(fake_api):
    session, recorder = fake_api(200, {"roleId": 123456})
    service = RoleService(session)

    for _ in range(2):
        service.get_role(role_id=123456, users=True, actions=False, granted_roles=True)

    first, second = (str(request.url) for request in recorder.requests)
    assert first == second
    assert recorder.path == (
        "/identity-management/v2/user-admin/roles/123456"
        "?actions=false&grantedRoles=true&users=true"
    )


def test_client_segment_defaults_to_self():
    assert client_segment(None) == "self"
    assert client_segment("") == "self"
    assert client_segment("abc") == "abc"


def test_parse_accepts_model_mapping_and_keywords(fake_api):
    session, _ = fake_api()
    service = BaseService(session)
    op = GroupErrorCode.CREATE_GROUP

    model = CreateGroupRequest(group_id=1, group_name="a")
    assert service._parse(op, CreateGroupRequest, model) == model

    model.group_name = ""
    with pytest.raises(ValidationException):
        service._parse(op, CreateGroupRequest, model)
    model.group_name = "a"

    from_mapping = service._parse(
        op, CreateGroupRequest, {"group_id": 1, "groupName": "b"}
    )
    assert from_mapping.group_name == "b"

    from_fields = service._parse(
        op, CreateGroupRequest, None, {"group_id": 2, "group_name": "c"}
    )
    assert (from_fields.group_id, from_fields.group_name) == (2, "c")

    overridden = service._parse(op, CreateGroupRequest, model, {"group_name": "d"})
    assert (overridden.group_id, overridden.group_name) == (1, "d")


def test_validation_aggregates_every_violation_sorted(fake_api):
    session, recorder = fake_api(201, {})
    service = GroupService(session)

    with pytest.raises(ValidationException) as exc_info:
        service.create_group({"group_id": 0})

    exc = exc_info.value
    message = str(exc)
    assert message.startswith("create group: struct validation:\n")
    fields = [item["field"] for item in exc.errors]
    assert fields == sorted(fields)
    assert "groupName" in fields and "group_id" in fields
    assert exc.matches(GroupErrorCode.CREATE_GROUP)
    assert not recorder.requests


def test_transport_failure_becomes_request_exception():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    session = httpx.Client(
        base_url="https://iam.example.test", transport=httpx.MockTransport(refuse)
    )
    service = GroupService(session)

    with pytest.raises(RequestException) as exc_info:
        service.list_groups()

    assert str(exc_info.value).startswith("list groups: request failed: ")
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    session.close()


def test_unexpected_success_status_is_an_api_error(fake_api):
    session, _ = fake_api(200, {"groupId": 1})
    service = GroupService(session)

    with pytest.raises(APIException) as exc_info:
        service.create_group(group_id=1, group_name="x")

    assert exc_info.value.status_code == 200


def test_undecodable_success_body_is_request_exception(fake_api):
    session, _ = fake_api(200, text="not json")
    service = GroupService(session)

    with pytest.raises(RequestException) as exc_info:
        service.get_group(group_id=1)

    assert str(exc_info.value).startswith("get group: request failed: ")


def test_every_path_carries_the_api_prefix(fake_api):
    session, recorder = fake_api(200, [])
    GroupService(session).list_groups()

    assert recorder.path.startswith(PATH_PREFIX + "/")

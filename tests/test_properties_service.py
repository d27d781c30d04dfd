import pytest

from akamai_iam.core.exceptions import IAMException, RequestException, ValidationException
from akamai_iam.schemas.properties import PropertyUserType
from akamai_iam.services.properties import BlockedPropertyService, PropertyService

PROPERTIES = [
    {
        "propertyId": 1,
        "propertyName": "example.com",
        "propertyTypeDescription": "Site",
        "groupId": 123,
        "groupName": "Group",
        "actions": {"move": True},
    },
    {
        "propertyId": 2,
        "propertyName": "other.example.com",
        "propertyTypeDescription": "Site",
        "groupId": 123,
        "groupName": "Group",
    },
]

PROPERTY = {
    "arlConfigFile": "arl.xml",
    "createdBy": "jdoe",
    "createdDate": "2017-07-27T18:11:25.000Z",
    "groupId": 123,
    "groupName": "Group",
    "modifiedBy": "jdoe",
    "modifiedDate": "2017-07-27T18:11:25.000Z",
    "propertyId": 1,
    "propertyName": "example.com",
}


def test_list_properties_default_query(fake_api):
    session, recorder = fake_api(200, PROPERTIES)

    result = PropertyService(session).list_properties()

    assert recorder.path == "/identity-management/v3/user-admin/properties?actions=false"
    assert result[0].actions.move is True
    assert result[1].actions.move is False


def test_list_properties_with_group(fake_api):
    session, recorder = fake_api(200, PROPERTIES)

    PropertyService(session).list_properties(group_id=123, actions=True)

    assert (
        recorder.path
        == "/identity-management/v3/user-admin/properties?actions=true&groupId=123"
    )


def test_list_users_for_property(fake_api):
    session, recorder = fake_api(
        200,
        [
            {
                "firstName": "John",
                "isBlocked": False,
                "lastName": "Doe",
                "uiIdentityId": "A-BC-1234567",
                "uiUserName": "jdoe",
            }
        ],
    )

    users = PropertyService(session).list_users_for_property(
        property_id=1, user_type=PropertyUserType.ASSIGNED
    )

    assert (
        recorder.path
        == "/identity-management/v3/user-admin/properties/1/users?userType=assigned"
    )
    assert users[0].identity_id == "A-BC-1234567"


def test_get_property_requires_group(fake_api):
    session, recorder = fake_api(200, PROPERTY)

    with pytest.raises(ValidationException) as exc_info:
        PropertyService(session).get_property(property_id=1)

    assert exc_info.value.errors[0]["field"] == "group_id"
    assert not recorder.requests


def test_get_property(fake_api):
    session, recorder = fake_api(200, PROPERTY)

    result = PropertyService(session).get_property(property_id=1, group_id=123)

    assert recorder.path == "/identity-management/v3/user-admin/properties/1?groupId=123"
    assert result.arl_config_file == "arl.xml"
    assert result.created_date.year == 2017


def test_move_property(fake_api):
    session, recorder = fake_api(204)

    PropertyService(session).move_property(
        property_id=1, body={"sourceGroupId": 123, "destinationGroupId": 321}
    )

    assert recorder.method == "PUT"
    assert recorder.path == "/identity-management/v3/user-admin/properties/1"
    assert recorder.json_body() == {"destinationGroupId": 321, "sourceGroupId": 123}


def test_block_users(fake_api):
    session, recorder = fake_api(
        200, [{"uiIdentityId": "A-BC-1234567", "isBlocked": True}]
    )

    result = PropertyService(session).block_users(
        property_id=1, body=[{"uiIdentityId": "A-BC-1234567"}]
    )

    assert recorder.method == "PUT"
    assert recorder.path == "/identity-management/v3/user-admin/properties/1/users/block"
    assert recorder.json_body() == [{"uiIdentityId": "A-BC-1234567"}]
    assert result[0].is_blocked is True


def test_block_users_requires_at_least_one_user(fake_api):
    session, _ = fake_api(200, [])

    with pytest.raises(ValidationException):
        PropertyService(session).block_users(property_id=1, body=[])


def test_map_property_id_to_name(fake_api):
    session, recorder = fake_api(200, PROPERTY)

    name = PropertyService(session).map_property_id_to_name(property_id=1, group_id=123)

    assert name == "example.com"
    assert recorder.path == "/identity-management/v3/user-admin/properties/1?groupId=123"


def test_map_property_id_to_name_wraps_api_error(fake_api, server_error):
    session, _ = fake_api(500, server_error)

    with pytest.raises(RequestException) as exc_info:
        PropertyService(session).map_property_id_to_name(property_id=1, group_id=123)

    assert str(exc_info.value).startswith(
        "map property by id: request failed: get property: API error: \n"
    )


def test_map_property_name_to_id(fake_api):
    session, recorder = fake_api(200, PROPERTIES)

    property_id = PropertyService(session).map_property_name_to_id(
        property_name="other.example.com", group_id=123
    )

    assert property_id == 2
    assert (
        recorder.path
        == "/identity-management/v3/user-admin/properties?actions=false&groupId=123"
    )


def test_map_property_name_to_id_not_found(fake_api):
    session, _ = fake_api(200, PROPERTIES)

    with pytest.raises(IAMException) as exc_info:
        PropertyService(session).map_property_name_to_id(
            property_name="missing.example.com", group_id=123
        )

    assert str(exc_info.value) == "map property by name: no such property: missing.example.com"
    assert exc_info.value.details == {"group_id": 123}


def test_list_blocked_properties(fake_api):
    session, recorder = fake_api(200, [10977166, 10977167])

    result = BlockedPropertyService(session).list_blocked_properties(
        identity_id="1-ABCDE", group_id=12345
    )

    assert recorder.method == "GET"
    assert (
        recorder.path
        == "/identity-management/v2/user-admin/ui-identities/1-ABCDE/groups/12345/blocked-properties"
    )
    assert result == [10977166, 10977167]


def test_update_blocked_properties(fake_api):
    session, recorder = fake_api(200, [10977166])

    result = BlockedPropertyService(session).update_blocked_properties(
        identity_id="1-ABCDE", group_id=12345, properties=[10977166]
    )

    assert recorder.method == "PUT"
    assert recorder.json_body() == [10977166]
    assert result == [10977166]


def test_blocked_properties_validation(fake_api):
    session, _ = fake_api(200, [])

    with pytest.raises(ValidationException) as exc_info:
        BlockedPropertyService(session).list_blocked_properties()

    fields = [item["field"] for item in exc_info.value.errors]
    assert fields == ["group_id", "identity_id"]

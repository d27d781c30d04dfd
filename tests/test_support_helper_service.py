import pytest

from akamai_iam.core.exceptions import ValidationException
from akamai_iam.schemas.common import AccessLevel, ClientType
from akamai_iam.services.helper import HelperService
from akamai_iam.services.support import SupportService


@pytest.mark.parametrize(
    "method, suffix",
    [
        ("supported_countries", "countries"),
        ("supported_contact_types", "contact-types"),
        ("supported_languages", "supported-languages"),
        ("list_products", "notification-products"),
    ],
)
def test_support_string_lists(fake_api, method, suffix):
    session, recorder = fake_api(200, ["a", "b"])

    result = getattr(SupportService(session), method)()

    assert recorder.method == "GET"
    assert recorder.path == f"/identity-management/v3/user-admin/common/{suffix}"
    assert result == ["a", "b"]


def test_get_password_policy(fake_api):
    session, recorder = fake_api(
        200,
        {
            "caseDif": 0,
            "maxRepeating": 3,
            "minDigits": 1,
            "minLength": 8,
            "minLetters": 1,
            "minNonAlpha": 0,
            "minReuse": 4,
            "pwclass": "aka90",
            "rotateFrequency": 90,
        },
    )

    policy = SupportService(session).get_password_policy()

    assert recorder.path == "/identity-management/v3/user-admin/common/password-policy"
    assert policy.pw_class == "aka90"
    assert policy.rotate_frequency == 90


def test_supported_timezones_and_timeout_policies(fake_api):
    session, recorder = fake_api(
        200,
        [
            {
                "timezone": "Asia/Rangoon",
                "description": "Asia/Rangoon GMT+6",
                "offset": "+6",
                "posix": "Asia/Rangoon",
            }
        ],
    )
    service = SupportService(session)

    zones = service.supported_timezones()
    assert recorder.path == "/identity-management/v3/user-admin/common/timezones"
    assert zones[0].posix == "Asia/Rangoon"

    session, recorder = fake_api(200, [{"name": "after15Minutes", "value": 900}])
    policies = SupportService(session).list_timeout_policies()
    assert recorder.path == "/identity-management/v3/user-admin/common/timeout-policies"
    assert policies[0].value == 900


def test_list_states(fake_api):
    session, recorder = fake_api(200, ["AA", "AE"])

    states = SupportService(session).list_states(country="canada")

    assert recorder.path == "/identity-management/v3/user-admin/common/countries/canada/states"
    assert states == ["AA", "AE"]


def test_list_states_requires_country(fake_api):
    session, recorder = fake_api(200, [])

    with pytest.raises(ValidationException) as exc_info:
        SupportService(session).list_states()

    assert str(exc_info.value).startswith("list states: struct validation:\ncountry:")
    assert not recorder.requests


def test_list_account_switch_keys_for_self(fake_api):
    session, recorder = fake_api(
        200, [{"accountName": "Internet Company", "accountSwitchKey": "1-ABC:1-2345"}]
    )

    keys = SupportService(session).list_account_switch_keys()

    assert recorder.path == "/identity-management/v3/api-clients/self/account-switch-keys"
    assert keys[0].account_switch_key == "1-ABC:1-2345"


def test_list_account_switch_keys_with_search(fake_api):
    session, recorder = fake_api(200, [])

    SupportService(session).list_account_switch_keys(
        client_id="abcd1234", search="Internet Company"
    )

    assert (
        recorder.path
        == "/identity-management/v3/api-clients/abcd1234/account-switch-keys"
        "?search=Internet+Company"
    )


def test_list_account_switch_keys_blank_search_is_omitted(fake_api):
    session, recorder = fake_api(200, [])

    SupportService(session).list_account_switch_keys(client_id="", search="")

    assert recorder.path == "/identity-management/v3/api-clients/self/account-switch-keys"


def test_list_allowed_cpcodes(fake_api):
    session, recorder = fake_api(200, [{"name": "Stream Analyzer (36915)", "value": 36915}])

    result = HelperService(session).list_allowed_cpcodes(
        user_name="jsmith",
        body={"clientType": "CLIENT"},
    )

    assert recorder.method == "POST"
    assert recorder.path == "/identity-management/v3/users/jsmith/allowed-cpcodes"
    assert recorder.json_body() == {"clientType": "CLIENT", "groups": []}
    assert result[0].value == 36915


def test_list_allowed_cpcodes_service_account_needs_groups(fake_api):
    session, recorder = fake_api(200, [])

    with pytest.raises(ValidationException) as exc_info:
        HelperService(session).list_allowed_cpcodes(
            user_name="jsmith", body={"clientType": ClientType.SERVICE_ACCOUNT}
        )

    assert "groups: cannot be blank for SERVICE_ACCOUNT clients" in str(exc_info.value)
    assert not recorder.requests


def test_list_allowed_cpcodes_service_account_with_groups(fake_api):
    session, recorder = fake_api(200, [])

    HelperService(session).list_allowed_cpcodes(
        user_name="jsmith",
        body={
            "clientType": "SERVICE_ACCOUNT",
            "groups": [{"groupId": 1, "roleId": 2}],
        },
    )

    assert recorder.json_body() == {
        "clientType": "SERVICE_ACCOUNT",
        "groups": [{"groupId": 1, "roleId": 2}],
    }


def test_list_authorized_users(fake_api):
    session, recorder = fake_api(
        200,
        [
            {
                "firstName": "John",
                "lastName": "Doe",
                "username": "jdoe",
                "email": "john.doe@example.com",
                "uiIdentityId": "A-BC-1234567",
            }
        ],
    )

    users = HelperService(session).list_authorized_users()

    assert recorder.path == "/identity-management/v3/users"
    assert users[0].identity_id == "A-BC-1234567"


@pytest.mark.parametrize(
    "fields, query",
    [
        ({}, "?allowAccountSwitch=false"),
        (
            {"client_type": "USER_CLIENT", "allow_account_switch": True},
            "?allowAccountSwitch=true&clientType=USER_CLIENT",
        ),
    ],
)
def test_list_allowed_apis_query(fake_api, fields, query):
    session, recorder = fake_api(
        200,
        [
            {
                "accessLevels": ["READ-ONLY", "READ-WRITE"],
                "apiId": 1,
                "apiName": "API Client Administration",
                "hasAccess": True,
                "serviceProviderId": 1,
            }
        ],
    )

    apis = HelperService(session).list_allowed_apis(user_name="jsmith", **fields)

    assert recorder.path == f"/identity-management/v3/users/jsmith/allowed-apis{query}"
    assert apis[0].access_levels == [AccessLevel.READ_ONLY, AccessLevel.READ_WRITE]


def test_list_accessible_groups(fake_api):
    session, recorder = fake_api(
        200,
        [
            {
                "groupId": 1,
                "roleId": 2,
                "groupName": "Group",
                "roleName": "Admin",
                "isBlocked": False,
                "subGroups": [{"groupId": 3, "groupName": "Child", "parentGroupId": 1}],
            }
        ],
    )

    groups = HelperService(session).list_accessible_groups(user_name="jsmith")

    assert recorder.path == "/identity-management/v3/users/jsmith/group-access"
    assert groups[0].sub_groups[0].parent_group_id == 1


def test_helper_requires_user_name(fake_api):
    session, _ = fake_api(200, [])

    with pytest.raises(ValidationException) as exc_info:
        HelperService(session).list_accessible_groups(user_name="")

    assert exc_info.value.errors[0]["field"] == "user_name"

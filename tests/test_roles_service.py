import pytest

from akamai_iam.core.exceptions import ValidationException
from akamai_iam.schemas.roles import RoleType
from akamai_iam.services.roles import RoleService

ROLE = {
    "roleId": 123456,
    "roleName": "Custom role",
    "roleDescription": "Custom role description",
    "type": "custom",
    "createdDate": "2022-04-11T10:52:03.811Z",
    "createdBy": "jdoe",
    "modifiedDate": "2022-04-11T10:52:03.811Z",
    "modifiedBy": "jdoe",
    "actions": {"edit": True, "delete": True},
    "grantedRoles": [
        {
            "grantedRoleId": 10,
            "grantedRoleName": "Role 10",
            "grantedRoleDescription": "Role 10 description",
        }
    ],
}


def test_create_role(fake_api):
    session, recorder = fake_api(201, ROLE)

    role = RoleService(session).create_role(
        role_name="Custom role",
        role_description="Custom role description",
        granted_roles=[{"grantedRoleId": 10}],
    )

    assert recorder.method == "POST"
    assert recorder.path == "/identity-management/v2/user-admin/roles"
    assert recorder.json_body() == {
        "roleName": "Custom role",
        "roleDescription": "Custom role description",
        "grantedRoles": [{"grantedRoleId": 10}],
    }
    assert role.type is RoleType.CUSTOM
    assert role.created_date == "2022-04-11T10:52:03.811Z"


def test_create_role_requires_name_and_granted_roles(fake_api):
    session, _ = fake_api(201, ROLE)

    with pytest.raises(ValidationException) as exc_info:
        RoleService(session).create_role(role_name="")

    fields = {item["field"] for item in exc_info.value.errors}
    assert fields == {"roleName", "grantedRoles"}


@pytest.mark.parametrize(
    "flags, query",
    [
        ({}, "actions=false&grantedRoles=false&users=false"),
        (
            {"actions": True, "granted_roles": True, "users": True},
            "actions=true&grantedRoles=true&users=true",
        ),
    ],
)
def test_get_role_query(fake_api, flags, query):
    session, recorder = fake_api(200, ROLE)

    RoleService(session).get_role(role_id=123456, **flags)

    assert recorder.path == f"/identity-management/v2/user-admin/roles/123456?{query}"


def test_update_role_drops_blank_fields(fake_api):
    session, recorder = fake_api(200, ROLE)

    RoleService(session).update_role(
        role_id=123456,
        body={"roleName": "Renamed", "roleDescription": "", "grantedRoles": [{"grantedRoleId": 12}]},
    )

    assert recorder.method == "PUT"
    assert recorder.path == "/identity-management/v2/user-admin/roles/123456"
    assert recorder.json_body() == {
        "roleName": "Renamed",
        "grantedRoles": [{"grantedRoleId": 12}],
    }


def test_delete_role(fake_api):
    session, recorder = fake_api(204)

    RoleService(session).delete_role(role_id=123456)

    assert recorder.method == "DELETE"
    assert recorder.path == "/identity-management/v2/user-admin/roles/123456"


def test_list_roles_query_includes_group_only_when_set(fake_api):
    session, recorder = fake_api(200, [ROLE])
    service = RoleService(session)

    service.list_roles(actions=True)
    assert (
        recorder.path
        == "/identity-management/v2/user-admin/roles?actions=true&ignoreContext=false&users=false"
    )

    service.list_roles(group_id=123)
    assert (
        recorder.path == "/identity-management/v2/user-admin/roles"
        "?actions=false&groupId=123&ignoreContext=false&users=false"
    )


def test_list_grantable_roles(fake_api):
    session, recorder = fake_api(200, ROLE["grantedRoles"])

    roles = RoleService(session).list_grantable_roles()

    assert recorder.path == "/identity-management/v2/user-admin/roles/grantable-roles"
    assert roles[0].granted_role_name == "Role 10"

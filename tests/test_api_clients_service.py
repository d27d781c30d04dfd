import pytest
from pydantic import ValidationError

from akamai_iam.core.exceptions import APIException, ValidationException
from akamai_iam.schemas.api_clients import CreateAPIClientRequest
from akamai_iam.services.api_clients import APIClientService

CLIENT_BODY = {
    "accessToken": "akab-token",
    "activeCredentialCount": 1,
    "allowAccountSwitch": False,
    "authorizedUsers": ["jdoe"],
    "canAutoCreateCredential": False,
    "clientDescription": "Test",
    "clientId": "test1234",
    "clientName": "test",
    "clientType": "CLIENT",
    "createdBy": "jdoe",
    "createdDate": "2024-06-13T14:48:07.000Z",
    "isLocked": True,
    "notificationEmails": ["jdoe@example.com"],
    "serviceConsumerToken": "akab-sct",
}


def _create_params(**overrides):
    params = {
        "apiAccess": {
            "allAccessibleApis": False,
            "apis": [{"apiId": 5580, "accessLevel": "READ-ONLY"}],
        },
        "authorizedUsers": ["jdoe"],
        "clientType": "CLIENT",
        "groupAccess": {
            "cloneAuthorizedUserGroups": False,
            "groups": [{"groupId": 123, "roleId": 340}],
        },
        "purgeOptions": {
            "canPurgeByCacheTag": True,
            "canPurgeByCpcode": False,
            "cpcodeAccess": {"allCurrentAndNewCpcodes": True},
        },
    }
    params.update(overrides)
    return params


def test_lock_api_client_defaults_to_self(fake_api):
    session, recorder = fake_api(200, CLIENT_BODY)

    result = APIClientService(session).lock_api_client()

    assert recorder.method == "PUT"
    assert recorder.path == "/identity-management/v3/api-clients/self/lock"
    assert result.client_id == "test1234"
    assert result.is_locked is True


def test_lock_api_client_with_id(fake_api):
    session, recorder = fake_api(200, CLIENT_BODY)

    APIClientService(session).lock_api_client(client_id="test1234")

    assert recorder.path == "/identity-management/v3/api-clients/test1234/lock"


def test_unlock_api_client_requires_client_id(fake_api):
    session, recorder = fake_api(200, CLIENT_BODY)

    with pytest.raises(ValidationException) as exc_info:
        APIClientService(session).unlock_api_client()

    assert str(exc_info.value).startswith("unlock api client: struct validation:\n")
    assert "client_id" in str(exc_info.value)
    assert not recorder.requests


def test_list_api_clients_renders_actions(fake_api):
    session, recorder = fake_api(200, [dict(CLIENT_BODY, actions={"delete": True})])

    result = APIClientService(session).list_api_clients(actions=True)

    assert recorder.path == "/identity-management/v3/api-clients?actions=true"
    assert result[0].actions.delete is True


@pytest.mark.parametrize(
    "params, expected_path",
    [
        (
            {},
            "/identity-management/v3/api-clients/self"
            "?actions=false&apiAccess=false&credentials=false&groupAccess=false&ipAcl=false",
        ),
        (
            {
                "client_id": "abcdefgh12345678",
                "actions": True,
                "api_access": True,
                "credentials": True,
                "group_access": True,
                "ip_acl": True,
            },
            "/identity-management/v3/api-clients/abcdefgh12345678"
            "?actions=true&apiAccess=true&credentials=true&groupAccess=true&ipAcl=true",
        ),
    ],
)
def test_get_api_client_query(fake_api, params, expected_path):
    session, recorder = fake_api(
        200, dict(CLIENT_BODY, baseURL="https://akab.example", credentials=[])
    )

    result = APIClientService(session).get_api_client(params)

    assert recorder.path == expected_path
    assert result.base_url == "https://akab.example"


def test_create_api_client_sends_camel_case_body(fake_api):
    session, recorder = fake_api(
        201,
        dict(
            CLIENT_BODY,
            credentials=[{"credentialId": 1, "clientSecret": "s3cret", "status": "ACTIVE"}],
        ),
    )

    result = APIClientService(session).create_api_client(_create_params())

    assert recorder.method == "POST"
    assert recorder.path == "/identity-management/v3/api-clients"
    body = recorder.json_body()
    assert body["clientType"] == "CLIENT"
    assert body["apiAccess"]["apis"][0] == {
        "accessLevel": "READ-ONLY",
        "apiId": 5580,
        "apiName": "",
        "description": "",
        "documentationUrl": "",
        "endPoint": "",
    }
    assert body["purgeOptions"]["cpcodeAccess"] == {
        "allCurrentAndNewCpcodes": True,
        "cpcodes": None,
    }
    assert "ipAcl" not in body
    assert result.credentials[0].client_secret == "s3cret"


def test_create_api_client_aggregates_nested_violations(fake_api):
    session, recorder = fake_api(201, CLIENT_BODY)
    params = _create_params(
        apiAccess={"allAccessibleApis": False, "apis": [{}]},
        clientType="abc",
        groupAccess={"cloneAuthorizedUserGroups": False, "groups": [{}]},
        purgeOptions={"cpcodeAccess": {"allCurrentAndNewCpcodes": False}},
    )

    with pytest.raises(ValidationException) as exc_info:
        APIClientService(session).create_api_client(params)

    fields = {item["field"] for item in exc_info.value.errors}
    assert "apiAccess.apis.0.apiId" in fields
    assert "apiAccess.apis.0.accessLevel" in fields
    assert "groupAccess.groups.0.groupId" in fields
    assert "groupAccess.groups.0.roleId" in fields
    assert "clientType" in fields
    assert "purgeOptions.cpcodeAccess" in fields
    assert not recorder.requests


def test_create_api_client_rejects_missing_apis_and_groups():
    with pytest.raises(ValidationError) as exc_info:
        CreateAPIClientRequest.model_validate(
            _create_params(
                apiAccess={"allAccessibleApis": False},
                groupAccess={"cloneAuthorizedUserGroups": False},
                authorizedUsers=[],
            )
        )

    messages = str(exc_info.value)
    assert "apis cannot be blank" in messages
    assert "groups cannot be blank" in messages
    assert "authorizedUsers" in messages


def test_all_accessible_apis_waives_api_list():
    request = CreateAPIClientRequest.model_validate(
        _create_params(apiAccess={"allAccessibleApis": True})
    )

    assert request.api_access.apis == []


def test_service_account_client_type_is_rejected_for_create():
    with pytest.raises(ValidationError) as exc_info:
        CreateAPIClientRequest.model_validate(
            _create_params(clientType="SERVICE_ACCOUNT")
        )

    assert "Must be one of: 'CLIENT' or 'USER_CLIENT'" in str(exc_info.value)


def test_update_api_client_without_client_name(fake_api):
    session, recorder = fake_api(200, CLIENT_BODY)

    APIClientService(session).update_api_client(body=_create_params())

    body = recorder.json_body()
    assert body["clientName"] == ""
    assert "ipAcl" not in body


def test_update_api_client_puts_to_self(fake_api):
    session, recorder = fake_api(200, CLIENT_BODY)

    APIClientService(session).update_api_client(
        body=_create_params(clientName="renamed")
    )

    assert recorder.method == "PUT"
    assert recorder.path == "/identity-management/v3/api-clients/self"
    assert recorder.json_body()["clientName"] == "renamed"


def test_delete_api_client_expects_no_content(fake_api):
    session, recorder = fake_api(204)

    service = APIClientService(session)

    assert service.delete_api_client(client_id="abcdefgh12345678") is None
    assert recorder.method == "DELETE"
    assert recorder.path == "/identity-management/v3/api-clients/abcdefgh12345678"


def test_delete_api_client_with_ok_status_fails(fake_api):
    session, _ = fake_api(200, {})

    with pytest.raises(APIException):
        APIClientService(session).delete_api_client()

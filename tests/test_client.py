import httpx

from akamai_iam import IAM
from akamai_iam.core.config import Settings
from akamai_iam.core.session import build_session
from akamai_iam.services.groups import GroupService


def _settings(**overrides):
    return Settings(_env_file=None, **overrides)


def test_build_session_applies_settings(mock_transport):
    transport, recorder = mock_transport(200, [])
    session = build_session(
        _settings(
            iam__host="akab-host.luna.akamaiapis.net/",
            iam__user_agent="iam-tests",
            iam__account_switch_key="1-ABCDE:1-2345",
        ),
        transport=transport,
    )

    with session:
        session.get("/identity-management/v3/users")

    request = recorder.last
    assert request.url.host == "akab-host.luna.akamaiapis.net"
    assert request.url.scheme == "https"
    assert request.url.params["accountSwitchKey"] == "1-ABCDE:1-2345"
    assert request.headers["User-Agent"] == "iam-tests"
    assert request.headers["Accept"] == "application/json"


def test_build_session_without_switch_key(mock_transport):
    transport, recorder = mock_transport(200, [])
    session = build_session(_settings(), transport=transport)

    with session:
        session.get("/identity-management/v3/users")

    assert "accountSwitchKey" not in recorder.last.url.params


def test_build_session_uses_auth(mock_transport):
    class HeaderAuth(httpx.Auth):
        def auth_flow(self, request):
            request.headers["Authorization"] = "EG1-HMAC-SHA256 signed"
            yield request

    transport, recorder = mock_transport(200, [])
    session = build_session(_settings(), auth=HeaderAuth(), transport=transport)

    with session:
        session.get("/identity-management/v3/users")

    assert recorder.last.headers["Authorization"] == "EG1-HMAC-SHA256 signed"


def test_iam_wires_every_service_to_one_session(fake_api):
    session, _ = fake_api(200, [])

    iam = IAM(session, _settings())

    services = [
        iam.api_clients,
        iam.credentials,
        iam.cidr,
        iam.ip_allowlist,
        iam.groups,
        iam.roles,
        iam.properties,
        iam.blocked_properties,
        iam.users,
        iam.support,
        iam.helper,
    ]
    assert all(service.session is session for service in services)
    assert isinstance(iam.groups, GroupService)


def test_iam_leaves_injected_session_open(fake_api):
    session, _ = fake_api(200, [])

    with IAM(session, _settings()):
        pass

    assert not session.is_closed


def test_iam_closes_owned_session(mock_transport):
    transport, recorder = mock_transport(200, [{"groupId": 1, "groupName": "Top"}])

    with IAM(settings=_settings(), transport=transport) as iam:
        groups = iam.groups.list_groups()

    assert groups[0].group_name == "Top"
    assert str(recorder.last.url) == (
        "https://localhost/identity-management/v3/user-admin/groups?actions=false"
    )
    assert iam.session.is_closed


def test_iam_initializes_logfire_when_enabled(monkeypatch, fake_api):
    from akamai_iam import client as client_module

    captured = {}

    def fake_initialize(session):
        captured["session"] = session
        return {"configured": True, "instrumentation": {"httpx": True}}

    monkeypatch.setattr(client_module, "initialize_logfire", fake_initialize)
    session, _ = fake_api()

    IAM(session, _settings(logfire__enabled=True))

    assert captured["session"] is session


def test_iam_skips_logfire_when_disabled(monkeypatch, fake_api):
    from akamai_iam import client as client_module

    def fail(session):
        raise AssertionError("logfire must not be initialized")

    monkeypatch.setattr(client_module, "initialize_logfire", fail)
    session, _ = fake_api()

    IAM(session, _settings(logfire__enabled=False))

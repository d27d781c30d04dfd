import json
from typing import Any, List, Optional

import httpx
import pytest


class RecordingTransport:
    """Mock transport handler that answers with a canned response and records requests."""

    def __init__(
        self,
        status_code: int = 200,
        body: Any = None,
        text: Optional[str] = None,
    ):
        self.status_code = status_code
        self.body = body
        self.text = text
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        if self.body is None:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    @property
    def path(self) -> str:
        """Path and query of the last request, as sent on the wire."""
        return self.last.url.raw_path.decode("ascii")

    @property
    def method(self) -> str:
        return self.last.method

    def json_body(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def mock_transport():
    """Build (transport, recorder) pairs for sessions created by the code under test."""

    def factory(status_code: int = 200, body: Any = None, text: Optional[str] = None):
        recorder = RecordingTransport(status_code, body, text)
        return httpx.MockTransport(recorder), recorder

    return factory


@pytest.fixture
def fake_api(mock_transport):
    """Build (session, recorder) pairs backed by httpx.MockTransport."""
    sessions: List[httpx.Client] = []

    def factory(status_code: int = 200, body: Any = None, text: Optional[str] = None):
        transport, recorder = mock_transport(status_code, body, text)
        session = httpx.Client(base_url="https://iam.example.test", transport=transport)
        sessions.append(session)
        return session, recorder

    yield factory

    for session in sessions:
        session.close()


@pytest.fixture
def server_error():
    return {
        "type": "internal_error",
        "title": "Internal Server Error",
        "detail": "Error making request",
        "status": 500,
    }

"""Shared fixtures for abuse SDK unit tests."""

import httpx
import pytest

from abuse_core.client import AbuseToolSet
from abuse_core.config import APIConfig


BASE_URL = "https://abuse.test"


# ---------------------------------------------------------------------------
# Fake abuse API served through httpx.MockTransport
# ---------------------------------------------------------------------------

class FakeAbuseApi:
    """Record every request and answer with a canned response."""

    def __init__(self):
        self.status_code = 200
        self.body = b"{}"
        self.headers = {}
        self.error = None
        self.requests = []

    def respond(self, status_code: int, body, headers=None):
        self.status_code = status_code
        self.headers = headers or {}
        self.body = body.encode() if isinstance(body, str) else body

    def fail_with(self, error: Exception):
        self.error = error

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request reached the fake API"
        return self.requests[-1]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        # Streamed so the client, not the transport, reads and decodes the body
        return httpx.Response(self.status_code, headers=self.headers, stream=httpx.ByteStream(self.body))


@pytest.fixture
def api_config():
    return APIConfig(base_url=BASE_URL)


@pytest.fixture
def fake_api():
    return FakeAbuseApi()


@pytest.fixture
def http_client(fake_api):
    """An AsyncClient whose requests never leave the process."""
    return httpx.AsyncClient(transport=httpx.MockTransport(fake_api))


@pytest.fixture
def toolset(api_config, http_client):
    return AbuseToolSet(config=api_config, http_client=http_client)

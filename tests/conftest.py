from __future__ import annotations

import json
from urllib.parse import parse_qsl

import httpx
import pytest

from cf_tools.service import CloudflareService
from cf_tools.utils.dispatcher import Credentials, RequestDispatcher

API_URL = "https://cf.test/api_json.html"
API_KEY = "secret-key"
EMAIL = "ops@example.com"


class Recorder:
    """MockTransport handler that records requests and replies with a fixed body."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = json.dumps({"result": "success", "msg": None})
        self.error: Exception | None = None

    def reply(self, body, status_code: int = 200):
        self.body = body if isinstance(body, str) else json.dumps(body)
        self.status_code = status_code

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.body)

    @property
    def form(self) -> dict[str, str]:
        """Form fields of the last request."""
        return dict(parse_qsl(self.requests[-1].content.decode(), keep_blank_values=True))


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(url=API_URL, api_key=API_KEY, email=EMAIL)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def dispatcher(credentials, recorder) -> RequestDispatcher:
    client = httpx.Client(transport=httpx.MockTransport(recorder))
    yield RequestDispatcher(credentials, client=client, timeout=5)
    client.close()


@pytest.fixture
def service(dispatcher) -> CloudflareService:
    return CloudflareService(dispatcher)

"""Pytest configuration - loads .env for live tests and fakes the backend for the rest."""

from pathlib import Path
from typing import Any

import httpx
import pytest
from dotenv import load_dotenv

from model_api import ApiService

# Load .env from project root
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)

BASE_URL = "https://example.com"
TOKEN = "123"


class FakeBackend:
    """Serve queued responses in order and record every request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response | Exception] = []

    def respond(
        self,
        status: int = 200,
        json: Any = None,
        content: bytes | str = b"",
        headers: dict[str, str] | None = None,
    ) -> None:
        if json is not None:
            self._responses.append(httpx.Response(status, json=json, headers=headers))
        else:
            self._responses.append(httpx.Response(status, content=content, headers=headers))

    def fail(self, error: Exception) -> None:
        self._responses.append(error)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def api(backend: FakeBackend) -> ApiService:
    return ApiService(base_url=BASE_URL, token=TOKEN, transport=backend.transport)


@pytest.fixture
def make_api():
    """Build extra (backend, api) pairs for tests that compare two requests."""

    def factory() -> tuple[FakeBackend, ApiService]:
        fake = FakeBackend()
        return fake, ApiService(base_url=BASE_URL, token=TOKEN, transport=fake.transport)

    return factory

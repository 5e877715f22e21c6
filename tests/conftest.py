"""
Shared fixtures: a fake LottieFiles upstream behind httpx.MockTransport.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from app import app
from routes.lottie import get_animation_service
from services.animations import AnimationService
from services.cache import TTLCache
from services.lottie_client import LottieClient

BASE_URL = "https://lottie.test/api/v2"


class FakeClock:
    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeUpstream:
    """Records every request and answers with a configurable response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.json = {"data": {"results": {"data": []}}}
        self.content: bytes | None = None
        self.error: Exception | None = None
        self.redirect_to: str | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.redirect_to is not None:
            location, self.redirect_to = self.redirect_to, None
            return httpx.Response(301, headers={"Location": location})
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json)

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def make_service(upstream, clock):
    """Build an AnimationService wired to the fake upstream."""

    def _make(**kwargs) -> AnimationService:
        client = LottieClient(
            BASE_URL,
            popular_url=kwargs.pop("popular_url", None),
            transport=httpx.MockTransport(upstream),
        )
        cache = TTLCache(
            ttl_seconds=kwargs.pop("ttl_seconds", 3600),
            max_entries=kwargs.pop("max_entries", 0),
            clock=clock,
        )
        return AnimationService(client, cache, **kwargs)

    return _make


@pytest.fixture
def service(make_service):
    return make_service()


@pytest.fixture
def client(service):
    """Create a test client backed by the fake upstream."""
    app.dependency_overrides[get_animation_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()

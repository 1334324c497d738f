"""Shared fixtures for app-feedback tests."""

import json

import httpx
import pytest
import pytest_asyncio

from feedback_app.services.userback import UserbackClient, UserbackConfig


@pytest.fixture(autouse=True)
def _reset_global_state():
    """Reset module-level singletons and caches between tests."""
    yield

    # 1. Settings LRU cache
    from feedback_app.config import get_settings

    get_settings.cache_clear()

    # 2. Shared Userback client singleton
    import feedback_app.services.http_client as http_mod

    http_mod._client = None


@pytest.fixture
def mock_settings(monkeypatch):
    """Provide a Settings object with safe test defaults."""
    from feedback_app.config import Settings, get_settings

    test_settings = Settings(
        userback_api_url="https://userback.test/v1",
        userback_api_key="test-token",
        userback_project_id=4455,
        userback_feedback_type="idea",
        userback_default_title="Feedback Submission",
        userback_anonymous_email="anonymous@example.com",
    )

    get_settings.cache_clear()
    monkeypatch.setattr("feedback_app.config.get_settings", lambda: test_settings)

    # Patch get_settings in every module that imports it directly
    # (from feedback_app.config import get_settings creates a local binding
    # that the feedback_app.config monkeypatch above does not affect)
    for mod_path in [
        "feedback_app.main",
        "feedback_app.services.http_client",
        "feedback_app.routers.feedback",
        "feedback_app.routers.form",
    ]:
        monkeypatch.setattr(f"{mod_path}.get_settings", lambda: test_settings)

    return test_settings


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it saw."""

    def __init__(self, handler):
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest_asyncio.fixture
async def make_client():
    """Build a UserbackClient whose transport answers with *handler*.

    Returns ``(client, transport)``; ``transport.requests`` records calls.
    """
    clients: list[UserbackClient] = []

    def _make(handler, **config):
        config.setdefault("base_url", "https://userback.test/v1")
        transport = RecordingTransport(handler)
        client = UserbackClient(UserbackConfig(**config), transport=transport)
        clients.append(client)
        return client, transport

    yield _make

    for client in clients:
        await client.aclose()


@pytest_asyncio.fixture
async def app_client(mock_settings):
    """Point the app's shared Userback client at a mock transport.

    Returns a function taking a response handler; it installs the client as
    the ``get_userback_client`` dependency and returns the recording
    transport.
    """
    from feedback_app.main import app
    from feedback_app.services.http_client import get_userback_client

    clients: list[UserbackClient] = []

    def _install(handler):
        transport = RecordingTransport(handler)
        client = UserbackClient(
            mock_settings.userback_config(), transport=transport
        )
        clients.append(client)
        app.dependency_overrides[get_userback_client] = lambda: client
        return transport

    yield _install

    app.dependency_overrides.clear()
    for client in clients:
        await client.aclose()

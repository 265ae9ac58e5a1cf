"""Pytest fixtures for the checklist panel tests."""

from collections.abc import AsyncIterator, Callable

import httpx
import pytest
import pytest_asyncio

from checklist.auth import AuthContext
from checklist.client import TasksApi
from checklist.config import Settings
from checklist.controller import TaskListController
from tests.fake_api import VALID_TOKEN, FakeTaskStore, create_app
from tests.fakes import ChangeCounter, RecordingNotifier

BASE_URL = "http://testserver"

MockHandler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def store() -> FakeTaskStore:
    """A fresh fake server-side store."""
    return FakeTaskStore()


@pytest.fixture
def auth() -> AuthContext:
    """An authenticated credential holder."""
    return AuthContext(VALID_TOKEN)


@pytest_asyncio.fixture
async def http(store: FakeTaskStore) -> AsyncIterator[httpx.AsyncClient]:
    """An HTTP client wired straight into the fake API app."""
    transport = httpx.ASGITransport(app=create_app(store))
    async with httpx.AsyncClient(transport=transport, base_url=BASE_URL) as client:
        yield client


@pytest.fixture
def api(http: httpx.AsyncClient, auth: AuthContext) -> TasksApi:
    return TasksApi(http, auth)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def changes() -> ChangeCounter:
    return ChangeCounter()


@pytest.fixture
def controller(
    api: TasksApi,
    auth: AuthContext,
    notifier: RecordingNotifier,
    changes: ChangeCounter,
    settings: Settings,
) -> TaskListController:
    """A controller talking to the fake API through real HTTP."""
    return TaskListController(api, auth, notifier=notifier, on_change=changes, settings=settings)


@pytest_asyncio.fixture
async def mock_controller(
    auth: AuthContext,
    notifier: RecordingNotifier,
    changes: ChangeCounter,
    settings: Settings,
) -> AsyncIterator[Callable[[MockHandler], TaskListController]]:
    """Factory for controllers whose HTTP calls are answered (or failed) by a handler."""
    clients: list[httpx.AsyncClient] = []

    def build(handler: MockHandler) -> TaskListController:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url=BASE_URL)
        clients.append(client)
        return TaskListController(
            TasksApi(client, auth), auth, notifier=notifier, on_change=changes, settings=settings
        )

    yield build
    for client in clients:
        await client.aclose()

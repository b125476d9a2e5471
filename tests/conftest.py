"""Shared fixtures: a recording event bus and a scripted HTTP session."""

import json
import pytest

from modules.events import EventBus, LOG, STATUS_UPDATE
from modules.models import DelayPolicy
from modules.browser import Browser
from modules.quest import QuestRunner
import settings


PRIVATEKEYS = [
    "4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318",
    "8da4ef21b864d2cc526dbdb2a120bd2874c36c9d0a1fb7f8c63d7f7a8b41de8f",
    "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef",
]


class RecordingBus(EventBus):
    """EventBus that remembers everything emitted on it."""

    def __init__(self):
        super().__init__()
        self.events = []
        self.subscribe(LOG, lambda event: self.events.append(("log", event.level, event.message)))
        self.subscribe(STATUS_UPDATE, lambda update: self.events.append(("status", dict(update))))

    @property
    def logs(self):
        return [(event[1], event[2]) for event in self.events if event[0] == "log"]

    def levels(self):
        return [level for level, _ in self.logs]

    def statuses(self):
        return [event[1] for event in self.events if event[0] == "status"]


class FakeResponse:
    def __init__(self, status_code=200, body=""):
        self.status_code = status_code
        self.text = body if isinstance(body, str) else json.dumps(body)


class FakeSession:
    """Stands in for tls_client.Session, answering by (method, path)."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.closed = False
        self.headers = {}
        self.proxies = {}

    def execute_request(self, method, url, **kwargs):
        path = url.removeprefix(settings.API_BASE_URL)
        self.calls.append((method, path, kwargs))
        answer = self.routes.get((method, path))
        if answer is None:
            return FakeResponse(404, {"message": "Not Found"})
        if isinstance(answer, Exception):
            raise answer
        if callable(answer):
            return answer(**kwargs)
        return answer

    def close(self):
        self.closed = True


def happy_routes(tasks=None):
    return {
        ("GET", "/auth/eth/nonce"): FakeResponse(200, "abc123"),
        ("POST", "/auth/eth/verify"): FakeResponse(200, {"ok": True}),
        ("GET", "/users/exp"): FakeResponse(200, 42),
        ("GET", "/users/social/tasks"): FakeResponse(200, tasks or []),
    }


@pytest.fixture
def bus():
    return RecordingBus()


@pytest.fixture
def no_delays():
    return DelayPolicy.disabled()


@pytest.fixture
def make_runner(bus, no_delays):
    """Builds a QuestRunner whose browsers share one FakeSession."""

    def factory(session: FakeSession, sleeper=lambda seconds: None, delays=None):
        return QuestRunner(
            bus=bus,
            delays=delays or no_delays,
            sleeper=sleeper,
            browser_factory=lambda proxy: Browser(proxy=proxy, session=session),
        )

    return factory

from __future__ import annotations

import itertools
from datetime import date

import pytest

from work_hours.container import build_container
from work_hours.main import create_app
from work_hours.storage.flask_session_storage import FlaskSessionStorage
from work_hours.storage.memory_storage import MemoryStorage


@pytest.fixture
def fixed_today():
    return date(2024, 3, 10)


@pytest.fixture
def clock_millis():
    ticks = itertools.count(1_700_000_000_000)
    return lambda: next(ticks)


@pytest.fixture
def durable():
    return MemoryStorage()


@pytest.fixture
def container(durable, clock_millis):
    return build_container(durable_storage=durable, session_storage=MemoryStorage(), clock_millis=clock_millis)


@pytest.fixture
def alice(container):
    container.auth_service.register("alice", "secret")
    return "alice"


@pytest.fixture
def app(monkeypatch, durable, clock_millis):
    monkeypatch.setenv("APP_ENV", "testing")
    browser_session = FlaskSessionStorage()
    web_container = build_container(
        durable_storage=durable,
        session_storage=browser_session,
        remember_storage=browser_session,
        clock_millis=clock_millis,
    )
    return create_app(container=web_container)


@pytest.fixture
def client(app):
    return app.test_client()

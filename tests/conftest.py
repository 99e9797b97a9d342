"""
Shared fixtures: a fresh SQLite database per test, the real app factory,
and a recording stand-in for the model call.
"""

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from swadesh.core import database
from swadesh.core.config import get_settings
from swadesh.core.flags import get_flags
from swadesh.factory import create_app
from swadesh.services import llm


def _reset_caches():
    get_settings.cache_clear()
    get_flags.cache_clear()


@pytest.fixture
def app_env(tmp_path, monkeypatch):
    """Point settings at a throwaway SQLite file and a fake API key."""
    monkeypatch.setenv("ENV", "test")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'swadesh.db'}")
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setenv("FF_LLM_PROVIDER", "gemini")
    monkeypatch.setenv("FF_ENABLE_GUEST_MODE", "true")
    monkeypatch.setenv("FF_ENABLE_DEV_LOGIN", "true")
    _reset_caches()
    yield
    _reset_caches()


@pytest.fixture
def no_db_env(app_env, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "")
    _reset_caches()


@pytest.fixture
def fake_llm(monkeypatch):
    """Replace generate(); records each call and answers with `fake_llm.reply`."""
    recorder = SimpleNamespace(calls=[], reply="Namaste!", error=None)

    async def fake_generate(system_instruction, content, attachments=None):
        recorder.calls.append(SimpleNamespace(
            system_instruction=system_instruction,
            content=content,
            attachments=attachments,
        ))
        if recorder.error is not None:
            raise recorder.error
        return recorder.reply

    monkeypatch.setattr(llm, "generate", fake_generate)
    return recorder


@pytest.fixture
def client(app_env, fake_llm):
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def signed_in(client):
    resp = client.get("/api/login", follow_redirects=False)
    assert resp.status_code == 302
    return client


@pytest.fixture
def no_db_client(no_db_env, fake_llm):
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
async def db(app_env):
    """An AsyncSession on an initialized schema, outside of any request."""
    await database.init_db()
    factory = database.get_session_factory()
    async with factory() as session:
        yield session
    await database.close_db()

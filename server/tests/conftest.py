import sys
import os

# Add server/ directory to sys.path so absolute imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from app import app
from services.llm_client import get_llm_client
from services.seed_service import seed_data
from store import GameDataStore, get_store


class FakeCompletions:
    def __init__(self, upstream):
        self.upstream = upstream

    async def create(self, **kwargs):
        self.upstream.chat_calls.append(kwargs)
        if self.upstream.chat_error is not None:
            raise self.upstream.chat_error
        message = SimpleNamespace(content=self.upstream.reply)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeImages:
    def __init__(self, upstream):
        self.upstream = upstream

    async def generate(self, **kwargs):
        self.upstream.image_calls.append(kwargs)
        if self.upstream.image_error is not None:
            raise self.upstream.image_error
        return SimpleNamespace(data=[SimpleNamespace(url=self.upstream.image_url)])


class FakeUpstream:
    """Stands in for AsyncOpenAI: records calls, returns scripted replies."""

    def __init__(self):
        self.reply = "The dragon stirs in its sleep."
        self.image_url = "https://images.example.com/scene.png"
        self.chat_error = None
        self.image_error = None
        self.chat_calls = []
        self.image_calls = []
        self.chat = SimpleNamespace(completions=FakeCompletions(self))
        self.images = FakeImages(self)


@pytest.fixture
def store():
    return seed_data(GameDataStore())


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture(autouse=True)
def overrides(store):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_llm_client] = lambda: None
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def with_upstream(upstream):
    app.dependency_overrides[get_llm_client] = lambda: upstream
    return upstream


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def lenient_client():
    # Unhandled faults come back as responses instead of being re-raised
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def character(client):
    resp = client.post(
        "/api/characters",
        json={
            "name": "Lyra",
            "class": "Wizard",
            "level": 3,
            "race": "Elf",
            "currentHp": 14,
            "maxHp": 18,
            "armorClass": 12,
        },
    )
    assert resp.status_code == 200
    return resp.json()

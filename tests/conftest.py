from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from lifeos_categorizer.config import settings
from lifeos_categorizer.intelligence.categories import Category
from lifeos_categorizer.storage.redis_cache import RedisCache
from lifeos_categorizer.storage.sqlite_manager import SQLiteManager


class FakeAI:
    """Stands in for AIClassifier; replies with a fixed label or raises."""

    def __init__(self, reply: Optional[Category] = None, error: Optional[Exception] = None) -> None:
        self.model = "fake-model"
        self.reply = reply
        self.error = error
        self.calls: List[tuple] = []
        self.closed = False

    async def classify(self, title: str, description: Optional[str] = None) -> Optional[Category]:
        self.calls.append((title, description))
        if self.error is not None:
            raise self.error
        return self.reply

    async def close(self) -> None:
        self.closed = True


class FakeCache:
    """In-memory stand-in for RedisCache."""

    def __init__(self) -> None:
        self.enabled = True
        self.predictions: Dict[tuple, str] = {}
        self.writes = 0

    async def get_prediction(self, title: str, description: Optional[str], model: str) -> Optional[str]:
        return self.predictions.get((title, description or "", model))

    async def set_prediction(self, title: str, description: Optional[str], model: str, category: str, ttl: int = 86400) -> None:
        self.predictions[(title, description or "", model)] = category

    async def touch_last_write(self) -> None:
        self.writes += 1

    async def last_write_ts(self) -> str:
        return str(self.writes)


def chat_completion(content: Optional[str]) -> Any:
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class FakeCompletions:
    def __init__(self, content: Optional[str] = None, error: Optional[Exception] = None) -> None:
        self.content = content
        self.error = error
        self.kwargs: Dict[str, Any] = {}

    async def create(self, **kwargs: Any) -> Any:
        self.kwargs = kwargs
        if self.error is not None:
            raise self.error
        return chat_completion(self.content)


def fake_openai_client(content: Optional[str] = None, error: Optional[Exception] = None) -> Any:
    completions = FakeCompletions(content, error)

    async def close() -> None:
        return None

    return SimpleNamespace(chat=SimpleNamespace(completions=completions), close=close)


@pytest.fixture()
def fake_cache() -> FakeCache:
    return FakeCache()


@pytest.fixture()
async def db(tmp_path: Path):
    manager = SQLiteManager(str(tmp_path / "goals.db"))
    await manager.initialize()
    yield manager
    await manager.close()


@pytest.fixture()
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "db_path", str(tmp_path / "server" / "goals.db"))
    monkeypatch.setattr(settings, "redis_url", "disabled")
    monkeypatch.setattr(settings, "ai_enabled", False)
    monkeypatch.setattr(settings, "enable_background", False)
    monkeypatch.setattr(settings, "user_id", "tester")
    return settings


@pytest.fixture()
def make_ai():
    return FakeAI


@pytest.fixture()
def make_openai_client():
    return fake_openai_client


class ResetRedisClient:
    """Redis client whose connection drops on every command."""

    def __init__(self) -> None:
        self.calls: List[str] = []

    async def get(self, key: str) -> Optional[str]:
        self.calls.append("get")
        raise RedisConnectionError("Connection reset by peer")

    async def setex(self, key: str, ttl: int, value: str) -> None:
        self.calls.append("setex")
        raise RedisConnectionError("Connection reset by peer")

    async def aclose(self) -> None:
        return None


@pytest.fixture()
def unreachable_cache() -> RedisCache:
    cache = RedisCache("redis://127.0.0.1:6379/0", user_id="tester")
    cache.client = ResetRedisClient()
    cache.enabled = True
    return cache

from __future__ import annotations

import time
from typing import Optional

from redis.asyncio import Redis, from_url

from ..intelligence.utils import normalize_text, sha256_hex


class RedisCache:
    """
    Async Redis cache for AI category predictions.
    Safe to disable by setting URL to 'disabled'.
    """

    def __init__(self, redis_url: str, *, user_id: str = "default") -> None:
        self.redis_url = redis_url
        self.user_id = user_id
        self.client: Optional[Redis] = None
        self.enabled: bool = False

    # ---------- lifecycle ----------

    async def initialize(self) -> None:
        if self.redis_url.lower() == "disabled":
            self.enabled = False
            return
        self.client = from_url(self.redis_url, encoding="utf-8", decode_responses=True)
        try:
            pong = await self.client.ping()
            self.enabled = bool(pong)
        except Exception:
            self.enabled = False
            self.client = None

    async def close(self) -> None:
        if self.client:
            try:
                await self.client.aclose()
            finally:
                self.client = None
        self.enabled = False

    # ---------- keys ----------

    def _prediction_key(self, title: str, description: Optional[str], model: str) -> str:
        n = normalize_text(f"{title or ''}\n{description or ''}")
        return f"predict:{model}:{sha256_hex(n)}"

    def _lw_key(self) -> str:
        return f"u:{self.user_id}:lw"  # last goal write timestamp (seconds)

    # ---------- prediction cache ----------

    async def get_prediction(self, title: str, description: Optional[str], model: str) -> Optional[str]:
        if not (self.enabled and self.client):
            return None
        return await self.client.get(self._prediction_key(title, description, model))

    async def set_prediction(
        self,
        title: str,
        description: Optional[str],
        model: str,
        category: str,
        ttl: int = 86400,
    ) -> None:
        if not (self.enabled and self.client):
            return
        await self.client.setex(self._prediction_key(title, description, model), ttl, category)

    # ---------- goal writes ----------

    async def touch_last_write(self) -> None:
        if not (self.enabled and self.client):
            return
        now = int(time.time())
        await self.client.set(self._lw_key(), str(now))

    async def last_write_ts(self) -> str:
        if not (self.enabled and self.client):
            return "0"
        v = await self.client.get(self._lw_key())
        return v or "0"

from __future__ import annotations
import asyncio
from typing import Optional
from structlog import get_logger
from lifeos_categorizer.storage.sqlite_manager import SQLiteManager
from lifeos_categorizer.storage.redis_cache import RedisCache
from lifeos_categorizer.config import settings
from lifeos_categorizer.obs.metrics import METRICS
from lifeos_categorizer.tools.categorize_goals import categorize_goals_tool

log = get_logger()

class BackgroundWorker:
    def __init__(
        self,
        db: SQLiteManager,
        cache: Optional[RedisCache] = None,
        *,
        user_id: Optional[str] = None,
        interval_sec: Optional[int] = None,
    ) -> None:
        self.db = db
        self.cache = cache
        self.user_id = user_id or settings.user_id
        self.interval_sec = int(interval_sec if interval_sec is not None else settings.recategorize_interval_sec)
        self._tasks: list[asyncio.Task] = []
        self._stopping = asyncio.Event()

    async def start(self) -> None:
        self._stopping.clear()
        self._tasks = [
            asyncio.create_task(self._loop_recategorize(), name="recategorize"),
        ]
        log.info("bg_started", interval=self.interval_sec)

    async def stop(self) -> None:
        self._stopping.set()
        for t in self._tasks:
            t.cancel()
        for t in self._tasks:
            try:
                await t
            except asyncio.CancelledError:
                pass
        self._tasks.clear()
        log.info("bg_stopped")

    async def _sleep(self, seconds: int) -> None:
        try:
            await asyncio.wait_for(self._stopping.wait(), timeout=seconds)
        except asyncio.TimeoutError:
            return

    async def run_once(self) -> dict:
        res = await categorize_goals_tool(db=self.db, user_id=self.user_id, cache=self.cache)
        await METRICS.inc("goals_recategorized_total", res["categorized"])
        await METRICS.inc("recategorize_sweeps_total")
        return res

    async def _loop_recategorize(self) -> None:
        while not self._stopping.is_set():
            try:
                res = await self.run_once()
                log.info("recategorize_sweep", categorized=res["categorized"], total=res["total"])
            except Exception as e:
                log.warning("recategorize_error", err=str(e))
            await self._sleep(self.interval_sec)

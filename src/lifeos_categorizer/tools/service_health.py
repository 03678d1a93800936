from __future__ import annotations
import os
from ..storage.sqlite_manager import SQLiteManager
from ..storage.redis_cache import RedisCache

async def service_health_tool(*, db: SQLiteManager, cache: RedisCache | None, db_path: str, ai_enabled: bool) -> dict:
    c = await db.count_goals()
    p = os.path.expanduser(db_path)
    size_mb = round(os.path.getsize(p) / (1024 * 1024), 2) if os.path.exists(p) else 0.0
    lw = await cache.last_write_ts() if cache and cache.enabled else "disabled"
    return {"goals": c, "db_mb": size_mb, "ai": "enabled" if ai_enabled else "disabled", "last_write": lw}

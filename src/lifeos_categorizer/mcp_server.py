from __future__ import annotations
import asyncio
from typing import Optional

from mcp.server.fastmcp import FastMCP

from lifeos_categorizer.config import settings
from lifeos_categorizer.storage.sqlite_manager import SQLiteManager
from lifeos_categorizer.storage.redis_cache import RedisCache
from lifeos_categorizer.intelligence.llm import AIClassifier
from lifeos_categorizer.tools.predict_category import predict_category_tool
from lifeos_categorizer.tools.categorize_goals import categorize_goals_tool
from lifeos_categorizer.tools.store_goal import store_goal_tool, list_goals_tool
from lifeos_categorizer.tools.service_health import service_health_tool

mcp = FastMCP("lifeos-categorizer")

_db: Optional[SQLiteManager] = None
_cache: Optional[RedisCache] = None
_ai: Optional[AIClassifier] = None
_initialized = False
_lock = asyncio.Lock()

async def ensure_init() -> None:
    global _initialized, _db, _cache, _ai
    if _initialized:
        return
    async with _lock:
        if _initialized:
            return
        _db = SQLiteManager(settings.db_path)
        await _db.initialize()
        _cache = RedisCache(settings.redis_url, user_id=settings.user_id)
        await _cache.initialize()
        _ai = AIClassifier.from_settings(settings)
        _initialized = True

@mcp.tool()
async def predict_category(title: str, description: str | None = None,
                           explain: bool = False) -> dict:
    """Predict the life-domain category of a goal, task or project."""
    await ensure_init()
    return await predict_category_tool(
        title=title, description=description,
        ai=_ai, cache=_cache,
        cache_ttl=settings.prediction_cache_ttl_sec, explain=explain,
    )

@mcp.tool()
async def categorize_goals() -> dict:
    """Re-categorize every stored goal with the rule-based classifier."""
    await ensure_init()
    assert _db
    return await categorize_goals_tool(db=_db, user_id=settings.user_id, cache=_cache)

@mcp.tool()
async def store_goal(title: str, description: str | None = None,
                     goal_type: str = "weekly", priority_level: int = 3,
                     category: str | None = None) -> dict:
    await ensure_init()
    assert _db
    return await store_goal_tool(
        db=_db, cache=_cache, user_id=settings.user_id,
        title=title, description=description, goal_type=goal_type,
        priority_level=priority_level, category=category,
    )

@mcp.tool()
async def list_goals() -> dict:
    await ensure_init()
    assert _db
    return await list_goals_tool(db=_db, user_id=settings.user_id)

@mcp.tool()
async def service_health() -> dict:
    await ensure_init()
    assert _db
    return await service_health_tool(db=_db, cache=_cache, db_path=settings.db_path, ai_enabled=_ai is not None)

if __name__ == "__main__":
    mcp.run(transport="stdio")

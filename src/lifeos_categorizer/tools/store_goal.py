from __future__ import annotations
from typing import Optional
from ..storage.sqlite_manager import SQLiteManager
from ..storage.redis_cache import RedisCache
from ..intelligence.categories import Category
from ..intelligence.categorize import classify
from ..models import GoalType

async def store_goal_tool(
    *,
    db: SQLiteManager,
    cache: Optional[RedisCache],
    title: str,
    user_id: str = "default",
    description: Optional[str] = None,
    goal_type: str = "weekly",
    priority_level: int = 3,
    category: Optional[str] = None,
) -> dict:
    if not title or not title.strip():
        raise ValueError("Title is required")
    if category is not None and Category.parse(category) is None:
        raise ValueError(f"Unknown category: {category}")
    goal_type = GoalType(goal_type).value
    if not 1 <= int(priority_level) <= 5:
        raise ValueError("priority_level must be between 1 and 5")
    cat = category or classify(title, description).value
    goal = await db.insert_goal(
        user_id=user_id,
        title=title,
        description=description,
        goal_type=goal_type,
        priority_level=int(priority_level),
        category=cat,
    )
    if cache:
        await cache.touch_last_write()
    return goal

async def list_goals_tool(*, db: SQLiteManager, user_id: str = "default") -> dict:
    return {"goals": await db.fetch_goals_for_user(user_id)}

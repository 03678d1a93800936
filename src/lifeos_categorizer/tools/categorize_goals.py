from __future__ import annotations
from typing import Optional
from structlog import get_logger
from ..storage.sqlite_manager import SQLiteManager
from ..storage.redis_cache import RedisCache
from ..intelligence.categorize import classify
from ..models import GoalCategorization

log = get_logger()

async def categorize_goals_tool(
    *,
    db: SQLiteManager,
    user_id: str = "default",
    cache: Optional[RedisCache] = None,
) -> dict:
    """Re-run the rule-based classifier over every goal of the user; only changes are written."""
    goals = await db.fetch_goals_for_user(user_id)
    if not goals:
        return {"message": "No goals found to categorize", "categorized": 0, "total": 0, "results": []}

    results: list[GoalCategorization] = []
    categorized = 0
    for g in goals:
        old = g.get("category")
        try:
            new = classify(g["title"], g.get("description") or "").value
            if new == old:
                results.append(GoalCategorization(
                    goal_id=g["id"], title=g["title"], old_category=old, new_category=new,
                    success=True, message="Category already correct",
                ))
                continue
            updated = await db.update_goal_category(g["id"], new)
            if updated:
                categorized += 1
                results.append(GoalCategorization(
                    goal_id=g["id"], title=g["title"], old_category=old, new_category=new, success=True,
                ))
            else:
                results.append(GoalCategorization(
                    goal_id=g["id"], title=g["title"], old_category=old, new_category=new,
                    success=False, error="goal not found",
                ))
        except Exception as e:
            log.warning("goal_categorize_error", goal_id=g["id"], err=str(e))
            results.append(GoalCategorization(
                goal_id=g["id"], title=g["title"], old_category=old, new_category=old,
                success=False, error=str(e),
            ))

    if categorized and cache:
        await cache.touch_last_write()
    log.info("goals_categorized", user_id=user_id, categorized=categorized, total=len(goals))
    return {
        "message": f"Successfully categorized {categorized} out of {len(goals)} goals",
        "categorized": categorized,
        "total": len(goals),
        "results": [r.model_dump() for r in results],
    }

from __future__ import annotations
from typing import Optional
from ..storage.redis_cache import RedisCache
from ..intelligence.llm import AIClassifier
from ..intelligence.categorize import matching_keywords
from ..intelligence.predict import predict_category

async def predict_category_tool(
    *,
    title: Optional[str],
    description: Optional[str] = None,
    ai: Optional[AIClassifier] = None,
    cache: Optional[RedisCache] = None,
    cache_ttl: int = 86400,
    explain: bool = False,
) -> dict:
    if not title:
        raise ValueError("Title is required")
    title = str(title)
    description = str(description) if description is not None else None
    pred = await predict_category(title, description, ai=ai, cache=cache, cache_ttl=cache_ttl)
    out = pred.as_dict()
    if explain:
        out["matches"] = {c.value: kws for c, kws in matching_keywords(title, description).items()}
    return out

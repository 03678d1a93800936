from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from redis.exceptions import RedisError
from structlog import get_logger

from .categories import Category
from .categorize import classify
from .llm import AIClassifier
from ..obs.metrics import METRICS
from ..storage.redis_cache import RedisCache

log = get_logger()

Method = Literal["ai", "fallback"]


@dataclass(frozen=True)
class Prediction:
    category: Category
    method: Method

    def as_dict(self) -> dict:
        return {"category": self.category.value, "method": self.method}


async def _fallback(title: str, description: Optional[str]) -> Prediction:
    await METRICS.inc("predict_fallback_total")
    return Prediction(classify(title, description), "fallback")


async def predict_category(
    title: str,
    description: Optional[str] = None,
    *,
    ai: Optional[AIClassifier] = None,
    cache: Optional[RedisCache] = None,
    cache_ttl: int = 86400,
) -> Prediction:
    """AI prediction when available, rule-based classifier otherwise. Never raises on the AI path."""
    if ai is None:
        return await _fallback(title, description)

    if cache:
        try:
            hit = Category.parse(await cache.get_prediction(title, description, ai.model))
        except RedisError as e:
            log.warning("prediction_cache_error", op="get", err=str(e))
            hit = None
        if hit is not None:
            await METRICS.inc("predict_ai_total")
            await METRICS.inc("predict_cache_hits_total")
            return Prediction(hit, "ai")

    try:
        cat = await ai.classify(title, description)
    except Exception as e:
        log.warning("ai_classification_failed", err=str(e), model=ai.model)
        return await _fallback(title, description)

    if cat is None:
        return await _fallback(title, description)

    if cache:
        try:
            await cache.set_prediction(title, description, ai.model, cat.value, ttl=cache_ttl)
        except RedisError as e:
            log.warning("prediction_cache_error", op="set", err=str(e))
    await METRICS.inc("predict_ai_total")
    return Prediction(cat, "ai")

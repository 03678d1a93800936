from __future__ import annotations
import json, os, pathlib
from fastapi import FastAPI, Body, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from structlog import get_logger
from .config import settings
from .storage.sqlite_manager import SQLiteManager
from .storage.redis_cache import RedisCache
from .intelligence.categories import Category
from .intelligence.categorize import classify
from .intelligence.llm import AIClassifier
from .models import GoalCreate
from .tools.predict_category import predict_category_tool
from .tools.categorize_goals import categorize_goals_tool
from .tools.store_goal import store_goal_tool, list_goals_tool
from .tools.service_health import service_health_tool
from .obs.metrics import METRICS
from .background.worker import BackgroundWorker

log = get_logger()
app = FastAPI(title="lifeos-categorizer", version="0.1.0")

_db: SQLiteManager | None = None
_cache: RedisCache | None = None
_ai: AIClassifier | None = None
_bg: BackgroundWorker | None = None

@app.on_event("startup")
async def startup() -> None:
    global _db, _cache, _ai, _bg
    db_path = os.path.expanduser(settings.db_path)
    pathlib.Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    _db = SQLiteManager(db_path)
    await _db.initialize()
    _cache = RedisCache(settings.redis_url, user_id=settings.user_id)
    await _cache.initialize()
    _ai = AIClassifier.from_settings(settings)
    if settings.enable_background:
        _bg = BackgroundWorker(_db, _cache)
        await _bg.start()
    log.info("startup", db=db_path, redis=_cache.enabled, ai=_ai is not None, model=settings.openai_model, bg=settings.enable_background)

@app.on_event("shutdown")
async def shutdown() -> None:
    global _db, _cache, _ai, _bg
    if _bg: await _bg.stop()
    if _ai: await _ai.close()
    if _cache: await _cache.close()
    if _db: await _db.close()
    _bg = _ai = _cache = _db = None
    log.info("shutdown")

@app.exception_handler(Exception)
async def unexpected_error(request: Request, exc: Exception):
    log.error("unexpected_error", path=request.url.path, err=str(exc))
    return JSONResponse({"error": "Internal server error", "details": str(exc)}, status_code=500)

@app.get("/health")
async def health():
    return {"ok": True, "db_path": os.path.expanduser(settings.db_path), "ai": _ai is not None}

@app.get("/metrics")
async def metrics():
    text = await METRICS.export_prom()
    return Response(content=text, media_type="text/plain; version=0.0.4")

@app.get("/api/categories")
async def categories():
    return {"categories": [{"value": c.value, "label": c.label} for c in Category]}

@app.post("/api/predict-category")
async def predict_category_ep(request: Request):
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        payload = None
    if not isinstance(payload, dict):
        log.warning("predict_bad_body")
        return {"category": classify("", "").value, "method": "fallback"}
    try:
        async with METRICS.timed("latency_predict", "requests_predict_total"):
            res = await predict_category_tool(
                title=payload.get("title"),
                description=payload.get("description"),
                ai=_ai, cache=_cache,
                cache_ttl=settings.prediction_cache_ttl_sec,
                explain=payload.get("explain") is True,
            )
    except ValueError as e:
        return JSONResponse({"error": str(e)}, status_code=400)
    log.info("predicted", category=res["category"], method=res["method"])
    return res

@app.post("/api/goals/categorize")
async def categorize_goals_ep():
    assert _db is not None
    async with METRICS.timed("latency_categorize", "requests_categorize_total"):
        res = await categorize_goals_tool(db=_db, user_id=settings.user_id, cache=_cache)
    await METRICS.inc("goals_recategorized_total", res["categorized"])
    return res

@app.get("/api/goals")
async def list_goals_ep():
    assert _db is not None
    return await list_goals_tool(db=_db, user_id=settings.user_id)

@app.post("/api/goals")
async def create_goal_ep(payload: dict = Body(...)):
    assert _db is not None
    try:
        body = GoalCreate.model_validate(payload)
    except ValidationError as e:
        return JSONResponse(
            {"error": "Invalid input", "details": json.loads(e.json(include_url=False))},
            status_code=400,
        )
    goal = await store_goal_tool(
        db=_db, cache=_cache,
        user_id=settings.user_id,
        title=body.title,
        description=body.description,
        goal_type=body.goal_type.value,
        priority_level=body.priority_level,
        category=body.category.value if body.category else None,
    )
    await METRICS.inc("requests_store_goal_total")
    return JSONResponse({"goal": goal}, status_code=201)

@app.get("/tools/service_health")
async def service_health_ep():
    assert _db is not None
    res = await service_health_tool(db=_db, cache=_cache, db_path=settings.db_path, ai_enabled=_ai is not None)
    return {"success": True, "data": res}

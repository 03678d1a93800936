from __future__ import annotations
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LIFEOS_", case_sensitive=False, extra="ignore", populate_by_name=True)

    # Storage
    db_path: str = Field(default="~/.lifeos/goals.db")
    redis_url: str = Field(default="redis://localhost:6379/0")
    prediction_cache_ttl_sec: int = 86400     # 24 h

    # AI classification
    ai_enabled: bool = True
    openai_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("LIFEOS_OPENAI_API_KEY", "OPENAI_API_KEY"),
    )
    openai_model: str = "gpt-4o-mini"
    openai_timeout_sec: float = 30.0

    # Background jobs
    enable_background: bool = False
    recategorize_interval_sec: int = 86400    # 24 h

    # User identity
    user_id: str = "default"

settings = Settings()

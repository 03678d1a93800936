from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import openai
from structlog import get_logger

from .categories import CATEGORY_DESCRIPTIONS, Category
from .utils import normalize_label

if TYPE_CHECKING:
    from ..config import Settings

log = get_logger()

PLACEHOLDER_KEYS = {"", "your_openai_api_key_here"}

_PRIORITY_RULES = """PRIORITY RULES:
- Fires should be identified first - anything urgent, emergency, or crisis-related
- Quick money vs save money: quick_money is about earning, save_money is about spending less
- Network expansion focuses on relationships and fundraising, not general socializing
- Business growth is for existing businesses, business_launch is for starting new ventures"""


class AIClassificationError(Exception):
    """The text-generation provider failed or returned nothing usable."""


def build_prompt(title: str, description: Optional[str] = None) -> str:
    cats = "\n".join(f"- {c.value}: {CATEGORY_DESCRIPTIONS[c]}" for c in Category)
    return (
        "You are a productivity expert. Analyze the following goal/task and "
        "predict which category it belongs to.\n\n"
        f'Title: "{title}"\n'
        f'Description: "{description or "No description provided"}"\n\n'
        f"Categories:\n{cats}\n\n"
        f"{_PRIORITY_RULES}\n\n"
        "Respond with ONLY the category name (use underscores, not spaces)."
    )


def parse_label(raw: Optional[str]) -> Optional[Category]:
    """Map a model reply onto the closed taxonomy; None when it is not a member."""
    if not raw:
        return None
    return Category.parse(normalize_label(raw))


class AIClassifier:
    """OpenAI chat-completions classifier. Returns None for out-of-taxonomy replies."""

    def __init__(
        self,
        api_key: str,
        *,
        model: str = "gpt-4o-mini",
        timeout: float = 30.0,
        max_tokens: int = 10,
        temperature: float = 0.1,
        client: Optional[openai.AsyncOpenAI] = None,
    ) -> None:
        self.model = model
        self.timeout = timeout
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.client = client or openai.AsyncOpenAI(api_key=api_key)

    @classmethod
    def from_settings(cls, settings: "Settings") -> Optional["AIClassifier"]:
        key = (settings.openai_api_key or "").strip()
        if not settings.ai_enabled or key in PLACEHOLDER_KEYS:
            return None
        return cls(key, model=settings.openai_model, timeout=settings.openai_timeout_sec)

    async def complete(self, prompt: str) -> str:
        try:
            resp = await self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                timeout=self.timeout,
            )
        except openai.OpenAIError as e:
            raise AIClassificationError(str(e)) from e
        if not resp.choices:
            raise AIClassificationError("empty completion")
        return resp.choices[0].message.content or ""

    async def classify(self, title: str, description: Optional[str] = None) -> Optional[Category]:
        raw = await self.complete(build_prompt(title, description))
        cat = parse_label(raw)
        if cat is None:
            log.info("ai_label_invalid", model=self.model, raw=raw[:40])
        return cat

    async def close(self) -> None:
        await self.client.close()

from __future__ import annotations

from typing import Optional

from .categories import CATEGORY_RULES, Category


def _blob(title: Optional[str], description: Optional[str]) -> str:
    return f"{title or ''} {description or ''}".lower()


def classify(title: Optional[str], description: Optional[str] = None) -> Category:
    """
    Rule-based category for a title/description pair.

    Plain substring containment against the lowercased text, first matching
    rule set wins, `Category.OTHER` when nothing matches. Total and pure.
    """
    text = _blob(title, description)
    for category, keywords in CATEGORY_RULES:
        if any(kw in text for kw in keywords):
            return category
    return Category.OTHER


def matching_keywords(title: Optional[str], description: Optional[str] = None) -> dict[Category, list[str]]:
    """Every rule-set hit, in evaluation order. Diagnostic only."""
    text = _blob(title, description)
    hits: dict[Category, list[str]] = {}
    for category, keywords in CATEGORY_RULES:
        found = [kw for kw in keywords if kw in text]
        if found:
            hits[category] = found
    return hits

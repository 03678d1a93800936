"""
Request/record models for goals.

Goals are the classifiable items of the product: a title, an optional
description, and the category the classifier (or the user) assigned.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .intelligence.categories import Category


class GoalType(str, Enum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class GoalCreate(BaseModel):
    """Body of POST /api/goals."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    goal_type: GoalType = GoalType.WEEKLY
    priority_level: int = Field(default=3, ge=1, le=5)
    category: Optional[Category] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("title must not be blank")
        return v


class GoalCategorization(BaseModel):
    """Outcome of re-categorizing one goal."""

    goal_id: str
    title: str
    old_category: Optional[str] = None
    new_category: Optional[str] = None
    success: bool
    message: Optional[str] = None
    error: Optional[str] = None

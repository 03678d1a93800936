from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Closed taxonomy used to tag goals, tasks and projects."""

    QUICK_MONEY = "quick_money"
    SAVE_MONEY = "save_money"
    HEALTH = "health"
    NETWORK_EXPANSION = "network_expansion"
    BUSINESS_GROWTH = "business_growth"
    FIRES = "fires"
    GOOD_LIVING = "good_living"
    BIG_VISION = "big_vision"
    JOB = "job"
    ORGANIZATION = "organization"
    TECH_ISSUES = "tech_issues"
    BUSINESS_LAUNCH = "business_launch"
    FUTURE_PLANNING = "future_planning"
    INNOVATION = "innovation"
    OTHER = "other"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()

    @classmethod
    def parse(cls, value: str | None) -> "Category | None":
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


# One-line descriptions, fed to the LLM prompt.
CATEGORY_DESCRIPTIONS: dict[Category, str] = {
    Category.QUICK_MONEY: "Making money quickly, side hustles, immediate income, fast earnings, gig work, quick profit",
    Category.SAVE_MONEY: "Saving money, reducing costs, cutting expenses, frugal living, cost optimization, budgeting",
    Category.HEALTH: "Physical fitness, mental health, wellness, exercise, diet, medical, self-care",
    Category.NETWORK_EXPANSION: "Social goals, networking, fundraising, investor relations, building connections",
    Category.BUSINESS_GROWTH: "Growing existing business, scaling operations, increasing revenue, market expansion",
    Category.FIRES: "Emergency items, urgent problems, crisis management, immediate attention needed",
    Category.GOOD_LIVING: "Enjoyable activities, hobbies, travel, entertainment, quality of life, fun experiences",
    Category.BIG_VISION: "Long-term strategic goals, major life changes, transformative projects, legacy building",
    Category.JOB: "Resume building, job applications, recruiter outreach, career advancement, employment",
    Category.ORGANIZATION: "Administrative tasks, filing, scheduling, systems, processes, efficiency",
    Category.TECH_ISSUES: "Technical problems, software bugs, IT support, digital troubleshooting",
    Category.BUSINESS_LAUNCH: "Starting new business, launching products, entrepreneurship, startup activities",
    Category.FUTURE_PLANNING: "Strategic planning, goal setting, vision work, long-term preparation",
    Category.INNOVATION: "New projects, creative ideas, research, experimentation, breakthrough thinking",
    Category.OTHER: "Anything that doesn't fit the above categories",
}


# Evaluated top to bottom, first hit wins. Order is part of the contract:
# fires before everything else, quick_money before save_money.
CATEGORY_RULES: tuple[tuple[Category, tuple[str, ...]], ...] = (
    (Category.FIRES, (
        "urgent", "emergency", "crisis", "asap", "immediately", "deadline",
        "overdue", "late", "broken", "fix", "problem", "issue", "trouble",
        "help", "critical", "priority", "rush",
    )),
    (Category.QUICK_MONEY, (
        "side hustle", "gig", "freelance", "quick money", "fast cash",
        "immediate income", "part time", "extra income", "make money",
        "earn money", "quick buck", "side job", "temp work", "odd job",
        "quick profit", "fast earning", "immediate cash", "quick income",
        "side income", "gig work", "delivery", "uber", "lyft", "taskrabbit",
        "fiverr", "upwork", "quick cash",
    )),
    (Category.SAVE_MONEY, (
        "save money", "cut cost", "reduce expense", "frugal", "budget",
        "cheap", "affordable", "discount", "coupon", "deal", "sale",
        "cut back", "spend less", "save up", "emergency fund", "debt payoff",
        "pay off debt", "reduce spending", "cost effective", "money saving",
        "thrifty", "penny pinching",
        "credit card debt",
    )),
    (Category.HEALTH, (
        "health", "fitness", "exercise", "workout", "gym", "diet",
        "nutrition", "wellness", "mental", "therapy", "doctor", "medical",
        "sleep", "meditation", "yoga", "running", "walking", "cardio",
        "strength", "weight", "muscle", "flexibility", "stretching",
        "recovery", "stress", "anxiety", "depression", "mindfulness",
    )),
    (Category.NETWORK_EXPANSION, (
        "network", "networking", "fundraising", "investor", "investors",
        "funding", "raise money", "pitch", "presentation", "connections",
        "relationship", "social", "meet people", "conference", "event",
        "speaking", "outreach", "partnership", "collaboration", "mentor",
        "mentorship",
    )),
    (Category.BUSINESS_GROWTH, (
        "grow business", "scale", "expansion", "increase revenue",
        "market share", "customer acquisition", "sales growth",
        "business development", "scaling", "growth", "revenue growth",
        "market expansion", "business growth",
    )),
    (Category.GOOD_LIVING, (
        "hobby", "travel", "vacation", "entertainment", "movie", "music",
        "art", "craft", "garden", "cook", "recipe", "fun", "relax", "rest",
        "leisure", "enjoy", "pleasure", "happiness", "joy", "quality life",
        "experience", "adventure", "explore", "discover",
    )),
    (Category.BIG_VISION, (
        "vision", "legacy", "transform", "change world", "impact", "mission",
        "purpose", "big picture", "long term", "strategic", "life changing",
        "revolutionary", "breakthrough", "game changer", "paradigm", "shift",
    )),
    (Category.JOB, (
        "resume", "cv", "job application", "recruiter", "interview",
        "career", "employment", "job search", "linkedin", "portfolio",
        "cover letter", "job hunt", "career change", "promotion", "raise",
        "salary",
    )),
    (Category.ORGANIZATION, (
        "organize", "organization", "filing", "scheduling", "systems",
        "processes", "efficiency", "admin", "administrative", "paperwork",
        "files", "folders", "calendar", "schedule", "planning", "structure",
        "system",
    )),
    (Category.TECH_ISSUES, (
        "tech", "technical", "bug", "software", "hardware", "computer",
        "it support", "digital", "troubleshoot", "fix computer", "update",
        "upgrade", "install", "uninstall", "error", "crash", "broken computer",
    )),
    (Category.BUSINESS_LAUNCH, (
        "launch", "startup", "start business", "entrepreneur",
        "new business", "business plan", "founder", "co founder", "venture",
        "launch product", "go to market", "mvp", "minimum viable product",
    )),
    (Category.FUTURE_PLANNING, (
        "planning", "strategy", "strategic", "future", "long term",
        "roadmap", "milestone", "timeline", "projection", "forecast", "plan",
        "preparation", "prep", "ready", "prepare",
    )),
    (Category.INNOVATION, (
        "innovation", "innovate", "creative", "new idea", "research",
        "experiment", "prototype", "invention", "breakthrough", "discovery",
        "explore", "test", "trial", "pilot", "beta", "cutting edge",
        "next generation",
    )),
)

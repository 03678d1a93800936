import pytest

from lifeos_categorizer.intelligence.categories import CATEGORY_RULES, Category
from lifeos_categorizer.intelligence.categorize import classify, matching_keywords


def test_rule_order_is_fixed() -> None:
    order = [c.value for c, _ in CATEGORY_RULES]
    assert order == [
        "fires", "quick_money", "save_money", "health", "network_expansion",
        "business_growth", "good_living", "big_vision", "job", "organization",
        "tech_issues", "business_launch", "future_planning", "innovation",
    ]


def test_every_category_except_other_has_rules() -> None:
    ruled = {c for c, _ in CATEGORY_RULES}
    assert ruled == set(Category) - {Category.OTHER}
    for _, keywords in CATEGORY_RULES:
        assert len(keywords) >= 13
        assert all(kw == kw.lower() for kw in keywords)


@pytest.mark.parametrize(
    "title,description",
    [("", None), ("", ""), ("   ", None), ("x", None), (None, None), ("", "some notes")],
)
def test_total_for_degenerate_input(title, description) -> None:
    assert isinstance(classify(title, description), Category)


def test_deterministic() -> None:
    args = ("Launch my podcast", "record the first three episodes")
    assert classify(*args) == classify(*args)


def test_case_insensitive() -> None:
    assert classify("URGENT deadline", "") == classify("urgent deadline", "")
    assert classify("URGENT deadline", "") is Category.FIRES


def test_fires_beats_health() -> None:
    assert classify("urgent: fix my workout schedule", "") is Category.FIRES


def test_quick_money_beats_save_money() -> None:
    # "freelance" (quick_money) and "budget" (save_money)
    assert classify("Freelance gig to cover the budget gap") is Category.QUICK_MONEY


def test_no_match_is_other() -> None:
    assert classify("purple elephant dancing", "") is Category.OTHER


def test_substring_matches_inside_words() -> None:
    # "ecosystem" contains "system"; "heart" contains "art"
    assert classify("Map the ecosystem") is Category.ORGANIZATION
    assert classify("Heart") is Category.GOOD_LIVING
    # "chocolate" contains "late"
    assert classify("Chocolate") is Category.FIRES


def test_description_is_considered() -> None:
    assert classify("Saturday", "go to the gym") is Category.HEALTH


def test_title_and_description_are_space_joined() -> None:
    # keyword spans the boundary between title and description
    assert classify("side", "hustle ideas") is Category.QUICK_MONEY


@pytest.mark.parametrize(
    "title,description,expected",
    [
        ("Pay off credit card debt", "", Category.SAVE_MONEY),
        ("Pay off debt before summer", None, Category.SAVE_MONEY),
        ("Book flight for vacation", "need to relax", Category.GOOD_LIVING),
        ("Server is down, critical outage", "", Category.FIRES),
        ("Update my resume", "", Category.JOB),
        ("Meet investors", "seed round", Category.NETWORK_EXPANSION),
        ("Increase revenue", "", Category.BUSINESS_GROWTH),
        ("Write my mission statement", "", Category.BIG_VISION),
        ("Clean the inbox folders", "", Category.ORGANIZATION),
        ("Reinstall the laptop OS", "", Category.TECH_ISSUES),
        ("Build the MVP", "", Category.BUSINESS_LAUNCH),
        ("Retirement roadmap", "", Category.FUTURE_PLANNING),
        ("Prototype a solar kettle", "", Category.INNOVATION),
        ("Drive for Uber on weekends", "", Category.QUICK_MONEY),
    ],
)
def test_scenarios(title, description, expected) -> None:
    assert classify(title, description) is expected


def test_matching_keywords_reports_all_hits_in_order() -> None:
    hits = matching_keywords("urgent: fix my workout schedule")
    assert list(hits)[0] is Category.FIRES
    assert hits[Category.FIRES] == ["urgent", "fix"]
    assert "workout" in hits[Category.HEALTH]
    assert "schedule" in hits[Category.ORGANIZATION]


def test_matching_keywords_empty_for_no_overlap() -> None:
    assert matching_keywords("purple elephant dancing") == {}

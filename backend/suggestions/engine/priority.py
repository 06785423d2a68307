# suggestions/engine/priority.py

import datetime
import logging
from typing import List, Optional

from .rules import PriorityRules, get_rules
from .signals import combined_text, days_until, matches_any, require_title
from .types import PriorityInput, PriorityResult

logger = logging.getLogger(__name__)

PRIORITY_URGENT = "urgent"
PRIORITY_HIGH = "high"
PRIORITY_MEDIUM = "medium"
PRIORITY_LOW = "low"


def _keyword_tier(text: str, rules: PriorityRules) -> str:
    """First matching keyword tier: urgent, then high, then low."""
    if matches_any(text, rules.urgent_keywords):
        return PRIORITY_URGENT
    if matches_any(text, rules.high_keywords):
        return PRIORITY_HIGH
    if matches_any(text, rules.low_keywords):
        return PRIORITY_LOW
    return "normal"


def _keyword_adjustment(tier: str, rules: PriorityRules) -> int:
    return {
        PRIORITY_URGENT: rules.urgent_keyword_bonus,
        PRIORITY_HIGH: rules.high_keyword_bonus,
        PRIORITY_LOW: rules.low_keyword_penalty,
    }.get(tier, 0)


def _due_date_adjustment(days: float, rules: PriorityRules) -> int:
    for upper_bound, adjustment in rules.due_date_bands:
        if days < upper_bound:
            return adjustment
    if days > rules.far_due_days:
        return rules.far_due_penalty
    return 0


def categorize(score: int, rules: PriorityRules) -> str:
    if score >= rules.urgent_threshold:
        return PRIORITY_URGENT
    if score >= rules.high_threshold:
        return PRIORITY_HIGH
    if score <= rules.low_threshold:
        return PRIORITY_LOW
    return PRIORITY_MEDIUM


def score_priority(
    data: PriorityInput,
    now: Optional[datetime.datetime] = None,
    rules: Optional[PriorityRules] = None,
) -> PriorityResult:
    """
    Suggests a priority category for a task.

    The score starts at the base, takes the adjustment of the first matching
    keyword tier, the adjustment of the due-date band, and the project urgency
    bonus. It is deliberately left unclamped: it is a relative signal and may
    fall outside 0..100.

    now: reference time for the due-date bands (defaults to current UTC time)
    """
    require_title(data.title)
    if rules is None:
        rules = get_rules().priority
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)

    text = combined_text(data.title, data.description)
    score = rules.base_score

    tier = _keyword_tier(text, rules)
    score += _keyword_adjustment(tier, rules)

    days = None
    if data.due_date is not None:
        days = days_until(data.due_date, now)
        score += _due_date_adjustment(days, rules)

    if data.project_urgent:
        score += rules.project_urgency_bonus

    priority = categorize(score, rules)

    reasoning: List[str] = []
    if priority == PRIORITY_URGENT:
        reasoning.append("High urgency indicators detected")
    elif priority == PRIORITY_HIGH:
        reasoning.append("Important task with high impact")
    elif priority == PRIORITY_LOW:
        reasoning.append("Low impact or enhancement task")

    if days is not None and days < rules.approaching_due_days:
        reasoning.append("Due date approaching")
    elif days is not None and days > rules.far_due_days:
        reasoning.append("Due date is far away")

    if data.project_urgent:
        reasoning.append("Project is flagged as urgent")

    logger.debug(f"Priority scored {score} ({priority}) for '{data.title}'")

    return PriorityResult(
        priority=priority,
        score=score,
        confidence=rules.confidence,
        reasoning=reasoning,
        factors={
            "keyword_analysis": tier,
            "due_date_proximity": "considered" if data.due_date is not None else "not_provided",
            "project_context": "urgent" if data.project_urgent else "not_urgent",
        },
    )

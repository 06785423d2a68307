# suggestions/engine/rules.py

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriorityRules:
    """Keyword tiers, due-date bands and category thresholds for priority scoring."""

    base_score: int = 50

    # Tiers are tested in this order; only the first matching tier applies.
    urgent_keywords: Tuple[str, ...] = (
        "urgent", "critical", "emergency", "asap", "immediately", "bug", "error", "broken",
    )
    high_keywords: Tuple[str, ...] = (
        "important", "major", "significant", "deadline", "client", "production",
    )
    low_keywords: Tuple[str, ...] = (
        "nice to have", "enhancement", "minor", "cosmetic", "cleanup",
    )
    urgent_keyword_bonus: int = 30
    high_keyword_bonus: int = 20
    low_keyword_penalty: int = -20

    # (upper bound in days, adjustment); the first band the due date falls under wins
    due_date_bands: Tuple[Tuple[float, int], ...] = ((1, 30), (3, 20), (7, 10))
    far_due_days: float = 30
    far_due_penalty: int = -10
    approaching_due_days: float = 7

    project_urgency_bonus: int = 15

    urgent_threshold: int = 80
    high_threshold: int = 65
    low_threshold: int = 30

    confidence: float = 0.7


@dataclass(frozen=True)
class EstimationRules:
    base_hours: float = 4.0
    # (word count strictly above, hours added); checks are independent
    length_steps: Tuple[Tuple[int, float], ...] = ((50, 2.0), (100, 2.0))
    high_complexity_words: int = 50
    priority_multipliers: Dict[str, float] = field(default_factory=lambda: {
        "low": 0.8,
        "medium": 1.0,
        "high": 1.3,
        "urgent": 1.5,
    })
    type_multipliers: Dict[str, float] = field(default_factory=lambda: {
        "bug": 0.7,
        "feature": 1.2,
        "research": 1.5,
        "documentation": 0.8,
        "testing": 0.9,
        "general": 1.0,
    })
    history_limit: int = 100
    confident_sample_size: int = 10
    high_confidence: float = 0.8
    low_confidence: float = 0.6


@dataclass(frozen=True)
class AssigneeRules:
    base_score: int = 50
    workload_penalty: int = 5
    experience_bonus: int = 2
    experience_cap: int = 20
    role_bonus: Dict[str, int] = field(default_factory=lambda: {
        "owner": 10,
        "admin": 5,
    })
    skill_bonus: int = 10
    # Award a skill twice when it occurs in both the task text and the username
    count_name_matches_separately: bool = False
    min_score: int = 0
    max_score: int = 100
    light_workload_below: int = 3
    moderate_workload_below: int = 6
    top_n: int = 5
    confidence: float = 0.6


@dataclass(frozen=True)
class BreakdownRules:
    complexity_counts: Dict[str, int] = field(default_factory=lambda: {
        "low": 3,
        "medium": 5,
        "high": 7,
        "very_high": 9,
    })
    default_count: int = 5
    # (trigger keywords, (title, hours, priority) triples); triggers are independent
    contextual_subtasks: Tuple[Tuple[Tuple[str, ...], Tuple[Tuple[str, int, str], ...]], ...] = (
        (("api", "backend"), (
            ("Design API endpoints", 2, "high"),
            ("Implement backend logic", 4, "high"),
            ("Add error handling", 2, "medium"),
        )),
        (("ui", "frontend"), (
            ("Create UI mockups", 2, "medium"),
            ("Implement user interface", 4, "high"),
            ("Add responsive design", 2, "medium"),
        )),
        (("database", "data"), (
            ("Design database schema", 2, "high"),
            ("Create migrations", 1, "high"),
            ("Optimize queries", 2, "medium"),
        )),
    )
    generic_subtasks: Tuple[str, ...] = (
        "Research and planning",
        "Design and architecture",
        "Implementation",
        "Testing",
        "Documentation",
        "Code review",
        "Deployment preparation",
    )
    generic_hours: Tuple[int, int] = (1, 4)
    generic_priorities: Tuple[str, ...] = ("low", "medium", "high")
    recommendations: Tuple[str, ...] = (
        "Start with high-priority subtasks",
        "Consider breaking down large subtasks further",
        "Review estimates after beginning work",
        "Update progress regularly",
    )
    confidence: float = 0.7


@dataclass(frozen=True)
class ExplorationRules:
    max_limit: int = 20
    recent_task_limit: int = 50
    # (trigger keywords, title, description template, priority, hours, confidence)
    contextual_tasks: Tuple[Tuple[Tuple[str, ...], str, str, str, int, float], ...] = (
        (("bug", "fix"), "Debug and fix reported issues",
         "Investigate and resolve bugs related to: {context}", "high", 4, 0.8),
        (("feature", "new"), "Implement new feature",
         "Develop new functionality: {context}", "medium", 8, 0.7),
    )
    common_tasks: Tuple[Tuple[str, str, str], ...] = (
        ("Setup project documentation",
         "Create comprehensive project documentation including README, API docs, and user guides", "high"),
        ("Implement error handling",
         "Add comprehensive error handling throughout the application", "medium"),
        ("Add unit tests",
         "Create unit tests for core functionality to ensure code quality", "high"),
        ("Performance optimization",
         "Analyze and optimize application performance bottlenecks", "medium"),
        ("Security audit",
         "Conduct security review and implement necessary security measures", "high"),
        ("Database optimization",
         "Optimize database queries and add necessary indexes", "medium"),
        ("User experience improvements",
         "Review and improve user interface and user experience", "medium"),
        ("Code refactoring",
         "Refactor legacy code to improve maintainability and readability", "low"),
        ("API documentation",
         "Create and maintain comprehensive API documentation", "medium"),
        ("Backup and recovery setup",
         "Implement backup and disaster recovery procedures", "high"),
    )
    common_hours: Tuple[int, int] = (1, 8)
    common_confidence_floor: float = 0.6
    common_confidence_spread: float = 0.3


@dataclass(frozen=True)
class EngineRules:
    priority: PriorityRules = field(default_factory=PriorityRules)
    estimation: EstimationRules = field(default_factory=EstimationRules)
    assignee: AssigneeRules = field(default_factory=AssigneeRules)
    breakdown: BreakdownRules = field(default_factory=BreakdownRules)
    exploration: ExplorationRules = field(default_factory=ExplorationRules)


def build_rules(overrides: Optional[Dict[str, Dict[str, Any]]] = None) -> EngineRules:
    """
    Builds the rule tables, applying per-section overrides on top of the defaults.

    Raises ImproperlyConfigured for unknown sections or fields so a typo in
    settings fails loudly instead of silently scoring with defaults.
    """
    rules = EngineRules()
    if not overrides:
        return rules

    sections = {f.name for f in dataclasses.fields(EngineRules)}
    replaced = {}
    for section, values in overrides.items():
        if section not in sections:
            raise ImproperlyConfigured(f"Unknown suggestion rule section: {section!r}")
        current = getattr(rules, section)
        known = {f.name for f in dataclasses.fields(current)}
        unknown = set(values) - known
        if unknown:
            raise ImproperlyConfigured(
                f"Unknown fields for suggestion rules {section!r}: {sorted(unknown)}"
            )
        replaced[section] = dataclasses.replace(current, **values)
        logger.debug(f"Suggestion rules: overriding {section} fields {sorted(values)}")

    return dataclasses.replace(rules, **replaced)


def get_rules() -> EngineRules:
    """Rule tables for the current settings (SUGGESTION_ENGINE_RULES)."""
    return build_rules(getattr(settings, "SUGGESTION_ENGINE_RULES", None))

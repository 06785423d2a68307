# suggestions/engine/exploration.py

import logging
import random
from typing import List, Optional, Sequence

from .rules import ExplorationRules, get_rules
from .signals import matches_any
from .types import (
    ExistingTask,
    ExplorationInput,
    ExploratorySuggestionResult,
    SuggestedTask,
)

logger = logging.getLogger(__name__)


def _contextual_tasks(context: str, rules: ExplorationRules) -> List[SuggestedTask]:
    text = context.lower()
    suggestions = []
    for triggers, title, description, priority, hours, confidence in rules.contextual_tasks:
        if matches_any(text, triggers):
            suggestions.append(SuggestedTask(
                title=title,
                description=description.format(context=context),
                priority=priority,
                estimated_hours=hours,
                confidence=confidence,
            ))
    return suggestions


def suggest_tasks(
    data: ExplorationInput,
    existing_tasks: Sequence[ExistingTask] = (),
    project_count: int = 0,
    rng: Optional[random.Random] = None,
    rules: Optional[ExplorationRules] = None,
) -> ExploratorySuggestionResult:
    """
    Proposes new tasks for the user's projects.

    Context keywords ("bug"/"fix", "feature"/"new") add targeted suggestions;
    the remaining slots are filled from a shuffled pool of common project
    tasks with random estimates. Without any project there is nothing to
    suggest and the result is empty.
    """
    if rules is None:
        rules = get_rules().exploration
    if rng is None:
        rng = random.Random()

    limit = max(1, min(data.limit, rules.max_limit))

    if project_count == 0:
        return ExploratorySuggestionResult(
            suggestions=[],
            project_count=0,
            existing_task_count=len(existing_tasks),
            confidence=0.0,
            reasons=["No projects available for suggestions"],
        )

    suggestions = _contextual_tasks(data.context or "", rules)[:limit]
    reasons = [f"Matched context: {s.title}" for s in suggestions]
    open_slots = limit - len(suggestions)

    pool = list(rules.common_tasks)
    rng.shuffle(pool)
    low_hours, high_hours = rules.common_hours
    for title, description, priority in pool[:open_slots]:
        suggestions.append(SuggestedTask(
            title=title,
            description=description,
            priority=priority,
            estimated_hours=rng.randint(low_hours, high_hours),
            confidence=rules.common_confidence_floor + rng.random() * rules.common_confidence_spread,
        ))

    if open_slots > 0:
        reasons.append("Common project tasks")

    confidence = sum(s.confidence for s in suggestions) / len(suggestions)

    logger.debug(f"Suggested {len(suggestions)} tasks across {project_count} projects")

    return ExploratorySuggestionResult(
        suggestions=suggestions,
        project_count=project_count,
        existing_task_count=len(existing_tasks),
        confidence=confidence,
        reasons=reasons,
    )

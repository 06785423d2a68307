# suggestions/engine/breakdown.py

import logging
import random
from typing import List, Optional

from .rules import BreakdownRules, get_rules
from .signals import combined_text, matches_any, require_title
from .types import BreakdownInput, BreakdownResult, Subtask

logger = logging.getLogger(__name__)


def target_subtask_count(complexity: str, rules: BreakdownRules) -> int:
    return rules.complexity_counts.get(complexity, rules.default_count)


def _contextual_subtasks(text: str, rules: BreakdownRules) -> List[Subtask]:
    subtasks = []
    for triggers, templates in rules.contextual_subtasks:
        if matches_any(text, triggers):
            subtasks.extend(
                Subtask(title=title, estimated_hours=hours, priority=priority)
                for title, hours, priority in templates
            )
    return subtasks


def _unused_generic_subtasks(subtasks: List[Subtask], rules: BreakdownRules) -> List[str]:
    titles = [subtask.title.lower() for subtask in subtasks]
    return [
        name for name in rules.generic_subtasks
        if not any(name.lower() in title for title in titles)
    ]


def break_down_task(
    data: BreakdownInput,
    rng: Optional[random.Random] = None,
    rules: Optional[BreakdownRules] = None,
) -> BreakdownResult:
    """
    Splits a task into subtasks sized by its complexity level.

    Keyword-triggered subtasks come first, then generic subtasks are drawn at
    random (with random hours and priority) until the target count is reached
    or the generic pool runs out. The list is cut to the target count and the
    total covers only the subtasks returned.

    rng: random source for the generic draws; pass a seeded random.Random to
         make the output reproducible
    """
    require_title(data.title)
    if rules is None:
        rules = get_rules().breakdown
    if rng is None:
        rng = random.Random()

    target = target_subtask_count(data.complexity, rules)
    text = combined_text(data.title, data.description)

    subtasks = _contextual_subtasks(text, rules)

    low_hours, high_hours = rules.generic_hours
    while len(subtasks) < target:
        remaining = _unused_generic_subtasks(subtasks, rules)
        if not remaining:
            break
        subtasks.append(Subtask(
            title=rng.choice(remaining),
            estimated_hours=rng.randint(low_hours, high_hours),
            priority=rng.choice(rules.generic_priorities),
        ))

    subtasks = subtasks[:target]

    logger.debug(f"Broke '{data.title}' into {len(subtasks)} subtasks (target {target})")

    return BreakdownResult(
        subtasks=subtasks,
        total_estimated_hours=sum(subtask.estimated_hours for subtask in subtasks),
        complexity=data.complexity,
        confidence=rules.confidence,
        recommendations=list(rules.recommendations),
    )

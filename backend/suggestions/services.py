# suggestions/services.py
"""
Entry points for generating suggestions.

Each function runs one generator and records the result before handing it
back, so every result a caller sees already has its audit record committed.
Collaborator data (history, roster, recent tasks) may be passed in; when it
is omitted it is read through the selectors.
"""

import datetime
import logging
import random
from typing import Any, NamedTuple, Optional, Sequence
from uuid import UUID

from projects.selectors import candidate_roster, member_project_ids
from tasks.selectors import completed_task_samples, recent_project_tasks

from .engine import (
    SUGGESTION_ASSIGNEE,
    SUGGESTION_PRIORITY,
    SUGGESTION_TASK,
    SUGGESTION_TASK_BREAKDOWN,
    SUGGESTION_TIME_ESTIMATE,
    AssigneeInput,
    BreakdownInput,
    CandidateProfile,
    ExistingTask,
    ExplorationInput,
    HistoricalTaskSample,
    PriorityInput,
    TimeEstimateInput,
    break_down_task,
    estimate_time,
    get_rules,
    rank_assignees,
    score_priority,
    suggest_tasks,
)
from .recorder import record_suggestion

logger = logging.getLogger(__name__)


class GeneratedSuggestion(NamedTuple):
    result: Any
    suggestion_id: UUID


def suggest_priority(
    user_id: int,
    data: PriorityInput,
    *,
    project_id: Optional[int] = None,
    task_id: Optional[int] = None,
    now: Optional[datetime.datetime] = None,
) -> GeneratedSuggestion:
    result = score_priority(data, now=now, rules=get_rules().priority)
    record = record_suggestion(
        result,
        context=data.to_context(),
        user_id=user_id,
        suggestion_type=SUGGESTION_PRIORITY,
        project_id=project_id,
        task_id=task_id,
    )
    logger.info(f"Priority suggestion generated for user {user_id}: {result.priority}")
    return GeneratedSuggestion(result, record.id)


def estimate_task_time(
    user_id: int,
    data: TimeEstimateInput,
    *,
    history: Optional[Sequence[HistoricalTaskSample]] = None,
    project_id: Optional[int] = None,
    task_id: Optional[int] = None,
) -> GeneratedSuggestion:
    rules = get_rules().estimation
    if history is None:
        history = completed_task_samples(user_id, limit=rules.history_limit)

    result = estimate_time(data, history, rules=rules)
    record = record_suggestion(
        result,
        context=data.to_context(),
        user_id=user_id,
        suggestion_type=SUGGESTION_TIME_ESTIMATE,
        project_id=project_id,
        task_id=task_id,
    )
    logger.info(
        f"Time estimation generated for user {user_id}: "
        f"{result.hours}h {result.minutes}m"
    )
    return GeneratedSuggestion(result, record.id)


def suggest_assignees(
    user_id: int,
    data: AssigneeInput,
    *,
    project_id: int,
    candidates: Optional[Sequence[CandidateProfile]] = None,
    task_id: Optional[int] = None,
) -> GeneratedSuggestion:
    if candidates is None:
        candidates = candidate_roster(project_id)

    result = rank_assignees(data, candidates, rules=get_rules().assignee)
    record = record_suggestion(
        result,
        context=data.to_context(),
        user_id=user_id,
        suggestion_type=SUGGESTION_ASSIGNEE,
        project_id=project_id,
        task_id=task_id,
    )
    logger.info(f"Assignee suggestions generated for user {user_id} in project {project_id}")
    return GeneratedSuggestion(result, record.id)


def break_down(
    user_id: int,
    data: BreakdownInput,
    *,
    project_id: Optional[int] = None,
    task_id: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> GeneratedSuggestion:
    result = break_down_task(data, rng=rng, rules=get_rules().breakdown)
    record = record_suggestion(
        result,
        context=data.to_context(),
        user_id=user_id,
        suggestion_type=SUGGESTION_TASK_BREAKDOWN,
        project_id=project_id,
        task_id=task_id,
    )
    logger.info(
        f"Task breakdown generated for user {user_id}: {len(result.subtasks)} subtasks"
    )
    return GeneratedSuggestion(result, record.id)


def suggest_new_tasks(
    user_id: int,
    data: ExplorationInput,
    *,
    project_id: Optional[int] = None,
    existing_tasks: Optional[Sequence[ExistingTask]] = None,
    rng: Optional[random.Random] = None,
) -> GeneratedSuggestion:
    """
    Suggests new tasks for one project, or for all of the user's projects
    when no project is given.
    """
    rules = get_rules().exploration
    project_ids = [project_id] if project_id is not None else member_project_ids(user_id)
    if existing_tasks is None:
        existing_tasks = recent_project_tasks(project_ids, limit=rules.recent_task_limit)

    result = suggest_tasks(
        data,
        existing_tasks,
        project_count=len(project_ids),
        rng=rng,
        rules=rules,
    )
    record = record_suggestion(
        result,
        context=data.to_context(),
        user_id=user_id,
        suggestion_type=SUGGESTION_TASK,
        project_id=project_id,
    )
    logger.info(f"Generated {len(result.suggestions)} task suggestions for user {user_id}")
    return GeneratedSuggestion(result, record.id)

# suggestions/celery_tasks.py

import logging
from typing import Any, Dict, Optional

from celery import shared_task
from django.db import DatabaseError

from tasks.models import Task

from .engine import PriorityInput, TimeEstimateInput
from .services import estimate_task_time, suggest_priority

# Configure logging for background worker monitoring
logger = logging.getLogger(__name__)


def _load_task(task_id: int) -> Optional[Task]:
    task = Task.objects.select_related('project').filter(id=task_id).first()
    if not task:
        logger.warning(f"Task {task_id} not found. Exiting worker.")
    return task


def priority_input_for_task(task: Task) -> PriorityInput:
    return PriorityInput(
        title=task.title,
        description=task.description,
        due_date=task.due_date,
        project_urgent=task.project.is_urgent,
    )


def time_estimate_input_for_task(task: Task) -> TimeEstimateInput:
    return TimeEstimateInput(
        title=task.title,
        description=task.description,
        priority=task.priority,
        task_type=task.task_type,
    )


@shared_task(
    bind=True,
    autoretry_for=(DatabaseError,),
    retry_backoff=True,
    retry_backoff_max=600,  # Max backoff of 10 minutes
    max_retries=3,
)
def run_priority_suggestion(self, task_id: int, user_id: int) -> Optional[Dict[str, Any]]:
    """
    Worker: score the priority of a stored task and record the suggestion.
    Input = (task_id, user_id) only; the worker reads everything else.
    """
    logger.info(f"Priority suggestion started for Task {task_id} (user {user_id})")
    task = _load_task(task_id)
    if task is None:
        return None

    generated = suggest_priority(
        user_id,
        priority_input_for_task(task),
        project_id=task.project_id,
        task_id=task.id,
    )
    logger.info(f"Priority suggestion {generated.suggestion_id} persisted for Task {task_id}")
    return {"suggestion_id": str(generated.suggestion_id), **generated.result.to_dict()}


@shared_task(
    bind=True,
    autoretry_for=(DatabaseError,),
    retry_backoff=True,
    retry_backoff_max=600,
    max_retries=3,
)
def run_time_estimate(self, task_id: int, user_id: int) -> Optional[Dict[str, Any]]:
    """
    Worker: estimate a stored task from the user's completion history and
    store the total on Task.estimated_hours.
    """
    logger.info(f"Time estimate started for Task {task_id} (user {user_id})")
    task = _load_task(task_id)
    if task is None:
        return None

    generated = estimate_task_time(
        user_id,
        time_estimate_input_for_task(task),
        project_id=task.project_id,
        task_id=task.id,
    )
    Task.objects.filter(id=task.id).update(estimated_hours=generated.result.total_hours)
    logger.info(f"Time estimate {generated.suggestion_id} persisted for Task {task_id}")
    return {"suggestion_id": str(generated.suggestion_id), **generated.result.to_dict()}

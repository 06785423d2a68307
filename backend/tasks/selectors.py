# tasks/selectors.py
"""
Read-only task queries consumed by the suggestion engine.

Callers are expected to have checked access to the user's projects already.
"""

from typing import Iterable, List

from suggestions.engine.types import ExistingTask, HistoricalTaskSample

from .models import Task


def completed_task_samples(user_id: int, limit: int = 100) -> List[HistoricalTaskSample]:
    """
    Most recently completed tasks in the projects the user belongs to.
    """
    rows = (
        Task.objects
        .filter(
            project__members__user_id=user_id,
            status=Task.Status.DONE,
            completed_at__isnull=False,
        )
        .order_by('-completed_at')
        .values('created_at', 'completed_at', 'priority')[:limit]
    )
    return [HistoricalTaskSample(**row) for row in rows]


def recent_project_tasks(project_ids: Iterable[int], limit: int = 50) -> List[ExistingTask]:
    rows = (
        Task.objects
        .filter(project_id__in=list(project_ids))
        .order_by('-created_at')
        .values('title', 'description', 'status', 'priority')[:limit]
    )
    return [ExistingTask(**row) for row in rows]

# projects/selectors.py

from typing import List

from django.db.models import Count, Q

from suggestions.engine.types import CandidateProfile
from tasks.models import Task

from .models import ProjectMember


def member_project_ids(user_id: int) -> List[int]:
    return list(
        ProjectMember.objects
        .filter(user_id=user_id)
        .order_by('project_id')
        .values_list('project_id', flat=True)
    )


def candidate_roster(project_id: int) -> List[CandidateProfile]:
    """
    Active members of a project with their role and workload.

    Task counts cover every task assigned to the member, across all projects.
    """
    members = (
        ProjectMember.objects
        .filter(project_id=project_id, user__is_active=True)
        .select_related('user')
        .annotate(
            active_task_count=Count(
                'user__assigned_tasks',
                filter=Q(user__assigned_tasks__status__in=Task.ACTIVE_STATUSES),
                distinct=True,
            ),
            total_task_count=Count('user__assigned_tasks', distinct=True),
        )
        .order_by('joined_at', 'id')
    )
    return [
        CandidateProfile(
            user_id=member.user_id,
            username=member.user.username,
            first_name=member.user.first_name,
            last_name=member.user.last_name,
            email=member.user.email,
            role=member.role,
            active_task_count=member.active_task_count,
            total_task_count=member.total_task_count,
        )
        for member in members
    ]

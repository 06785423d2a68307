import logging

from django.conf import settings
from django.db import transaction
from django.db.models.signals import post_save
from django.dispatch import receiver

from tasks.models import Task

logger = logging.getLogger(__name__)


@receiver(post_save, sender=Task, dispatch_uid="tasks.enqueue_priority_suggestion")
def enqueue_priority_suggestion(sender, instance, created, **kwargs):
    """
    Queues a background priority suggestion for newly created tasks.

    The job is only enqueued after the surrounding transaction commits, so the
    worker never looks for a task that is not visible yet.
    """
    if not created or not getattr(settings, 'SUGGESTION_AUTO_PRIORITIZE', False):
        return

    task_id, user_id = instance.id, instance.created_by_id

    def trigger():
        from suggestions.celery_tasks import run_priority_suggestion
        # Pass only the task id and user id. Worker will fetch required context.
        run_priority_suggestion.delay(task_id, user_id)
        logger.info(f"Queued priority suggestion for Task {task_id}")

    transaction.on_commit(trigger)

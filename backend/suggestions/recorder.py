# suggestions/recorder.py

import logging
from typing import Any, Dict, Optional

from django.db import DatabaseError, transaction
from django.db.models import QuerySet

from .models import SuggestionRecord

logger = logging.getLogger(__name__)


def record_suggestion(
    result: Any,
    *,
    context: Dict[str, Any],
    user_id: int,
    suggestion_type: str,
    project_id: Optional[int] = None,
    task_id: Optional[int] = None,
) -> SuggestionRecord:
    """
    Persists a generated suggestion as an immutable audit record.

    The insert runs in a durable atomic block, so the row is committed
    before this returns. Calling it inside an open transaction raises
    RuntimeError. Database errors are logged and re-raised unchanged; there is
    no retry here, the caller decides.

    Args:
        result: A generator result exposing to_dict().
        context: JSON-safe description of the input the result came from.
        user_id: Owner of the suggestion.
        suggestion_type: One of SuggestionRecord.SuggestionType.
        project_id: Project the suggestion concerns, if any.
        task_id: Task the suggestion concerns, if any.
    """
    try:
        with transaction.atomic(durable=True):
            record = SuggestionRecord.objects.create(
                user_id=user_id,
                project_id=project_id,
                task_id=task_id,
                suggestion_type=suggestion_type,
                suggestion_data=result.to_dict(),
                context=context,
            )
    except DatabaseError as e:
        logger.exception(
            f"Failed to record {suggestion_type} suggestion for user {user_id}: {e}"
        )
        raise

    logger.info(f"Recorded {suggestion_type} suggestion {record.id} for user {user_id}")
    return record


def list_suggestion_records(
    user_id: Optional[int] = None,
    suggestion_type: Optional[str] = None,
) -> QuerySet:
    """Stored suggestions, newest first, optionally filtered by owner and type."""
    records = SuggestionRecord.objects.all()
    if user_id is not None:
        records = records.filter(user_id=user_id)
    if suggestion_type is not None:
        records = records.filter(suggestion_type=suggestion_type)
    return records.order_by('-created_at')

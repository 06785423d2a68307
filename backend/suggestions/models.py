import uuid

from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
from django.utils.translation import gettext_lazy as _

from .engine.exceptions import ImmutableSuggestionError
from .engine.types import (
    RESULT_TYPES,
    SUGGESTION_ASSIGNEE,
    SUGGESTION_PRIORITY,
    SUGGESTION_TASK,
    SUGGESTION_TASK_BREAKDOWN,
    SUGGESTION_TIME_ESTIMATE,
)


class SuggestionRecord(models.Model):
    """
    Audit entry for one generated suggestion.

    Written exactly once per generator invocation. The payload and context
    never change afterwards; only the applied flag and the feedback text may
    be updated, by the workflow that acts on the suggestion.
    """

    class SuggestionType(models.TextChoices):
        PRIORITY = SUGGESTION_PRIORITY, _('Priority')
        TIME_ESTIMATE = SUGGESTION_TIME_ESTIMATE, _('Time estimate')
        ASSIGNEE = SUGGESTION_ASSIGNEE, _('Assignee')
        TASK_BREAKDOWN = SUGGESTION_TASK_BREAKDOWN, _('Task breakdown')
        TASK = SUGGESTION_TASK, _('Task suggestion')

    MUTABLE_FIELDS = frozenset({'is_applied', 'feedback'})

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='suggestions',
        verbose_name=_("user")
    )
    project = models.ForeignKey(
        'projects.Project',
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name='suggestions',
        verbose_name=_("project")
    )
    task = models.ForeignKey(
        'tasks.Task',
        on_delete=models.CASCADE,
        null=True, blank=True,
        related_name='suggestions',
        verbose_name=_("task")
    )
    suggestion_type = models.CharField(
        max_length=20,
        choices=SuggestionType.choices,
        verbose_name=_("suggestion type")
    )
    suggestion_data = models.JSONField(
        encoder=DjangoJSONEncoder,
        verbose_name=_("suggestion data"),
        help_text=_("The serialized generator result.")
    )
    context = models.JSONField(
        encoder=DjangoJSONEncoder,
        default=dict,
        blank=True,
        verbose_name=_("context"),
        help_text=_("The input the suggestion was generated from.")
    )
    is_applied = models.BooleanField(default=False, verbose_name=_("is applied"))
    feedback = models.TextField(null=True, blank=True, verbose_name=_("feedback"))
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))

    class Meta:
        db_table = 'ai_suggestions'
        verbose_name = _("Suggestion record")
        verbose_name_plural = _("Suggestion records")
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', 'suggestion_type'], name='suggestion_user_type_idx'),
            models.Index(fields=['is_applied'], name='suggestion_applied_idx'),
            models.Index(fields=['created_at'], name='suggestion_created_idx'),
        ]

    def __str__(self):
        return f"{self.get_suggestion_type_display()} suggestion for {self.user}"

    def save(self, *args, **kwargs):
        """
        Inserts freely; updates must name their fields and touch only
        is_applied and feedback.
        """
        if not self._state.adding:
            update_fields = kwargs.get('update_fields')
            if update_fields is None or not set(update_fields) <= self.MUTABLE_FIELDS:
                raise ImmutableSuggestionError(
                    f"Suggestion {self.pk} is immutable; only "
                    f"{sorted(self.MUTABLE_FIELDS)} may be updated."
                )
        super().save(*args, **kwargs)

    def get_result(self):
        """Rebuilds the generator result stored in suggestion_data."""
        return RESULT_TYPES[self.suggestion_type].from_dict(self.suggestion_data)

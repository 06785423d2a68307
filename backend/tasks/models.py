from django.db import models
from django.conf import settings
from django.utils.translation import gettext_lazy as _
from projects.models import Project


class Task(models.Model):
    """
    Represents a unit of work inside a project.
    """

    class Status(models.TextChoices):
        TODO = 'todo', _('To do')
        IN_PROGRESS = 'in_progress', _('In progress')
        REVIEW = 'review', _('In review')
        DONE = 'done', _('Done')
        CANCELLED = 'cancelled', _('Cancelled')

    class Priority(models.TextChoices):
        LOW = 'low', _('Low')
        MEDIUM = 'medium', _('Medium')
        HIGH = 'high', _('High')
        URGENT = 'urgent', _('Urgent')

    class TaskType(models.TextChoices):
        BUG = 'bug', _('Bug')
        FEATURE = 'feature', _('Feature')
        RESEARCH = 'research', _('Research')
        DOCUMENTATION = 'documentation', _('Documentation')
        TESTING = 'testing', _('Testing')
        GENERAL = 'general', _('General')

    # Statuses counted as the assignee's current workload
    ACTIVE_STATUSES = (Status.TODO, Status.IN_PROGRESS, Status.REVIEW)

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name='tasks',
        verbose_name=_("project")
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='created_tasks',
        verbose_name=_("created by")
    )
    assigned_to = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name='assigned_tasks',
        verbose_name=_("assigned to")
    )

    title = models.CharField(max_length=255, verbose_name=_("title"))
    description = models.TextField(blank=True, verbose_name=_("description"))
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.TODO,
        verbose_name=_("status")
    )
    priority = models.CharField(
        max_length=10,
        choices=Priority.choices,
        default=Priority.MEDIUM,
        verbose_name=_("priority")
    )
    task_type = models.CharField(
        max_length=20,
        choices=TaskType.choices,
        default=TaskType.GENERAL,
        verbose_name=_("task type")
    )

    due_date = models.DateTimeField(
        null=True, blank=True,
        verbose_name=_("due date"),
        help_text=_("The deadline for the task.")
    )
    estimated_hours = models.FloatField(
        null=True, blank=True,
        verbose_name=_("estimated hours")
    )
    completed_at = models.DateTimeField(
        null=True, blank=True,
        verbose_name=_("completed at"),
        help_text=_("Set when the task moves to done; feeds the time estimator.")
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    class Meta:
        verbose_name = _("Task")
        verbose_name_plural = _("Tasks")
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', 'completed_at'], name='task_status_completed_idx'),
            models.Index(fields=['assigned_to', 'status'], name='task_assignee_status_idx'),
        ]

    def __str__(self):
        return f"{self.project.name}: {self.title}"

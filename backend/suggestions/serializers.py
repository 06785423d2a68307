# suggestions/serializers.py

import logging

from rest_framework import serializers

from .engine import (
    SUGGESTION_ASSIGNEE,
    SUGGESTION_PRIORITY,
    SUGGESTION_TASK,
    SUGGESTION_TASK_BREAKDOWN,
    SUGGESTION_TIME_ESTIMATE,
    AssigneeInput,
    BreakdownInput,
    ExplorationInput,
    InvalidSuggestionInput,
    PriorityInput,
    TimeEstimateInput,
)
from .models import SuggestionRecord

logger = logging.getLogger(__name__)


class PriorityInputSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(allow_blank=True, default="")
    due_date = serializers.DateTimeField(allow_null=True, default=None)
    project_urgent = serializers.BooleanField(default=False)

    def to_input(self):
        return PriorityInput(**self.validated_data)


class TimeEstimateInputSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(allow_blank=True, default="")
    # Free-form: unknown priorities and task types fall back to a 1.0 multiplier
    priority = serializers.CharField(max_length=20, default="medium")
    task_type = serializers.CharField(max_length=20, default="general")

    def to_input(self):
        return TimeEstimateInput(**self.validated_data)


class AssigneeInputSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(allow_blank=True, default="")
    required_skills = serializers.ListField(
        child=serializers.CharField(max_length=100),
        default=list,
    )
    workload = serializers.CharField(max_length=20, default="normal")

    def to_input(self):
        data = dict(self.validated_data)
        data["required_skills"] = tuple(data["required_skills"])
        return AssigneeInput(**data)


class BreakdownInputSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255)
    description = serializers.CharField(allow_blank=True, default="")
    complexity = serializers.CharField(max_length=20, default="medium")

    def to_input(self):
        return BreakdownInput(**self.validated_data)


class ExplorationInputSerializer(serializers.Serializer):
    context = serializers.CharField(allow_blank=True, default="")
    limit = serializers.IntegerField(min_value=1, max_value=20, default=5)

    def to_input(self):
        return ExplorationInput(**self.validated_data)


INPUT_SERIALIZERS = {
    SUGGESTION_PRIORITY: PriorityInputSerializer,
    SUGGESTION_TIME_ESTIMATE: TimeEstimateInputSerializer,
    SUGGESTION_ASSIGNEE: AssigneeInputSerializer,
    SUGGESTION_TASK_BREAKDOWN: BreakdownInputSerializer,
    SUGGESTION_TASK: ExplorationInputSerializer,
}


def build_input(suggestion_type: str, payload: dict):
    """
    Validates a request-shaped payload and returns the typed input bundle.

    Raises InvalidSuggestionInput carrying the serializer errors.
    """
    try:
        serializer_class = INPUT_SERIALIZERS[suggestion_type]
    except KeyError:
        raise InvalidSuggestionInput(
            f"Unknown suggestion type: {suggestion_type!r}",
            errors={"suggestion_type": [f"Unknown suggestion type: {suggestion_type!r}"]},
        ) from None

    serializer = serializer_class(data=payload)
    if not serializer.is_valid():
        logger.warning(f"Rejected {suggestion_type} input: {serializer.errors}")
        raise InvalidSuggestionInput(
            f"Invalid {suggestion_type} input.",
            errors=serializer.errors,
        )
    return serializer.to_input()


class SuggestionRecordSerializer(serializers.ModelSerializer):
    class Meta:
        model = SuggestionRecord
        fields = [
            'id', 'user', 'project', 'task', 'suggestion_type', 'suggestion_data',
            'context', 'is_applied', 'feedback', 'created_at'
        ]
        read_only_fields = fields

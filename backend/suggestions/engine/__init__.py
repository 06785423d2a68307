# suggestions/engine/__init__.py
"""
Suggestion Engine Package
=========================

Rule-based heuristics that turn a task description and a few contextual
signals into planning suggestions. Nothing here touches the database: every
generator is a pure function of its input bundle, its collaborator data and
its rule table.

Modules:
--------
- signals: Text and date feature extraction
- rules: Tunable rule tables (keyword tiers, multipliers, thresholds)
- priority: Priority category and score
- estimation: Hours/minutes estimate blended with historical completions
- assignee: Ranking of project members as assignees
- breakdown: Subtask generation sized by complexity
- exploration: Exploratory new-task suggestions for the user's projects

Result Contract:
----------------
Every generator returns a frozen dataclass carrying a ``confidence`` in
[0, 1] plus human-readable reasons, serializable with ``to_dict()`` and
rebuilt with ``from_dict()``.

Usage:
------
    from suggestions.engine import PriorityInput, score_priority

    result = score_priority(PriorityInput(title="Fix broken login"))
    result.priority  # "urgent"

Persisting a suggestion is the job of ``suggestions.services``, which wraps
these generators and writes the audit record before returning.
"""

from .assignee import rank_assignees
from .breakdown import break_down_task
from .estimation import estimate_time
from .exceptions import (
    ImmutableSuggestionError,
    InvalidSuggestionInput,
    SuggestionEngineError,
)
from .exploration import suggest_tasks
from .priority import score_priority
from .rules import EngineRules, build_rules, get_rules
from .types import (
    RESULT_TYPES,
    SUGGESTION_ASSIGNEE,
    SUGGESTION_PRIORITY,
    SUGGESTION_TASK,
    SUGGESTION_TASK_BREAKDOWN,
    SUGGESTION_TIME_ESTIMATE,
    AssigneeInput,
    AssigneeRankingResult,
    BreakdownInput,
    BreakdownResult,
    CandidateProfile,
    ExistingTask,
    ExplorationInput,
    ExploratorySuggestionResult,
    HistoricalTaskSample,
    PriorityInput,
    PriorityResult,
    TimeEstimateInput,
    TimeEstimateResult,
)

__all__ = [
    # Generators
    "score_priority",
    "estimate_time",
    "rank_assignees",
    "break_down_task",
    "suggest_tasks",
    # Rules
    "EngineRules",
    "build_rules",
    "get_rules",
    # Inputs and collaborator projections
    "PriorityInput",
    "TimeEstimateInput",
    "AssigneeInput",
    "BreakdownInput",
    "ExplorationInput",
    "HistoricalTaskSample",
    "CandidateProfile",
    "ExistingTask",
    # Results
    "PriorityResult",
    "TimeEstimateResult",
    "AssigneeRankingResult",
    "BreakdownResult",
    "ExploratorySuggestionResult",
    "RESULT_TYPES",
    # Errors
    "SuggestionEngineError",
    "InvalidSuggestionInput",
    "ImmutableSuggestionError",
    # Constants
    "SUGGESTION_PRIORITY",
    "SUGGESTION_TIME_ESTIMATE",
    "SUGGESTION_ASSIGNEE",
    "SUGGESTION_TASK_BREAKDOWN",
    "SUGGESTION_TASK",
]

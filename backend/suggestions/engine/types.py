# suggestions/engine/types.py
"""
Input bundles, collaborator projections and result contracts.

Everything here is a frozen dataclass with no Django dependency. Results
serialize with ``to_dict()`` into JSON-safe structures and rebuild with
``from_dict()``, which is how the suggestion audit trail stores them.
"""

from __future__ import annotations

import datetime
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple

# Suggestion type tags stored on every audit record
SUGGESTION_PRIORITY = "priority"
SUGGESTION_TIME_ESTIMATE = "time_estimate"
SUGGESTION_ASSIGNEE = "assignee"
SUGGESTION_TASK_BREAKDOWN = "task_breakdown"
SUGGESTION_TASK = "task_suggestion"


def _isoformat(value: Optional[datetime.date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


# ---------------------------------------------------------------------------
# Input bundles
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PriorityInput:
    title: str
    description: str = ""
    due_date: Optional[datetime.date] = None
    project_urgent: bool = False

    def to_context(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "due_date": _isoformat(self.due_date),
            "project_urgent": self.project_urgent,
        }


@dataclass(frozen=True)
class TimeEstimateInput:
    title: str
    description: str = ""
    priority: str = "medium"
    task_type: str = "general"

    def to_context(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AssigneeInput:
    title: str
    description: str = ""
    required_skills: Tuple[str, ...] = ()
    # Informational only; not weighted by the ranker.
    workload: str = "normal"

    def to_context(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "required_skills": list(self.required_skills),
            "workload": self.workload,
        }


@dataclass(frozen=True)
class BreakdownInput:
    title: str
    description: str = ""
    complexity: str = "medium"

    def to_context(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ExplorationInput:
    context: str = ""
    limit: int = 5

    def to_context(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Collaborator projections (read-only snapshots from the data layer)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HistoricalTaskSample:
    created_at: datetime.datetime
    completed_at: datetime.datetime
    priority: str = "medium"

    @property
    def elapsed_hours(self) -> float:
        return (self.completed_at - self.created_at).total_seconds() / 3600.0


@dataclass(frozen=True)
class CandidateProfile:
    user_id: int
    username: str
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    role: str = "member"
    active_task_count: int = 0
    total_task_count: int = 0


@dataclass(frozen=True)
class ExistingTask:
    title: str
    description: str = ""
    status: str = "todo"
    priority: str = "medium"


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PriorityResult:
    priority: str
    score: int
    confidence: float
    reasoning: List[str] = field(default_factory=list)
    factors: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PriorityResult":
        return cls(
            priority=data["priority"],
            score=data["score"],
            confidence=data["confidence"],
            reasoning=list(data.get("reasoning", [])),
            factors=dict(data.get("factors", {})),
        )


@dataclass(frozen=True)
class TimeEstimateResult:
    hours: int
    minutes: int
    total_hours: float
    confidence: float
    factors: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TimeEstimateResult":
        return cls(
            hours=data["hours"],
            minutes=data["minutes"],
            total_hours=data["total_hours"],
            confidence=data["confidence"],
            factors=dict(data.get("factors", {})),
        )


@dataclass(frozen=True)
class RankedCandidate:
    user: Dict[str, Any]
    score: int
    confidence: float
    reasons: List[str]
    workload_status: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RankedCandidate":
        return cls(
            user=dict(data["user"]),
            score=data["score"],
            confidence=data["confidence"],
            reasons=list(data["reasons"]),
            workload_status=data["workload_status"],
        )


@dataclass(frozen=True)
class AssigneeRankingResult:
    suggestions: List[RankedCandidate]
    candidate_count: int
    confidence: float
    reasons: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AssigneeRankingResult":
        return cls(
            suggestions=[RankedCandidate.from_dict(s) for s in data["suggestions"]],
            candidate_count=data["candidate_count"],
            confidence=data["confidence"],
            reasons=list(data.get("reasons", [])),
        )


@dataclass(frozen=True)
class Subtask:
    title: str
    estimated_hours: int
    priority: str


@dataclass(frozen=True)
class BreakdownResult:
    subtasks: List[Subtask]
    total_estimated_hours: int
    complexity: str
    confidence: float
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BreakdownResult":
        return cls(
            subtasks=[Subtask(**s) for s in data["subtasks"]],
            total_estimated_hours=data["total_estimated_hours"],
            complexity=data["complexity"],
            confidence=data["confidence"],
            recommendations=list(data.get("recommendations", [])),
        )


@dataclass(frozen=True)
class SuggestedTask:
    title: str
    description: str
    priority: str
    estimated_hours: int
    confidence: float


@dataclass(frozen=True)
class ExploratorySuggestionResult:
    suggestions: List[SuggestedTask]
    project_count: int
    existing_task_count: int
    confidence: float
    reasons: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExploratorySuggestionResult":
        return cls(
            suggestions=[SuggestedTask(**s) for s in data["suggestions"]],
            project_count=data["project_count"],
            existing_task_count=data["existing_task_count"],
            confidence=data["confidence"],
            reasons=list(data.get("reasons", [])),
        )


RESULT_TYPES = {
    SUGGESTION_PRIORITY: PriorityResult,
    SUGGESTION_TIME_ESTIMATE: TimeEstimateResult,
    SUGGESTION_ASSIGNEE: AssigneeRankingResult,
    SUGGESTION_TASK_BREAKDOWN: BreakdownResult,
    SUGGESTION_TASK: ExploratorySuggestionResult,
}

# suggestions/engine/signals.py
"""
Feature extraction helpers shared by the generators.

These are pure functions over the caller-supplied fields: no database, no
settings, no randomness.
"""

import datetime
from typing import Iterable, Optional, Sequence

from .exceptions import InvalidSuggestionInput
from .types import HistoricalTaskSample


def require_title(title: Optional[str]) -> str:
    """Rejects a missing or blank title before any scoring happens."""
    if title is None or not str(title).strip():
        raise InvalidSuggestionInput(
            "Task title is required.",
            errors={"title": ["This field may not be blank."]},
        )
    return str(title)


def combined_text(title: str, description: Optional[str] = None) -> str:
    return f"{title} {description or ''}".lower()


def word_count(title: str, description: Optional[str] = None) -> int:
    # split() drops empty tokens: an empty description adds nothing at the 50/100 word thresholds.
    return len(f"{title} {description or ''}".split())


def matches_any(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def _as_aware_datetime(value: datetime.date) -> datetime.datetime:
    if not isinstance(value, datetime.datetime):
        value = datetime.datetime.combine(value, datetime.time.min)
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    return value


def days_until(due: datetime.date, now: datetime.datetime) -> float:
    """
    Fractional days from now until due; negative when overdue.

    A bare date means midnight UTC of that day. Naive datetimes are read as UTC.
    """
    delta = _as_aware_datetime(due) - _as_aware_datetime(now)
    return delta.total_seconds() / 86400.0


def mean_elapsed_hours(samples: Sequence[HistoricalTaskSample]) -> Optional[float]:
    if not samples:
        return None
    return sum(sample.elapsed_hours for sample in samples) / len(samples)

# suggestions/engine/estimation.py

import logging
import math
from typing import Optional, Sequence

from .rules import EstimationRules, get_rules
from .signals import mean_elapsed_hours, require_title, word_count
from .types import HistoricalTaskSample, TimeEstimateInput, TimeEstimateResult

logger = logging.getLogger(__name__)


def _split_hours(total: float):
    hours = math.floor(total)
    # Half-up rounding of the fractional hour
    minutes = int(math.floor((total - hours) * 60 + 0.5))
    return int(hours), minutes


def estimate_time(
    data: TimeEstimateInput,
    history: Sequence[HistoricalTaskSample] = (),
    rules: Optional[EstimationRules] = None,
) -> TimeEstimateResult:
    """
    Estimates the effort for a task in hours and minutes.

    The base estimate grows with the length of the title and description,
    is scaled by the priority and task-type multipliers, and is then averaged
    with the mean completion time of the user's recent tasks when any exist.
    Unknown priorities and task types scale by 1.0.
    """
    require_title(data.title)
    if rules is None:
        rules = get_rules().estimation

    words = word_count(data.title, data.description)

    total = rules.base_hours
    for threshold, extra_hours in rules.length_steps:
        if words > threshold:
            total += extra_hours

    total *= rules.priority_multipliers.get(data.priority, 1.0)
    total *= rules.type_multipliers.get(data.task_type, 1.0)

    historical_mean = mean_elapsed_hours(history)
    if historical_mean is not None:
        total = (total + historical_mean) / 2

    hours, minutes = _split_hours(total)
    sample_size = len(history)
    confidence = (
        rules.high_confidence
        if sample_size > rules.confident_sample_size
        else rules.low_confidence
    )

    logger.debug(
        f"Estimated {total:.2f}h for '{data.title}' "
        f"({sample_size} historical data points)"
    )

    return TimeEstimateResult(
        hours=hours,
        minutes=minutes,
        total_hours=total,
        confidence=confidence,
        factors={
            "complexity": "high" if words > rules.high_complexity_words else "medium",
            "priority": data.priority,
            "task_type": data.task_type,
            "historical_data_points": sample_size,
        },
    )

# suggestions/engine/assignee.py

import logging
from typing import List, Optional, Sequence

from .rules import AssigneeRules, get_rules
from .signals import combined_text, require_title
from .types import (
    AssigneeInput,
    AssigneeRankingResult,
    CandidateProfile,
    RankedCandidate,
)

logger = logging.getLogger(__name__)


def workload_status(active_task_count: int, rules: AssigneeRules) -> str:
    if active_task_count < rules.light_workload_below:
        return "light"
    if active_task_count < rules.moderate_workload_below:
        return "moderate"
    return "heavy"


def _matched_skills(
    skills: Sequence[str],
    text: str,
    candidate: CandidateProfile,
    rules: AssigneeRules,
) -> List[str]:
    """
    Required skills credited to a candidate, one entry per bonus awarded.

    A skill counts once when it appears in the task text or in the username,
    or once per place it appears when count_name_matches_separately is set.
    """
    username = (candidate.username or "").lower()
    matched = []
    for skill in skills:
        needle = skill.lower()
        in_text = needle in text
        in_name = needle in username
        if rules.count_name_matches_separately:
            matched.extend([skill] * (int(in_text) + int(in_name)))
        elif in_text or in_name:
            matched.append(skill)
    return matched


def score_candidate(
    candidate: CandidateProfile,
    text: str,
    skills: Sequence[str],
    rules: AssigneeRules,
) -> RankedCandidate:
    score = rules.base_score
    score -= candidate.active_task_count * rules.workload_penalty
    score += min(candidate.total_task_count * rules.experience_bonus, rules.experience_cap)
    score += rules.role_bonus.get(candidate.role, 0)

    matched = _matched_skills(skills, text, candidate, rules)
    score += len(matched) * rules.skill_bonus

    score = max(rules.min_score, min(rules.max_score, score))

    reasons = [
        f"Current workload: {candidate.active_task_count} active tasks",
        f"Experience: {candidate.total_task_count} total tasks",
        f"Role: {candidate.role}",
    ]
    if skills:
        unique_matches = list(dict.fromkeys(matched))
        reasons.append(f"Skills matched: {', '.join(unique_matches) if unique_matches else 'none'}")

    return RankedCandidate(
        user={
            "id": candidate.user_id,
            "username": candidate.username,
            "first_name": candidate.first_name,
            "last_name": candidate.last_name,
            "email": candidate.email,
        },
        score=score,
        confidence=rules.confidence,
        reasons=reasons,
        workload_status=workload_status(candidate.active_task_count, rules),
    )


def rank_assignees(
    data: AssigneeInput,
    candidates: Sequence[CandidateProfile],
    rules: Optional[AssigneeRules] = None,
) -> AssigneeRankingResult:
    """
    Ranks project members as assignees for a task and keeps the top entries.

    Scores are clamped to the configured range. Candidates with equal scores
    keep their roster order.
    """
    require_title(data.title)
    if rules is None:
        rules = get_rules().assignee

    text = combined_text(data.title, data.description)
    skills = [s for s in data.required_skills if s and s.strip()]

    scored = [score_candidate(c, text, skills, rules) for c in candidates]
    ranked = sorted(scored, key=lambda entry: entry.score, reverse=True)[:rules.top_n]

    if ranked:
        summary = f"Ranked {len(candidates)} active project members"
    else:
        summary = "No active project members to rank"

    logger.debug(f"Ranked {len(candidates)} candidates for '{data.title}'")

    return AssigneeRankingResult(
        suggestions=ranked,
        candidate_count=len(candidates),
        confidence=rules.confidence,
        reasons=[summary],
    )

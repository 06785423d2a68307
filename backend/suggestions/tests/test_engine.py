# suggestions/tests/test_engine.py
"""
Suggestion Engine Unit Tests
============================

Tests for the rule-based "brain" of the suggestion system.

This module tests:
1. Priority scoring (keyword tiers, due-date bands, urgency flag)
2. Time estimation (length, multipliers, historical blending)
3. Assignee ranking (workload, experience, role, skills, clamping)
4. Task breakdown (contextual injection, generic pool, truncation)
5. Exploratory task suggestions
6. Rule table overrides

Test Philosophy:
----------------
- Time is pinned by passing ``now``; randomness by seeded random.Random
- No database access: every generator is a pure function
"""

from __future__ import annotations

import datetime
import random

from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase, override_settings

from suggestions.engine import (
    AssigneeInput,
    BreakdownInput,
    CandidateProfile,
    ExistingTask,
    ExplorationInput,
    HistoricalTaskSample,
    InvalidSuggestionInput,
    PriorityInput,
    TimeEstimateInput,
    break_down_task,
    build_rules,
    estimate_time,
    get_rules,
    rank_assignees,
    score_priority,
    suggest_tasks,
)
from suggestions.engine.signals import days_until, mean_elapsed_hours, word_count


FIXED_NOW = datetime.datetime(2024, 1, 15, 12, 0, 0, tzinfo=datetime.timezone.utc)

# Contains none of the breakdown trigger substrings (api, backend, ui,
# frontend, database, data) and no priority keywords.
NEUTRAL_TITLE = "Plan team offsite"

GENERIC_SUBTASKS = set(build_rules().breakdown.generic_subtasks)


def candidate(
    user_id: int,
    username: str = "member",
    role: str = "member",
    active: int = 0,
    total: int = 0,
) -> CandidateProfile:
    return CandidateProfile(
        user_id=user_id,
        username=username,
        first_name=username.title(),
        last_name="Tester",
        email=f"{username}@example.com",
        role=role,
        active_task_count=active,
        total_task_count=total,
    )


def samples(count: int, hours: float) -> list:
    return [
        HistoricalTaskSample(
            created_at=FIXED_NOW - datetime.timedelta(hours=hours),
            completed_at=FIXED_NOW,
            priority="medium",
        )
        for _ in range(count)
    ]


# ===========================================================================
# SIGNAL EXTRACTOR TESTS
# ===========================================================================


class TestSignals(SimpleTestCase):

    def test_word_count_joins_title_and_description(self) -> None:
        self.assertEqual(word_count("Fix the login", "form  validation"), 5)

    def test_word_count_without_description(self) -> None:
        self.assertEqual(word_count("Fix login", None), 2)

    def test_empty_description_adds_no_token(self) -> None:
        title = " ".join(["word"] * 50)
        self.assertEqual(word_count(title, ""), 50)

    def test_days_until_is_fractional_and_signed(self) -> None:
        self.assertAlmostEqual(days_until(FIXED_NOW + datetime.timedelta(hours=12), FIXED_NOW), 0.5)
        self.assertAlmostEqual(days_until(FIXED_NOW - datetime.timedelta(days=2), FIXED_NOW), -2.0)

    def test_bare_date_is_midnight_utc(self) -> None:
        self.assertAlmostEqual(days_until(datetime.date(2024, 1, 16), FIXED_NOW), 0.5)

    def test_mean_elapsed_hours(self) -> None:
        self.assertIsNone(mean_elapsed_hours([]))
        mixed = samples(1, 2.0) + samples(1, 6.0)
        self.assertAlmostEqual(mean_elapsed_hours(mixed), 4.0)


# ===========================================================================
# PRIORITY SCORER TESTS
# ===========================================================================


class TestScorePriority(SimpleTestCase):
    """
    Tests cover:
    - Keyword tiers (first match wins)
    - Due-date bands (mutually exclusive)
    - Project urgency flag
    - Unclamped score and category thresholds
    """

    def score(self, title: str, description: str = "", due=None, urgent: bool = False):
        data = PriorityInput(title=title, description=description, due_date=due, project_urgent=urgent)
        return score_priority(data, now=FIXED_NOW)

    def due_in(self, **delta) -> datetime.datetime:
        return FIXED_NOW + datetime.timedelta(**delta)

    # -----------------------------------------------------------------------
    # Keyword Tier Tests
    # -----------------------------------------------------------------------

    def test_no_signals_is_medium(self) -> None:
        result = self.score(NEUTRAL_TITLE)

        self.assertEqual(result.score, 50)
        self.assertEqual(result.priority, "medium")
        self.assertEqual(result.reasoning, [])
        self.assertEqual(result.confidence, 0.7)

    def test_urgent_keyword_alone_scores_eighty(self) -> None:
        """An urgent keyword with no due date and no flag gives exactly 80."""
        result = self.score("Fix broken login page")

        self.assertEqual(result.score, 80)
        self.assertEqual(result.priority, "urgent")
        self.assertEqual(result.reasoning, ["High urgency indicators detected"])
        self.assertEqual(result.factors["keyword_analysis"], "urgent")

    def test_keyword_match_is_case_insensitive(self) -> None:
        self.assertEqual(self.score("URGENT: renew certificate").score, 80)

    def test_keyword_in_description_counts(self) -> None:
        self.assertEqual(self.score("Renew certificate", "This is critical").score, 80)

    def test_high_keyword(self) -> None:
        result = self.score("Call the client about invoices")

        self.assertEqual(result.score, 70)
        self.assertEqual(result.priority, "high")
        self.assertEqual(result.reasoning, ["Important task with high impact"])

    def test_low_keyword(self) -> None:
        result = self.score("Cosmetic tweaks to footer")

        self.assertEqual(result.score, 30)
        self.assertEqual(result.priority, "low")
        self.assertEqual(result.reasoning, ["Low impact or enhancement task"])
        self.assertEqual(result.factors["keyword_analysis"], "low")

    def test_only_first_matching_tier_applies(self) -> None:
        """'important' (high) and 'bug' (urgent) together only add the urgent bonus."""
        self.assertEqual(self.score("Important bug in cleanup job").score, 80)

    # -----------------------------------------------------------------------
    # Due Date Band Tests
    # -----------------------------------------------------------------------

    def test_due_within_a_day_scores_eighty(self) -> None:
        result = self.score(NEUTRAL_TITLE, due=self.due_in(hours=12))

        self.assertEqual(result.score, 80)
        self.assertEqual(result.priority, "urgent")
        self.assertIn("Due date approaching", result.reasoning)
        self.assertEqual(result.factors["due_date_proximity"], "considered")

    def test_overdue_task_gets_the_nearest_band(self) -> None:
        self.assertEqual(self.score(NEUTRAL_TITLE, due=self.due_in(days=-3)).score, 80)

    def test_due_within_three_days(self) -> None:
        self.assertEqual(self.score(NEUTRAL_TITLE, due=self.due_in(days=2)).score, 70)

    def test_due_within_a_week(self) -> None:
        result = self.score(NEUTRAL_TITLE, due=self.due_in(days=5))

        self.assertEqual(result.score, 60)
        self.assertEqual(result.priority, "medium")
        self.assertEqual(result.reasoning, ["Due date approaching"])

    def test_due_between_one_week_and_a_month_is_neutral(self) -> None:
        result = self.score(NEUTRAL_TITLE, due=self.due_in(days=10))

        self.assertEqual(result.score, 50)
        self.assertEqual(result.reasoning, [])

    def test_due_far_in_the_future_lowers_score(self) -> None:
        result = self.score(NEUTRAL_TITLE, due=self.due_in(days=40))

        self.assertEqual(result.score, 40)
        self.assertEqual(result.reasoning, ["Due date is far away"])

    def test_band_boundaries_are_strict(self) -> None:
        self.assertEqual(self.score(NEUTRAL_TITLE, due=self.due_in(days=1)).score, 70)
        self.assertEqual(self.score(NEUTRAL_TITLE, due=self.due_in(days=7)).score, 50)
        self.assertEqual(self.score(NEUTRAL_TITLE, due=self.due_in(days=30)).score, 50)

    def test_no_due_date_is_reported(self) -> None:
        result = self.score(NEUTRAL_TITLE)
        self.assertEqual(result.factors["due_date_proximity"], "not_provided")

    # -----------------------------------------------------------------------
    # Combined Signal Tests
    # -----------------------------------------------------------------------

    def test_project_urgency_flag(self) -> None:
        result = self.score(NEUTRAL_TITLE, urgent=True)

        self.assertEqual(result.score, 65)
        self.assertEqual(result.priority, "high")
        self.assertIn("Project is flagged as urgent", result.reasoning)
        self.assertEqual(result.factors["project_context"], "urgent")

    def test_critical_production_issue_due_today(self) -> None:
        result = self.score(
            "Critical production issue",
            "Server is down",
            due=self.due_in(hours=12),
        )

        self.assertEqual(result.score, 110)
        self.assertEqual(result.priority, "urgent")
        self.assertEqual(result.reasoning, ["High urgency indicators detected", "Due date approaching"])

    def test_score_is_not_clamped(self) -> None:
        high = self.score("Client emergency", due=self.due_in(days=-1), urgent=True)
        low = self.score("Minor cleanup", due=self.due_in(days=90))

        self.assertEqual(high.score, 125)
        self.assertEqual(low.score, 20)
        self.assertEqual(low.priority, "low")

    def test_score_is_monotonic_in_each_signal(self) -> None:
        tiers = [self.score(t).score for t in (NEUTRAL_TITLE, "Client offsite", "Urgent offsite")]
        bands = [
            self.score(NEUTRAL_TITLE, due=self.due_in(days=d)).score
            for d in (40, 10, 5, 2, 0.5)
        ]
        flags = [self.score(NEUTRAL_TITLE, urgent=u).score for u in (False, True)]

        for series in (tiers, bands, flags):
            self.assertEqual(series, sorted(series))

    # -----------------------------------------------------------------------
    # Input Validation Tests
    # -----------------------------------------------------------------------

    def test_blank_title_is_rejected(self) -> None:
        with self.assertRaises(InvalidSuggestionInput) as ctx:
            self.score("   ")

        self.assertIn("title", ctx.exception.errors)

    def test_custom_rules_are_used(self) -> None:
        rules = build_rules({"priority": {"project_urgency_bonus": 40}}).priority
        data = PriorityInput(title=NEUTRAL_TITLE, project_urgent=True)

        self.assertEqual(score_priority(data, now=FIXED_NOW, rules=rules).score, 90)


# ===========================================================================
# TIME ESTIMATOR TESTS
# ===========================================================================


class TestEstimateTime(SimpleTestCase):

    def test_high_priority_feature_without_history(self) -> None:
        data = TimeEstimateInput(
            title="Implement user authentication",
            priority="high",
            task_type="feature",
        )

        result = estimate_time(data, [])

        # 4.0 * 1.3 * 1.2 = 6.24
        self.assertAlmostEqual(result.total_hours, 6.24)
        self.assertEqual(result.hours, 6)
        self.assertEqual(result.minutes, 14)
        self.assertEqual(result.confidence, 0.6)
        self.assertEqual(result.factors, {
            "complexity": "medium",
            "priority": "high",
            "task_type": "feature",
            "historical_data_points": 0,
        })

    def test_defaults_give_base_estimate(self) -> None:
        result = estimate_time(TimeEstimateInput(title="Write changelog"))

        self.assertEqual((result.hours, result.minutes), (4, 0))

    def test_low_priority_bug(self) -> None:
        # 4.0 * 0.8 * 0.7 = 2.24
        result = estimate_time(TimeEstimateInput(title="Typo", priority="low", task_type="bug"))

        self.assertEqual((result.hours, result.minutes), (2, 14))

    def test_unknown_priority_and_type_use_neutral_multiplier(self) -> None:
        data = TimeEstimateInput(title="Something", priority="whenever", task_type="chore")

        self.assertAlmostEqual(estimate_time(data).total_hours, 4.0)

    def test_long_description_adds_hours(self) -> None:
        over_fifty = TimeEstimateInput(title="Task", description="word " * 50)
        over_hundred = TimeEstimateInput(title="Task", description="word " * 100)

        first = estimate_time(over_fifty)
        second = estimate_time(over_hundred)

        self.assertAlmostEqual(first.total_hours, 6.0)
        self.assertEqual(first.factors["complexity"], "high")
        self.assertAlmostEqual(second.total_hours, 8.0)

    def test_fifty_words_is_not_long(self) -> None:
        data = TimeEstimateInput(title="Task", description="word " * 49)

        result = estimate_time(data)

        self.assertAlmostEqual(result.total_hours, 4.0)
        self.assertEqual(result.factors["complexity"], "medium")

    def test_history_is_blended_with_heuristic(self) -> None:
        result = estimate_time(TimeEstimateInput(title="Write changelog"), samples(11, 10.0))

        # (4.0 + 10.0) / 2
        self.assertAlmostEqual(result.total_hours, 7.0)
        self.assertEqual(result.confidence, 0.8)
        self.assertEqual(result.factors["historical_data_points"], 11)

    def test_confidence_threshold_is_more_than_ten_samples(self) -> None:
        data = TimeEstimateInput(title="Write changelog")

        self.assertEqual(estimate_time(data, samples(10, 3.0)).confidence, 0.6)
        self.assertEqual(estimate_time(data, samples(11, 3.0)).confidence, 0.8)

    def test_minutes_are_derived_from_fraction(self) -> None:
        # (4.0 + 1.0) / 2 = 2.5
        result = estimate_time(TimeEstimateInput(title="Write changelog"), samples(1, 1.0))

        self.assertEqual((result.hours, result.minutes), (2, 30))

    def test_blank_title_is_rejected(self) -> None:
        with self.assertRaises(InvalidSuggestionInput):
            estimate_time(TimeEstimateInput(title=""))


# ===========================================================================
# ASSIGNEE RANKER TESTS
# ===========================================================================


class TestRankAssignees(SimpleTestCase):

    def rank(self, candidates, title="Review release notes", skills=()):
        return rank_assignees(AssigneeInput(title=title, required_skills=tuple(skills)), candidates)

    def test_idle_experienced_member_beats_busy_member(self) -> None:
        a = candidate(1, "alice", active=0, total=50)
        b = candidate(2, "bob", active=10, total=5)

        result = self.rank([b, a])

        self.assertEqual([s.user["id"] for s in result.suggestions], [1, 2])
        self.assertEqual(result.suggestions[0].score, 70)
        self.assertEqual(result.suggestions[1].score, 10)

    def test_score_is_clamped_at_zero(self) -> None:
        result = self.rank([candidate(1, active=1000, total=0)])

        self.assertEqual(result.suggestions[0].score, 0)

    def test_score_is_clamped_at_one_hundred(self) -> None:
        skills = ["python", "django", "celery", "redis"]
        title = "Python django celery redis upgrade"

        result = self.rank([candidate(1, role="owner", total=10_000)], title=title, skills=skills)

        # 50 + 20 + 10 + 40 = 120 before clamping
        self.assertEqual(result.suggestions[0].score, 100)

    def test_experience_bonus_is_capped(self) -> None:
        self.assertEqual(self.rank([candidate(1, total=11)]).suggestions[0].score, 70)

    def test_role_bonus(self) -> None:
        roster = [
            candidate(1, role="viewer"),
            candidate(2, role="admin"),
            candidate(3, role="owner"),
            candidate(4, role="member"),
        ]

        scores = {s.user["id"]: s.score for s in self.rank(roster).suggestions}

        self.assertEqual(scores, {1: 50, 2: 55, 3: 60, 4: 50})

    def test_skill_matches_text_or_username(self) -> None:
        django_dev = candidate(1, username="django_dev")

        result = self.rank([django_dev], title="Build REST endpoints in Python", skills=["python", "django", "rust"])

        # python in text, django in username, rust matches nothing
        self.assertEqual(result.suggestions[0].score, 70)
        self.assertIn("Skills matched: python, django", result.suggestions[0].reasons)

    def test_skill_found_in_text_and_username_counts_once(self) -> None:
        result = self.rank([candidate(1, username="python_guru")], title="Python migration", skills=["python"])

        self.assertEqual(result.suggestions[0].score, 60)

    def test_skill_can_count_per_location_when_configured(self) -> None:
        rules = build_rules({"assignee": {"count_name_matches_separately": True}}).assignee
        data = AssigneeInput(title="Python migration", required_skills=("python",))

        result = rank_assignees(data, [candidate(1, username="python_guru")], rules=rules)

        self.assertEqual(result.suggestions[0].score, 70)

    def test_reasons_list_skills_only_when_requested(self) -> None:
        without = self.rank([candidate(1, active=2, total=4, role="admin")]).suggestions[0]
        with_skills = self.rank([candidate(1)], skills=["rust"]).suggestions[0]

        self.assertEqual(without.reasons, [
            "Current workload: 2 active tasks",
            "Experience: 4 total tasks",
            "Role: admin",
        ])
        self.assertEqual(with_skills.reasons[-1], "Skills matched: none")

    def test_workload_status_bands(self) -> None:
        roster = [candidate(i, active=count) for i, count in enumerate([2, 3, 5, 6])]

        statuses = {s.user["id"]: s.workload_status for s in self.rank(roster).suggestions}

        self.assertEqual(statuses, {0: "light", 1: "moderate", 2: "moderate", 3: "heavy"})

    def test_returns_top_five_and_keeps_roster_order_on_ties(self) -> None:
        roster = [candidate(i) for i in range(1, 8)]

        result = self.rank(roster)

        self.assertEqual([s.user["id"] for s in result.suggestions], [1, 2, 3, 4, 5])
        self.assertEqual(result.candidate_count, 7)
        self.assertTrue(all(s.confidence == 0.6 for s in result.suggestions))

    def test_empty_roster(self) -> None:
        result = self.rank([])

        self.assertEqual(result.suggestions, [])
        self.assertEqual(result.candidate_count, 0)
        self.assertEqual(result.reasons, ["No active project members to rank"])


# ===========================================================================
# TASK DECOMPOSER TESTS
# ===========================================================================


class TestBreakDownTask(SimpleTestCase):

    def breakdown(self, title: str, complexity: str = "medium", seed: int = 7, description: str = ""):
        data = BreakdownInput(title=title, description=description, complexity=complexity)
        return break_down_task(data, rng=random.Random(seed))

    def test_low_complexity_without_triggers_uses_generic_pool(self) -> None:
        result = self.breakdown(NEUTRAL_TITLE, complexity="low")
        titles = [s.title for s in result.subtasks]

        self.assertEqual(len(titles), 3)
        self.assertTrue(set(titles) <= GENERIC_SUBTASKS)
        self.assertEqual(len(set(titles)), 3)

    def test_generic_subtasks_get_bounded_random_estimates(self) -> None:
        for seed in range(20):
            for subtask in self.breakdown(NEUTRAL_TITLE, seed=seed).subtasks:
                self.assertIn(subtask.estimated_hours, (1, 2, 3, 4))
                self.assertIn(subtask.priority, ("low", "medium", "high"))

    def test_same_seed_gives_same_breakdown(self) -> None:
        self.assertEqual(
            self.breakdown(NEUTRAL_TITLE, seed=42),
            self.breakdown(NEUTRAL_TITLE, seed=42),
        )

    def test_target_count_per_complexity(self) -> None:
        expected = {"low": 3, "medium": 5, "high": 7, "mystery": 5}
        for complexity, count in expected.items():
            result = self.breakdown(NEUTRAL_TITLE, complexity=complexity)
            self.assertEqual(len(result.subtasks), count, complexity)

    def test_generic_pool_exhaustion_stops_early(self) -> None:
        result = self.breakdown(NEUTRAL_TITLE, complexity="very_high")

        self.assertEqual(len(result.subtasks), 7)
        self.assertEqual({s.title for s in result.subtasks}, GENERIC_SUBTASKS)

    def test_api_trigger_comes_first(self) -> None:
        result = self.breakdown("Create payments API", complexity="low")

        self.assertEqual(
            [(s.title, s.estimated_hours, s.priority) for s in result.subtasks],
            [
                ("Design API endpoints", 2, "high"),
                ("Implement backend logic", 4, "high"),
                ("Add error handling", 2, "medium"),
            ],
        )
        self.assertEqual(result.total_estimated_hours, 8)

    def test_trigger_is_a_substring_match(self) -> None:
        # "build" contains "ui"
        result = self.breakdown("Build release notes", complexity="medium")
        titles = [s.title for s in result.subtasks]

        self.assertEqual(titles[:3], ["Create UI mockups", "Implement user interface", "Add responsive design"])
        self.assertEqual(len(titles), 5)

    def test_all_triggers_fire_independently(self) -> None:
        result = self.breakdown("Backend API, frontend UI and database work", complexity="very_high")

        self.assertEqual(len(result.subtasks), 9)
        self.assertFalse({s.title for s in result.subtasks} & GENERIC_SUBTASKS)
        self.assertEqual(result.total_estimated_hours, 21)

    def test_injected_subtasks_are_truncated_to_target(self) -> None:
        result = self.breakdown("Backend API, frontend UI and database work", complexity="low")

        self.assertEqual(len(result.subtasks), 3)
        self.assertEqual(result.total_estimated_hours, 8)

    def test_total_covers_returned_subtasks(self) -> None:
        for seed in range(10):
            result = self.breakdown("Create payments API", complexity="high", seed=seed)
            self.assertEqual(result.total_estimated_hours, sum(s.estimated_hours for s in result.subtasks))

    def test_static_fields(self) -> None:
        result = self.breakdown(NEUTRAL_TITLE, complexity="high")

        self.assertEqual(result.complexity, "high")
        self.assertEqual(result.confidence, 0.7)
        self.assertEqual(len(result.recommendations), 4)


# ===========================================================================
# EXPLORATORY SUGGESTION TESTS
# ===========================================================================


class TestSuggestTasks(SimpleTestCase):

    def suggest(self, context: str = "", limit: int = 5, projects: int = 1, seed: int = 3, existing=()):
        return suggest_tasks(
            ExplorationInput(context=context, limit=limit),
            existing,
            project_count=projects,
            rng=random.Random(seed),
        )

    def test_no_projects_means_no_suggestions(self) -> None:
        result = self.suggest(context="fix bug", projects=0)

        self.assertEqual(result.suggestions, [])
        self.assertEqual(result.confidence, 0.0)
        self.assertEqual(result.reasons, ["No projects available for suggestions"])

    def test_bug_context_leads(self) -> None:
        result = self.suggest(context="login bug")

        first = result.suggestions[0]
        self.assertEqual(first.title, "Debug and fix reported issues")
        self.assertEqual(first.description, "Investigate and resolve bugs related to: login bug")
        self.assertEqual((first.priority, first.estimated_hours, first.confidence), ("high", 4, 0.8))
        self.assertEqual(len(result.suggestions), 5)

    def test_both_contexts_fire_in_order(self) -> None:
        result = self.suggest(context="New feature plus a fix")

        self.assertEqual(
            [s.title for s in result.suggestions[:2]],
            ["Debug and fix reported issues", "Implement new feature"],
        )

    def test_limit_truncates_contextual_suggestions(self) -> None:
        result = self.suggest(context="new fix", limit=1)

        self.assertEqual([s.title for s in result.suggestions], ["Debug and fix reported issues"])

    def test_common_tasks_fill_remaining_slots(self) -> None:
        result = self.suggest(limit=3, existing=[ExistingTask(title="Old task")])
        pool = {title for title, _, _ in get_rules().exploration.common_tasks}

        self.assertEqual(len(result.suggestions), 3)
        self.assertEqual(len({s.title for s in result.suggestions}), 3)
        self.assertEqual(result.existing_task_count, 1)
        for suggestion in result.suggestions:
            self.assertIn(suggestion.title, pool)
            self.assertTrue(1 <= suggestion.estimated_hours <= 8)
            self.assertTrue(0.6 <= suggestion.confidence <= 0.9)

    def test_limit_above_pool_size_returns_whole_pool(self) -> None:
        self.assertEqual(len(self.suggest(limit=50).suggestions), 10)

    def test_limit_below_one_still_returns_one_suggestion(self) -> None:
        for limit in (0, -3):
            self.assertEqual(len(self.suggest(limit=limit).suggestions), 1)

    def test_confidence_is_mean_of_suggestions(self) -> None:
        result = self.suggest(context="bug")
        mean = sum(s.confidence for s in result.suggestions) / len(result.suggestions)

        self.assertAlmostEqual(result.confidence, mean)


# ===========================================================================
# RULE TABLE TESTS
# ===========================================================================


class TestRules(SimpleTestCase):

    def test_defaults_without_overrides(self) -> None:
        rules = build_rules(None)

        self.assertEqual(rules.priority.base_score, 50)
        self.assertEqual(rules.breakdown.complexity_counts["very_high"], 9)

    def test_unknown_section_is_rejected(self) -> None:
        with self.assertRaises(ImproperlyConfigured):
            build_rules({"scheduling": {}})

    def test_unknown_field_is_rejected(self) -> None:
        with self.assertRaises(ImproperlyConfigured):
            build_rules({"priority": {"bonus_for_mondays": 5}})

    @override_settings(SUGGESTION_ENGINE_RULES={"estimation": {"base_hours": 8.0}})
    def test_settings_override(self) -> None:
        self.assertEqual(get_rules().estimation.base_hours, 8.0)
        self.assertAlmostEqual(estimate_time(TimeEstimateInput(title="Write changelog")).total_hours, 8.0)

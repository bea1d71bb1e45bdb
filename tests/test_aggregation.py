"""Tests for progress aggregation and daily submissions."""

from datetime import date, datetime

import pytest

from goaltracker.core.aggregation import (
    build_daily_entry,
    build_dashboard,
    compute_overall_progress,
    count_on_track,
    days_remaining,
    record_submission,
)
from goaltracker.core.catalog import default_goals
from goaltracker.core.models import AggregateState, GoalDefinition
from goaltracker.core.scoring import ScoringTargets

TARGETS = ScoringTargets(ds=2.5, bank=2, youtube=1.5)
TODAY = date(2024, 1, 20)


def test_overall_progress_of_default_goals():
    assert compute_overall_progress(default_goals()) == 15


def test_overall_progress_rounds_half_up():
    goals = {
        "a": GoalDefinition("a", "A", progress=10),
        "b": GoalDefinition("b", "B", progress=11),
    }
    assert compute_overall_progress(goals) == 11


def test_overall_progress_empty():
    assert compute_overall_progress({}) == 0


def test_count_on_track():
    assert count_on_track(default_goals()) == 3
    assert count_on_track(default_goals(), threshold=20) == 2
    assert count_on_track({}) == 0


@pytest.mark.parametrize(
    "today, expected",
    [
        ("2024-07-20", 0),
        ("2024-07-15", 0),
        ("2024-07-10", 5),
        (date(2024, 1, 15), 182),
        (datetime(2024, 7, 14, 12, 0), 1),
    ],
)
def test_days_remaining(today, expected):
    assert days_remaining("2024-01-15", "2024-07-15", today) == expected


def test_build_daily_entry_coerces_input():
    raw = {
        "workHours": "4",
        "dsHours": "2.5h",
        "bankHours": "",
        "youtubeHours": "abc",
        "workoutMins": "45.9",
        "cigarettes": None,
        "waterIntake": 8,
        "morningRoutine": "on",
        "grooming": True,
        "posture": "false",
    }
    record = build_daily_entry(raw, "2024-01-20", TARGETS, 75)

    assert record.work_hours == 4.0
    assert record.ds_hours == 2.5
    assert record.bank_hours == 0.0
    assert record.youtube_hours == 0.0
    assert record.workout_mins == 45
    assert record.cigarettes == 0
    assert record.water_intake == 8
    assert record.sleep_hours == 0.0
    assert record.energy_level == 5
    assert record.morning_routine is True
    assert record.grooming is True
    assert record.posture is False
    assert record.earnings == 300
    assert record.goal_completion == 30 + 10 + 5 + 5


def test_build_daily_entry_accepts_snake_case():
    raw = {"ds_hours": 2.5, "energy_level": "8", "morning_routine": True}
    record = build_daily_entry(raw, "2024-01-20", TARGETS, 75)
    assert record.ds_hours == 2.5
    assert record.energy_level == 8
    assert record.morning_routine is True


def test_build_daily_entry_ignores_derived_input():
    raw = {"earnings": 9999, "goalCompletion": 100}
    record = build_daily_entry(raw, "2024-01-20", TARGETS, 75)
    assert record.earnings == 0
    assert record.goal_completion == 0


def test_non_numeric_energy_level_defaults():
    record = build_daily_entry({"energyLevel": "tired"}, "2024-01-20", TARGETS, 75)
    assert record.energy_level == 5


def test_record_submission_stores_entry(state):
    new_state = record_submission(state, {"workHours": 4, "dsHours": 2.5}, TODAY, 75)

    record = new_state.daily_data["2024-01-20"]
    assert record.date == "2024-01-20"
    assert record.earnings == 300
    assert record.goal_completion == 30
    assert new_state.total_earnings == 300


def test_record_submission_leaves_input_state_alone(state):
    record_submission(state, {"workHours": 4}, TODAY, 75)
    assert state.daily_data == {}
    assert state.total_earnings == 0


def test_resubmission_double_counts_earnings(state):
    state = record_submission(state, {"workHours": 4}, TODAY, 75)
    state = record_submission(state, {"workHours": 4}, TODAY, 75)

    assert len(state.daily_data) == 1
    assert state.total_earnings == 600


def test_resubmission_correction(state):
    state = record_submission(state, {"workHours": 4}, TODAY, 75, correct_resubmission=True)
    state = record_submission(state, {"workHours": 2}, TODAY, 75, correct_resubmission=True)

    assert state.daily_data["2024-01-20"].earnings == 150
    assert state.total_earnings == 150


def test_submissions_on_different_days_accumulate(state):
    state = record_submission(state, {"workHours": 4}, date(2024, 1, 20), 75)
    state = record_submission(state, {"workHours": 2}, date(2024, 1, 21), 75)

    assert sorted(state.daily_data) == ["2024-01-20", "2024-01-21"]
    assert state.total_earnings == 450


def test_submission_uses_catalog_targets():
    goals = default_goals()
    goals["data_science"].daily_target = 5.0
    state = AggregateState(goals=goals)

    state = record_submission(state, {"dsHours": 2.5}, TODAY, 75)
    assert state.daily_data["2024-01-20"].goal_completion == 15


def test_streak_is_not_changed_by_submission(state):
    state.current_streak = 4
    new_state = record_submission(state, {"workHours": 1}, TODAY, 75)
    assert new_state.current_streak == 4


def test_build_dashboard(state):
    state = record_submission(
        state, {"workHours": 2, "dsHours": 1, "bankHours": 1, "youtubeHours": 0.5}, TODAY, 75
    )
    summary = build_dashboard(state, TODAY, "2024-01-15", "2024-07-15")

    assert summary.overall_progress == 15
    assert summary.goals_on_track == 3
    assert summary.total_goals == 6
    assert summary.days_remaining == 177
    assert summary.total_earnings == 150
    assert summary.today.total_study_hours == 2.5
    assert summary.today.earnings == 150
    assert summary.is_empty is False


def test_build_dashboard_without_entry_today(state):
    summary = build_dashboard(state, TODAY, "2024-01-15", "2024-07-15")
    assert summary.today is None


def test_build_dashboard_empty_catalog():
    summary = build_dashboard(AggregateState(), TODAY, "2024-01-15", "2024-07-15")
    assert summary.overall_progress == 0
    assert summary.goals_on_track == 0
    assert summary.is_empty is True


def test_negative_input_is_raised_to_zero():
    raw = {"workHours": "-4", "dsHours": -2.5, "workoutMins": "-30", "cigarettes": -3}
    record = build_daily_entry(raw, "2024-01-20", TARGETS, 75)

    assert record.work_hours == 0.0
    assert record.ds_hours == 0.0
    assert record.workout_mins == 0
    assert record.cigarettes == 0
    assert record.earnings == 0.0
    assert record.goal_completion == 0


def test_negative_work_hours_do_not_reduce_total(state):
    state = record_submission(state, {"workHours": "4"}, date(2024, 1, 19), 75)
    state = record_submission(state, {"workHours": "-4"}, TODAY, 75)
    assert state.total_earnings == 300


@pytest.mark.parametrize(
    "energy, expected",
    [("0", 1), (-3, 1), ("11", 10), (42, 10), ("7", 7), (None, 5), ("meh", 5)],
)
def test_energy_level_is_kept_in_range(energy, expected):
    record = build_daily_entry({"energyLevel": energy}, "2024-01-20", TARGETS, 75)
    assert record.energy_level == expected

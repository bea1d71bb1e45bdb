"""Daily completion scoring and earnings."""

import logging
import math
from dataclasses import dataclass

from .catalog import BANK_EXAM, DATA_SCIENCE, YOUTUBE
from .models import DailyEntryRecord, DaySummary, GoalDefinition

logger = logging.getLogger(__name__)

DS_WEIGHT = 0.30
BANK_WEIGHT = 0.30
YOUTUBE_WEIGHT = 0.20

WORKOUT_FULL_MINS = 30
WORKOUT_POINTS = 10
MORNING_ROUTINE_POINTS = 5
GROOMING_POINTS = 5

TERM_CAP = 100


@dataclass(frozen=True)
class ScoringTargets:
    """Daily study targets in hours."""
    ds: float
    bank: float
    youtube: float

    @classmethod
    def from_goals(cls, goals: dict[str, GoalDefinition]) -> "ScoringTargets":
        """Pick the daily targets of the study goals. Missing goals score as 0."""

        def target(goal_id: str) -> float:
            goal = goals.get(goal_id)
            return goal.daily_target if goal else 0.0

        return cls(ds=target(DATA_SCIENCE), bank=target(BANK_EXAM), youtube=target(YOUTUBE))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return math.floor(value + 0.5)


def _ratio(actual: float, target: float) -> float:
    if target <= 0:
        return 0.0
    return actual / target


def _study_term(actual: float, target: float, weight: float) -> float:
    return min(TERM_CAP, _ratio(actual, target) * 100 * weight)


def _workout_term(workout_mins: int) -> float:
    if workout_mins >= WORKOUT_FULL_MINS:
        return WORKOUT_POINTS
    return (workout_mins / WORKOUT_FULL_MINS) * WORKOUT_POINTS


def compute_daily_completion(record: DailyEntryRecord, targets: ScoringTargets) -> int:
    """
    Compute the 0-100 completion score for one day.

    Three weighted study terms (30/30/20), a workout term that scales
    linearly up to 30 minutes (10 points), and 5 points each for the
    morning routine and grooming habits.

    Args:
        record: Daily entry to score
        targets: Daily study targets

    Returns:
        Completion score rounded half-up
    """
    score = 0.0
    score += _study_term(record.ds_hours, targets.ds, DS_WEIGHT)
    score += _study_term(record.bank_hours, targets.bank, BANK_WEIGHT)
    score += _study_term(record.youtube_hours, targets.youtube, YOUTUBE_WEIGHT)
    score += _workout_term(record.workout_mins)
    score += MORNING_ROUTINE_POINTS if record.morning_routine else 0
    score += GROOMING_POINTS if record.grooming else 0

    return round_half_up(score)


def compute_earnings(work_hours: float, rate_per_hour: float) -> float:
    """Earnings for the hours worked at a fixed hourly rate."""
    return work_hours * rate_per_hour


def summarize_day(record: DailyEntryRecord) -> DaySummary:
    """Study, earnings and completion figures for a stored record."""
    total_study = record.ds_hours + record.bank_hours + record.youtube_hours
    return DaySummary(
        date=record.date,
        total_study_hours=round(total_study, 1),
        earnings=record.earnings,
        goal_completion=record.goal_completion,
    )

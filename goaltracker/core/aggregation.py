"""Progress aggregation and daily submission handling."""

import logging
import math
from dataclasses import replace
from datetime import date, datetime
from typing import Any, Optional, Union

from .models import (
    ENTRY_KEYS,
    AggregateState,
    DailyEntryRecord,
    DashboardSummary,
    GoalDefinition,
    coerce_entry_values,
)
from .scoring import (
    ScoringTargets,
    compute_daily_completion,
    compute_earnings,
    round_half_up,
    summarize_day,
)

logger = logging.getLogger(__name__)

DEFAULT_ON_TRACK_THRESHOLD = 15
SECONDS_PER_DAY = 24 * 60 * 60


DateLike = Union[date, datetime, str]


def compute_overall_progress(goals: dict[str, GoalDefinition]) -> int:
    """
    Average stored progress across all goals.

    Returns 0 for an empty catalog; callers use DashboardSummary.is_empty
    to tell that apart from real zero progress.
    """
    if not goals:
        return 0
    total = sum(goal.progress for goal in goals.values())
    return round_half_up(total / len(goals))


def count_on_track(
    goals: dict[str, GoalDefinition], threshold: int = DEFAULT_ON_TRACK_THRESHOLD
) -> int:
    """Number of goals whose progress meets the threshold."""
    return sum(1 for goal in goals.values() if goal.progress >= threshold)


def _as_datetime(value: DateLike) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    return datetime(value.year, value.month, value.day)


def days_remaining(start_date: DateLike, end_date: DateLike, today: DateLike) -> int:
    """
    Whole days left until the end date, never negative.

    Args:
        start_date: Start of the challenge window (not used in the count)
        end_date: End of the challenge window
        today: Current date or time

    Returns:
        Ceiling of the remaining days, floored at 0
    """
    delta = _as_datetime(end_date) - _as_datetime(today)
    return max(0, math.ceil(delta.total_seconds() / SECONDS_PER_DAY))


def _raw_value(raw_input: dict, attr: str) -> Any:
    key = ENTRY_KEYS[attr]
    if key in raw_input:
        return raw_input[key]
    return raw_input.get(attr)


def build_daily_entry(
    raw_input: dict,
    entry_date: str,
    targets: ScoringTargets,
    rate_per_hour: float,
) -> DailyEntryRecord:
    """
    Build a daily record from raw form input.

    Absent or non-numeric fields become 0 (energy level becomes 5).
    Negative numbers are raised to 0 and energy level is kept in 1-10.
    Earnings and completion are always computed here; any values for them
    in the raw input are ignored.

    Args:
        raw_input: Form values keyed by camelCase or snake_case names
        entry_date: ISO date the record is stored under
        targets: Daily study targets for scoring
        rate_per_hour: Hourly earnings rate

    Returns:
        Fully populated DailyEntryRecord
    """
    values = coerce_entry_values(lambda attr: _raw_value(raw_input, attr))
    record = DailyEntryRecord(date=entry_date, **values)
    record.earnings = compute_earnings(record.work_hours, rate_per_hour)
    record.goal_completion = compute_daily_completion(record, targets)
    return record


def record_submission(
    state: AggregateState,
    raw_input: dict,
    today: date,
    rate_per_hour: float,
    correct_resubmission: bool = False,
) -> AggregateState:
    """
    Apply a daily submission and return the updated state.

    The record for today is inserted or overwritten and its earnings are
    added to the running total. A previous record for the same date is
    dropped without subtracting its earnings unless correct_resubmission
    is set.

    Args:
        state: Current state (left unmodified)
        raw_input: Raw form values
        today: Date the entry is recorded for
        rate_per_hour: Hourly earnings rate
        correct_resubmission: Subtract earnings of a replaced record first

    Returns:
        New AggregateState
    """
    entry_date = today.isoformat()
    targets = ScoringTargets.from_goals(state.goals)
    record = build_daily_entry(raw_input, entry_date, targets, rate_per_hour)

    total_earnings = state.total_earnings
    previous = state.daily_data.get(entry_date)
    if previous is not None:
        if correct_resubmission:
            total_earnings -= previous.earnings
        else:
            logger.info(
                f"Resubmission for {entry_date}: previous earnings "
                f"{previous.earnings:.2f} stay in the total"
            )
    total_earnings += record.earnings

    daily_data = dict(state.daily_data)
    daily_data[entry_date] = record

    logger.info(
        f"Recorded {entry_date}: completion {record.goal_completion}%, "
        f"earnings {record.earnings:.2f}, total {total_earnings:.2f}"
    )

    return replace(state, daily_data=daily_data, total_earnings=total_earnings)


def build_dashboard(
    state: AggregateState,
    today: DateLike,
    challenge_start: DateLike,
    challenge_end: DateLike,
    on_track_threshold: int = DEFAULT_ON_TRACK_THRESHOLD,
) -> DashboardSummary:
    """Collect the overview figures shown on the dashboard."""
    today_key = _as_datetime(today).date().isoformat()
    record: Optional[DailyEntryRecord] = state.daily_data.get(today_key)

    return DashboardSummary(
        overall_progress=compute_overall_progress(state.goals),
        goals_on_track=count_on_track(state.goals, on_track_threshold),
        total_goals=len(state.goals),
        days_remaining=days_remaining(challenge_start, challenge_end, today),
        total_earnings=state.total_earnings,
        current_streak=state.current_streak,
        today=summarize_day(record) if record else None,
        is_empty=not state.goals,
    )

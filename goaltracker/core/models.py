"""Data models for goals, daily entries and dashboard state."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional

from .coercion import coerce_bool, coerce_float, coerce_int


@dataclass
class GoalDefinition:
    """A long-term goal with daily and weekly hour targets."""
    id: str
    name: str
    progress: int = 0  # percent, set externally
    daily_target: float = 0.0
    weekly_target: float = 0.0

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "progress": self.progress,
            "daily_target": self.daily_target,
            "weekly_target": self.weekly_target,
        }


# Python attribute -> persisted key
ENTRY_KEYS = {
    "work_hours": "workHours",
    "ds_hours": "dsHours",
    "bank_hours": "bankHours",
    "youtube_hours": "youtubeHours",
    "workout_mins": "workoutMins",
    "meditation_mins": "meditationMins",
    "mma_mins": "mmaMins",
    "cigarettes": "cigarettes",
    "water_intake": "waterIntake",
    "sleep_hours": "sleepHours",
    "energy_level": "energyLevel",
    "morning_routine": "morningRoutine",
    "grooming": "grooming",
    "posture": "posture",
    "earnings": "earnings",
    "goal_completion": "goalCompletion",
}

FLOAT_FIELDS = ("work_hours", "ds_hours", "bank_hours", "youtube_hours", "sleep_hours")
INT_FIELDS = ("workout_mins", "meditation_mins", "mma_mins", "cigarettes", "water_intake")
BOOL_FIELDS = ("morning_routine", "grooming", "posture")

DEFAULT_ENERGY_LEVEL = 5
MIN_ENERGY_LEVEL = 1
MAX_ENERGY_LEVEL = 10


@dataclass
class DailyEntryRecord:
    """Self-reported metrics for one calendar date."""
    date: str  # ISO date, e.g. "2024-01-15"

    work_hours: float = 0.0
    ds_hours: float = 0.0
    bank_hours: float = 0.0
    youtube_hours: float = 0.0
    workout_mins: int = 0
    meditation_mins: int = 0
    mma_mins: int = 0
    cigarettes: int = 0
    water_intake: int = 0
    sleep_hours: float = 0.0
    energy_level: int = DEFAULT_ENERGY_LEVEL
    morning_routine: bool = False
    grooming: bool = False
    posture: bool = False

    # Derived at write time
    earnings: float = 0.0
    goal_completion: int = 0

    def to_dict(self) -> dict:
        """Serialize using the persisted camelCase keys."""
        data = {"date": self.date}
        for attr, key in ENTRY_KEYS.items():
            data[key] = getattr(self, attr)
        return data

    @classmethod
    def from_dict(cls, entry_date: str, data: dict) -> "DailyEntryRecord":
        """
        Load a persisted record.

        Values go through the same coercion as form input, so missing or
        wrongly typed fields fall back to their defaults.
        """
        values = coerce_entry_values(lambda attr: data.get(ENTRY_KEYS[attr]))
        values["earnings"] = coerce_float(data.get("earnings"))
        values["goal_completion"] = coerce_int(data.get("goalCompletion"))

        stored_date = data.get("date")
        return cls(date=stored_date if isinstance(stored_date, str) else entry_date, **values)


def coerce_entry_values(lookup: Callable[[str], Any]) -> dict:
    """
    Coerce the user-reported fields of an entry.

    Args:
        lookup: Returns the raw value for an attribute name, or None

    Returns:
        Attribute name -> coerced value, without the derived fields
    """
    values = {}
    for attr in FLOAT_FIELDS:
        values[attr] = coerce_float(lookup(attr))
    for attr in INT_FIELDS:
        values[attr] = coerce_int(lookup(attr))
    for attr in BOOL_FIELDS:
        values[attr] = coerce_bool(lookup(attr))
    values["energy_level"] = coerce_int(
        lookup("energy_level"),
        DEFAULT_ENERGY_LEVEL,
        minimum=MIN_ENERGY_LEVEL,
        maximum=MAX_ENERGY_LEVEL,
    )
    return values


@dataclass
class AggregateState:
    """Everything the dashboard owns: goals, daily records and running totals."""
    goals: dict[str, GoalDefinition] = field(default_factory=dict)
    daily_data: dict[str, DailyEntryRecord] = field(default_factory=dict)
    current_streak: int = 0
    total_earnings: float = 0.0


class MilestoneStatus(str, Enum):
    """Display status of a milestone."""
    AHEAD = "Ahead"
    ON_TRACK = "On Track"
    IN_PROGRESS = "In Progress"
    BEHIND = "Behind"

    @property
    def css_class(self) -> str:
        return STATUS_CLASSES.get(self, "info")


STATUS_CLASSES = {
    MilestoneStatus.AHEAD: "success",
    MilestoneStatus.ON_TRACK: "success",
    MilestoneStatus.IN_PROGRESS: "warning",
    MilestoneStatus.BEHIND: "error",
}


@dataclass(frozen=True)
class Milestone:
    """Static sub-goal descriptor shown on the milestones tab."""
    goal: str
    month: str
    title: str
    progress: int
    status: MilestoneStatus
    tasks: tuple[str, ...] = ()


@dataclass(frozen=True)
class DaySummary:
    """Study, earnings and completion figures for a single day."""
    date: str
    total_study_hours: float
    earnings: float
    goal_completion: int


@dataclass
class DashboardSummary:
    """Aggregate figures consumed by the presentation layer."""
    overall_progress: int
    goals_on_track: int
    total_goals: int
    days_remaining: int
    total_earnings: float
    current_streak: int
    today: Optional[DaySummary] = None
    is_empty: bool = False

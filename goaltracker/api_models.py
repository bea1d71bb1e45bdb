"""HTTP API models."""

from typing import Optional

from pydantic import BaseModel

from goaltracker.core.models import (
    DailyEntryRecord,
    DashboardSummary,
    DaySummary,
    GoalDefinition,
    Milestone,
)


class GoalResponse(BaseModel):
    """A goal from the catalog."""

    id: str
    name: str
    progress: int
    daily_target: float
    weekly_target: float

    @classmethod
    def from_goal(cls, goal: GoalDefinition) -> "GoalResponse":
        return cls(
            id=goal.id,
            name=goal.name,
            progress=goal.progress,
            daily_target=goal.daily_target,
            weekly_target=goal.weekly_target,
        )


class EntryResponse(BaseModel):
    """A stored daily entry."""

    date: str
    work_hours: float
    ds_hours: float
    bank_hours: float
    youtube_hours: float
    workout_mins: int
    meditation_mins: int
    mma_mins: int
    cigarettes: int
    water_intake: int
    sleep_hours: float
    energy_level: int
    morning_routine: bool
    grooming: bool
    posture: bool
    earnings: float
    goal_completion: int

    @classmethod
    def from_record(cls, record: DailyEntryRecord) -> "EntryResponse":
        return cls(**vars(record))


class DaySummaryResponse(BaseModel):
    """Today's study, earnings and completion."""

    date: str
    total_study_hours: float
    earnings: float
    goal_completion: int

    @classmethod
    def from_summary(cls, summary: DaySummary) -> "DaySummaryResponse":
        return cls(**vars(summary))


class DashboardResponse(BaseModel):
    """Response for /api/dashboard."""

    overall_progress: int
    goals_on_track: int
    total_goals: int
    days_remaining: int
    total_earnings: float
    current_streak: int
    today: Optional[DaySummaryResponse] = None
    is_empty: bool = False

    @classmethod
    def from_summary(cls, summary: DashboardSummary) -> "DashboardResponse":
        return cls(
            overall_progress=summary.overall_progress,
            goals_on_track=summary.goals_on_track,
            total_goals=summary.total_goals,
            days_remaining=summary.days_remaining,
            total_earnings=summary.total_earnings,
            current_streak=summary.current_streak,
            today=DaySummaryResponse.from_summary(summary.today) if summary.today else None,
            is_empty=summary.is_empty,
        )


class SubmissionResponse(BaseModel):
    """Response for POST /api/entries."""

    status: str = "success"  # "success" or "warning"
    message: str
    entry: EntryResponse
    dashboard: DashboardResponse
    warning: Optional[str] = None


class MilestoneResponse(BaseModel):
    """A static milestone with its display class."""

    goal: str
    month: str
    title: str
    progress: int
    status: str
    status_class: str
    tasks: list[str]

    @classmethod
    def from_milestone(cls, milestone: Milestone) -> "MilestoneResponse":
        return cls(
            goal=milestone.goal,
            month=milestone.month,
            title=milestone.title,
            progress=milestone.progress,
            status=milestone.status.value,
            status_class=milestone.status.css_class,
            tasks=list(milestone.tasks),
        )


class HeadlineResponse(BaseModel):
    """Current clock text and quote."""

    clock_text: str
    quote: str


class RenderResponse(BaseModel):
    """Response for POST /api/render."""

    status: str = "success"
    filename: str
    image_url: str

"""Default goal catalog, milestones and quotes."""

import logging
from typing import Optional

from .models import GoalDefinition, Milestone, MilestoneStatus

logger = logging.getLogger(__name__)

# Goals whose daily targets drive the completion score
DATA_SCIENCE = "data_science"
BANK_EXAM = "bank_exam"
YOUTUBE = "youtube"

DEFAULT_GOALS = (
    GoalDefinition(DATA_SCIENCE, "Data Science Learning", 15, 2.5, 15),
    GoalDefinition(BANK_EXAM, "Bank Exam Preparation", 12, 2, 12),
    GoalDefinition(YOUTUBE, "YouTube Channel", 8, 1.5, 8),
    GoalDefinition("health", "Health & Fitness", 20, 1, 6),
    GoalDefinition("confidence", "Confidence Building", 25, 0.5, 3),
    GoalDefinition("mma", "MMA Self-Defense", 10, 0.75, 4),
)

MILESTONES = (
    Milestone(
        goal="Data Science",
        month="Month 1",
        title="Python & Statistics Fundamentals",
        progress=60,
        status=MilestoneStatus.IN_PROGRESS,
        tasks=("Complete Python basics", "Statistics course", "First data project"),
    ),
    Milestone(
        goal="Bank Exam",
        month="Month 1",
        title="Syllabus Analysis & Basics",
        progress=50,
        status=MilestoneStatus.IN_PROGRESS,
        tasks=("Syllabus breakdown", "Basic math review", "English fundamentals"),
    ),
    Milestone(
        goal="YouTube",
        month="Month 1",
        title="Channel Setup & Strategy",
        progress=40,
        status=MilestoneStatus.BEHIND,
        tasks=("Channel creation", "Content strategy", "First 5 videos"),
    ),
    Milestone(
        goal="Health & Fitness",
        month="Month 1",
        title="Fitness Foundation",
        progress=70,
        status=MilestoneStatus.ON_TRACK,
        tasks=("Daily workouts", "Quit smoking", "Nutrition basics"),
    ),
    Milestone(
        goal="Confidence",
        month="Month 1",
        title="Daily Routines & Self-Care",
        progress=80,
        status=MilestoneStatus.AHEAD,
        tasks=("Morning routine", "Grooming habits", "Posture improvement"),
    ),
    Milestone(
        goal="MMA",
        month="Month 1",
        title="Basic Striking Techniques",
        progress=35,
        status=MilestoneStatus.BEHIND,
        tasks=("Basic punches", "Footwork", "Shadow boxing"),
    ),
)

QUOTES = (
    "Success is the sum of small efforts repeated day in and day out.",
    "The future depends on what you do today.",
    "Your current situation is not your final destination.",
    "Every expert was once a beginner.",
    "Progress, not perfection.",
    "Invest in yourself. You are your own best investment.",
    "Small steps every day lead to big changes in a year.",
    "Your goals are waiting for you to catch up with them.",
)

# Shown on first launch when sample seeding is enabled
SAMPLE_DAILY_DATA = {
    "2024-01-15": {"dsHours": 2.1, "bankHours": 1.8, "youtubeHours": 1.2, "workoutMins": 45, "goalCompletion": 67},
    "2024-01-16": {"dsHours": 1.8, "bankHours": 2.2, "youtubeHours": 0.8, "workoutMins": 30, "goalCompletion": 83},
    "2024-01-17": {"dsHours": 2.5, "bankHours": 1.5, "youtubeHours": 1.5, "workoutMins": 60, "goalCompletion": 100},
}


def default_goals() -> dict[str, GoalDefinition]:
    """Fresh copy of the default catalog, keyed by goal id."""
    return {
        goal.id: GoalDefinition(
            goal.id,
            goal.name,
            goal.progress,
            float(goal.daily_target),
            float(goal.weekly_target),
        )
        for goal in DEFAULT_GOALS
    }


def merge_goals(saved: Optional[dict]) -> dict[str, GoalDefinition]:
    """
    Build the catalog from a persisted goals mapping.

    A saved mapping replaces the default catalog as a whole. Fields missing
    from a saved goal fall back to the default goal with the same id.

    Args:
        saved: Mapping of goal id to goal fields, or None

    Returns:
        Goal catalog keyed by id
    """
    defaults = default_goals()
    if not saved:
        return defaults

    goals = {}
    for goal_id, fields in saved.items():
        if not isinstance(fields, dict):
            logger.warning(f"Ignoring malformed goal entry: {goal_id}")
            continue

        base = defaults.get(goal_id) or GoalDefinition(goal_id, goal_id)
        goals[goal_id] = GoalDefinition(
            id=goal_id,
            name=str(fields.get("name", base.name)),
            progress=int(fields.get("progress", base.progress)),
            daily_target=float(fields.get("daily_target", base.daily_target)),
            weekly_target=float(fields.get("weekly_target", base.weekly_target)),
        )

    return goals

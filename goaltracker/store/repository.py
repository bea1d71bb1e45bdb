"""Loading and saving dashboard state as two versioned blobs."""

import logging
from typing import Optional

from goaltracker.core.catalog import SAMPLE_DAILY_DATA, default_goals, merge_goals
from goaltracker.core.models import AggregateState, DailyEntryRecord, GoalDefinition

from .database import KeyValueStore, MalformedDataError

logger = logging.getLogger(__name__)

MAIN_KEY = "goalSystemMainData"
DAILY_KEY = "goalSystemDailyData"
SCHEMA_VERSION = 1


class StateRepository:
    """Reads and writes AggregateState through a KeyValueStore."""

    def __init__(self, store: KeyValueStore, seed_sample_data: bool = False):
        """
        Initialize repository.

        Args:
            store: Underlying key-value store
            seed_sample_data: Use the sample days when no daily data is stored
        """
        self.store = store
        self.seed_sample_data = seed_sample_data

    def load_state(self) -> AggregateState:
        """
        Load the full state, falling back to defaults for bad blobs.

        Never raises for malformed data; problems are logged and the
        affected part is replaced by the default catalog or an empty map.
        """
        goals, streak, earnings = self._load_main()
        daily_data = self._load_daily()

        return AggregateState(
            goals=goals,
            daily_data=daily_data,
            current_streak=streak,
            total_earnings=earnings,
        )

    def save_state(self, state: AggregateState):
        """
        Write both blobs.

        Raises:
            StorageWriteError: If either write fails
        """
        self.save_daily_data(state)
        self.save_main_data(state)

    def save_main_data(self, state: AggregateState):
        """Write goals, streak and total earnings."""
        self.store.set(
            MAIN_KEY,
            {
                "version": SCHEMA_VERSION,
                "goals": {goal_id: goal.to_dict() for goal_id, goal in state.goals.items()},
                "currentStreak": state.current_streak,
                "totalEarnings": state.total_earnings,
            },
        )

    def save_daily_data(self, state: AggregateState):
        """Write every daily record."""
        self.store.set(
            DAILY_KEY,
            {
                "version": SCHEMA_VERSION,
                "dailyData": {
                    entry_date: record.to_dict()
                    for entry_date, record in state.daily_data.items()
                },
            },
        )

    def _read(self, key: str) -> Optional[object]:
        try:
            return self.store.get(key)
        except MalformedDataError as e:
            logger.warning(f"{e}; using defaults")
            return None

    def _load_main(self) -> tuple[dict[str, GoalDefinition], int, float]:
        blob = self._read(MAIN_KEY)
        if blob is None:
            return default_goals(), 0, 0.0

        if not isinstance(blob, dict):
            logger.warning(f"{MAIN_KEY} is not an object; using defaults")
            return default_goals(), 0, 0.0

        try:
            goals = merge_goals(blob.get("goals"))
            streak = int(blob.get("currentStreak", 0))
            earnings = float(blob.get("totalEarnings", 0.0))
        except (TypeError, ValueError, AttributeError) as e:
            logger.warning(f"{MAIN_KEY} has invalid fields ({e}); using defaults")
            return default_goals(), 0, 0.0

        return goals, streak, earnings

    def _load_daily(self) -> dict[str, DailyEntryRecord]:
        blob = self._read(DAILY_KEY)
        if blob is None:
            if self.seed_sample_data:
                logger.info("No daily data stored; seeding sample days")
                return self._parse_daily(SAMPLE_DAILY_DATA)
            return {}

        if not isinstance(blob, dict):
            logger.warning(f"{DAILY_KEY} is not an object; starting empty")
            return {}

        # Unversioned blobs are a bare date -> record mapping
        entries = blob.get("dailyData", {}) if "version" in blob else blob

        try:
            return self._parse_daily(entries)
        except (TypeError, ValueError, AttributeError) as e:
            logger.warning(f"{DAILY_KEY} has invalid records ({e}); starting empty")
            return {}

    def _parse_daily(self, entries: dict) -> dict[str, DailyEntryRecord]:
        daily_data = {}
        for entry_date, fields in entries.items():
            if not isinstance(fields, dict):
                logger.warning(f"Skipping malformed daily record for {entry_date}")
                continue
            daily_data[entry_date] = DailyEntryRecord.from_dict(entry_date, fields)
        return daily_data

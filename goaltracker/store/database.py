"""Simple SQLite key-value store for dashboard blobs."""

import json
import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)


class StorageWriteError(Exception):
    """Raised when a blob could not be written."""


class MalformedDataError(Exception):
    """Raised when a stored blob is not valid JSON."""


class KeyValueStore:
    """JSON blobs stored by key in a single SQLite table."""

    def __init__(self, db_path: str = "data/goals.db"):
        """Initialize database."""
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self):
        """Create database tables if they don't exist."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS blobs (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.commit()
        logger.info(f"Database initialized at {self.db_path}")

    def get(self, key: str) -> Optional[Any]:
        """
        Get the blob stored under a key.

        Returns:
            Decoded JSON value, or None if the key is absent

        Raises:
            MalformedDataError: If the stored text is not valid JSON
        """
        with sqlite3.connect(self.db_path) as conn:
            row = conn.execute(
                "SELECT value FROM blobs WHERE key = ?", (key,)
            ).fetchone()

        if not row:
            return None

        try:
            return json.loads(row[0])
        except json.JSONDecodeError as e:
            raise MalformedDataError(f"Blob {key} is not valid JSON: {e}") from e

    def set(self, key: str, blob: Any):
        """
        Store a blob under a key, replacing any previous value.

        Raises:
            StorageWriteError: If the blob cannot be encoded or written
        """
        try:
            value = json.dumps(blob)
            with sqlite3.connect(self.db_path) as conn:
                conn.execute(
                    """
                    INSERT INTO blobs (key, value, updated_at) VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (key, value, datetime.now(timezone.utc).isoformat()),
                )
                conn.commit()
        except (TypeError, ValueError, sqlite3.Error) as e:
            logger.error(f"Failed to write {key}: {e}")
            raise StorageWriteError(f"Could not save {key}: {e}") from e

        logger.debug(f"Stored {key} ({len(value)} bytes)")

"""SQLite data store for DayBook."""

import json
import logging
import sqlite3
from datetime import date
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from daybook.db.base import BaseStore
from daybook.exceptions import StorageError
from daybook.models import JournalEntry, JournalState, Settings

logger = logging.getLogger(__name__)


class DataStore(BaseStore):
    """SQLite-based journal state store."""

    def __init__(self, db_path: Path):
        """Initialize the data store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path)
        self._ensure_db_dir()
        self._init_schema()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create database directory {self.db_path.parent}: {e}") from e

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Initialize database schema on first run."""
        try:
            conn = self._get_connection()
        except sqlite3.Error as e:
            raise StorageError(f"Cannot open database {self.db_path}: {e}") from e
        try:
            cursor = conn.cursor()

            # One row per journal day; position keeps storage order
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS journal (
                    date TEXT PRIMARY KEY,
                    position INTEGER NOT NULL,
                    start_balance REAL NOT NULL,
                    end_balance REAL NOT NULL,
                    notes TEXT NOT NULL DEFAULT ''
                )
            """)

            # Single settings document
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS settings (
                    id INTEGER PRIMARY KEY CHECK (id = 1),
                    data TEXT NOT NULL
                )
            """)

            conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Cannot initialize database {self.db_path}: {e}") from e
        finally:
            conn.close()

    # ==================== State ====================

    def load(self) -> Optional[JournalState]:
        """Load entries and settings.

        A settings document that cannot be parsed is replaced with default
        settings; broken journal rows raise.

        Returns:
            Stored state, or None for a database that was never saved to.

        Raises:
            StorageError: If the database cannot be read or a journal row
                is invalid.
        """
        try:
            conn = self._get_connection()
            try:
                cursor = conn.cursor()
                cursor.execute(
                    """
                    SELECT date, start_balance, end_balance, notes
                    FROM journal
                    ORDER BY position
                    """
                )
                rows = cursor.fetchall()
                cursor.execute("SELECT data FROM settings WHERE id = 1")
                settings_row = cursor.fetchone()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Cannot read database {self.db_path}: {e}") from e

        if not rows and settings_row is None:
            return None

        try:
            entries = [
                JournalEntry(
                    date=date.fromisoformat(row["date"]),
                    start_balance=row["start_balance"],
                    end_balance=row["end_balance"],
                    notes=row["notes"],
                )
                for row in rows
            ]
        except (ValueError, ValidationError) as e:
            raise StorageError(f"Invalid journal row: {e}") from e

        return JournalState(entries=entries, settings=self._parse_settings(settings_row))

    def _parse_settings(self, row: Optional[sqlite3.Row]) -> Settings:
        """Parse the stored settings document, falling back to defaults."""
        if row is None:
            return Settings()
        try:
            return Settings.model_validate(json.loads(row["data"]))
        except (ValueError, ValidationError) as e:
            logger.warning("Stored settings are invalid, using defaults: %s", e)
            return Settings()

    def save(self, state: JournalState) -> None:
        """Replace the stored state in a single transaction.

        Args:
            state: State to save.

        Raises:
            StorageError: If the database cannot be written.
        """
        settings_json = json.dumps(state.settings.model_dump(mode="json", by_alias=True))
        try:
            conn = self._get_connection()
            try:
                with conn:
                    cursor = conn.cursor()
                    cursor.execute("DELETE FROM journal")
                    cursor.executemany(
                        """
                        INSERT INTO journal
                        (date, position, start_balance, end_balance, notes)
                        VALUES (?, ?, ?, ?, ?)
                        """,
                        [
                            (
                                entry.date.isoformat(),
                                position,
                                entry.start_balance,
                                entry.end_balance,
                                entry.notes,
                            )
                            for position, entry in enumerate(state.entries)
                        ],
                    )
                    cursor.execute(
                        "INSERT OR REPLACE INTO settings (id, data) VALUES (1, ?)",
                        (settings_json,),
                    )
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Cannot write database {self.db_path}: {e}") from e

        logger.debug("Saved %d entries to %s", len(state.entries), self.db_path)


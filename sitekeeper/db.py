"""SQLite key-value slot storage for SiteKeeper."""

import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

DEFAULT_DB_PATH = Path.home() / ".sitekeeper" / "sitekeeper.db"


class Database:
    """SQLite database holding named storage slots."""

    def __init__(self, db_path: Optional[Path] = None):
        """Initialize database connection.

        Args:
            db_path: Path to the SQLite database file. Defaults to ~/.sitekeeper/sitekeeper.db
        """
        self.db_path = db_path or DEFAULT_DB_PATH
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn: Optional[sqlite3.Connection] = None
        self._init_db()

    def _get_conn(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._conn is None:
            self._conn = sqlite3.connect(self.db_path)
            self._conn.row_factory = sqlite3.Row
        return self._conn

    def _init_db(self) -> None:
        """Create tables if they don't exist."""
        conn = self._get_conn()
        conn.executescript("""
            CREATE TABLE IF NOT EXISTS slots (
                name TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP
            );
        """)
        conn.commit()

    def close(self) -> None:
        """Close database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None

    def read_slot(self, name: str) -> Optional[str]:
        """Read the value stored in a slot.

        Args:
            name: The slot name

        Returns:
            The stored text or None if the slot does not exist
        """
        conn = self._get_conn()
        row = conn.execute("SELECT value FROM slots WHERE name = ?", (name,)).fetchone()
        return row["value"] if row else None

    def write_slot(self, name: str, value: str) -> None:
        """Create or replace the value stored in a slot.

        Args:
            name: The slot name
            value: Text to store
        """
        conn = self._get_conn()
        conn.execute(
            """
            INSERT INTO slots (name, value, updated_at)
            VALUES (?, ?, ?)
            ON CONFLICT(name) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
            """,
            (name, value, datetime.now(timezone.utc).isoformat()),
        )
        conn.commit()

    def delete_slot(self, name: str) -> bool:
        """Delete a slot.

        Args:
            name: The slot name

        Returns:
            True if the slot was removed, False if not found
        """
        conn = self._get_conn()
        cursor = conn.execute("DELETE FROM slots WHERE name = ?", (name,))
        conn.commit()
        return cursor.rowcount > 0


"""Thought record operations.

IMPORT CONVENTION:
- Core accesses these through core.thoughts property
"""

import sqlite3

from ..exceptions import DatabaseError
from ..utils import isodatetime, uid


class ThoughtOperations:
    """Create and list short text records."""

    def __init__(self, conn: sqlite3.Connection):
        self._conn = conn

    def create(self, message: str) -> sqlite3.Row:
        """Insert a thought and commit.

        Args:
            message: Non-empty text of the thought

        Returns:
            sqlite3.Row for the stored thought

        Raises:
            DatabaseError: If the insert fails
        """
        thought_id = uid.generate_uuid()
        try:
            with self._conn:
                self._conn.execute(
                    "INSERT INTO thoughts (id, message, created_at) VALUES (?, ?, ?)",
                    (thought_id, message, isodatetime.now())
                )
        except sqlite3.Error as e:
            raise DatabaseError("Failed to store thought", {"reason": str(e)}) from e

        return self._conn.execute(
            "SELECT * FROM thoughts WHERE id = ?",
            (thought_id,)
        ).fetchone()

    def list(self, limit: int = 20) -> list[sqlite3.Row]:
        """List thoughts, newest first.

        Args:
            limit: Maximum number of results to return (default: 20)
        """
        try:
            return self._conn.execute(
                """SELECT * FROM thoughts
                   ORDER BY rowid DESC
                   LIMIT ?""",
                (limit,)
            ).fetchall()
        except sqlite3.Error as e:
            raise DatabaseError("Failed to list thoughts", {"reason": str(e)}) from e

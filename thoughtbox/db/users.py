"""Credential store operations.

Persistence for registered identities: username, bcrypt password hash and
access token. No business logic lives here; hashing, token generation and
password policy belong to auth.service.

IMPORT CONVENTION:
- Core accesses these through core.users property
- NO direct import needed when using Core API
"""

import sqlite3

from ..auth.schemas import Identity
from ..exceptions import ConflictError, DatabaseError
from ..utils import isodatetime, uid

USERNAME_TAKEN = "username already taken"


def _row_to_identity(row: sqlite3.Row) -> Identity:
    return Identity(
        id=row["id"],
        username=row["username"],
        password_hash=row["password_hash"],
        access_token=row["access_token"],
        created_at=row["created_at"],
    )


class UserOperations:
    """Users table operations.

    Rows are insert-only: there is no update or delete.
    """

    def __init__(self, conn: sqlite3.Connection):
        """Initialize user operations with a database connection.

        Args:
            conn: SQLite connection with row_factory set to sqlite3.Row
        """
        self._conn = conn

    def insert(self, username: str, password_hash: str, access_token: str) -> Identity:
        """Persist a new identity and commit.

        The id and created_at are assigned here. Username uniqueness is
        enforced by the UNIQUE constraint inside the INSERT itself, so two
        racing inserts for one username cannot both commit.

        Args:
            username: Case-sensitive, non-empty username
            password_hash: Bcrypt hash of the password
            access_token: Pre-generated opaque access token

        Returns:
            The stored Identity

        Raises:
            ConflictError: If the username is already taken
            DatabaseError: On any other integrity or SQLite failure
        """
        identity = Identity(
            id=uid.generate_uuid(),
            username=username,
            password_hash=password_hash,
            access_token=access_token,
            created_at=isodatetime.now(),
        )

        try:
            with self._conn:
                self._conn.execute(
                    """INSERT INTO users (id, username, password_hash, access_token, created_at)
                       VALUES (?, ?, ?, ?, ?)""",
                    (
                        identity.id,
                        identity.username,
                        identity.password_hash,
                        identity.access_token,
                        identity.created_at,
                    )
                )
        except sqlite3.IntegrityError as e:
            if "users.username" in str(e):
                raise ConflictError(USERNAME_TAKEN, {"username": username}) from e
            raise DatabaseError("Failed to store user", {"reason": str(e)}) from e
        except sqlite3.Error as e:
            raise DatabaseError("Failed to store user", {"reason": str(e)}) from e

        return identity

    def find_by_username(self, username: str) -> Identity | None:
        """Return the identity with exactly this username, or None."""
        return self._find_one("username", username)

    def find_by_token(self, token: str) -> Identity | None:
        """Return the identity holding this access token, or None."""
        return self._find_one("access_token", token)

    def count(self) -> int:
        """Count registered identities."""
        try:
            row = self._conn.execute("SELECT COUNT(*) FROM users").fetchone()
        except sqlite3.Error as e:
            raise DatabaseError("Failed to count users", {"reason": str(e)}) from e
        return row[0]

    def _find_one(self, column: str, value: str) -> Identity | None:
        # column is one of our own literals, never user input
        try:
            row = self._conn.execute(
                f"SELECT * FROM users WHERE {column} = ?",
                (value,)
            ).fetchone()
        except sqlite3.Error as e:
            raise DatabaseError("Failed to look up user", {"reason": str(e)}) from e

        return _row_to_identity(row) if row else None

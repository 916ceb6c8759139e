"""Database module for Thoughtbox.

Core is the store handle: it owns one SQLite connection and exposes the
operations classes for each table.

    core = get_core()
    identity = core.users.find_by_token(token)
    core.close()

ARCHITECTURE:
- Core owns its connection and is passed explicitly to the services that
  need it (CredentialService, AccessGate)
- In the Flask app, one Core is opened lazily per request by
  get_request_core() and closed in teardown_appcontext
- Each table gets an operations class (UserOperations, ThoughtOperations)
- Operations commit their own writes; uniqueness is enforced by SQLite
  constraints at insert time
"""

import logging
import sqlite3
from pathlib import Path
from typing import TYPE_CHECKING

from flask import g

from ..config import settings
from ..exceptions import DatabaseError

if TYPE_CHECKING:
    from .thoughts import ThoughtOperations
    from .users import UserOperations

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent.parent / "schema" / "schema.sql"


class Core:
    """
    Database Core with table operations.

    Connection Lifecycle:
    - Opened by get_core() (or get_request_core() inside a request)
    - Closed by close(), or on exit when used as a context manager
    """

    def __init__(self, connection: sqlite3.Connection):
        """Initialize Core with a database connection.

        Args:
            connection: SQLite connection with row_factory set to sqlite3.Row
        """
        self._conn = connection
        self._user_ops = None
        self._thought_ops = None
        self._closed = False

    @property
    def users(self) -> "UserOperations":
        """Credential store operations.

        Lazy-loaded to avoid circular import issues.
        """
        if self._user_ops is None:
            from .users import UserOperations
            self._user_ops = UserOperations(self._conn)
        return self._user_ops

    @property
    def thoughts(self) -> "ThoughtOperations":
        """Thought record operations."""
        if self._thought_ops is None:
            from .thoughts import ThoughtOperations
            self._thought_ops = ThoughtOperations(self._conn)
        return self._thought_ops

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Close the underlying connection. Safe to call twice."""
        if not self._closed:
            self._conn.close()
            self._closed = True

    def __enter__(self) -> "Core":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def _create_connection() -> sqlite3.Connection:
    """Create a fresh database connection.

    Returns:
        SQLite connection with row_factory set to sqlite3.Row.
        The connection may be handed between threads by the WSGI server,
        so same-thread checking is disabled; a Core is never shared by
        two requests.

    Raises:
        DatabaseError: If the database file cannot be opened
    """
    db_path = Path(settings.database_path)
    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(
            str(db_path),
            timeout=settings.database_timeout,
            check_same_thread=False,
        )
    except (OSError, sqlite3.Error) as e:
        raise DatabaseError("Failed to open database", {"reason": str(e)}) from e

    conn.row_factory = sqlite3.Row
    return conn


def get_core() -> Core:
    """
    Open a new database Core.

    The caller owns the returned Core and must close it (or use it as a
    context manager):

        >>> with get_core() as core:
        ...     core.users.count()
    """
    return Core(_create_connection())


def get_request_core() -> Core:
    """
    Get the Core for the current request.

    Uses Flask's g object to store one Core per request. It is closed
    automatically by close_request_core() at request end.
    """
    if "core" not in g:
        g.core = get_core()
    return g.core


def close_request_core(e=None):
    """
    Close the request's Core, if one was opened.

    Registered with Flask's teardown_appcontext to run automatically.
    """
    core = g.pop("core", None)
    if core is not None:
        core.close()


# ============================================================================
# DATABASE INITIALIZATION
# ============================================================================

def init_schema(conn: sqlite3.Connection) -> None:
    """Apply schema.sql to an open connection."""
    with open(SCHEMA_PATH, "r") as f:
        schema_sql = f.read()
    conn.executescript(schema_sql)
    conn.commit()


def init_db():
    """Initialize database by running schema.sql if not already initialized."""
    db_path = Path(settings.database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    try:
        # Check if database is already initialized
        cursor = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='_schema_metadata'"
        )
        if cursor.fetchone():
            return

        init_schema(conn)
        logger.info(f"Applied schema to {db_path}")
    finally:
        conn.close()

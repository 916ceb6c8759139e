"""Access gate for protected endpoints.

The gate is a pure read-and-decide step: given the token presented with a
request, it looks the token up in the credential store and returns a
Decision. It never mutates state and holds no locks.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from ..exceptions import (
    DatabaseError,
    StoreLookupError,
    ThoughtboxError,
    UnauthorizedError,
)

if TYPE_CHECKING:
    from ..db.users import UserOperations

logger = logging.getLogger(__name__)

PLEASE_LOG_IN = "please log in"
LOOKUP_FAILED = "could not verify access token"


@dataclass(frozen=True)
class Decision:
    """Outcome of one gate check: allowed, or rejected with an error."""

    allowed: bool
    error: ThoughtboxError | None = None

    @classmethod
    def allow(cls) -> "Decision":
        return cls(allowed=True)

    @classmethod
    def reject(cls, error: ThoughtboxError) -> "Decision":
        return cls(allowed=False, error=error)


class AccessGate:
    """Decides whether a presented access token grants access.

    Pass either an open store or an ``open_store`` callable. The callable is
    only invoked once a token has been presented, and a failure to open the
    store is reported like a failed lookup.

    Args:
        store: Credential store handle (``core.users``), used read-only
        open_store: Zero-argument callable returning the store
    """

    def __init__(
        self,
        store: "UserOperations | None" = None,
        open_store: Callable[[], "UserOperations"] | None = None,
    ):
        if (store is None) == (open_store is None):
            raise TypeError("AccessGate needs exactly one of store or open_store")
        self._store = store
        self._open_store = open_store

    def check(self, token: str | None) -> Decision:
        """Check a token.

        Returns:
            Decision.allow() if the token exactly matches a stored token.
            Decision.reject(UnauthorizedError) if it is missing or unknown.
            Decision.reject(StoreLookupError) if the store could not be read.
        """
        if not token:
            logger.warning("Request to protected endpoint without access token")
            return Decision.reject(UnauthorizedError(PLEASE_LOG_IN))

        try:
            if self._store is None:
                self._store = self._open_store()
            identity = self._store.find_by_token(token)
        except DatabaseError as e:
            logger.error(f"Access token lookup failed: {e.message}")
            return Decision.reject(StoreLookupError(LOOKUP_FAILED))

        if identity is None:
            logger.warning(f"Unknown access token {token[:8]}...")
            return Decision.reject(UnauthorizedError(PLEASE_LOG_IN))

        logger.debug(f"Access granted to {identity.username}")
        return Decision.allow()

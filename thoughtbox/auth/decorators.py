"""Authentication decorators for protected endpoints.

- @auth_required - Requires a valid access token in the Authorization header
- @auth_required_if - Same, enforced only while a condition holds

The whole header value is the token; there is no "Bearer " prefix.
"""

import logging
from functools import wraps

from flask import request

from ..db import get_request_core
from .gate import AccessGate

logger = logging.getLogger(__name__)


def authenticate_request() -> None:
    """
    Run the access gate for the current request.

    Raises:
        UnauthorizedError: If the token is missing or matches no user
        StoreLookupError: If the token could not be checked

    Called by @auth_required and directly by handlers whose protection
    depends on configuration.
    """
    token = request.headers.get("Authorization", "")
    gate = AccessGate(open_store=lambda: get_request_core().users)
    decision = gate.check(token)
    if not decision.allowed:
        raise decision.error


def auth_required(f):
    """
    Decorator to require a valid access token for endpoint access.

    Example:
    ```python
    @thoughts_bp.get("/thoughts")
    @auth_required
    def list_thoughts():
        ...
    ```
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        authenticate_request()
        return f(*args, **kwargs)

    return wrapper


def auth_required_if(condition):
    """
    Like @auth_required, but only enforced while ``condition()`` is true.

    The condition is evaluated per request, so a settings flag can be
    toggled without re-registering routes.

    Example:
    ```python
    @auth_required_if(lambda: settings.protect_thought_writes)
    def create_thought(data):
        ...
    ```
    """
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            if condition():
                authenticate_request()
            return f(*args, **kwargs)

        return wrapper

    return decorator

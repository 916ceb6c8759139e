"""Authentication API endpoints for Thoughtbox.

- POST /signup - Register a user, returning its access token
- POST /signin - Verify credentials, returning the same access token

Both return ``{"response": {userId, username, accessToken}, "success": true}``.
The access token is issued once at signup; signin hands back the stored one.
"""

import logging

from flask import Blueprint, jsonify

from ..api.responses import envelope
from ..api.validation import validate_request
from ..db import get_request_core
from .schemas import UserCreate, UserLogin
from .service import CredentialService

logger = logging.getLogger(__name__)


# Create blueprint
auth_bp = Blueprint("auth", __name__)


def _credential_service() -> CredentialService:
    return CredentialService(get_request_core().users)


@auth_bp.route("/signup", methods=["POST"])
@validate_request
def signup(data: UserCreate):
    """
    Register a new user.

    Example request:
    ```json
    {"username": "alice", "password": "secret1"}
    ```

    Example response (201):
    ```json
    {
        "response": {
            "userId": "550e8400-e29b-41d4-a716-446655440000",
            "username": "alice",
            "accessToken": "9f2c..."
        },
        "success": true
    }
    ```

    Raises:
        ValidationError: Password shorter than the minimum (400)
        ConflictError: Username already taken (400)
    """
    identity = _credential_service().register(data.username, data.password)
    return jsonify(envelope(identity.model_dump(by_alias=True))), 201


@auth_bp.route("/signin", methods=["POST"])
@validate_request
def signin(data: UserLogin):
    """
    Verify a username/password pair.

    Returns the same body shape as /signup with status 200.

    Raises:
        AuthenticationError: Unknown username or wrong password (404)
    """
    identity = _credential_service().verify(data.username, data.password)
    return jsonify(envelope(identity.model_dump(by_alias=True))), 200

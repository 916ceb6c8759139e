"""Credential service: registration and signin.

Passwords are hashed with bcrypt, which embeds a per-hash random salt and
compares in constant time. Access tokens are minted here, before the
identity is stored, and are never regenerated.
"""

import base64
import hashlib
import logging
from typing import TYPE_CHECKING

import bcrypt

from ..config import settings
from ..exceptions import AuthenticationError, ValidationError
from ..utils import secret
from .schemas import IdentityResponse

if TYPE_CHECKING:
    from ..db.users import UserOperations

logger = logging.getLogger(__name__)

CREDENTIALS_MISMATCH = "username or secret does not match"


# ============================================================================
# Password Hashing
# ============================================================================


def _bcrypt_input(password: str) -> bytes:
    """SHA-256 the password and base64 it into 44 bytes.

    bcrypt only accepts 72 bytes of input, so passwords of any length are
    digested first.
    """
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest)


def hash_password(password: str) -> str:
    """Hash a password with a fresh bcrypt salt.

    Returns:
        60-character bcrypt hash string ($2b$...)
    """
    salt = bcrypt.gensalt(rounds=settings.bcrypt_work_factor)
    return bcrypt.hashpw(_bcrypt_input(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a bcrypt hash."""
    candidate = _bcrypt_input(password)
    try:
        return bcrypt.checkpw(candidate, password_hash.encode("utf-8"))
    except ValueError:
        # candidate is always 44 bytes, so only a malformed stored hash lands here
        logger.error("Stored password hash is not a valid bcrypt hash")
        return False


_dummy_hash: str | None = None


def _burn_password_check(password: str) -> None:
    """Run a bcrypt check against a throwaway hash.

    Used when the username is unknown so that signin takes about as long as
    a wrong password.
    """
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = hash_password(secret.generate_access_token(16))
    verify_password(password, _dummy_hash)


# ============================================================================
# Input Policy
# ============================================================================


def check_password_policy(password: str) -> str | None:
    """Return an error message if the password is unacceptable, else None."""
    if len(password) < settings.min_password_length:
        return f"secret must be at least {settings.min_password_length} characters long"
    return None


def check_username(username: str) -> str | None:
    """Return an error message if the username is unacceptable, else None."""
    if not username:
        return "username must not be empty"
    return None


# ============================================================================
# Credential Service
# ============================================================================


class CredentialService:
    """Registration and credential verification over a credential store.

    Args:
        store: Credential store handle (``core.users``)
    """

    def __init__(self, store: "UserOperations"):
        self._store = store

    def register(self, username: str, password: str) -> IdentityResponse:
        """Create a new identity and return its access token.

        Raises:
            ValidationError: Empty username or too-short password
            ConflictError: Username already taken
            DatabaseError: Any other storage failure
        """
        for error in (check_username(username), check_password_policy(password)):
            if error is not None:
                logger.info(f"Registration rejected for {username!r}: {error}")
                raise ValidationError(error, {"username": username})

        password_hash = hash_password(password)
        access_token = secret.generate_access_token()

        # ConflictError from the store propagates unchanged
        identity = self._store.insert(username, password_hash, access_token)

        logger.info(f"Registered user {identity.username} ({identity.id})")
        return IdentityResponse.from_identity(identity)

    def verify(self, username: str, password: str) -> IdentityResponse:
        """Check a username/password pair and return the stored access token.

        Unknown username and wrong password raise the same error.

        Raises:
            AuthenticationError: Credentials do not match
            DatabaseError: Storage failure
        """
        identity = self._store.find_by_username(username)

        if identity is None:
            _burn_password_check(password)
            matched = False
        else:
            matched = verify_password(password, identity.password_hash)

        if not matched:
            logger.warning(f"Failed signin attempt for username: {username!r}")
            raise AuthenticationError(CREDENTIALS_MISMATCH)

        logger.info(f"Successful signin: {identity.username}")
        return IdentityResponse.from_identity(identity)

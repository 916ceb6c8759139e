"""Random secret generation.

This is the only module that draws on ``secrets`` for credentials. Access
tokens are opaque: they carry no structure and are matched verbatim.
"""

import secrets

from ..config import settings


def generate_access_token(nbytes: int | None = None) -> str:
    """Return ``nbytes`` random bytes as a lowercase hex string.

    Defaults to ``settings.access_token_bytes`` (128 bytes, 256 characters).
    """
    if nbytes is None:
        nbytes = settings.access_token_bytes
    return secrets.token_hex(nbytes)

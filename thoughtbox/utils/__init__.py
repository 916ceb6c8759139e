"""Utility functions for Thoughtbox.

Import convention: use module-level imports for clarity.

    from utils import isodatetime, secret, uid
    timestamp = isodatetime.now()
    token = secret.generate_access_token()
    user_id = uid.generate_uuid()
"""

from . import isodatetime, secret, uid

__all__ = ["isodatetime", "secret", "uid"]

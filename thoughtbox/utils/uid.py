"""UUID generation utilities.

Row identifiers for users and thoughts come from here; the store assigns
them at insert time.
"""

from uuid import uuid4


def generate_uuid() -> str:
    """Generate a random UUID v4 as a string."""
    return str(uuid4())

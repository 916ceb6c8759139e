"""Response envelope shared by every JSON endpoint."""


def envelope(response, success: bool = True) -> dict:
    """Wrap a payload or message as ``{"response": ..., "success": ...}``."""
    return {"response": response, "success": success}

"""Authentication Pydantic schemas for API validation."""

from .auth import (
    Identity,
    IdentityResponse,
    UserBase,
    UserCreate,
    UserLogin,
)

__all__ = [
    "Identity",
    "IdentityResponse",
    "UserBase",
    "UserCreate",
    "UserLogin",
]

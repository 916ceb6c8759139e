"""Schemas for signup, signin and stored identities."""

from pydantic import BaseModel, ConfigDict, Field


class UserBase(BaseModel):
    """Fields shared by signup and signin payloads."""

    username: str


class UserCreate(UserBase):
    """POST /signup body.

    Password length is not checked here; CredentialService applies the
    password policy so the client gets its specific message.
    """

    username: str = Field(min_length=1)
    password: str


class UserLogin(UserBase):
    """POST /signin body."""

    password: str


class Identity(BaseModel):
    """A stored user row.

    Immutable once built. ``password_hash`` is hidden from repr() and from
    model_dump() so it cannot leak into logs or responses by accident.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    username: str
    password_hash: str = Field(repr=False, exclude=True)
    access_token: str = Field(repr=False)
    created_at: str


class IdentityResponse(BaseModel):
    """Credential returned by signup and signin.

    Serialized with camelCase keys: ``userId``, ``username``, ``accessToken``.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(serialization_alias="userId")
    username: str
    access_token: str = Field(serialization_alias="accessToken")

    @classmethod
    def from_identity(cls, identity: Identity) -> "IdentityResponse":
        return cls(
            user_id=identity.id,
            username=identity.username,
            access_token=identity.access_token,
        )

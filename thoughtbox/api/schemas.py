"""Pydantic schemas for thought endpoints."""

from pydantic import BaseModel, Field


class ThoughtCreate(BaseModel):
    """POST /thoughts body."""

    message: str = Field(min_length=1, max_length=140)


class ThoughtResponse(BaseModel):
    """A stored thought."""

    id: str
    message: str
    created_at: str

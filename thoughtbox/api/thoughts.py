"""Thought endpoints.

- GET  /thoughts - List recent thoughts (requires access token)
- POST /thoughts - Create a thought (requires access token only when
  settings.protect_thought_writes is enabled)
"""

import logging

from flask import Blueprint, jsonify

from ..auth.decorators import auth_required, auth_required_if
from ..config import settings
from ..db import get_request_core
from .responses import envelope
from .schemas import ThoughtCreate, ThoughtResponse
from .validation import validate_request

logger = logging.getLogger(__name__)

thoughts_bp = Blueprint("thoughts", __name__)


def _row_to_thought_response(row) -> dict:
    return ThoughtResponse(
        id=row["id"],
        message=row["message"],
        created_at=row["created_at"],
    ).model_dump()


@thoughts_bp.get("/thoughts")
@auth_required
def list_thoughts():
    """
    List the most recent thoughts.

    Returns:
        200: {"response": [ThoughtResponse, ...], "success": true}
        401: Missing or unknown access token
    """
    rows = get_request_core().thoughts.list(limit=settings.thoughts_page_size)
    return jsonify(envelope([_row_to_thought_response(row) for row in rows])), 200


@thoughts_bp.post("/thoughts")
@auth_required_if(lambda: settings.protect_thought_writes)
@validate_request
def create_thought(data: ThoughtCreate):
    """
    Create a thought.

    Request Body (ThoughtCreate):
        - message: str (1-140 characters, required)

    Returns:
        201: {"response": ThoughtResponse, "success": true}
        400: Invalid message
        401: Missing or unknown access token (protected writes only)
    """
    row = get_request_core().thoughts.create(data.message)
    logger.info(f"Thought created: {row['id']}")
    return jsonify(envelope(_row_to_thought_response(row))), 201

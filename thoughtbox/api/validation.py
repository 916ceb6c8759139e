"""Request body validation with Pydantic.

@validate_request reads the JSON body, validates it against
the schema named in the view's type annotation and passes the model in as
``data``. Failures become a ValidationError (HTTP 400).
"""

from functools import wraps
from typing import get_type_hints

from flask import request
from pydantic import BaseModel, ValidationError as PydanticValidationError

from ..exceptions import ValidationError


def _format_errors(exc: PydanticValidationError) -> list[dict]:
    # Never echo input values back: they may contain passwords
    return [
        {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
        for err in exc.errors()
    ]


def validate_request(f):
    """Validate the request body against the ``data`` parameter's schema."""
    schema: type[BaseModel] = get_type_hints(f)["data"]

    @wraps(f)
    def wrapper(*args, **kwargs):
        payload = request.get_json(silent=True) if request.is_json else None

        if not isinstance(payload, dict):
            raise ValidationError("request body must be a JSON object")

        try:
            data = schema.model_validate(payload)
        except PydanticValidationError as e:
            errors = _format_errors(e)
            raise ValidationError(
                f"invalid {errors[0]['field']}: {errors[0]['message']}",
                {"errors": errors}
            ) from e

        return f(*args, data=data, **kwargs)

    return wrapper

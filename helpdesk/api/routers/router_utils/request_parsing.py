"""
Request body parsing.

Reads JSON bodies by hand so malformed input yields the portal's
{"error": ...} 400 bodies instead of FastAPI's 422 validation format.

Dependencies: fastapi, pydantic
System role: Request validation for router endpoints
"""

import json
from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from helpdesk.core.exceptions import InvalidInputError

INVALID_BODY = "Invalid request body"

ModelT = TypeVar("ModelT", bound=BaseModel)


async def parse_body(request: Request, schema: type[ModelT]) -> ModelT:
    """
    Parse and validate a JSON request body.

    Args:
        request: Incoming request
        schema: Pydantic model the body must satisfy

    Returns:
        Validated model instance

    Raises:
        InvalidInputError: Body is not JSON, not an object, or fails validation
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise InvalidInputError(INVALID_BODY)

    if not isinstance(payload, dict):
        raise InvalidInputError(INVALID_BODY)

    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise InvalidInputError(INVALID_BODY, details={"errors": e.errors(include_url=False)})

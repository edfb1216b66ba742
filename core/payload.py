# backend/core/payload.py
import json
import logging
from typing import Type, TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.errors import ValidationError

logger = logging.getLogger("core.payload")

FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

ModelType = TypeVar("ModelType", bound=BaseModel)


async def read_body(request: Request) -> dict:
    """Parses a JSON or form-encoded body; an empty body is ``{}``."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        raise ValidationError("Malformed JSON body")
    if not isinstance(data, dict):
        raise ValidationError("Request body must be an object")
    return data


def payload(model: Type[ModelType]):
    """Dependency factory parsing the request body into ``model``."""

    async def dependency(request: Request) -> ModelType:
        data = await read_body(request)
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            logger.warning(f"⚠️ Invalid {model.__name__} payload: {e.error_count()} error(s)")
            raise ValidationError("Invalid request body")

    return dependency

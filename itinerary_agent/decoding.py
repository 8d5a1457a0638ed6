"""Turn raw completion text into validated domain values."""
from __future__ import annotations

import json
import re
from typing import Any, Type, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from itinerary_agent.errors import MalformedResponse

_OPENING_FENCE = re.compile(r"^```[\w+-]*[ \t]*\r?\n?")
_CLOSING_FENCE = re.compile(r"\r?\n?```\s*$")


def strip_fences(text: str) -> str:
    """Remove a surrounding markdown code fence, if there is one."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = _OPENING_FENCE.sub("", cleaned, count=1)
        cleaned = _CLOSING_FENCE.sub("", cleaned, count=1)
    return cleaned


def decode_json(text: str, *, stage: str) -> Any:
    """Parse ``text`` as JSON, tolerating a fenced code block around it."""
    cleaned = strip_fences(text or "")
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise MalformedResponse(stage, f"invalid JSON ({exc.msg} at position {exc.pos})") from exc


def validate_shape(shape: Union[Type[BaseModel], TypeAdapter], data: Any, *, stage: str) -> Any:
    """Validate already-decoded JSON against a model or ``TypeAdapter``."""
    try:
        if isinstance(shape, TypeAdapter):
            return shape.validate_python(data)
        return shape.model_validate(data)
    except ValidationError as exc:
        raise MalformedResponse(stage, f"unexpected shape ({exc.error_count()} validation error(s))") from exc


def decode_as(shape: Union[Type[BaseModel], TypeAdapter], text: str, *, stage: str) -> Any:
    return validate_shape(shape, decode_json(text, stage=stage), stage=stage)

"""Plumbing shared by every stage agent: render, generate, decode."""
from __future__ import annotations

import datetime as dt
import json
import math
from typing import Any, Mapping, Protocol

from pydantic import BaseModel

from itinerary_agent.decoding import decode_json
from itinerary_agent.logging_setup import get_logger
from itinerary_agent.prompts import render_template

logger = get_logger(__name__)

PREFERENCE_AGENT = "Preference Agent"
RESEARCH_AGENT = "Research Agent"
ITINERARY_AGENT = "Itinerary Agent"
REFINE_AGENT = "Refine Agent"
REGENERATE_DAY_AGENT = "Regenerate-Day Agent"


class GenerationClient(Protocol):
    available: bool

    async def complete(self, prompt: str) -> str: ...


def count_trip_days(start: dt.date, end: dt.date) -> int:
    """Whole days between ``start`` and ``end``, never less than one."""
    seconds = (end - start).total_seconds()
    return max(1, math.ceil(seconds / 86400))


def to_prompt_json(value: Any) -> str:
    """Serialise models (or lists of them) in the camelCase wire format."""
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", by_alias=True)
    elif isinstance(value, list):
        value = [
            item.model_dump(mode="json", by_alias=True) if isinstance(item, BaseModel) else item
            for item in value
        ]
    return json.dumps(value, indent=2, ensure_ascii=False)


def format_amount(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


async def run_stage(
    client: GenerationClient,
    stage: str,
    template: str,
    values: Mapping[str, str],
) -> Any:
    """Render ``template``, call the backend once and return the decoded JSON."""
    prompt = render_template(template, values)
    logger.info("%s: sending prompt (%d chars)", stage, len(prompt))
    raw = await client.complete(prompt)
    data = decode_json(raw, stage=stage)
    logger.info("%s: decoded %s payload", stage, type(data).__name__)
    return data

"""Regenerate a single day of an existing itinerary."""
from __future__ import annotations

from itinerary_agent.agents.base import REGENERATE_DAY_AGENT, GenerationClient, run_stage, to_prompt_json
from itinerary_agent.decoding import validate_shape
from itinerary_agent.errors import BackendUnavailable
from itinerary_agent.logging_setup import get_logger
from itinerary_agent.prompts import REGENERATE_DAY_TEMPLATE
from itinerary_agent.schemas import DayPlan, Itinerary

logger = get_logger(__name__)


def _unchanged(day: DayPlan) -> DayPlan:
    logger.info("Day regeneration requested without a generation backend; keeping day %d", day.day_index)
    return day.model_copy(deep=True)


async def regenerate_day(
    itinerary: Itinerary,
    day_index: int,
    constraints: str,
    client: GenerationClient,
) -> DayPlan:
    """Return a replacement for ``itinerary.days[day_index]``.

    Callers validate ``day_index``. The returned day always keeps the
    original ``day_index`` and ``date``, whatever the backend sends back.
    """
    current_day = itinerary.days[day_index]
    if not client.available:
        return _unchanged(current_day)

    other_days = [day for i, day in enumerate(itinerary.days) if i != day_index]
    values = {
        "trip_profile": to_prompt_json(itinerary.trip_profile),
        "day_index": str(day_index),
        "current_day": to_prompt_json(current_day),
        "other_days": to_prompt_json(other_days),
        "constraints": constraints.strip() or "No additional constraints",
        "date": current_day.date.isoformat(),
    }
    try:
        data = await run_stage(client, REGENERATE_DAY_AGENT, REGENERATE_DAY_TEMPLATE, values)
    except BackendUnavailable:
        return _unchanged(current_day)
    if isinstance(data, dict):
        data = {**data, "dayIndex": day_index, "date": current_day.date.isoformat()}
        data.pop("day_index", None)
    return validate_shape(DayPlan, data, stage=REGENERATE_DAY_AGENT)

"""Whole-trip refinement from free-text feedback."""
from __future__ import annotations

from itinerary_agent.agents.base import REFINE_AGENT, GenerationClient, run_stage, to_prompt_json, utc_now
from itinerary_agent.decoding import validate_shape
from itinerary_agent.errors import BackendUnavailable
from itinerary_agent.logging_setup import get_logger
from itinerary_agent.prompts import REFINE_TEMPLATE
from itinerary_agent.schemas import Itinerary, ItineraryDraft

logger = get_logger(__name__)


def _unchanged(itinerary: Itinerary) -> Itinerary:
    logger.info("Refine requested without a generation backend; returning itinerary %s as is", itinerary.id)
    return itinerary.model_copy(deep=True, update={"generated_at": utc_now()})


async def refine_itinerary(itinerary: Itinerary, feedback: str, client: GenerationClient) -> Itinerary:
    """Return a revised copy of ``itinerary``; the input is never modified.

    Without a configured backend the copy only gets a fresh ``generated_at``.
    The id and trip profile are always carried over from the input.
    """
    if not client.available:
        return _unchanged(itinerary)

    values = {
        "itinerary": to_prompt_json(itinerary),
        "feedback": feedback,
    }
    try:
        data = await run_stage(client, REFINE_AGENT, REFINE_TEMPLATE, values)
    except BackendUnavailable:
        return _unchanged(itinerary)
    draft = validate_shape(ItineraryDraft, data, stage=REFINE_AGENT)
    return itinerary.model_copy(
        deep=True,
        update={
            "days": draft.days,
            "total_estimated_cost": draft.total_estimated_cost,
            "summary": draft.summary,
            "generated_at": utc_now(),
        },
    )

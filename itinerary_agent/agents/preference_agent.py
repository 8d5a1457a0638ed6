"""Normalise raw form input into a TripProfile."""
from __future__ import annotations

import json

from itinerary_agent.agents.base import PREFERENCE_AGENT, GenerationClient, run_stage
from itinerary_agent.decoding import validate_shape
from itinerary_agent.prompts import PREFERENCE_TEMPLATE
from itinerary_agent.schemas import TripFormData, TripProfile

_NO_FREEFORM = "No additional free-form input provided."


async def run_preference_agent(form_data: TripFormData, client: GenerationClient) -> TripProfile:
    structured = form_data.model_dump(mode="json", by_alias=True, exclude={"freeform_prompt"})
    values = {
        "user_input": form_data.freeform_prompt.strip() or _NO_FREEFORM,
        "structured_fields": json.dumps(structured, indent=2, ensure_ascii=False),
    }
    data = await run_stage(client, PREFERENCE_AGENT, PREFERENCE_TEMPLATE, values)
    return validate_shape(TripProfile, data, stage=PREFERENCE_AGENT)

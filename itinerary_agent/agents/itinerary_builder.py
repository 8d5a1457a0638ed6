"""Arrange researched activities into a day-by-day Itinerary."""
from __future__ import annotations

import uuid
from typing import List

from itinerary_agent.agents.base import (
    ITINERARY_AGENT,
    GenerationClient,
    count_trip_days,
    format_amount,
    run_stage,
    to_prompt_json,
    utc_now,
)
from itinerary_agent.decoding import validate_shape
from itinerary_agent.prompts import ITINERARY_TEMPLATE
from itinerary_agent.schemas import Activity, Itinerary, ItineraryDraft, TripProfile


async def run_itinerary_agent(
    profile: TripProfile,
    activities: List[Activity],
    client: GenerationClient,
) -> Itinerary:
    values = {
        "trip_profile": to_prompt_json(profile),
        "activities": to_prompt_json(activities),
        "pace": profile.pace,
        "budget_min": format_amount(profile.budget_min),
        "budget_max": format_amount(profile.budget_max),
        "currency": profile.currency,
        "num_days": str(count_trip_days(profile.start_date, profile.end_date)),
    }
    data = await run_stage(client, ITINERARY_AGENT, ITINERARY_TEMPLATE, values)
    draft = validate_shape(ItineraryDraft, data, stage=ITINERARY_AGENT)
    return Itinerary(
        id=str(uuid.uuid4()),
        trip_profile=profile,
        days=draft.days,
        total_estimated_cost=draft.total_estimated_cost,
        summary=draft.summary,
        generated_at=utc_now(),
    )

"""Collect candidate activities for a trip profile."""
from __future__ import annotations

from typing import List

from pydantic import TypeAdapter

from itinerary_agent.agents.base import (
    RESEARCH_AGENT,
    GenerationClient,
    count_trip_days,
    format_amount,
    run_stage,
    to_prompt_json,
)
from itinerary_agent.decoding import validate_shape
from itinerary_agent.prompts import RESEARCH_TEMPLATE
from itinerary_agent.schemas import Activity, TripProfile

_ACTIVITY_LIST = TypeAdapter(List[Activity])


async def run_research_agent(profile: TripProfile, client: GenerationClient) -> List[Activity]:
    constraints = profile.constraints
    values = {
        "trip_profile": to_prompt_json(profile),
        "num_days": str(count_trip_days(profile.start_date, profile.end_date)),
        "interests": ", ".join(profile.interests),
        "budget_min": format_amount(profile.budget_min),
        "budget_max": format_amount(profile.budget_max),
        "currency": profile.currency,
        "pace": profile.pace,
        "dietary": ", ".join(constraints.dietary) or "none",
        "must_see_items": ", ".join(constraints.must_see_items) or "none specified",
    }
    data = await run_stage(client, RESEARCH_AGENT, RESEARCH_TEMPLATE, values)
    return validate_shape(_ACTIVITY_LIST, data, stage=RESEARCH_AGENT)

# itinerary_agent/orchestrator.py
from __future__ import annotations

from typing import Callable, List, Tuple

from itinerary_agent.agents.base import (
    ITINERARY_AGENT,
    PREFERENCE_AGENT,
    RESEARCH_AGENT,
    GenerationClient,
    utc_now,
)
from itinerary_agent.agents.itinerary_builder import run_itinerary_agent
from itinerary_agent.agents.preference_agent import run_preference_agent
from itinerary_agent.agents.research_agent import run_research_agent
from itinerary_agent.errors import BackendUnavailable
from itinerary_agent.logging_setup import get_logger
from itinerary_agent.sample_data import sample_itinerary
from itinerary_agent.schemas import AgentStep, Itinerary, TripFormData

logger = get_logger(__name__)

StepSink = Callable[[AgentStep], None]

DEMO_MODE_MESSAGE = "Using demo mode (no generation backend configured)"


def _emit(on_step: StepSink, agent: str, status: str, message: str) -> None:
    on_step(AgentStep(agent_name=agent, status=status, message=message, timestamp=utc_now()))


def _demo_mode(on_step: StepSink) -> Itinerary:
    logger.warning("Generation backend not configured; returning the sample itinerary")
    _emit(on_step, PREFERENCE_AGENT, "completed", DEMO_MODE_MESSAGE)
    return sample_itinerary()


async def run_full_pipeline(
    form_data: TripFormData,
    on_step: StepSink,
    client: GenerationClient,
) -> Itinerary:
    """Run Preference -> Research -> Itinerary, reporting each transition.

    ``on_step`` is called synchronously, in order, and must not block. When
    the backend is not configured the sample itinerary is returned straight
    after the Preference step. Any other failure is reported as an ``error``
    step for the stage that was running and then re-raised.
    """
    stage = PREFERENCE_AGENT
    try:
        _emit(on_step, PREFERENCE_AGENT, "running", "Analyzing your travel preferences...")
        if not client.available:
            return _demo_mode(on_step)
        try:
            profile = await run_preference_agent(form_data, client)
        except BackendUnavailable:
            return _demo_mode(on_step)
        destinations = ", ".join(profile.destinations)
        logger.info(
            "Trip profile: origin=%s, destinations=%s, dates=%s-%s, budget=%s-%s %s",
            profile.origin,
            destinations,
            profile.start_date,
            profile.end_date,
            profile.budget_min,
            profile.budget_max,
            profile.currency,
        )
        _emit(on_step, PREFERENCE_AGENT, "completed", f"Trip profile created for {destinations}")

        stage = RESEARCH_AGENT
        _emit(on_step, RESEARCH_AGENT, "running", f"Researching activities in {destinations}...")
        activities = await run_research_agent(profile, client)
        logger.info("Research produced %d candidate activities", len(activities))
        _emit(on_step, RESEARCH_AGENT, "completed", f"Found {len(activities)} activities across categories")

        stage = ITINERARY_AGENT
        _emit(on_step, ITINERARY_AGENT, "running", "Building your day-by-day itinerary...")
        itinerary = await run_itinerary_agent(profile, activities, client)
        logger.info(
            "Itinerary %s assembled: %d day(s), total %.2f %s",
            itinerary.id,
            len(itinerary.days),
            itinerary.total_estimated_cost,
            profile.currency,
        )
        _emit(on_step, ITINERARY_AGENT, "completed", f"Created {len(itinerary.days)}-day itinerary")
        return itinerary
    except Exception as exc:
        logger.exception("%s failed: %s", stage, exc)
        _emit(on_step, stage, "error", f"Error: {exc}")
        raise


async def plan(form_data: TripFormData, client: GenerationClient) -> Tuple[Itinerary, List[AgentStep]]:
    """Run the full pipeline and return the itinerary with its progress steps."""
    steps: List[AgentStep] = []
    itinerary = await run_full_pipeline(form_data, steps.append, client)
    return itinerary, steps

from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from itinerary_agent.agents.base import utc_now
from itinerary_agent.agents.day_agent import regenerate_day
from itinerary_agent.agents.refine_agent import refine_itinerary
from itinerary_agent.config import get_settings
from itinerary_agent.llm import OpenAIGenerationClient, build_generation_client
from itinerary_agent.logging_setup import get_logger
from itinerary_agent.orchestrator import plan
from itinerary_agent.schemas import DayPlan, Itinerary, RefineRequest, RegenerateDayRequest, TripFormData

logger = get_logger(__name__)

app = FastAPI(title="Itinerary Agent API")

# Local frontends (Next.js dev server, static builds) call the API directly.
# ITINERARY_AGENT_ALLOWED_ORIGINS narrows this for deployed environments.
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_generation_client() -> OpenAIGenerationClient:
    return build_generation_client(get_settings())


def _failure(status_code: int, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message, **extra})


def _splice_day(itinerary: Itinerary, day_index: int, new_day: DayPlan) -> Itinerary:
    """Copy ``itinerary`` with one day replaced and the trip total recomputed."""
    days = list(itinerary.days)
    days[day_index] = new_day
    return itinerary.model_copy(
        update={
            "days": days,
            "total_estimated_cost": sum(day.daily_budget for day in days),
            "generated_at": utc_now(),
        }
    )


@app.get("/api/health")
async def api_health(client: OpenAIGenerationClient = Depends(get_generation_client)) -> Dict[str, Any]:
    return {"status": "ok", "backend": "openai" if client.available else "demo"}


@app.post("/api/plan-trip")
async def api_plan_trip(
    form_data: TripFormData,
    client: OpenAIGenerationClient = Depends(get_generation_client),
) -> Any:
    """Full Preference -> Research -> Itinerary pipeline."""
    try:
        itinerary, steps = await plan(form_data, client)
    except Exception as exc:
        logger.error("Trip planning failed: %s", exc)
        return _failure(500, "Failed to generate itinerary. Please try again.", agentSteps=[])
    return {
        "success": True,
        "itinerary": itinerary.to_wire(),
        "agentSteps": [step.to_wire() for step in steps],
    }


@app.post("/api/refine-trip")
async def api_refine_trip(
    body: RefineRequest,
    client: OpenAIGenerationClient = Depends(get_generation_client),
) -> Any:
    if body.itinerary is None or not body.feedback.strip():
        return _failure(400, "Missing itinerary or feedback")
    try:
        refined = await refine_itinerary(body.itinerary, body.feedback, client)
    except Exception:
        logger.exception("Refining itinerary %s failed", body.itinerary.id)
        return _failure(500, "Failed to refine itinerary. Please try again.")
    return {"success": True, "itinerary": refined.to_wire()}


@app.post("/api/regenerate-day")
async def api_regenerate_day(
    body: RegenerateDayRequest,
    client: OpenAIGenerationClient = Depends(get_generation_client),
) -> Any:
    itinerary = body.itinerary
    if itinerary is None or body.day_index is None:
        return _failure(400, "Missing itinerary or dayIndex")
    if not 0 <= body.day_index < len(itinerary.days):
        return _failure(400, "Invalid dayIndex")
    try:
        new_day = await regenerate_day(itinerary, body.day_index, body.constraints, client)
    except Exception:
        logger.exception("Regenerating day %d of itinerary %s failed", body.day_index, itinerary.id)
        return _failure(500, "Failed to regenerate day. Please try again.")
    return {"success": True, "itinerary": _splice_day(itinerary, body.day_index, new_day).to_wire()}

from __future__ import annotations

import json
from typing import Any, Dict, List

import pytest

from itinerary_agent.errors import BackendUnavailable
from itinerary_agent.schemas import Itinerary


class FakeGenerationClient:
    """Replays queued completions (or raises queued exceptions) in order."""

    def __init__(self, responses: List[Any] | None = None, *, available: bool = True) -> None:
        self.available = available
        self.responses = list(responses or [])
        self.prompts: List[str] = []

    async def complete(self, prompt: str) -> str:
        if not self.available:
            raise BackendUnavailable("not configured")
        self.prompts.append(prompt)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, str):
            return response
        return json.dumps(response)


def make_activity(activity_id: str, time_of_day: str = "morning", cost: float = 10, **overrides: Any) -> Dict[str, Any]:
    activity = {
        "id": activity_id,
        "name": f"Activity {activity_id}",
        "description": "Something to do.",
        "category": "sight",
        "neighborhood": "Centre",
        "duration": 60,
        "costEstimate": cost,
        "tags": ["test"],
        "timeOfDay": time_of_day,
    }
    activity.update(overrides)
    return activity


def make_day(day_index: int, date: str, prefix: str = "a") -> Dict[str, Any]:
    return {
        "dayIndex": day_index,
        "date": date,
        "morningActivities": [make_activity(f"{prefix}{day_index}-m", "morning", 10)],
        "afternoonActivities": [make_activity(f"{prefix}{day_index}-a", "afternoon", 20)],
        "eveningActivities": [make_activity(f"{prefix}{day_index}-e", "evening", 30)],
        "dailyBudget": 60,
    }


PROFILE_PAYLOAD: Dict[str, Any] = {
    "origin": "Berlin",
    "destinations": ["Rome", "Florence"],
    "startDate": "2024-01-01",
    "endDate": "2024-01-04",
    "budgetMin": 500,
    "budgetMax": 1200,
    "currency": "EUR",
    "pace": "packed",
    "interests": ["art", "food"],
    "constraints": {
        "dietary": [],
        "walkingTolerance": "high",
        "mustSeeItems": ["Colosseum"],
        "additionalNotes": "",
    },
}

FORM_PAYLOAD: Dict[str, Any] = {
    "origin": "Berlin",
    "destinations": "Rome, Florence",
    "startDate": "2024-01-01",
    "endDate": "2024-01-04",
    "budgetMin": 500,
    "budgetMax": 1200,
    "pace": "packed",
    "interests": ["art", "food"],
    "dietary": [],
    "walkingTolerance": "high",
    "mustSeeItems": "Colosseum",
    "additionalNotes": "",
    "freeformPrompt": "Renaissance art and long lunches.",
}


def draft_payload(summary: str = "Art-heavy week in Italy.") -> Dict[str, Any]:
    days = [make_day(i, f"2024-01-0{i + 1}") for i in range(3)]
    return {"days": days, "totalEstimatedCost": 180, "summary": summary}


@pytest.fixture
def itinerary() -> Itinerary:
    return Itinerary.model_validate(
        {
            "id": "trip-1",
            "tripProfile": PROFILE_PAYLOAD,
            "days": [make_day(i, f"2024-01-0{i + 1}") for i in range(3)],
            "totalEstimatedCost": 180,
            "summary": "Three days in Rome and Florence.",
            "generatedAt": "2024-01-01T00:00:00Z",
        }
    )

from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

Pace = Literal["chill", "balanced", "packed"]
WalkingTolerance = Literal["low", "medium", "high"]
Category = Literal["sight", "food", "activity", "nightlife", "nature", "culture", "shopping", "rest"]
TimeOfDay = Literal["morning", "afternoon", "evening"]
AgentName = Literal["Preference Agent", "Research Agent", "Itinerary Agent", "Refine Agent"]
StepStatus = Literal["pending", "running", "completed", "error"]


class CamelModel(BaseModel):
    """Base model speaking the camelCase wire format used by the frontend."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# ------- Request models -------
class TripFormData(CamelModel):
    origin: str = ""
    destinations: str = ""
    start_date: str = ""
    end_date: str = ""
    budget_min: float = Field(0, ge=0)
    budget_max: float = Field(0, ge=0)
    pace: Pace = "balanced"
    interests: List[str] = Field(default_factory=list)
    dietary: List[str] = Field(default_factory=list)
    walking_tolerance: WalkingTolerance = "medium"
    must_see_items: str = ""
    additional_notes: str = ""
    freeform_prompt: str = ""

    @field_validator("destinations", "must_see_items", mode="before")
    @classmethod
    def _join_lists(cls, value: Any) -> Any:
        # Older clients send these as arrays rather than comma-separated text.
        if isinstance(value, (list, tuple)):
            return ", ".join(str(item) for item in value if item is not None)
        return value


# ------- Domain models -------
class TripConstraints(CamelModel):
    dietary: List[str] = Field(default_factory=list)
    walking_tolerance: WalkingTolerance = "medium"
    must_see_items: List[str] = Field(default_factory=list)
    additional_notes: str = ""


class TripProfile(CamelModel):
    origin: str = ""
    destinations: List[str] = Field(..., min_length=1)
    start_date: dt.date
    end_date: dt.date
    budget_min: float = Field(0, ge=0)
    budget_max: float = Field(0, ge=0)
    currency: str = "USD"
    pace: Pace = "balanced"
    interests: List[str] = Field(default_factory=list)
    constraints: TripConstraints = Field(default_factory=TripConstraints)

    @model_validator(mode="after")
    def _check_budget_range(self) -> "TripProfile":
        if self.budget_min > self.budget_max:
            raise ValueError("budgetMin must not exceed budgetMax")
        return self


class Activity(CamelModel):
    id: str
    name: str
    description: str = ""
    category: Category
    neighborhood: str = ""
    duration: int = Field(..., gt=0)  # minutes
    cost_estimate: float = Field(0, ge=0)
    tags: List[str] = Field(default_factory=list)
    time_of_day: TimeOfDay


class DayPlan(CamelModel):
    day_index: int = Field(..., ge=0)
    date: dt.date
    morning_activities: List[Activity] = Field(default_factory=list)
    afternoon_activities: List[Activity] = Field(default_factory=list)
    evening_activities: List[Activity] = Field(default_factory=list)
    daily_budget: float = Field(0, ge=0)

    def activities(self) -> List[Activity]:
        return [*self.morning_activities, *self.afternoon_activities, *self.evening_activities]


class ItineraryDraft(CamelModel):
    """Decoded body of the itinerary and refine stages; extra keys are dropped."""

    days: List[DayPlan]
    total_estimated_cost: float = Field(..., ge=0)
    summary: str = ""


class Itinerary(CamelModel):
    id: str
    trip_profile: TripProfile
    days: List[DayPlan]
    total_estimated_cost: float = Field(..., ge=0)
    summary: str = ""
    generated_at: dt.datetime


class AgentStep(CamelModel):
    agent_name: AgentName
    status: StepStatus
    message: str
    timestamp: dt.datetime


# ------- API bodies -------
class RefineRequest(CamelModel):
    itinerary: Optional[Itinerary] = None
    feedback: str = ""


class RegenerateDayRequest(CamelModel):
    itinerary: Optional[Itinerary] = None
    day_index: Optional[int] = None
    constraints: str = ""

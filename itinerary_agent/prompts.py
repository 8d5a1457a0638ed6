"""Prompt templates for each stage of the itinerary pipeline.

Templates use ``{name}`` placeholders that :func:`render_template` fills by
literal substitution. The JSON examples inside the templates contain braces
too, so ``str.format`` cannot be used here.
"""
from __future__ import annotations

import re
from typing import Mapping

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


def render_template(template: str, values: Mapping[str, str]) -> str:
    """Substitute every ``{name}`` present in ``values``; leave the rest untouched."""

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in values:
            return values[name]
        return match.group(0)

    return _PLACEHOLDER.sub(_replace, template)


SYSTEM_PROMPT = """You are one stage of a multi-agent travel planner.
Follow the instructions of the user message exactly.
Return ONLY valid JSON, without commentary or markdown fences.
"""

PREFERENCE_TEMPLATE = """You analyse travel requests and turn them into a normalised trip profile.

Free-form request:
{user_input}

Structured form fields (may be partially empty):
{structured_fields}

Respond with a single JSON object shaped like:
{
  "origin": "departure city or empty string",
  "destinations": ["city"],
  "startDate": "YYYY-MM-DD",
  "endDate": "YYYY-MM-DD",
  "budgetMin": 0,
  "budgetMax": 0,
  "currency": "USD",
  "pace": "chill | balanced | packed",
  "interests": ["interest"],
  "constraints": {
    "dietary": ["restriction"],
    "walkingTolerance": "low | medium | high",
    "mustSeeItems": ["place"],
    "additionalNotes": "free text"
  }
}

Fill gaps with sensible defaults. Without explicit dates, plan a 5 day trip starting two weeks from today.
"""

RESEARCH_TEMPLATE = """You research candidate activities for a trip.

Trip profile:
{trip_profile}

Trip length: {num_days} day(s)

Suggest 5-7 activities per day that:
- match the interests: {interests}
- stay within the budget of {budget_min}-{budget_max} {currency}
- suit a {pace} pace
- respect dietary needs: {dietary}
- cover the must-see items: {must_see_items}

Respond with a JSON array of activities:
[
  {
    "id": "unique-id",
    "name": "Activity name",
    "description": "One or two sentences",
    "category": "sight | food | activity | nightlife | nature | culture | shopping | rest",
    "neighborhood": "District",
    "duration": 90,
    "costEstimate": 0,
    "tags": ["tag"],
    "timeOfDay": "morning | afternoon | evening"
  }
]

Durations are minutes and costs are in {currency}. Mix categories, neighbourhoods and price levels, and include lesser-known local spots.
"""

ITINERARY_TEMPLATE = """You arrange researched activities into a day-by-day itinerary.

Trip profile:
{trip_profile}

Candidate activities:
{activities}

Guidelines:
1. Give each day 2-3 morning, 2-3 afternoon and 1-2 evening activities.
2. Honour the "{pace}" pace: chill leaves room to rest, packed fits in as much as possible.
3. Keep the whole trip within {budget_min}-{budget_max} {currency} across {num_days} day(s).
4. Avoid three activities of the same category in a row.
5. Cluster activities by neighbourhood to limit transit.
6. Leave breaks between activities and schedule food at meal times.

Respond with a JSON object:
{
  "days": [
    {
      "dayIndex": 0,
      "date": "YYYY-MM-DD",
      "morningActivities": [],
      "afternoonActivities": [],
      "eveningActivities": [],
      "dailyBudget": 0
    }
  ],
  "totalEstimatedCost": 0,
  "summary": "Two or three sentences on the themes and highlights of the trip"
}

Activities inside the day lists use the same object shape as the candidates.
"""

REFINE_TEMPLATE = """You revise an existing itinerary according to traveller feedback.

Current itinerary:
{itinerary}

Feedback:
{feedback}

Guidelines:
1. Make targeted edits instead of starting over.
2. Keep activities the feedback does not mention.
3. Add or remove activities when the feedback asks for a different intensity.
4. Swap in cheaper or premium alternatives when the feedback is about budget.
5. Swap activities by theme for requests such as "more food" or "fewer museums".
6. Keep the same dates and day structure.

Respond with the complete revised itinerary as a JSON object with the same structure as the input, including every day, changed or not.
"""

REGENERATE_DAY_TEMPLATE = """You replan a single day of an itinerary.

Trip profile:
{trip_profile}

Day to replace (dayIndex {day_index}):
{current_day}

Remaining days of the trip (do not repeat their activities):
{other_days}

Extra constraints:
{constraints}

Produce a fresh plan for this day that fits the traveller's interests and budget, uses 2-3 morning, 2-3 afternoon and 1-2 evening activities, and addresses the extra constraints.

Respond with a JSON object:
{
  "dayIndex": {day_index},
  "date": "{date}",
  "morningActivities": [],
  "afternoonActivities": [],
  "eveningActivities": [],
  "dailyBudget": 0
}
"""

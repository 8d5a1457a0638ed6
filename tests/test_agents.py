import asyncio
import datetime as dt
import json

import pytest

from itinerary_agent.agents.base import count_trip_days
from itinerary_agent.agents.day_agent import regenerate_day
from itinerary_agent.agents.itinerary_builder import run_itinerary_agent
from itinerary_agent.agents.preference_agent import run_preference_agent
from itinerary_agent.agents.refine_agent import refine_itinerary
from itinerary_agent.agents.research_agent import run_research_agent
from itinerary_agent.errors import BackendUnavailable, GenerationFailed, MalformedResponse
from itinerary_agent.schemas import Activity, TripFormData, TripProfile

from conftest import FORM_PAYLOAD, PROFILE_PAYLOAD, FakeGenerationClient, draft_payload, make_activity, make_day


@pytest.mark.parametrize(
    "start, end, expected",
    [
        ("2024-01-01", "2024-01-01", 1),
        ("2024-01-01", "2024-01-06", 5),
        ("2024-01-06", "2024-01-01", 1),
        ("2024-02-27", "2024-03-02", 4),
    ],
)
def test_count_trip_days(start, end, expected):
    assert count_trip_days(dt.date.fromisoformat(start), dt.date.fromisoformat(end)) == expected


def test_preference_agent_decodes_profile_and_serialises_form():
    client = FakeGenerationClient(["```json\n" + json.dumps(PROFILE_PAYLOAD) + "\n```"])
    form = TripFormData.model_validate(FORM_PAYLOAD)

    profile = asyncio.run(run_preference_agent(form, client))

    assert profile.destinations == ["Rome", "Florence"]
    assert profile.start_date == dt.date(2024, 1, 1)
    prompt = client.prompts[0]
    assert "Renaissance art and long lunches." in prompt
    assert '"mustSeeItems": "Colosseum"' in prompt
    assert "freeformPrompt" not in prompt


def test_preference_agent_defaults_blank_freeform_text():
    client = FakeGenerationClient([PROFILE_PAYLOAD])
    form = TripFormData.model_validate({**FORM_PAYLOAD, "freeformPrompt": "  "})

    asyncio.run(run_preference_agent(form, client))

    assert "No additional free-form input provided." in client.prompts[0]


def test_preference_agent_rejects_incomplete_profile():
    client = FakeGenerationClient([{"origin": "Berlin"}])
    with pytest.raises(MalformedResponse) as excinfo:
        asyncio.run(run_preference_agent(TripFormData(), client))
    assert excinfo.value.stage == "Preference Agent"


def test_research_agent_fills_template_and_returns_activities():
    client = FakeGenerationClient([[make_activity("r1"), make_activity("r2", "evening", category="food")]])
    profile = TripProfile.model_validate(PROFILE_PAYLOAD)

    activities = asyncio.run(run_research_agent(profile, client))

    assert [a.id for a in activities] == ["r1", "r2"]
    assert activities[1].category == "food"
    prompt = client.prompts[0]
    assert "Trip length: 3 day(s)" in prompt
    assert "500-1200 EUR" in prompt
    assert "respect dietary needs: none" in prompt
    assert "cover the must-see items: Colosseum" in prompt


def test_research_agent_propagates_truncated_json():
    client = FakeGenerationClient(['[{"id": "r1", "name": '])
    with pytest.raises(MalformedResponse):
        asyncio.run(run_research_agent(TripProfile.model_validate(PROFILE_PAYLOAD), client))


def test_itinerary_agent_assembles_fresh_itinerary():
    client = FakeGenerationClient([draft_payload()])
    profile = TripProfile.model_validate(PROFILE_PAYLOAD)
    activities = [Activity.model_validate(make_activity("r1"))]

    first = asyncio.run(run_itinerary_agent(profile, activities, client))
    client.responses.append(draft_payload())
    second = asyncio.run(run_itinerary_agent(profile, activities, client))

    assert first.trip_profile == profile
    assert len(first.days) == 3
    assert first.total_estimated_cost == 180
    assert first.summary == "Art-heavy week in Italy."
    assert first.generated_at.tzinfo is not None
    assert first.id != second.id
    assert '"id": "r1"' in client.prompts[0]


def test_refine_merges_draft_and_keeps_identity(itinerary):
    client = FakeGenerationClient([{**draft_payload("More food."), "id": "other", "tripProfile": {"bogus": 1}}])

    refined = asyncio.run(refine_itinerary(itinerary, "more food", client))

    assert refined.id == itinerary.id
    assert refined.trip_profile == itinerary.trip_profile
    assert refined.summary == "More food."
    assert refined.generated_at > itinerary.generated_at
    assert itinerary.summary == "Three days in Rome and Florence."
    assert "more food" in client.prompts[0]


def test_refine_without_backend_only_refreshes_timestamp(itinerary):
    client = FakeGenerationClient(available=False)

    refined = asyncio.run(refine_itinerary(itinerary, "more food", client))

    assert refined.generated_at != itinerary.generated_at
    assert refined.model_dump(exclude={"generated_at"}) == itinerary.model_dump(exclude={"generated_at"})
    assert client.prompts == []


def test_refine_propagates_backend_failure(itinerary):
    client = FakeGenerationClient([GenerationFailed("quota exceeded")])
    with pytest.raises(GenerationFailed):
        asyncio.run(refine_itinerary(itinerary, "more food", client))


def test_regenerate_day_pins_index_and_date(itinerary):
    replacement = make_day(7, "2030-12-31", prefix="new")
    client = FakeGenerationClient([replacement])

    day = asyncio.run(regenerate_day(itinerary, 2, "cheaper options", client))

    assert day.day_index == 2
    assert day.date == dt.date(2024, 1, 3)
    assert day.morning_activities[0].id == "new7-m"
    prompt = client.prompts[0]
    assert "cheaper options" in prompt
    assert '"id": "a0-m"' in prompt
    assert '"id": "a1-m"' in prompt
    assert "dayIndex 2" in prompt


def test_regenerate_day_defaults_blank_constraints(itinerary):
    client = FakeGenerationClient([make_day(0, "2024-01-01", prefix="new")])
    asyncio.run(regenerate_day(itinerary, 0, "", client))
    assert "No additional constraints" in client.prompts[0]


def test_regenerate_day_without_backend_returns_day_unchanged(itinerary):
    client = FakeGenerationClient(available=False)
    day = asyncio.run(regenerate_day(itinerary, 2, "cheaper options", client))
    assert day == itinerary.days[2]


def test_regenerate_day_rejects_non_object_payload(itinerary):
    client = FakeGenerationClient([[make_day(0, "2024-01-01")]])
    with pytest.raises(MalformedResponse):
        asyncio.run(regenerate_day(itinerary, 0, "", client))


def test_refine_passes_through_when_backend_reports_unavailable(itinerary):
    client = FakeGenerationClient([BackendUnavailable("credential missing")])

    refined = asyncio.run(refine_itinerary(itinerary, "more food", client))

    assert refined.generated_at != itinerary.generated_at
    assert refined.model_dump(exclude={"generated_at"}) == itinerary.model_dump(exclude={"generated_at"})


def test_regenerate_day_passes_through_when_backend_reports_unavailable(itinerary):
    client = FakeGenerationClient([BackendUnavailable("credential missing")])
    day = asyncio.run(regenerate_day(itinerary, 2, "cheaper options", client))
    assert day == itinerary.days[2]

# debug_pipeline.py
import asyncio
import json

from itinerary_agent.llm import build_generation_client
from itinerary_agent.orchestrator import run_full_pipeline
from itinerary_agent.schemas import TripFormData


async def main():
    form_data = TripFormData.model_validate(
        {
            "origin": "San Francisco",
            "destinations": "Kyoto, Osaka",
            "startDate": "2025-10-10",
            "endDate": "2025-10-15",
            "budgetMin": 1500,
            "budgetMax": 3000,
            "pace": "balanced",
            "interests": ["temples", "food", "gardens"],
            "dietary": ["vegetarian"],
            "walkingTolerance": "high",
            "mustSeeItems": "Fushimi Inari, Dotonbori",
            "additionalNotes": "Travelling with a camera, early starts are fine.",
            "freeformPrompt": "First time in Japan, want a mix of classic sights and quiet neighbourhoods.",
        }
    )

    def print_step(step):
        print(f"[{step.status}] {step.agent_name}: {step.message}")

    itinerary = await run_full_pipeline(form_data, print_step, build_generation_client())
    print("➡️ Pipeline returned:\n")
    print(json.dumps(itinerary.to_wire(), indent=2))


if __name__ == "__main__":
    asyncio.run(main())

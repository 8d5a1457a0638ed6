"""Fixed itinerary returned when no generation backend is configured."""
from __future__ import annotations

from itinerary_agent.schemas import Itinerary

_SAMPLE_ITINERARY = {
    "id": "demo-lisbon-3-days",
    "tripProfile": {
        "origin": "London",
        "destinations": ["Lisbon"],
        "startDate": "2025-05-12",
        "endDate": "2025-05-15",
        "budgetMin": 400,
        "budgetMax": 800,
        "currency": "EUR",
        "pace": "balanced",
        "interests": ["food", "history", "viewpoints"],
        "constraints": {
            "dietary": ["vegetarian"],
            "walkingTolerance": "medium",
            "mustSeeItems": ["Belem Tower"],
            "additionalNotes": "Prefers trams over taxis.",
        },
    },
    "days": [
        {
            "dayIndex": 0,
            "date": "2025-05-12",
            "morningActivities": [
                {
                    "id": "lis-castelo",
                    "name": "Castelo de Sao Jorge",
                    "description": "Moorish hilltop castle with the best panorama over the old town.",
                    "category": "sight",
                    "neighborhood": "Alfama",
                    "duration": 120,
                    "costEstimate": 15,
                    "tags": ["history", "viewpoint"],
                    "timeOfDay": "morning",
                },
                {
                    "id": "lis-tram-28",
                    "name": "Tram 28 ride",
                    "description": "Rattle through the narrow streets of Graca and Alfama on the vintage tram.",
                    "category": "activity",
                    "neighborhood": "Graca",
                    "duration": 45,
                    "costEstimate": 3,
                    "tags": ["iconic", "transport"],
                    "timeOfDay": "morning",
                },
            ],
            "afternoonActivities": [
                {
                    "id": "lis-time-out-market",
                    "name": "Time Out Market lunch",
                    "description": "Food hall with stalls from well-known Lisbon chefs, many vegetarian plates.",
                    "category": "food",
                    "neighborhood": "Cais do Sodre",
                    "duration": 75,
                    "costEstimate": 20,
                    "tags": ["vegetarian-friendly", "local"],
                    "timeOfDay": "afternoon",
                },
                {
                    "id": "lis-lx-factory",
                    "name": "LX Factory",
                    "description": "Converted industrial complex with bookshops, design stores and street art.",
                    "category": "shopping",
                    "neighborhood": "Alcantara",
                    "duration": 90,
                    "costEstimate": 0,
                    "tags": ["design", "street-art"],
                    "timeOfDay": "afternoon",
                },
            ],
            "eveningActivities": [
                {
                    "id": "lis-fado",
                    "name": "Fado evening in Alfama",
                    "description": "Traditional fado in a small tavern with a set vegetarian menu.",
                    "category": "culture",
                    "neighborhood": "Alfama",
                    "duration": 150,
                    "costEstimate": 45,
                    "tags": ["music", "dinner"],
                    "timeOfDay": "evening",
                },
            ],
            "dailyBudget": 83,
        },
        {
            "dayIndex": 1,
            "date": "2025-05-13",
            "morningActivities": [
                {
                    "id": "lis-belem-tower",
                    "name": "Belem Tower",
                    "description": "Sixteenth-century fortress on the Tagus, a symbol of the age of discovery.",
                    "category": "sight",
                    "neighborhood": "Belem",
                    "duration": 60,
                    "costEstimate": 10,
                    "tags": ["history", "must-see"],
                    "timeOfDay": "morning",
                },
                {
                    "id": "lis-pasteis",
                    "name": "Pasteis de Belem",
                    "description": "The original custard tart bakery, best visited before the queues build.",
                    "category": "food",
                    "neighborhood": "Belem",
                    "duration": 30,
                    "costEstimate": 6,
                    "tags": ["pastry", "classic"],
                    "timeOfDay": "morning",
                },
            ],
            "afternoonActivities": [
                {
                    "id": "lis-jeronimos",
                    "name": "Jeronimos Monastery",
                    "description": "Manueline cloisters and the tomb of Vasco da Gama.",
                    "category": "culture",
                    "neighborhood": "Belem",
                    "duration": 90,
                    "costEstimate": 12,
                    "tags": ["architecture", "history"],
                    "timeOfDay": "afternoon",
                },
                {
                    "id": "lis-maat",
                    "name": "MAAT riverside walk",
                    "description": "Walk the curved roof of the art and technology museum along the river.",
                    "category": "nature",
                    "neighborhood": "Belem",
                    "duration": 60,
                    "costEstimate": 0,
                    "tags": ["river", "architecture"],
                    "timeOfDay": "afternoon",
                },
            ],
            "eveningActivities": [
                {
                    "id": "lis-bairro-alto",
                    "name": "Bairro Alto bar hop",
                    "description": "Small bars and street drinking in the lanes of the upper town.",
                    "category": "nightlife",
                    "neighborhood": "Bairro Alto",
                    "duration": 120,
                    "costEstimate": 25,
                    "tags": ["bars", "lively"],
                    "timeOfDay": "evening",
                },
            ],
            "dailyBudget": 53,
        },
        {
            "dayIndex": 2,
            "date": "2025-05-14",
            "morningActivities": [
                {
                    "id": "lis-sintra-pena",
                    "name": "Pena Palace, Sintra",
                    "description": "Day trip by train to the painted romanticist palace above Sintra.",
                    "category": "sight",
                    "neighborhood": "Sintra",
                    "duration": 180,
                    "costEstimate": 25,
                    "tags": ["day-trip", "palace"],
                    "timeOfDay": "morning",
                },
            ],
            "afternoonActivities": [
                {
                    "id": "lis-quinta-regaleira",
                    "name": "Quinta da Regaleira",
                    "description": "Gardens, grottoes and the initiation well of a mystical estate.",
                    "category": "nature",
                    "neighborhood": "Sintra",
                    "duration": 120,
                    "costEstimate": 12,
                    "tags": ["gardens", "day-trip"],
                    "timeOfDay": "afternoon",
                },
                {
                    "id": "lis-sintra-cafe",
                    "name": "Travesseiros at Piriquita",
                    "description": "Almond pastries at a family bakery in Sintra village.",
                    "category": "food",
                    "neighborhood": "Sintra",
                    "duration": 30,
                    "costEstimate": 5,
                    "tags": ["pastry", "local"],
                    "timeOfDay": "afternoon",
                },
            ],
            "eveningActivities": [
                {
                    "id": "lis-miradouro",
                    "name": "Sunset at Miradouro da Senhora do Monte",
                    "description": "Quiet viewpoint for the sunset over the castle and the river.",
                    "category": "rest",
                    "neighborhood": "Graca",
                    "duration": 60,
                    "costEstimate": 0,
                    "tags": ["viewpoint", "sunset"],
                    "timeOfDay": "evening",
                },
            ],
            "dailyBudget": 42,
        },
    ],
    "totalEstimatedCost": 178,
    "summary": (
        "Three easy-paced days in Lisbon mixing the hilltop old town, the monuments "
        "of Belem and a day trip to Sintra, with vegetarian-friendly food stops and "
        "fado on the first night."
    ),
    "generatedAt": "2025-05-01T09:00:00Z",
}

SAMPLE_ITINERARY = Itinerary.model_validate(_SAMPLE_ITINERARY)


def sample_itinerary() -> Itinerary:
    """Return a private copy of the demo itinerary."""
    return SAMPLE_ITINERARY.model_copy(deep=True)

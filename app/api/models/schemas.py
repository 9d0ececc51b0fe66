from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict

# ---------- Request/Response models ----------


class GenerationRequest(BaseModel):
    # Strict: a JSON number for num_people or duration is rejected, not coerced.
    model_config = ConfigDict(strict=True)

    destination: str
    duration: str
    num_people: str
    activities: List[str]


class ItineraryEnvelope(BaseModel):
    itinerary: str
    tag: str

"""Prompt templates used for itinerary generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.api.models.schemas import GenerationRequest

ITINERARY_PROMPT = (
    "Create a summer vacation detailed itinerary trip to go to {destination} for a {duration}. "
    "{num_people} people will be going on this trip planning to do {activities}"
)


def build_itinerary_prompt(request: "GenerationRequest") -> str:
    # Caller text is interpolated verbatim.
    return ITINERARY_PROMPT.format(
        destination=request.destination,
        duration=request.duration,
        num_people=request.num_people,
        activities=", ".join(request.activities),
    )

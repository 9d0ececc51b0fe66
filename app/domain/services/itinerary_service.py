from __future__ import annotations

import logging
import random
from typing import Optional

from app.ai.inference import InferenceService, generate_itinerary_text
from app.ai.prompts import build_itinerary_prompt
from app.api.models.schemas import GenerationRequest
from app.domain.models import GeneratedItinerary, Hit
from app.domain.repositories import ArtifactRepository
from app.domain.tags import TAG_LENGTH, generate_tag

logger = logging.getLogger(__name__)


class ItineraryService:
    def __init__(
        self,
        repo: ArtifactRepository,
        inference: InferenceService,
        model: str,
        tag_length: int = TAG_LENGTH,
        tag_max_attempts: int = 1,
        rng: Optional[random.Random] = None,
    ):
        self.repo = repo
        self.inference = inference
        self.model = model
        self.tag_length = tag_length
        self.tag_max_attempts = max(1, tag_max_attempts)
        self.rng = rng

    async def get_itinerary(self, tag: str) -> Optional[str]:
        result = await self.repo.fetch(tag)
        if isinstance(result, Hit):
            return result.text
        return None

    async def create_itinerary(self, request: GenerationRequest) -> GeneratedItinerary:
        prompt = build_itinerary_prompt(request)
        text = await generate_itinerary_text(self.inference, prompt, self.model)
        tag = await self._new_tag()
        stored = await self.repo.store(tag, text)
        return GeneratedItinerary(tag=tag, itinerary=text, stored=stored)

    async def _new_tag(self) -> str:
        tag = generate_tag(self.tag_length, rng=self.rng)
        # Single attempt by default: collisions are accepted unchecked.
        for _ in range(self.tag_max_attempts - 1):
            if not await self.repo.exists(tag):
                break
            logger.info("Tag %r already in use, generating another.", tag)
            tag = generate_tag(self.tag_length, rng=self.rng)
        return tag

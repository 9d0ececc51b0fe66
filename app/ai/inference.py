from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from typing import Optional

from openai import AsyncOpenAI

from app.core.errors import InferenceError

logger = logging.getLogger(__name__)

FALLBACK_ITINERARY = "Error in LLM"


class InferenceService(ABC):
    @abstractmethod
    async def infer(self, model: str, prompt: str) -> str:
        raise NotImplementedError


class OpenAIInferenceService(InferenceService):
    def __init__(self, client: Optional[AsyncOpenAI]):
        self.client = client

    async def infer(self, model: str, prompt: str) -> str:
        if self.client is None:
            raise InferenceError("OpenAI client is not configured")
        resp = await self.client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
        )
        content = resp.choices[0].message.content if resp.choices else None
        if content is None:
            raise InferenceError("OpenAI returned an empty completion")
        return content


async def generate_itinerary_text(inference: InferenceService, prompt: str, model: str) -> str:
    """
    Run the prompt through ``inference``. Any failure is replaced with the fallback
    text, which callers store and return like a real itinerary.
    """
    try:
        text = await inference.infer(model, prompt)
    except Exception as exc:
        logger.warning("Inference failed, using fallback itinerary: %s", exc)
        text = FALLBACK_ITINERARY
    logger.info("Result text: %r", text)
    return text

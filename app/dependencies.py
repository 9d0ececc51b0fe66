import logging
import random
from typing import Optional

from fastapi import Depends

from app.ai.inference import InferenceService, OpenAIInferenceService
from app.ai.openai_client import get_client
from app.core.config import settings
from app.domain.repositories import (
    ArtifactRepository,
    InMemoryKeyValueStore,
    KeyValueStore,
    SupabaseKeyValueStore,
)
from app.domain.services.itinerary_service import ItineraryService
from app.external.supabase_client import get_supabase_client

logger = logging.getLogger(__name__)

_store: KeyValueStore
if settings.use_supabase:
    _supabase_client = get_supabase_client()
    if _supabase_client:
        _store = SupabaseKeyValueStore(_supabase_client, settings.supabase_table)
    else:
        logger.warning("use_supabase is set but Supabase is unavailable; using in-memory storage.")
        _store = InMemoryKeyValueStore()
else:
    _store = InMemoryKeyValueStore()

_inference: InferenceService = OpenAIInferenceService(get_client())


def get_key_value_store() -> KeyValueStore:
    return _store


def get_inference_service() -> InferenceService:
    return _inference


def get_tag_rng() -> Optional[random.Random]:
    return None


def get_artifact_repo(store: KeyValueStore = Depends(get_key_value_store)) -> ArtifactRepository:
    return ArtifactRepository(store)


def get_itinerary_service(
    repo: ArtifactRepository = Depends(get_artifact_repo),
    inference: InferenceService = Depends(get_inference_service),
    rng: Optional[random.Random] = Depends(get_tag_rng),
) -> ItineraryService:
    return ItineraryService(
        repo=repo,
        inference=inference,
        model=settings.openai_model_itinerary,
        tag_length=settings.tag_length,
        tag_max_attempts=settings.tag_max_attempts,
        rng=rng,
    )


__all__ = [
    "get_key_value_store",
    "get_inference_service",
    "get_tag_rng",
    "get_artifact_repo",
    "get_itinerary_service",
    "settings",
]

"""Shared pytest fixtures for the itinerary API tests."""

from __future__ import annotations

import random
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_inference_service, get_key_value_store, get_tag_rng
from app.domain.repositories import InMemoryKeyValueStore
from app.main import app
from tests.fakes import FakeInferenceService


@pytest.fixture
def memory_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def fake_inference() -> FakeInferenceService:
    return FakeInferenceService()


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def maui_payload() -> dict:
    return {
        "destination": "Maui",
        "duration": "one week",
        "num_people": "4",
        "activities": ["snorkeling", "hiking"],
    }


@pytest.fixture
def test_client(memory_store, fake_inference, seeded_rng) -> Generator[TestClient, None, None]:
    """TestClient with the store, inference service and tag source overridden.

    Cleanup:
        Dependency overrides are cleared after the test completes
    """
    app.dependency_overrides[get_key_value_store] = lambda: memory_store
    app.dependency_overrides[get_inference_service] = lambda: fake_inference
    app.dependency_overrides[get_tag_rng] = lambda: seeded_rng
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

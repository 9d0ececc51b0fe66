"""Test doubles for the inference service and key-value backend."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from app.ai.inference import InferenceService
from app.core.errors import InferenceError
from app.domain.repositories import KeyValueStore


class FakeInferenceService(InferenceService):
    """Records every call and answers with a canned text, or fails on demand."""

    def __init__(self, text: str = "Day 1: beach. Day 2: volcano.", fail: bool = False):
        self.text = text
        self.fail = fail
        self.calls: List[Tuple[str, str]] = []

    async def infer(self, model: str, prompt: str) -> str:
        self.calls.append((model, prompt))
        if self.fail:
            raise InferenceError("inference backend unavailable")
        return self.text


class FailingKeyValueStore(KeyValueStore):
    """Store whose reads and/or writes raise, standing in for an unreachable backend."""

    def __init__(self, fail_get: bool = True, fail_set: bool = True):
        self.fail_get = fail_get
        self.fail_set = fail_set
        self.data: Dict[str, bytes] = {}

    async def get(self, key: str) -> Optional[bytes]:
        if self.fail_get:
            raise ConnectionError("store unreachable")
        return self.data.get(key)

    async def set(self, key: str, value: bytes) -> None:
        if self.fail_set:
            raise ConnectionError("store unreachable")
        self.data[key] = value

from abc import ABC, abstractmethod
import asyncio
import logging
from typing import Dict, Optional

from .models import BackendError, FetchResult, Hit, Miss

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    @abstractmethod
    async def get(self, key: str) -> Optional[bytes]:
        raise NotImplementedError

    @abstractmethod
    async def set(self, key: str, value: bytes) -> None:
        raise NotImplementedError


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self):
        self._store: Dict[str, bytes] = {}

    async def get(self, key: str) -> Optional[bytes]:
        return self._store.get(key)

    async def set(self, key: str, value: bytes) -> None:
        self._store[key] = bytes(value)


class SupabaseKeyValueStore(KeyValueStore):
    """
    Supabase-backed key-value store: one row per key in a table shaped as
    ``(key text primary key, value bytea)``. PostgREST exchanges bytea columns in
    their hex form (``\\x6869``), which is what is written and parsed here.
    """

    def __init__(self, client, table_name: str = "itinerary_tags"):
        if client is None:
            raise ValueError("Supabase client is required for SupabaseKeyValueStore")
        self.client = client
        self.table_name = table_name

    async def get(self, key: str) -> Optional[bytes]:
        response = await asyncio.to_thread(
            lambda: self.client.table(self.table_name).select("value").eq("key", key).execute()
        )
        rows = getattr(response, "data", None) or []
        if not rows:
            return None
        return self._decode_bytea(rows[0]["value"])

    async def set(self, key: str, value: bytes) -> None:
        payload = {"key": key, "value": "\\x" + value.hex()}
        await asyncio.to_thread(lambda: self.client.table(self.table_name).upsert(payload).execute())

    @staticmethod
    def _decode_bytea(value) -> bytes:
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)
        if isinstance(value, str) and value.startswith("\\x"):
            return bytes.fromhex(value[2:])
        raise ValueError(f"Unexpected bytea value from Supabase: {value!r}")


class ArtifactRepository:
    """Text view over a key-value store, collapsing backend failures into results."""

    def __init__(self, backend: KeyValueStore):
        self.backend = backend

    async def fetch(self, tag: str) -> FetchResult:
        try:
            raw = await self.backend.get(tag)
        except Exception as exc:
            logger.warning("Key-value lookup failed for tag %r: %s", tag, exc)
            return BackendError(str(exc))
        if raw is None:
            logger.info("No tag found: %r", tag)
            return Miss()
        try:
            return Hit(raw.decode("utf-8"))
        except UnicodeDecodeError:
            logger.warning("Stored value for tag %r is not valid UTF-8", tag)
            return Miss()

    async def store(self, tag: str, text: str) -> bool:
        try:
            await self.backend.set(tag, text.encode("utf-8"))
        except Exception as exc:
            logger.warning("Failed to save itinerary under tag %r: %s", tag, exc)
            return False
        logger.info("Itinerary saved under tag %r.", tag)
        return True

    async def exists(self, tag: str) -> bool:
        try:
            return await self.backend.get(tag) is not None
        except Exception as exc:
            logger.warning("Key-value lookup failed for tag %r: %s", tag, exc)
            return False

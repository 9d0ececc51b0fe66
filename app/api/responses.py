"""JSON envelopes and HTTP responses returned by the itinerary endpoints."""

from __future__ import annotations

import json
import logging

from fastapi import Response, status

from app.api.models.schemas import ItineraryEnvelope
from app.core.errors import INTERNAL_ERROR_MESSAGE, PARSE_ERROR_MESSAGE, error_content

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
SERIALIZATION_ERROR_BODY = json.dumps(error_content(INTERNAL_ERROR_MESSAGE))
PARSE_ERROR_BODY = json.dumps(error_content(PARSE_ERROR_MESSAGE))


def compose_envelope(itinerary: str, tag: str) -> str:
    try:
        envelope = ItineraryEnvelope(itinerary=itinerary, tag=tag)
        body = json.dumps(envelope.model_dump(), ensure_ascii=False)
        body.encode("utf-8")
        return body
    except (TypeError, ValueError) as exc:
        logger.exception("Failed to serialize itinerary envelope: %s", exc)
        return SERIALIZATION_ERROR_BODY


def envelope_response(itinerary: str, tag: str, status_code: int = status.HTTP_200_OK) -> Response:
    # The serialization fallback keeps the caller's status code.
    return Response(content=compose_envelope(itinerary, tag), status_code=status_code, media_type=JSON_MEDIA_TYPE)


def error_response(body: str, status_code: int) -> Response:
    return Response(content=body, status_code=status_code, media_type=JSON_MEDIA_TYPE)


def parse_error_response() -> Response:
    return error_response(PARSE_ERROR_BODY, status.HTTP_400_BAD_REQUEST)

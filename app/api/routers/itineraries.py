import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.routing import APIRoute
from pydantic import ValidationError
from starlette.routing import Match
from starlette.types import Receive, Scope, Send

from app.api.models.schemas import GenerationRequest
from app.api.responses import envelope_response
from app.core.config import settings
from app.core.errors import RequestParseError
from app.domain.services.itinerary_service import ItineraryService
from app.dependencies import get_itinerary_service

logger = logging.getLogger(__name__)


class AnyMethodRoute(APIRoute):
    """APIRoute that serves every HTTP method, including ones it was not declared with."""

    def matches(self, scope: Scope):
        match, child_scope = super().matches(scope)
        # PARTIAL means the path matched and only the method did not.
        if match == Match.PARTIAL:
            return Match.FULL, child_scope
        return match, child_scope

    async def handle(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.app(scope, receive, send)


router = APIRouter(tags=["itineraries"], route_class=AnyMethodRoute)

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def extract_tag(path: str, prefix: str = settings.fetch_prefix) -> Optional[str]:
    """Returns the path remainder after ``prefix``, unvalidated, or None when it does not match."""
    if path.startswith(prefix):
        return path[len(prefix):]
    return None


def raw_request_path(request: Request) -> str:
    """The path as received on the wire, without percent-decoding or the query string."""
    raw_path = request.scope.get("raw_path")
    if not raw_path:
        return request.url.path
    return raw_path.split(b"?", 1)[0].decode("latin-1")


def parse_generation_request(body: bytes) -> GenerationRequest:
    try:
        return GenerationRequest.model_validate_json(body)
    except ValidationError as exc:
        logger.info("Rejected generation request: %s", exc.errors(include_url=False))
        raise RequestParseError()


@router.api_route("/{path:path}", methods=ALL_METHODS)
async def handle_itinerary(request: Request, svc: ItineraryService = Depends(get_itinerary_service)) -> Response:
    tag = extract_tag(raw_request_path(request))
    if tag is not None:
        itinerary = await svc.get_itinerary(tag)
        if itinerary is not None:
            return envelope_response(itinerary, tag, status.HTTP_200_OK)

    # Unknown tags fall through to generation with the same body.
    body = parse_generation_request(await request.body())
    generated = await svc.create_itinerary(body)
    return envelope_response(generated.itinerary, generated.tag, status.HTTP_201_CREATED)

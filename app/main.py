import json
import logging

from fastapi import FastAPI, HTTPException, Request, status

from app.api.responses import error_response, parse_error_response
from app.api.routers import itineraries
from app.core.config import settings
from app.core.errors import INTERNAL_ERROR_MESSAGE, RequestParseError, error_content
from app.core.logging import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.project_name, docs_url=None, redoc_url=None, openapi_url=None)

app.include_router(itineraries.router)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    if isinstance(exc, RequestParseError):
        return parse_error_response()
    return error_response(json.dumps(error_content(str(exc.detail))), exc.status_code)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled server error: %s", exc)
    return error_response(json.dumps(error_content(INTERNAL_ERROR_MESSAGE)), status.HTTP_500_INTERNAL_SERVER_ERROR)

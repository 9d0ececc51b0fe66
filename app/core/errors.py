from typing import Any, Dict

from fastapi import HTTPException, status

PARSE_ERROR_MESSAGE = "Error while parsing request"
INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class APIError(HTTPException):
    def __init__(self, status_code: int, message: str):
        super().__init__(status_code=status_code, detail=message)


class RequestParseError(APIError):
    def __init__(self, message: str = PARSE_ERROR_MESSAGE):
        super().__init__(status.HTTP_400_BAD_REQUEST, message)


class InferenceError(RuntimeError):
    """Raised by inference services when no text could be produced."""


def error_content(message: str) -> Dict[str, Any]:
    return {"error": message}

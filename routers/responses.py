import logging
import re
from typing import Any, Mapping, Optional

from fastapi import status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from domain.ack import AckJsonResponse

logger = logging.getLogger('uvicorn.error')

# Optional sign followed by decimal digits, nothing else
_INT_LITERAL = re.compile(r"[+-]?[0-9]+")

# Path ids are signed 64-bit
MIN_PATH_ID = -2**63
MAX_PATH_ID = 2**63 - 1


def json_error(
    message: str,
    status_code: int,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """
    Builds an ack envelope carrying an error. If the envelope itself cannot
    be encoded the response degrades to a plain-text 500.
    """
    try:
        return JSONResponse(
            content=AckJsonResponse(message=message, status=status_code).model_dump(),
            status_code=status_code,
            headers=headers,
        )
    except (TypeError, ValueError) as e:
        logger.exception(f"Failed to encode error envelope for status {status_code}: {e}")
        return PlainTextResponse(str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def json_ack(message: str) -> Response:
    return json_payload(AckJsonResponse(message=message, status=status.HTTP_200_OK).model_dump())


def json_payload(content: Any) -> Response:
    """200 with an arbitrary JSON body, or an envelope 500 if it cannot be encoded."""
    try:
        return JSONResponse(content=content, status_code=status.HTTP_200_OK)
    except (TypeError, ValueError) as e:
        logger.exception(f"Failed to encode response payload: {e}")
        return json_error(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)


def parse_id_path_variable(raw: str) -> Optional[int]:
    """
    Returns the integer value of a path id, or None when it is not an integer
    literal or does not fit in a signed 64-bit integer.
    """
    if not _INT_LITERAL.fullmatch(raw):
        return None
    try:
        value = int(raw)
    except ValueError:
        # More digits than int() will convert
        return None
    if not MIN_PATH_ID <= value <= MAX_PATH_ID:
        return None
    return value

import http
from typing import Dict, List

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from context_manager.context import context_request_data
from logger import logger


def format_validation_errors(errors: List[dict]) -> Dict:
    """
    Group pydantic error messages by the offending field, e.g.
    {"data": {"fields": {"weight": ["Input should be a valid number"]}}, ...}
    """
    fields: Dict[str, List[str]] = {}

    for error in errors:
        location = error.get("loc") or ()
        # ("body", "params", "weight") -> "weight"
        field = str(location[-1]) if len(location) > 1 else "Unknown"
        fields.setdefault(field, []).append(error["msg"])

    return {
        "data": {"fields": fields},
        "message": "Validation error occurred.",
        "status": False,
    }


async def handle_validation_error(
    request: Request, exc: ValidationError
) -> JSONResponse:
    logger.warning(
        extra=context_request_data.get(),
        msg="Model validation failed on {}: {}".format(request.url.path, exc.errors()),
    )
    return JSONResponse(
        status_code=http.HTTPStatus.UNPROCESSABLE_ENTITY,
        content=format_validation_errors(exc.errors()),
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.error(
        extra=context_request_data.get(),
        msg="422 on {} Errors: {}".format(request.url, exc.errors()),
    )
    return JSONResponse(
        status_code=http.HTTPStatus.UNPROCESSABLE_ENTITY,
        content=format_validation_errors(exc.errors()),
    )


async def custom_http_exception_handler(
    request: Request, exc: HTTPException
) -> JSONResponse:
    """Answer HTTP errors in the same envelope as every other response."""
    if exc.status_code >= http.HTTPStatus.INTERNAL_SERVER_ERROR:
        logger.error(
            extra=context_request_data.get(),
            msg="Internal server error: {}".format(exc.detail),
        )
        message = "An internal server error occurred. Please try again later."
    else:
        message = exc.detail

    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message, "status": False, "data": {}},
        headers=exc.headers,
    )

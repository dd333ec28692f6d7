from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request
from fastapi.responses import JSONResponse

from context_manager.context import context_request_data
from logger import logger

# limits are declared per route, e.g. @limiter.limit(RATE_CALCULATOR_RATE_LIMIT)
limiter = Limiter(key_func=get_remote_address)


def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    logger.warning(
        extra=context_request_data.get(),
        msg="Rate limit exceeded on {} ({})".format(request.url.path, exc.detail),
    )
    return JSONResponse(
        status_code=429,
        content={
            "message": "Too many requests. Slow down!",
            "status": False,
            "data": {"limit": exc.detail},
        },
    )

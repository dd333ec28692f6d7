import http
from fastapi import APIRouter

from modules.rate_calculator.rate_calculator_config import RATE_CALCULATOR_TIMEZONE
from utils.datetime import get_current_time

StatusRouter = APIRouter(tags=["health_checks"])


@StatusRouter.get("/status", status_code=http.HTTPStatus.OK)
async def status_check():
    """Liveness probe. Also reports the clock that pickup cutoffs are judged against."""
    return {
        "status": "OK",
        "timezone": RATE_CALCULATOR_TIMEZONE,
        "server_time": get_current_time(RATE_CALCULATOR_TIMEZONE).isoformat(),
    }

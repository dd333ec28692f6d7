from fastapi import APIRouter, Depends

from context_manager.context import build_request_context

# routers
from modules.rate_calculator import rate_calculator_router

API_V1_PREFIX = "/api/v1"

# every versioned route gets a request id before the handler runs
CommonRouter = APIRouter(
    prefix=API_V1_PREFIX,
    dependencies=[Depends(build_request_context)],
)

CommonRouter.include_router(rate_calculator_router)

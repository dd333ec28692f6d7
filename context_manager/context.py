import uuid
from contextvars import ContextVar
from fastapi import Request
from logger import logger

# defining the context variables to store different types of required data

context_request_data: ContextVar[str] = ContextVar("request_data", default="")


# whenever an api is hit, define the context variables for it
async def build_request_context(request: Request):
    request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
    context_request_data.set(request_id)
    logger.info(extra=request_id, msg="REQUEST_INITIATED")


# Helper function to safely get the request id from context
def get_request_id():
    """
    Returns None when no request is in flight (e.g. the services are called
    directly from a script or a test).
    """
    request_id = context_request_data.get()
    if not request_id:
        return None
    return request_id

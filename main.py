from dotenv import load_dotenv

load_dotenv()

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError
from slowapi.errors import RateLimitExceeded

from logger import logger
from limiter import limiter, rate_limit_handler
from utils.exception_handler import (
    handle_validation_error,
    handle_request_validation_error,
    custom_http_exception_handler,
)

from router import CommonRouter, StatusRouter

app = FastAPI(title="Courier Rate Engine")

# Routers
app.include_router(CommonRouter)
app.include_router(StatusRouter)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_handler)

# Exception handlers
app.add_exception_handler(ValidationError, handle_validation_error)
app.add_exception_handler(RequestValidationError, handle_request_validation_error)
app.add_exception_handler(HTTPException, custom_http_exception_handler)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger.info(msg="Courier Rate Engine initialised")


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)

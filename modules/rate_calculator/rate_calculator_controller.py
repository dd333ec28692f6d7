import http
from fastapi import APIRouter, Request


# schema
from schema.base import GenericResponseModel
from modules.rate_calculator.rate_calculator_schema import (
    ExcessChargeRequestModel,
    RateCalculatorRequestModel,
)
from modules.rate_calculator.rate_calculator_config import RATE_CALCULATOR_RATE_LIMIT

# utils
from utils.response_handler import build_api_response
from limiter import limiter

# services
from .rate_calculator_service import RateCalculatorService


rate_calculator_router = APIRouter(tags=["rate_calculator"])


@rate_calculator_router.post(
    "/rate-calculator",
    status_code=http.HTTPStatus.OK,
    response_model=GenericResponseModel,
)
@limiter.limit(RATE_CALCULATOR_RATE_LIMIT)
async def calculate_rates(
    request: Request, rate_calculator_params: RateCalculatorRequestModel
):
    try:
        response: GenericResponseModel = RateCalculatorService.get_rate_quotes(
            rate_calculator_params
        )
        return build_api_response(response)

    except Exception as e:
        return build_api_response(
            GenericResponseModel(
                status_code=http.HTTPStatus.INTERNAL_SERVER_ERROR,
                data=str(e),
                message="An error occurred while calculating the rate.",
            )
        )


@rate_calculator_router.post(
    "/rate-calculator/by-zone",
    status_code=http.HTTPStatus.OK,
    response_model=GenericResponseModel,
)
@limiter.limit(RATE_CALCULATOR_RATE_LIMIT)
async def calculate_rates_by_zone(
    request: Request, rate_calculator_params: RateCalculatorRequestModel
):
    try:
        response: GenericResponseModel = RateCalculatorService.get_rate_quotes_by_zone(
            rate_calculator_params
        )
        return build_api_response(response)

    except Exception as e:
        return build_api_response(
            GenericResponseModel(
                status_code=http.HTTPStatus.INTERNAL_SERVER_ERROR,
                data=str(e),
                message="An error occurred while grouping the rates by zone.",
            )
        )


@rate_calculator_router.post(
    "/rate-calculator/excess",
    status_code=http.HTTPStatus.OK,
    response_model=GenericResponseModel,
)
async def calculate_excess_charges(excess_params: ExcessChargeRequestModel):
    try:
        response: GenericResponseModel = RateCalculatorService.get_excess_charges(
            excess_params
        )
        return build_api_response(response)

    except Exception as e:
        return build_api_response(
            GenericResponseModel(
                status_code=http.HTTPStatus.INTERNAL_SERVER_ERROR,
                data=str(e),
                message="An error occurred while calculating the excess charges.",
            )
        )

from .rate_calculator_controller import rate_calculator_router
from .rate_calculator_service import (
    RateCalculatorService,
    PriceOutcome,
    ExclusionReason,
)

__all__ = [
    "rate_calculator_router",
    "RateCalculatorService",
    "PriceOutcome",
    "ExclusionReason",
]

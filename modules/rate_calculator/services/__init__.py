"""
Rate Calculator Services Module

Contains specialized services for courier rate calculation:
- WeightService: Actual, volumetric and chargeable weight
- ZoneService: Pickup/delivery zone classification
- ChargeService: Forward, COD, RTO and excess charges
- RateValidationService: Parameter and courier data checks
- PickupService: Expected pickup and delivery labels
- RateResultService: Ranking, filtering, grouping and summaries
"""

from .weight_service import WeightService
from .zone_service import ZoneService, ZoneMatch
from .charge_service import ChargeService, ChargeBreakdown
from .validation_service import RateValidationService, ValidationResult, ValidationError
from .pickup_service import PickupService
from .result_service import RateResultService

__all__ = [
    "WeightService",
    "ZoneService",
    "ZoneMatch",
    "ChargeService",
    "ChargeBreakdown",
    "RateValidationService",
    "ValidationResult",
    "ValidationError",
    "PickupService",
    "RateResultService",
]

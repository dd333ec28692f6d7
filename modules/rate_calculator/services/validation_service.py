"""
Rate Validation Service

Value checks on calculation parameters and courier pricing data.

pydantic already guarantees types at the boundary; the checks here are the
business rules (positive weights, COD amount, zone table) that exclude a
courier from a quote instead of failing the whole request.
"""

from dataclasses import dataclass, field
from typing import Any, List

from modules.rate_calculator.rate_calculator_schema import (
    CalculationParameters,
    CourierInfo,
    CourierPricing,
    PaymentType,
)


@dataclass
class ValidationError:
    """Represents a single validation error"""

    field: str
    message: str
    code: str
    value: Any = None


@dataclass
class ValidationResult:
    """Result of validation operation"""

    is_valid: bool = True
    errors: List[ValidationError] = field(default_factory=list)

    def add_error(self, field: str, message: str, code: str, value: Any = None):
        """Add a validation error"""
        self.errors.append(ValidationError(field, message, code, value))
        self.is_valid = False

    def merge(self, other: "ValidationResult"):
        """Merge another validation result into this one"""
        if not other.is_valid:
            self.is_valid = False
        self.errors.extend(other.errors)

    def messages(self) -> List[str]:
        return [error.message for error in self.errors]


def _is_positive(value) -> bool:
    return value is not None and value > 0


class RateValidationService:

    @staticmethod
    def validate_calculation_params(params: CalculationParameters) -> ValidationResult:
        result = ValidationResult()

        if not _is_positive(params.weight):
            result.add_error(
                "weight", "Weight must be greater than 0", "INVALID_WEIGHT", params.weight
            )

        dimensions = (params.box_length, params.box_width, params.box_height)
        if not all(_is_positive(dimension) for dimension in dimensions):
            result.add_error(
                "box_dimensions",
                "Box dimensions must be greater than 0",
                "INVALID_DIMENSIONS",
                dimensions,
            )

        if not isinstance(params.payment_type, PaymentType):
            result.add_error(
                "payment_type",
                "Payment type must be prepaid or COD",
                "INVALID_PAYMENT_TYPE",
                params.payment_type,
            )
        elif params.payment_type == PaymentType.COD and not _is_positive(
            params.collectable_amount
        ):
            result.add_error(
                "collectable_amount",
                "Collectable amount is required and must be greater than 0 for COD",
                "MISSING_COLLECTABLE_AMOUNT",
                params.collectable_amount,
            )

        if not params.pickup_pincode or not params.delivery_pincode:
            result.add_error(
                "pincode",
                "Pickup and delivery pincodes are required",
                "MISSING_PINCODE",
            )

        return result

    @staticmethod
    def validate_courier_data(
        courier: CourierInfo, pricing: CourierPricing
    ) -> ValidationResult:
        result = ValidationResult()

        if not courier.id or not courier.name:
            result.add_error(
                "courier",
                "Courier ID and name are required",
                "MISSING_COURIER_IDENTITY",
            )

        if not _is_positive(pricing.weight_slab):
            result.add_error(
                "weight_slab",
                "Weight slab must be greater than 0",
                "INVALID_WEIGHT_SLAB",
                pricing.weight_slab,
            )

        if not _is_positive(pricing.increment_weight):
            result.add_error(
                "increment_weight",
                "Increment weight must be greater than 0",
                "INVALID_INCREMENT_WEIGHT",
                pricing.increment_weight,
            )

        if not pricing.zone_pricing:
            result.add_error(
                "zone_pricing", "Zone pricing is required", "MISSING_ZONE_PRICING"
            )
        else:
            zones = [zone_pricing.zone for zone_pricing in pricing.zone_pricing]
            if len(set(zones)) != len(zones):
                result.add_error(
                    "zone_pricing",
                    "Zone pricing must have one entry per zone",
                    "DUPLICATE_ZONE_PRICING",
                    zones,
                )

        return result

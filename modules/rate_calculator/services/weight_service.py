"""
Weight Service

Converts shipment weight and box dimensions into the canonical unit (kg)
and derives the weight a courier bills on.

Weight Types:
1. Actual weight: dead weight of the package
2. Volumetric weight: (L x W x H) / divisor
3. Chargeable weight: max(actual, volumetric, courier minimum slab)
"""

from decimal import Decimal, ROUND_HALF_UP

from modules.rate_calculator.rate_calculator_config import (
    VOLUMETRIC_DIVISOR_CM,
    VOLUMETRIC_DIVISOR_INCH,
)
from modules.rate_calculator.rate_calculator_schema import WeightUnit, SizeUnit


class WeightService:
    """
    Stateless weight calculations. All results are in kilograms.

    Usage:
        actual = WeightService.normalize_weight(1200, WeightUnit.G)  # 1.2
        volumetric = WeightService.calculate_volumetric_weight(10, 10, 10)  # 0.2
    """

    @staticmethod
    def normalize_weight(weight: float, unit: WeightUnit = WeightUnit.KG) -> float:
        """
        Convert weight to kilograms.

        Args:
            weight: Weight value
            unit: 'kg' or 'g'

        Returns:
            Weight in kg
        """
        if WeightUnit(unit) == WeightUnit.G:
            return weight / 1000
        return weight

    @staticmethod
    def calculate_volumetric_weight(
        length: float,
        width: float,
        height: float,
        size_unit: SizeUnit = SizeUnit.CM,
    ) -> float:
        """
        Calculate volumetric weight.

        Formula: (L x W x H) / 5000 for cm, (L x W x H) / 5 for inches

        Returns:
            Volumetric weight in kg, rounded half-up to 2 decimal places
        """
        divisor = (
            VOLUMETRIC_DIVISOR_INCH
            if SizeUnit(size_unit) == SizeUnit.INCH
            else VOLUMETRIC_DIVISOR_CM
        )

        l = Decimal(str(length))
        w = Decimal(str(width))
        h = Decimal(str(height))

        volumetric = (l * w * h) / Decimal(divisor)

        return float(volumetric.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))

    @staticmethod
    def calculate_chargeable_weight(
        actual_weight: float,
        volumetric_weight: float,
        min_weight: float,
    ) -> float:
        """
        Chargeable weight is the highest of actual, volumetric and the
        courier's minimum weight slab.
        """
        return max(actual_weight, volumetric_weight, min_weight)

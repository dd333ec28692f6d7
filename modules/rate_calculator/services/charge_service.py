"""
Charge Service

Tiered charge computation for one courier in one zone.

Calculation Types:
1. Weight increments: brackets charged above the courier's minimum slab
2. Forward: base price + increment price x brackets
3. COD: higher of the flat charge and the percentage of the collectable amount
4. RTO: mirrors forward, or uses the zone's own RTO rates
5. Excess: incremental re-pricing for a weight difference (disputes)

The quoted total is the forward charge only. COD is reported separately and
RTO only applies if the shipment comes back.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_CEILING
from typing import Optional

from modules.rate_calculator.rate_calculator_config import DEFAULT_INCREMENT_WEIGHT
from modules.rate_calculator.rate_calculator_schema import (
    CourierPricing,
    ExcessCharges,
    PaymentType,
    ZonePricing,
)


@dataclass
class ChargeBreakdown:
    """Result of charge calculations"""

    weight_increment_ratio: int
    base_price: float
    weight_charges: float
    base_charges: float
    cod_charges: float
    rto_charges: float
    fw_charges: float
    total_price: float


def _to_decimal(value) -> Decimal:
    if value is None:
        return Decimal("0")
    return Decimal(str(value))


def _ceil_increments(weight: float, increment_weight: float) -> int:
    # Decimal keeps 1.1 - 0.5 from landing on 0.6000000000000001
    increments = _to_decimal(weight) / _to_decimal(increment_weight)
    return int(increments.to_integral_value(rounding=ROUND_CEILING))


class ChargeService:

    @staticmethod
    def calculate_weight_increment_ratio(
        chargeable_weight: float,
        min_weight: float,
        increment_weight: float,
    ) -> int:
        """
        Number of increment brackets above the minimum slab.

        Formula: ceil((chargeable_weight - min_weight) / increment_weight), 0 at or below the slab
        """
        if chargeable_weight <= min_weight:
            return 0

        additional_weight = _to_decimal(chargeable_weight) - _to_decimal(min_weight)
        return _ceil_increments(additional_weight, increment_weight)

    @staticmethod
    def calculate_cod_charges(
        payment_type: PaymentType,
        collectable_amount: Optional[float],
        cod_charge_hard: float,
        cod_charge_percent: float,
        is_cod_applicable: bool,
    ) -> float:
        if PaymentType(payment_type) != PaymentType.COD or not is_cod_applicable:
            return 0.0

        absolute_rate = _to_decimal(cod_charge_hard)
        percentage_rate = _to_decimal(cod_charge_percent)
        # cod charge is the maximum of the two values
        return float(
            max(
                absolute_rate,
                percentage_rate * _to_decimal(collectable_amount) * Decimal("0.01"),
            )
        )

    @staticmethod
    def calculate_rto_charges(
        is_rto_applicable: bool,
        zone_pricing: ZonePricing,
        base_total: float,
        cod_charges: float,
        weight_increment_ratio: int,
    ) -> float:
        """
        RTO charge for the shipment if it is returned.

        Args:
            base_total: forward base + weight charges + COD charges
            cod_charges: COD part of base_total, never charged on the way back
        """
        if not is_rto_applicable:
            return 0.0

        if zone_pricing.is_rto_same_as_fw:
            return float(
                max(Decimal("0"), _to_decimal(base_total) - _to_decimal(cod_charges))
            )

        rto_base = _to_decimal(zone_pricing.rto_base_price)
        rto_increment = _to_decimal(zone_pricing.rto_increment_price) * max(
            0, weight_increment_ratio
        )
        return float(rto_base + rto_increment)

    @classmethod
    def calculate_charges(
        cls,
        chargeable_weight: float,
        pricing: CourierPricing,
        zone_pricing: ZonePricing,
        payment_type: PaymentType,
        collectable_amount: Optional[float] = None,
    ) -> ChargeBreakdown:
        weight_increment_ratio = cls.calculate_weight_increment_ratio(
            chargeable_weight,
            pricing.weight_slab,
            pricing.increment_weight or DEFAULT_INCREMENT_WEIGHT,
        )

        base_price = zone_pricing.base_price or 0.0
        weight_charges = (zone_pricing.increment_price or 0.0) * weight_increment_ratio
        base_charges = base_price + weight_charges

        cod_charges = cls.calculate_cod_charges(
            payment_type,
            collectable_amount,
            pricing.cod_charge_hard,
            pricing.cod_charge_percent,
            pricing.is_cod_applicable,
        )

        rto_charges = cls.calculate_rto_charges(
            pricing.is_rto_applicable,
            zone_pricing,
            float(_to_decimal(base_charges) + _to_decimal(cod_charges)),
            cod_charges,
            weight_increment_ratio,
        )

        fw_charges = base_charges if pricing.is_fw_applicable else 0.0

        return ChargeBreakdown(
            weight_increment_ratio=weight_increment_ratio,
            base_price=base_price,
            weight_charges=weight_charges,
            base_charges=base_charges,
            cod_charges=cod_charges,
            rto_charges=rto_charges,
            fw_charges=fw_charges,
            total_price=fw_charges,
        )

    @staticmethod
    def calculate_excess_charges(
        weight_difference: float,
        pricing: CourierPricing,
        zone_pricing: ZonePricing,
    ) -> ExcessCharges:
        """
        Extra forward/RTO charges for a weight difference found after booking,
        e.g. when the courier re-weighs a package during a weight dispute.
        """
        if weight_difference is None or weight_difference <= 0:
            return ExcessCharges(fw_excess=0.0, rto_excess=0.0)

        increment_weight = pricing.increment_weight or DEFAULT_INCREMENT_WEIGHT
        increments = _ceil_increments(weight_difference, increment_weight)

        fw_excess = (zone_pricing.increment_price or 0.0) * increments

        rto_excess = 0.0
        if pricing.is_rto_applicable:
            if zone_pricing.is_rto_same_as_fw:
                rto_excess = fw_excess
            else:
                rto_excess = (zone_pricing.rto_increment_price or 0.0) * increments

        return ExcessCharges(fw_excess=fw_excess, rto_excess=rto_excess)

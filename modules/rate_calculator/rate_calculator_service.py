import http
import traceback
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from context_manager.context import context_request_data

from logger import logger

# schema
from schema.base import GenericResponseModel
from modules.rate_calculator.rate_calculator_schema import (
    CalculationParameters,
    CourierInfo,
    CourierPricing,
    CourierWithPricing,
    ExcessChargeRequestModel,
    PincodeDetails,
    PriceBreakdown,
    PriceCalculationResult,
    RateCalculatorRequestModel,
    RateCalculatorResponseModel,
    RatesByZoneResponseModel,
    RateSortOrder,
)

# config
from modules.rate_calculator.rate_calculator_config import RATE_CALCULATOR_TIMEZONE

# services
from modules.rate_calculator.services import (
    ChargeService,
    PickupService,
    RateResultService,
    RateValidationService,
    WeightService,
    ZoneService,
)

# utils
from utils.datetime import get_current_time


class ExclusionReason(str, Enum):
    INVALID_PARAMETERS = "invalid_parameters"
    INVALID_COURIER = "invalid_courier"
    INACTIVE_COURIER = "inactive_courier"
    REVERSE_FLOW_MISMATCH = "reverse_flow_mismatch"
    ZONE_NOT_SERVICED = "zone_not_serviced"
    CALCULATION_ERROR = "calculation_error"


@dataclass
class PriceOutcome:
    """Either a priced result or the reason the courier was left out"""

    courier: CourierInfo
    result: Optional[PriceCalculationResult] = None
    reason: Optional[ExclusionReason] = None
    errors: List[str] = field(default_factory=list)

    @property
    def is_priced(self) -> bool:
        return self.result is not None


class RateCalculatorService:

    # ============================================
    # PRICE ENGINE
    # ============================================

    @staticmethod
    def _exclude(
        courier: CourierInfo, reason: ExclusionReason, errors: List[str] = None
    ) -> PriceOutcome:
        return PriceOutcome(courier=courier, reason=reason, errors=errors or [])

    @classmethod
    def evaluate_courier(
        cls,
        params: CalculationParameters,
        courier: CourierInfo,
        pricing: CourierPricing,
        pickup_details: PincodeDetails,
        delivery_details: PincodeDetails,
        now: datetime = None,
    ) -> PriceOutcome:
        # both labels in one result are judged against the same instant
        if now is None:
            now = get_current_time(RATE_CALCULATOR_TIMEZONE)

        try:
            param_validation = RateValidationService.validate_calculation_params(params)
            courier_validation = RateValidationService.validate_courier_data(
                courier, pricing
            )

            if not param_validation.is_valid or not courier_validation.is_valid:
                reason = (
                    ExclusionReason.INVALID_PARAMETERS
                    if not param_validation.is_valid
                    else ExclusionReason.INVALID_COURIER
                )
                param_validation.merge(courier_validation)
                errors = param_validation.messages()
                logger.warning(
                    extra=context_request_data.get(),
                    msg="Validation errors for courier {}: {}".format(
                        courier.name, errors
                    ),
                )
                return cls._exclude(courier, reason, errors)

            # Skip inactive couriers
            if not courier.is_active:
                logger.info(
                    extra=context_request_data.get(),
                    msg="Skipping inactive courier {}".format(courier.name),
                )
                return cls._exclude(courier, ExclusionReason.INACTIVE_COURIER)

            # reverse-pickup couriers only serve reverse orders and vice versa
            if courier.is_reversed_courier != bool(params.is_reversed_order):
                logger.info(
                    extra=context_request_data.get(),
                    msg="Skipping courier {}: reverse flow mismatch".format(
                        courier.name
                    ),
                )
                return cls._exclude(courier, ExclusionReason.REVERSE_FLOW_MISMATCH)

            # Weight calculations
            actual_weight = WeightService.normalize_weight(
                params.weight, params.weight_unit
            )
            volumetric_weight = WeightService.calculate_volumetric_weight(
                params.box_length,
                params.box_width,
                params.box_height,
                params.size_unit,
            )
            min_weight = pricing.weight_slab
            chargeable_weight = WeightService.calculate_chargeable_weight(
                actual_weight, volumetric_weight, min_weight
            )

            # Determine zone and get zone pricing
            zone_match = ZoneService.determine_zone(pickup_details, delivery_details)
            zone_pricing = pricing.get_zone_pricing(zone_match.zone)

            if zone_pricing is None:
                logger.info(
                    extra=context_request_data.get(),
                    msg="Skipping courier {}: no pricing for {}".format(
                        courier.name, zone_match.zone_name
                    ),
                )
                return cls._exclude(courier, ExclusionReason.ZONE_NOT_SERVICED)

            charges = ChargeService.calculate_charges(
                chargeable_weight,
                pricing,
                zone_pricing,
                params.payment_type,
                params.collectable_amount,
            )

            result = PriceCalculationResult(
                courier=courier,
                pricing=pricing,
                base_price=charges.base_price,
                weight_charges=charges.weight_charges,
                cod_charges=charges.cod_charges,
                rto_charges=charges.rto_charges,
                fw_charges=charges.fw_charges,
                total_price=charges.total_price,
                final_weight=chargeable_weight,
                volumetric_weight=volumetric_weight,
                zone=zone_match.zone,
                zone_name=zone_match.zone_name,
                expected_pickup=PickupService.calculate_expected_pickup(
                    courier.pickup_time, now
                ),
                estimated_delivery=PickupService.estimate_for_courier(
                    courier.estimated_delivery_days, now
                ),
                breakdown=PriceBreakdown(
                    actual_weight=actual_weight,
                    volumetric_weight=volumetric_weight,
                    chargeable_weight=chargeable_weight,
                    min_weight=min_weight,
                    weight_increment_ratio=charges.weight_increment_ratio,
                ),
            )

            return PriceOutcome(courier=courier, result=result)

        except Exception as e:
            # one broken courier must never fail the whole quote
            logger.error(
                extra=context_request_data.get(),
                msg="Error calculating price for courier {}: {}\n{}".format(
                    getattr(courier, "name", None), str(e), traceback.format_exc()
                ),
            )
            return cls._exclude(courier, ExclusionReason.CALCULATION_ERROR, [str(e)])

    @classmethod
    def calculate_price(
        cls,
        params: CalculationParameters,
        courier: CourierInfo,
        pricing: CourierPricing,
        pickup_details: PincodeDetails,
        delivery_details: PincodeDetails,
        now: datetime = None,
    ) -> Optional[PriceCalculationResult]:
        """Priced result for one courier, or None when it cannot be offered."""
        return cls.evaluate_courier(
            params, courier, pricing, pickup_details, delivery_details, now
        ).result

    @classmethod
    def evaluate_couriers(
        cls,
        params: CalculationParameters,
        couriers: List[CourierWithPricing],
        pickup_details: PincodeDetails,
        delivery_details: PincodeDetails,
        now: datetime = None,
    ) -> List[PriceOutcome]:
        # one clock reading per batch so every courier sees the same cutoff
        if now is None:
            now = get_current_time(RATE_CALCULATOR_TIMEZONE)

        return [
            cls.evaluate_courier(
                params,
                entry.courier,
                entry.pricing,
                pickup_details,
                delivery_details,
                now,
            )
            for entry in couriers
        ]

    @classmethod
    def calculate_prices_for_couriers(
        cls,
        params: CalculationParameters,
        couriers: List[CourierWithPricing],
        pickup_details: PincodeDetails,
        delivery_details: PincodeDetails,
        now: datetime = None,
    ) -> List[PriceCalculationResult]:
        """
        Price every courier, drop the ones that cannot be offered and rank
        the rest recommended-first, then by price.
        """
        outcomes = cls.evaluate_couriers(
            params, couriers, pickup_details, delivery_details, now
        )
        results = [outcome.result for outcome in outcomes if outcome.is_priced]
        return RateResultService.sort_by_recommended_and_price(results)

    # ============================================
    # API OPERATIONS
    # ============================================

    @staticmethod
    def _apply_sort(
        results: List[PriceCalculationResult], sort: RateSortOrder
    ) -> List[PriceCalculationResult]:
        if sort == RateSortOrder.PRICE_ASC:
            return RateResultService.sort_by_price(results, "asc")
        if sort == RateSortOrder.PRICE_DESC:
            return RateResultService.sort_by_price(results, "desc")
        if sort == RateSortOrder.PICKUP:
            return RateResultService.sort_by_pickup_time(results)
        return RateResultService.sort_by_recommended_and_price(results)

    @classmethod
    def _quote(
        cls, rate_calculator_params: RateCalculatorRequestModel
    ) -> List[PriceCalculationResult]:
        results = cls.calculate_prices_for_couriers(
            rate_calculator_params.params,
            rate_calculator_params.couriers,
            rate_calculator_params.pickup_details,
            rate_calculator_params.delivery_details,
        )
        results = RateResultService.filter_results(
            results, rate_calculator_params.filters
        )
        return cls._apply_sort(results, rate_calculator_params.sort)

    @classmethod
    def get_rate_quotes(
        cls, rate_calculator_params: RateCalculatorRequestModel
    ) -> GenericResponseModel:
        results = cls._quote(rate_calculator_params)

        summary = None
        if rate_calculator_params.include_summary:
            summary = RateResultService.get_price_summary(results)

        logger.info(
            extra=context_request_data.get(),
            msg="Priced {} of {} courier(s)".format(
                len(results), len(rate_calculator_params.couriers)
            ),
        )

        return GenericResponseModel(
            status_code=http.HTTPStatus.OK,
            status=True,
            data=RateCalculatorResponseModel(results=results, summary=summary),
            message="Rates calculated successfully",
        )

    @classmethod
    def get_rate_quotes_by_zone(
        cls, rate_calculator_params: RateCalculatorRequestModel
    ) -> GenericResponseModel:
        results = cls._quote(rate_calculator_params)

        return GenericResponseModel(
            status_code=http.HTTPStatus.OK,
            status=True,
            data=RatesByZoneResponseModel(
                zones=RateResultService.group_by_zone(results)
            ),
            message="Rates grouped by zone successfully",
        )

    @staticmethod
    def get_excess_charges(
        excess_params: ExcessChargeRequestModel,
    ) -> GenericResponseModel:
        zone = ZoneService.resolve_zone(excess_params.zone)
        zone_pricing = excess_params.pricing.get_zone_pricing(zone)

        if zone_pricing is None:
            return GenericResponseModel(
                status_code=http.HTTPStatus.NOT_FOUND,
                status=False,
                message="No pricing found for {}".format(ZoneService.get_zone_name(zone)),
            )

        excess = ChargeService.calculate_excess_charges(
            excess_params.weight_difference, excess_params.pricing, zone_pricing
        )

        return GenericResponseModel(
            status_code=http.HTTPStatus.OK,
            status=True,
            data=excess,
            message="Excess charges calculated successfully",
        )

"""
Rate Result Service

Post-processing over a batch of priced couriers: ranking, filtering,
grouping and summary statistics. Nothing here mutates its input; sorts
return new lists and are stable.
"""

from typing import Dict, List, Optional

from modules.rate_calculator.rate_calculator_config import PICKUP_TODAY
from modules.rate_calculator.rate_calculator_schema import (
    PriceCalculationResult,
    PriceFilters,
    PriceRange,
    PriceSummary,
)


class RateResultService:

    # ============================================
    # SELECTION
    # ============================================

    @staticmethod
    def get_cheapest_option(
        results: List[PriceCalculationResult],
    ) -> Optional[PriceCalculationResult]:
        if not results:
            return None
        return min(results, key=lambda result: result.total_price)

    @staticmethod
    def get_most_expensive_option(
        results: List[PriceCalculationResult],
    ) -> Optional[PriceCalculationResult]:
        if not results:
            return None
        return max(results, key=lambda result: result.total_price)

    # ============================================
    # FILTERING
    # ============================================

    @staticmethod
    def _matches(result: PriceCalculationResult, filters: PriceFilters) -> bool:
        if filters.max_price is not None and result.total_price > filters.max_price:
            return False
        if filters.min_price is not None and result.total_price < filters.min_price:
            return False

        if filters.courier_type and result.courier.type != filters.courier_type:
            return False

        if (
            filters.cod_supported is not None
            and result.pricing.is_cod_applicable != filters.cod_supported
        ):
            return False
        if (
            filters.rto_supported is not None
            and result.pricing.is_rto_applicable != filters.rto_supported
        ):
            return False

        if filters.zone and result.zone != filters.zone:
            return False

        if filters.exclude_courier_ids and result.courier.id in filters.exclude_courier_ids:
            return False

        return True

    @classmethod
    def filter_results(
        cls,
        results: List[PriceCalculationResult],
        filters: Optional[PriceFilters] = None,
    ) -> List[PriceCalculationResult]:
        """All filters are combined with AND; unset filters are ignored."""
        if filters is None:
            return list(results)
        return [result for result in results if cls._matches(result, filters)]

    @classmethod
    def get_cod_supported_couriers(
        cls, results: List[PriceCalculationResult]
    ) -> List[PriceCalculationResult]:
        return cls.filter_results(results, PriceFilters(cod_supported=True))

    @classmethod
    def get_rto_supported_couriers(
        cls, results: List[PriceCalculationResult]
    ) -> List[PriceCalculationResult]:
        return cls.filter_results(results, PriceFilters(rto_supported=True))

    @classmethod
    def get_couriers_in_price_range(
        cls,
        results: List[PriceCalculationResult],
        min_price: float,
        max_price: float,
    ) -> List[PriceCalculationResult]:
        return cls.filter_results(
            results, PriceFilters(min_price=min_price, max_price=max_price)
        )

    # ============================================
    # SORTING
    # ============================================

    @staticmethod
    def sort_by_price(
        results: List[PriceCalculationResult], order: str = "asc"
    ) -> List[PriceCalculationResult]:
        if order not in ("asc", "desc"):
            raise ValueError(f"Invalid sort order: {order}")
        return sorted(
            results, key=lambda result: result.total_price, reverse=order == "desc"
        )

    @staticmethod
    def sort_by_pickup_time(
        results: List[PriceCalculationResult],
    ) -> List[PriceCalculationResult]:
        return sorted(
            results, key=lambda result: 0 if result.expected_pickup == PICKUP_TODAY else 1
        )

    @staticmethod
    def sort_by_recommended_and_price(
        results: List[PriceCalculationResult],
    ) -> List[PriceCalculationResult]:
        """Recommended couriers first, cheapest first within each tier."""
        return sorted(
            results,
            key=lambda result: (not result.courier.recommended, result.total_price),
        )

    # ============================================
    # AGGREGATES
    # ============================================

    @staticmethod
    def group_by_zone(
        results: List[PriceCalculationResult],
    ) -> Dict[str, List[PriceCalculationResult]]:
        groups: Dict[str, List[PriceCalculationResult]] = {}
        for result in results:
            groups.setdefault(result.zone_name, []).append(result)
        return groups

    @classmethod
    def get_price_summary(cls, results: List[PriceCalculationResult]) -> PriceSummary:
        if not results:
            return PriceSummary(
                total_couriers=0,
                serviceable=0,
                average_price=0.0,
                price_range=PriceRange(min=0.0, max=0.0),
            )

        prices = [result.total_price for result in results]

        return PriceSummary(
            total_couriers=len(results),
            serviceable=len(results),
            cheapest=cls.get_cheapest_option(results),
            most_expensive=cls.get_most_expensive_option(results),
            average_price=sum(prices) / len(results),
            price_range=PriceRange(min=min(prices), max=max(prices)),
        )

from datetime import datetime, timedelta
from typing import Optional

from logger import logger
from context_manager.context import context_request_data
from modules.rate_calculator.rate_calculator_config import (
    DEFAULT_PICKUP_HOUR,
    PICKUP_TODAY,
    PICKUP_TOMORROW,
    RATE_CALCULATOR_TIMEZONE,
)
from utils.datetime import get_current_time, localize_datetime


def _local_now(now: Optional[datetime]) -> datetime:
    # cutoffs are wall-clock times in the service timezone
    if now is None:
        return get_current_time(RATE_CALCULATOR_TIMEZONE)
    return localize_datetime(now, RATE_CALCULATOR_TIMEZONE)


def _time_part(parts, index) -> int:
    if index >= len(parts) or not parts[index].strip():
        return 0
    return int(parts[index])


class PickupService:

    @staticmethod
    def get_pickup_cutoff(pickup_time: str, now: datetime = None) -> datetime:
        """
        Today's cutoff as an aware datetime in the service timezone.
        Raises ValueError for a time that cannot be read.
        """
        now = _local_now(now)

        parts = pickup_time.strip().split(":")
        hour = _time_part(parts, 0) or DEFAULT_PICKUP_HOUR
        minute = _time_part(parts, 1)
        second = _time_part(parts, 2)

        # localize the wall time itself so the offset is the cutoff's, not now's
        wall_time = now.replace(
            tzinfo=None, hour=hour, minute=minute, second=second, microsecond=0
        )
        return localize_datetime(wall_time, RATE_CALCULATOR_TIMEZONE)

    @classmethod
    def calculate_expected_pickup(
        cls, pickup_time: Optional[str], now: datetime = None
    ) -> str:
        """
        "Tomorrow" once the courier's daily pickup cutoff (HH:MM[:SS]) has
        passed, otherwise "Today". Missing or unreadable cutoffs mean "Today".
        """
        if not pickup_time:
            return PICKUP_TODAY

        now = _local_now(now)

        try:
            pickup_cutoff = cls.get_pickup_cutoff(pickup_time, now)
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning(
                extra=context_request_data.get(),
                msg="Unreadable pickup time {!r}: {}".format(pickup_time, str(e)),
            )
            return PICKUP_TODAY

        return PICKUP_TOMORROW if pickup_cutoff < now else PICKUP_TODAY

    @staticmethod
    def calculate_estimated_delivery(days: int, now: datetime = None) -> str:
        """
        Delivery date label, e.g. "Monday, January 6".
        """
        now = _local_now(now)

        delivery_date = now + timedelta(days=days)
        return f"{delivery_date:%A, %B} {delivery_date.day}"

    @classmethod
    def estimate_for_courier(
        cls, estimated_delivery_days: Optional[str], now: datetime = None
    ) -> Optional[str]:
        # couriers advertise free-text ETAs ("2-3 days"); only plain day counts are dated
        if not estimated_delivery_days:
            return None

        try:
            days = int(str(estimated_delivery_days).strip())
        except ValueError:
            return None

        if days <= 0:
            return None

        return cls.calculate_estimated_delivery(days, now)

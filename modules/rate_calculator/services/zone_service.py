"""
Zone Service

Classifies a pickup/delivery locality pair into one of the five shipping zones.

Rules are evaluated in order and the first match wins:
1. Same city                       -> Z_A
2. Same state                      -> Z_B
3. Both cities are metros          -> Z_C
4. Either state is in the north east -> Z_E
5. Everything else                 -> Z_D
"""

from typing import NamedTuple

from data.zone_reference import METRO_CITIES, NORTH_EAST_STATES, ZONE_NAMES
from modules.rate_calculator.rate_calculator_schema import PincodeDetails, ZoneCode
from utils.string import normalize_locality


class ZoneMatch(NamedTuple):
    zone: ZoneCode
    zone_name: str


class ZoneService:

    METRO_CITY_KEYS = frozenset(normalize_locality(city) for city in METRO_CITIES)
    NORTH_EAST_STATE_KEYS = frozenset(
        normalize_locality(state) for state in NORTH_EAST_STATES
    )

    @classmethod
    def determine_zone(
        cls,
        pickup_details: PincodeDetails,
        delivery_details: PincodeDetails,
    ) -> ZoneMatch:
        pickup_city = normalize_locality(pickup_details.city)
        delivery_city = normalize_locality(delivery_details.city)
        pickup_state = normalize_locality(pickup_details.state)
        delivery_state = normalize_locality(delivery_details.state)

        if pickup_city == delivery_city:
            return cls._match(ZoneCode.Z_A)

        if pickup_state == delivery_state:
            return cls._match(ZoneCode.Z_B)

        if (
            pickup_city in cls.METRO_CITY_KEYS
            and delivery_city in cls.METRO_CITY_KEYS
        ):
            return cls._match(ZoneCode.Z_C)

        if (
            pickup_state in cls.NORTH_EAST_STATE_KEYS
            or delivery_state in cls.NORTH_EAST_STATE_KEYS
        ):
            return cls._match(ZoneCode.Z_E)

        return cls._match(ZoneCode.Z_D)

    @staticmethod
    def get_zone_name(zone: ZoneCode) -> str:
        return ZONE_NAMES[ZoneCode(zone).value]

    @staticmethod
    def get_zone_code(zone_name: str) -> ZoneCode:
        """
        Map a zone display name ("Zone C") back to its code.
        Unrecognised names fall back to Z_E.
        """
        for code, name in ZONE_NAMES.items():
            if name == zone_name:
                return ZoneCode(code)
        return ZoneCode.Z_E

    @classmethod
    def resolve_zone(cls, value: str) -> ZoneCode:
        """Accept either a zone code ("Z_C") or a display name ("Zone C")."""
        if value in ZONE_NAMES:
            return ZoneCode(value)
        return cls.get_zone_code(value)

    @classmethod
    def _match(cls, zone: ZoneCode) -> ZoneMatch:
        return ZoneMatch(zone=zone, zone_name=cls.get_zone_name(zone))

"""
Tests for zone classification.

Run with: pytest modules/rate_calculator/tests/test_zone_service.py -v
"""

import pytest

from modules.rate_calculator.rate_calculator_schema import PincodeDetails, ZoneCode
from modules.rate_calculator.services import ZoneService


def _place(city, state):
    return PincodeDetails(city=city, state=state)


# =============================================================================
# DETERMINE ZONE
# =============================================================================

class TestDetermineZone:
    """Tests for the ordered zone rules."""

    def test_same_city(self, mumbai, mumbai_andheri):
        match = ZoneService.determine_zone(mumbai, mumbai_andheri)
        assert match.zone == ZoneCode.Z_A
        assert match.zone_name == "Zone A"

    def test_same_city_beats_north_east(self, guwahati):
        assert ZoneService.determine_zone(guwahati, guwahati).zone == ZoneCode.Z_A

    def test_same_state_beats_metro(self, mumbai, pune):
        """Mumbai and Pune are both metros but share a state."""
        assert ZoneService.determine_zone(mumbai, pune).zone == ZoneCode.Z_B

    def test_metro_to_metro(self, mumbai, delhi):
        match = ZoneService.determine_zone(mumbai, delhi)
        assert match.zone == ZoneCode.Z_C
        assert match.zone_name == "Zone C"

    def test_north_east_delivery(self, mumbai, guwahati):
        assert ZoneService.determine_zone(mumbai, guwahati).zone == ZoneCode.Z_E

    def test_north_east_pickup(self, guwahati, patna):
        assert ZoneService.determine_zone(guwahati, patna).zone == ZoneCode.Z_E

    def test_rest_of_india(self, mumbai, patna):
        assert ZoneService.determine_zone(mumbai, patna).zone == ZoneCode.Z_D

    def test_metro_rule_precedes_north_east(self):
        """Both cities metro wins even when a state is in the north east."""
        match = ZoneService.determine_zone(
            _place("Mumbai", "Maharashtra"), _place("Delhi", "Assam")
        )
        assert match.zone == ZoneCode.Z_C

    def test_comparison_ignores_case_and_spacing(self):
        match = ZoneService.determine_zone(
            _place("  mumbai ", "MAHARASHTRA"), _place("Mumbai", "Maharashtra")
        )
        assert match.zone == ZoneCode.Z_A

    def test_metro_lookup_ignores_case(self):
        match = ZoneService.determine_zone(
            _place("mumbai", "maharashtra"), _place("KOLKATA", "west bengal")
        )
        assert match.zone == ZoneCode.Z_C

    def test_equal_blank_cities_are_same_city(self):
        """Equal city keys always win, even when both are blank."""
        match = ZoneService.determine_zone(_place("", "Assam"), _place("", "Bihar"))
        assert match.zone == ZoneCode.Z_A

    def test_equal_blank_states_are_same_state(self):
        match = ZoneService.determine_zone(_place("Guwahati", ""), _place("Patna", ""))
        assert match.zone == ZoneCode.Z_B

    def test_whitespace_only_city_matches_blank_city(self):
        match = ZoneService.determine_zone(_place("   ", "Assam"), _place("", "Bihar"))
        assert match.zone == ZoneCode.Z_A

    def test_symmetric(self, mumbai, delhi, guwahati, patna, pune):
        places = [mumbai, delhi, guwahati, patna, pune]
        for origin in places:
            for destination in places:
                assert (
                    ZoneService.determine_zone(origin, destination).zone
                    == ZoneService.determine_zone(destination, origin).zone
                )


# =============================================================================
# ZONE NAMES
# =============================================================================

class TestZoneNames:
    """Tests for code <-> display name mapping."""

    @pytest.mark.parametrize(
        "code,name",
        [
            (ZoneCode.Z_A, "Zone A"),
            (ZoneCode.Z_B, "Zone B"),
            (ZoneCode.Z_C, "Zone C"),
            (ZoneCode.Z_D, "Zone D"),
            (ZoneCode.Z_E, "Zone E"),
        ],
    )
    def test_name_and_code_agree(self, code, name):
        assert ZoneService.get_zone_name(code) == name
        assert ZoneService.get_zone_code(name) == code

    def test_unknown_name_falls_back_to_z_e(self):
        assert ZoneService.get_zone_code("Zone Q") == ZoneCode.Z_E

    def test_resolve_accepts_code_or_name(self):
        assert ZoneService.resolve_zone("Z_B") == ZoneCode.Z_B
        assert ZoneService.resolve_zone("Zone D") == ZoneCode.Z_D

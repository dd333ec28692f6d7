from datetime import datetime

import pytest
import pytz

from modules.rate_calculator.rate_calculator_schema import (
    CalculationParameters,
    CourierInfo,
    CourierPricing,
    CourierWithPricing,
    PincodeDetails,
    PriceBreakdown,
    PriceCalculationResult,
    ZoneCode,
    ZonePricing,
)


# =============================================================================
# LOCALITIES
# =============================================================================

@pytest.fixture
def mumbai():
    return PincodeDetails(city="Mumbai", state="Maharashtra", pincode="400001")


@pytest.fixture
def mumbai_andheri():
    return PincodeDetails(city="Mumbai", state="Maharashtra", pincode="400053")


@pytest.fixture
def pune():
    return PincodeDetails(city="Pune", state="Maharashtra", pincode="411001")


@pytest.fixture
def delhi():
    return PincodeDetails(city="Delhi", state="Delhi", pincode="110001")


@pytest.fixture
def guwahati():
    return PincodeDetails(city="Guwahati", state="Assam", pincode="781001")


@pytest.fixture
def patna():
    return PincodeDetails(city="Patna", state="Bihar", pincode="800001")


# =============================================================================
# COURIERS & PRICING
# =============================================================================

def _make_zone_table(shift=0.0):
    """Five-zone rate table; Z_E carries its own RTO rates."""
    return [
        ZonePricing(zone=ZoneCode.Z_A, base_price=30 + shift, increment_price=25),
        ZonePricing(zone=ZoneCode.Z_B, base_price=35 + shift, increment_price=30),
        ZonePricing(zone=ZoneCode.Z_C, base_price=45 + shift, increment_price=40),
        ZonePricing(zone=ZoneCode.Z_D, base_price=50 + shift, increment_price=45),
        ZonePricing(
            zone=ZoneCode.Z_E,
            base_price=70 + shift,
            increment_price=60,
            rto_base_price=65,
            rto_increment_price=55,
            is_rto_same_as_fw=False,
        ),
    ]


def _make_pricing(**overrides):
    values = {
        "weight_slab": 0.5,
        "increment_weight": 0.5,
        "cod_charge_hard": 20,
        "cod_charge_percent": 2,
        "is_cod_applicable": True,
        "is_rto_applicable": True,
        "is_fw_applicable": True,
        "is_cod_reversal_applicable": False,
        "zone_pricing": _make_zone_table(),
    }
    values.update(overrides)
    return CourierPricing(**values)


def _make_courier(**overrides):
    values = {
        "id": "c1",
        "name": "Delhivery Surface",
        "courier_code": "DELHIVERY_S",
        "is_active": True,
        "is_reversed_courier": False,
        "recommended": False,
        "type": "surface",
    }
    values.update(overrides)
    return CourierInfo(**values)


def _make_params(**overrides):
    values = {
        "weight": 1.2,
        "weight_unit": "kg",
        "box_length": 10,
        "box_width": 10,
        "box_height": 10,
        "size_unit": "cm",
        "payment_type": "prepaid",
        "pickup_pincode": "400001",
        "delivery_pincode": "110001",
    }
    values.update(overrides)
    return CalculationParameters(**values)


def _make_result(
    courier_id="c1",
    total_price=100.0,
    recommended=False,
    zone=ZoneCode.Z_C,
    zone_name="Zone C",
    expected_pickup="Today",
    courier_type="surface",
    is_cod_applicable=True,
    is_rto_applicable=True,
):
    courier = _make_courier(
        id=courier_id, name=f"Courier {courier_id}", recommended=recommended, type=courier_type
    )
    pricing = _make_pricing(
        is_cod_applicable=is_cod_applicable, is_rto_applicable=is_rto_applicable
    )
    return PriceCalculationResult(
        courier=courier,
        pricing=pricing,
        base_price=total_price,
        weight_charges=0.0,
        cod_charges=0.0,
        rto_charges=total_price,
        fw_charges=total_price,
        total_price=total_price,
        final_weight=0.5,
        volumetric_weight=0.2,
        zone=zone,
        zone_name=zone_name,
        expected_pickup=expected_pickup,
        breakdown=PriceBreakdown(
            actual_weight=0.5,
            volumetric_weight=0.2,
            chargeable_weight=0.5,
            min_weight=0.5,
            weight_increment_ratio=0,
        ),
    )


@pytest.fixture
def make_zone_table():
    return _make_zone_table


@pytest.fixture
def make_pricing():
    return _make_pricing


@pytest.fixture
def make_courier():
    return _make_courier


@pytest.fixture
def make_params():
    return _make_params


@pytest.fixture
def make_result():
    return _make_result


@pytest.fixture
def pricing():
    return _make_pricing()


@pytest.fixture
def courier():
    return _make_courier()


@pytest.fixture
def params():
    """1.2 kg prepaid parcel in a 10 cm cube (volumetric 0.2 kg)."""
    return _make_params()


@pytest.fixture
def cod_params():
    return _make_params(payment_type="cod", collectable_amount=500)


@pytest.fixture
def courier_with_pricing(courier, pricing):
    return CourierWithPricing(courier=courier, pricing=pricing)


# =============================================================================
# CLOCK
# =============================================================================

@pytest.fixture
def fixed_now():
    """Monday 6 January 2025, 14:30 IST."""
    return pytz.timezone("Asia/Kolkata").localize(datetime(2025, 1, 6, 14, 30, 0))

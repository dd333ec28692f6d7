from enum import Enum
from typing import Optional, List, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

# data
from data.zone_reference import ZONE_NAMES


class WeightUnit(str, Enum):
    KG = "kg"
    G = "g"


class SizeUnit(str, Enum):
    CM = "cm"
    INCH = "inch"


class PaymentType(str, Enum):
    PREPAID = "prepaid"
    COD = "cod"


class ZoneCode(str, Enum):
    Z_A = "Z_A"
    Z_B = "Z_B"
    Z_C = "Z_C"
    Z_D = "Z_D"
    Z_E = "Z_E"


# legacy numeric payment codes still sent by older clients
LEGACY_PAYMENT_TYPES = {0: PaymentType.PREPAID, 1: PaymentType.COD}


def _to_str(value):
    # pincodes and courier ids arrive as numbers from some callers
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


# ============================================
# INPUT MODELS
# ============================================


class CalculationParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    weight: float
    weight_unit: WeightUnit = WeightUnit.KG
    box_length: float
    box_width: float
    box_height: float
    size_unit: SizeUnit = SizeUnit.CM
    payment_type: PaymentType = PaymentType.PREPAID
    collectable_amount: Optional[float] = None
    pickup_pincode: str
    delivery_pincode: str
    is_reversed_order: bool = False

    @field_validator("payment_type", mode="before")
    @classmethod
    def coerce_payment_type(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return LEGACY_PAYMENT_TYPES.get(value, value)
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("pickup_pincode", "delivery_pincode", mode="before")
    @classmethod
    def coerce_pincode(cls, value):
        return _to_str(value)


class ZonePricing(BaseModel):
    zone: ZoneCode
    base_price: float
    increment_price: float = 0.0
    rto_base_price: Optional[float] = None
    rto_increment_price: Optional[float] = None
    is_rto_same_as_fw: bool = True


class CourierPricing(BaseModel):
    weight_slab: float
    increment_weight: float
    cod_charge_hard: float = 0.0
    cod_charge_percent: float = 0.0
    is_cod_applicable: bool = True
    is_rto_applicable: bool = True
    is_fw_applicable: bool = True
    is_cod_reversal_applicable: bool = False
    zone_pricing: List[ZonePricing] = Field(default_factory=list)

    def get_zone_pricing(self, zone: ZoneCode) -> Optional[ZonePricing]:
        for zone_pricing in self.zone_pricing:
            if zone_pricing.zone == zone:
                return zone_pricing
        return None


class CourierInfo(BaseModel):
    id: str
    name: str
    courier_code: Optional[str] = None
    nickname: Optional[str] = None
    is_active: bool = True
    is_reversed_courier: bool = False
    pickup_time: Optional[str] = None
    rating: Optional[float] = None
    estimated_delivery_days: Optional[str] = None
    etd: Optional[str] = None
    type: Optional[str] = None
    pickup_performance: Optional[float] = None
    rto_performance: Optional[float] = None
    delivery_performance: Optional[float] = None
    recommended: bool = False

    @field_validator("id", "estimated_delivery_days", mode="before")
    @classmethod
    def coerce_to_str(cls, value):
        return _to_str(value)


class CourierWithPricing(BaseModel):
    courier: CourierInfo
    pricing: CourierPricing


class PincodeDetails(BaseModel):
    city: str
    state: str
    pincode: Optional[str] = None

    @field_validator("pincode", mode="before")
    @classmethod
    def coerce_pincode(cls, value):
        return _to_str(value)


class PriceFilters(BaseModel):
    max_price: Optional[float] = None
    min_price: Optional[float] = None
    courier_type: Optional[str] = None
    cod_supported: Optional[bool] = None
    rto_supported: Optional[bool] = None
    zone: Optional[ZoneCode] = None
    exclude_courier_ids: Optional[List[str]] = None

    @field_validator("zone", mode="before")
    @classmethod
    def accept_zone_name(cls, value):
        # "Zone B" is as good as "Z_B"
        for code, name in ZONE_NAMES.items():
            if value == name:
                return code
        return value

    @field_validator("exclude_courier_ids", mode="before")
    @classmethod
    def coerce_courier_ids(cls, value):
        if isinstance(value, list):
            return [_to_str(item) for item in value]
        return value


# ============================================
# OUTPUT MODELS
# ============================================


class PriceBreakdown(BaseModel):
    actual_weight: float
    volumetric_weight: float
    chargeable_weight: float
    min_weight: float
    weight_increment_ratio: int


class PriceCalculationResult(BaseModel):
    courier: CourierInfo
    pricing: CourierPricing
    base_price: float
    weight_charges: float
    cod_charges: float
    rto_charges: float
    fw_charges: float
    total_price: float
    final_weight: float
    volumetric_weight: float
    zone: ZoneCode
    zone_name: str
    expected_pickup: str
    estimated_delivery: Optional[str] = None
    breakdown: PriceBreakdown


class PriceRange(BaseModel):
    min: float = 0.0
    max: float = 0.0


class PriceSummary(BaseModel):
    total_couriers: int = 0
    serviceable: int = 0
    cheapest: Optional[PriceCalculationResult] = None
    most_expensive: Optional[PriceCalculationResult] = None
    average_price: float = 0.0
    price_range: PriceRange = Field(default_factory=PriceRange)


class ExcessCharges(BaseModel):
    fw_excess: float = 0.0
    rto_excess: float = 0.0


# ============================================
# API MODELS
# ============================================


class RateSortOrder(str, Enum):
    RECOMMENDED = "recommended"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    PICKUP = "pickup"


class RateCalculatorRequestModel(BaseModel):
    params: CalculationParameters
    couriers: List[CourierWithPricing]
    pickup_details: PincodeDetails
    delivery_details: PincodeDetails
    filters: Optional[PriceFilters] = None
    sort: RateSortOrder = RateSortOrder.RECOMMENDED
    include_summary: bool = False


class RateCalculatorResponseModel(BaseModel):
    results: List[PriceCalculationResult]
    summary: Optional[PriceSummary] = None


class RatesByZoneResponseModel(BaseModel):
    zones: Dict[str, List[PriceCalculationResult]]


class ExcessChargeRequestModel(BaseModel):
    weight_difference: float
    zone: str
    pricing: CourierPricing

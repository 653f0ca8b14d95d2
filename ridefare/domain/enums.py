"""Domain enumerations and per-category pricing constants."""

import enum
from dataclasses import dataclass


class RideCategory(str, enum.Enum):
    BIKE = "bike"  # two-wheeler
    CAR = "car"  # four-wheeler


@dataclass(frozen=True)
class PricingPolicy:
    base_fare: float
    rate_per_km: float
    booking_fee: float
    minimum_fare: float


# Fixed tariff: maps category -> its pricing constants
PRICING_POLICIES: dict[RideCategory, PricingPolicy] = {
    RideCategory.BIKE: PricingPolicy(
        base_fare=8.0, rate_per_km=7.0, booking_fee=2.0, minimum_fare=25.0
    ),
    RideCategory.CAR: PricingPolicy(
        base_fare=25.0, rate_per_km=10.0, booking_fee=6.0, minimum_fare=50.0
    ),
}

# Tokens accepted at the prompt, lower-cased
CATEGORY_ALIASES: dict[str, RideCategory] = {
    "bike": RideCategory.BIKE,
    "two-wheeler": RideCategory.BIKE,
    "car": RideCategory.CAR,
    "four-wheeler": RideCategory.CAR,
}

"""
Fare Pricing Engine
===================

Formula
-------
Distance_Fare = Distance x Rate_Per_KM x Surge_Multiplier
Total_Fare    = max(Base_Fare + Distance_Fare + Booking_Fee, Minimum_Fare)

* **Surge_Multiplier** = 1.0 + 0.15 x (demand_level - 1), plus a flat 0.05
  for trips longer than 12 km.  Range: 1.0 .. 1.65.
* Surge is applied to the distance component only.

Each ride category contributes its four constants (see
``enums.PRICING_POLICIES``); the formula itself is shared.

Complexity: O(1) per fare.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import PricingPolicy

DEMAND_STEP = 0.15
LONG_TRIP_THRESHOLD_KM = 12.0
LONG_TRIP_SURGE = 0.05


# ── Value Object ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class FareDetails:
    base_fare: float
    distance_fare: float
    booking_fee: float
    surge_multiplier: float
    minimum_fare: float
    subtotal: float
    total_fare: float

    @property
    def is_minimum_fare_applied(self) -> bool:
        return self.subtotal < self.minimum_fare


# ── Pricing ───────────────────────────────────────────────────────────


def calculate_surge_multiplier(distance_km: float, demand_level: int) -> float:
    surge = 1.0 + DEMAND_STEP * (demand_level - 1)
    if distance_km > LONG_TRIP_THRESHOLD_KM:
        surge += LONG_TRIP_SURGE
    return surge


def build_fare(
    policy: PricingPolicy, distance_km: float, demand_level: int
) -> FareDetails:
    """Return the full breakdown for one trip under *policy*."""
    surge = calculate_surge_multiplier(distance_km, demand_level)
    distance_fare = distance_km * policy.rate_per_km * surge
    subtotal = policy.base_fare + distance_fare + policy.booking_fee
    return FareDetails(
        base_fare=policy.base_fare,
        distance_fare=distance_fare,
        booking_fee=policy.booking_fee,
        surge_multiplier=surge,
        minimum_fare=policy.minimum_fare,
        subtotal=subtotal,
        total_fare=max(subtotal, policy.minimum_fare),
    )

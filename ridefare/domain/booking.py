"""Booking boundary: category dispatch, ride construction and fare queries."""

from __future__ import annotations

from typing import Optional, Union

from .entities import DEFAULT_DEMAND_LEVEL, Ride
from .enums import CATEGORY_ALIASES, RideCategory
from .pricing import FareDetails


class InvalidRideType(Exception):
    """Raised when a ride category token is not one we offer."""


def resolve_category(token: str) -> RideCategory:
    """Map a user-supplied token (case-insensitive) to a ride category."""
    category = CATEGORY_ALIASES.get(token.strip().lower())
    if category is None:
        raise InvalidRideType(
            "We only offer bike and car rides at the moment. "
            f"'{token.strip()}' is not a valid option."
        )
    return category


def new_ride(
    category: Union[RideCategory, str],
    driver_name: str,
    vehicle_number: str,
    distance: float,
    demand_level: Optional[int] = None,
) -> Ride:
    if not isinstance(category, RideCategory):
        category = resolve_category(category)
    if demand_level is None:
        demand_level = DEFAULT_DEMAND_LEVEL
    return Ride(
        category=category,
        driver_name=driver_name,
        vehicle_number=vehicle_number,
        distance=distance,
        demand_level=demand_level,
    )


def estimate_fare(ride: Ride) -> FareDetails:
    return ride.estimate_fare()


def calculate_fare(ride: Ride) -> float:
    return ride.calculate_fare()

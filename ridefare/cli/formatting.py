"""Console rendering of a fare breakdown."""

from __future__ import annotations

from ridefare.domain.entities import Ride
from ridefare.domain.pricing import FareDetails


def format_currency(amount: float, symbol: str = "₹", decimals: int = 2) -> str:
    """Return *amount* as e.g. ``₹1,234.50`` (negatives as ``-₹5.00``)."""
    rounded = round(amount, decimals)
    if rounded == 0:
        rounded = 0.0  # avoid "-0.00"
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.{decimals}f}"


def render_breakdown(
    ride: Ride, fare: FareDetails, symbol: str = "₹", decimals: int = 2
) -> list[str]:
    def money(amount: float) -> str:
        return format_currency(amount, symbol, decimals)

    lines = [
        "--- Your Ride Details ---",
        f"Driver: {ride.driver_name}",
        f"Vehicle Number: {ride.vehicle_number}",
        f"Distance: {ride.distance:.2f} km",
        f"Demand Level: {ride.demand_level}",
        f"Surge Multiplier: {fare.surge_multiplier:.2f}x",
        f"Base Fare: {money(fare.base_fare)}",
        f"Distance Fare: {money(fare.distance_fare)}",
        f"Booking Fee: {money(fare.booking_fee)}",
        f"Subtotal: {money(fare.subtotal)}",
    ]
    if fare.is_minimum_fare_applied:
        lines.append(f"Minimum fare of {money(fare.minimum_fare)} applied.")
    lines.append(f"Estimated Fare: {money(fare.total_fare)}")
    return lines

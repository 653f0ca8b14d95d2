"""Shared test fixtures."""

import io

import pytest

from ridefare.domain.booking import new_ride
from ridefare.domain.enums import RideCategory


@pytest.fixture
def make_ride():
    """Factory for rides with valid defaults; override any field by keyword."""

    def _make(
        category=RideCategory.BIKE,
        driver_name="TestDriver",
        vehicle_number="BK0001",
        distance=5.0,
        demand_level=None,
    ):
        return new_ride(category, driver_name, vehicle_number, distance, demand_level)

    return _make


@pytest.fixture
def console():
    """Return a ``(feed, stdout)`` pair: ``feed(*answers)`` builds stdin."""
    stdout = io.StringIO()

    def feed(*answers: str) -> io.StringIO:
        return io.StringIO("".join(f"{a}\n" for a in answers))

    return feed, stdout

"""
Driver directory stub.

Assumption
----------
There is no dispatch backend, so every category is served by one fixed
driver.  In production this module would be replaced by a client that
looks up the nearest available driver.
"""

from __future__ import annotations

from dataclasses import dataclass

from ridefare.domain.enums import RideCategory


@dataclass(frozen=True)
class DriverAssignment:
    driver_name: str
    vehicle_number: str


_ROSTER: dict[RideCategory, DriverAssignment] = {
    RideCategory.BIKE: DriverAssignment("Amit Sharma", "BK1234"),
    RideCategory.CAR: DriverAssignment("Priya Singh", "CR5678"),
}


def assign_driver(category: RideCategory) -> DriverAssignment:
    return _ROSTER[category]

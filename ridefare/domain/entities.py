"""
Domain entities with business logic.

Patterns used
-------------
- ``Ride`` is one entity for every category; the category carries its
  pricing constants as data (``enums.PRICING_POLICIES``) so the shared
  formula in ``pricing.build_fare`` is the only fare code path.
- The fare breakdown is computed lazily on the first ``estimate_fare``
  call and cached on the instance (compute-once, guarded by a lock).
"""

from __future__ import annotations

import logging
import math
import threading
from dataclasses import dataclass

from .enums import PRICING_POLICIES, PricingPolicy, RideCategory
from .pricing import FareDetails, build_fare

logger = logging.getLogger(__name__)

MIN_DEMAND_LEVEL = 1
MAX_DEMAND_LEVEL = 5
DEFAULT_DEMAND_LEVEL = 3


class InvalidArgument(ValueError):
    """Raised when a ride is constructed from invalid parameters."""


# ── Entities ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Ride:
    category: RideCategory
    driver_name: str
    vehicle_number: str
    distance: float
    demand_level: int = DEFAULT_DEMAND_LEVEL

    def __post_init__(self) -> None:
        if not self.driver_name or not self.driver_name.strip():
            raise InvalidArgument("Driver name cannot be empty.")
        if not self.vehicle_number or not self.vehicle_number.strip():
            raise InvalidArgument("Vehicle number cannot be empty.")
        if not math.isfinite(self.distance) or self.distance <= 0:
            raise InvalidArgument("Distance must be greater than 0.")
        if (
            isinstance(self.demand_level, bool)
            or not isinstance(self.demand_level, int)
            or not MIN_DEMAND_LEVEL <= self.demand_level <= MAX_DEMAND_LEVEL
        ):
            raise InvalidArgument(
                f"Demand level must be between {MIN_DEMAND_LEVEL} and "
                f"{MAX_DEMAND_LEVEL}. Received: {self.demand_level}"
            )
        # Cache and its guard live outside the dataclass fields
        object.__setattr__(self, "_fare", None)
        object.__setattr__(self, "_fare_lock", threading.Lock())

    def __getstate__(self) -> dict:
        state = self.__dict__.copy()
        del state["_fare_lock"]
        return state

    def __setstate__(self, state: dict) -> None:
        self.__dict__.update(state)
        object.__setattr__(self, "_fare_lock", threading.Lock())

    @property
    def policy(self) -> PricingPolicy:
        return PRICING_POLICIES[self.category]

    def estimate_fare(self) -> FareDetails:
        """Return the fare breakdown, computing it on first use only."""
        if self._fare is None:
            with self._fare_lock:
                if self._fare is None:
                    fare = build_fare(self.policy, self.distance, self.demand_level)
                    object.__setattr__(self, "_fare", fare)
                    logger.debug(
                        "Fare computed for %s ride (%.2f km, demand=%d): %s",
                        self.category.value,
                        self.distance,
                        self.demand_level,
                        fare,
                    )
        return self._fare

    def calculate_fare(self) -> float:
        return self.estimate_fare().total_fare

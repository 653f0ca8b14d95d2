"""Unit tests for the fare pricing engine."""

import pytest

from ridefare.domain.enums import PRICING_POLICIES, RideCategory
from ridefare.domain.pricing import FareDetails, build_fare, calculate_surge_multiplier

BIKE = PRICING_POLICIES[RideCategory.BIKE]
CAR = PRICING_POLICIES[RideCategory.CAR]


class TestSurgeMultiplier:
    def test_calm_short_trip_has_no_surge(self):
        assert calculate_surge_multiplier(5.0, 1) == 1.0

    def test_peak_demand(self):
        assert calculate_surge_multiplier(5.0, 5) == pytest.approx(1.6)

    def test_peak_demand_long_trip_is_the_cap(self):
        assert calculate_surge_multiplier(20.0, 5) == pytest.approx(1.65)

    def test_exactly_twelve_km_is_not_long(self):
        assert calculate_surge_multiplier(12.0, 1) == 1.0

    @pytest.mark.parametrize("demand", [1, 2, 3, 4, 5])
    def test_long_trip_adds_flat_bump(self, demand):
        short = calculate_surge_multiplier(12.0, demand)
        long = calculate_surge_multiplier(12.01, demand)
        assert long - short == pytest.approx(0.05)

    @pytest.mark.parametrize("distance", [0.5, 12.0, 40.0])
    def test_monotonic_in_demand_and_within_range(self, distance):
        surges = [calculate_surge_multiplier(distance, d) for d in range(1, 6)]
        assert surges == sorted(surges)
        assert all(1.0 <= s <= 1.65 + 1e-9 for s in surges)


class TestBuildFare:
    def test_scenario_bike_calm(self):
        fare = build_fare(BIKE, 5.0, 1)
        assert fare.surge_multiplier == 1.0
        assert fare.distance_fare == pytest.approx(35.0)
        assert fare.subtotal == pytest.approx(45.0)
        assert fare.total_fare == pytest.approx(45.0)
        assert not fare.is_minimum_fare_applied

    def test_scenario_car_moderate_demand(self):
        fare = build_fare(CAR, 3.5, 3)
        assert fare.surge_multiplier == pytest.approx(1.30)
        assert fare.distance_fare == pytest.approx(45.5)
        assert fare.subtotal == pytest.approx(76.5)
        assert fare.total_fare == pytest.approx(76.5)

    def test_scenario_short_bike_hits_minimum(self):
        fare = build_fare(BIKE, 0.5, 1)
        assert fare.subtotal == pytest.approx(13.5)
        assert fare.total_fare == 25.0
        assert fare.is_minimum_fare_applied

    def test_surge_applies_to_distance_only(self):
        fare = build_fare(CAR, 10.0, 5)  # surge 1.6
        assert fare.base_fare == 25.0
        assert fare.booking_fee == 6.0
        assert fare.distance_fare == pytest.approx(160.0)

    def test_constants_are_copied_from_policy(self):
        fare = build_fare(CAR, 4.0, 1)
        assert (fare.base_fare, fare.booking_fee, fare.minimum_fare) == (
            25.0,
            6.0,
            50.0,
        )

    @pytest.mark.parametrize("policy", [BIKE, CAR])
    @pytest.mark.parametrize("distance", [0.1, 1.0, 2.5, 7.0, 12.5, 100.0])
    @pytest.mark.parametrize("demand", [1, 3, 5])
    def test_floor_properties(self, policy, distance, demand):
        fare = build_fare(policy, distance, demand)
        assert fare.total_fare >= fare.minimum_fare
        assert fare.total_fare >= fare.subtotal
        assert (fare.total_fare == fare.subtotal) == (not fare.is_minimum_fare_applied)


class TestFareDetails:
    def test_is_frozen(self):
        fare = build_fare(BIKE, 5.0, 1)
        with pytest.raises(AttributeError):
            fare.total_fare = 0.0

    def test_minimum_flag_is_strict(self):
        fare = FareDetails(
            base_fare=8.0,
            distance_fare=15.0,
            booking_fee=2.0,
            surge_multiplier=1.0,
            minimum_fare=25.0,
            subtotal=25.0,
            total_fare=25.0,
        )
        assert not fare.is_minimum_fare_applied

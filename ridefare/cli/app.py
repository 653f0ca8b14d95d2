"""
Interactive fare estimator.

* Asks for the ride type, the distance and the current demand level.
* Prints the fare breakdown, or a single error line for bad input.
* Exit status: 0 on success, 1 when the input was rejected.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO, get_args

from ridefare.cli.formatting import render_breakdown
from ridefare.config import LogLevel, settings
from ridefare.domain.booking import InvalidRideType, new_ride, resolve_category
from ridefare.domain.entities import InvalidArgument
from ridefare.infrastructure.drivers import assign_driver

logger = logging.getLogger(__name__)

RIDE_PROMPT = "Choose your ride (bike or car): "
DISTANCE_PROMPT = "How many kilometers do you want to travel? "
DEMAND_PROMPT = "How busy is it right now? Demand level 1-5 [{default}]: "


class InvalidNumber(ValueError):
    def __init__(self, field_name: str):
        super().__init__(f"Please enter a valid number for {field_name}.")


def _ask(prompt: str, stdin: TextIO, stdout: TextIO) -> str:
    stdout.write(prompt)
    stdout.flush()
    return stdin.readline().strip()


def _parse_distance(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise InvalidNumber("distance") from None


def _parse_demand(text: str, default: int) -> int:
    if not text:
        return default
    try:
        return int(text)
    except ValueError:
        raise InvalidNumber("demand level") from None


def run_session(
    stdin: TextIO,
    stdout: TextIO,
    *,
    currency_symbol: Optional[str] = None,
    currency_decimals: Optional[int] = None,
    default_demand_level: Optional[int] = None,
) -> int:
    """Run one prompt/estimate cycle against the given streams."""
    symbol = settings.currency_symbol if currency_symbol is None else currency_symbol
    decimals = (
        settings.currency_decimals if currency_decimals is None else currency_decimals
    )
    default_demand = (
        settings.default_demand_level
        if default_demand_level is None
        else default_demand_level
    )

    def say(line: str = "") -> None:
        stdout.write(line + "\n")

    say()
    say("Welcome to Ride Sharing!")
    say("Book your ride quickly and travel comfortably.")
    say()
    try:
        category = resolve_category(_ask(RIDE_PROMPT, stdin, stdout))
        distance = _parse_distance(_ask(DISTANCE_PROMPT, stdin, stdout))
        demand = _parse_demand(
            _ask(DEMAND_PROMPT.format(default=default_demand), stdin, stdout),
            default_demand,
        )
        driver = assign_driver(category)
        ride = new_ride(
            category, driver.driver_name, driver.vehicle_number, distance, demand
        )
        fare = ride.estimate_fare()
    except InvalidRideType as exc:
        logger.info("Rejected ride type: %s", exc)
        say(str(exc))
        return 1
    except (InvalidArgument, InvalidNumber) as exc:
        logger.info("Rejected ride input: %s", exc)
        say(f"Error: {exc}")
        return 1

    say()
    for line in render_breakdown(ride, fare, symbol, decimals):
        say(line)
    say("Enjoy your ride!")
    say()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Estimate the fare for a bike or car ride."
    )
    parser.add_argument(
        "--currency-symbol",
        default=None,
        help=f"Symbol printed before amounts (default: {settings.currency_symbol!r})",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=get_args(LogLevel),
        type=str.upper,
        help="Logging verbosity (default: %(default)s)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level)
    return run_session(sys.stdin, sys.stdout, currency_symbol=args.currency_symbol)

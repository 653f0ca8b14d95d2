"""
Ride Fare Estimator
===================
Entry point. Run with: python main.py [--currency-symbol $] [--log-level DEBUG]
"""

import sys

from ridefare.cli.app import main

if __name__ == "__main__":
    sys.exit(main())

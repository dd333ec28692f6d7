"""
Rate Calculator Configuration
Runtime settings come from the environment (loaded from .env in main.py),
everything else is a fixed courier-industry constant.
"""

import os

# Clock used to decide whether today's pickup cutoff has passed
RATE_CALCULATOR_TIMEZONE = os.getenv("RATE_CALCULATOR_TIMEZONE", "Asia/Kolkata")

# slowapi limit string for the public calculator endpoint
RATE_CALCULATOR_RATE_LIMIT = os.getenv("RATE_CALCULATOR_RATE_LIMIT", "120/minute")

# Volumetric divisors: L x W x H / divisor = kg
VOLUMETRIC_DIVISOR_CM = 5000
VOLUMETRIC_DIVISOR_INCH = 5

# Fallback bracket when a courier has no increment weight configured
DEFAULT_INCREMENT_WEIGHT = 0.5

# Pickup labels
PICKUP_TODAY = "Today"
PICKUP_TOMORROW = "Tomorrow"

# Hour assumed when a pickup cutoff has no (or a zero) hour component
DEFAULT_PICKUP_HOUR = 12

"""
Numerical constants and defaults for the option calculator.

This module gathers the tolerances used by diagnostics and tests, the
default strike-sweep grid and the default inputs shown by the interfaces.
"""

# Arbitrage diagnostics tolerances
ARBITRAGE_TOLERANCE = 1e-4  # $0.0001 tolerance for bounds and monotonicity checks
PARITY_TOLERANCE = 1e-9  # Relative put-call parity tolerance

# Strike sweep grid (K-30 ... K+30 in $1 steps)
DEFAULT_SWEEP_HALF_WIDTH = 30.0
DEFAULT_SWEEP_STEP = 1.0

# Default calculator inputs
DEFAULT_SPOT = 100.0
DEFAULT_STRIKE = 100.0
DEFAULT_MATURITY = 1.0  # years
DEFAULT_VOLATILITY = 0.15
DEFAULT_RATE = 0.01
DEFAULT_DIVIDEND_YIELD = 0.01

# Greeks scaling
DAYS_PER_YEAR = 365.0

# Logging
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"

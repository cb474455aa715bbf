"""
Standard normal distribution functions.

The cumulative distribution function is delegated to scipy, whose ``ndtr``
kernel is accurate to double precision across the whole real line,
including the far tails where deep in- and out-of-the-money prices live.
"""

import math
from scipy.stats import norm

_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def normal_cdf(x: float) -> float:
    """
    Standard normal cumulative distribution function N(x).

    Args:
        x: Value at which to evaluate the CDF

    Returns:
        Probability that a standard normal random variable is less than x

    Examples:
        >>> normal_cdf(0.0)  # Median
        0.5
        >>> round(normal_cdf(1.96), 3)  # ~97.5th percentile
        0.975
    """
    return float(norm.cdf(x))


def normal_pdf(x: float) -> float:
    """
    Standard normal probability density function φ(x).

    Args:
        x: Value at which to evaluate the PDF

    Returns:
        Probability density at x for standard normal distribution

    Notes:
        φ(x) = (1/√(2π)) * exp(-x²/2); underflows quietly to 0.0 in the tails.
    """
    return _INV_SQRT_2PI * math.exp(-0.5 * x * x)

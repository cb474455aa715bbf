"""
Exceptions raised by the option calculator.
"""


class PricingError(ValueError):
    """Base exception for all calculator errors."""
    pass


class InvalidParameter(PricingError):
    """
    Raised when an option parameter violates its contract.

    S, K, T and v must be strictly positive and every parameter must be a
    finite real number. Invalid values are rejected before any arithmetic,
    never clamped or defaulted.
    """
    pass


class NumericOverflow(PricingError):
    """
    Raised when valid inputs still produce a non-finite intermediate value,
    e.g. v·√T underflowing to zero or an exponential overflowing.
    """
    pass


class MarketDataUnavailable(PricingError):
    """Raised when a market data provider cannot produce a usable quote."""
    pass

"""
Data types and structures for option pricing.

This module defines the dataclasses used throughout the calculator for
representing option parameters, prices, sensitivities and diagnostics.
"""

import math
import numbers
from dataclasses import dataclass, replace
from typing import Literal, Optional, Union

from optcalc.utils.errors import InvalidParameter

OptionType = Literal["call", "put"]


def _require_finite(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameter(f"{name} must be a real number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidParameter(f"{name} must be finite, got {name}={value}")


@dataclass(frozen=True)
class OptionParameters:
    """
    Immutable container for Black-Scholes-Merton inputs.

    Attributes:
        S: Current spot price of the underlying asset
        K: Strike price
        T: Time to maturity in years
        v: Volatility (annualized standard deviation of log returns)
        r: Risk-free interest rate (annualized, continuous compounding)
        q: Continuous dividend yield (annualized)

    Raises:
        InvalidParameter: If S, K, T or v is not strictly positive, or if
            any parameter is not a finite real number
    """
    S: float
    K: float
    T: float
    v: float
    r: float
    q: float = 0.0

    def __post_init__(self) -> None:
        """Validate parameters before any pricing arithmetic."""
        for name in ("S", "K", "T", "v", "r", "q"):
            _require_finite(name, getattr(self, name))
        if self.S <= 0:
            raise InvalidParameter(f"Spot price must be positive, got S={self.S}")
        if self.K <= 0:
            raise InvalidParameter(f"Strike price must be positive, got K={self.K}")
        if self.T <= 0:
            raise InvalidParameter(f"Time to maturity must be positive, got T={self.T}")
        if self.v <= 0:
            raise InvalidParameter(f"Volatility must be positive, got v={self.v}")

    def with_strike(self, K: float) -> "OptionParameters":
        """Return a validated copy with the strike replaced."""
        return replace(self, K=K)


@dataclass(frozen=True)
class PricingResult:
    """
    European call and put values for one set of parameters.

    Attributes:
        call: Call option price
        put: Put option price
    """
    call: float
    put: float


@dataclass(frozen=True)
class SweepPoint:
    """One point of a strike sweep: the strike and its prices."""
    strike: float
    result: PricingResult


@dataclass
class Greeks:
    """
    Container for option Greeks.

    Attributes:
        delta: Rate of change of option price with respect to spot price (∂V/∂S)
        gamma: Rate of change of delta with respect to spot price (∂²V/∂S²)
        vega: Rate of change of option price with respect to volatility (∂V/∂v)
        theta: Rate of change of option price as time passes, per calendar day
        rho: Rate of change of option price with respect to interest rate (∂V/∂r)
        strike_delta: Rate of change of option price with respect to strike (∂V/∂K)
    """
    delta: float
    gamma: float
    vega: float
    theta: float
    rho: float
    strike_delta: float


@dataclass
class ArbitrageCheck:
    """
    Result from arbitrage validation.

    Attributes:
        is_valid: Whether the prices satisfy no-arbitrage conditions
        violations: List of specific violations detected
        details: Dictionary with detailed check results
    """
    is_valid: bool
    violations: list[str]
    details: dict[str, Union[float, bool]]


@dataclass(frozen=True)
class MarketQuote:
    """
    Market snapshot for an underlying.

    Attributes:
        ticker: Symbol the quote was requested for
        price: Last traded price of the underlying
        nav_price: Net asset value per share, for funds that publish one
        dividend_yield: Annualized dividend yield as a decimal
    """
    ticker: str
    price: float
    nav_price: Optional[float] = None
    dividend_yield: Optional[float] = None

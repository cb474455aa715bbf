"""
Black-Scholes-Merton pricer with continuous dividend yield.

This module prices European calls and puts from a validated
``OptionParameters`` value and sweeps prices across a range of strikes to
draw call and put curves against strike.

Formula:
    d1 = [ln(S/K) + (r - q + v²/2)T] / (v√T)
    d2 = d1 - v√T
    C = S·e^(-qT)·N(d1) - K·e^(-rT)·N(d2)
    P = K·e^(-rT)·N(-d2) - S·e^(-qT)·N(-d1)

References:
    Black, F., & Scholes, M. (1973). The Pricing of Options and Corporate Liabilities.
    Journal of Political Economy, 81(3), 637-654.
    Merton, R. C. (1973). Theory of Rational Option Pricing.
    Bell Journal of Economics and Management Science, 4(1), 141-183.
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Iterator, Optional

import numpy as np
import pandas as pd

from optcalc.core.distributions import normal_cdf
from optcalc.utils.constants import DEFAULT_SWEEP_HALF_WIDTH, DEFAULT_SWEEP_STEP
from optcalc.utils.errors import InvalidParameter, NumericOverflow
from optcalc.utils.types import OptionParameters, PricingResult, SweepPoint

logger = logging.getLogger(__name__)


def discount(rate: float, T: float) -> float:
    """e^(-rate·T), raising NumericOverflow instead of OverflowError."""
    try:
        return math.exp(-rate * T)
    except OverflowError:
        raise NumericOverflow(
            f"Discount factor e^(-{rate}*{T}) overflows double precision"
        ) from None


def _require_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise NumericOverflow(f"{name} is not finite ({value})")


def d1_d2(params: OptionParameters) -> tuple[float, float]:
    """
    Calculate the d1 and d2 terms of the Black-Scholes-Merton formula.

    Args:
        params: Validated option parameters

    Returns:
        Tuple (d1, d2)

    Raises:
        NumericOverflow: If v·√T underflows to zero or either term is not finite

    Notes:
        Uses log-space arithmetic (log(S) - log(K)) to prevent overflow
        for extreme values of S/K.
    """
    S, K, T, v, r, q = params.S, params.K, params.T, params.v, params.r, params.q

    vol_sqrt_t = v * math.sqrt(T)
    if vol_sqrt_t == 0.0:
        raise NumericOverflow(f"v·√T underflows to zero for v={v}, T={T}")

    log_moneyness = math.log(S) - math.log(K)
    drift = (r - q + 0.5 * v * v) * T

    d1 = (log_moneyness + drift) / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    _require_finite(d1=d1, d2=d2)
    return d1, d2


def price(params: OptionParameters) -> PricingResult:
    """
    Calculate European call and put prices.

    Args:
        params: Validated option parameters

    Returns:
        PricingResult with non-negative call and put prices

    Raises:
        NumericOverflow: If an intermediate value is not finite

    Examples:
        >>> result = price(OptionParameters(S=100, K=100, T=1.0, v=0.20, r=0.05))
        >>> round(result.call, 4), round(result.put, 4)
        (10.4506, 5.5735)
    """
    d1, d2 = d1_d2(params)

    discounted_spot = params.S * discount(params.q, params.T)
    discounted_strike = params.K * discount(params.r, params.T)
    _require_finite(discounted_spot=discounted_spot, discounted_strike=discounted_strike)

    call = discounted_spot * normal_cdf(d1) - discounted_strike * normal_cdf(d2)
    put = discounted_strike * normal_cdf(-d2) - discounted_spot * normal_cdf(-d1)
    _require_finite(call=call, put=put)

    # Only rounding noise can push either leg below zero
    return PricingResult(call=max(call, 0.0), put=max(put, 0.0))


class StrikeSweep:
    """
    Call and put prices across a sequence of strikes.

    Every strike is substituted into a copy of the base parameters and
    validated when the sweep is built, so an invalid strike fails the
    whole sweep before anything is priced. Pricing itself is lazy: each
    iteration re-evaluates the formula and yields ``SweepPoint`` values in
    input order.
    """

    def __init__(self, params: OptionParameters, strikes: Iterable[float]):
        self.params = params
        self._legs = tuple(params.with_strike(K) for K in strikes)
        logger.debug("Built strike sweep over %d strikes", len(self._legs))

    def __len__(self) -> int:
        return len(self._legs)

    def __iter__(self) -> Iterator[SweepPoint]:
        for leg in self._legs:
            yield SweepPoint(strike=leg.K, result=price(leg))

    def __repr__(self) -> str:
        return f"StrikeSweep(params={self.params!r}, strikes={len(self)})"

    @property
    def strikes(self) -> list[float]:
        return [leg.K for leg in self._legs]

    def evaluate(self, max_workers: Optional[int] = None) -> list[SweepPoint]:
        """
        Price every strike and return the points as a list.

        Args:
            max_workers: When given, strikes are priced on a thread pool of
                this size. Output order always matches input order.

        Returns:
            List of SweepPoint in input order

        Raises:
            InvalidParameter: If max_workers is less than 1
        """
        if max_workers is None:
            return list(self)
        if max_workers < 1:
            raise InvalidParameter(f"max_workers must be at least 1, got max_workers={max_workers}")

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(executor.map(price, self._legs))
        return [SweepPoint(strike=leg.K, result=res) for leg, res in zip(self._legs, results)]

    def to_frame(self) -> pd.DataFrame:
        """Tabulate the sweep as a DataFrame with columns strike, call, put."""
        points = self.evaluate()
        return pd.DataFrame(
            {
                "strike": [p.strike for p in points],
                "call": [p.result.call for p in points],
                "put": [p.result.put for p in points],
            }
        )


def price_sweep(params: OptionParameters, strikes: Iterable[float]) -> StrikeSweep:
    """
    Price calls and puts across strikes, all other parameters held fixed.

    Args:
        params: Base option parameters; their strike is ignored
        strikes: Strike values in any order

    Returns:
        StrikeSweep yielding (strike, PricingResult) pairs in input order

    Raises:
        InvalidParameter: On the first strike that is not a positive finite number
    """
    return StrikeSweep(params, strikes)


def strike_range(
    center: float,
    half_width: float = DEFAULT_SWEEP_HALF_WIDTH,
    step: float = DEFAULT_SWEEP_STEP,
) -> list[float]:
    """
    Build an evenly spaced strike grid center-half_width ... center+half_width.

    Non-positive strikes are dropped so the grid can always be swept.

    Args:
        center: Middle of the grid, usually the current strike
        half_width: Distance from center to either end
        step: Grid spacing

    Returns:
        Ascending list of positive strikes

    Examples:
        >>> strike_range(100.0, half_width=2.0)
        [98.0, 99.0, 100.0, 101.0, 102.0]
    """
    if not (math.isfinite(center) and math.isfinite(half_width) and math.isfinite(step)):
        raise InvalidParameter("Strike grid bounds must be finite")
    if step <= 0:
        raise InvalidParameter(f"Strike step must be positive, got step={step}")
    if half_width < 0:
        raise InvalidParameter(f"Half width cannot be negative, got half_width={half_width}")

    # Half a step of slack keeps the upper end despite float accumulation
    grid = np.arange(center - half_width, center + half_width + 0.5 * step, step)
    grid = np.round(grid, 10)
    return [float(k) for k in grid if k > 0]

"""
Arbitrage diagnostics for priced results and strike curves.

This module implements the no-arbitrage checks a calculator's output
must pass:
- Price bounds validation
- Put-call parity
- Strike monotonicity across a sweep
"""

from typing import Iterable

from optcalc.core.pricer import discount
from optcalc.utils.constants import ARBITRAGE_TOLERANCE, PARITY_TOLERANCE
from optcalc.utils.types import ArbitrageCheck, OptionParameters, PricingResult, SweepPoint


def check_price_bounds(
    result: PricingResult,
    params: OptionParameters,
    tolerance: float = ARBITRAGE_TOLERANCE,
) -> ArbitrageCheck:
    """
    Validate option prices against no-arbitrage bounds.

    Checks:
    1. Call lower bound: C >= max(S·e^(-qT) - K·e^(-rT), 0)
    2. Call upper bound: C <= S·e^(-qT)
    3. Put lower bound: P >= max(K·e^(-rT) - S·e^(-qT), 0)
    4. Put upper bound: P <= K·e^(-rT)

    Args:
        result: Call and put prices to check
        params: Parameters the prices were computed for
        tolerance: Tolerance for floating point comparisons

    Returns:
        ArbitrageCheck with validation results
    """
    violations = []
    details = {}

    discount_spot = params.S * discount(params.q, params.T)
    discount_strike = params.K * discount(params.r, params.T)

    call_lower = max(discount_spot - discount_strike, 0.0)
    call_lower_ok = result.call >= call_lower - tolerance
    details["call_lower_bound"] = call_lower_ok
    if not call_lower_ok:
        violations.append(
            f"Call price {result.call:.4f} below lower bound {call_lower:.4f}"
        )

    call_upper_ok = result.call <= discount_spot + tolerance
    details["call_upper_bound"] = call_upper_ok
    if not call_upper_ok:
        violations.append(
            f"Call price {result.call:.4f} above upper bound {discount_spot:.4f}"
        )

    put_lower = max(discount_strike - discount_spot, 0.0)
    put_lower_ok = result.put >= put_lower - tolerance
    details["put_lower_bound"] = put_lower_ok
    if not put_lower_ok:
        violations.append(f"Put price {result.put:.4f} below lower bound {put_lower:.4f}")

    put_upper_ok = result.put <= discount_strike + tolerance
    details["put_upper_bound"] = put_upper_ok
    if not put_upper_ok:
        violations.append(
            f"Put price {result.put:.4f} above upper bound {discount_strike:.4f}"
        )

    return ArbitrageCheck(is_valid=not violations, violations=violations, details=details)


def check_put_call_parity(
    result: PricingResult,
    params: OptionParameters,
    tolerance: float = PARITY_TOLERANCE,
) -> ArbitrageCheck:
    """
    Validate put-call parity relationship.

    Put-call parity:
        C - P = S·e^(-qT) - K·e^(-rT)

    The tolerance is relative: it is scaled by max(1, S, K) so the check
    behaves the same for a $5 stock and a $5000 index.

    Args:
        result: Call and put prices to check
        params: Parameters the prices were computed for
        tolerance: Relative tolerance for parity check

    Returns:
        ArbitrageCheck with validation results
    """
    lhs = result.call - result.put
    rhs = params.S * discount(params.q, params.T) - params.K * discount(params.r, params.T)

    diff = abs(lhs - rhs)
    allowed = tolerance * max(1.0, params.S, params.K)
    is_valid = diff <= allowed

    violations = []
    if not is_valid:
        violations.append(
            f"Put-call parity violated: C - P = {lhs:.6f}, "
            f"S·e^(-qT) - K·e^(-rT) = {rhs:.6f}, diff = {diff:.6g}"
        )

    details = {"parity_lhs": lhs, "parity_rhs": rhs, "difference": diff, "allowed": allowed}

    return ArbitrageCheck(is_valid=is_valid, violations=violations, details=details)


def check_strike_monotonicity(
    points: Iterable[SweepPoint], tolerance: float = ARBITRAGE_TOLERANCE
) -> ArbitrageCheck:
    """
    Check monotonicity in strike: calls decrease, puts increase.

    For calls: C(K1) >= C(K2) if K1 < K2
    For puts: P(K1) <= P(K2) if K1 < K2

    Args:
        points: Sweep points in any order, e.g. a StrikeSweep
        tolerance: Tolerance for price comparisons

    Returns:
        ArbitrageCheck with validation results
    """
    ordered = sorted(points, key=lambda p: p.strike)
    violations = []
    details = {}

    for lo, hi in zip(ordered, ordered[1:]):
        if lo.result.call < hi.result.call - tolerance:
            violations.append(
                f"Call monotonicity violated: C(K={lo.strike}) = {lo.result.call:.4f} "
                f"< C(K={hi.strike}) = {hi.result.call:.4f}"
            )
    details["call_monotonic"] = not violations

    initial_violations = len(violations)
    for lo, hi in zip(ordered, ordered[1:]):
        if lo.result.put > hi.result.put + tolerance:
            violations.append(
                f"Put monotonicity violated: P(K={lo.strike}) = {lo.result.put:.4f} "
                f"> P(K={hi.strike}) = {hi.result.put:.4f}"
            )
    details["put_monotonic"] = len(violations) == initial_violations

    return ArbitrageCheck(is_valid=not violations, violations=violations, details=details)

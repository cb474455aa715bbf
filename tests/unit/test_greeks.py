"""
Unit tests for analytic Greeks, checked against finite differences of the pricer.
"""

from dataclasses import replace

import pytest

from optcalc.core.greeks import (
    calculate_greeks,
    delta,
    gamma,
    rho,
    strike_delta,
    theta,
    vega,
)
from optcalc.core.pricer import price
from optcalc.utils.errors import NumericOverflow


def call_price(params, **changes):
    return price(replace(params, **changes)).call


def put_price(params, **changes):
    return price(replace(params, **changes)).put


# ===========================
# Range and Sign Tests
# ===========================


def test_call_delta_range(standard_params):
    assert 0.0 <= delta(standard_params, "call") <= 1.0


def test_put_delta_range(standard_params):
    assert -1.0 <= delta(standard_params, "put") <= 0.0


def test_gamma_and_vega_positive(standard_params):
    assert gamma(standard_params) > 0.0
    assert vega(standard_params) > 0.0


def test_call_theta_negative(standard_params):
    assert theta(standard_params, "call") < 0.0


def test_rho_signs(standard_params):
    assert rho(standard_params, "call") > 0.0
    assert rho(standard_params, "put") < 0.0


def test_strike_delta_signs(standard_params):
    assert -1.0 <= strike_delta(standard_params, "call") < 0.0
    assert 0.0 < strike_delta(standard_params, "put") <= 1.0


def test_invalid_option_type_raises(standard_params):
    with pytest.raises(ValueError):
        delta(standard_params, "straddle")


# ===========================
# Finite-Difference Validation
# ===========================


@pytest.mark.parametrize("side,pricer", [("call", call_price), ("put", put_price)])
def test_delta_finite_difference(with_dividend_params, side, pricer):
    h = 0.01
    S = with_dividend_params.S
    numerical = (pricer(with_dividend_params, S=S + h) - pricer(with_dividend_params, S=S - h)) / (2 * h)
    assert abs(delta(with_dividend_params, side) - numerical) < 1e-5


def test_gamma_finite_difference(with_dividend_params):
    h = 0.01
    S = with_dividend_params.S
    numerical = (
        call_price(with_dividend_params, S=S + h)
        - 2 * call_price(with_dividend_params)
        + call_price(with_dividend_params, S=S - h)
    ) / (h * h)
    assert abs(gamma(with_dividend_params) - numerical) < 1e-3


def test_vega_finite_difference(with_dividend_params):
    h = 1e-4
    v = with_dividend_params.v
    numerical = (call_price(with_dividend_params, v=v + h) - call_price(with_dividend_params, v=v - h)) / (2 * h)
    assert abs(vega(with_dividend_params) - numerical) < 1e-4


def test_theta_finite_difference(with_dividend_params):
    """Theta per day compares to one day of decay."""
    T = with_dividend_params.T
    numerical = call_price(with_dividend_params, T=T - 1.0 / 365.0) - call_price(with_dividend_params)
    assert abs(theta(with_dividend_params, "call") - numerical) < 1e-3


def test_rho_finite_difference(with_dividend_params):
    h = 1e-4
    r = with_dividend_params.r
    numerical = (call_price(with_dividend_params, r=r + h) - call_price(with_dividend_params, r=r - h)) / (2 * h)
    assert abs(rho(with_dividend_params, "call") - numerical) < 1e-4


@pytest.mark.parametrize("side,pricer", [("call", call_price), ("put", put_price)])
def test_strike_delta_finite_difference(with_dividend_params, side, pricer):
    h = 0.01
    K = with_dividend_params.K
    numerical = (pricer(with_dividend_params, K=K + h) - pricer(with_dividend_params, K=K - h)) / (2 * h)
    assert abs(strike_delta(with_dividend_params, side) - numerical) < 1e-5


# ===========================
# calculate_greeks() Tests
# ===========================


def test_calculate_greeks_consistency(standard_params):
    greeks = calculate_greeks(standard_params, "put")

    assert greeks.delta == delta(standard_params, "put")
    assert greeks.gamma == gamma(standard_params)
    assert greeks.vega == vega(standard_params)
    assert greeks.theta == theta(standard_params, "put")
    assert greeks.rho == rho(standard_params, "put")
    assert greeks.strike_delta == strike_delta(standard_params, "put")


def test_calculate_greeks_known_delta(standard_params):
    assert abs(calculate_greeks(standard_params).delta - 0.6368) < 1e-4


# ===========================
# Numeric Overflow Tests
# ===========================


@pytest.mark.parametrize("field", ["r", "q"])
def test_discount_overflow_raises_numeric_overflow(standard_params, field):
    """Extreme negative rate or yield surfaces as NumericOverflow, matching price()."""
    params = replace(standard_params, **{field: -1000.0})
    with pytest.raises(NumericOverflow):
        calculate_greeks(params, "call")
    with pytest.raises(NumericOverflow):
        calculate_greeks(params, "put")

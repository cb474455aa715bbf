"""
Pytest configuration and shared fixtures.
"""

import pytest

from optcalc.utils.types import MarketQuote, OptionParameters


@pytest.fixture
def standard_params():
    """Standard at-the-money option parameters (Hull's textbook example)."""
    return OptionParameters(S=100.0, K=100.0, T=1.0, v=0.20, r=0.05, q=0.0)


@pytest.fixture
def calculator_params():
    """The calculator's default inputs: ATM with equal rate and dividend yield."""
    return OptionParameters(S=100.0, K=100.0, T=1.0, v=0.15, r=0.01, q=0.01)


@pytest.fixture
def with_dividend_params():
    """Parameters with non-zero dividend yield."""
    return OptionParameters(S=100.0, K=100.0, T=1.0, v=0.20, r=0.05, q=0.02)


@pytest.fixture
def spy_quote():
    """A fund quote carrying NAV and yield."""
    return MarketQuote(ticker="SPY", price=450.0, nav_price=449.8, dividend_yield=0.013)

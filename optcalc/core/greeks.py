"""
Analytic Black-Scholes-Merton sensitivities.

All functions take a validated ``OptionParameters`` value and an option
side. Vega and rho are reported per unit change (multiply by 0.01 for a
one-point move); theta is reported per calendar day.
"""

import math

from optcalc.core.distributions import normal_cdf, normal_pdf
from optcalc.core.pricer import d1_d2, discount
from optcalc.utils.constants import DAYS_PER_YEAR
from optcalc.utils.types import Greeks, OptionParameters, OptionType


def _check_option_type(option_type: str) -> None:
    if option_type not in ("call", "put"):
        raise ValueError(f"option_type must be 'call' or 'put', got '{option_type}'")


def delta(params: OptionParameters, option_type: OptionType = "call") -> float:
    """
    Calculate option delta (∂V/∂S).

    Formulas:
        Call delta: Δ_c = e^(-qT) · N(d1)
        Put delta:  Δ_p = -e^(-qT) · N(-d1)
    """
    _check_option_type(option_type)
    d1, _ = d1_d2(params)
    discount_factor = discount(params.q, params.T)

    if option_type == "call":
        return discount_factor * normal_cdf(d1)
    return -discount_factor * normal_cdf(-d1)


def gamma(params: OptionParameters) -> float:
    """
    Calculate option gamma (∂²V/∂S²), identical for calls and puts.

    Formula:
        Γ = e^(-qT) · φ(d1) / (S · v · √T)
    """
    d1, _ = d1_d2(params)
    discount_factor = discount(params.q, params.T)
    return discount_factor * normal_pdf(d1) / (params.S * params.v * math.sqrt(params.T))


def vega(params: OptionParameters) -> float:
    """
    Calculate option vega (∂V/∂v), identical for calls and puts.

    Formula:
        ν = S · e^(-qT) · √T · φ(d1)
    """
    d1, _ = d1_d2(params)
    discount_factor = discount(params.q, params.T)
    return params.S * discount_factor * math.sqrt(params.T) * normal_pdf(d1)


def theta(params: OptionParameters, option_type: OptionType = "call") -> float:
    """
    Calculate option theta, the value change per calendar day as time passes.

    Formulas:
        Θ_c = -[S·v·e^(-qT)·φ(d1)/(2√T)] - r·K·e^(-rT)·N(d2) + q·S·e^(-qT)·N(d1)
        Θ_p = -[S·v·e^(-qT)·φ(d1)/(2√T)] + r·K·e^(-rT)·N(-d2) - q·S·e^(-qT)·N(-d1)
    """
    _check_option_type(option_type)
    S, K, T, v, r, q = params.S, params.K, params.T, params.v, params.r, params.q
    d1, d2 = d1_d2(params)

    discount_spot = discount(q, T)
    discount_strike = discount(r, T)

    # Diffusion term, shared by both sides
    term1 = -(S * v * discount_spot * normal_pdf(d1)) / (2.0 * math.sqrt(T))

    if option_type == "call":
        term2 = -r * K * discount_strike * normal_cdf(d2)
        term3 = q * S * discount_spot * normal_cdf(d1)
    else:
        term2 = r * K * discount_strike * normal_cdf(-d2)
        term3 = -q * S * discount_spot * normal_cdf(-d1)

    return (term1 + term2 + term3) / DAYS_PER_YEAR


def rho(params: OptionParameters, option_type: OptionType = "call") -> float:
    """
    Calculate option rho (∂V/∂r).

    Formulas:
        Call rho: ρ_c = K·T·e^(-rT)·N(d2)
        Put rho:  ρ_p = -K·T·e^(-rT)·N(-d2)
    """
    _check_option_type(option_type)
    _, d2 = d1_d2(params)
    discount_strike = params.K * params.T * discount(params.r, params.T)

    if option_type == "call":
        return discount_strike * normal_cdf(d2)
    return -discount_strike * normal_cdf(-d2)


def strike_delta(params: OptionParameters, option_type: OptionType = "call") -> float:
    """
    Calculate the sensitivity of the option price to its strike (∂V/∂K).

    This is the slope of the curve drawn by a strike sweep.

    Formulas:
        Call: ∂C/∂K = -e^(-rT)·N(d2)
        Put:  ∂P/∂K =  e^(-rT)·N(-d2)
    """
    _check_option_type(option_type)
    _, d2 = d1_d2(params)
    discount_factor = discount(params.r, params.T)

    if option_type == "call":
        return -discount_factor * normal_cdf(d2)
    return discount_factor * normal_cdf(-d2)


def calculate_greeks(params: OptionParameters, option_type: OptionType = "call") -> Greeks:
    """
    Calculate all Greeks for one option side.

    Example:
        >>> greeks = calculate_greeks(OptionParameters(S=100, K=100, T=1.0, v=0.20, r=0.05))
        >>> print(f"Delta: {greeks.delta:.4f}")
        Delta: 0.6368
    """
    return Greeks(
        delta=delta(params, option_type),
        gamma=gamma(params),
        vega=vega(params),
        theta=theta(params, option_type),
        rho=rho(params, option_type),
        strike_delta=strike_delta(params, option_type),
    )

"""
Command-line interface for the option calculator.

This CLI provides access to:
- Call and put pricing (Black-Scholes-Merton)
- Strike sweeps for call/put curves
- Greeks calculation
- Live spot and dividend yield via --ticker
"""

import logging
import sys

import click

from optcalc.core.greeks import calculate_greeks
from optcalc.core.pricer import price as price_options
from optcalc.core.pricer import price_sweep, strike_range
from optcalc.market.provider import YahooMarketDataProvider, apply_quote
from optcalc.utils import constants
from optcalc.utils.errors import PricingError
from optcalc.utils.types import OptionParameters


def parameter_options(func):
    """Attach the shared pricing inputs to a command."""
    options = [
        click.option("--spot", "-S", type=float, default=constants.DEFAULT_SPOT, show_default=True, help="Spot price"),
        click.option("--strike", "-K", type=float, default=constants.DEFAULT_STRIKE, show_default=True, help="Strike price"),
        click.option("--time", "-T", type=float, default=constants.DEFAULT_MATURITY, show_default=True, help="Time to maturity (years)"),
        click.option("--vol", "-v", type=float, default=constants.DEFAULT_VOLATILITY, show_default=True, help="Volatility (annualized)"),
        click.option("--rate", "-r", type=float, default=constants.DEFAULT_RATE, show_default=True, help="Risk-free rate"),
        click.option("--div", "-q", type=float, default=constants.DEFAULT_DIVIDEND_YIELD, show_default=True, help="Dividend yield"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_parameters(ctx, spot, strike, time, vol, rate, div, ticker=None) -> OptionParameters:
    """Read command inputs into one OptionParameters value, applying a live quote if asked."""
    params = OptionParameters(S=spot, K=strike, T=time, v=vol, r=rate, q=div)
    if ticker:
        quote = ctx.obj["provider"].fetch(ticker)
        params = apply_quote(params, quote)
        click.echo(f"Using {quote.ticker} spot {quote.price:.4f}, dividend yield {params.q:.4%}")
    return params


def fail(exc: Exception) -> None:
    click.echo(f"\nError: {exc}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version="1.0.0")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=constants.DEFAULT_LOG_LEVEL,
    show_default=True,
)
@click.pass_context
def cli(ctx, log_level):
    """Option Calculator - Black-Scholes-Merton prices, curves and Greeks."""
    logging.basicConfig(level=log_level.upper(), format=constants.LOG_FORMAT)
    ctx.ensure_object(dict)
    ctx.obj.setdefault("provider", YahooMarketDataProvider())


@cli.command()
@parameter_options
@click.option("--ticker", default=None, help="Take spot and dividend yield from a live quote")
@click.pass_context
def price(ctx, spot, strike, time, vol, rate, div, ticker):
    """Calculate call and put prices."""
    try:
        params = build_parameters(ctx, spot, strike, time, vol, rate, div, ticker)
        result = price_options(params)
    except PricingError as e:
        fail(e)

    click.echo(f"\nCall Option Price: ${result.call:.4f}")
    click.echo(f"Put Option Price:  ${result.put:.4f}")


@cli.command()
@parameter_options
@click.option("--ticker", default=None, help="Take spot and dividend yield from a live quote")
@click.option("--half-width", type=float, default=constants.DEFAULT_SWEEP_HALF_WIDTH, show_default=True)
@click.option("--step", type=float, default=constants.DEFAULT_SWEEP_STEP, show_default=True)
@click.option("--workers", type=click.IntRange(min=1), default=None, help="Price strikes on a thread pool")
@click.pass_context
def sweep(ctx, spot, strike, time, vol, rate, div, ticker, half_width, step, workers):
    """Tabulate call and put prices across strikes around K."""
    try:
        params = build_parameters(ctx, spot, strike, time, vol, rate, div, ticker)
        strikes = strike_range(params.K, half_width=half_width, step=step)
        points = price_sweep(params, strikes).evaluate(max_workers=workers)
    except PricingError as e:
        fail(e)

    click.echo(f"\n{'Strike':>10} {'Call':>12} {'Put':>12}")
    for point in points:
        click.echo(f"{point.strike:>10.2f} {point.result.call:>12.4f} {point.result.put:>12.4f}")


@cli.command()
@parameter_options
@click.option("--type", "-t", "option_type", type=click.Choice(["call", "put"]), default="call")
def greeks(spot, strike, time, vol, rate, div, option_type):
    """Calculate all option Greeks."""
    try:
        params = OptionParameters(S=spot, K=strike, T=time, v=vol, r=rate, q=div)
        greeks_values = calculate_greeks(params, option_type)
    except PricingError as e:
        fail(e)

    click.echo(f"\nGreeks for {option_type.capitalize()} Option:")
    click.echo(f"  Delta:  {greeks_values.delta:>10.6f}")
    click.echo(f"  Gamma:  {greeks_values.gamma:>10.6f}")
    click.echo(f"  Vega:   {greeks_values.vega:>10.6f}")
    click.echo(f"  Theta:  {greeks_values.theta:>10.6f} (per day)")
    click.echo(f"  Rho:    {greeks_values.rho:>10.6f}")
    click.echo(f"  dV/dK:  {greeks_values.strike_delta:>10.6f}")


if __name__ == "__main__":
    cli()

"""
Market data providers for live calculator inputs.

Pricing never depends on this module: a provider only turns a ticker into
a ``MarketQuote``, and ``apply_quote`` copies the quote's spot price and
dividend yield into an ``OptionParameters`` value.
"""

import logging
import math
from dataclasses import replace
from typing import Mapping, Optional, Protocol, runtime_checkable

import yfinance as yf

from optcalc.utils.errors import MarketDataUnavailable
from optcalc.utils.types import MarketQuote, OptionParameters

logger = logging.getLogger(__name__)


@runtime_checkable
class MarketDataProvider(Protocol):
    """Anything that can quote an underlying by ticker."""

    def fetch(self, ticker: str) -> MarketQuote:
        """Return a quote, or raise MarketDataUnavailable."""


class StaticMarketDataProvider:
    """In-memory provider backed by a ticker -> MarketQuote mapping."""

    def __init__(self, quotes: Mapping[str, MarketQuote]):
        self._quotes = {ticker.upper(): quote for ticker, quote in quotes.items()}

    def fetch(self, ticker: str) -> MarketQuote:
        try:
            return self._quotes[ticker.upper()]
        except KeyError:
            raise MarketDataUnavailable(f"No quote for {ticker!r}") from None


def _as_float(value) -> Optional[float]:
    """Coerce a provider field to a finite float, or None."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


class YahooMarketDataProvider:
    """
    Provider backed by Yahoo Finance through ``yfinance``.

    The price comes from the quote summary (``regularMarketPrice`` or
    ``currentPrice``), falling back to the last close of recent history.
    Funds also publish ``navPrice`` and ``yield``; equities carry a
    ``trailingAnnualDividendYield``.
    """

    def __init__(self, history_period: str = "5d"):
        self.history_period = history_period

    def fetch(self, ticker: str) -> MarketQuote:
        try:
            handle = yf.Ticker(ticker)
            info = handle.info or {}
            last_price = _as_float(info.get("regularMarketPrice")) or _as_float(
                info.get("currentPrice")
            )
            if last_price is None:
                closes = handle.history(period=self.history_period)["Close"]
                if len(closes):
                    last_price = _as_float(closes.iloc[-1])
        except Exception as exc:
            logger.warning("Quote request for %s failed: %s", ticker, exc)
            raise MarketDataUnavailable(f"Quote request for {ticker!r} failed: {exc}") from exc

        if last_price is None or last_price <= 0:
            logger.warning("No usable price for %s", ticker)
            raise MarketDataUnavailable(f"No usable price for {ticker!r}")

        dividend_yield = _as_float(info.get("yield"))
        if dividend_yield is None:
            dividend_yield = _as_float(info.get("trailingAnnualDividendYield"))

        quote = MarketQuote(
            ticker=ticker.upper(),
            price=last_price,
            nav_price=_as_float(info.get("navPrice")),
            dividend_yield=dividend_yield,
        )
        logger.info("Fetched %s", quote)
        return quote


def apply_quote(params: OptionParameters, quote: MarketQuote) -> OptionParameters:
    """
    Substitute a quote's spot price and dividend yield into parameters.

    The dividend yield is only replaced when the quote carries one.
    The returned copy is validated like any other ``OptionParameters``.
    """
    changes = {"S": quote.price}
    if quote.dividend_yield is not None:
        changes["q"] = quote.dividend_yield
    return replace(params, **changes)

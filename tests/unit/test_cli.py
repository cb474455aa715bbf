"""Unit tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from interfaces.cli import cli
from optcalc.market.provider import StaticMarketDataProvider


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def static_provider(spy_quote):
    return {"provider": StaticMarketDataProvider({"SPY": spy_quote})}


def test_price_defaults(runner):
    result = runner.invoke(cli, ["price"])
    assert result.exit_code == 0
    assert "Call Option Price: $5.9190" in result.output
    assert "Put Option Price:  $5.9190" in result.output


def test_price_textbook_inputs(runner):
    result = runner.invoke(cli, ["price", "-S", "100", "-K", "100", "-T", "1", "-v", "0.2", "-r", "0.05", "-q", "0"])
    assert result.exit_code == 0
    assert "$10.4506" in result.output
    assert "$5.5735" in result.output


@pytest.mark.parametrize("flag", ["--spot", "--strike", "--time", "--vol"])
def test_price_rejects_zero_input(runner, flag):
    result = runner.invoke(cli, ["price", flag, "0"])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_price_with_ticker(runner, static_provider):
    result = runner.invoke(cli, ["price", "--ticker", "spy", "-K", "450"], obj=static_provider)
    assert result.exit_code == 0
    assert "Using SPY spot 450.0000" in result.output


def test_price_with_unknown_ticker(runner, static_provider):
    result = runner.invoke(cli, ["price", "--ticker", "QQQ"], obj=static_provider)
    assert result.exit_code == 1
    assert "No quote for 'QQQ'" in result.output


def test_sweep_table(runner):
    result = runner.invoke(cli, ["sweep", "--half-width", "2"])
    assert result.exit_code == 0
    rows = [line.split() for line in result.output.strip().splitlines()[1:]]
    assert [row[0] for row in rows] == ["98.00", "99.00", "100.00", "101.00", "102.00"]
    assert rows[2] == ["100.00", "5.9190", "5.9190"]


def test_sweep_with_workers_matches_sequential(runner):
    sequential = runner.invoke(cli, ["sweep", "--half-width", "5"])
    parallel = runner.invoke(cli, ["sweep", "--half-width", "5", "--workers", "3"])
    assert parallel.exit_code == 0
    assert parallel.output == sequential.output


def test_sweep_rejects_bad_step(runner):
    result = runner.invoke(cli, ["sweep", "--step", "0"])
    assert result.exit_code == 1
    assert "Strike step must be positive" in result.output


def test_greeks_put(runner):
    result = runner.invoke(cli, ["greeks", "--type", "put"])
    assert result.exit_code == 0
    assert "Greeks for Put Option:" in result.output
    assert "dV/dK:" in result.output


def test_log_level_option(runner):
    result = runner.invoke(cli, ["--log-level", "debug", "price"])
    assert result.exit_code == 0


def test_greeks_overflow_reported(runner):
    result = runner.invoke(cli, ["greeks", "-q", "-1000"])
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert not isinstance(result.exception, OverflowError)


@pytest.mark.parametrize("workers", ["0", "-1"])
def test_sweep_rejects_non_positive_workers(runner, workers):
    result = runner.invoke(cli, ["sweep", "--workers", workers])
    assert result.exit_code == 2
    assert "Invalid value for '--workers'" in result.output

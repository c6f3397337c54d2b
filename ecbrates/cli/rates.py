"""CLI commands for printing ECB reference rates and converting amounts."""

from __future__ import annotations

import click
from flask import current_app
from flask.cli import with_appcontext

from ecbrates.providers.base import ProviderError
from ecbrates.services.fx_conversion import ConversionError, RateParseError, to_decimal
from ecbrates.services.rates import fetch_full_history, fetch_latest, fetch_recent_history


@click.group("rates")
def rates_cli() -> None:
    """Inspect ECB euro reference rates."""


@rates_cli.command("latest")
@click.option("--currency", default="USD", show_default=True, help="Currency to print")
@with_appcontext
def latest(currency: str) -> None:
    """Print the latest published rate of CURRENCY against the euro."""

    snapshot = _run(lambda: fetch_latest(_provider()))
    code = currency.strip().upper()
    rate = snapshot.rates.get(code)
    if rate is None:
        raise click.ClickException(f"No rate published for {code} on {snapshot.date}.")
    click.echo(f"Exchange rate {snapshot.date}: {snapshot.base_currency} 1 -> {code} {rate}")


@rates_cli.command("history")
@click.option(
    "--window",
    type=click.Choice(["recent", "full"]),
    default="recent",
    show_default=True,
    help="Trailing ~90 days or the whole published series",
)
@click.option("--currency", default="USD", show_default=True, help="Currency to print")
@with_appcontext
def history(window: str, currency: str) -> None:
    """Print the rate history of CURRENCY against the euro, one line per day."""

    fetch = fetch_full_history if window == "full" else fetch_recent_history
    try:
        series = _run(lambda: fetch(_provider())).series(currency)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--currency") from exc
    for point in series.points:
        click.echo(f"Exchange rate {point.date}: {series.base_currency} 1 -> {series.quote_currency} {point.rate}")


@rates_cli.command("convert")
@click.argument("amount")
@click.argument("from_currency")
@click.argument("to_currency")
@with_appcontext
def convert(amount: str, from_currency: str, to_currency: str) -> None:
    """Convert AMOUNT from FROM_CURRENCY to TO_CURRENCY at the latest rates."""

    try:
        value = to_decimal(amount)
    except RateParseError as exc:
        raise click.BadParameter(str(exc), param_hint="AMOUNT") from exc

    snapshot = _run(lambda: fetch_latest(_provider()))
    try:
        result = snapshot.convert(value, from_currency, to_currency)
    except ConversionError as exc:
        raise click.ClickException(str(exc)) from exc
    except ValueError as exc:
        raise click.ClickException(f"Invalid currency code: {exc}") from exc
    click.echo(
        f"Exchange rate {snapshot.date}: {from_currency.upper()} {value} -> {to_currency.upper()} {result}"
    )


def _provider():
    return current_app.extensions["rate_provider"]


def _run(fetch):
    try:
        return fetch()
    except ProviderError as exc:
        raise click.ClickException(f"Failed to fetch rates: {exc}") from exc

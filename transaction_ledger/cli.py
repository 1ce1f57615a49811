"""CLI for the ``transaction_ledger`` package.

A Typer application exposing one subcommand per ledger query. The root
callback loads ``.env`` via ``python-dotenv``, configures logging, reads the
transactions document and hands the resulting ledger to the subcommand
through the Typer context. Query logic lives in
:mod:`transaction_ledger.ledger`.

Record listings are rendered as a ``rich`` table (or JSON Lines with
``--json``); scalar answers are printed as plain text.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.table import Table

from .config import load_settings
from .formatting import format_transaction, format_transactions
from .ledger import TransactionLedger
from .logging_setup import configure_logging
from .models import (
    AMOUNT_FIELD,
    DATE_FIELD,
    DESCRIPTION_FIELD,
    ID_FIELD,
    MERCHANT_FIELD,
    TYPE_FIELD,
)

# ---- Small module-level helpers used by CLI commands -------------------------


def _ledger(ctx: typer.Context) -> TransactionLedger:
    ledger = ctx.obj
    if not isinstance(ledger, TransactionLedger):  # pragma: no cover - wiring error
        raise RuntimeError("ledger was not initialized by the root callback")
    return ledger


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def _print_amount(value: float) -> None:
    typer.echo(f"{value:.2f}")


def _print_records(records: Sequence[Mapping[str, Any]], *, as_json: bool, title: str) -> None:
    """Render records as a table, or as JSON Lines when ``as_json`` is set."""

    if as_json:
        if records:
            typer.echo(format_transactions(records))
        return

    table = Table(title=f"{title} ({len(records)})")
    table.add_column("ID")
    table.add_column("Date")
    table.add_column("Type")
    table.add_column("Amount", justify="right")
    table.add_column("Merchant")
    table.add_column("Description")
    for r in records:
        table.add_row(
            _cell(r.get(ID_FIELD)),
            _cell(r.get(DATE_FIELD)),
            _cell(r.get(TYPE_FIELD)),
            _cell(r.get(AMOUNT_FIELD)),
            _cell(r.get(MERCHANT_FIELD)),
            _cell(r.get(DESCRIPTION_FIELD)),
        )
    Console().print(table)


def _json_option() -> Any:
    return typer.Option("--json", help="Print matching records as JSON Lines instead of a table.")


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Query a JSON transactions document: totals, averages, and filters by "
        "date, type, amount and merchant. Loads settings from a local .env."
    ),
)


@app.callback()
def _root(
    ctx: typer.Context,
    data_path: Annotated[
        Path | None,
        typer.Option(
            "--data-path",
            help="Transactions JSON file (falls back to TRANSACTION_LEDGER_DATA_PATH).",
            dir_okay=False,
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(help="Log level name or number (falls back to TRANSACTION_LEDGER_LOG_LEVEL)."),
    ] = None,
) -> None:
    """Load settings, configure logging and build the ledger for the subcommand."""

    settings = load_settings()
    configure_logging(log_level if log_level else settings.log_level)
    ctx.obj = TransactionLedger.from_file(data_path or settings.data_path)


@app.command("list")
def list_cmd(ctx: typer.Context, as_json: Annotated[bool, _json_option()] = False) -> None:
    """Show every transaction."""

    _print_records(_ledger(ctx).get_all_transactions(), as_json=as_json, title="Transactions")


@app.command("types")
def types_cmd(ctx: typer.Context) -> None:
    """Distinct transaction types in first-seen order."""

    for t in _ledger(ctx).get_unique_transaction_type():
        typer.echo(_cell(t))


@app.command("total")
def total_cmd(ctx: typer.Context) -> None:
    """Sum of all transaction amounts."""

    _print_amount(_ledger(ctx).calculate_total_amount())


@app.command("total-by-date")
def total_by_date_cmd(
    ctx: typer.Context,
    year: Annotated[int | None, typer.Option(help="Year; omit to match any.")] = None,
    month: Annotated[int | None, typer.Option(help="Month 1-12; omit to match any.")] = None,
    day: Annotated[int | None, typer.Option(help="Day 1-31; omit to match any.")] = None,
) -> None:
    """Sum of amounts on a full or partial date."""

    _print_amount(_ledger(ctx).calculate_total_amount_by_date(year, month, day))


@app.command("by-type")
def by_type_cmd(
    ctx: typer.Context,
    transaction_type: Annotated[str, typer.Argument(help="debit or credit")],
    as_json: Annotated[bool, _json_option()] = False,
) -> None:
    """Transactions of the given type."""

    records = _ledger(ctx).get_transactions_by_type(transaction_type)
    _print_records(records, as_json=as_json, title=f"Type {transaction_type}")


@app.command("date-range")
def date_range_cmd(
    ctx: typer.Context,
    start: Annotated[str, typer.Argument(help="First date, inclusive (e.g. 2019-01-01).")],
    end: Annotated[str, typer.Argument(help="Last date, inclusive.")],
    as_json: Annotated[bool, _json_option()] = False,
) -> None:
    """Transactions dated between START and END."""

    records = _ledger(ctx).get_transactions_in_date_range(start, end)
    _print_records(records, as_json=as_json, title=f"{start} .. {end}")


@app.command("by-merchant")
def by_merchant_cmd(
    ctx: typer.Context,
    merchant: Annotated[str, typer.Argument(help="Exact merchant name.")],
    as_json: Annotated[bool, _json_option()] = False,
) -> None:
    """Transactions with the given merchant name."""

    records = _ledger(ctx).get_transactions_by_merchant(merchant)
    _print_records(records, as_json=as_json, title=f"Merchant {merchant}")


@app.command("average")
def average_cmd(ctx: typer.Context) -> None:
    """Average transaction amount."""

    _print_amount(_ledger(ctx).calculate_average_transaction_amount())


@app.command("amount-range")
def amount_range_cmd(
    ctx: typer.Context,
    min_amount: Annotated[float, typer.Argument(help="Lowest amount, inclusive.")],
    max_amount: Annotated[float, typer.Argument(help="Highest amount, inclusive.")],
    as_json: Annotated[bool, _json_option()] = False,
) -> None:
    """Transactions with an amount between MIN_AMOUNT and MAX_AMOUNT."""

    records = _ledger(ctx).get_transactions_by_amount_range(min_amount, max_amount)
    _print_records(records, as_json=as_json, title=f"Amount {min_amount:g} .. {max_amount:g}")


@app.command("total-debit")
def total_debit_cmd(ctx: typer.Context) -> None:
    """Sum of debit amounts."""

    _print_amount(_ledger(ctx).calculate_total_debit_amount())


def _echo_month(month: int | None) -> None:
    if month is None:
        typer.echo("Error: no transactions with a readable date.", err=True)
        raise typer.Exit(1)
    typer.echo(str(month))


@app.command("busiest-month")
def busiest_month_cmd(ctx: typer.Context) -> None:
    """Month (1-12) with the most transactions."""

    _echo_month(_ledger(ctx).find_most_transactions_month())


@app.command("busiest-debit-month")
def busiest_debit_month_cmd(ctx: typer.Context) -> None:
    """Month (1-12) with the most debit transactions."""

    _echo_month(_ledger(ctx).find_most_debit_transaction_month())


@app.command("dominant-type")
def dominant_type_cmd(ctx: typer.Context) -> None:
    """Whether debits or credits are more frequent (or equal)."""

    typer.echo(_ledger(ctx).most_transaction_types())


@app.command("before")
def before_cmd(
    ctx: typer.Context,
    date: Annotated[str, typer.Argument(help="Exclusive upper bound (e.g. 2019-01-02).")],
    as_json: Annotated[bool, _json_option()] = False,
) -> None:
    """Transactions dated strictly before DATE."""

    records = _ledger(ctx).get_transactions_before_date(date)
    _print_records(records, as_json=as_json, title=f"Before {date}")


@app.command("find")
def find_cmd(
    ctx: typer.Context,
    transaction_id: Annotated[str, typer.Argument(help="Transaction identifier.")],
) -> None:
    """Print the transaction with the given ID as JSON.

    An all-digit ID that matches no string ID is retried as an integer.
    """

    ledger = _ledger(ctx)
    record = ledger.find_transaction_by_id(transaction_id)
    if record is None and transaction_id.isdigit():
        record = ledger.find_transaction_by_id(int(transaction_id))
    if record is None:
        typer.echo(f"Error: no transaction with id {transaction_id!r}.", err=True)
        raise typer.Exit(1)
    typer.echo(format_transaction(record))


@app.command("descriptions")
def descriptions_cmd(ctx: typer.Context) -> None:
    """Every transaction description, one per line."""

    for d in _ledger(ctx).map_transaction_descriptions():
        typer.echo(_cell(d))


def main() -> None:
    """Console-script entrypoint."""

    app()


if __name__ == "__main__":  # pragma: no cover - exercised via console script
    # Running as a module: `python -m transaction_ledger.cli`
    main()

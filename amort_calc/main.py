"""Command-line interface for the amortization calculator.

This module uses the ``click`` library to implement a multi-command interface.
Users can compute a full amortization schedule, view only the summary, or
list the supported payment frequencies. Results can be printed to the
terminal or exported to JSON/CSV files.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import click

from .data_models import LoanTerms, PaymentRow
from .engine import compute_schedule
from .exceptions import AmortizationError
from .formatter import print_schedule, print_summary
from .options import FREQUENCY_LABELS, Frequency, default_compounding
from .utils import decimal_from_str, parse_amount

logger = logging.getLogger(__name__)

FREQUENCY_CHOICES = [str(f.value) for f in Frequency]


def build_terms_from_options(
    principal: str,
    rate: float,
    term: str,
    frequency: int,
    compounding: Optional[int] = None,
) -> LoanTerms:
    """Turn raw option values into ``LoanTerms``.

    ``compounding`` defaults to monthly, or to the payment frequency when
    payments are less frequent than monthly.
    """
    try:
        principal_value = parse_amount(principal)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--principal")
    try:
        term_value = decimal_from_str(str(term))
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--term")
    try:
        rate_value = decimal_from_str(str(rate))
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--rate")
    if compounding is None:
        compounding = default_compounding(frequency)
    if compounding > frequency:
        raise click.BadParameter(
            f"Compounding ({compounding}/yr) cannot be more frequent than payments ({frequency}/yr)",
            param_hint="--compounding",
        )
    return LoanTerms(
        principal=principal_value,
        annual_rate=rate_value,
        compounding_frequency=compounding,
        payment_frequency=frequency,
        term_years=term_value,
    )


def _compute(terms: LoanTerms, max_periods: Optional[int]):
    kwargs = {} if max_periods is None else {"max_periods": max_periods}
    try:
        return compute_schedule(terms, **kwargs)
    except AmortizationError as exc:
        logger.debug("Calculation rejected: %s", exc)
        raise click.ClickException(str(exc))


def export_to_json(path: Path, schedule: Optional[List[PaymentRow]], summary: Dict[str, Any]) -> None:
    """Export the summary and, when given, the schedule to a JSON file."""
    data: Dict[str, Any] = {"summary": summary}
    if schedule is not None:
        data["schedule"] = [row.to_dict() for row in schedule]
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def export_to_csv(path: Path, schedule: List[PaymentRow]) -> None:
    """Export the schedule to a CSV file. The initial row has empty payment cells."""
    header = ["Index", "Amount", "Interest", "Principal", "Balance"]
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        for row in schedule:
            values = row.to_dict()
            writer.writerow(
                [
                    "" if values[key] is None else values[key]
                    for key in ("index", "amount", "interest", "principal", "balance")
                ]
            )


def loan_options(func):
    """Attach the loan input options shared by ``schedule`` and ``summary``."""
    options = [
        click.option("--principal", "-p", "principal", required=True, help="Loan amount (accepts 25k, 1.2m)"),
        click.option("--rate", "-r", "rate", required=True, type=float, help="Annual interest rate (percent)"),
        click.option("--term", "-t", "term", required=True, help="Loan term in years"),
        click.option(
            "--frequency",
            "-f",
            "frequency",
            type=click.Choice(FREQUENCY_CHOICES),
            default=str(Frequency.MONTHLY.value),
            show_default=True,
            help="Payments per year",
        ),
        click.option(
            "--compounding",
            "-c",
            "compounding",
            type=click.Choice(FREQUENCY_CHOICES),
            help="Compounding periods per year (default: monthly, or the payment frequency if rarer)",
        ),
        click.option("--max-periods", "max_periods", type=click.IntRange(min=1), help="Safety bound on schedule length (never below the loan's own number of payments)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """An amortization calculator for fixed-payment loans."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@loan_options
@click.option("--output", "output", type=str, help="Output file path (.json or .csv)")
def schedule(
    principal: str,
    rate: float,
    term: str,
    frequency: str,
    compounding: Optional[str],
    max_periods: Optional[int],
    output: Optional[str],
) -> None:
    """Compute and print the full amortization schedule."""
    terms = build_terms_from_options(
        principal, rate, term, int(frequency), int(compounding) if compounding else None
    )
    rows, summary_data = _compute(terms, max_periods)
    if output:
        path = Path(output)
        if path.suffix.lower() == ".json":
            export_to_json(path, rows, summary_data)
        elif path.suffix.lower() == ".csv":
            export_to_csv(path, rows)
        else:
            raise click.BadParameter("Unsupported output format; use .json or .csv", param_hint="--output")
        click.echo(f"Schedule exported to {path}")
    else:
        print_summary(summary_data)
        print_schedule(rows)


@cli.command()
@loan_options
@click.option("--output", "output", type=str, help="Output file path (.json)")
def summary(
    principal: str,
    rate: float,
    term: str,
    frequency: str,
    compounding: Optional[str],
    max_periods: Optional[int],
    output: Optional[str],
) -> None:
    """Compute and print only the summary metrics for a loan."""
    terms = build_terms_from_options(
        principal, rate, term, int(frequency), int(compounding) if compounding else None
    )
    _, summary_data = _compute(terms, max_periods)
    if output:
        path = Path(output)
        if path.suffix.lower() != ".json":
            raise click.BadParameter("Summary export must use .json extension", param_hint="--output")
        export_to_json(path, None, summary_data)
        click.echo(f"Summary exported to {path}")
    else:
        print_summary(summary_data)


@cli.command()
def frequencies() -> None:
    """List the supported payment and compounding frequencies."""
    for value, label in FREQUENCY_LABELS.items():
        click.echo(f"{value:>3}  {label}")


if __name__ == "__main__":
    cli()

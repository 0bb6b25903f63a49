"""Output helpers for the amortization calculator.

Plain-text rendering of a summary and a schedule for the command line. Only
built-in printing and string formatting are used.
"""

from __future__ import annotations

from typing import Dict, Iterable

from .data_models import PaymentRow
from .options import Frequency


def print_summary(summary: Dict[str, object]) -> None:
    """Print a summary of loan metrics in a human-readable format."""
    print("Summary")
    print("-" * 72)
    print(f"Payment frequency  : {summary['frequency_text']}")
    print(f"Number of payments : {summary['num_periods']:g}")
    print(f"Payment amount     : {summary['payment_amount']:.2f}")
    print(f"Total payment      : {summary['total_payment']:.2f}")
    print(f"Total interest     : {summary['total_interest']:.2f}")
    print(f"Interest / loan    : {summary['total_interest_pct']:.2f}%")
    # The comparison only makes sense when the plan is not already monthly.
    if summary.get("payment_frequency") != Frequency.MONTHLY:
        print(f"Monthly baseline   : {summary['monthly_baseline_payment']:.2f}")
        print(f"Monthly equivalent : {summary['monthly_equivalent_payment']:.2f}")
        print(f"Savings per year   : {summary['savings_per_year']:.2f}")
    print("-" * 72)


def print_schedule(schedule: Iterable[PaymentRow]) -> None:
    """Print the amortization schedule as a simple table.

    The initial balance row is printed with blank payment columns.
    """
    headers = ["#", "Payment", "Interest", "Principal", "Balance"]
    print("\t".join(headers))
    for row in schedule:
        if row.is_initial:
            cells = ["", "", "", "", f"{row.balance:.2f}"]
        else:
            cells = [
                str(row.index),
                f"{row.amount:.2f}",
                f"{row.interest:.2f}",
                f"{row.principal:.2f}",
                f"{row.balance:.2f}",
            ]
        print("\t".join(cells))

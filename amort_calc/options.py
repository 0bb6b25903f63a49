"""Payment and compounding frequency options plus default inputs.

These are the choices a front end offers for the frequency drop-downs and the
values its form starts out with. Nothing here is engine state.
"""

from __future__ import annotations

from decimal import Decimal
from enum import IntEnum
from typing import Dict, List

from .data_models import LoanTerms


class Frequency(IntEnum):
    """Number of periods per year."""

    ANNUAL = 1
    SEMI_ANNUAL = 2
    QUARTERLY = 4
    BI_MONTHLY = 6
    MONTHLY = 12
    SEMI_MONTHLY = 24
    BI_WEEKLY = 26
    WEEKLY = 52

    @property
    def label(self) -> str:
        return FREQUENCY_LABELS[self.value]


FREQUENCY_LABELS: Dict[int, str] = {
    1: "Annual",
    2: "Semi-annual",
    4: "Quarterly",
    6: "Bi-monthly",
    12: "Monthly",
    24: "Semi-monthly",
    26: "Bi-weekly",
    52: "Weekly",
}

DEFAULT_TERMS = LoanTerms(
    principal=Decimal("10000"),
    annual_rate=Decimal("5.00"),
    compounding_frequency=Frequency.MONTHLY.value,
    payment_frequency=Frequency.MONTHLY.value,
    term_years=Decimal("1"),
)


def frequency_text(value: int) -> str:
    """Return the label for a frequency value, e.g. ``12 -> "Monthly"``."""
    try:
        return FREQUENCY_LABELS[int(value)]
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Unknown frequency: {value}") from exc


def compounding_options(payment_frequency: int) -> List[Frequency]:
    """Return the compounding frequencies allowed for a payment frequency.

    Interest is never compounded more often than payments are made, so only
    frequencies up to and including ``payment_frequency`` are offered.
    """
    return [f for f in Frequency if f.value <= payment_frequency]


def default_compounding(payment_frequency: int) -> int:
    """Default compounding frequency: monthly, or the payment frequency if rarer."""
    return min(Frequency.MONTHLY.value, int(payment_frequency))

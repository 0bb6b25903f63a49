"""Data models for the amortization calculator.

``LoanTerms`` collects the user inputs for one calculation and ``PaymentRow``
is a single line of the resulting schedule. Both are plain dataclasses so
they are easy to construct, compare and serialize.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional


@dataclass(frozen=True)
class LoanTerms:
    """Inputs of a loan calculation.

    Attributes
    ----------
    principal: Decimal
        The amount borrowed.
    annual_rate: Decimal
        Nominal annual interest rate in percent (``Decimal("5")`` is 5 %).
    compounding_frequency: int
        How many times per year interest is compounded.
    payment_frequency: int
        How many payments are made per year.
    term_years: Decimal
        Length of the loan in years. Fractional years are allowed.
    """

    principal: Decimal
    annual_rate: Decimal
    compounding_frequency: int
    payment_frequency: int
    term_years: Decimal

    @property
    def num_periods(self) -> Decimal:
        return self.term_years * self.payment_frequency


@dataclass
class PaymentRow:
    """One row of an amortization schedule.

    The leading row of every schedule only carries the starting balance; its
    ``index``, ``amount``, ``interest`` and ``principal`` are ``None``.
    """

    index: Optional[int]
    amount: Optional[Decimal]
    interest: Optional[Decimal]
    principal: Optional[Decimal]
    balance: Decimal

    @property
    def is_initial(self) -> bool:
        return self.index is None

    def to_dict(self) -> Dict[str, object]:
        def _num(value: Optional[Decimal]) -> Optional[float]:
            return None if value is None else float(value)

        return {
            "index": self.index,
            "amount": _num(self.amount),
            "interest": _num(self.interest),
            "principal": _num(self.principal),
            "balance": float(self.balance),
        }

"""Fixed-payment loan amortization calculator."""

from .data_models import LoanTerms, PaymentRow
from .engine import (
    build_schedule,
    calc_payments,
    compute_schedule,
    create_payment,
    get_period_rate,
    iter_schedule,
    monthly_comparison,
    validate_terms,
)
from .exceptions import AmortizationError, InvalidLoanTerms, PaymentTooSmall

__all__ = [
    "AmortizationError",
    "InvalidLoanTerms",
    "LoanTerms",
    "PaymentRow",
    "PaymentTooSmall",
    "build_schedule",
    "calc_payments",
    "compute_schedule",
    "create_payment",
    "get_period_rate",
    "iter_schedule",
    "monthly_comparison",
    "validate_terms",
]

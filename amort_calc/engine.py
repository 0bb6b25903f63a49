"""Core calculation engine for the amortization calculator.

This module implements the financial logic required to build a fixed-payment
amortization schedule. Three pure functions do the work:

* ``get_period_rate`` turns a nominal annual rate and a compounding frequency
  into the effective rate for one payment period;
* ``calc_payments`` computes the fixed periodic payment;
* ``create_payment`` produces a single schedule row, and ``iter_schedule``
  drives it period by period until the balance is paid off.

``compute_schedule`` ties them together for a ``LoanTerms`` object and returns
the schedule along with a summary dictionary.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal, DecimalException, getcontext
from typing import Dict, Iterator, List, Optional, Tuple

from .data_models import LoanTerms, PaymentRow
from .exceptions import InvalidLoanTerms, PaymentTooSmall
from .options import FREQUENCY_LABELS, Frequency
from .utils import round_cents, to_decimal

getcontext().prec = 28  # increase precision for financial calculations

logger = logging.getLogger(__name__)

DEFAULT_MAX_PERIODS = 10_000
MAX_NUM_PERIODS = 100_000
MONTHS_PER_YEAR = Frequency.MONTHLY.value


def get_period_rate(annual_rate: Decimal, compounding_frequency: int, payment_frequency: int) -> Decimal:
    """Return the effective interest rate per payment period.

    The formula is:

        r = (1 + i / c) ^ (c / p) - 1

    where ``i`` is the annual rate as a fraction, ``c`` the compounding
    frequency and ``p`` the payment frequency. When ``c == p`` the exponent is
    one and the rate is simply ``i / c``.
    """
    annual = annual_rate / Decimal(100)
    if compounding_frequency == payment_frequency:
        return annual / Decimal(compounding_frequency)
    base = 1 + annual / Decimal(compounding_frequency)
    return base ** (Decimal(compounding_frequency) / Decimal(payment_frequency)) - 1


def calc_payments(principal: Decimal, period_rate: Decimal, num_periods: Decimal) -> Decimal:
    """Return the fixed payment that retires ``principal`` in ``num_periods``.

    The formula is:

        payment = P * (r * (1 + r)^n) / ((1 + r)^n - 1)

    When the period rate is zero there is no interest and the payment is
    ``P / n``.
    """
    if period_rate == 0:
        return principal / num_periods
    factor = (1 + period_rate) ** num_periods
    return principal * (period_rate * factor) / (factor - 1)


def create_payment(
    payment_amount: Decimal,
    previous_balance: Decimal,
    period_rate: Decimal,
    index: int,
) -> PaymentRow:
    """Return the schedule row for one payment.

    If the regular payment would overshoot the remaining balance plus this
    period's interest, the row is the last one and its amount is reduced to
    exactly clear the loan.
    """
    interest = period_rate * previous_balance
    if interest + previous_balance < payment_amount:
        payment_amount = previous_balance + interest
    principal = payment_amount - interest
    balance = previous_balance - principal
    if balance < 0:
        balance = Decimal(0)
    return PaymentRow(
        index=index,
        amount=payment_amount,
        interest=interest,
        principal=principal,
        balance=balance,
    )


def iter_schedule(
    principal: Decimal,
    payment_amount: Decimal,
    period_rate: Decimal,
    max_periods: int = DEFAULT_MAX_PERIODS,
) -> Iterator[PaymentRow]:
    """Yield the amortization schedule row by row.

    The first row carries only the starting balance. Payment rows follow while
    the balance, rounded to cents, is still positive.

    Raises
    ------
    PaymentTooSmall
        If the payment does not exceed the first period's interest, or if the
        loan is not paid off within ``max_periods`` payments.
    """
    balance = principal
    if round_cents(balance) > 0 and payment_amount <= period_rate * balance:
        logger.warning(
            "Payment %s does not cover first-period interest on %s", payment_amount, balance
        )
        raise PaymentTooSmall(
            "Payment must exceed the first period's interest charge",
            details=f"payment={round_cents(payment_amount)}, interest={round_cents(period_rate * balance)}",
        )

    yield PaymentRow(index=None, amount=None, interest=None, principal=None, balance=balance)

    index = 1
    while round_cents(balance) > 0:
        if index > max_periods:
            logger.warning("Schedule exceeded %d payments with balance %s", max_periods, balance)
            raise PaymentTooSmall(
                f"Loan is not paid off within {max_periods} payments",
                details=f"remaining balance={round_cents(balance)}",
            )
        row = create_payment(payment_amount, balance, period_rate, index)
        balance = row.balance
        index += 1
        yield row


def build_schedule(
    principal: Decimal,
    payment_amount: Decimal,
    period_rate: Decimal,
    max_periods: int = DEFAULT_MAX_PERIODS,
) -> List[PaymentRow]:
    """Return the full schedule as a list. See ``iter_schedule``."""
    return list(iter_schedule(principal, payment_amount, period_rate, max_periods))


def validate_terms(terms: LoanTerms) -> LoanTerms:
    """Check loan terms and return a copy with all amounts as ``Decimal``.

    Raises ``InvalidLoanTerms`` describing the first offending field.
    """
    try:
        principal = to_decimal(terms.principal)
        annual_rate = to_decimal(terms.annual_rate)
        term_years = to_decimal(terms.term_years)
    except ValueError as exc:
        raise InvalidLoanTerms("Loan terms must be numeric", details=str(exc)) from exc

    if principal <= 0:
        raise InvalidLoanTerms("Principal must be positive", details=f"principal={principal}")
    if annual_rate < 0:
        raise InvalidLoanTerms("Annual rate must not be negative", details=f"annual_rate={annual_rate}")
    if term_years <= 0:
        raise InvalidLoanTerms("Term must be positive", details=f"term_years={term_years}")
    for name in ("compounding_frequency", "payment_frequency"):
        value = getattr(terms, name)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidLoanTerms(
                f"{name.replace('_', ' ').capitalize()} must be a positive integer",
                details=f"{name}={value!r}",
            )
    num_periods = term_years * int(terms.payment_frequency)
    if num_periods > MAX_NUM_PERIODS:
        raise InvalidLoanTerms(
            f"Term is too long; at most {MAX_NUM_PERIODS} payments are supported",
            details=f"payments={num_periods}",
        )

    return LoanTerms(
        principal=principal,
        annual_rate=annual_rate,
        compounding_frequency=int(terms.compounding_frequency),
        payment_frequency=int(terms.payment_frequency),
        term_years=term_years,
    )


def monthly_comparison(terms: LoanTerms, payment_amount: Optional[Decimal] = None) -> Dict[str, Decimal]:
    """Compare the payment plan in ``terms`` with a monthly-payment baseline.

    The baseline reuses the same rate and compounding frequency but pays
    monthly over the same number of years. The plan's payment is scaled to an
    equivalent monthly amount so the two can be compared; a positive
    ``savings_per_year`` means the plan is cheaper than paying monthly.
    """
    if payment_amount is None:
        rate = get_period_rate(terms.annual_rate, terms.compounding_frequency, terms.payment_frequency)
        payment_amount = calc_payments(terms.principal, rate, terms.num_periods)
    monthly_rate = get_period_rate(terms.annual_rate, terms.compounding_frequency, MONTHS_PER_YEAR)
    monthly_periods = terms.term_years * MONTHS_PER_YEAR
    baseline = calc_payments(terms.principal, monthly_rate, monthly_periods)
    equivalent = payment_amount * terms.payment_frequency / MONTHS_PER_YEAR
    return {
        "monthly_baseline_payment": baseline,
        "monthly_equivalent_payment": equivalent,
        "savings_per_year": (baseline - equivalent) * MONTHS_PER_YEAR,
    }


def compute_schedule(
    terms: LoanTerms, max_periods: int = DEFAULT_MAX_PERIODS
) -> Tuple[List[PaymentRow], Dict[str, object]]:
    """Compute the amortization schedule and summary for a loan.

    Parameters
    ----------
    terms: LoanTerms
        The loan inputs. They are validated before anything is computed.
    max_periods: int
        Safety bound on the number of payment rows. It is raised to cover the
        loan's own number of payments, so it only trips on a runaway schedule.

    Returns
    -------
    schedule: List[PaymentRow]
        The initial balance row followed by one row per payment.
    summary: Dict[str, object]
        Payment amount, totals, interest percentage and the comparison with
        a monthly-payment baseline.
    """
    terms = validate_terms(terms)
    num_periods = terms.num_periods
    bound = max(max_periods, math.ceil(num_periods) + 1)
    try:
        period_rate = get_period_rate(terms.annual_rate, terms.compounding_frequency, terms.payment_frequency)
        payment_amount = calc_payments(terms.principal, period_rate, num_periods)
        logger.debug(
            "Computing schedule: principal=%s rate=%s periods=%s payment=%s",
            terms.principal,
            period_rate,
            num_periods,
            payment_amount,
        )
        schedule = build_schedule(terms.principal, payment_amount, period_rate, bound)
        total_payment = payment_amount * num_periods
        total_interest = total_payment - terms.principal
        interest_pct = total_interest / terms.principal * 100
        comparison = monthly_comparison(terms, payment_amount)
    except DecimalException as exc:
        logger.warning("Arithmetic failure for %s: %r", terms, exc)
        raise InvalidLoanTerms("Loan terms are out of the computable range", details=repr(exc)) from exc

    summary = {
        "principal": float(terms.principal),
        "period_rate": float(period_rate),
        "num_periods": float(num_periods),
        "payment_frequency": terms.payment_frequency,
        "frequency_text": FREQUENCY_LABELS.get(terms.payment_frequency, f"{terms.payment_frequency} per year"),
        "payment_amount": float(payment_amount),
        "total_payment": float(total_payment),
        "total_interest": float(total_interest),
        "total_interest_pct": float(interest_pct),
        "monthly_baseline_payment": float(comparison["monthly_baseline_payment"]),
        "monthly_equivalent_payment": float(comparison["monthly_equivalent_payment"]),
        "savings_per_year": float(comparison["savings_per_year"]),
        "payments_made": sum(1 for row in schedule if not row.is_initial),
    }
    logger.debug("Schedule has %d payments", summary["payments_made"])
    return schedule, summary

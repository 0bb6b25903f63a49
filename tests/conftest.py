"""Shared fixtures.

Fixture: $10,000 loan at 5 % for one year, compounded monthly.
"""

from decimal import Decimal

import pytest

from amort_calc.data_models import LoanTerms


@pytest.fixture
def monthly_terms() -> LoanTerms:
    """Monthly payments on a monthly-compounded loan."""
    return LoanTerms(
        principal=Decimal("10000"),
        annual_rate=Decimal("5.00"),
        compounding_frequency=12,
        payment_frequency=12,
        term_years=Decimal("1"),
    )


@pytest.fixture
def weekly_terms() -> LoanTerms:
    """Same loan paid weekly."""
    return LoanTerms(
        principal=Decimal("10000"),
        annual_rate=Decimal("5.00"),
        compounding_frequency=12,
        payment_frequency=52,
        term_years=Decimal("1"),
    )

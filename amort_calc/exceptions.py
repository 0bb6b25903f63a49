"""Exceptions raised by the amortization calculator.

The pure calculation functions never raise these themselves. They are raised
at the boundary: when loan terms are validated and when the schedule driver
detects a payment that can never retire the balance.
"""

from __future__ import annotations

from typing import Optional


class AmortizationError(ValueError):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class InvalidLoanTerms(AmortizationError):
    """Raised when loan terms fail validation."""


class PaymentTooSmall(AmortizationError):
    """Raised when the periodic payment cannot pay the loan off."""

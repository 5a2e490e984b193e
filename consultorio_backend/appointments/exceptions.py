"""
Billing-specific exceptions for the appointments app.

These exceptions are raised by the billing services and should be
translated to appropriate DRF responses in the views.
"""

from __future__ import annotations

from typing import Any


class BillingError(Exception):
    """Base exception for all billing-related errors."""

    def __init__(self, message: str = "Billing error"):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {'detail': self.message}


class InvalidPaymentAmount(BillingError):
    """
    Raised when a payment amount is missing, not numeric or not positive.

    The appointment is left unchanged.
    """

    def __init__(self, amount: Any, message: str = "Payment amount must be a number greater than zero."):
        self.amount = amount
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            'detail': self.message,
            'amount': None if self.amount is None else str(self.amount),
        }

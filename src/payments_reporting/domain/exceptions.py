"""Domain exceptions for payments-reporting.

Exception hierarchy:
    DomainException (base)
    └── Validation Errors
        ├── InvalidPaymentIdError
        ├── InvalidYearMonthError
        ├── InvalidPaymentDateError
        └── InvalidAmountError

Query operations never raise these; they surface only while constructing
value objects and entities. Failures from the payment repository or the
time provider propagate to the caller untouched.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidPaymentIdError(DomainException, ValueError):
    """Raised when a payment ID fails validation.

    PaymentId must be a valid UUID.
    """


class InvalidYearMonthError(DomainException, ValueError):
    """Raised when a year-month cannot be built.

    The month must be in 1..12 and the year must be a positive
    calendar year. Text must have the form ``YYYY-MM``.
    """


class InvalidPaymentDateError(DomainException, ValueError):
    """Raised when a payment is dated with a naive datetime.

    Payment dates are compared and subtracted against the clock, which
    is always timezone-aware.
    """


class InvalidAmountError(DomainException, ValueError):
    """Raised when a price is not an exact decimal amount.

    Floats are rejected so that sums and comparisons over prices
    never pick up binary rounding error.
    """

"""Domain entities - Objects with identity."""

from payments_reporting.domain.entities.payment import Payment, PaymentItem
from payments_reporting.domain.entities.user import User

__all__ = [
    "Payment",
    "PaymentItem",
    "User",
]

"""payments-reporting - read-only reporting queries over payment records."""

from payments_reporting.application.ports import PaymentRepository, TimeProvider
from payments_reporting.application.queries import PaymentOrdering, PaymentQueryService
from payments_reporting.domain.entities import Payment, PaymentItem, User
from payments_reporting.domain.value_objects import PaymentId, YearMonth

__all__ = [
    "Payment",
    "PaymentId",
    "PaymentItem",
    "PaymentOrdering",
    "PaymentQueryService",
    "PaymentRepository",
    "TimeProvider",
    "User",
    "YearMonth",
]

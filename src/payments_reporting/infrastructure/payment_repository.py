from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from payments_reporting.application.ports import PaymentRepository

if TYPE_CHECKING:
    from collections.abc import Iterable

    from payments_reporting.domain.entities import Payment


class InMemoryPaymentRepository(PaymentRepository):
    """In-memory payment store for tests and embedding callers.

    Implementation notes:
    - Keeps payments in insertion order; fetch_all() returns them in that order
    - Stores deep copies in add() and returns deep copies from fetch_all()
    - Duplicates are kept as given; the store does not deduplicate
    - NOT thread-safe

    Copy-on-read mimics a database: each fetch_all() is a detached
    snapshot, so nothing a caller does to the returned list or its
    payments can leak back into the store.
    """

    def __init__(self, payments: Iterable[Payment] = ()) -> None:
        self._payments: list[Payment] = []
        for payment in payments:
            self.add(payment)

    def add(self, payment: Payment) -> None:
        self._payments.append(copy.deepcopy(payment))

    def fetch_all(self) -> list[Payment]:
        return copy.deepcopy(self._payments)

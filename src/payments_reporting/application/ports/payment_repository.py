from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from payments_reporting.domain.entities import Payment


class PaymentRepository(ABC):
    """Port for bulk, read-only access to payment records.

    Contract:
    - fetch_all() returns every payment currently known to the store
    - fetch_all() may be called repeatedly; each call is a fresh read
    - The returned sequence is a consistent snapshot for the caller
    - No pagination or filtering is pushed down to the store

    Failures (connection loss, corrupt data) are the implementation's own
    exceptions; query code lets them propagate unchanged.
    """

    @abstractmethod
    def fetch_all(self) -> Sequence[Payment]:
        """Return all payments.

        Returns:
            The payments in the store's natural order. Callers must not
            mutate the returned sequence.
        """

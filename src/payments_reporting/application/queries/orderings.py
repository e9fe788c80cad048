"""Named sort strategies for payment listings."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from payments_reporting.domain.entities import Payment


def _payment_date(payment: Payment) -> datetime:
    return payment.payment_date


def _item_count(payment: Payment) -> int:
    return payment.item_count


class SortKey(Enum):
    """Attribute a payment listing is ordered by."""

    PAYMENT_DATE = "payment_date"
    ITEM_COUNT = "item_count"

    @property
    def extractor(self) -> Callable[[Payment], datetime | int]:
        return _KEY_EXTRACTORS[self]


_KEY_EXTRACTORS: dict[SortKey, Callable[[Payment], datetime | int]] = {
    SortKey.PAYMENT_DATE: _payment_date,
    SortKey.ITEM_COUNT: _item_count,
}


class SortDirection(Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(frozen=True, slots=True)
class PaymentOrdering:
    """A sort key paired with a direction.

    apply() is stable in both directions: payments with equal keys keep
    the order in which the repository returned them.
    """

    key: SortKey
    direction: SortDirection = SortDirection.ASCENDING

    def apply(self, payments: Iterable[Payment]) -> list[Payment]:
        return sorted(
            payments,
            key=self.key.extractor,
            reverse=self.direction is SortDirection.DESCENDING,
        )

    def __str__(self) -> str:
        return f"{self.key.value} {self.direction.value}"


BY_DATE_ASCENDING = PaymentOrdering(SortKey.PAYMENT_DATE, SortDirection.ASCENDING)
BY_DATE_DESCENDING = PaymentOrdering(SortKey.PAYMENT_DATE, SortDirection.DESCENDING)
BY_ITEM_COUNT_ASCENDING = PaymentOrdering(SortKey.ITEM_COUNT, SortDirection.ASCENDING)
BY_ITEM_COUNT_DESCENDING = PaymentOrdering(SortKey.ITEM_COUNT, SortDirection.DESCENDING)

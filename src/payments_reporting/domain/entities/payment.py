"""Payment entity and its line items.

Payments reach this package fully formed from a PaymentRepository and are
never changed by it. Both classes are frozen dataclasses; constructors
normalize their inputs (items to a tuple, prices to Decimal) and reject
what cannot be normalized: non-finite or float prices, naive payment
dates and item collections that are not iterable.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING

from payments_reporting.domain.exceptions import InvalidAmountError, InvalidPaymentDateError

if TYPE_CHECKING:
    from datetime import datetime

    from payments_reporting.domain.entities.user import User
    from payments_reporting.domain.value_objects.payment_id import PaymentId


def _to_decimal(amount: Decimal | int | str, field_name: str) -> Decimal:
    if isinstance(amount, float):
        raise InvalidAmountError(
            f"{field_name} must be an exact decimal amount, got float {amount!r}"
        )

    try:
        result = amount if isinstance(amount, Decimal) else Decimal(amount)
    except (ArithmeticError, TypeError, ValueError) as e:
        raise InvalidAmountError(f"Invalid {field_name}: {amount!r}") from e

    if not result.is_finite():
        raise InvalidAmountError(f"{field_name} must be a finite amount, got {amount!r}")

    return result


@dataclass(frozen=True, slots=True)
class PaymentItem:
    """One line item of a payment.

    ``final_price`` is what the customer paid; it is at most
    ``regular_price`` when a discount applies. Prices given as ``int``
    or ``str`` are converted to Decimal; floats raise InvalidAmountError.
    """

    name: str
    regular_price: Decimal
    final_price: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "regular_price", _to_decimal(self.regular_price, "regular_price"))
        object.__setattr__(self, "final_price", _to_decimal(self.final_price, "final_price"))

    @property
    def discount(self) -> Decimal:
        return self.regular_price - self.final_price


@dataclass(frozen=True, slots=True)
class Payment:
    """A completed transaction with its owning user and ordered line items.

    Equality and hashing are structural over ``id``, ``payment_date`` and
    ``payment_items``. The ``user`` is excluded: two records describing the
    same transaction compare equal even when they carry separately loaded
    copies of the user profile. Set-returning queries rely on this to
    collapse duplicates.

    ``payment_items`` accepts any iterable of items (or None for no items)
    and is stored as a tuple, so insertion order is preserved and the
    entity stays hashable. ``payment_date`` must be timezone-aware.

    Raises:
        InvalidPaymentDateError: If ``payment_date`` is naive.
        TypeError: If ``payment_items`` is a string or not iterable.
    """

    id: PaymentId
    payment_date: datetime
    user: User = field(compare=False)
    payment_items: tuple[PaymentItem, ...] = ()

    def __post_init__(self) -> None:
        if self.payment_date.tzinfo is None or self.payment_date.utcoffset() is None:
            raise InvalidPaymentDateError(
                f"payment_date must be timezone-aware, got naive {self.payment_date.isoformat()}"
            )

        items = self.payment_items
        if items is None:
            object.__setattr__(self, "payment_items", ())
        elif not isinstance(items, tuple):
            if isinstance(items, str | bytes) or not isinstance(items, Iterable):
                raise TypeError(f"payment_items must be iterable, got {type(items).__name__}")
            object.__setattr__(self, "payment_items", tuple(items))

    @property
    def item_count(self) -> int:
        return len(self.payment_items)

    @property
    def regular_total(self) -> Decimal:
        """Sum of regular prices across all items; zero for an empty payment."""
        return sum((item.regular_price for item in self.payment_items), Decimal(0))

    @property
    def final_total(self) -> Decimal:
        """Sum of final (paid) prices across all items."""
        return sum((item.final_price for item in self.payment_items), Decimal(0))

    @property
    def discount_total(self) -> Decimal:
        return sum((item.discount for item in self.payment_items), Decimal(0))

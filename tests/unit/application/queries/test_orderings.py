from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from payments_reporting.application.queries.orderings import (
    BY_DATE_ASCENDING,
    BY_DATE_DESCENDING,
    BY_ITEM_COUNT_ASCENDING,
    BY_ITEM_COUNT_DESCENDING,
    PaymentOrdering,
    SortDirection,
    SortKey,
)
from payments_reporting.domain.entities import Payment, PaymentItem, User
from payments_reporting.domain.value_objects import PaymentId


def payment_with(item_count: int, day: int) -> Payment:
    return Payment(
        id=PaymentId.generate(),
        payment_date=datetime(2023, 6, 1, tzinfo=UTC) + timedelta(days=day),
        user=User(email="orderings@example.com"),
        payment_items=[
            PaymentItem(name=f"p{i}", regular_price=Decimal(1), final_price=Decimal(1))
            for i in range(item_count)
        ],
    )


class TestSortKey:
    def test_payment_date_extractor(self) -> None:
        payment = payment_with(1, 3)

        assert SortKey.PAYMENT_DATE.extractor(payment) == payment.payment_date
        assert isinstance(SortKey.PAYMENT_DATE.extractor(payment), datetime)

    def test_item_count_extractor(self) -> None:
        payment = payment_with(4, 0)

        assert SortKey.ITEM_COUNT.extractor(payment) == 4
        assert type(SortKey.ITEM_COUNT.extractor(payment)) is int


class TestPaymentOrdering:
    def test_default_direction_is_ascending(self) -> None:
        ordering = PaymentOrdering(SortKey.PAYMENT_DATE)

        assert ordering.direction is SortDirection.ASCENDING

    def test_apply_does_not_mutate_input(self) -> None:
        payments = [payment_with(2, 0), payment_with(1, 1)]
        original = list(payments)

        BY_ITEM_COUNT_ASCENDING.apply(payments)

        assert payments == original

    def test_apply_returns_new_list(self) -> None:
        payments = [payment_with(1, 0)]

        assert BY_DATE_ASCENDING.apply(payments) is not payments

    def test_apply_accepts_any_iterable(self) -> None:
        first, second = payment_with(1, 0), payment_with(1, 1)

        assert BY_DATE_DESCENDING.apply(iter([first, second])) == [second, first]

    @pytest.mark.parametrize("ordering", [BY_ITEM_COUNT_ASCENDING, BY_ITEM_COUNT_DESCENDING])
    def test_ties_keep_input_order_in_both_directions(self, ordering: PaymentOrdering) -> None:
        tied = [payment_with(2, day) for day in range(5)]

        assert ordering.apply(tied) == tied

    def test_descending_item_count_puts_largest_first(self) -> None:
        small, large, medium = payment_with(1, 0), payment_with(5, 1), payment_with(3, 2)

        assert BY_ITEM_COUNT_DESCENDING.apply([small, large, medium]) == [large, medium, small]

    def test_orderings_are_value_objects(self) -> None:
        ordering = PaymentOrdering(SortKey.ITEM_COUNT, SortDirection.DESCENDING)

        assert ordering == BY_ITEM_COUNT_DESCENDING
        assert BY_DATE_ASCENDING != BY_DATE_DESCENDING

    def test_str(self) -> None:
        assert str(BY_DATE_DESCENDING) == "payment_date desc"

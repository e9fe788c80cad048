from __future__ import annotations

from datetime import UTC, datetime, timedelta
from decimal import Decimal
from typing import TYPE_CHECKING

from payments_reporting.application.queries.logger import PaymentQueryLogger
from payments_reporting.application.queries.orderings import (
    BY_DATE_ASCENDING,
    BY_DATE_DESCENDING,
    BY_ITEM_COUNT_ASCENDING,
    BY_ITEM_COUNT_DESCENDING,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from payments_reporting.application.ports import PaymentRepository, TimeProvider
    from payments_reporting.application.queries.orderings import PaymentOrdering
    from payments_reporting.domain.entities import Payment, PaymentItem
    from payments_reporting.domain.value_objects import YearMonth

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_SECONDS_PER_DAY = 86_400


def _epoch_seconds(dt: datetime) -> int:
    return (dt - _EPOCH) // timedelta(seconds=1)


def whole_days_between(earlier: datetime, later: datetime) -> int:
    """Whole days from ``earlier`` to ``later``, truncated toward zero.

    Both instants are first floored to whole epoch seconds; only then is
    the difference divided into days. Negative when ``earlier`` is
    actually after ``later``.
    """
    seconds = _epoch_seconds(later) - _epoch_seconds(earlier)
    days = abs(seconds) // _SECONDS_PER_DAY
    return days if seconds >= 0 else -days


class PaymentQueryService:
    """Read-only reporting queries over the payments in a repository.

    Responsibilities:
    - Fetch a fresh snapshot from the repository on every call (no caching)
    - Read "now" and "current month" only from the injected TimeProvider
    - Sort, filter and aggregate the snapshot without mutating it

    Every query is independent. Empty repositories yield empty collections
    or a zero Decimal, never an error. Exceptions raised by the repository
    or the time provider are not caught here.
    """

    def __init__(
        self,
        payment_repository: PaymentRepository,
        time_provider: TimeProvider,
        query_logger: PaymentQueryLogger | None = None,
    ) -> None:
        self._payment_repo = payment_repository
        self._time_provider = time_provider
        self._logger = query_logger or PaymentQueryLogger()

    # -------------------------------------------------------------------------
    # Sorting
    # -------------------------------------------------------------------------

    def sorted_by(self, ordering: PaymentOrdering) -> list[Payment]:
        """Return all payments ordered by the given strategy (stable)."""
        return self._sort("sorted_by", ordering)

    def sorted_by_date_ascending(self) -> list[Payment]:
        return self._sort("sorted_by_date_ascending", BY_DATE_ASCENDING)

    def sorted_by_date_descending(self) -> list[Payment]:
        return self._sort("sorted_by_date_descending", BY_DATE_DESCENDING)

    def sorted_by_item_count_ascending(self) -> list[Payment]:
        return self._sort("sorted_by_item_count_ascending", BY_ITEM_COUNT_ASCENDING)

    def sorted_by_item_count_descending(self) -> list[Payment]:
        return self._sort("sorted_by_item_count_descending", BY_ITEM_COUNT_DESCENDING)

    # -------------------------------------------------------------------------
    # Filtering
    # -------------------------------------------------------------------------

    def for_month(self, year_month: YearMonth) -> list[Payment]:
        """Return payments dated within ``year_month``, in repository order.

        The month is read from each payment's own timestamp, in the zone
        it was recorded with; no conversion is applied.
        """
        payments = self._fetch_all("for_month")
        result = [p for p in payments if year_month.contains(p.payment_date)]
        self._logger.month_filtered(year_month, len(result), len(payments))
        return result

    def for_current_month(self) -> list[Payment]:
        return self.for_month(self._time_provider.current_year_month())

    def for_last_days(self, days: int) -> list[Payment]:
        """Return payments younger than ``days`` whole days, in repository order.

        A payment's age is ``now - payment_date`` truncated toward zero to
        whole days. Only payments whose age is strictly below ``days`` are
        kept, so ``for_last_days(0)`` never includes a payment from the past.
        """
        payments = self._fetch_all("for_last_days")
        now = self._time_provider.now()
        result = [p for p in payments if whole_days_between(p.payment_date, now) < days]
        self._logger.recent_filtered(days, now, len(result), len(payments))
        return result

    def with_exactly_one_item(self) -> set[Payment]:
        payments = self._fetch_all("with_exactly_one_item")
        result = {p for p in payments if p.item_count == 1}
        self._logger.result("with_exactly_one_item", len(result))
        return result

    def payments_over_value(self, threshold: int) -> set[Payment]:
        """Return payments whose regular-price total is strictly above ``threshold``."""
        payments = self._fetch_all("payments_over_value")
        limit = Decimal(threshold)
        result = {p for p in payments if p.regular_total > limit}
        self._logger.result("payments_over_value", len(result))
        return result

    def items_for_user_email(self, email: str) -> list[PaymentItem]:
        """Return every item bought by the user with exactly this email.

        Items are flattened in repository order of payments, then in each
        payment's own item order. Matching is case-sensitive.
        """
        payments = self._fetch_all("items_for_user_email")
        result = [
            item
            for payment in payments
            if payment.user.email == email
            for item in payment.payment_items
        ]
        self._logger.result("items_for_user_email", len(result))
        return result

    # -------------------------------------------------------------------------
    # Aggregates
    # -------------------------------------------------------------------------

    def products_sold_this_month(self) -> set[str]:
        """Return the distinct product names sold in the current month."""
        return {
            item.name
            for payment in self.for_current_month()
            for item in payment.payment_items
        }

    def total_for_month(self, year_month: YearMonth) -> Decimal:
        """Sum of final prices over all items sold in ``year_month``."""
        return sum(
            (payment.final_total for payment in self.for_month(year_month)),
            Decimal(0),
        )

    def discount_total_for_month(self, year_month: YearMonth) -> Decimal:
        """Sum of ``regular_price - final_price`` over all items sold in ``year_month``."""
        return sum(
            (payment.discount_total for payment in self.for_month(year_month)),
            Decimal(0),
        )

    def _sort(self, query: str, ordering: PaymentOrdering) -> list[Payment]:
        payments = self._fetch_all(query)
        result = ordering.apply(payments)
        self._logger.sorted(ordering, len(result))
        return result

    def _fetch_all(self, query: str) -> Sequence[Payment]:
        payments = self._payment_repo.fetch_all()
        self._logger.fetched(query, len(payments))
        return payments

"""Queries - Read-only reports over payment records."""

from payments_reporting.application.queries.logger import PaymentQueryLogger
from payments_reporting.application.queries.orderings import (
    BY_DATE_ASCENDING,
    BY_DATE_DESCENDING,
    BY_ITEM_COUNT_ASCENDING,
    BY_ITEM_COUNT_DESCENDING,
    PaymentOrdering,
    SortDirection,
    SortKey,
)
from payments_reporting.application.queries.payment_query_service import (
    PaymentQueryService,
    whole_days_between,
)

__all__ = [
    "BY_DATE_ASCENDING",
    "BY_DATE_DESCENDING",
    "BY_ITEM_COUNT_ASCENDING",
    "BY_ITEM_COUNT_DESCENDING",
    "PaymentOrdering",
    "PaymentQueryLogger",
    "PaymentQueryService",
    "SortDirection",
    "SortKey",
    "whole_days_between",
]

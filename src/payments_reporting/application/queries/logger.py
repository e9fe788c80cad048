"""Logging for payment report queries.

Keeps log formatting out of the query methods themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import loguru
from loguru import logger

if TYPE_CHECKING:
    from datetime import datetime

    from payments_reporting.application.queries.orderings import PaymentOrdering
    from payments_reporting.domain.value_objects import YearMonth


class PaymentQueryLogger:
    """Handles all logging for PaymentQueryService."""

    def __init__(self, logger_instance: loguru.Logger = logger) -> None:
        """Initialize logger.

        Args:
            logger_instance: Logger instance to use (defaults to loguru.logger)
        """
        self._logger = logger_instance

    def fetched(self, query: str, payment_count: int) -> None:
        """Log the size of the snapshot a query works on."""
        self._logger.bind(query=query, payments=payment_count).debug(
            "{}: fetched {} payments", query, payment_count
        )

    def sorted(self, ordering: PaymentOrdering, payment_count: int) -> None:
        self._logger.bind(ordering=str(ordering), payments=payment_count).debug(
            "Sorted {} payments by {}", payment_count, ordering
        )

    def month_filtered(self, year_month: YearMonth, matched: int, total: int) -> None:
        self._logger.bind(year_month=str(year_month), matched=matched, total=total).debug(
            "Month {}: {}/{} payments matched", year_month, matched, total
        )

    def recent_filtered(self, days: int, now: datetime, matched: int, total: int) -> None:
        """Log a last-N-days filter, including the clock reading it used."""
        self._logger.bind(days=days, now=now.isoformat(), matched=matched, total=total).debug(
            "Last {} days as of {}: {}/{} payments matched",
            days,
            now.isoformat(),
            matched,
            total,
        )

    def result(self, query: str, size: int) -> None:
        self._logger.bind(query=query, size=size).debug("{}: returned {} rows", query, size)

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from payments_reporting.domain.exceptions import InvalidYearMonthError

if TYPE_CHECKING:
    from datetime import datetime

_YEAR_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


@dataclass(frozen=True, slots=True, order=True)
class YearMonth:
    """A calendar month identified by year and month number, without a day.

    Ordering follows the calendar: 2023-12 < 2024-01.
    """

    year: int
    month: int

    def __post_init__(self) -> None:
        if self.year < 1:
            raise InvalidYearMonthError(f"Year must be positive, got {self.year}")

        if not 1 <= self.month <= 12:
            raise InvalidYearMonthError(f"Month must be in 1..12, got {self.month}")

    @classmethod
    def from_datetime(cls, dt: datetime) -> YearMonth:
        """Year-month of a timestamp, read in the timestamp's own zone."""
        return cls(year=dt.year, month=dt.month)

    @classmethod
    def parse(cls, text: str) -> YearMonth:
        """Parse ``YYYY-MM`` text.

        Raises:
            InvalidYearMonthError: If the text is malformed or out of range.
        """
        match = _YEAR_MONTH_PATTERN.match(text.strip())
        if match is None:
            raise InvalidYearMonthError(f"Invalid year-month: {text!r}; expected YYYY-MM")

        return cls(year=int(match.group(1)), month=int(match.group(2)))

    def contains(self, dt: datetime) -> bool:
        return dt.year == self.year and dt.month == self.month

    def next(self) -> YearMonth:
        if self.month == 12:
            return YearMonth(self.year + 1, 1)
        return YearMonth(self.year, self.month + 1)

    def previous(self) -> YearMonth:
        if self.month == 1:
            return YearMonth(self.year - 1, 12)
        return YearMonth(self.year, self.month - 1)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from payments_reporting.domain.value_objects import YearMonth

if TYPE_CHECKING:
    from datetime import datetime


class TimeProvider(ABC):
    """Port for time operations.

    Contract:
    - now() MUST return a timezone-aware datetime
    - current_year_month() MUST agree with now() read in the same zone
    - Both calls are side-effect-free reads

    Query code reads the clock only through this port, so a fixed
    implementation makes every time-relative report deterministic.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current timezone-aware datetime."""
        ...

    def current_year_month(self) -> YearMonth:
        """Return the calendar month containing now()."""
        return YearMonth.from_datetime(self.now())

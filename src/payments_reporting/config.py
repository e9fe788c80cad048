"""Environment-driven settings for applications embedding payments-reporting.

Variables:
    PAYMENTS_REPORTING_TIMEZONE   IANA zone for the system clock (default: UTC)
    PAYMENTS_REPORTING_LOG_LEVEL  loguru level for configure_logging() (default: WARNING)
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from datetime import UTC, tzinfo
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from loguru import logger

if TYPE_CHECKING:
    from pathlib import Path

TIMEZONE_ENV = "PAYMENTS_REPORTING_TIMEZONE"
LOG_LEVEL_ENV = "PAYMENTS_REPORTING_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class ReportingSettings:
    timezone: tzinfo = UTC
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, dotenv_path: str | Path | None = None) -> ReportingSettings:
        """Build settings from the process environment.

        Values from a ``.env`` file are loaded first but never override
        variables already set in the environment.

        Raises:
            ValueError: If the configured timezone is unknown.
        """
        load_dotenv(dotenv_path=dotenv_path, override=False)

        tz_name = os.environ.get(TIMEZONE_ENV, "").strip() or "UTC"
        log_level = os.environ.get(LOG_LEVEL_ENV, "").strip().upper() or DEFAULT_LOG_LEVEL

        return cls(timezone=_parse_timezone(tz_name), log_level=log_level)


def _parse_timezone(name: str) -> tzinfo:
    if name.upper() == "UTC":
        return UTC
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone in {TIMEZONE_ENV}: {name!r}") from e


def configure_logging(settings: ReportingSettings) -> None:
    """Route loguru output to stderr at the configured level.

    The library itself never adds sinks; applications call this once at
    startup if they want the query logs.
    """
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)

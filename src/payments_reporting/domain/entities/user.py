from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    """Owner of one or more payments.

    Only ``email`` is used by the reporting queries; the profile
    fields are carried for callers that render reports.
    """

    email: str
    first_name: str | None = None
    last_name: str | None = None

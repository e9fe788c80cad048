"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from payments_reporting.application.ports.payment_repository import PaymentRepository
from payments_reporting.application.ports.time_provider import TimeProvider

__all__ = [
    "PaymentRepository",
    "TimeProvider",
]

"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Persistence: An in-memory payment repository
- Time Provider: Clock abstraction for testability

Infrastructure adapters implement the ports defined in the application layer.
"""

from payments_reporting.infrastructure.payment_repository import InMemoryPaymentRepository
from payments_reporting.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "FixedTimeProvider",
    "InMemoryPaymentRepository",
    "SystemTimeProvider",
]

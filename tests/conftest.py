"""Shared pytest fixtures for the test suite."""

from datetime import UTC, datetime
from decimal import Decimal

import pytest

from payments_reporting.application.queries import PaymentQueryService
from payments_reporting.domain.entities import Payment, PaymentItem, User
from payments_reporting.domain.value_objects import PaymentId
from payments_reporting.infrastructure.payment_repository import InMemoryPaymentRepository
from payments_reporting.infrastructure.time_provider import FixedTimeProvider


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing (mid June 2023)."""
    return datetime(2023, 6, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def alice() -> User:
    return User(email="alice@example.com", first_name="Alice", last_name="Nowak")


@pytest.fixture
def bob() -> User:
    return User(email="bob@example.com", first_name="Bob", last_name="Kowalski")


@pytest.fixture
def june_payment(alice: User) -> Payment:
    """Two items, one discounted, paid on 2023-06-01."""
    return Payment(
        id=PaymentId.generate(),
        payment_date=datetime(2023, 6, 1, 9, 30, 0, tzinfo=UTC),
        user=alice,
        payment_items=(
            PaymentItem(name="Keyboard", regular_price=Decimal("100.00"), final_price=Decimal("80.00")),
            PaymentItem(name="Mouse", regular_price=Decimal("40.00"), final_price=Decimal("40.00")),
        ),
    )


@pytest.fixture
def late_june_payment(bob: User) -> Payment:
    """One item, paid the day before the fixed clock."""
    return Payment(
        id=PaymentId.generate(),
        payment_date=datetime(2023, 6, 14, 18, 0, 0, tzinfo=UTC),
        user=bob,
        payment_items=(
            PaymentItem(name="Monitor", regular_price=Decimal("300.00"), final_price=Decimal("250.00")),
        ),
    )


@pytest.fixture
def may_payment(alice: User) -> Payment:
    """Three items, paid in May 2023."""
    return Payment(
        id=PaymentId.generate(),
        payment_date=datetime(2023, 5, 20, 10, 0, 0, tzinfo=UTC),
        user=alice,
        payment_items=(
            PaymentItem(name="Cable", regular_price=Decimal("10.00"), final_price=Decimal("10.00")),
            PaymentItem(name="Adapter", regular_price=Decimal("15.00"), final_price=Decimal("12.50")),
            PaymentItem(name="Mouse", regular_price=Decimal("40.00"), final_price=Decimal("35.00")),
        ),
    )


@pytest.fixture
def july_payment(bob: User) -> Payment:
    """One item, paid in July 2023 (after the fixed clock)."""
    return Payment(
        id=PaymentId.generate(),
        payment_date=datetime(2023, 7, 1, 8, 0, 0, tzinfo=UTC),
        user=bob,
        payment_items=(
            PaymentItem(name="Headset", regular_price=Decimal("50.00"), final_price=Decimal("50.00")),
        ),
    )


@pytest.fixture
def empty_payment(bob: User) -> Payment:
    """A payment without items, paid on 2023-06-10."""
    return Payment(
        id=PaymentId.generate(),
        payment_date=datetime(2023, 6, 10, 15, 0, 0, tzinfo=UTC),
        user=bob,
        payment_items=(),
    )


@pytest.fixture
def payments(
    june_payment: Payment,
    may_payment: Payment,
    july_payment: Payment,
    late_june_payment: Payment,
    empty_payment: Payment,
) -> list[Payment]:
    """Sample payments in the order the repository returns them."""
    return [june_payment, may_payment, july_payment, late_june_payment, empty_payment]


@pytest.fixture
def payment_repository(payments: list[Payment]) -> InMemoryPaymentRepository:
    return InMemoryPaymentRepository(payments)


@pytest.fixture
def service(
    payment_repository: InMemoryPaymentRepository, time_provider: FixedTimeProvider
) -> PaymentQueryService:
    return PaymentQueryService(payment_repository, time_provider)

"""Domain layer - Entities, value objects and rules.

This layer contains:
- Entities: Payment, PaymentItem and User records
- Value Objects: Immutable objects defined by their attributes (PaymentId, YearMonth)
- Domain Exceptions: Validation failures while building the above

The domain layer has NO dependencies on external frameworks or infrastructure.
"""

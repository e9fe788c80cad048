"""Application layer - Queries and port definitions.

This layer contains:
- Queries: Read-only reports over payment records
- Ports: Abstract interfaces for the payment store and the clock

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""

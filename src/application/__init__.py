"""Application layer - Use cases and orchestration.

This layer contains the auth use cases as command handlers:
- commands/: Command dataclasses and handlers (sign-up, sign-in, logout, refresh)
- dtos/: Result dataclasses returned by handlers
- services/: Shared orchestration helpers (device session writes)
- errors/: Application error types

The application layer orchestrates domain protocols but knows nothing
about Redis or SQLAlchemy.
"""

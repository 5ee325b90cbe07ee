"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- persistence/: SQLAlchemy models, Database and repositories
- cache/: Redis adapter and the per-device access token cache
- security/: bcrypt password hashing and JWT token pairs
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""

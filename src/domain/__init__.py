"""Domain layer - Pure business logic.

This layer contains the core entities, enums and protocols (ports) of the
device-session authentication system. The domain layer has NO dependencies
on any framework or infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (User, UserCredentials)
- enums/: Roles and token kinds
- errors/: Domain error message constants
- protocols/: Store and service interfaces
"""

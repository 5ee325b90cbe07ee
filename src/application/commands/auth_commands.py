"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class SignUp:
    """Register a new account and open a session on one device.

    Used by both SignUpHandler and SignUpAdminHandler; the handler decides
    the role.

    Attributes:
        email: User's email address.
        password: Plaintext password (hashed before persistence).
        device_id: Device the first session is opened on.
        name: Optional display name.

    Example:
        >>> command = SignUp(
        ...     email="a@x.com",
        ...     password="p1",
        ...     device_id="d1",
        ... )
        >>> result = await handler.handle(command)
    """

    email: str
    password: str
    device_id: str
    name: str | None = None


@dataclass(frozen=True, kw_only=True)
class SignIn:
    """Authenticate credentials and replace the session on one device.

    Attributes:
        email: User's email address.
        password: Plaintext password.
        device_id: Device whose session is (re)opened.
    """

    email: str
    password: str
    device_id: str


@dataclass(frozen=True, kw_only=True)
class Logout:
    """Close the session for one device.

    Attributes:
        user_id: Authenticated user's ID.
        device_id: Device whose session is closed.
    """

    user_id: UUID
    device_id: str


@dataclass(frozen=True, kw_only=True)
class RefreshTokens:
    """Rotate the token pair for one device session.

    Attributes:
        user_id: Authenticated user's ID.
        device_id: Device whose tokens are rotated.
    """

    user_id: UUID
    device_id: str

"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (SignUp, SignIn).

Each command has a corresponding handler in commands/handlers/.
"""

from src.application.commands.auth_commands import (
    Logout,
    RefreshTokens,
    SignIn,
    SignUp,
)

__all__ = [
    "Logout",
    "RefreshTokens",
    "SignIn",
    "SignUp",
]

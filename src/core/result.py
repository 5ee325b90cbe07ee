"""Result types for railway-oriented programming.

Command handlers return a Result instead of raising for expected business
failures (duplicate email, bad credentials, missing user). Collaborator
failures (database, cache) are still raised and propagate to the caller.

Usage:
    result = await sign_in_handler.handle(cmd)
    match result:
        case Success(value=auth):
            tokens = auth.tokens
        case Failure(error=error):
            logger.warning("Sign-in rejected", code=error.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Rejected outcome.

    Attributes:
        error: Why the operation was rejected.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]

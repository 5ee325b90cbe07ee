"""Authentication error constants.

Error values used in Result types for token validation. These are NOT exceptions.

Usage:
    from src.domain.errors import AuthenticationError
    from src.core.result import Failure

    result = token_service.validate_token(token, TokenType.ACCESS)
    match result:
        case Failure(error=AuthenticationError.EXPIRED_TOKEN):
            ...
"""


class AuthenticationError:
    """Authentication error constants.

    Error Categories:
        - Token errors: INVALID_TOKEN, EXPIRED_TOKEN, WRONG_TOKEN_TYPE
    """

    # Token validation errors
    INVALID_TOKEN = "Invalid token"
    EXPIRED_TOKEN = "Token expired"
    WRONG_TOKEN_TYPE = "Wrong token type"

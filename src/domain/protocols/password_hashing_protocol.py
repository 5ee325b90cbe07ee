"""Password hashing protocol for domain layer.

Infrastructure provides the concrete implementation (BcryptPasswordService).

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter
    - No framework dependencies in domain
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Implementations:
        - BcryptPasswordService: bcrypt with cost factor 10

    Usage:
        password_hash = password_service.hash_password("p1")
        is_valid = password_service.verify_password("p1", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$10$...).

        Note:
            Same password produces different hashes (random salt).
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Stored hash.

        Returns:
            True if password matches hash, False otherwise
            (including for a malformed hash).
        """
        ...

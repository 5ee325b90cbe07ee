"""Bcrypt implementation of PasswordHashingProtocol.

Default cost factor is 10, the value every stored hash in this service is
created with ($2b$10$...). Higher costs up to 20 are accepted for
deployments that want slower hashing.
"""

import bcrypt

MIN_COST_FACTOR = 10
MAX_COST_FACTOR = 20


class BcryptPasswordService:
    """Salted bcrypt hashing and verification.

    Usage:
        password_service = get_password_service()
        password_hash = password_service.hash_password("p1")
        password_service.verify_password("p1", password_hash)  # True
    """

    def __init__(self, cost_factor: int = MIN_COST_FACTOR) -> None:
        """Initialize with a bcrypt cost factor.

        Raises:
            ValueError: If cost_factor is outside 10..20.
        """
        if not MIN_COST_FACTOR <= cost_factor <= MAX_COST_FACTOR:
            msg = (
                f"Cost factor must be between {MIN_COST_FACTOR} and "
                f"{MAX_COST_FACTOR}, got {cost_factor}"
            )
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Return a 60-character bcrypt hash with a fresh random salt."""
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Check a plaintext password against a stored hash.

        Returns:
            True on match. False on mismatch or when the stored hash is
            not a valid bcrypt string.
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except ValueError:
            # Invalid salt / malformed hash
            return False

"""bcrypt password hashing with a length policy."""

import bcrypt

from todo_auth.exceptions import WeakPasswordError


class PasswordHashingService:
    """Hash passwords for storage and check login attempts against them.

    Passwords need at least 8 characters and at most 72 bytes once UTF-8
    encoded, which is all bcrypt will hash. Anything else raises
    WeakPasswordError before bcrypt is touched.
    """

    MIN_LENGTH = 8
    MAX_BYTES = 72

    def __init__(self, rounds: int = 12):
        # log2 work factor; tests use 4
        self._rounds = rounds

    def hash(self, password: str) -> str:
        self.validate_strength(password)
        digest = bcrypt.hashpw(
            password.encode("utf-8"),
            bcrypt.gensalt(rounds=self._rounds),
        )
        return digest.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """True if the password matches; an unparsable hash never matches."""
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            return False

    def validate_strength(self, password: str) -> None:
        """
        Raises
        ------
        WeakPasswordError
            Empty, shorter than MIN_LENGTH characters or longer than
            MAX_BYTES bytes.
        """
        if not password:
            raise WeakPasswordError("Password cannot be empty")
        if len(password) < self.MIN_LENGTH:
            raise WeakPasswordError(
                f"Password must be at least {self.MIN_LENGTH} characters",
            )
        if len(password.encode("utf-8")) > self.MAX_BYTES:
            raise WeakPasswordError(
                f"Password cannot exceed {self.MAX_BYTES} bytes",
            )

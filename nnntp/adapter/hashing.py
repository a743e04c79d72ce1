"""bcrypt password hashing."""

import bcrypt
import logfire

from nnntp.domain.error import InvalidFieldError
from nnntp.domain.service.auth_service import PasswordHasher

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class BcryptPasswordHasher(PasswordHasher):
    """Salted, adaptive password hashing with bcrypt."""

    def __init__(self, rounds: int = 12) -> None:
        """Initialize hasher.

        Args:
            rounds: bcrypt work factor (log2 of the iteration count)
        """
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a password with a fresh salt.

        Raises:
            InvalidFieldError: If the password is not UTF-8 encodable or
                exceeds bcrypt's 72-byte limit
        """
        encoded = _encode(password)
        if encoded is None:
            raise InvalidFieldError("password", "must be valid UTF-8 text")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise InvalidFieldError(
                "password", f"must be at most {MAX_PASSWORD_BYTES} bytes"
            )

        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(encoded, salt).decode("utf-8")

    def verify(self, password: str, digest: str) -> bool:
        """Compare a password against a digest in constant time.

        A password that could never have been hashed, or a digest bcrypt
        cannot parse, never matches.
        """
        encoded = _encode(password)
        if encoded is None or len(encoded) > MAX_PASSWORD_BYTES:
            return False

        try:
            return bcrypt.checkpw(encoded, digest.encode("utf-8"))
        except ValueError as e:
            logfire.error("Stored password digest is malformed", error=str(e))
            return False


def _encode(password: str) -> bytes | None:
    try:
        return password.encode("utf-8")
    except UnicodeEncodeError:
        return None

"""bcrypt-backed password hashing with length rules."""

from functools import lru_cache

import bcrypt

from masterdom_auth.exceptions import WeakPasswordError

# bcrypt only reads the first 72 bytes of its input and recent releases
# refuse anything longer.
BCRYPT_MAX_BYTES = 72


def _to_bcrypt_input(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


@lru_cache(maxsize=None)
def _dummy_hash(rounds: int) -> bytes:
    return bcrypt.hashpw(b"masterdom-dummy", bcrypt.gensalt(rounds=rounds))


class PasswordHashingService:
    """Hash and check user passwords.

    Passwords between ``MIN_LENGTH`` and ``MAX_LENGTH`` characters are
    accepted. Input past bcrypt's 72 byte window is clipped identically
    when hashing and when verifying.

    Examples
    --------
    >>> service = PasswordHashingService(rounds=4)
    >>> stored = service.hash("plumber-at-night")
    >>> service.verify("plumber-at-night", stored)
    True
    """

    MIN_LENGTH = 8
    MAX_LENGTH = 128

    def __init__(self, rounds: int = 12):
        self._rounds = rounds
        self._dummy_hash = _dummy_hash(rounds)

    def hash(self, password: str) -> str:
        """Validate ``password`` and return its bcrypt hash.

        Raises
        ------
        WeakPasswordError
            If the password is empty, too short or too long.
        """
        self.validate_strength(password)
        digest = bcrypt.hashpw(
            _to_bcrypt_input(password),
            bcrypt.gensalt(rounds=self._rounds),
        )
        return digest.decode("ascii")

    def verify(self, password: str, password_hash: str) -> bool:
        """Return whether ``password`` matches ``password_hash``.

        A stored value that is not a bcrypt hash never matches.
        """
        try:
            return bcrypt.checkpw(
                _to_bcrypt_input(password),
                password_hash.encode("ascii"),
            )
        except (ValueError, TypeError, UnicodeEncodeError):
            return False

    def verify_dummy(self, password: str) -> bool:
        """Spend one bcrypt check on a throwaway hash and return False.

        Login calls this when the email is unknown so that path costs the
        same single check as a wrong password. The throwaway hash is built
        once per work factor, at construction.
        """
        bcrypt.checkpw(_to_bcrypt_input(password), self._dummy_hash)
        return False

    def validate_strength(self, password: str) -> None:
        if not password:
            raise WeakPasswordError("Password cannot be empty")
        length = len(password)
        if length < self.MIN_LENGTH:
            raise WeakPasswordError(
                f"Password must be at least {self.MIN_LENGTH} characters",
            )
        if length > self.MAX_LENGTH:
            raise WeakPasswordError(
                f"Password cannot exceed {self.MAX_LENGTH} characters",
            )

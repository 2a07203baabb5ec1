"""
Credential hashing.

Credentials are never stored in plaintext. The scheme is a deployment choice
(``PASSWORD_SCHEME``); records hashed under an older scheme keep verifying as
long as it stays in the context's scheme list.
"""

from passlib.context import CryptContext
from passlib.exc import PasswordSizeError

from movie_watchlist.core.errors import ValidationError

DEFAULT_SCHEME = "pbkdf2_sha256"
SUPPORTED_SCHEMES = ["pbkdf2_sha256", "sha256_crypt"]


class CredentialHasher:
    """Thin wrapper over a passlib ``CryptContext``."""

    def __init__(self, scheme: str = DEFAULT_SCHEME):
        if scheme not in SUPPORTED_SCHEMES:
            raise ValueError(f"Unsupported credential scheme: {scheme}")
        self.scheme = scheme
        self._context = CryptContext(schemes=SUPPORTED_SCHEMES, default=scheme)

    def hash(self, credential: str) -> str:
        try:
            return self._context.hash(credential)
        except PasswordSizeError as e:
            raise ValidationError(
                f"Credential exceeds the maximum size of {e.max_size} characters"
            ) from e

    def verify(self, credential: str, stored: str) -> bool:
        """True when ``credential`` matches the stored hash. Unknown hash formats never match."""
        try:
            return self._context.verify(credential, stored)
        except ValueError:
            return False

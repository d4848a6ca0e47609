"""Password hashing and comparison.

Hashing is deliberately slow, so both operations are coroutines: the
bcrypt work runs in a worker thread and the event loop keeps serving
other requests while a handler waits on it.
"""

import asyncio
from abc import ABC, abstractmethod

import bcrypt


class CryptoService(ABC):
    """One-way hashing and comparison of secrets."""

    @abstractmethod
    async def hash(self, plaintext: str) -> str:
        """Hash a plaintext secret."""

    @abstractmethod
    async def compare(self, plaintext: str, hashed: str) -> bool:
        """Check a plaintext secret against a stored hash."""


class BcryptCryptoService(CryptoService):
    """bcrypt implementation of CryptoService.

    Examples
    --------
    >>> service = BcryptCryptoService(rounds=4)
    >>> hashed = asyncio.run(service.hash("my_secure_password"))
    >>> asyncio.run(service.compare("my_secure_password", hashed))
    True
    >>> asyncio.run(service.compare("wrong_password", hashed))
    False
    """

    def __init__(self, rounds: int = 12):
        """Initialize the bcrypt crypto service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12,
            which is a good balance of security and performance.
            Higher values are more secure but slower.
        """
        self._rounds = rounds

    async def hash(self, plaintext: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        plaintext
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as a string
        """
        return await asyncio.to_thread(self._hash_sync, plaintext)

    async def compare(self, plaintext: str, hashed: str) -> bool:
        """Verify a password against a hash.

        Parameters
        ----------
        plaintext
            The plaintext password to check
        hashed
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise (including when the
        stored hash is not a valid bcrypt hash)
        """
        return await asyncio.to_thread(self._compare_sync, plaintext, hashed)

    def _hash_sync(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(plaintext.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def _compare_sync(self, plaintext: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(
                plaintext.encode("utf-8"),
                hashed.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format
            return False

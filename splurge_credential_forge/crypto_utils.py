"""Cryptographic utilities for the Splurge Credential Forge system."""

import logging
import secrets
from typing import Optional, Protocol

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac

from splurge_credential_forge.constants import Constants
from splurge_credential_forge.exceptions import CryptoError
from splurge_credential_forge.exceptions import RandomnessUnavailableError
from splurge_credential_forge.exceptions import ValidationError

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything able to hand out random bytes."""

    def token_bytes(self, nbytes: int) -> bytes:
        ...


class SecureRandomSource:
    """Operating system CSPRNG, via the ``secrets`` module."""

    def token_bytes(self, nbytes: int) -> bytes:
        return secrets.token_bytes(nbytes)


class CryptoUtils:
    """Cryptographic utilities for credential and one-time code operations."""

    _WORD_BYTES = Constants.RANDOM_WORD_BYTES()
    _WORD_RANGE = 1 << (8 * Constants.RANDOM_WORD_BYTES())  # 2**32

    @staticmethod
    def random_bytes(nbytes: int, source: Optional[RandomSource] = None) -> bytes:
        """Read random bytes from a randomness source.

        Args:
            nbytes: Number of bytes to read
            source: Randomness source (default: operating system CSPRNG)

        Returns:
            Exactly ``nbytes`` random bytes

        Raises:
            RandomnessUnavailableError: If the source fails or returns a short read
            ValidationError: If nbytes is negative
        """
        if nbytes < 0:
            raise ValidationError("Number of random bytes cannot be negative")

        if source is None:
            source = SecureRandomSource()

        try:
            data = source.token_bytes(nbytes)
        except (OSError, NotImplementedError) as e:
            raise RandomnessUnavailableError(f"Secure randomness source failed: {e}") from e

        if data is None or len(data) != nbytes:
            received = 0 if data is None else len(data)
            raise RandomnessUnavailableError(
                f"Secure randomness source returned {received} of {nbytes} bytes"
            )

        return bytes(data)

    @classmethod
    def random_uint32(cls, source: Optional[RandomSource] = None) -> int:
        """Draw one unsigned 32-bit integer, big-endian.

        Raises:
            RandomnessUnavailableError: If the source fails
        """
        return int.from_bytes(cls.random_bytes(cls._WORD_BYTES, source), byteorder="big")

    @classmethod
    def random_index(cls, pool_size: int, source: Optional[RandomSource] = None) -> int:
        """Draw a uniformly distributed index in ``range(pool_size)``.

        Uses rejection sampling: 32-bit draws at or above the largest multiple
        of ``pool_size`` that fits in the draw range are discarded, so no
        residue class is favored by the final modulo.

        Args:
            pool_size: Number of candidates, between 1 and 2**32
            source: Randomness source (default: operating system CSPRNG)

        Returns:
            Index in ``[0, pool_size)``

        Raises:
            RandomnessUnavailableError: If the source fails
            ValidationError: If pool_size is out of range
        """
        if pool_size < 1 or pool_size > cls._WORD_RANGE:
            raise ValidationError(f"Pool size must be between 1 and {cls._WORD_RANGE}")

        limit = (cls._WORD_RANGE // pool_size) * pool_size
        while True:
            value = cls.random_uint32(source)
            if value < limit:
                return value % pool_size
            logger.debug("Rejected biased random draw", extra={
                "pool_size": pool_size,
                "limit": limit,
            })

    @classmethod
    def random_choices(cls, pool: str, count: int, source: Optional[RandomSource] = None) -> str:
        """Build a string of ``count`` characters drawn uniformly from ``pool``.

        Raises:
            RandomnessUnavailableError: If the source fails
            ValidationError: If the pool is empty
        """
        if not pool:
            raise ValidationError("Character pool cannot be empty")

        return "".join(pool[cls.random_index(len(pool), source)] for _ in range(count))

    @staticmethod
    def hmac_sha1(key: bytes, message: bytes) -> bytes:
        """Compute HMAC-SHA1 of a message.

        Args:
            key: HMAC key (must not be empty)
            message: Message to authenticate

        Returns:
            20-byte digest

        Raises:
            CryptoError: If the HMAC cannot be keyed or computed
        """
        if not key:
            raise CryptoError("HMAC key cannot be empty")

        try:
            h = crypto_hmac.HMAC(key, hashes.SHA1())
            h.update(message)
            return h.finalize()
        except Exception as e:
            raise CryptoError(f"HMAC-SHA1 computation failed: {e}") from e

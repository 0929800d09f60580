"""Time-based one-time passcodes (RFC 6238, HMAC-SHA1, 30-second steps, 6 digits)."""

import logging
import math
import struct
from datetime import datetime, timezone
from typing import Union

from splurge_credential_forge.base32 import Base32
from splurge_credential_forge.constants import Constants
from splurge_credential_forge.crypto_utils import CryptoUtils
from splurge_credential_forge.exceptions import CryptoError, ValidationError
from splurge_credential_forge.models import TOTPResult

logger = logging.getLogger(__name__)

Instant = Union[datetime, int, float]


class TOTPEngine:
    """Computes TOTP codes from a Base32 shared secret and an explicit instant.

    The engine never reads the clock itself: callers pass ``now`` on every
    call (typically once per second) and get back the code for that instant
    plus how much of the 30-second window is left. Identical inputs always
    give identical outputs.
    """

    _TIME_STEP = Constants.TOTP_TIME_STEP()
    _DIGITS = Constants.TOTP_DIGITS()
    _MODULUS = 10 ** Constants.TOTP_DIGITS()

    @staticmethod
    def to_epoch_seconds(now: Instant) -> int:
        """Convert an instant to whole Unix seconds.

        Naive datetimes are taken to be UTC.

        Raises:
            ValidationError: If the instant has an unsupported type, is not
                finite, or precedes the Unix epoch
        """
        if isinstance(now, datetime):
            if now.tzinfo is None:
                now = now.replace(tzinfo=timezone.utc)
            timestamp = now.timestamp()
        elif isinstance(now, (int, float)) and not isinstance(now, bool):
            timestamp = now
        else:
            raise ValidationError(
                f"Time must be a datetime or Unix timestamp, got {type(now).__name__}"
            )

        if isinstance(timestamp, float) and not math.isfinite(timestamp):
            raise ValidationError("Time must be finite")

        epoch_seconds = math.floor(timestamp)
        if epoch_seconds < 0:
            raise ValidationError("Time cannot precede the Unix epoch")
        return epoch_seconds

    @classmethod
    def counter_bytes(cls, counter: int) -> bytes:
        """Serialize a counter as an 8-byte big-endian integer.

        For every date before 2106 the high four bytes are zero.
        """
        return struct.pack(">Q", counter)

    @staticmethod
    def truncate(digest: bytes) -> int:
        """Apply RFC 4226 dynamic truncation to an HMAC digest.

        Returns:
            Non-negative 31-bit integer
        """
        offset = digest[-1] & 0x0F
        return int.from_bytes(digest[offset:offset + 4], byteorder="big") & 0x7FFFFFFF

    @classmethod
    def hotp(cls, key: bytes, counter: int) -> str:
        """Compute the counter-based one-time code for a key.

        Args:
            key: Decoded shared secret
            counter: Moving factor

        Returns:
            Zero-padded 6-digit code

        Raises:
            CryptoError: If the HMAC cannot be computed
        """
        digest = CryptoUtils.hmac_sha1(key, cls.counter_bytes(counter))
        return str(cls.truncate(digest) % cls._MODULUS).zfill(cls._DIGITS)

    @classmethod
    def compute(cls, secret: str, now: Instant) -> TOTPResult:
        """Compute the TOTP code for a secret at a given instant.

        Args:
            secret: Base32 secret; case, spaces and separators are ignored
            now: Instant as a datetime or Unix timestamp

        Returns:
            TOTPResult. A secret with fewer than 8 Base32 symbols yields the
            insufficient-secret result; an HMAC failure yields the
            crypto-failure result.

        Raises:
            ValidationError: If secret is not a string or now is invalid
        """
        cleaned = Base32.normalize(secret)
        if len(cleaned) < Constants.TOTP_MIN_SECRET_LENGTH():
            return TOTPResult.insufficient_secret()

        epoch_seconds = cls.to_epoch_seconds(now)
        counter, elapsed = divmod(epoch_seconds, cls._TIME_STEP)
        seconds_remaining = cls._TIME_STEP - elapsed
        progress = 100 * seconds_remaining / cls._TIME_STEP

        key = Base32.decode(cleaned)
        try:
            code = cls.hotp(key, counter)
        except CryptoError as e:
            logger.error(f"Failed to compute TOTP code: {e}", extra={
                "counter": counter,
                "key_length": len(key),
            })
            return TOTPResult.crypto_failure()

        return TOTPResult(code=code, seconds_remaining=seconds_remaining, progress=progress)


def compute_totp(secret: str, now: Instant) -> TOTPResult:
    """Compute the TOTP code for a secret at a given instant."""
    return TOTPEngine.compute(secret, now)

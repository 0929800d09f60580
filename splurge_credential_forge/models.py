"""Data models for the Splurge Credential Forge system."""

from dataclasses import dataclass
from functools import total_ordering
from enum import Enum
from typing import Any

from splurge_credential_forge.constants import Constants
from splurge_credential_forge.exceptions import ValidationError


class GeneratorMode(Enum):
    """Kinds of credential the random generator can produce."""

    CUSTOM = "custom"
    PIN = "pin"
    UUID = "uuid"
    MAC = "mac"


class MacSeparator(Enum):
    """Separator placed between the octets of a generated MAC address."""

    COLON = ":"
    HYPHEN = "-"
    NONE = ""

    @classmethod
    def parse(cls, value: "MacSeparator | str") -> "MacSeparator":
        """Resolve a separator from an enum, its name, or the literal separator.

        Args:
            value: ``MacSeparator`` member, ``"colon"``/``"hyphen"``/``"none"``
                (any case), or one of ``":"``, ``"-"``, ``""``

        Returns:
            Matching MacSeparator

        Raises:
            ValidationError: If the value does not name a separator
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValidationError(f"MAC separator must be a string, got {type(value).__name__}")

        for member in cls:
            if value == member.value or value.upper() == member.name:
                return member

        raise ValidationError(
            f"Unknown MAC separator: {value!r} (expected colon, hyphen or none)"
        )


@total_ordering
class StrengthTier(Enum):
    """Ordered strength classification, weakest first."""

    EMPTY = "empty"
    VERY_WEAK = "very weak"
    WEAK = "weak"
    FAIR = "fair"
    STRONG = "strong"
    VERY_STRONG = "very strong"

    @property
    def rank(self) -> int:
        return list(StrengthTier).index(self)

    def __lt__(self, other: "StrengthTier") -> bool:
        if not isinstance(other, StrengthTier):
            return NotImplemented
        return self.rank < other.rank


class TierColor(Enum):
    """Presentation hint attached to each strength tier."""

    GRAY = "gray"
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    CYAN = "cyan"


@dataclass(frozen=True)
class EntropyResult:
    """Estimated brute-force resistance of a credential string."""

    score: int  # 0-100, fixed per tier
    bits: int
    tier: StrengthTier
    color: TierColor

    @property
    def label(self) -> str:
        return self.tier.value

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "score": self.score,
            "bits": self.bits,
            "label": self.label,
            "color": self.color.value,
        }


class TOTPStatus(Enum):
    """Outcome of a TOTP computation."""

    OK = "ok"
    INSUFFICIENT_SECRET = "insufficient_secret"
    CRYPTO_FAILURE = "crypto_failure"


@dataclass(frozen=True)
class TOTPResult:
    """One-time code plus the bookkeeping of its 30-second window."""

    code: str
    seconds_remaining: int
    progress: float
    status: TOTPStatus = TOTPStatus.OK

    @classmethod
    def insufficient_secret(cls) -> "TOTPResult":
        """Result reported while the secret is still too short to use."""
        return cls(
            code=Constants.TOTP_INSUFFICIENT_CODE(),
            seconds_remaining=0,
            progress=0.0,
            status=TOTPStatus.INSUFFICIENT_SECRET,
        )

    @classmethod
    def crypto_failure(cls) -> "TOTPResult":
        """Result reported when the HMAC could not be computed."""
        return cls(
            code=Constants.TOTP_ERROR_CODE(),
            seconds_remaining=0,
            progress=0.0,
            status=TOTPStatus.CRYPTO_FAILURE,
        )

    @property
    def is_valid(self) -> bool:
        return self.status is TOTPStatus.OK

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "code": self.code,
            "seconds_remaining": self.seconds_remaining,
            "progress": self.progress,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class GenerationResult:
    """A generated credential together with its entropy estimate."""

    text: str
    entropy: EntropyResult

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "text": self.text,
            "entropy": self.entropy.to_dict(),
        }

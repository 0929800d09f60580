"""Heuristic entropy estimation for generated credentials."""

import math

from splurge_credential_forge.constants import Constants
from splurge_credential_forge.models import EntropyResult, StrengthTier, TierColor

# (exclusive upper bound in bits, tier, score, color), weakest first; anything
# above the last bound is very strong
_TIERS: tuple[tuple[int, StrengthTier, int, TierColor], ...] = (
    (28, StrengthTier.VERY_WEAK, 20, TierColor.RED),
    (45, StrengthTier.WEAK, 40, TierColor.ORANGE),
    (60, StrengthTier.FAIR, 60, TierColor.YELLOW),
    (80, StrengthTier.STRONG, 80, TierColor.GREEN),
)

_EMPTY_RESULT = EntropyResult(score=0, bits=0, tier=StrengthTier.EMPTY, color=TierColor.GRAY)


class EntropyEstimator:
    """Estimates brute-force resistance from the character classes a string uses.

    The estimate assumes every character was drawn independently and
    uniformly from the union of the classes present. Any character that is
    not an ASCII letter or digit counts toward a single symbol class of fixed
    size 32, however many distinct symbols actually appear.
    """

    @staticmethod
    def pool_size(text: str) -> int:
        """Infer the alphabet size a string was drawn from (at least 1)."""
        size = 0
        if any(c in Constants.ALPHA_LOWER() for c in text):
            size += len(Constants.ALPHA_LOWER())
        if any(c in Constants.ALPHA_UPPER() for c in text):
            size += len(Constants.ALPHA_UPPER())
        if any(c in Constants.DIGITS() for c in text):
            size += len(Constants.DIGITS())
        if any(not (c.isascii() and c.isalnum()) for c in text):
            size += Constants.SYMBOL_POOL_SIZE()
        return max(size, 1)

    @classmethod
    def estimate(cls, text: str) -> EntropyResult:
        """Estimate the entropy of a credential and classify its strength.

        Args:
            text: Credential to grade

        Returns:
            EntropyResult; the empty string grades as ``StrengthTier.EMPTY``
        """
        if not text:
            return _EMPTY_RESULT

        raw_bits = len(text) * math.log2(cls.pool_size(text))
        # Half-up, not round()'s half-to-even
        bits = int(math.floor(raw_bits + 0.5))

        for upper_bound, tier, score, color in _TIERS:
            if bits < upper_bound:
                return EntropyResult(score=score, bits=bits, tier=tier, color=color)

        return EntropyResult(score=100, bits=bits, tier=StrengthTier.VERY_STRONG, color=TierColor.CYAN)


def estimate_entropy(text: str) -> EntropyResult:
    """Estimate the entropy of a credential and classify its strength."""
    return EntropyEstimator.estimate(text)

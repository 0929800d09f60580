"""Credential Forge facade combining generation, grading and one-time codes."""

import logging
from typing import Optional

from splurge_credential_forge.config import DEFAULT_CONFIG, CredentialConfig
from splurge_credential_forge.crypto_utils import RandomSource
from splurge_credential_forge.entropy import EntropyEstimator
from splurge_credential_forge.generators import RandomGenerator
from splurge_credential_forge.models import (
    EntropyResult,
    GenerationResult,
    GeneratorMode,
    TOTPResult,
)
from splurge_credential_forge.totp import Instant, TOTPEngine

logger = logging.getLogger(__name__)


class CredentialForge:
    """Caller-side composition of the generator, estimator and TOTP engine.

    The three components never call each other; this class pipes generated
    credentials through the estimator and forwards TOTP requests, holding
    only a configuration and a randomness source.
    """

    def __init__(
        self,
        config: CredentialConfig = DEFAULT_CONFIG,
        *,
        source: Optional[RandomSource] = None
    ) -> None:
        """Initialize the forge.

        Args:
            config: Default credential configuration
            source: Randomness source (default: operating system CSPRNG)
        """
        self._config = config
        self._generator = RandomGenerator(source)

    @property
    def config(self) -> CredentialConfig:
        return self._config

    def generate(
        self,
        mode: GeneratorMode,
        *,
        config: Optional[CredentialConfig] = None
    ) -> GenerationResult:
        """Generate a credential and attach its entropy estimate.

        Args:
            mode: Kind of credential
            config: Configuration overriding the forge default for this call

        Returns:
            GenerationResult with the text and its grading

        Raises:
            RandomnessUnavailableError: If the randomness source fails
        """
        effective = config or self._config
        text = self._generator.generate(mode, effective)
        logger.debug(f"Generated {mode.value} credential", extra={
            "mode": mode.value,
            "length": len(text),
        })
        return GenerationResult(text=text, entropy=EntropyEstimator.estimate(text))

    def estimate(self, text: str) -> EntropyResult:
        """Grade an arbitrary credential string."""
        return EntropyEstimator.estimate(text)

    def totp(self, secret: str, now: Instant) -> TOTPResult:
        """Compute the TOTP code for a secret at the given instant."""
        return TOTPEngine.compute(secret, now)

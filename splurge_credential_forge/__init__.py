"""Splurge Credential Forge - Client-side credential generation and TOTP codes.

This package generates random passwords, PINs, UUIDs and MAC addresses from a
cryptographically secure source, grades credentials with an entropy
estimate, and computes RFC 6238 time-based one-time passcodes.
"""

from splurge_credential_forge.base32 import Base32
from splurge_credential_forge.config import DEFAULT_CONFIG, CredentialConfig
from splurge_credential_forge.entropy import EntropyEstimator, estimate_entropy
from splurge_credential_forge.exceptions import (
    CredentialForgeError,
    CryptoError,
    RandomnessUnavailableError,
    ValidationError,
)
from splurge_credential_forge.forge import CredentialForge
from splurge_credential_forge.generators import (
    RandomGenerator,
    generate_custom_password,
    generate_mac_address,
    generate_pin,
    generate_uuid,
)
from splurge_credential_forge.models import (
    EntropyResult,
    GenerationResult,
    GeneratorMode,
    MacSeparator,
    StrengthTier,
    TierColor,
    TOTPResult,
    TOTPStatus,
)
from splurge_credential_forge.totp import TOTPEngine, compute_totp

try:
    from importlib.metadata import version
    __version__ = version("splurge-credential-forge")
except Exception:
    # Not installed (e.g. running from a source checkout)
    __version__ = "unknown"

__all__ = [
    "Base32",
    "CredentialConfig",
    "CredentialForge",
    "CredentialForgeError",
    "CryptoError",
    "DEFAULT_CONFIG",
    "EntropyEstimator",
    "EntropyResult",
    "GenerationResult",
    "GeneratorMode",
    "MacSeparator",
    "RandomGenerator",
    "RandomnessUnavailableError",
    "StrengthTier",
    "TOTPEngine",
    "TOTPResult",
    "TOTPStatus",
    "TierColor",
    "ValidationError",
    "compute_totp",
    "estimate_entropy",
    "generate_custom_password",
    "generate_mac_address",
    "generate_pin",
    "generate_uuid",
]

"""Custom exceptions for the Splurge Credential Forge system."""


class CredentialForgeError(Exception):
    """Base exception for all Credential Forge errors."""


class ValidationError(CredentialForgeError):
    """Raised when configuration or input validation fails."""


class RandomnessUnavailableError(CredentialForgeError):
    """Raised when the secure randomness source cannot supply output."""


class CryptoError(CredentialForgeError):
    """Raised when a keyed hash cannot be constructed or computed."""

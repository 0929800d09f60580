"""Configuration management for the Splurge Credential Forge system."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from splurge_credential_forge.constants import Constants
from splurge_credential_forge.models import MacSeparator
from splurge_credential_forge.validation_utils import (
    parse_bool,
    parse_int,
    validate_password_length,
    validate_pin_length,
)


@dataclass(frozen=True)
class CredentialConfig:
    """Immutable settings for the random credential generator."""

    # Custom password settings
    length: int = Constants.DEFAULT_PASSWORD_LENGTH()
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_digits: bool = True
    include_symbols: bool = True

    # PIN settings
    pin_length: int = Constants.DEFAULT_PIN_LENGTH()

    # MAC address settings
    mac_separator: MacSeparator = MacSeparator.COLON
    mac_uppercase: bool = True

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        validate_password_length(self.length)
        validate_pin_length(self.pin_length)

        # Frozen dataclass; normalize through object.__setattr__
        object.__setattr__(self, "mac_separator", MacSeparator.parse(self.mac_separator))

    @property
    def has_character_classes(self) -> bool:
        """Whether at least one custom password character class is enabled."""
        return any((
            self.include_uppercase,
            self.include_lowercase,
            self.include_digits,
            self.include_symbols,
        ))

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None) -> "CredentialConfig":
        """Create a configuration from ``SCF_*`` environment variables.

        Unset variables keep their defaults.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            CredentialConfig instance

        Raises:
            ValidationError: If a variable is malformed or out of bounds
        """
        if environ is None:
            environ = os.environ

        kwargs: dict[str, object] = {}

        int_settings = {
            "SCF_LENGTH": "length",
            "SCF_PIN_LENGTH": "pin_length",
        }
        bool_settings = {
            "SCF_UPPERCASE": "include_uppercase",
            "SCF_LOWERCASE": "include_lowercase",
            "SCF_DIGITS": "include_digits",
            "SCF_SYMBOLS": "include_symbols",
            "SCF_MAC_UPPERCASE": "mac_uppercase",
        }

        for env_name, field_name in int_settings.items():
            if env_name in environ:
                kwargs[field_name] = parse_int(environ[env_name], name=env_name)

        for env_name, field_name in bool_settings.items():
            if env_name in environ:
                kwargs[field_name] = parse_bool(environ[env_name], name=env_name)

        if "SCF_MAC_SEPARATOR" in environ:
            kwargs["mac_separator"] = MacSeparator.parse(environ["SCF_MAC_SEPARATOR"])

        return cls(**kwargs)


# Default configuration instance
DEFAULT_CONFIG = CredentialConfig()

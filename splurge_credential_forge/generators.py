"""Random credential generation: custom passwords, PINs, UUIDs and MAC addresses."""

import logging
import uuid
from typing import Optional

from splurge_credential_forge.config import DEFAULT_CONFIG, CredentialConfig
from splurge_credential_forge.constants import Constants
from splurge_credential_forge.crypto_utils import CryptoUtils, RandomSource
from splurge_credential_forge.exceptions import ValidationError
from splurge_credential_forge.models import GeneratorMode, MacSeparator
from splurge_credential_forge.validation_utils import validate_pin_length

logger = logging.getLogger(__name__)


class RandomGenerator:
    """Generates random credentials from a cryptographically secure source.

    Every call reads fresh randomness and keeps no state between calls, so a
    single instance can be shared freely. A failing source surfaces as
    ``RandomnessUnavailableError``; there is no fallback to a weaker generator.
    """

    _HEX_UPPER = "0123456789ABCDEF"
    _HEX_LOWER = "0123456789abcdef"

    def __init__(self, source: Optional[RandomSource] = None) -> None:
        """Initialize the generator.

        Args:
            source: Randomness source (default: operating system CSPRNG)
        """
        self._source = source

    @staticmethod
    def build_pool(config: CredentialConfig) -> str:
        """Concatenate the enabled character classes.

        Order is lowercase, uppercase, digits, symbols.

        Args:
            config: Credential configuration

        Returns:
            Character pool, empty when no class is enabled
        """
        pool = ""
        if config.include_lowercase:
            pool += Constants.ALPHA_LOWER()
        if config.include_uppercase:
            pool += Constants.ALPHA_UPPER()
        if config.include_digits:
            pool += Constants.DIGITS()
        if config.include_symbols:
            pool += Constants.SYMBOLS()
        return pool

    def generate_custom_password(self, config: CredentialConfig = DEFAULT_CONFIG) -> str:
        """Generate a password from the enabled character classes.

        Args:
            config: Credential configuration

        Returns:
            Password of ``config.length`` characters, or ``""`` when no
            character class is enabled

        Raises:
            RandomnessUnavailableError: If the randomness source fails
        """
        pool = self.build_pool(config)
        if not pool:
            logger.debug("No character classes enabled, returning empty password")
            return ""

        return CryptoUtils.random_choices(pool, config.length, self._source)

    def generate_pin(self, pin_length: int = Constants.DEFAULT_PIN_LENGTH()) -> str:
        """Generate a numeric PIN.

        Args:
            pin_length: Number of digits

        Returns:
            String of ``pin_length`` digits

        Raises:
            RandomnessUnavailableError: If the randomness source fails
            ValidationError: If pin_length is out of bounds
        """
        validate_pin_length(pin_length)
        return CryptoUtils.random_choices(Constants.DIGITS(), pin_length, self._source)

    def generate_uuid(self) -> str:
        """Generate a random version 4, variant 1 UUID.

        Returns:
            Lowercase 8-4-4-4-12 hyphenated UUID string

        Raises:
            RandomnessUnavailableError: If the randomness source fails
        """
        raw = bytearray(CryptoUtils.random_bytes(16, self._source))
        raw[6] = (raw[6] & 0x0F) | 0x40  # version 4
        raw[8] = (raw[8] & 0x3F) | 0x80  # variant 10xx
        return str(uuid.UUID(bytes=bytes(raw)))

    def generate_mac_address(
        self,
        separator: MacSeparator | str = MacSeparator.COLON,
        uppercase: bool = True
    ) -> str:
        """Generate a random MAC-address-like identifier.

        The 48 bits are fully random; multicast and locally administered
        bit patterns are not filtered out.

        Args:
            separator: Separator between octets
            uppercase: Render hex digits in uppercase

        Returns:
            Formatted MAC address string

        Raises:
            RandomnessUnavailableError: If the randomness source fails
            ValidationError: If separator is unknown
        """
        separator = MacSeparator.parse(separator)
        hex_chars = self._HEX_UPPER if uppercase else self._HEX_LOWER
        octets = CryptoUtils.random_bytes(Constants.MAC_ADDRESS_BYTES(), self._source)
        return separator.value.join(hex_chars[b >> 4] + hex_chars[b & 0x0F] for b in octets)

    def generate(self, mode: GeneratorMode, config: CredentialConfig = DEFAULT_CONFIG) -> str:
        """Generate a credential of the given kind.

        Args:
            mode: Kind of credential
            config: Credential configuration

        Returns:
            Generated credential

        Raises:
            RandomnessUnavailableError: If the randomness source fails
            ValidationError: If mode is unknown
        """
        if mode is GeneratorMode.CUSTOM:
            return self.generate_custom_password(config)
        if mode is GeneratorMode.PIN:
            return self.generate_pin(config.pin_length)
        if mode is GeneratorMode.UUID:
            return self.generate_uuid()
        if mode is GeneratorMode.MAC:
            return self.generate_mac_address(config.mac_separator, config.mac_uppercase)

        raise ValidationError(f"Unknown generator mode: {mode!r}")


_default_generator = RandomGenerator()


def generate_custom_password(config: CredentialConfig = DEFAULT_CONFIG) -> str:
    """Generate a custom password with the operating system CSPRNG."""
    return _default_generator.generate_custom_password(config)


def generate_pin(pin_length: int = Constants.DEFAULT_PIN_LENGTH()) -> str:
    """Generate a numeric PIN with the operating system CSPRNG."""
    return _default_generator.generate_pin(pin_length)


def generate_uuid() -> str:
    """Generate a version 4 UUID with the operating system CSPRNG."""
    return _default_generator.generate_uuid()


def generate_mac_address(separator: MacSeparator | str = MacSeparator.COLON, uppercase: bool = True) -> str:
    """Generate a MAC-address-like identifier with the operating system CSPRNG."""
    return _default_generator.generate_mac_address(separator, uppercase)

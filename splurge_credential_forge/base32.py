"""Base-32 normalization, encoding and decoding utilities."""

from splurge_credential_forge.exceptions import ValidationError


class Base32ValidationError(ValidationError):
    """Raised when base-32 input is not a string."""


class Base32:
    """
    A class for base-32 operations on TOTP shared secrets.

    Base-32 (RFC 4648) represents binary data with 5 bits per symbol using
    the alphabet "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567". Authenticator secrets
    are usually typed by hand, so decoding is relaxed: input is normalized
    first, padding is never required and leftover bits that do not fill a
    whole byte are dropped.
    """

    _ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
    _LOOKUP = {char: index for index, char in enumerate(_ALPHABET)}
    _BITS_PER_SYMBOL = 5

    @classmethod
    def normalize(cls, text: str) -> str:
        """
        Uppercase a secret and strip every character outside the alphabet.

        Spaces, hyphens, padding and any other separators are removed.

        Args:
            text: Raw secret as typed by the user

        Returns:
            Cleaned secret containing only base-32 symbols

        Raises:
            Base32ValidationError: If input is not a string
        """
        if not isinstance(text, str):
            raise Base32ValidationError(f"Input must be a string, got {type(text).__name__}")

        return "".join(char for char in text.upper() if char in cls._LOOKUP)

    @classmethod
    def decode(cls, text: str) -> bytes:
        """
        Decode a base-32 string to binary data.

        The input is normalized before decoding, so this never fails on
        stray characters; an input too short to fill one byte decodes to
        ``b""``.

        Args:
            text: Base-32 encoded string

        Returns:
            Decoded binary data

        Raises:
            Base32ValidationError: If input is not a string
        """
        cleaned = cls.normalize(text)

        buffer = 0
        bits = 0
        result = bytearray()
        for char in cleaned:
            buffer = (buffer << cls._BITS_PER_SYMBOL) | cls._LOOKUP[char]
            bits += cls._BITS_PER_SYMBOL
            if bits >= 8:
                bits -= 8
                result.append((buffer >> bits) & 0xFF)
                # Keep only the bits not yet emitted
                buffer &= (1 << bits) - 1

        return bytes(result)

    @classmethod
    def encode(cls, data: bytes) -> str:
        """
        Encode binary data to an unpadded base-32 string.

        Args:
            data: Binary data to encode

        Returns:
            Base-32 encoded string without ``=`` padding
        """
        if data is None:
            raise Base32ValidationError("Input cannot be None")

        buffer = 0
        bits = 0
        result = []
        for byte in data:
            buffer = (buffer << 8) | byte
            bits += 8
            while bits >= cls._BITS_PER_SYMBOL:
                bits -= cls._BITS_PER_SYMBOL
                result.append(cls._ALPHABET[(buffer >> bits) & 0x1F])
            buffer &= (1 << bits) - 1

        if bits:
            result.append(cls._ALPHABET[(buffer << (cls._BITS_PER_SYMBOL - bits)) & 0x1F])

        return "".join(result)

    @classmethod
    def is_valid(cls, text: str) -> bool:
        """
        Check if a string consists solely of base-32 symbols.

        Lowercase letters are accepted; separators are not.

        Args:
            text: String to validate

        Returns:
            True if valid base-32, False otherwise
        """
        if not isinstance(text, str) or not text:
            return False

        return all(char in cls._LOOKUP for char in text.upper())

"""Library-wide constants.

These constants centralize tunable values used across modules to keep
behavior consistent and avoid duplication.
"""


class Constants:

    # Character classes, in pool concatenation order
    _ALPHA_LOWER: str = "abcdefghijklmnopqrstuvwxyz"
    _ALPHA_UPPER: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    _DIGITS: str = "0123456789"
    _SYMBOLS: str = "!@#$%^&*()_+-=[]{}|;:,.<>?~"

    # Password and PIN policy
    _MIN_PASSWORD_LENGTH: int = 6
    _MAX_PASSWORD_LENGTH: int = 64
    _DEFAULT_PASSWORD_LENGTH: int = 16
    _MIN_PIN_LENGTH: int = 3
    _MAX_PIN_LENGTH: int = 12
    _DEFAULT_PIN_LENGTH: int = 6
    _MAC_ADDRESS_BYTES: int = 6

    # Randomness source
    _RANDOM_WORD_BYTES: int = 4  # 32-bit draws for index selection

    # TOTP policy
    _TOTP_TIME_STEP: int = 30
    _TOTP_DIGITS: int = 6
    _TOTP_MIN_SECRET_LENGTH: int = 8
    _TOTP_INSUFFICIENT_CODE: str = "------"
    _TOTP_ERROR_CODE: str = "ERROR"

    # Entropy estimation
    _SYMBOL_POOL_SIZE: int = 32  # flat assumption for any non-alphanumeric

    @classmethod
    def ALPHA_LOWER(cls) -> str:
        return cls._ALPHA_LOWER

    @classmethod
    def ALPHA_UPPER(cls) -> str:
        return cls._ALPHA_UPPER

    @classmethod
    def DIGITS(cls) -> str:
        return cls._DIGITS

    @classmethod
    def SYMBOLS(cls) -> str:
        return cls._SYMBOLS

    @classmethod
    def MIN_PASSWORD_LENGTH(cls) -> int:
        return cls._MIN_PASSWORD_LENGTH

    @classmethod
    def MAX_PASSWORD_LENGTH(cls) -> int:
        return cls._MAX_PASSWORD_LENGTH

    @classmethod
    def DEFAULT_PASSWORD_LENGTH(cls) -> int:
        return cls._DEFAULT_PASSWORD_LENGTH

    @classmethod
    def MIN_PIN_LENGTH(cls) -> int:
        return cls._MIN_PIN_LENGTH

    @classmethod
    def MAX_PIN_LENGTH(cls) -> int:
        return cls._MAX_PIN_LENGTH

    @classmethod
    def DEFAULT_PIN_LENGTH(cls) -> int:
        return cls._DEFAULT_PIN_LENGTH

    @classmethod
    def MAC_ADDRESS_BYTES(cls) -> int:
        return cls._MAC_ADDRESS_BYTES

    @classmethod
    def RANDOM_WORD_BYTES(cls) -> int:
        return cls._RANDOM_WORD_BYTES

    # TOTP policy
    @classmethod
    def TOTP_TIME_STEP(cls) -> int:
        return cls._TOTP_TIME_STEP

    @classmethod
    def TOTP_DIGITS(cls) -> int:
        return cls._TOTP_DIGITS

    @classmethod
    def TOTP_MIN_SECRET_LENGTH(cls) -> int:
        return cls._TOTP_MIN_SECRET_LENGTH

    @classmethod
    def TOTP_INSUFFICIENT_CODE(cls) -> str:
        return cls._TOTP_INSUFFICIENT_CODE

    @classmethod
    def TOTP_ERROR_CODE(cls) -> str:
        return cls._TOTP_ERROR_CODE

    # Entropy estimation
    @classmethod
    def SYMBOL_POOL_SIZE(cls) -> int:
        return cls._SYMBOL_POOL_SIZE

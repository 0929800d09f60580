"""Validation utilities for the credential forge package."""

from splurge_credential_forge.constants import Constants
from splurge_credential_forge.exceptions import ValidationError


def _validate_bounded_int(value: int, *, name: str, minimum: int, maximum: int) -> None:
    # bool is an int subclass; reject it so True never means length 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {type(value).__name__}")

    if value < minimum:
        raise ValidationError(f"{name} must be at least {minimum}")

    if value > maximum:
        raise ValidationError(f"{name} must be at most {maximum}")


def validate_password_length(length: int) -> None:
    """Validate the length of a custom password.

    Args:
        length: Requested password length

    Raises:
        ValidationError: If length is not an integer within the allowed bounds
    """
    _validate_bounded_int(
        length,
        name="Password length",
        minimum=Constants.MIN_PASSWORD_LENGTH(),
        maximum=Constants.MAX_PASSWORD_LENGTH(),
    )


def validate_pin_length(pin_length: int) -> None:
    """Validate the length of a numeric PIN.

    Args:
        pin_length: Requested PIN length

    Raises:
        ValidationError: If pin_length is not an integer within the allowed bounds
    """
    _validate_bounded_int(
        pin_length,
        name="PIN length",
        minimum=Constants.MIN_PIN_LENGTH(),
        maximum=Constants.MAX_PIN_LENGTH(),
    )


def parse_bool(value: str, *, name: str) -> bool:
    """Parse a boolean flag from its textual form (e.g. an environment variable).

    Raises:
        ValidationError: If the text is not a recognized boolean
    """
    normalized = value.strip().lower()
    if normalized in ("1", "true", "yes", "on"):
        return True
    if normalized in ("0", "false", "no", "off"):
        return False
    raise ValidationError(f"{name} must be a boolean value, got {value!r}")


def parse_int(value: str, *, name: str) -> int:
    """Parse an integer from its textual form.

    Raises:
        ValidationError: If the text is not an integer
    """
    try:
        return int(value.strip())
    except ValueError as e:
        raise ValidationError(f"{name} must be an integer, got {value!r}") from e

"""Tests for the validation_utils module."""

import unittest

from splurge_credential_forge.exceptions import ValidationError
from splurge_credential_forge.validation_utils import (
    parse_bool,
    parse_int,
    validate_password_length,
    validate_pin_length,
)


class TestValidationUtils(unittest.TestCase):
    """Test cases for validation utility functions."""

    def test_validate_password_length_bounds(self):
        """Test accepted and rejected password lengths."""
        for ok in (6, 16, 64):
            validate_password_length(ok)

        for bad in (5, 65):
            with self.subTest(length=bad):
                with self.assertRaisesRegex(ValidationError, "Password length"):
                    validate_password_length(bad)

    def test_validate_pin_length_bounds(self):
        """Test accepted and rejected PIN lengths."""
        for ok in (3, 6, 12):
            validate_pin_length(ok)

        with self.assertRaisesRegex(ValidationError, "at least 3"):
            validate_pin_length(2)

        with self.assertRaisesRegex(ValidationError, "at most 12"):
            validate_pin_length(13)

    def test_validate_rejects_non_integers(self):
        """Test that bools, floats and strings are rejected."""
        for bad in (True, 8.0, "8", None):
            with self.subTest(value=bad):
                with self.assertRaisesRegex(ValidationError, "must be an integer"):
                    validate_pin_length(bad)

    def test_parse_bool(self):
        """Test textual boolean parsing."""
        for text in ("1", "true", "TRUE", " yes ", "on"):
            self.assertTrue(parse_bool(text, name="FLAG"))

        for text in ("0", "false", "No", "off"):
            self.assertFalse(parse_bool(text, name="FLAG"))

        with self.assertRaisesRegex(ValidationError, "FLAG"):
            parse_bool("maybe", name="FLAG")

    def test_parse_int(self):
        """Test textual integer parsing."""
        self.assertEqual(parse_int(" 12 ", name="N"), 12)

        with self.assertRaisesRegex(ValidationError, "N must be an integer"):
            parse_int("twelve", name="N")


if __name__ == "__main__":
    unittest.main()

"""Tests for the generators module."""

import re
import unittest
import uuid

from splurge_credential_forge.config import CredentialConfig
from splurge_credential_forge.constants import Constants
from splurge_credential_forge.exceptions import RandomnessUnavailableError, ValidationError
from splurge_credential_forge.generators import (
    RandomGenerator,
    generate_custom_password,
    generate_mac_address,
    generate_pin,
    generate_uuid,
)
from splurge_credential_forge.models import GeneratorMode, MacSeparator
from tests.test_utility import (
    FailingRandomSource,
    ScriptedRandomSource,
    SeededRandomSource,
    TestUtilities,
)

UUID4_PATTERN = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


class TestCustomPassword(unittest.TestCase):
    """Test cases for custom password generation."""

    def setUp(self):
        """Set up test fixtures."""
        self.generator = RandomGenerator(SeededRandomSource(42))

    def test_build_pool_order(self):
        """Test that character classes are concatenated in a fixed order."""
        pool = RandomGenerator.build_pool(CredentialConfig())

        self.assertEqual(
            pool,
            Constants.ALPHA_LOWER() + Constants.ALPHA_UPPER() + Constants.DIGITS() + Constants.SYMBOLS(),
        )
        self.assertEqual(len(pool), 26 + 26 + 10 + 27)

    def test_build_pool_subsets(self):
        """Test pool sizes for common class selections."""
        self.assertEqual(len(RandomGenerator.build_pool(CredentialConfig(
            include_uppercase=False, include_digits=False, include_symbols=False))), 26)
        self.assertEqual(len(RandomGenerator.build_pool(CredentialConfig(
            include_digits=False, include_symbols=False))), 52)
        self.assertEqual(len(RandomGenerator.build_pool(CredentialConfig(
            include_symbols=False))), 62)

    def test_length_and_pool_membership(self):
        """Test that every password has the requested length and pool characters."""
        for length in (6, 16, 33, 64):
            config = CredentialConfig(length=length)
            pool = set(RandomGenerator.build_pool(config))

            password = self.generator.generate_custom_password(config)

            self.assertEqual(len(password), length)
            self.assertTrue(set(password) <= pool)

    def test_only_digits(self):
        """Test a digits-only configuration."""
        config = CredentialConfig(
            include_uppercase=False,
            include_lowercase=False,
            include_symbols=False,
        )

        password = self.generator.generate_custom_password(config)

        self.assertTrue(password.isdigit())

    def test_no_character_classes_returns_empty(self):
        """Test that no enabled classes yields an empty password without drawing."""
        source = ScriptedRandomSource(b"")
        generator = RandomGenerator(source)
        config = CredentialConfig(
            include_uppercase=False,
            include_lowercase=False,
            include_digits=False,
            include_symbols=False,
        )

        self.assertEqual(generator.generate_custom_password(config), "")
        self.assertEqual(source.requests, [])

    def test_uniformity_chi_square(self):
        """Test that per-character selection from a 94-ish pool is uniform."""
        config = CredentialConfig(length=64)
        pool = RandomGenerator.build_pool(config)
        generator = RandomGenerator()

        samples = "".join(generator.generate_custom_password(config) for _ in range(1000))
        statistic = TestUtilities.chi_square(samples, pool)

        self.assertLess(statistic, TestUtilities.chi_square_critical(len(pool) - 1))

    def test_randomness_unavailable(self):
        """Test that a failing source is surfaced, never replaced."""
        generator = RandomGenerator(FailingRandomSource())

        with self.assertRaises(RandomnessUnavailableError):
            generator.generate_custom_password(CredentialConfig())

    def test_seeded_source_is_reproducible(self):
        """Test that the same seed yields the same password."""
        config = CredentialConfig(length=20)

        first = RandomGenerator(SeededRandomSource(3)).generate_custom_password(config)
        second = RandomGenerator(SeededRandomSource(3)).generate_custom_password(config)

        self.assertEqual(first, second)

    def test_module_level_function(self):
        """Test the module-level convenience function."""
        password = generate_custom_password(CredentialConfig(length=12))

        self.assertEqual(len(password), 12)


class TestPin(unittest.TestCase):
    """Test cases for PIN generation."""

    def test_pin_length_and_digits(self):
        """Test that PINs contain only digits of the requested length."""
        generator = RandomGenerator(SeededRandomSource(5))
        for length in range(Constants.MIN_PIN_LENGTH(), Constants.MAX_PIN_LENGTH() + 1):
            pin = generator.generate_pin(length)
            self.assertEqual(len(pin), length)
            self.assertTrue(pin.isdigit())

    def test_pin_keeps_leading_zeros(self):
        """Test that a zero digit draw is rendered, not dropped."""
        source = ScriptedRandomSource(b"\x00\x00\x00\x00" * 3)

        self.assertEqual(RandomGenerator(source).generate_pin(3), "000")

    def test_pin_length_out_of_bounds(self):
        """Test that PIN lengths outside 3-12 are rejected."""
        generator = RandomGenerator()

        with self.assertRaises(ValidationError):
            generator.generate_pin(2)

        with self.assertRaises(ValidationError):
            generator.generate_pin(13)

    def test_pin_uniformity_chi_square(self):
        """Test that PIN digits are uniformly distributed."""
        samples = "".join(generate_pin(12) for _ in range(500))
        statistic = TestUtilities.chi_square(samples, Constants.DIGITS())

        self.assertLess(statistic, TestUtilities.chi_square_critical(9))


class TestUUID(unittest.TestCase):
    """Test cases for UUID generation."""

    def test_uuid_grammar(self):
        """Test version nibble 4 and variant nibble in {8, 9, a, b}."""
        generator = RandomGenerator()
        for _ in range(200):
            value = generator.generate_uuid()
            self.assertRegex(value, UUID4_PATTERN)
            parsed = uuid.UUID(value)
            self.assertEqual(parsed.version, 4)
            self.assertEqual(parsed.variant, uuid.RFC_4122)

    def test_uuid_forces_version_bits(self):
        """Test that all-ones random bytes still produce a valid v4 UUID."""
        source = ScriptedRandomSource(b"\xff" * 16)

        value = RandomGenerator(source).generate_uuid()

        self.assertEqual(value, "ffffffff-ffff-4fff-bfff-ffffffffffff")

    def test_uuid_from_zero_bytes(self):
        """Test the lowest possible v4 UUID."""
        source = ScriptedRandomSource(b"\x00" * 16)

        value = RandomGenerator(source).generate_uuid()

        self.assertEqual(value, "00000000-0000-4000-8000-000000000000")

    def test_module_level_function(self):
        """Test the module-level convenience function."""
        self.assertRegex(generate_uuid(), UUID4_PATTERN)


class TestMacAddress(unittest.TestCase):
    """Test cases for MAC address generation."""

    def test_colon_uppercase_seeded(self):
        """Test colon separated uppercase output on a fixed seed."""
        generator = RandomGenerator(SeededRandomSource(1234))

        mac = generator.generate_mac_address(MacSeparator.COLON, uppercase=True)

        self.assertRegex(mac, r"^[0-9A-F]{2}(:[0-9A-F]{2}){5}$")

    def test_hyphen_lowercase(self):
        """Test hyphen separated lowercase output."""
        mac = RandomGenerator().generate_mac_address(MacSeparator.HYPHEN, uppercase=False)

        self.assertRegex(mac, r"^[0-9a-f]{2}(-[0-9a-f]{2}){5}$")

    def test_no_separator(self):
        """Test output with no separator."""
        mac = RandomGenerator().generate_mac_address(MacSeparator.NONE)

        self.assertRegex(mac, r"^[0-9A-F]{12}$")

    def test_bytes_are_formatted_in_order(self):
        """Test that each byte renders as two hex digits, high nibble first."""
        source = ScriptedRandomSource(bytes([0x01, 0xAB, 0x10, 0xFF, 0x00, 0x7E]))

        mac = RandomGenerator(source).generate_mac_address(":", uppercase=True)

        self.assertEqual(mac, "01:AB:10:FF:00:7E")

    def test_multicast_bits_not_filtered(self):
        """Test that multicast and locally administered patterns are kept."""
        source = ScriptedRandomSource(bytes([0x03, 0, 0, 0, 0, 0]))

        mac = RandomGenerator(source).generate_mac_address("", uppercase=False)

        self.assertEqual(mac, "030000000000")

    def test_separator_strings(self):
        """Test that separators can be given by name."""
        self.assertRegex(generate_mac_address("hyphen"), r"^[0-9A-F]{2}(-[0-9A-F]{2}){5}$")
        self.assertRegex(generate_mac_address("none"), r"^[0-9A-F]{12}$")

    def test_unknown_separator(self):
        """Test that unknown separators are rejected."""
        with self.assertRaises(ValidationError):
            RandomGenerator().generate_mac_address("/")

    def test_randomness_unavailable(self):
        """Test that a failing source is surfaced."""
        with self.assertRaises(RandomnessUnavailableError):
            RandomGenerator(FailingRandomSource()).generate_mac_address()


class TestGenerateDispatch(unittest.TestCase):
    """Test cases for mode dispatch."""

    def setUp(self):
        """Set up test fixtures."""
        self.generator = RandomGenerator(SeededRandomSource(9))
        self.config = CredentialConfig(
            length=10,
            pin_length=4,
            mac_separator=MacSeparator.HYPHEN,
            mac_uppercase=False,
        )

    def test_custom(self):
        """Test custom mode uses the password length."""
        self.assertEqual(len(self.generator.generate(GeneratorMode.CUSTOM, self.config)), 10)

    def test_pin(self):
        """Test PIN mode uses the PIN length."""
        pin = self.generator.generate(GeneratorMode.PIN, self.config)

        self.assertEqual(len(pin), 4)
        self.assertTrue(pin.isdigit())

    def test_uuid(self):
        """Test UUID mode."""
        self.assertRegex(self.generator.generate(GeneratorMode.UUID, self.config), UUID4_PATTERN)

    def test_mac(self):
        """Test MAC mode uses the MAC settings."""
        mac = self.generator.generate(GeneratorMode.MAC, self.config)

        self.assertRegex(mac, r"^[0-9a-f]{2}(-[0-9a-f]{2}){5}$")

    def test_unknown_mode(self):
        """Test that an unknown mode is rejected."""
        with self.assertRaises(ValidationError):
            self.generator.generate("password", self.config)


if __name__ == "__main__":
    unittest.main()

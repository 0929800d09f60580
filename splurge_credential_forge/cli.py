#!/usr/bin/env python3
"""Command-line interface for the Splurge Credential Forge system."""

import argparse
import json
import logging
import sys
import time
from dataclasses import replace
from typing import Any, Optional

from splurge_credential_forge.config import CredentialConfig
from splurge_credential_forge.constants import Constants
from splurge_credential_forge.exceptions import RandomnessUnavailableError, ValidationError
from splurge_credential_forge.forge import CredentialForge
from splurge_credential_forge.models import GenerationResult, GeneratorMode, MacSeparator


class CredentialForgeCLI:
    """Command-line interface for the Credential Forge system."""

    def __init__(self) -> None:
        """Initialize the CLI."""
        self._parser = self._create_parser()
        self._pretty = False

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser.

        Returns:
            Configured argument parser
        """
        parser = argparse.ArgumentParser(
            description="Splurge Credential Forge - Passwords, PINs, UUIDs, MAC addresses and TOTP codes",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Generate a 24 character password without symbols
  python cli.py password -l 24 --no-symbols

  # Generate an 8 digit PIN
  python cli.py pin -l 8

  # Generate a UUID
  python cli.py uuid

  # Generate a lowercase, hyphen separated MAC address
  python cli.py mac -s hyphen --lower

  # Grade an existing password
  python cli.py entropy -t "correct horse battery staple"

  # Current TOTP code for a secret
  python cli.py totp -s "JBSW Y3DP EHPK 3PXP"

  # TOTP code at a fixed Unix time
  python cli.py totp -s JBSWY3DPEHPK3PXP -t 59

  # Refresh the TOTP code once per second for 30 seconds
  python cli.py totp -s JBSWY3DPEHPK3PXP -w 30

Defaults can be changed with SCF_LENGTH, SCF_PIN_LENGTH, SCF_UPPERCASE,
SCF_LOWERCASE, SCF_DIGITS, SCF_SYMBOLS, SCF_MAC_SEPARATOR and
SCF_MAC_UPPERCASE environment variables.
            """,
        )

        # Global arguments
        parser.add_argument(
            "--pretty",
            action="store_true",
            help="Pretty-print JSON outputs",
        )
        parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Log debug output to stderr",
        )

        # Subcommands
        subparsers = parser.add_subparsers(
            dest="command",
            help="Available commands",
        )

        # Password command
        password_parser = subparsers.add_parser(
            "password",
            help="Generate a custom password",
        )
        password_parser.add_argument(
            "-l",
            "--length",
            type=int,
            help=f"Password length ({Constants.MIN_PASSWORD_LENGTH()}-{Constants.MAX_PASSWORD_LENGTH()}, default: {Constants.DEFAULT_PASSWORD_LENGTH()})",
        )
        password_parser.add_argument(
            "--no-upper",
            action="store_true",
            help="Exclude uppercase letters",
        )
        password_parser.add_argument(
            "--no-lower",
            action="store_true",
            help="Exclude lowercase letters",
        )
        password_parser.add_argument(
            "--no-digits",
            action="store_true",
            help="Exclude digits",
        )
        password_parser.add_argument(
            "--no-symbols",
            action="store_true",
            help="Exclude symbols",
        )

        # PIN command
        pin_parser = subparsers.add_parser(
            "pin",
            help="Generate a numeric PIN",
        )
        pin_parser.add_argument(
            "-l",
            "--length",
            type=int,
            help=f"PIN length ({Constants.MIN_PIN_LENGTH()}-{Constants.MAX_PIN_LENGTH()}, default: {Constants.DEFAULT_PIN_LENGTH()})",
        )

        # UUID command
        subparsers.add_parser(
            "uuid",
            help="Generate a version 4 UUID",
        )

        # MAC command
        mac_parser = subparsers.add_parser(
            "mac",
            help="Generate a random MAC address",
        )
        mac_parser.add_argument(
            "-s",
            "--separator",
            choices=["colon", "hyphen", "none"],
            help="Octet separator (default: colon)",
        )
        mac_parser.add_argument(
            "--lower",
            action="store_true",
            help="Use lowercase hex digits",
        )

        # Entropy command
        entropy_parser = subparsers.add_parser(
            "entropy",
            help="Estimate the entropy of a credential",
        )
        entropy_parser.add_argument(
            "-t",
            "--text",
            required=True,
            help="Credential to grade",
        )

        # TOTP command
        totp_parser = subparsers.add_parser(
            "totp",
            help="Compute a time-based one-time passcode",
        )
        totp_parser.add_argument(
            "-s",
            "--secret",
            required=True,
            help="Base32 shared secret (case, spaces and hyphens are ignored)",
        )
        totp_parser.add_argument(
            "-t",
            "--time",
            type=float,
            help="Unix time to compute the code for (default: now)",
        )
        totp_parser.add_argument(
            "-w",
            "--watch",
            type=int,
            help="Recompute once per second for this many seconds",
        )

        return parser

    def _configure_logging(self, verbose: bool) -> None:
        """Send debug log records to stderr so stdout stays machine readable."""
        if not verbose:
            return
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    def _print_json(self, payload: dict[str, Any]) -> None:
        """Print a JSON payload to stdout."""
        print(json.dumps(payload, indent=2 if self._pretty else None), flush=True)

    def _print_error(self, *, message: str, code: str = "error") -> None:
        """Print a JSON error to stderr and exit non-zero."""
        error_obj = {
            "success": False,
            "error_code": code,
            "message": message,
        }
        print(json.dumps(error_obj, indent=2), file=sys.stderr)
        sys.exit(1)

    def _print_generation(self, *, command: str, result: GenerationResult) -> None:
        """Print a generated credential and its entropy estimate."""
        payload = {
            "success": True,
            "command": command,
            **result.to_dict(),
        }
        if not result.text:
            payload["warning"] = "No character classes enabled; nothing was generated"
        self._print_json(payload)

    def _handle_password(self, args: argparse.Namespace, config: CredentialConfig) -> None:
        """Handle password command."""
        self._handle_password_with_dependencies(
            config=config,
            length=args.length,
            include_uppercase=not args.no_upper,
            include_lowercase=not args.no_lower,
            include_digits=not args.no_digits,
            include_symbols=not args.no_symbols
        )

    def _handle_password_with_dependencies(
        self,
        *,
        config: CredentialConfig,
        length: int | None,
        include_uppercase: bool,
        include_lowercase: bool,
        include_digits: bool,
        include_symbols: bool
    ) -> None:
        """Handle password command with explicit dependencies.

        Command-line exclusions can only narrow the configured classes.

        Args:
            config: Base configuration (from the environment)
            length: Password length, or None for the configured length
            include_uppercase: Allow uppercase letters
            include_lowercase: Allow lowercase letters
            include_digits: Allow digits
            include_symbols: Allow symbols
        """
        config = replace(
            config,
            length=config.length if length is None else length,
            include_uppercase=config.include_uppercase and include_uppercase,
            include_lowercase=config.include_lowercase and include_lowercase,
            include_digits=config.include_digits and include_digits,
            include_symbols=config.include_symbols and include_symbols,
        )
        result = CredentialForge(config).generate(GeneratorMode.CUSTOM)
        self._print_generation(command="password", result=result)

    def _handle_pin(self, args: argparse.Namespace, config: CredentialConfig) -> None:
        """Handle pin command."""
        self._handle_pin_with_dependencies(config=config, length=args.length)

    def _handle_pin_with_dependencies(
        self,
        *,
        config: CredentialConfig,
        length: int | None
    ) -> None:
        """Handle pin command with explicit dependencies."""
        if length is not None:
            config = replace(config, pin_length=length)
        result = CredentialForge(config).generate(GeneratorMode.PIN)
        self._print_generation(command="pin", result=result)

    def _handle_uuid(self, config: CredentialConfig) -> None:
        """Handle uuid command."""
        result = CredentialForge(config).generate(GeneratorMode.UUID)
        self._print_generation(command="uuid", result=result)

    def _handle_mac(self, args: argparse.Namespace, config: CredentialConfig) -> None:
        """Handle mac command."""
        self._handle_mac_with_dependencies(
            config=config,
            separator=args.separator,
            lowercase=args.lower
        )

    def _handle_mac_with_dependencies(
        self,
        *,
        config: CredentialConfig,
        separator: str | None,
        lowercase: bool
    ) -> None:
        """Handle mac command with explicit dependencies.

        Args:
            config: Base configuration (from the environment)
            separator: Separator name, or None for the configured separator
            lowercase: Force lowercase hex digits
        """
        config = replace(
            config,
            mac_separator=config.mac_separator if separator is None else MacSeparator.parse(separator),
            mac_uppercase=config.mac_uppercase and not lowercase,
        )
        result = CredentialForge(config).generate(GeneratorMode.MAC)
        self._print_generation(command="mac", result=result)

    def _handle_entropy(self, args: argparse.Namespace) -> None:
        """Handle entropy command."""
        entropy = CredentialForge().estimate(args.text)
        self._print_json({
            "success": True,
            "command": "entropy",
            "length": len(args.text),
            "entropy": entropy.to_dict(),
        })

    def _handle_totp(self, args: argparse.Namespace) -> None:
        """Handle totp command."""
        self._handle_totp_with_dependencies(
            secret=args.secret,
            at_time=args.time,
            watch=args.watch
        )

    def _handle_totp_with_dependencies(
        self,
        *,
        secret: str,
        at_time: float | None,
        watch: int | None
    ) -> None:
        """Handle totp command with explicit dependencies.

        Args:
            secret: Base32 shared secret
            at_time: Fixed Unix time, or None for the current time
            watch: Number of one-second refreshes, or None for a single code

        Raises:
            ValidationError: If the time or watch arguments are invalid
        """
        if at_time is not None and watch is not None:
            raise ValidationError("Cannot combine a fixed time (-t) with watch mode (-w)")
        if watch is not None and watch < 1:
            raise ValidationError("Watch duration must be at least 1 second")

        forge = CredentialForge()
        iterations = watch or 1
        for i in range(iterations):
            now = time.time() if at_time is None else at_time
            result = forge.totp(secret, now)
            self._print_json({
                "success": result.is_valid,
                "command": "totp",
                "time": int(now),
                **result.to_dict(),
            })
            if i + 1 < iterations:
                time.sleep(1)

    def run(self, args: Optional[list[str]] = None) -> None:
        """Run the CLI with given arguments."""
        try:
            parsed_args = self._parser.parse_args(args)
            self._pretty = bool(getattr(parsed_args, "pretty", False))
            self._configure_logging(bool(getattr(parsed_args, "verbose", False)))

            if not parsed_args.command:
                self._print_error(message="No command specified", code="missing_command")

            config = CredentialConfig.from_environment()

            # Handle commands
            if parsed_args.command == "password":
                self._handle_password(parsed_args, config)
            elif parsed_args.command == "pin":
                self._handle_pin(parsed_args, config)
            elif parsed_args.command == "uuid":
                self._handle_uuid(config)
            elif parsed_args.command == "mac":
                self._handle_mac(parsed_args, config)
            elif parsed_args.command == "entropy":
                self._handle_entropy(parsed_args)
            elif parsed_args.command == "totp":
                self._handle_totp(parsed_args)
            else:
                self._print_error(message=f"Unknown command: {parsed_args.command}", code="unknown_command")

        except ValidationError as e:
            self._print_error(message=str(e), code="validation_error")
        except RandomnessUnavailableError as e:
            self._print_error(message=str(e), code="randomness_unavailable")
        except KeyboardInterrupt:
            self._print_error(message="Operation cancelled by user", code="cancelled")
        except Exception as e:
            self._print_error(message=str(e), code="unexpected_error")


def main() -> None:
    """Main entry point for the CLI."""
    cli = CredentialForgeCLI()
    cli.run()


if __name__ == "__main__":
    main()

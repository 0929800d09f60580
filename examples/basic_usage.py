#!/usr/bin/env python3
"""Example usage of the Credential Forge generators and entropy grading."""

from splurge_credential_forge import (
    CredentialConfig,
    CredentialForge,
    GeneratorMode,
    MacSeparator,
    estimate_entropy,
)


def main():
    """Demonstrate credential generation with entropy grading."""

    config = CredentialConfig(
        length=20,
        include_symbols=False,
        pin_length=8,
        mac_separator=MacSeparator.HYPHEN,
        mac_uppercase=False,
    )
    forge = CredentialForge(config)

    print("Generating one credential of each kind...")
    for mode in GeneratorMode:
        result = forge.generate(mode)
        entropy = result.entropy
        print(f"{mode.value:>6}: {result.text}  ({entropy.bits} bits, {entropy.label})")
    print()

    # No character classes is not an error: the result is simply empty
    empty_config = CredentialConfig(
        include_uppercase=False,
        include_lowercase=False,
        include_digits=False,
        include_symbols=False,
    )
    result = forge.generate(GeneratorMode.CUSTOM, config=empty_config)
    print(f"Empty pool result: {result.text!r} ({result.entropy.label})")
    print()

    print("Grading existing passwords...")
    for password in ("password", "Tr0ub4dor&3", "correct horse battery staple"):
        entropy = estimate_entropy(password)
        print(f"{password!r}: {entropy.bits} bits, {entropy.label} (score {entropy.score})")


if __name__ == "__main__":
    main()

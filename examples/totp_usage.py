#!/usr/bin/env python3
"""Example usage of the TOTP engine, polled once per second like an authenticator."""

import time
from datetime import datetime, timezone

from splurge_credential_forge import TOTPStatus, compute_totp

SECRET = "JBSW Y3DP EHPK 3PXP"


def main():
    """Demonstrate TOTP computation at fixed and current times."""

    # Fixed instants are reproducible
    for timestamp in (59, 1111111109):
        result = compute_totp(SECRET, timestamp)
        print(f"t={timestamp}: {result.code} ({result.seconds_remaining}s left)")

    when = datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
    print(f"{when.isoformat()}: {compute_totp(SECRET, when).code}")
    print()

    # A secret that is still being typed yields the waiting state
    partial = compute_totp("JBSW", time.time())
    if partial.status is TOTPStatus.INSUFFICIENT_SECRET:
        print(f"Partial secret: {partial.code}")
    print()

    # The caller owns the clock and the refresh loop
    print("Polling for 5 seconds...")
    for _ in range(5):
        result = compute_totp(SECRET, time.time())
        bar = "#" * int(result.progress // 10)
        print(f"{result.code[:3]} {result.code[3:]}  {result.seconds_remaining:>2}s  {bar}")
        time.sleep(1)


if __name__ == "__main__":
    main()

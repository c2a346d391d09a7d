#!/usr/bin/env python3
"""
Scrawled CLI — UUID v7 helper for developers.

Usage:
    python -m tools.scrawled_cli generate
    python -m tools.scrawled_cli generate -n 5
    python -m tools.scrawled_cli inspect <uuid> [<uuid> ...]

Commands:
    generate  — Print fresh UUID v7 values, one per line
    inspect   — Show version, variant and embedded timestamp
"""

import argparse
import os
import sys
import uuid

# Ensure project root is on path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from scrawled_core.uuid7 import is_uuid7, uuid7, uuid7_datetime


# ============================================================
# Generate command
# ============================================================

def cmd_generate(count: int = 1) -> None:
    """Print `count` new UUID v7 values."""
    for _ in range(count):
        print(uuid7())


# ============================================================
# Inspect command
# ============================================================

def cmd_inspect(values: list[str]) -> bool:
    """Describe each value. Returns True if all are valid UUID v7."""
    all_ok = True

    for value in values:
        try:
            parsed = uuid.UUID(value)
        except ValueError:
            print(f"  ✗ {value}: not a UUID")
            all_ok = False
            continue

        if str(parsed) != value.lower():
            print(f"  ✗ {value}: not in hyphenated 8-4-4-4-12 form")
            all_ok = False
            continue

        if not is_uuid7(value):
            # UUID.version is None outside RFC 4122, so read the nibble
            print(
                f"  ✗ {value}: version {parsed.hex[12]}, "
                f"variant {parsed.variant} (expected v7, RFC 4122)"
            )
            all_ok = False
            continue

        ts = uuid7_datetime(value)
        print(f"  ✓ {value}")
        print("    version:   7")
        print(f"    timestamp: {ts.isoformat(timespec='milliseconds')}")

    return all_ok


# ============================================================
# Main
# ============================================================

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Scrawled CLI — UUID v7 generator and inspector",
        prog="python -m tools.scrawled_cli",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Print new UUID v7 values")
    gen.add_argument(
        "--count", "-n",
        type=int,
        default=1,
        help="How many values to print (default 1)",
    )

    insp = sub.add_parser("inspect", help="Decode UUID v7 values")
    insp.add_argument("values", nargs="+", help="UUID strings")

    args = parser.parse_args(argv)

    if args.command == "generate":
        if args.count < 1:
            print(f"  ERROR: --count must be at least 1, got {args.count}")
            return 1
        cmd_generate(args.count)
        return 0

    return 0 if cmd_inspect(args.values) else 1


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""Testhelper CLI for ItemEncrypt key interoperability testing."""

import json
import sys

from itemencrypt import EncryptionKey, Format, Scheme
from itemencrypt.crypto import from_base64url, to_base64url


def key_summary(key: EncryptionKey) -> dict:
    """Convert a key into a JSON-serializable dict with camelCase keys."""
    return {
        "format": key.scheme.version.name,
        "keyData": to_base64url(key.key_data),
        "initializationVector": to_base64url(key.initialization_vector),
        "salt": to_base64url(key.salt),
        "rawData": key.to_base64url(),
    }


def derive() -> None:
    """Derive a key from stdin JSON and output its fields."""
    data = json.loads(sys.stdin.read())

    key = EncryptionKey.from_seed(
        data["password"],
        data.get("keywords", []),
        seed=from_base64url(data["seed"]),
        iv=from_base64url(data["iv"]),
        scheme=Scheme.for_format(Format[data.get("format", "V1")]),
    )
    print(json.dumps(key_summary(key)))


def parse() -> None:
    """Parse a base64url key from stdin and output its fields."""
    key = EncryptionKey.from_base64url(sys.stdin.read())
    print(json.dumps(key_summary(key)))


def main() -> None:
    """Main entry point."""
    if len(sys.argv) < 2:
        print("usage: testhelper.py <command>", file=sys.stderr)
        sys.exit(1)

    command = sys.argv[1]

    if command == "derive":
        derive()
    elif command == "parse":
        parse()
    else:
        print(f"unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

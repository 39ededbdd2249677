"""Cryptographic constants for ItemEncrypt."""

# Width of the version tag that prefixes every serialized key
VERSION_TAG_SIZE = 4

# AES-256 key size
AES_KEY_SIZE = 32

"""Default configuration constants for ItemEncrypt."""

# Version tag used when no scheme is given
DEFAULT_FORMAT_TAG = b"IE\x00\x01"

# PBKDF2 iteration counts per scheme version
V1_PBKDF2_ITERATIONS = 100_000
V2_PBKDF2_ITERATIONS = 210_000

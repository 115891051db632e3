from __future__ import annotations

import os

# Defines the default read size used when checksumming streams
DISSECT_CRC32C_CHUNK_SIZE_DEFAULT = 1024 * 1024

# Defines the environment variable to read the chunk size from
DISSECT_CRC32C_CHUNK_SIZE_ENV = "DISSECT_CRC32C_CHUNK_SIZE"


def chunk_size() -> int:
    """Return the configured stream chunk size in bytes.

    The value of ``DISSECT_CRC32C_CHUNK_SIZE`` takes precedence over the built-in default. Both decimal and
    ``0x`` prefixed hexadecimal values are accepted.
    """
    if (value := os.getenv(DISSECT_CRC32C_CHUNK_SIZE_ENV)) is None:
        return DISSECT_CRC32C_CHUNK_SIZE_DEFAULT

    try:
        size = int(value, 0)
    except ValueError:
        raise ValueError(f"Invalid {DISSECT_CRC32C_CHUNK_SIZE_ENV}: {value!r}") from None

    if size <= 0:
        raise ValueError(f"Invalid {DISSECT_CRC32C_CHUNK_SIZE_ENV}: {value!r} (must be greater than zero)")

    return size

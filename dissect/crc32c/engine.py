from __future__ import annotations

import struct
from functools import lru_cache
from typing import BinaryIO

from dissect.crc32c import config

# Castagnoli polynomial 0x1EDC6F41, bit-reversed
POLYNOMIAL = 0x82F63B78

_unpack_from = struct.Struct("<II").unpack_from


@lru_cache(maxsize=8)
def _tables(polynomial: int) -> tuple[tuple[int, ...], ...]:
    """Generate the eight slicing-by-8 tables for a given (reversed) polynomial.

    Table ``k`` holds the CRC of each byte value followed by ``k`` zero bytes, so table ``0`` is the regular
    byte-at-a-time lookup table.

    Args:
        polynomial: The (reversed) polynomial to use for the CRC32 calculation.
    """
    base = []
    for i in range(256):
        crc = i
        for _ in range(8):
            if (crc & 1) != 0:
                crc = (crc >> 1) ^ polynomial
            else:
                crc >>= 1
        base.append(crc)

    tables = [tuple(base)]
    for _ in range(7):
        prev = tables[-1]
        tables.append(tuple((crc >> 8) ^ base[crc & 0xFF] for crc in prev))
    return tuple(tables)


def _bytes(data: bytes | bytearray | memoryview) -> bytes | bytearray:
    if isinstance(data, (bytes, bytearray)):
        return data
    return bytes(data)


def update(crc: int, data: bytes | bytearray | memoryview) -> int:
    """Update a CRC32C checksum with data, one byte at a time.

    This is the plain table-driven evaluation. It is slower than :func:`extend` but trivially correct, which makes it
    useful as a reference.

    Args:
        crc: The initial value of the checksum.
        data: The data to update the checksum with.
    """
    table = _tables(POLYNOMIAL)[0]

    crc = (crc & 0xFFFFFFFF) ^ 0xFFFFFFFF
    for b in _bytes(data):
        crc = table[(crc ^ b) & 0xFF] ^ (crc >> 8)
    return crc ^ 0xFFFFFFFF


def extend(crc: int, data: bytes | bytearray | memoryview) -> int:
    """Extend a CRC32C checksum with data.

    Extending is composable: ``extend(extend(crc, a), b) == extend(crc, a + b)``, so a logically single stream can
    be checksummed in independent chunks. Start a fresh computation with a ``crc`` of ``0``.

    Args:
        crc: The current value of the checksum.
        data: The data to extend the checksum with. May be empty.

    Returns:
        The new 32-bit checksum value.

    References:
        - https://tools.ietf.org/html/rfc3720#appendix-B.4
        - https://github.com/google/crc32c
    """
    t0, t1, t2, t3, t4, t5, t6, t7 = _tables(POLYNOMIAL)
    data = _bytes(data)

    length = len(data)
    end = length - (length % 8)

    crc = (crc & 0xFFFFFFFF) ^ 0xFFFFFFFF
    for offset in range(0, end, 8):
        lo, hi = _unpack_from(data, offset)
        lo ^= crc
        crc = (
            t7[lo & 0xFF]
            ^ t6[(lo >> 8) & 0xFF]
            ^ t5[(lo >> 16) & 0xFF]
            ^ t4[lo >> 24]
            ^ t3[hi & 0xFF]
            ^ t2[(hi >> 8) & 0xFF]
            ^ t1[(hi >> 16) & 0xFF]
            ^ t0[hi >> 24]
        )

    for b in data[end:]:
        crc = t0[(crc ^ b) & 0xFF] ^ (crc >> 8)

    return crc ^ 0xFFFFFFFF


def crc32c(data: bytes | bytearray | memoryview, value: int = 0) -> int:
    """Calculate CRC32C checksum of some data, with an optional initial value.

    Args:
        data: The data to calculate the checksum of.
        value: The initial value of the checksum. Default is 0.
    """
    return extend(value, data)


def crc32c_stream(fh: BinaryIO, value: int = 0, chunk_size: int | None = None) -> int:
    """Calculate CRC32C checksum of a file-like object, reading it in chunks until EOF.

    Args:
        fh: File-like object to read from, starting at its current position.
        value: The initial value of the checksum. Default is 0.
        chunk_size: Read size in bytes. Defaults to :func:`dissect.crc32c.config.chunk_size`.
    """
    if chunk_size is None:
        chunk_size = config.chunk_size()

    crc = value & 0xFFFFFFFF
    while chunk := fh.read(chunk_size):
        crc = extend(crc, chunk)
    return crc


def _gf2_matrix_times(matrix: list[int], vector: int) -> int:
    result = 0
    i = 0
    while vector:
        if vector & 1:
            result ^= matrix[i]
        vector >>= 1
        i += 1
    return result


def _gf2_matrix_square(matrix: list[int]) -> list[int]:
    return [_gf2_matrix_times(matrix, row) for row in matrix]


def combine(crc1: int, crc2: int, len2: int) -> int:
    """Combine two CRC32C checksums.

    Given ``crc1 = crc32c(a)``, ``crc2 = crc32c(b)`` and ``len2 = len(b)``, return ``crc32c(a + b)`` without having
    access to either ``a`` or ``b``. This is zlib's ``crc32_combine`` algorithm with the Castagnoli polynomial.

    References:
        - https://github.com/madler/zlib/blob/master/crc32.c
    """
    if len2 <= 0:
        return crc1 & 0xFFFFFFFF

    # Operator for one zero bit
    odd = [POLYNOMIAL] + [1 << i for i in range(31)]
    # Operator for two zero bits
    even = _gf2_matrix_square(odd)
    # Operator for four zero bits
    odd = _gf2_matrix_square(even)

    crc1 &= 0xFFFFFFFF
    # Apply len2 zero bytes to crc1, the first square gives the operator for one zero byte
    while True:
        even = _gf2_matrix_square(odd)
        if len2 & 1:
            crc1 = _gf2_matrix_times(even, crc1)
        len2 >>= 1
        if not len2:
            break

        odd = _gf2_matrix_square(even)
        if len2 & 1:
            crc1 = _gf2_matrix_times(odd, crc1)
        len2 >>= 1
        if not len2:
            break

    return crc1 ^ (crc2 & 0xFFFFFFFF)

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable

from dissect.crc32c.engine import extend
from dissect.crc32c.exceptions import BadSignatureError, ChecksumOutOfRangeError, NonIntegerChecksumError
from dissect.crc32c.marshal import IntegerSequence, iter_sequence, marshal_bytes

BYTES_TYPES = (bytes, bytearray, memoryview)


def check_checksum(crc: object) -> int:
    """Check that ``crc`` is an unsigned 32-bit integer."""
    if not isinstance(crc, int) or isinstance(crc, bool):
        raise NonIntegerChecksumError(crc)
    if not 0 <= crc <= 0xFFFFFFFF:
        raise ChecksumOutOfRangeError(crc)
    return crc


def _extend_sequence(crc: int, element_size: int, sequence: IntegerSequence) -> int:
    # Every element is validated before the checksum is returned, so a failure never leaks a partial result
    for raw in iter_sequence(element_size, sequence):
        crc = extend(crc, raw)
    return crc


def value_sequence(element_size: int, sequence: IntegerSequence) -> int:
    """Calculate the CRC32C of a structured sequence of fixed-width integers.

    Values are encoded as ``element_size`` little-endian bytes in ascending position order.

    Args:
        element_size: The width of each element in bytes, one of 1, 2, 4 or 8.
        sequence: A mapping of positive integer positions to integer values, or an iterable of
                  ``(position, value)`` pairs.

    Raises:
        ValidationError: If the element size, a position or a value is invalid.
    """
    return _extend_sequence(0, element_size, sequence)


def value_bytes(data: bytes | bytearray | memoryview) -> int:
    """Calculate the CRC32C of a byte string."""
    return extend(0, marshal_bytes(data))


def extend_sequence(element_size: int, sequence: IntegerSequence, crc: int) -> int:
    """Extend the CRC32C ``crc`` with a structured sequence of fixed-width integers.

    Raises:
        NonIntegerChecksumError: If ``crc`` is not an integer.
        ChecksumOutOfRangeError: If ``crc`` does not fit in 32 unsigned bits.
        ValidationError: If the element size, a position or a value is invalid.
    """
    return _extend_sequence(check_checksum(crc), element_size, sequence)


def extend_bytes(data: bytes | bytearray | memoryview, crc: int) -> int:
    """Extend the CRC32C ``crc`` with a byte string.

    Raises:
        NonIntegerChecksumError: If ``crc`` is not an integer.
        ChecksumOutOfRangeError: If ``crc`` does not fit in 32 unsigned bits.
    """
    return extend(check_checksum(crc), marshal_bytes(data))


def _is_number(obj: object) -> bool:
    return isinstance(obj, (int, float)) and not isinstance(obj, bool)


def _is_sequence(obj: object) -> bool:
    return isinstance(obj, Iterable) and not isinstance(obj, (str, *BYTES_TYPES))


def _is_bytes(obj: object) -> bool:
    return isinstance(obj, BYTES_TYPES)


# Maps argument shapes to their handler, checked in order
_VALUE_SIGNATURES: list[tuple[tuple[Callable[[object], bool], ...], Callable[..., int]]] = [
    ((_is_number, _is_sequence), value_sequence),
    ((_is_bytes,), value_bytes),
]

_EXTEND_SIGNATURES: list[tuple[tuple[Callable[[object], bool], ...], Callable[..., int]]] = [
    ((_is_number, _is_sequence, _is_number), extend_sequence),
    ((_is_bytes, _is_number), extend_bytes),
]


def _dispatch(
    signatures: list[tuple[tuple[Callable[[object], bool], ...], Callable[..., int]]], args: tuple[Any, ...], usage: str
) -> int:
    for shape, handler in signatures:
        if len(shape) == len(args) and all(check(arg) for check, arg in zip(shape, args)):
            return handler(*args)

    raise BadSignatureError(f"Wrong signature - {usage}")


def value(*args: Any) -> int:
    """Calculate a fresh CRC32C checksum.

    Usage::

        value(element_size, {1: 0x0102, 2: 0x0304})
        value(b"123456789")

    Raises:
        BadSignatureError: If the arguments match neither signature.
        ValidationError: If the arguments are of the right shape but invalid.
    """
    return _dispatch(_VALUE_SIGNATURES, args, "neither (element_size, sequence) nor (data)")


def extend_value(*args: Any) -> int:
    """Extend an existing CRC32C checksum.

    Usage::

        extend_value(element_size, {1: 0x0102, 2: 0x0304}, crc)
        extend_value(b"123456789", crc)

    Raises:
        BadSignatureError: If the arguments match neither signature.
        ValidationError: If the arguments are of the right shape but invalid.
    """
    return _dispatch(_EXTEND_SIGNATURES, args, "neither (element_size, sequence, crc) nor (data, crc)")

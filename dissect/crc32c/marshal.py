from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Union

from dissect.crc32c.exceptions import (
    BadSignatureError,
    DuplicateKeyError,
    InvalidElementSizeError,
    NonIntegerKeyError,
    NonIntegerValueError,
    NonPositiveKeyError,
    ValueOutOfRangeError,
)

ELEMENT_SIZES = (1, 2, 4, 8)

IntegerSequence = Union[Mapping[int, int], Iterable[tuple[int, int]]]


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_element_size(element_size: object) -> int:
    """Check that ``element_size`` is a power of two that fits in 8 bytes.

    A float with an integral value, such as ``2.0``, is accepted and returned as an ``int``.
    """
    if isinstance(element_size, float) and element_size.is_integer():
        element_size = int(element_size)

    if not _is_int(element_size) or element_size <= 0 or element_size & (element_size - 1) or element_size > 8:
        raise InvalidElementSizeError(element_size)
    return element_size


def check_value(element_size: int, value: int) -> None:
    """Check that ``value`` fits the signed or unsigned range of ``element_size`` bytes.

    For example, one byte accepts ``-128`` through ``255``.
    """
    bits = element_size * 8
    if not -(1 << (bits - 1)) <= value <= (1 << bits) - 1:
        raise ValueOutOfRangeError(element_size, value)


def pack_le(value: int, element_size: int) -> bytes:
    """Encode an integer as ``element_size`` little-endian bytes.

    Negative values are encoded as their two's complement bit pattern. The caller is responsible for checking the
    range first, see :func:`check_value`.
    """
    return (value & ((1 << (element_size * 8)) - 1)).to_bytes(element_size, "little")


def _pair(item: object) -> object:
    if isinstance(item, (str, bytes, bytearray, memoryview)):
        raise TypeError(f"Expected a (position, value) pair, got {type(item)}")
    return item


def _items(sequence: IntegerSequence) -> list[tuple[object, object]]:
    if isinstance(sequence, Mapping):
        items = list(sequence.items())
    elif isinstance(sequence, (str, bytes, bytearray, memoryview)):
        raise BadSignatureError(f"Expected a mapping or iterable of (position, value) pairs, got {type(sequence)}")
    else:
        try:
            items = [tuple(_pair(item)) for item in sequence]
        except TypeError:
            raise BadSignatureError(
                f"Expected a mapping or iterable of (position, value) pairs, got {type(sequence)}"
            ) from None

        if any(len(item) != 2 for item in items):
            raise BadSignatureError("Expected an iterable of (position, value) pairs")

    # Keys are checked before sorting, so sorting only ever compares integers
    seen = set()
    for key, _ in items:
        if not _is_int(key):
            raise NonIntegerKeyError(key)
        if key in seen:
            raise DuplicateKeyError(key)
        seen.add(key)

    return sorted(items, key=lambda item: item[0])


def iter_sequence(element_size: int, sequence: IntegerSequence) -> Iterator[bytes]:
    """Validate and encode a structured sequence, yielding one encoded element at a time.

    Elements are produced in ascending position order, independent of the iteration order of ``sequence``.

    Args:
        element_size: The width of each element in bytes, one of 1, 2, 4 or 8.
        sequence: A mapping of positive integer positions to integer values, or an iterable of
                  ``(position, value)`` pairs.

    Raises:
        InvalidElementSizeError: If ``element_size`` is not 1, 2, 4 or 8.
        NonIntegerKeyError: If a position is not an integer.
        DuplicateKeyError: If a position occurs more than once.
        NonPositiveKeyError: If a position is smaller than 1.
        NonIntegerValueError: If a value is not an integer.
        ValueOutOfRangeError: If a value does not fit ``element_size`` bytes.
    """
    element_size = check_element_size(element_size)

    for key, value in _items(sequence):
        if key < 1:
            raise NonPositiveKeyError(key)

        if not _is_int(value):
            raise NonIntegerValueError(key, value)

        check_value(element_size, value)
        yield pack_le(value, element_size)


def marshal_sequence(element_size: int, sequence: IntegerSequence) -> bytes:
    """Marshal a structured sequence into its canonical little-endian byte representation.

    Validation is all-or-nothing: the first invalid entry raises and no bytes are returned.

    Args:
        element_size: The width of each element in bytes, one of 1, 2, 4 or 8.
        sequence: A mapping of positive integer positions to integer values, or an iterable of
                  ``(position, value)`` pairs.

    Returns:
        The concatenated encoding of all values in ascending position order.
    """
    return b"".join(iter_sequence(element_size, sequence))


def marshal_bytes(data: bytes | bytearray | memoryview) -> bytes | bytearray | memoryview:
    """Pass through an already flat byte string."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise BadSignatureError(f"Expected a bytes-like object, got {type(data)}")
    return data

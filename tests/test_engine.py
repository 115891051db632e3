from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest

from dissect.crc32c.engine import combine, crc32c, crc32c_stream, extend, update

if TYPE_CHECKING:
    from pytest_benchmark.fixture import BenchmarkFixture


@pytest.mark.parametrize(
    ("data", "value", "expected"),
    [
        (b"hello, world!", 0, 0xCE8F3C63),
        (b"hello, world!", 0x12345678, 0x30663976),
        (b"", 0x12345678, 0x12345678),
        (b"123456789", 0, 0xE3069283),
        (b"a", 0, 0xC1D04330),
        (b"The quick brown fox jumps over the lazy dog", 0, 0x22620404),
        # https://tools.ietf.org/html/rfc3720#appendix-B.4
        # Empty
        (b"", 0, 0),
        # All zeroes
        (b"\x00" * 32, 0, 0x8A9136AA),
        # All ones
        (b"\xff" * 32, 0, 0x62A8AB43),
        # Incrementing
        (bytes(range(32)), 0, 0x46DD794E),
        # Decrementing
        (bytes(reversed(range(32))), 0, 0x113FDB5C),
    ],
)
def test_crc32c(data: bytes, value: int, expected: int):
    assert crc32c(data, value) == expected
    assert extend(value, data) == expected
    assert update(value, data) == expected


@pytest.mark.parametrize("length", range(0, 41))
def test_extend_matches_update(data: bytes, length: int):
    assert extend(0, data[:length]) == update(0, data[:length])
    assert extend(0xDEADBEEF, data[7 : 7 + length]) == update(0xDEADBEEF, data[7 : 7 + length])


@pytest.mark.parametrize("buf_type", [bytes, bytearray, memoryview])
def test_extend_bytes_like(buf_type: type):
    assert extend(0, buf_type(b"123456789")) == 0xE3069283


def test_extend_memoryview_of_wider_format():
    view = memoryview(b"\x01\x00\x02\x00").cast("H")
    assert extend(0, view) == extend(0, b"\x01\x00\x02\x00")


@pytest.mark.parametrize("split", [0, 1, 3, 8, 9, 500, 1036, 1037])
def test_extend_composable(data: bytes, split: int):
    a, b = data[:split], data[split:]
    assert extend(extend(0, a), b) == extend(0, a + b)
    assert extend(extend(0x12345678, a), b) == extend(0x12345678, a + b)


def test_extend_empty_is_identity():
    for crc in (0, 1, 0xE3069283, 0xFFFFFFFF):
        assert extend(crc, b"") == crc


@pytest.mark.parametrize("split", [0, 1, 4, 9, 100, 1037])
def test_combine(data: bytes, split: int):
    a, b = data[:split], data[split:]
    assert combine(crc32c(a), crc32c(b), len(b)) == crc32c(data)


def test_combine_empty_tail():
    assert combine(0xE3069283, 0, 0) == 0xE3069283


@pytest.mark.parametrize("chunk_size", [1, 3, 8, 4096])
def test_crc32c_stream(data: bytes, chunk_size: int):
    assert crc32c_stream(io.BytesIO(data), chunk_size=chunk_size) == crc32c(data)
    assert crc32c_stream(io.BytesIO(data), 0x12345678, chunk_size) == crc32c(data, 0x12345678)


def test_crc32c_stream_from_position():
    fh = io.BytesIO(b"xxx123456789")
    fh.seek(3)
    assert crc32c_stream(fh) == 0xE3069283


@pytest.mark.benchmark
def test_crc32c_benchmark(benchmark: BenchmarkFixture):
    benchmark(crc32c, b"hello, world!" * 1024, 0)


@pytest.mark.benchmark
def test_update_benchmark(benchmark: BenchmarkFixture):
    benchmark(update, 0, b"hello, world!" * 1024)

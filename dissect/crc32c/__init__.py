from dissect.crc32c.api import (
    extend_bytes,
    extend_sequence,
    extend_value,
    value,
    value_bytes,
    value_sequence,
)
from dissect.crc32c.engine import combine, crc32c, crc32c_stream, extend
from dissect.crc32c.exceptions import (
    BadSignatureError,
    ChecksumOutOfRangeError,
    DuplicateKeyError,
    Error,
    InvalidElementSizeError,
    NonIntegerChecksumError,
    NonIntegerKeyError,
    NonIntegerValueError,
    NonPositiveKeyError,
    ValidationError,
    ValueOutOfRangeError,
)
from dissect.crc32c.marshal import marshal_bytes, marshal_sequence

VERSION = "dissect.crc32c 1.0"
__version__ = "1.0"

__all__ = [
    "VERSION",
    "BadSignatureError",
    "ChecksumOutOfRangeError",
    "DuplicateKeyError",
    "Error",
    "InvalidElementSizeError",
    "NonIntegerChecksumError",
    "NonIntegerKeyError",
    "NonIntegerValueError",
    "NonPositiveKeyError",
    "ValidationError",
    "ValueOutOfRangeError",
    "__version__",
    "combine",
    "crc32c",
    "crc32c_stream",
    "extend",
    "extend_bytes",
    "extend_sequence",
    "extend_value",
    "marshal_bytes",
    "marshal_sequence",
    "value",
    "value_bytes",
    "value_sequence",
]

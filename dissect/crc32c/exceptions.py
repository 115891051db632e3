from __future__ import annotations


class Error(Exception):
    pass


class ValidationError(Error, ValueError):
    """Raised when input cannot be marshaled into a checksum."""


class InvalidElementSizeError(ValidationError):
    def __init__(self, element_size: object):
        super().__init__(f"Element size {element_size!r} is not 1, 2, 4, or 8")
        self.element_size = element_size


class NonIntegerKeyError(ValidationError):
    def __init__(self, key: object):
        super().__init__(f"Sequence key {key!r} is not an integer")
        self.key = key


class DuplicateKeyError(ValidationError):
    def __init__(self, key: int):
        super().__init__(f"Sequence key {key} occurs more than once")
        self.key = key


class NonPositiveKeyError(ValidationError):
    def __init__(self, key: int):
        super().__init__(f"Sequence key {key} is not greater than zero")
        self.key = key


class NonIntegerValueError(ValidationError):
    def __init__(self, key: int, value: object):
        super().__init__(f"Sequence value {value!r} at key {key} is not an integer")
        self.key = key
        self.value = value


class ValueOutOfRangeError(ValidationError):
    def __init__(self, element_size: int, value: int):
        super().__init__(f"Value {value} exceeds selected {element_size} byte element size")
        self.element_size = element_size
        self.value = value


class NonIntegerChecksumError(ValidationError):
    def __init__(self, crc: object):
        super().__init__(f"CRC value {crc!r} is not an integer")
        self.crc = crc


class ChecksumOutOfRangeError(ValidationError):
    def __init__(self, crc: int):
        super().__init__(f"CRC value {crc} is out of range")
        self.crc = crc


class BadSignatureError(Error, TypeError):
    pass

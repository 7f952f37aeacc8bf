"""Error kinds raised by the RC5 core.

Every check happens before any cipher arithmetic runs, so a call either
completes or is rejected without partial work.
"""

from __future__ import annotations


class RC5Error(Exception):
    """Base class for all rc5lab errors."""


class UnsupportedWordSize(RC5Error, ValueError):
    def __init__(self, bits: int):
        super().__init__(f"Word size must be one of 16, 32, 64 bits, got {bits}")
        self.bits = bits


class KeyLengthMismatch(RC5Error, ValueError):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"Key must be {expected} bytes, got {actual}")
        self.expected = expected
        self.actual = actual


class BlockLengthMismatch(RC5Error, ValueError):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"Block must be {expected} bytes, got {actual}")
        self.expected = expected
        self.actual = actual


class TableSizeMismatch(RC5Error, ValueError):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"Expanded key table must hold {expected} words, got {actual}")
        self.expected = expected
        self.actual = actual


class CipherWipedError(RC5Error, RuntimeError):
    def __init__(self):
        super().__init__("Cipher key table has been wiped; build a new cipher")

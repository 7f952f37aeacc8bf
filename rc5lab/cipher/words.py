"""Fixed-width word arithmetic for RC5.

One immutable WordSpec exists per supported width. A cipher configuration
picks its WordSpec once and every operation below is then total over the
w-bit domain: additions wrap mod 2**w and rotation amounts are reduced
mod w before use, so rotating by a full data word is always defined.

Research / education only. Do NOT use in production.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Dict, Tuple

from .exceptions import BlockLengthMismatch, UnsupportedWordSize


# Odd((e - 2) * 2**w) and Odd((phi - 1) * 2**w) from the RC5 paper.
_MAGIC: Dict[int, Tuple[int, int]] = {
    16: (0xB7E1, 0x9E37),
    32: (0xB7E15163, 0x9E3779B9),
    64: (0xB7E151628AED2A6B, 0x9E3779B97F4A7C15),
}

_STRUCT_CODE: Dict[int, str] = {16: "H", 32: "I", 64: "Q"}


@dataclass(frozen=True)
class WordSpec:
    """Arithmetic on unsigned words of a single bit width."""

    bits: int
    p: int = field(init=False)
    q: int = field(init=False)
    mask: int = field(init=False, repr=False)
    _word: struct.Struct = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.bits not in _MAGIC:
            raise UnsupportedWordSize(self.bits)
        p, q = _MAGIC[self.bits]
        code = _STRUCT_CODE[self.bits]
        # frozen dataclass: derived fields are set once here
        object.__setattr__(self, "p", p)
        object.__setattr__(self, "q", q)
        object.__setattr__(self, "mask", (1 << self.bits) - 1)
        object.__setattr__(self, "_word", struct.Struct("<" + code))

    @property
    def word_bytes(self) -> int:
        """Bytes per word (u in the RC5 paper)."""
        return self.bits // 8

    @property
    def block_bytes(self) -> int:
        return 2 * self.word_bytes

    def add(self, a: int, b: int) -> int:
        return (a + b) & self.mask

    def sub(self, a: int, b: int) -> int:
        return (a - b) & self.mask

    def xor(self, a: int, b: int) -> int:
        return a ^ b

    def rotl(self, x: int, amount: int) -> int:
        """Rotate-left x by (amount mod w) bits."""
        n = amount % self.bits
        if n == 0:
            return x
        return ((x << n) & self.mask) | (x >> (self.bits - n))

    def rotr(self, x: int, amount: int) -> int:
        """Rotate-right x by (amount mod w) bits."""
        n = amount % self.bits
        if n == 0:
            return x
        return (x >> n) | ((x << (self.bits - n)) & self.mask)

    def from_bytes(self, data: bytes) -> int:
        """Decode one little-endian word from exactly u bytes."""
        return self._word.unpack(data)[0]

    def to_bytes(self, word: int) -> bytes:
        return self._word.pack(word)

    def unpack_block(self, block: bytes) -> Tuple[int, int]:
        """Split a 2u-byte block into (A, B): A is the low half, B the high half."""
        if len(block) != self.block_bytes:
            raise BlockLengthMismatch(self.block_bytes, len(block))
        u = self.word_bytes
        return self.from_bytes(block[:u]), self.from_bytes(block[u:])

    def pack_block(self, a: int, b: int) -> bytes:
        return self.to_bytes(a) + self.to_bytes(b)


WORD16 = WordSpec(16)
WORD32 = WordSpec(32)
WORD64 = WordSpec(64)

_BY_BITS: Dict[int, WordSpec] = {16: WORD16, 32: WORD32, 64: WORD64}


def word_spec(bits: int) -> WordSpec:
    """Return the shared WordSpec for a width of 16, 32 or 64 bits."""
    try:
        return _BY_BITS[bits]
    except KeyError:
        raise UnsupportedWordSize(bits) from None

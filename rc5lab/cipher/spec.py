from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .words import WordSpec, word_spec


_NAME_RE = re.compile(r"^\s*RC5-(\d+)/(\d+)/(\d+)\s*$", re.IGNORECASE)


class RC5Spec(BaseModel):
    """An RC5-w/r/b configuration.

    w is the word size in bits, r the number of rounds and b the key length
    in bytes. Everything else (block size, table size, key word count) is
    derived from these three and fixed for the lifetime of the spec.
    """

    model_config = ConfigDict(frozen=True)

    word_bits: int = Field(default=32, description="16, 32 or 64")
    rounds: int = Field(default=12, ge=0, le=255)
    key_bytes: int = Field(default=16, ge=0, le=255)

    @field_validator("word_bits")
    @classmethod
    def _word_bits(cls, v: int) -> int:
        if v not in (16, 32, 64):
            raise ValueError("word_bits must be one of 16, 32, 64")
        return v

    @classmethod
    def from_name(cls, name: str) -> "RC5Spec":
        """Parse a named configuration such as ``RC5-32/12/16``."""
        m = _NAME_RE.match(name)
        if not m:
            raise ValueError(f"Not an RC5-w/r/b configuration name: {name!r}")
        w, r, b = (int(g) for g in m.groups())
        return cls(word_bits=w, rounds=r, key_bytes=b)

    @property
    def name(self) -> str:
        return f"RC5-{self.word_bits}/{self.rounds}/{self.key_bytes}"

    @property
    def word(self) -> WordSpec:
        return word_spec(self.word_bits)

    @property
    def word_bytes(self) -> int:
        return self.word_bits // 8

    @property
    def block_bytes(self) -> int:
        return 2 * self.word_bytes

    @property
    def table_size(self) -> int:
        """t = 2(r + 1) words in the expanded key table."""
        return 2 * (self.rounds + 1)

    @property
    def key_words(self) -> int:
        """c = ceil(b / u), with one zero word for an empty key."""
        return max(1, -(-self.key_bytes // self.word_bytes))

    def __str__(self) -> str:
        return self.name

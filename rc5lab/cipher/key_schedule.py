"""RC5 key expansion.

Turns b key bytes into the expanded key table S of t = 2(r + 1) words in
three steps: pack the key into words L, seed S from the magic constants
P and Q, then mix L into S for 3 * max(t, c) iterations.

Research / education only. Do NOT use in production.
"""

from __future__ import annotations

import logging
from typing import List

from .exceptions import KeyLengthMismatch
from .spec import RC5Spec
from .words import WordSpec

logger = logging.getLogger(__name__)


def key_to_words(key: bytes, word: WordSpec, count: int) -> List[int]:
    """Pack key bytes little-endian into `count` words (L), zero padded."""
    u = word.word_bytes
    words = [0] * count
    for i in range(len(key) - 1, -1, -1):
        # low byte of the rotated word is zero, so plain addition is enough
        words[i // u] = word.rotl(words[i // u], 8) + key[i]
    return words


def initial_table(word: WordSpec, size: int) -> List[int]:
    """S[0] = P, S[i] = S[i-1] + Q."""
    table = [0] * size
    table[0] = word.p
    for i in range(1, size):
        table[i] = word.add(table[i - 1], word.q)
    return table


def mix_key(table: List[int], key_words: List[int], word: WordSpec) -> List[int]:
    """Mix the key words into the table in place and return the table."""
    t, c = len(table), len(key_words)
    a = b = 0
    si = li = 0
    for _ in range(3 * max(t, c)):
        a = table[si] = word.rotl(word.add(word.add(table[si], a), b), 3)
        ab = word.add(a, b)
        b = key_words[li] = word.rotl(word.add(key_words[li], ab), ab)
        si = (si + 1) % t
        li = (li + 1) % c
    return table


def expand_key(key: bytes, spec: RC5Spec) -> List[int]:
    """Derive the expanded key table S for `spec` from exactly b key bytes.

    Raises KeyLengthMismatch before any work if len(key) != spec.key_bytes.
    The returned list is owned by the caller; the intermediate key words
    are zeroed before returning.
    """
    if len(key) != spec.key_bytes:
        raise KeyLengthMismatch(spec.key_bytes, len(key))

    word = spec.word
    key_words = key_to_words(key, word, spec.key_words)
    try:
        table = initial_table(word, spec.table_size)
        mix_key(table, key_words, word)
    finally:
        for i in range(len(key_words)):
            key_words[i] = 0

    logger.debug("Expanded %d-byte key into %d-word table for %s", len(key), len(table), spec.name)
    return table

"""RC5 block encryption and decryption.

A block is two little-endian words (A low, B high). Encryption whitens
with S[0], S[1] and then runs r rounds of XOR, data-dependent rotation and
key addition; decryption undoes the rounds in reverse order.

Research / education only. Do NOT use in production.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence, Tuple

from .exceptions import BlockLengthMismatch, TableSizeMismatch
from .spec import RC5Spec
from .words import WordSpec


class Direction(str, Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


def encrypt_words(a: int, b: int, table: Sequence[int], rounds: int, word: WordSpec) -> Tuple[int, int]:
    a = word.add(a, table[0])
    b = word.add(b, table[1])
    for i in range(1, rounds + 1):
        a = word.add(word.rotl(word.xor(a, b), b), table[2 * i])
        b = word.add(word.rotl(word.xor(b, a), a), table[2 * i + 1])
    return a, b


def decrypt_words(a: int, b: int, table: Sequence[int], rounds: int, word: WordSpec) -> Tuple[int, int]:
    for i in range(rounds, 0, -1):
        b = word.xor(word.rotr(word.sub(b, table[2 * i + 1]), a), a)
        a = word.xor(word.rotr(word.sub(a, table[2 * i]), b), b)
    b = word.sub(b, table[1])
    a = word.sub(a, table[0])
    return a, b


def _check(block: bytes, table: Sequence[int], spec: RC5Spec) -> None:
    if len(block) != spec.block_bytes:
        raise BlockLengthMismatch(spec.block_bytes, len(block))
    if len(table) != spec.table_size:
        raise TableSizeMismatch(spec.table_size, len(table))


def encrypt_block(block: bytes, table: Sequence[int], spec: RC5Spec) -> bytes:
    _check(block, table, spec)
    word = spec.word
    a, b = word.unpack_block(bytes(block))
    a, b = encrypt_words(a, b, table, spec.rounds, word)
    return word.pack_block(a, b)


def decrypt_block(block: bytes, table: Sequence[int], spec: RC5Spec) -> bytes:
    _check(block, table, spec)
    word = spec.word
    a, b = word.unpack_block(bytes(block))
    a, b = decrypt_words(a, b, table, spec.rounds, word)
    return word.pack_block(a, b)


def transform_block(block: bytes, table: Sequence[int], direction: Direction, spec: RC5Spec) -> bytes:
    """Encrypt or decrypt one 2u-byte block with an expanded key table.

    Decrypting with a table from the wrong key is not an error; it just
    yields the wrong plaintext.
    """
    if Direction(direction) is Direction.ENCRYPT:
        return encrypt_block(block, table, spec)
    return decrypt_block(block, table, spec)

import random

import pytest

from rc5lab.cipher import key_schedule
from rc5lab.cipher.exceptions import KeyLengthMismatch
from rc5lab.cipher.key_schedule import expand_key, initial_table, key_to_words, mix_key
from rc5lab.cipher.spec import RC5Spec
from rc5lab.cipher.words import WORD16, WORD32


def test_key_to_words_little_endian_with_padding():
    assert key_to_words(bytes([0, 1, 2, 3, 4]), WORD32, 2) == [0x03020100, 0x00000004]
    assert key_to_words(bytes([0xAA, 0xBB, 0xCC]), WORD16, 2) == [0xBBAA, 0x00CC]


def test_key_to_words_empty_key_is_single_zero_word():
    assert key_to_words(b"", WORD32, 1) == [0]


def test_initial_table_uses_p_and_q():
    table = initial_table(WORD32, 4)
    assert table[0] == 0xB7E15163
    assert table[1] == 0x5618CB1C
    for i in range(1, 4):
        assert table[i] == (table[i - 1] + 0x9E3779B9) & 0xFFFFFFFF


def test_mix_key_touches_every_slot():
    table = initial_table(WORD32, 26)
    before = list(table)
    mix_key(table, [0, 0, 0, 0], WORD32)
    assert len(table) == 26
    assert all(a != b for a, b in zip(before, table))


def test_expand_key_table_size(rc5_32_12_16):
    table = expand_key(bytes(16), rc5_32_12_16)
    assert len(table) == 26
    assert all(0 <= w <= 0xFFFFFFFF for w in table)


def test_expand_key_deterministic(rc5_32_12_16):
    key = bytes(range(16))
    assert expand_key(key, rc5_32_12_16) == expand_key(key, rc5_32_12_16)


def test_expand_key_accepts_bytearray_and_memoryview(rc5_32_12_16):
    key = bytes(range(16))
    expected = expand_key(key, rc5_32_12_16)
    assert expand_key(bytearray(key), rc5_32_12_16) == expected
    assert expand_key(memoryview(key), rc5_32_12_16) == expected


def test_expand_key_does_not_modify_caller_key(rc5_32_12_16):
    key = bytearray(range(16))
    expand_key(key, rc5_32_12_16)
    assert key == bytearray(range(16))


def test_key_sensitivity(rc5_32_12_16):
    rng = random.Random(7)
    keys = {bytes(rng.randrange(256) for _ in range(16)) for _ in range(50)}
    tables = {tuple(expand_key(k, rc5_32_12_16)) for k in keys}
    assert len(tables) == len(keys)


def test_single_bit_key_change_changes_table(rc5_32_12_16):
    key = bytes(16)
    flipped = bytes([1]) + bytes(15)
    assert expand_key(key, rc5_32_12_16) != expand_key(flipped, rc5_32_12_16)


@pytest.mark.parametrize("length", [0, 15, 17, 32])
def test_expand_key_rejects_wrong_length(rc5_32_12_16, length):
    with pytest.raises(KeyLengthMismatch) as exc_info:
        expand_key(bytes(length), rc5_32_12_16)
    assert exc_info.value.expected == 16
    assert exc_info.value.actual == length


def test_empty_key_produces_stable_table():
    spec = RC5Spec(word_bits=32, rounds=12, key_bytes=0)
    first = expand_key(b"", spec)
    assert len(first) == 26
    assert first == expand_key(b"", spec)
    # same as a 4-byte all-zero key, since both pack to one zero word
    assert first == expand_key(bytes(4), RC5Spec(word_bits=32, rounds=12, key_bytes=4))


def test_zero_rounds_table_has_two_words():
    spec = RC5Spec(word_bits=64, rounds=0, key_bytes=8)
    assert len(expand_key(bytes(8), spec)) == 2


@pytest.mark.parametrize("b", [0, 1, 2, 7, 64, 128, 255])
def test_expand_key_over_key_length_domain(b):
    spec = RC5Spec(word_bits=16, rounds=4, key_bytes=b)
    table = expand_key(bytes(range(b)), spec)
    assert len(table) == 10
    assert all(0 <= w <= 0xFFFF for w in table)


def test_expand_key_zeroes_key_words(monkeypatch, rc5_32_12_16):
    captured = []
    original = key_schedule.key_to_words

    def keep(key, word, count):
        words = original(key, word, count)
        captured.append(words)
        return words

    monkeypatch.setattr(key_schedule, "key_to_words", keep)
    table = expand_key(bytes(range(1, 17)), rc5_32_12_16)

    assert len(table) == 26
    assert len(captured) == 1
    assert captured[0] == [0, 0, 0, 0]


def test_expand_key_zeroes_key_words_on_error(monkeypatch, rc5_32_12_16):
    captured = []
    original = key_schedule.key_to_words

    def keep(key, word, count):
        words = original(key, word, count)
        captured.append(words)
        return words

    def boom(table, key_words, word):
        raise RuntimeError("mixing failed")

    monkeypatch.setattr(key_schedule, "key_to_words", keep)
    monkeypatch.setattr(key_schedule, "mix_key", boom)
    with pytest.raises(RuntimeError):
        expand_key(bytes(range(1, 17)), rc5_32_12_16)
    assert captured[0] == [0, 0, 0, 0]

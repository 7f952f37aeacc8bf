import pytest

from rc5lab.cipher.block import decrypt_block, encrypt_block
from rc5lab.cipher.builder import build_cipher
from rc5lab.cipher.key_schedule import expand_key
from rc5lab.cipher.spec import RC5Spec
from rc5lab.cipher.vectors import KNOWN_ANSWERS, vectors_by_config


@pytest.mark.parametrize(
    "vector", KNOWN_ANSWERS, ids=[f"{v.config}-{v.key.hex()[:8]}" for v in KNOWN_ANSWERS]
)
def test_known_answer(vector):
    spec = RC5Spec.from_name(vector.config)
    table = expand_key(vector.key, spec)
    assert encrypt_block(vector.plaintext, table, spec) == vector.ciphertext
    assert decrypt_block(vector.ciphertext, table, spec) == vector.plaintext


def test_paper_first_vector():
    cipher = build_cipher("RC5-32/12/16", bytes(16))
    assert cipher.encrypt_block(bytes(8)) == bytes([0x21, 0xA5, 0xDB, 0xEE, 0x15, 0x4B, 0x8F, 0x6D])


def test_paper_vectors_chain():
    paper = vectors_by_config()["RC5-32/12/16"]
    assert len(paper) == 5
    for prev, nxt in zip(paper, paper[1:]):
        assert prev.ciphertext == nxt.plaintext


def test_every_preset_has_vectors():
    assert set(vectors_by_config()) == {"RC5-16/16/8", "RC5-32/12/16", "RC5-32/20/16", "RC5-64/24/24"}

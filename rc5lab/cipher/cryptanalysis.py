from __future__ import annotations

import random
from typing import Dict

from .block import encrypt_block
from .key_schedule import expand_key
from .spec import RC5Spec


def _hamming_distance_bytes(a: bytes, b: bytes) -> int:
    if len(a) != len(b):
        raise ValueError("hamming distance length mismatch")
    dist = 0
    for x, y in zip(a, b):
        dist += (x ^ y).bit_count()
    return dist


def _flip_bit(data: bytes, bit_index: int) -> bytes:
    byte_i = bit_index // 8
    bit_i = bit_index % 8
    if byte_i < 0 or byte_i >= len(data):
        raise IndexError("bit_index out of range")
    out = bytearray(data)
    out[byte_i] ^= 1 << bit_i
    return bytes(out)


def _rand_bytes(rng: random.Random, n: int) -> bytes:
    return bytes(rng.randrange(0, 256) for _ in range(n))


def encrypt_once(spec: RC5Spec, key: bytes, plaintext: bytes) -> bytes:
    """Expand `key` and encrypt a single block (one-shot helper for analysis)."""
    return encrypt_block(plaintext, expand_key(key, spec), spec)


def avalanche_plaintext(spec: RC5Spec, *, trials: int = 200, seed: int = 1337) -> Dict[str, float]:
    rng = random.Random(seed)
    total_bits = spec.block_bytes * 8
    total_frac = 0.0
    for _ in range(trials):
        table = expand_key(_rand_bytes(rng, spec.key_bytes), spec)
        pt = _rand_bytes(rng, spec.block_bytes)
        ct = encrypt_block(pt, table, spec)
        ct2 = encrypt_block(_flip_bit(pt, rng.randrange(total_bits)), table, spec)
        total_frac += _hamming_distance_bytes(ct, ct2) / total_bits
    return {"mean": total_frac / trials if trials else 0.0}


def avalanche_key(spec: RC5Spec, *, trials: int = 200, seed: int = 1337) -> Dict[str, float]:
    if spec.key_bytes == 0:
        # nothing to flip
        return {"mean": 0.0}
    rng = random.Random(seed + 1)
    total_bits = spec.block_bytes * 8
    key_bits = spec.key_bytes * 8
    total_frac = 0.0
    for _ in range(trials):
        key = _rand_bytes(rng, spec.key_bytes)
        pt = _rand_bytes(rng, spec.block_bytes)
        ct = encrypt_once(spec, key, pt)
        ct2 = encrypt_once(spec, _flip_bit(key, rng.randrange(key_bits)), pt)
        total_frac += _hamming_distance_bytes(ct, ct2) / total_bits
    return {"mean": total_frac / trials if trials else 0.0}


def score_avalanche(mean: float) -> float:
    # 1.0 is perfect (0.5), 0.0 is terrible (0 or 1)
    return max(0.0, 1.0 - abs(mean - 0.5) / 0.5)


def evaluate_cipher(spec: RC5Spec, *, trials: int = 200, seed: int = 1337) -> Dict[str, object]:
    pt = avalanche_plaintext(spec, trials=trials, seed=seed)
    kk = avalanche_key(spec, trials=trials, seed=seed)
    return {
        "config": spec.name,
        "block_size_bits": spec.block_bytes * 8,
        "key_size_bits": spec.key_bytes * 8,
        "rounds": spec.rounds,
        "plaintext_avalanche": pt,
        "key_avalanche": kk,
        "scores": {
            "plaintext_avalanche": score_avalanche(pt["mean"]),
            "key_avalanche": score_avalanche(kk["mean"]),
        },
    }

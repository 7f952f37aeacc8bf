"""Strict Avalanche Criterion (SAC) calculator with per-bit analysis.

Measures whether flipping each individual input bit causes each output bit
to flip with probability ~0.5. Flip counts are accumulated in a numpy
matrix of shape (input bits, output bits).

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from rc5lab.cipher.block import encrypt_block
from rc5lab.cipher.cryptanalysis import _flip_bit, _rand_bytes
from rc5lab.cipher.key_schedule import expand_key
from rc5lab.cipher.spec import RC5Spec


@dataclass
class SACResult:
    """Strict Avalanche Criterion measurement for one input type."""
    config: str
    input_type: str             # "plaintext" or "key"
    num_trials: int
    num_input_bits: int
    num_output_bits: int

    # Per-input-bit mean flip fraction (len = num_input_bits)
    per_input_bit_mean: List[float] = field(default_factory=list)

    global_mean: float = 0.0    # ~0.5 ideal
    global_std: float = 0.0     # std of per-bit means
    min_bit_prob: float = 0.0
    max_bit_prob: float = 0.0
    sac_deviation: float = 0.0  # mean |p - 0.5| over the full matrix

    @property
    def passes_sac(self) -> bool:
        """Heuristic: SAC deviation < 0.05 and min_bit_prob > 0.35."""
        return self.sac_deviation < 0.05 and self.min_bit_prob > 0.35

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["passes_sac"] = self.passes_sac
        return d

    def summary(self) -> str:
        status = "PASS" if self.passes_sac else "FAIL"
        return (
            f"[{status}] SAC({self.input_type}): "
            f"mean={self.global_mean:.4f}, std={self.global_std:.4f}, "
            f"deviation={self.sac_deviation:.4f}, "
            f"min={self.min_bit_prob:.4f}, max={self.max_bit_prob:.4f}"
        )


def _bits(data: bytes) -> np.ndarray:
    return np.unpackbits(np.frombuffer(data, dtype=np.uint8), bitorder="little")


def compute_sac(
    spec: RC5Spec,
    *,
    input_type: str = "plaintext",
    trials: int = 200,
    seed: int = 1337,
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> SACResult:
    """Compute Strict Avalanche Criterion with per-input-bit analysis.

    For each trial a random key and plaintext are drawn; every input bit is
    flipped in turn and the output difference is added to the flip matrix.

    Args:
        spec: RC5 configuration to analyse.
        input_type: "plaintext" or "key", which input to perturb.
        trials: Number of random (key, plaintext) pairs.
        seed: Random seed for reproducibility.
        progress_callback: Optional callback(current_trial, total_trials).

    Returns:
        SACResult with per-bit and aggregate statistics.
    """
    if input_type == "plaintext":
        num_input_bits = spec.block_bytes * 8
    elif input_type == "key":
        num_input_bits = spec.key_bytes * 8
    else:
        raise ValueError(f"input_type must be 'plaintext' or 'key', got '{input_type}'")

    num_output_bits = spec.block_bytes * 8
    rng = random.Random(seed)
    flips = np.zeros((num_input_bits, num_output_bits), dtype=np.int64)

    for trial in range(trials):
        if progress_callback:
            progress_callback(trial, trials)

        key = _rand_bytes(rng, spec.key_bytes)
        pt = _rand_bytes(rng, spec.block_bytes)
        table = expand_key(key, spec)
        base = _bits(encrypt_block(pt, table, spec))

        for bit_i in range(num_input_bits):
            if input_type == "plaintext":
                ct2 = encrypt_block(_flip_bit(pt, bit_i), table, spec)
            else:
                ct2 = encrypt_block(pt, expand_key(_flip_bit(key, bit_i), spec), spec)
            flips[bit_i] += base ^ _bits(ct2)

    if num_input_bits == 0 or trials == 0:
        return SACResult(
            config=spec.name,
            input_type=input_type,
            num_trials=trials,
            num_input_bits=num_input_bits,
            num_output_bits=num_output_bits,
            sac_deviation=0.5,
        )

    probs = flips / float(trials)
    per_bit = probs.mean(axis=1)

    return SACResult(
        config=spec.name,
        input_type=input_type,
        num_trials=trials,
        num_input_bits=num_input_bits,
        num_output_bits=num_output_bits,
        per_input_bit_mean=[round(float(p), 6) for p in per_bit],
        global_mean=round(float(per_bit.mean()), 6),
        global_std=round(float(per_bit.std(ddof=1)) if per_bit.size > 1 else 0.0, 6),
        min_bit_prob=round(float(per_bit.min()), 6),
        max_bit_prob=round(float(per_bit.max()), 6),
        sac_deviation=round(float(np.abs(probs - 0.5).mean()), 6),
    )

"""Algebraic unit testing: roundtrip verification P = D(E(P, K), K).

Generates randomized (key, plaintext) pairs for an RC5 configuration and
verifies that decryption with the same expanded key table inverts
encryption for every vector. `run_key_length_sweep` repeats this across
key lengths from 0 to 255 bytes.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, Iterable, List, Optional

from rc5lab.cipher.block import decrypt_block, encrypt_block
from rc5lab.cipher.cryptanalysis import _rand_bytes
from rc5lab.cipher.key_schedule import expand_key
from rc5lab.cipher.registry import ConfigRegistry
from rc5lab.cipher.spec import RC5Spec

logger = logging.getLogger(__name__)

DEFAULT_SWEEP_KEY_LENGTHS = (0, 1, 2, 3, 5, 7, 8, 16, 24, 32, 64, 128, 200, 255)


@dataclass
class RoundtripFailure:
    """Details of a single failed roundtrip test vector."""
    vector_index: int
    plaintext_hex: str
    key_hex: str
    ciphertext_hex: str
    decrypted_hex: str


@dataclass
class RoundtripResult:
    """Aggregate result of roundtrip testing for one configuration."""
    config: str
    word_bits: int
    rounds: int
    key_bytes: int
    total_vectors: int
    passed: int
    failed: int
    failures: List[RoundtripFailure] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    seed: int = 1337

    @property
    def success_rate(self) -> float:
        return self.passed / self.total_vectors if self.total_vectors > 0 else 0.0

    @property
    def is_perfect(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def summary(self) -> str:
        status = "PASS" if self.is_perfect else "FAIL"
        return (
            f"[{status}] {self.config}: "
            f"{self.passed}/{self.total_vectors} vectors passed "
            f"({self.elapsed_seconds:.2f}s)"
        )


def run_roundtrip_tests(
    spec: RC5Spec,
    *,
    num_vectors: int = 1000,
    seed: int = 1337,
    max_failures_recorded: int = 10,
) -> RoundtripResult:
    """Run roundtrip verification P = D(E(P, K), K) across many test vectors.

    Args:
        spec: RC5 configuration to test.
        num_vectors: Number of random (plaintext, key) pairs to test.
        seed: Random seed for deterministic reproducibility.
        max_failures_recorded: Maximum number of failure details to keep.

    Returns:
        RoundtripResult with pass/fail counts and failure details.
    """
    rng = random.Random(seed)
    passed = 0
    failed = 0
    failures: List[RoundtripFailure] = []

    start = time.perf_counter()

    for i in range(num_vectors):
        key = _rand_bytes(rng, spec.key_bytes)
        pt = _rand_bytes(rng, spec.block_bytes)

        table = expand_key(key, spec)
        ct = encrypt_block(pt, table, spec)
        pt2 = decrypt_block(ct, table, spec)

        if pt == pt2:
            passed += 1
        else:
            failed += 1
            if len(failures) < max_failures_recorded:
                failures.append(RoundtripFailure(
                    vector_index=i,
                    plaintext_hex=pt.hex(),
                    key_hex=key.hex(),
                    ciphertext_hex=ct.hex(),
                    decrypted_hex=pt2.hex(),
                ))

    elapsed = time.perf_counter() - start
    if failed:
        logger.warning("%s: %d/%d roundtrip vectors failed", spec.name, failed, num_vectors)

    return RoundtripResult(
        config=spec.name,
        word_bits=spec.word_bits,
        rounds=spec.rounds,
        key_bytes=spec.key_bytes,
        total_vectors=num_vectors,
        passed=passed,
        failed=failed,
        failures=failures,
        elapsed_seconds=round(elapsed, 4),
        seed=seed,
    )


def run_key_length_sweep(
    word_bits: int = 32,
    rounds: int = 12,
    *,
    key_lengths: Iterable[int] = DEFAULT_SWEEP_KEY_LENGTHS,
    num_vectors: int = 50,
    seed: int = 1337,
) -> List[RoundtripResult]:
    """Roundtrip-test one word size and round count across many key lengths."""
    results: List[RoundtripResult] = []
    for b in key_lengths:
        spec = RC5Spec(word_bits=word_bits, rounds=rounds, key_bytes=b)
        results.append(run_roundtrip_tests(spec, num_vectors=num_vectors, seed=seed + b))
    return results


def run_all_configs(
    *,
    num_vectors: int = 1000,
    seed: int = 1337,
    registry: Optional[ConfigRegistry] = None,
    progress_callback: Optional[Callable[[str, int, int], None]] = None,
) -> List[RoundtripResult]:
    """Run roundtrip tests for every registered configuration.

    Args:
        num_vectors: Number of test vectors per configuration.
        seed: Random seed for reproducibility.
        registry: Optional configuration registry; uses the built-in presets if not provided.
        progress_callback: Optional callback(config_name, current_index, total).

    Returns:
        List of RoundtripResult in registry order.
    """
    reg = registry or ConfigRegistry()
    specs = reg.list()
    results: List[RoundtripResult] = []

    for idx, spec in enumerate(specs):
        if progress_callback:
            progress_callback(spec.name, idx, len(specs))
        logger.info("Roundtrip %d/%d: %s", idx + 1, len(specs), spec.name)
        results.append(run_roundtrip_tests(spec, num_vectors=num_vectors, seed=seed))

    return results

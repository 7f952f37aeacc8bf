from __future__ import annotations

import logging
from typing import Callable, Optional

from rc5lab.cipher.cryptanalysis import evaluate_cipher
from rc5lab.cipher.spec import RC5Spec

from .avalanche import compute_sac
from .kat import run_known_answers
from .report import EvaluationReport
from .roundtrip import run_key_length_sweep, run_roundtrip_tests

logger = logging.getLogger(__name__)


def evaluate_full(
    spec: RC5Spec,
    *,
    num_vectors: int = 1000,
    sac_trials: int = 200,
    seed: int = 1337,
    sweep_keys: bool = False,
    progress_callback: Optional[Callable[[str, int, int], None]] = None,
) -> EvaluationReport:
    """Run known answers, roundtrips, avalanche and SAC for one configuration.

    Args:
        spec: RC5 configuration to evaluate.
        num_vectors: Random roundtrip vectors to check.
        sac_trials: Trials for avalanche and SAC analysis (0 skips both).
        seed: Random seed for reproducibility.
        sweep_keys: Also roundtrip-test key lengths 0..255 for this w and r.
        progress_callback: Optional callback(stage, current, total).

    Returns:
        EvaluationReport for the configuration.
    """
    stages = ["known answers", "roundtrip", "avalanche", "SAC (plaintext)", "SAC (key)"]

    def _progress(i: int) -> None:
        logger.info("%s: %s (%d/%d)", spec.name, stages[i], i + 1, len(stages))
        if progress_callback:
            progress_callback(stages[i], i, len(stages))

    report = EvaluationReport()

    _progress(0)
    report.kat_results = run_known_answers(config=spec.name)

    _progress(1)
    report.roundtrip_results = [run_roundtrip_tests(spec, num_vectors=num_vectors, seed=seed)]
    if sweep_keys:
        report.roundtrip_results.extend(
            run_key_length_sweep(spec.word_bits, spec.rounds, seed=seed)
        )

    if sac_trials > 0:
        _progress(2)
        report.avalanche = evaluate_cipher(spec, trials=sac_trials, seed=seed)
        _progress(3)
        report.sac_results.append(compute_sac(spec, input_type="plaintext", trials=sac_trials, seed=seed))
        if spec.key_bytes > 0:
            _progress(4)
            report.sac_results.append(compute_sac(spec, input_type="key", trials=sac_trials, seed=seed))

    return report

"""Deterministic evaluation of RC5 configurations.

Provides known-answer checks, algebraic roundtrip verification and
statistical diffusion analysis (avalanche, SAC).

Research / education only. Do NOT use in production.
"""

from .roundtrip import (
    RoundtripResult,
    RoundtripFailure,
    run_roundtrip_tests,
    run_key_length_sweep,
    run_all_configs,
)
from .kat import KATResult, check_vector, run_known_answers
from .avalanche import SACResult, compute_sac
from .report import EvaluationReport
from .evaluate import evaluate_full

__all__ = [
    "RoundtripResult",
    "RoundtripFailure",
    "run_roundtrip_tests",
    "run_key_length_sweep",
    "run_all_configs",
    "KATResult",
    "check_vector",
    "run_known_answers",
    "SACResult",
    "compute_sac",
    "EvaluationReport",
    "evaluate_full",
]

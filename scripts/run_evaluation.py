"""CLI entry point for RC5 evaluation and one-off block transforms.

Usage:
    python scripts/run_evaluation.py evaluate                              # default config
    python scripts/run_evaluation.py evaluate --config RC5-64/24/24 --sweep-keys
    python scripts/run_evaluation.py evaluate --all --sac-trials 0         # every preset, no avalanche or SAC
    python scripts/run_evaluation.py encrypt --key 00..00 --block 0000000000000000
    python scripts/run_evaluation.py decrypt --config RC5-16/16/8 --key ... --block ...

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from rc5lab.config import load_settings
from rc5lab.cipher.block import Direction
from rc5lab.cipher.builder import build_cipher
from rc5lab.cipher.exceptions import RC5Error
from rc5lab.cipher.registry import ConfigRegistry
from rc5lab.cipher.spec import RC5Spec
from rc5lab.evaluation.evaluate import evaluate_full
from rc5lab.utils.repro import make_run_dir, set_global_seed, write_json

logger = logging.getLogger("rc5lab.cli")


def _cli_progress(message: str, current: int, total: int) -> None:
    """Print progress to stderr."""
    pct = (current / total * 100) if total > 0 else 0
    print(f"  [{current + 1}/{total}] ({pct:.0f}%) {message}", file=sys.stderr)


def _resolve(name: str, registry: ConfigRegistry) -> RC5Spec:
    return registry.get(name) if registry.exists(name) else RC5Spec.from_name(name)


def _cmd_evaluate(args: argparse.Namespace, registry: ConfigRegistry) -> int:
    settings = load_settings()
    set_global_seed(args.seed)

    specs = registry.list() if args.all else [_resolve(args.config, registry)]
    exit_code = 0

    for spec in specs:
        print(f"Evaluating {spec.name} "
              f"(block {spec.block_bytes} bytes, table {spec.table_size} words)")
        report = evaluate_full(
            spec,
            num_vectors=args.roundtrip_vectors,
            sac_trials=args.sac_trials,
            seed=args.seed,
            sweep_keys=args.sweep_keys,
            progress_callback=_cli_progress,
        )
        print(report.to_summary())
        print()

        if not report.all_pass:
            exit_code = 1

        if args.save:
            run_dir = make_run_dir(Path(settings.project_root) / settings.runs_dir, spec.name)
            write_json(run_dir / "report.json", report.to_dict())
            print(f"Report saved to: {run_dir / 'report.json'}")

    return exit_code


def _cmd_transform(args: argparse.Namespace, registry: ConfigRegistry) -> int:
    spec = _resolve(args.config, registry)
    try:
        key = bytes.fromhex(args.key)
        block = bytes.fromhex(args.block)
    except ValueError as exc:
        print(f"error: invalid hex input: {exc}", file=sys.stderr)
        return 2

    with build_cipher(spec, key) as cipher:
        out = cipher.transform_block(block, Direction(args.command))
    print(out.hex())
    return 0


def main() -> None:
    settings = load_settings()

    parser = argparse.ArgumentParser(
        description="RC5 evaluation runner and block transform tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python scripts/run_evaluation.py evaluate --config RC5-32/12/16\n"
            "  python scripts/run_evaluation.py encrypt --key 000102030405060708090a0b0c0d0e0f "
            "--block 0001020304050607\n"
        ),
    )
    parser.add_argument(
        "--log-level", type=str, default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_eval = sub.add_parser("evaluate", help="Run known answers, roundtrips and diffusion analysis")
    p_eval.add_argument(
        "--config", type=str, default=settings.default_config,
        help=f"RC5-w/r/b configuration (default: {settings.default_config})",
    )
    p_eval.add_argument("--all", action="store_true", help="Evaluate every registered preset")
    p_eval.add_argument(
        "--roundtrip-vectors", type=int, default=settings.roundtrip_vectors,
        help=f"Random roundtrip vectors (default: {settings.roundtrip_vectors})",
    )
    p_eval.add_argument(
        "--sac-trials", type=int, default=settings.sac_trials,
        help=f"Avalanche and SAC trials, 0 to skip both (default: {settings.sac_trials})",
    )
    p_eval.add_argument(
        "--seed", type=int, default=settings.global_seed,
        help=f"Random seed (default: {settings.global_seed})",
    )
    p_eval.add_argument("--sweep-keys", action="store_true", help="Also roundtrip key lengths 0..255")
    p_eval.add_argument("--save", action="store_true", help="Write report.json under the runs directory")

    for direction in Direction:
        p = sub.add_parser(direction.value, help=f"{direction.value.capitalize()} one block")
        p.add_argument("--config", type=str, default=settings.default_config)
        p.add_argument("--key", type=str, required=True, help="Key as hex (exactly b bytes)")
        p.add_argument("--block", type=str, required=True, help="Block as hex (exactly 2u bytes)")

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    registry = ConfigRegistry()
    try:
        if args.command == "evaluate":
            code = _cmd_evaluate(args, registry)
        else:
            code = _cmd_transform(args, registry)
    except (RC5Error, ValueError) as exc:
        logger.error("%s", exc)
        code = 2
    sys.exit(code)


if __name__ == "__main__":
    main()

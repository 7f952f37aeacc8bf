"""Structured evaluation report builder.

Aggregates results from known-answer checks, roundtrip tests and SAC
analysis into a single serializable report for export and UI display.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .avalanche import SACResult
from .kat import KATResult
from .roundtrip import RoundtripResult


@dataclass
class EvaluationReport:
    """Complete evaluation report aggregating all analysis results."""
    timestamp: str = ""
    kat_results: List[KATResult] = field(default_factory=list)
    roundtrip_results: List[RoundtripResult] = field(default_factory=list)
    sac_results: List[SACResult] = field(default_factory=list)
    avalanche: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now(timezone.utc).isoformat()

    @property
    def all_pass(self) -> bool:
        return (
            all(k.passed for k in self.kat_results)
            and all(r.is_perfect for r in self.roundtrip_results)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize full report for JSON export."""
        return {
            "timestamp": self.timestamp,
            "kat": [k.to_dict() for k in self.kat_results],
            "roundtrip": [r.to_dict() for r in self.roundtrip_results],
            "sac": [s.to_dict() for s in self.sac_results],
            "avalanche": self.avalanche,
            "summary": {
                "kat_all_pass": all(k.passed for k in self.kat_results),
                "roundtrip_all_pass": all(r.is_perfect for r in self.roundtrip_results),
                "sac_all_pass": all(s.passes_sac for s in self.sac_results),
                "failing_configs": self.failing_configs(),
                "weak_sac_configs": self.weak_sac_configs(),
            },
        }

    def to_summary(self) -> str:
        """Human-readable summary for CLI and Streamlit display."""
        lines = [f"Evaluation Report - {self.timestamp}", "=" * 50]

        if self.kat_results:
            kat_pass = sum(1 for k in self.kat_results if k.passed)
            lines.append(f"\nKnown-answer vectors: {kat_pass}/{len(self.kat_results)} pass")
            for k in self.kat_results:
                lines.append(f"  {k.summary()}")

        if self.roundtrip_results:
            rt_pass = sum(1 for r in self.roundtrip_results if r.is_perfect)
            lines.append(f"\nRoundtrip Tests: {rt_pass}/{len(self.roundtrip_results)} configurations pass")
            for r in self.roundtrip_results:
                lines.append(f"  {r.summary()}")

        if self.sac_results:
            sac_pass = sum(1 for s in self.sac_results if s.passes_sac)
            lines.append(f"\nSAC Analysis: {sac_pass}/{len(self.sac_results)} pass")
            for s in self.sac_results:
                lines.append(f"  {s.summary()}")

        if self.avalanche:
            pt = self.avalanche["plaintext_avalanche"]["mean"]
            kk = self.avalanche["key_avalanche"]["mean"]
            lines.append(f"\nAvalanche: plaintext={pt:.4f}, key={kk:.4f}")

        return "\n".join(lines)

    def failing_configs(self) -> List[str]:
        """Return configuration names with KAT or roundtrip failures."""
        failing = {k.config for k in self.kat_results if not k.passed}
        failing.update(r.config for r in self.roundtrip_results if not r.is_perfect)
        return sorted(failing)

    def weak_sac_configs(self) -> List[str]:
        return sorted({s.config for s in self.sac_results if not s.passes_sac})

from __future__ import annotations

from typing import Dict, List

from .spec import RC5Spec


def builtins() -> Dict[str, RC5Spec]:
    presets = [
        RC5Spec(word_bits=16, rounds=16, key_bytes=8),
        RC5Spec(word_bits=32, rounds=12, key_bytes=16),
        RC5Spec(word_bits=32, rounds=20, key_bytes=16),
        RC5Spec(word_bits=64, rounds=24, key_bytes=24),
    ]
    return {s.name: s for s in presets}


class ConfigRegistry:
    """Named RC5 configurations (RC5-w/r/b)."""

    def __init__(self):
        self._configs: Dict[str, RC5Spec] = builtins()

    def get(self, name: str) -> RC5Spec:
        key = name.strip().upper()
        if key not in self._configs:
            raise KeyError(f"Unknown configuration: {name}")
        return self._configs[key]

    def list(self) -> List[RC5Spec]:
        return sorted(self._configs.values(), key=lambda s: (s.word_bits, s.rounds, s.key_bytes))

    def names(self) -> List[str]:
        return [s.name for s in self.list()]

    def exists(self, name: str) -> bool:
        return name.strip().upper() in self._configs

    def register(self, spec: RC5Spec) -> None:
        if spec.name in self._configs:
            raise ValueError(f"Configuration already registered: {spec.name}")
        self._configs[spec.name] = spec

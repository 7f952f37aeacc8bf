"""Published RC5 known-answer vectors.

RC5-32/12/16 vectors come from the appendix of Rivest's RC5 paper; each
ciphertext is the plaintext of the next vector. The other widths come from
the RC5/RC6 test vector draft (Krovetz).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class KnownAnswer:
    config: str
    key: bytes
    plaintext: bytes
    ciphertext: bytes
    source: str = ""


def _h(s: str) -> bytes:
    return bytes.fromhex(s.replace(" ", ""))


_PAPER = "RC5 paper appendix"
_DRAFT = "draft-krovetz-rc6-rc5-vectors"

KNOWN_ANSWERS: List[KnownAnswer] = [
    KnownAnswer(
        "RC5-32/12/16",
        _h("00000000000000000000000000000000"),
        _h("00000000 00000000"),
        _h("21A5DBEE 154B8F6D"),
        _PAPER,
    ),
    KnownAnswer(
        "RC5-32/12/16",
        _h("915F4619BE41B2516355A50110A9CE91"),
        _h("21A5DBEE 154B8F6D"),
        _h("F7C013AC 5B2B8952"),
        _PAPER,
    ),
    KnownAnswer(
        "RC5-32/12/16",
        _h("783348E75AEB0F2FD7B169BB8DC16787"),
        _h("F7C013AC 5B2B8952"),
        _h("2F42B3B7 0369FC92"),
        _PAPER,
    ),
    KnownAnswer(
        "RC5-32/12/16",
        _h("DC49DB1375A5584F6485B413B5F12BAF"),
        _h("2F42B3B7 0369FC92"),
        _h("65C178B2 84D197CC"),
        _PAPER,
    ),
    KnownAnswer(
        "RC5-32/12/16",
        _h("5269F149D41BA0152497574D7F153125"),
        _h("65C178B2 84D197CC"),
        _h("EB44E415 DA319824"),
        _PAPER,
    ),
    KnownAnswer(
        "RC5-16/16/8",
        _h("0001020304050607"),
        _h("00010203"),
        _h("23A8D72E"),
        _DRAFT,
    ),
    KnownAnswer(
        "RC5-32/20/16",
        _h("000102030405060708090A0B0C0D0E0F"),
        _h("00010203 04050607"),
        _h("2A0EDC0E 9431FF73"),
        _DRAFT,
    ),
    KnownAnswer(
        "RC5-64/24/24",
        _h("000102030405060708090A0B0C0D0E0F1011121314151617"),
        _h("0001020304050607 08090A0B0C0D0E0F"),
        _h("A46772820EDBCE02 35ABEA32AE7178DA"),
        _DRAFT,
    ),
]


def vectors_by_config() -> Dict[str, List[KnownAnswer]]:
    out: Dict[str, List[KnownAnswer]] = {}
    for v in KNOWN_ANSWERS:
        out.setdefault(v.config, []).append(v)
    return out

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from . import block as _block
from .block import Direction
from .exceptions import CipherWipedError
from .key_schedule import expand_key
from .registry import ConfigRegistry
from .spec import RC5Spec

logger = logging.getLogger(__name__)


class RC5Cipher:
    """RC5 keyed once at construction.

    The expanded key table is built from `key` and held for the lifetime of
    the instance; the key itself is not retained. Block transforms only read
    the table, so one instance can be shared between threads. `wipe()`
    zeroes the table and is also called on context-manager exit and when
    the instance is collected.
    """

    def __init__(self, spec: RC5Spec, key: bytes):
        self.spec = spec
        self._table: List[int] = expand_key(key, spec)
        self._wiped = False

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def block_size(self) -> int:
        return self.spec.block_bytes

    @property
    def key_size(self) -> int:
        return self.spec.key_bytes

    @property
    def wiped(self) -> bool:
        return self._wiped

    @property
    def table(self) -> Tuple[int, ...]:
        """Read-only copy of the expanded key table."""
        return tuple(self._live_table())

    def _live_table(self) -> List[int]:
        if self._wiped:
            raise CipherWipedError()
        return self._table

    def encrypt_block(self, plaintext_block: bytes) -> bytes:
        return _block.encrypt_block(plaintext_block, self._live_table(), self.spec)

    def decrypt_block(self, ciphertext_block: bytes) -> bytes:
        return _block.decrypt_block(ciphertext_block, self._live_table(), self.spec)

    def transform_block(self, block: bytes, direction: Direction) -> bytes:
        return _block.transform_block(block, self._live_table(), direction, self.spec)

    def wipe(self) -> None:
        if self._wiped:
            return
        for i in range(len(self._table)):
            self._table[i] = 0
        self._wiped = True
        logger.debug("Wiped %s key table", self.spec.name)

    def __enter__(self) -> "RC5Cipher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.wipe()

    def __del__(self):
        # __init__ may have failed before the table existed
        if getattr(self, "_table", None) is not None and not getattr(self, "_wiped", True):
            self.wipe()

    def __repr__(self) -> str:
        state = "wiped" if self._wiped else "keyed"
        return f"RC5Cipher({self.spec.name}, {state})"


def build_cipher(spec: RC5Spec | str, key: bytes, *, registry: Optional[ConfigRegistry] = None) -> RC5Cipher:
    """Build a keyed cipher from a spec or a configuration name.

    Names are looked up in the registry first and otherwise parsed as
    ``RC5-w/r/b``.
    """
    if isinstance(spec, str):
        reg = registry or ConfigRegistry()
        spec = reg.get(spec) if reg.exists(spec) else RC5Spec.from_name(spec)
    return RC5Cipher(spec, key)

"""RC5 core: word arithmetic, key schedule and block transform."""

from .builder import RC5Cipher, build_cipher
from .block import Direction, transform_block
from .key_schedule import expand_key
from .spec import RC5Spec
from .words import WORD16, WORD32, WORD64, WordSpec, word_spec

__all__ = [
    "RC5Cipher",
    "build_cipher",
    "Direction",
    "transform_block",
    "expand_key",
    "RC5Spec",
    "WordSpec",
    "WORD16",
    "WORD32",
    "WORD64",
    "word_spec",
]

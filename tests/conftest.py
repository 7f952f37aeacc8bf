import sys
from pathlib import Path

import pytest

# Ensure project root is on path when running without an install
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from rc5lab.cipher.spec import RC5Spec


@pytest.fixture
def rc5_32_12_16() -> RC5Spec:
    return RC5Spec(word_bits=32, rounds=12, key_bytes=16)

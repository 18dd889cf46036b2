import pathlib
import sys

import numpy as np
import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def random_bytes():
    """재현 가능한 2048 바이트 난수 (시드 고정)."""
    rng = np.random.default_rng(42)
    return rng.integers(0, 256, size=2048, dtype=np.uint8).tobytes()

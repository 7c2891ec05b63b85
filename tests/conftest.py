import logging
import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


# Seeds reused across generator tests
SEEDS = [123, 123456, 978654, 7489153]


@pytest.fixture
def constant():
    """Factory for Randomness instances whose generator always returns the same draw."""
    from randomness import Randomness

    def make(value: float) -> Randomness:
        return Randomness(lambda: value)

    return make


@pytest.fixture
def restore_root_logging():
    """The CLI reconfigures root logging; put the previous handlers back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)

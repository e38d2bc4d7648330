from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Source checkouts run the tests without installing the package.
PACKAGE_ROOT = Path(__file__).resolve().parents[1] / "python"
try:
    import flowassign  # noqa: F401
except ImportError:
    sys.path.insert(0, str(PACKAGE_ROOT))


@pytest.fixture
def classic_edges():
    return [(0, 1, 3), (0, 2, 2), (1, 2, 5), (1, 3, 2), (2, 3, 3)]


@pytest.fixture
def opposite_edges():
    # 1 -> 2 and 2 -> 1 both exist; flow only moves from 1 to 2.
    return [(0, 1, 5), (1, 2, 5), (2, 1, 5), (2, 3, 5)]

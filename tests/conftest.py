import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Ensure the project sources are importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def _make_items(count: int) -> list[dict]:
    return [{"name": f"Item{index}", "id": index} for index in range(1, count + 1)]


@pytest.fixture
def items():
    """Twenty-five records named Item1 .. Item25."""
    return _make_items(25)


@pytest.fixture
def make_items():
    return _make_items

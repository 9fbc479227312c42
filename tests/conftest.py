from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (ROOT, SRC):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from tests.shared.payloads import make_exceptional_payload, make_standard_payload  # noqa: E402


@pytest.fixture
def successful_payload() -> dict[str, object]:
    return make_standard_payload()


@pytest.fixture
def exceptional_payload() -> dict[str, object]:
    return make_exceptional_payload()

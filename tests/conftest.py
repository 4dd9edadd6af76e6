from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable

import pytest

_FIXTURES_DIR = Path(__file__).resolve().parent
if str(_FIXTURES_DIR) not in sys.path:
    sys.path.append(str(_FIXTURES_DIR))

from fixtures import MomentCase, moment_cases


@pytest.fixture(scope="session")
def moment_data() -> Iterable[MomentCase]:
    """Samples with exactly known mean and sum of squared deviations."""

    return tuple(moment_cases())

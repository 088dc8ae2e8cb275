import os
import sys
from datetime import datetime, timedelta

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.trend.series import EstimateSnapshot

START = datetime(2026, 1, 1, 9, 0, 0)


def make_series(values, step_days=1.0, start=START):
    """Snapshots spaced ``step_days`` apart, in the order given."""
    return [
        EstimateSnapshot(timestamp=start + timedelta(days=step_days * i), value=v)
        for i, v in enumerate(values)
    ]


@pytest.fixture
def series():
    return make_series


@pytest.fixture
def linear_series():
    # 10 fp per day, perfectly linear
    return make_series([100.0 + 10.0 * i for i in range(6)])


@pytest.fixture
def start():
    return START

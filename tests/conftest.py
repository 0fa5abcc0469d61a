"""
Pytest configuration file.

This file ensures that the project root is in the Python path
so that test files can import lazy, sorting, utils, models and benchmarks.
"""

import sys
from pathlib import Path

# Add the parent directory to the Python path
parent_dir = Path(__file__).parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

import pytest


@pytest.fixture
def fixed_seed():
    """A seed generator that replays [0.1, 0.9, 0.4, 0.05, 0.6] and then fails loudly."""
    values = iter([0.1, 0.9, 0.4, 0.05, 0.6])

    def next_value():
        try:
            return next(values)
        except StopIteration:
            raise AssertionError("seed generator pulled past its fixed values")

    return next_value


@pytest.fixture(autouse=True)
def reset_performance_metrics():
    """Keep measure_performance() totals independent between tests"""
    from utils import clear_performance_metrics
    clear_performance_metrics()
    yield
    clear_performance_metrics()

import os
import sys

import pytest

# Repository root on the path so tests run without an install
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, ROOT_DIR)

# Headless plotting
os.environ.setdefault("MPLBACKEND", "Agg")


@pytest.fixture
def unit_ts():
    """101 evenly spaced parameters over [0, 1]"""
    from camber import linspace

    return linspace(0., 1., 101)

"""Shared pytest configuration and path setup for test modules."""

import sys
from pathlib import Path

import pytest

# Ensure repo root and src/ are on sys.path for all tests
_ROOT = Path(__file__).resolve().parents[1]
_SRC = _ROOT / "src"
for p in (str(_ROOT), str(_SRC)):
    if p not in sys.path:
        sys.path.insert(0, p)


@pytest.fixture
def data_a():
    return [88., 12., 0., 34., 77., 95., 12., 2., 99., 6., 88., 45., 76., 46., 3., 12.]


@pytest.fixture
def data_b():
    return [11., 52., 30., 61., 17., 5., 62., 12., 25., 16., 81., 29., 56., 46., 42., 92.]


@pytest.fixture
def process_values():
    return [88., 12., 63., 34., 77., 95., 12., 2., 99., 6., 88., 45., 76., 46., 3., 12.]


@pytest.fixture
def process_times():
    return [1., 1.5, 3.3, 6., 7.2, 8.5, 9., 11.6, 13.25, 16.1, 41., 59., 66.6, 78., 147., 192.5]

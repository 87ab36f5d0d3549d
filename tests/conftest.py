"""Shared fixtures and markers for Where4 tests."""

import pytest

from where4.codec.trace import ProcessingTrace


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: exhaustive sweeps over many coordinates")


@pytest.fixture
def trace():
    return ProcessingTrace()

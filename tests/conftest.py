"""Global pytest configuration for the typecheck test suite.

Fixtures here provide sample values of every kind the classifier knows
about, and keep the process-wide runtime switch isolated between tests.
"""

from pathlib import Path
from typing import Generator

import pytest

from typecheck.core.runtime import _runtime


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "property: property-based test")
    config.addinivalue_line("markers", "messages: tests diagnostic wording")
    config.addinivalue_line("markers", "runtime: tests the global enable switch")


class Point:
    """A tagged object: its class name is its type tag."""

    def __init__(self, x=0, y=0):
        self.x = x
        self.y = y


class Empty:
    pass


class Functor:
    def __call__(self, *args):
        return args


class Sized:
    def __len__(self):
        return 42

    def __str__(self):
        return "abc"


class Printable:
    def __str__(self):
        return "abc"


class Tagged:
    _type = "Object"


@pytest.fixture(autouse=True)
def restore_runtime() -> Generator[None, None, None]:
    """Restore the argcheck switch after every test."""
    saved = _runtime.argcheck
    yield
    _runtime(saved)


@pytest.fixture
def argcheck_disabled() -> Generator[None, None, None]:
    """Disable run-time checking for functions wrapped inside the test."""
    _runtime(False)
    yield


@pytest.fixture
def open_file(tmp_path: Path):
    """An open file handle, closed after the test."""
    handle = open(tmp_path / "data.txt", "w")
    yield handle
    handle.close()


@pytest.fixture
def closed_file(tmp_path: Path):
    handle = open(tmp_path / "closed.txt", "w")
    handle.close()
    return handle

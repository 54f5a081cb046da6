from __future__ import annotations

import io
from test import setup, teardown

import pytest

from extjson.generator import CanonicalGenerator


@pytest.fixture(scope="session", autouse=True)
def test_setup_and_teardown():
    setup()
    yield
    teardown()


@pytest.fixture
def buffer():
    return io.StringIO()


@pytest.fixture(scope="session")
def generator():
    return CanonicalGenerator()

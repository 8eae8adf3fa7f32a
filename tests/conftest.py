"""Shared test fixtures."""

import pytest

from pyspan.stable import V1Format, V2Format, V3Format


@pytest.fixture
def v1_format():
    return V1Format()


@pytest.fixture
def v2_format():
    return V2Format()


@pytest.fixture
def v3_format():
    return V3Format()


ALL_FORMATS = [
    V1Format(),
    V2Format(),
    V3Format(),
]

"""Shared test configuration and fixtures."""

import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from bkit_core.platform import get_platform_constant


@pytest.fixture(autouse=True)
def reset_platform_constant() -> Iterator[None]:
    """Let each test detect the platform constant afresh."""
    get_platform_constant.cache_clear()
    yield
    get_platform_constant.cache_clear()


@pytest.fixture
def clean_environ() -> Iterator[None]:
    """Run a test with an empty process environment."""
    with patch.dict(os.environ, {}, clear=True):
        yield

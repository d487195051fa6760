"""
Pytest configuration and fixtures for termtools tests.
"""

import random

import pytest

from termtools.core.password_engine import GenerationConfig


@pytest.fixture
def rng():
    """Seeded random source so failures are reproducible."""
    return random.Random(20241017)


@pytest.fixture
def strict_config():
    """The worked example: letters and digits, every exclusion rule on."""
    return GenerationConfig(
        length=8,
        count=1,
        use_uppercase=True,
        use_lowercase=True,
        use_numbers=True,
        use_symbols=False,
        avoid_similar=True,
        allow_duplicates=False,
        avoid_sequential=True,
    )

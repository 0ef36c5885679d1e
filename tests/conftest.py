"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from montyhall.config.settings import reset_config


CONFIG_ENV_VARS = [
    "MONTYHALL_DEFAULT_N_GAMES",
    "MONTYHALL_SEED",
    "MONTYHALL_ROUND_DIGITS",
    "MONTYHALL_CONFIDENCE_LEVEL",
    "MONTYHALL_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Start every test from default settings and drop the cached config afterwards."""
    for var in CONFIG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so random draws are reproducible across runs."""
    return np.random.default_rng(20240601)

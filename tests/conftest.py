"""Pytest configuration and fixtures for cellframe tests.

This module provides shared fixtures for the cellframe test suite.
"""

import pytest

from cellframe.config import constants

SAMPLER_ENV_VARS = [
    constants.ENV_COUNT,
    constants.ENV_SEED,
    constants.ENV_MAX_SIZE,
    constants.ENV_VALUE_TYPE,
    constants.ENV_KEY_TYPE,
    constants.ENV_PROFILE,
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every sampler environment variable for the test."""
    for name in SAMPLER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def sampler_config_file(tmp_path):
    """Create a temporary YAML file with sampler settings."""
    config_file = tmp_path / "cellframe.yaml"
    config_file.write_text(
        "sampler:\n"
        "  count: 3\n"
        "  seed: 42\n"
        "  max_size: 4\n"
        "  value_type: float\n"
        "  key_type: int\n"
        "  profile: sparse\n",
        encoding="utf-8",
    )
    return config_file

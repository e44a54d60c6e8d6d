"""Configuration for property-based tests.

This module configures Hypothesis settings for property-based testing.
Set ``CELLFRAME_HYPOTHESIS_PROFILE`` to pick a profile.
"""

import os

from hypothesis import HealthCheck, Verbosity, settings

from cellframe.config.constants import DEFAULT_HYPOTHESIS_PROFILE, ENV_HYPOTHESIS_PROFILE

# Default settings for property tests
settings.register_profile(
    "default",
    max_examples=100,
    deadline=5000,  # 5 seconds per test
    suppress_health_check=[
        HealthCheck.too_slow,
        HealthCheck.data_too_large,
    ],
)

# Fast settings for CI or quick testing
settings.register_profile(
    "fast",
    max_examples=50,
    deadline=2000,
    suppress_health_check=[
        HealthCheck.too_slow,
        HealthCheck.data_too_large,
        HealthCheck.filter_too_much,
    ],
)

# Thorough settings for comprehensive testing
settings.register_profile(
    "thorough",
    max_examples=500,
    deadline=10000,
    suppress_health_check=[
        HealthCheck.too_slow,
    ],
)

# Development settings for debugging
settings.register_profile(
    "debug",
    max_examples=10,
    deadline=None,
    verbosity=Verbosity.verbose,
    suppress_health_check=[
        HealthCheck.too_slow,
        HealthCheck.data_too_large,
        HealthCheck.filter_too_much,
    ],
)

settings.load_profile(os.getenv(ENV_HYPOTHESIS_PROFILE, DEFAULT_HYPOTHESIS_PROFILE))

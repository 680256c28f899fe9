# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Shared fixtures and Hypothesis profiles."""

import os

import pytest
from hypothesis import HealthCheck, settings

from lunaphase.adapters import BundledTableSource


settings.register_profile(
    "dev",
    settings(
        deadline=None,
        max_examples=60,
        suppress_health_check=[HealthCheck.too_slow],
    ),
)
settings.register_profile(
    "ci",
    settings(
        deadline=None,
        max_examples=200,
        suppress_health_check=[HealthCheck.too_slow],
    ),
)
settings.load_profile(
    "ci" if os.getenv("CI") else os.getenv("HYPOTHESIS_PROFILE", "dev")
)


@pytest.fixture(scope="session")
def tables():
    """Bundled coefficient tables."""
    return BundledTableSource()

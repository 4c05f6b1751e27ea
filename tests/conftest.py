"""Global pytest configuration."""

from __future__ import annotations

import pytest

from graphkit.config import ALGORITHM_CONFIG


@pytest.fixture(autouse=True)
def _restore_algorithm_config():
    """Undo any tweaks a test makes to the global algorithm configuration."""
    saved = (ALGORITHM_CONFIG.infinity, ALGORITHM_CONFIG.bellman_ford_early_exit)
    yield
    ALGORITHM_CONFIG.infinity, ALGORITHM_CONFIG.bellman_ford_early_exit = saved

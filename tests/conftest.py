"""Pytest configuration and fixtures.

Provides environment isolation for config resolution. All fixtures here are
autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import os

import pytest

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_resultext_env(monkeypatch):
    """Clear RESULTEXT_* variables so config resolution starts from defaults."""
    for key in list(os.environ.keys()):
        if key.startswith("RESULTEXT_"):
            monkeypatch.delenv(key, raising=False)

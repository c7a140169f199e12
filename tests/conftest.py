"""Pytest configuration and fixtures.

Provides environment isolation, settings cache resets and log capture helpers.
All fixtures here are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

from tagged_result.config import configure
from tagged_result.constants import ENV_PREFIX

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
def isolate_settings_env(request, monkeypatch):
    """Clear TAGGED_RESULT_* env vars and restore default Settings around each test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if not request.node.get_closest_marker("allow_env_pollution"):
        for key in list(os.environ.keys()):
            if key.startswith(ENV_PREFIX):
                monkeypatch.delenv(key, raising=False)
    configure()
    yield
    configure()


# =============================================================================
# Helpers (opt-in)
# =============================================================================


@pytest.fixture
def warn_lowercase():
    """Enable lowercase-suffix warnings for the duration of a test."""
    configure(warn_on_lowercase_tags=True)


@pytest.fixture
def tag_logs(caplog):
    """Capture DEBUG and above from the tagged_result logger tree."""
    caplog.set_level(logging.DEBUG, logger="tagged_result")
    return caplog


# =============================================================================
# Pytest Hooks
# =============================================================================

TYPECHECK_TESTS_REASON = "Type-check tests require ENABLE_TYPECHECK_TESTS=1"


def _typecheck_tests_enabled() -> bool:
    return bool(os.getenv("ENABLE_TYPECHECK_TESTS"))


def pytest_collection_modifyitems(items):
    """Automatically skip type-check tests when not explicitly enabled."""
    if _typecheck_tests_enabled():
        return
    skip_typecheck = pytest.mark.skip(reason=TYPECHECK_TESTS_REASON)
    for item in items:
        if "typecheck" in item.keywords:
            item.add_marker(skip_typecheck)

"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration and marker
registration. Fixtures marked autouse apply to every test.
"""

from __future__ import annotations

import logging
import os

import pytest

from verdict import Result

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
    monkeypatch.setattr("verdict.config.load_dotenv", lambda *_args, **_kwargs: False)


@pytest.fixture(autouse=True)
def isolate_verdict_env(request, monkeypatch):
    """Clear VERDICT_* env vars so ambient settings never leak into tests.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("VERDICT_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("hypothesis").setLevel(logging.WARNING)


# =============================================================================
# Pytest Hooks
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    markers = [
        "unit: Fast, isolated unit tests",
        "allow_dotenv: Let python-dotenv read .env files",
        "allow_env_pollution: Keep VERDICT_* variables from the outer environment",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)


# =============================================================================
# Shared Results
# =============================================================================


@pytest.fixture
def ok_result() -> Result[str]:
    return Result(True, "success value string")


@pytest.fixture
def error_result() -> Result[Exception]:
    return Result(
        False,
        RuntimeError("encountered an error"),
        "test_result.py error_result()",
        "unknown_error",
    )

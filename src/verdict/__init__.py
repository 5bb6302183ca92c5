"""Verdict: explicit success-or-failure values.

Public API:
    - Result: Ok/Error value with payload, origin and error type
    - Config: Snapshot and reconstruction settings
    - ResultSnapshot: Data-only shape of a Result
"""

from __future__ import annotations

import logging

from verdict.config import DEFAULT_CONFIG, Config
from verdict.errors import ConfigurationError, SnapshotError, VerdictError
from verdict.result import Result
from verdict.snapshot import (
    ResultSnapshot,
    explain_invalid_snapshot,
    is_result_snapshot,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("verdict")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("verdict").addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_CONFIG",
    "Config",
    "ConfigurationError",
    "Result",
    "ResultSnapshot",
    "SnapshotError",
    "VerdictError",
    "explain_invalid_snapshot",
    "is_result_snapshot",
]

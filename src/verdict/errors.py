"""Exception hierarchy for Verdict.

These cover misuse of the library itself. A failed ``Result`` is not part
of this hierarchy: it is the caller's own failure channel and is raised as
itself by ``Result.expect()``.
"""

from __future__ import annotations


class VerdictError(Exception):
    """Base exception for all Verdict errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(VerdictError):
    """Configuration validation or resolution failed."""


class SnapshotError(VerdictError, TypeError):
    """A snapshot could not be turned back into a Result.

    Raised when the input is neither text nor a mapping, or when text
    decodes to something other than a JSON object. Malformed JSON text is
    left to the parser's own ``json.JSONDecodeError``.
    """

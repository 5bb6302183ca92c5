"""Result: an explicit success-or-failure value.

A Result is returned where a function can fail in an expected way. Callers
either inspect it::

    result = load_user(user_id)
    if result.is_error():
        return result
    user = result.value

or unwrap it and let a failure travel as an exception::

    try:
        user = load_user(user_id).expect()
    except Result as failed:
        log.warning("%s from %s", failed.error_type, failed.origin)

``expect()`` raises the Result itself, so the handler sees exactly the
object that was returned, with the same fields and methods.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import pydantic_core

from verdict.config import resolve_config
from verdict.snapshot import (
    OK_KEY,
    ORIGIN_KEY,
    VALUE_KEY,
    ResultSnapshot,
    build_snapshot,
    parse_snapshot,
    read_error_type,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from verdict.config import Config

logger = logging.getLogger(__name__)


class Result[T](Exception):
    """An Ok or Error outcome carrying a payload and optional diagnostics.

    Args:
        is_ok: ``True`` for an Ok result, ``False`` for an Error result.
        value: The payload. Any type; for errors this is usually an
            exception or a message.
        origin: Free-text marker for where the result was produced.
        error_type: Free-text failure category callers can dispatch on.

    No argument is validated, and nothing changes the fields afterwards.
    ``origin`` and ``error_type`` are never read by any method here.
    """

    def __init__(
        self,
        is_ok: bool,
        value: Any = None,
        origin: str | None = None,
        error_type: str | None = None,
    ) -> None:
        # Keep the constructor arguments in args so pickle and copy rebuild
        # an equivalent instance.
        super().__init__(is_ok, value, origin, error_type)
        self._is_ok = is_ok
        self.value: T = value
        self.origin = origin
        self.error_type = error_type

    @classmethod
    def new_ok(cls, value: T, origin: str | None = None) -> Result[T]:
        """Create an Ok result. Ok results never carry an error type."""
        return cls(True, value, origin)

    @classmethod
    def new_error(
        cls,
        value: T,
        origin: str | None = None,
        error_type: str | None = None,
    ) -> Result[T]:
        """Create an Error result."""
        return cls(False, value, origin, error_type)

    def is_ok(self) -> bool:
        return bool(self._is_ok)

    def is_error(self) -> bool:
        return not self._is_ok

    def expect(self) -> T:
        """Return the payload of an Ok result, or raise this Error result.

        Each raise starts a fresh traceback, so ``__traceback__`` and
        ``__context__`` only describe the most recent ``expect()`` call.

        Raises:
            Result: This very instance, when it is an Error result.
        """
        if not self._is_ok:
            logger.debug(
                "Raising error result (error_type=%s, origin=%s)",
                self.error_type,
                self.origin,
            )
            raise self.with_traceback(None)
        return self.value

    # --- Snapshots ---

    def to_dict(self, *, config: Config | None = None) -> ResultSnapshot:
        """Return the data-only snapshot of this result.

        The snapshot is a plain ``dict`` with keys ``_isOk``, ``value``,
        ``origin`` and ``errorType``. It has none of the Result methods.
        """
        return build_snapshot(
            self._is_ok,
            self.value,
            self.origin,
            self.error_type,
            config=resolve_config(config),
        )

    def to_json(self, *, config: Config | None = None) -> str:
        """Return the snapshot as compact JSON text."""
        return pydantic_core.to_json(self.to_dict(config=config)).decode("utf-8")

    @classmethod
    def from_json(
        cls,
        snapshot: Result[Any] | Mapping[str, Any] | str | bytes | bytearray,
        *,
        config: Config | None = None,
    ) -> Result[Any]:
        """Rebuild a working Result from a snapshot, its JSON text, or a Result.

        Args:
            snapshot: A mapping such as ``Result.to_dict()`` returns, JSON
                text such as ``Result.to_json()`` returns, or a live Result
                whose four fields are copied into a new instance.
            config: Controls which key the error type is read from.

        Returns:
            A new Result. Missing keys become ``None``; the payload is used
            as-is.

        Raises:
            json.JSONDecodeError: Text that is not valid JSON.
            SnapshotError: Input that is not a mapping after decoding.
        """
        if isinstance(snapshot, Result):
            return cls(
                snapshot._is_ok,
                snapshot.value,
                snapshot.origin,
                snapshot.error_type,
            )
        cfg = resolve_config(config)
        data = parse_snapshot(snapshot)
        result = cls(
            data.get(OK_KEY),
            data.get(VALUE_KEY),
            data.get(ORIGIN_KEY),
            read_error_type(data, cfg),
        )
        logger.debug(
            "Reconstructed %s result from snapshot",
            "ok" if result.is_ok() else "error",
        )
        return result

    def __str__(self) -> str:
        """Return a constructor-like form; also shown for unhandled raises."""
        parts = [repr(self.value)]
        if self.origin is not None:
            parts.append(f"origin={self.origin!r}")
        if self.error_type is not None:
            parts.append(f"error_type={self.error_type!r}")
        state = "ok" if self._is_ok else "error"
        return f"Result.{state}({', '.join(parts)})"

    __repr__ = __str__

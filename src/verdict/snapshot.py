"""Structural snapshots: the data-only form a Result takes outside the process.

A snapshot is a plain ``dict`` carrying the four Result fields and nothing
else. It is what remains after a Result is written to JSON, a log record, a
queue, or a database column, and it is what ``Result.from_json`` turns back
into a working Result.
"""

from __future__ import annotations

from collections.abc import Mapping
import json
import logging
from typing import TYPE_CHECKING, Any, Final, TypeGuard, TypedDict

from pydantic_core import to_jsonable_python

from verdict.errors import SnapshotError

if TYPE_CHECKING:
    from verdict.config import Config

logger = logging.getLogger(__name__)

OK_KEY: Final[str] = "_isOk"
VALUE_KEY: Final[str] = "value"
ORIGIN_KEY: Final[str] = "origin"
ERROR_TYPE_KEY: Final[str] = "errorType"
#: Key read by legacy readers. Never written.
LEGACY_ERROR_TYPE_KEY: Final[str] = "errType"

ResultSnapshot = TypedDict(
    "ResultSnapshot",
    {
        "_isOk": bool,
        "value": Any,
        "origin": str | None,
        "errorType": str | None,
    },
    total=False,
)
ResultSnapshot.__doc__ = """Data-only shape of a Result.

Keys whose field is ``None`` are omitted under the default Config, the same
way JSON serializers drop undefined members.
"""


def build_snapshot(
    is_ok: Any,
    value: Any,
    origin: Any,
    error_type: Any,
    *,
    config: Config,
) -> ResultSnapshot:
    """Build a snapshot from raw Result fields.

    Every field goes through pydantic-core's general-purpose converter, so
    models, dataclasses, datetimes and the like come out as plain JSON data.
    Anything that converter cannot represent raises its own error.
    """
    fields = (
        (OK_KEY, is_ok),
        (VALUE_KEY, value),
        (ORIGIN_KEY, origin),
        (ERROR_TYPE_KEY, error_type),
    )
    snapshot: dict[str, Any] = {}
    for key, field_value in fields:
        if field_value is None and config.omit_none:
            continue
        snapshot[key] = to_jsonable_python(field_value)
    return snapshot  # type: ignore[return-value]


def parse_snapshot(data: Mapping[str, Any] | str | bytes | bytearray) -> Mapping[str, Any]:
    """Return *data* as a mapping, decoding it first when it is text."""
    if isinstance(data, str | bytes | bytearray):
        data = json.loads(data)
    if not isinstance(data, Mapping):
        raise SnapshotError(
            f"Result snapshot must be a mapping, got {type(data).__name__}",
            hint="Pass the dict produced by Result.to_dict() or the text from Result.to_json().",
        )
    return data


def read_error_type(snapshot: Mapping[str, Any], config: Config) -> Any:
    """Read the error classification according to the configured key policy.

    Legacy mode reads only ``"errType"``, dropping any ``"errorType"``. The
    default reads ``"errorType"`` and falls back to ``"errType"``.
    """
    if config.legacy_error_type:
        return snapshot.get(LEGACY_ERROR_TYPE_KEY)
    error_type = snapshot.get(ERROR_TYPE_KEY)
    if error_type is None and snapshot.get(LEGACY_ERROR_TYPE_KEY) is not None:
        logger.debug("Read error type from legacy %r key", LEGACY_ERROR_TYPE_KEY)
        return snapshot[LEGACY_ERROR_TYPE_KEY]
    return error_type


def _validate_snapshot_reason(obj: object) -> str | None:
    """Internal: return None when valid, else a concise reason string."""
    if not isinstance(obj, Mapping):
        return f"ResultSnapshot must be a mapping, got {type(obj).__name__}"
    if OK_KEY not in obj:
        return f"{OK_KEY!r} must be present"
    if not isinstance(obj[OK_KEY], bool):
        return f"{OK_KEY!r} must be bool, got {type(obj[OK_KEY]).__name__}"
    for key in (ORIGIN_KEY, ERROR_TYPE_KEY):
        if obj.get(key) is not None and not isinstance(obj[key], str):
            return f"{key!r} must be str when present, got {type(obj[key]).__name__}"
    return None


def is_result_snapshot(obj: object) -> TypeGuard[ResultSnapshot]:
    """Return True if ``obj`` structurally looks like a ``ResultSnapshot``.

    This is a lightweight structural check and says nothing about the
    payload. ``Result.from_json`` does not require it to pass.
    """
    return _validate_snapshot_reason(obj) is None


def explain_invalid_snapshot(obj: object) -> str | None:
    """Return a short reason when ``obj`` is not a valid snapshot, else None."""
    return _validate_snapshot_reason(obj)

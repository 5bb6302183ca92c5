"""Configuration: Frozen Config for snapshot and reconstruction behavior."""

from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import find_dotenv, load_dotenv

from verdict.errors import ConfigurationError

_OMIT_NONE_ENV = "VERDICT_OMIT_NONE"
_LEGACY_ERROR_TYPE_ENV = "VERDICT_LEGACY_ERROR_TYPE"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class Config:
    """Immutable configuration for building and reading Result snapshots.

    Defaults match the documented snapshot shape, so most callers never
    construct one.

    Example:
        config = Config(legacy_error_type=True)
        result = Result.from_json(raw, config=config)
    """

    #: Drop ``None`` fields from snapshots instead of writing explicit nulls.
    omit_none: bool = True
    #: Read the error classification only from the ``"errType"`` key.
    legacy_error_type: bool = False

    def __post_init__(self) -> None:
        """Validate field types."""
        for name in ("omit_none", "legacy_error_type"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigurationError(
                    f"{name} must be a bool, got {type(value).__name__}",
                    hint=f"Pass {name}=True or {name}=False.",
                )

    @classmethod
    def from_env(cls) -> Config:
        """Build a Config from ``VERDICT_*`` environment variables.

        A ``.env`` file found from the working directory upward is loaded
        first. Variables already set in the process environment win.
        """
        load_dotenv(find_dotenv(usecwd=True))
        return cls(
            omit_none=_env_flag(_OMIT_NONE_ENV, default=True),
            legacy_error_type=_env_flag(_LEGACY_ERROR_TYPE_ENV, default=False),
        )


DEFAULT_CONFIG = Config()


def resolve_config(config: Config | None) -> Config:
    """Return *config*, or the defaults when it is *None*."""
    return DEFAULT_CONFIG if config is None else config


def _env_flag(name: str, *, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ConfigurationError(
        f"Invalid boolean for {name}: {raw!r}",
        hint=f"Set {name} to one of: 1, 0, true, false, yes, no, on, off.",
    )

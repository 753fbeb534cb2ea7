"""Configuration utilities for DEPTHSWEEP.

This module centralizes defaults and the environment variables that override
them. CLI options take precedence over both.
"""

from __future__ import annotations

import math
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TypeVar

ENV_PREFIX = "DEPTHSWEEP_"  # pragma: no mutate

DEFAULT_START_DEPTH = 1
DEFAULT_MAX_DEPTH = 36
DEFAULT_TIMEOUT_S = 100.0
DEFAULT_GAS_LIMIT = 1_000_000
DEFAULT_MAX_CALL_DEPTH = 1024
DEFAULT_PROBE_DEPTH = 1024

T = TypeVar("T", int, float)


class InvalidSettingError(Exception):
    """Raised when a DEPTHSWEEP_* environment variable holds an unusable value."""

    def __init__(self, name: str, value: str, expected: str) -> None:
        super().__init__(f"{name}={value!r} is invalid: expected {expected}.")
        self.name = name
        self.value = value
        self.expected = expected


@dataclass(frozen=True)
class Settings:
    """Effective settings of a DEPTHSWEEP run."""

    start_depth: int = DEFAULT_START_DEPTH
    max_depth: int = DEFAULT_MAX_DEPTH
    timeout_s: float = DEFAULT_TIMEOUT_S
    gas_limit: int = DEFAULT_GAS_LIMIT
    max_call_depth: int = DEFAULT_MAX_CALL_DEPTH
    probe_depth: int = DEFAULT_PROBE_DEPTH


def _read(
    environ: Mapping[str, str],
    key: str,
    default: T,
    parse: Callable[[str], T],
    expected: str,
    minimum: T,
) -> T:
    name = ENV_PREFIX + key
    if not (raw := environ.get(name, "").strip()):
        return default
    try:
        value = parse(raw)
    except ValueError as e:
        raise InvalidSettingError(name, raw, expected) from e
    # float("nan") compares False against anything, float("inf") passes too
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidSettingError(name, raw, expected)
    if value < minimum:
        raise InvalidSettingError(name, raw, expected)
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build `Settings` from the environment.

    Recognized variables: ``DEPTHSWEEP_START_DEPTH``, ``DEPTHSWEEP_MAX_DEPTH``,
    ``DEPTHSWEEP_TIMEOUT``, ``DEPTHSWEEP_GAS_LIMIT``,
    ``DEPTHSWEEP_MAX_CALL_DEPTH`` and ``DEPTHSWEEP_PROBE_DEPTH``. Unset or empty
    variables fall back to the module defaults. Integers may use ``_`` as a
    digit separator (``1_000_000``).

    Args:
        environ: Mapping to read from; defaults to ``os.environ``.

    Returns:
        The resolved settings.

    Raises:
        InvalidSettingError: If a variable is not a number or is out of range.
    """
    env = os.environ if environ is None else environ
    return Settings(
        start_depth=_read(
            env, "START_DEPTH", DEFAULT_START_DEPTH, int, "an integer >= 1", 1
        ),
        max_depth=_read(env, "MAX_DEPTH", DEFAULT_MAX_DEPTH, int, "an integer >= 1", 1),
        timeout_s=_read(
            env,
            "TIMEOUT",
            DEFAULT_TIMEOUT_S,
            float,
            "a finite number of seconds > 0",
            1e-9,
        ),
        gas_limit=_read(
            env, "GAS_LIMIT", DEFAULT_GAS_LIMIT, int, "an integer >= 0", 0
        ),
        max_call_depth=_read(
            env, "MAX_CALL_DEPTH", DEFAULT_MAX_CALL_DEPTH, int, "an integer >= 0", 0
        ),
        probe_depth=_read(
            env, "PROBE_DEPTH", DEFAULT_PROBE_DEPTH, int, "an integer >= 0", 0
        ),
    )

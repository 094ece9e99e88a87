"""Process-wide defaults for densepath.

Two settings are exposed, both overridable from the environment:

- ``DENSEPATH_NO_EDGE``: the matrix value meaning "no edge" (default 99).
- ``DENSEPATH_DEBUG``: enables per-iteration engine logging and label
  monotonicity checks.

An explicit ``no_edge=`` argument passed to any algorithm always takes
precedence over the configured default.
"""

from __future__ import annotations

import math
import os
from contextlib import contextmanager
from typing import Iterator, Optional

_NO_EDGE_ENV_VAR = "DENSEPATH_NO_EDGE"
_DEBUG_ENV_VAR = "DENSEPATH_DEBUG"

DEFAULT_NO_EDGE = 99.0


def _parse_no_edge(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(
            f"{_NO_EDGE_ENV_VAR} must be a number or 'inf', got {raw!r}"
        ) from exc
    if math.isnan(value):
        raise ValueError(f"{_NO_EDGE_ENV_VAR} must not be NaN")
    return value


_no_edge: float = _parse_no_edge(os.getenv(_NO_EDGE_ENV_VAR, str(DEFAULT_NO_EDGE)))
_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in (
    "1",
    "true",
    "yes",
    "on",
)


def get_default_no_edge() -> float:
    """Return the sentinel used when no explicit ``no_edge`` is given."""
    return _no_edge


def set_default_no_edge(value: float) -> None:
    """
    Globally set the "no edge" sentinel.

    Parameters
    ----------
    value:
        Matrix value to treat as an absent edge. ``math.inf`` is allowed.

    Raises
    ------
    ValueError
        If value is NaN.
    """
    global _no_edge
    value = float(value)
    if math.isnan(value):
        raise ValueError("no_edge sentinel must not be NaN")
    _no_edge = value


def resolve_no_edge(no_edge: Optional[float]) -> float:
    """Return ``no_edge`` if given, otherwise the configured default."""
    if no_edge is None:
        return _no_edge
    value = float(no_edge)
    if math.isnan(value):
        raise ValueError("no_edge sentinel must not be NaN")
    return value


@contextmanager
def no_edge_context(value: float) -> Iterator[None]:
    """
    Temporarily change the default "no edge" sentinel.

    Example
    -------
    >>> with no_edge_context(math.inf):
    ...     labeling = dijkstra(matrix, 0)
    """
    global _no_edge
    prev = _no_edge
    set_default_no_edge(value)
    try:
        yield
    finally:
        _no_edge = prev


def is_debug_enabled() -> bool:
    """
    Return whether debug mode is currently enabled.

    Debug mode can be toggled via set_debug_enabled(...) or the
    DENSEPATH_DEBUG environment variable.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Globally enable or disable debug mode."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Context manager to temporarily enable or disable debug mode.

    Example
    -------
    >>> with debug_context(True):
    ...     # engine logs every selection and relaxation inside the block
    ...     pass
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev

"""sccgraph runtime configuration helpers."""

from __future__ import annotations

import os
import logging

_TRAVERSAL_ENV = "SCCGRAPH_TRAVERSAL"
_RECURSION_HEADROOM_ENV = "SCCGRAPH_RECURSION_HEADROOM"

TRAVERSAL_STRATEGIES = ("iterative", "recursive")
DEFAULT_TRAVERSAL = "iterative"
DEFAULT_RECURSION_HEADROOM = 1000

LOGGER = logging.getLogger(__name__)


def _env_strategy(env_name: str) -> str | None:
    value = os.getenv(env_name)
    if not value:
        return None
    return value.strip().lower() or None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        LOGGER.warning("ignoring %s=%r: not an integer", name, raw)
        return default
    if value < 0:
        LOGGER.warning("ignoring %s=%r: must be non-negative", name, raw)
        return default
    return value


def resolve_traversal(preferred: str | None = None) -> str:
    """Resolve the traversal strategy requested by caller/env/default."""

    strategy = (preferred or "").strip().lower() or _env_strategy(_TRAVERSAL_ENV) or DEFAULT_TRAVERSAL
    if strategy not in TRAVERSAL_STRATEGIES:
        raise ValueError(
            f"Unknown traversal strategy {strategy!r}. Supported: {', '.join(TRAVERSAL_STRATEGIES)}."
        )
    LOGGER.debug(
        "resolve_traversal strategy=%s preferred=%s env=%s",
        strategy,
        preferred,
        _env_strategy(_TRAVERSAL_ENV),
    )
    return strategy


def recursion_headroom() -> int:
    """Extra frames granted on top of ``2 * len(graph)`` by the recursive strategy."""

    return _env_int(_RECURSION_HEADROOM_ENV, DEFAULT_RECURSION_HEADROOM)


__all__ = [
    "resolve_traversal",
    "recursion_headroom",
    "TRAVERSAL_STRATEGIES",
    "DEFAULT_TRAVERSAL",
    "DEFAULT_RECURSION_HEADROOM",
]

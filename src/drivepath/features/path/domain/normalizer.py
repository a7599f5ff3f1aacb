"""
Summary: Resolve dot segments and keep the directory trailing-slash convention.
Why: Give every path body a single canonical spelling before it is stored.
"""

from __future__ import annotations

from drivepath.config import settings
from drivepath.config.settings import ParentOverflowPolicy
from drivepath.features.path.domain.errors import PathTraversalError
from drivepath.platform.logging import logger

_SEPARATOR = "/"
_CURRENT = "."
_PARENT = ".."


def normalize_body(body: str, policy: ParentOverflowPolicy | None = None) -> str:
    """Normalize a ``/``-delimited body.

    Empty and ``.`` segments are dropped, and each ``..`` removes the nearest
    surviving segment to its left, resolved in one left-to-right pass. A body
    ending in ``/`` keeps its trailing slash.

    Args:
        body: Body text using ``/`` separators.
        policy: What to do with ``..`` segments that would climb above the
            root. Defaults to the configured ``PARENT_OVERFLOW_POLICY``.

    Returns:
        str: Normalized body, never shorter than ``/``.

    Raises:
        PathTraversalError: If ``..`` escapes the root under the ``raise`` policy.
    """
    active_policy = policy if policy is not None else settings.PARENT_OVERFLOW_POLICY

    segments: list[str] = []
    dropped = 0
    for segment in body.split(_SEPARATOR):
        if not segment or segment == _CURRENT:
            continue
        if segment == _PARENT:
            if segments:
                _ = segments.pop()
                continue
            if active_policy == ParentOverflowPolicy.RAISE:
                raise PathTraversalError(body)
            dropped += 1
            continue
        segments.append(segment)

    if dropped:
        logger.debug(
            "Clamped %d parent segment(s) at the root: %s",
            dropped,
            body,
            extra={"path_event": "path.normalize.clamped", "drive_path": body},
        )

    if not segments:
        return _SEPARATOR

    normalized = _SEPARATOR + _SEPARATOR.join(segments)
    if body.endswith(_SEPARATOR):
        normalized += _SEPARATOR
    return normalized


__all__ = ["normalize_body"]

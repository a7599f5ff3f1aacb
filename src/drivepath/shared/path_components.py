"""Shared raw path component record (grammar <-> value type).

This module centralizes the PathComponents dataclass so both the grammar
and the value type rely on a single definition of what a split path looks
like before its body is normalized.
"""

from dataclasses import dataclass

from drivepath.features.path.domain.path_kind import PathKind


@dataclass(slots=True, frozen=True)
class PathComponents:
    """Label, raw body and stream captured from a single path string."""

    kind: PathKind
    label: str
    body: str
    stream: str | None = None

"""
Summary: Enumerate how a path label is interpreted and rendered.
Why: Keep label formatting rules next to the discriminator that selects them.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class PathKind(str, Enum):
    """Represent the kind of root a path is anchored to."""

    NONE = "none"
    SHARE = "share"
    PARTITION = "partition"

    @staticmethod
    def from_user_input(value: str) -> "PathKind":
        """Translate a raw configuration or caller string into the matching kind."""

        normalized = value.strip().lower()
        for kind in PathKind:
            if kind.value == normalized:
                return kind
        valid: Final[str] = ", ".join(k.value for k in PathKind)
        msg = f"Unsupported path kind '{value}'. Valid options: {valid}"
        raise ValueError(msg)

    def format_root(self, label: str) -> str:
        """Render the root prefix for ``label`` (``//label``, ``label:`` or nothing)."""

        if self is PathKind.SHARE:
            return f"//{label}"
        if self is PathKind.PARTITION:
            return f"{label}:"
        return ""

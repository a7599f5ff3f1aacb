"""Where: src/drivepath/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to the path feature without file I/O.
Assumptions: - Config defaults compare paths case-insensitively and clamp at the root.
Trade-offs: - Invalid values fall back to defaults with a warning instead of failing imports.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from drivepath.config.config import config as app_config
from drivepath.platform.logging import logger


class ParentOverflowPolicy(str, Enum):
    """Represent how ``..`` segments above the root are handled."""

    CLAMP = "clamp"
    RAISE = "raise"

    @staticmethod
    def from_user_input(value: str) -> "ParentOverflowPolicy":
        """Translate raw config input into the matching policy."""

        normalized = value.strip().lower()
        for policy in ParentOverflowPolicy:
            if policy.value == normalized:
                return policy
        valid: Final[str] = ", ".join(p.value for p in ParentOverflowPolicy)
        msg = f"Unsupported parent overflow policy '{value}'. Valid options: {valid}"
        raise ValueError(msg)


# Equality ---------------------------------------------------------------------

# Labels, bodies and streams compare with str.casefold() when enabled.
_case_insensitive = getattr(app_config, "case_insensitive_equality", True)
CASE_INSENSITIVE_EQUALITY: bool = (
    _case_insensitive if isinstance(_case_insensitive, bool) else True
)


# Normalization ----------------------------------------------------------------

_parent_overflow = getattr(app_config, "parent_overflow", ParentOverflowPolicy.CLAMP.value)
try:
    PARENT_OVERFLOW_POLICY: ParentOverflowPolicy = ParentOverflowPolicy.from_user_input(
        str(_parent_overflow)
    )
except ValueError as exc:
    logger.warning("%s; falling back to '%s'", exc, ParentOverflowPolicy.CLAMP.value)
    PARENT_OVERFLOW_POLICY = ParentOverflowPolicy.CLAMP


__all__ = [
    "CASE_INSENSITIVE_EQUALITY",
    "PARENT_OVERFLOW_POLICY",
    "ParentOverflowPolicy",
]

# Where: drivepath.shared.__init__
# What: Provide a concise import surface for shared dataclasses.
# Why: Encourage consistent reuse of shared records across features.

"""Shared cross-cutting records exposed at the package level."""

from .path_components import PathComponents

__all__ = ["PathComponents"]

"""
Summary: Error hierarchy raised by path parsing and manipulation.
Why: Let callers catch one base type while tests assert the precise failure.
"""

from __future__ import annotations


class DrivePathError(ValueError):
    """Base class for every error raised by drivepath."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path: str | None = path


class EmptyPathError(DrivePathError):
    """Raised when explicit construction would produce an empty body."""

    def __init__(self, path: str | None = None) -> None:
        super().__init__("Path cannot be null, empty or whitespace", path)


class MalformedPathError(DrivePathError):
    """Raised when a path, label or stream does not fit the path grammar."""


class StreamDirectoryConflictError(DrivePathError):
    """Raised when a path carrying a stream is asked to denote a directory."""

    def __init__(self, path: str | None = None) -> None:
        super().__init__("A path with a stream cannot be formatted as a directory", path)


class RootNotAFileError(DrivePathError):
    """Raised when the root path is reformatted as a file."""

    def __init__(self, path: str | None = None) -> None:
        super().__init__("The root directory cannot be formatted as a file", path)


class NoParentOfRootError(DrivePathError):
    """Raised when the parent of the root path is requested."""

    def __init__(self, path: str | None = None) -> None:
        super().__init__("The root directory has no parent", path)


class StreamAlreadyAttachedError(DrivePathError):
    """Raised when a second stream would be attached to a path."""

    def __init__(self, path: str | None = None) -> None:
        super().__init__("The path already contains a stream", path)


class LabelAlreadyAttachedError(DrivePathError):
    """Raised when a second partition or share label would be attached to a path."""

    def __init__(self, path: str | None = None) -> None:
        super().__init__("The path already contains a partition or share label", path)


class PathTraversalError(DrivePathError):
    """Raised when ``..`` segments climb above the root under the ``raise`` policy."""

    def __init__(self, path: str | None = None) -> None:
        super().__init__("Parent segments escape the root directory", path)


__all__ = [
    "DrivePathError",
    "EmptyPathError",
    "MalformedPathError",
    "StreamDirectoryConflictError",
    "RootNotAFileError",
    "NoParentOfRootError",
    "StreamAlreadyAttachedError",
    "LabelAlreadyAttachedError",
    "PathTraversalError",
]

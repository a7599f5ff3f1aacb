"""
Summary: Raw-string counterparts of the DrivePath operations.
Why: Let callers that hold plain strings parse, transform and render explicitly.
"""

from __future__ import annotations

from drivepath.features.path.domain.drive_path import DrivePath
from drivepath.features.path.domain.errors import DrivePathError
from drivepath.features.path.domain.grammar import DIRECTORY_SEPARATOR, is_path_rooted as _is_rooted


def parse_or_none(raw: str | None) -> DrivePath | None:
    """Parse ``raw``, returning ``None`` for ``None`` or blank input.

    Malformed non-blank input still raises, so only absence is tolerated.
    """
    if raw is None or not raw.strip():
        return None
    return DrivePath.parse(raw)


def to_string(path: DrivePath | None, include_stream: bool = True) -> str | None:
    """Render ``path``, returning ``None`` when it is absent."""
    if path is None:
        return None
    return path.to_string(include_stream)


def paths_equal(left: DrivePath | str | None, right: DrivePath | str | None) -> bool:
    """Compare two paths given as values or raw strings.

    A raw string equals a value when parsing it yields an equal value.
    Strings that cannot be parsed are unequal to everything.

    Args:
        left: First path.
        right: Second path.

    Returns:
        bool: ``True`` when both sides denote the same path.
    """
    try:
        left_path = left if isinstance(left, DrivePath) else parse_or_none(left)
        right_path = right if isinstance(right, DrivePath) else parse_or_none(right)
    except DrivePathError:
        return False
    if left_path is None or right_path is None:
        return left_path is right_path
    return left_path == right_path


def normalize_path(path: str | None) -> str | None:
    """Return the canonical spelling of ``path``.

    Args:
        path: Raw path text.

    Returns:
        str | None: Rendered path with separators converted and dot segments
        resolved, or ``None`` when ``path`` is ``None``.
    """
    parsed = parse_or_none(path)
    if parsed is None:
        return None if path is None else DIRECTORY_SEPARATOR
    return parsed.to_string()


def get_parent(path: str | None) -> str | None:
    """Return the parent directory of ``path``.

    Raises:
        NoParentOfRootError: If ``path`` is the root.
    """
    if path is None:
        return None
    return DrivePath.parse(path).get_parent().to_string()


def format_as_directory(path: str | None) -> str | None:
    if path is None:
        return None
    if not path.strip():
        return DIRECTORY_SEPARATOR
    return DrivePath.parse(path).format_as_directory().to_string()


def format_as_file(path: str | None) -> str | None:
    if path is None:
        return None
    if not path.strip():
        return ""
    return DrivePath.parse(path).format_as_file().to_string()


def is_formatted_as_directory(path: str | None) -> bool:
    """Check whether ``path`` ends with ``/`` once its stream is set aside."""
    parsed = parse_or_none(path)
    return parsed is not None and parsed.is_directory


def change_extension(path: str | None, extension: str | None) -> str | None:
    """Change the extension of ``path``; blank input is returned unchanged.

    Args:
        path: Path to modify.
        extension: New extension, with or without its dot. ``None`` or an
            empty string removes the extension.

    Returns:
        str | None: Modified path.
    """
    if path is None or not path.strip():
        return path
    return DrivePath.parse(path).change_extension(extension).to_string()


def combine(*paths: str | None) -> str | None:
    """Join path strings with exactly one ``/`` between neighbours.

    Blank entries are skipped and no normalization is applied; use
    ``DrivePath.combine`` for a normalized value.

    Args:
        *paths: Path fragments in order.

    Returns:
        str | None: Joined path, the single argument unchanged when only one
        is given, or ``None`` when none are.
    """
    if not paths:
        return None
    if len(paths) == 1:
        return paths[0]

    parts = [part for part in paths if part is not None and part.strip()]
    if not parts:
        return None

    combined = parts[0]
    for part in parts[1:]:
        combined = (
            f"{combined.rstrip(DIRECTORY_SEPARATOR)}{DIRECTORY_SEPARATOR}"
            f"{part.lstrip(DIRECTORY_SEPARATOR)}"
        )
    return combined


def get_directory_name(path: str | None) -> str | None:
    parsed = parse_or_none(path)
    if parsed is None:
        return None
    return parsed.get_directory_name()


def get_extension(path: str | None) -> str | None:
    """Return the extension of ``path`` including its dot, or ``""``."""
    if path is None:
        return None
    parsed = parse_or_none(path)
    return parsed.get_extension() if parsed is not None else ""


def get_file_name(path: str | None) -> str | None:
    if path is None:
        return None
    parsed = parse_or_none(path)
    return parsed.get_file_name() if parsed is not None else ""


def get_file_name_without_extension(path: str | None) -> str | None:
    if path is None:
        return None
    parsed = parse_or_none(path)
    return parsed.get_file_name_without_extension() if parsed is not None else ""


def get_path_root(path: str | None) -> str | None:
    """Return ``//share``, ``label:`` or ``""`` for ``path``."""
    if path is None:
        return None
    parsed = parse_or_none(path)
    return parsed.get_path_root() if parsed is not None else ""


def get_path_label(path: str | None) -> str | None:
    if path is None:
        return None
    parsed = parse_or_none(path)
    return parsed.label if parsed is not None else ""


def get_path_body(path: str | None) -> str | None:
    if path is None:
        return None
    parsed = parse_or_none(path)
    return parsed.body if parsed is not None else DIRECTORY_SEPARATOR


def get_path_segments(path: str | None) -> list[str] | None:
    if path is None:
        return None
    parsed = parse_or_none(path)
    return parsed.get_path_segments() if parsed is not None else []


def has_extension(path: str | None) -> bool:
    parsed = parse_or_none(path)
    return parsed is not None and parsed.has_extension()


def is_root(path: str) -> bool:
    """Return whether ``path`` is a root, with or without a label.

    Raises:
        TypeError: If ``path`` is ``None``.
    """
    if path is None:
        raise TypeError("path must not be None")
    parsed = parse_or_none(path)
    return parsed is None or parsed.is_root


def is_path_rooted(path: str | None) -> bool:
    """Return whether ``path`` starts with ``/``, ``//share`` or ``label:``.

    ``C:/dir`` and ``C:`` are rooted; ``dir/file`` and ``file.txt:stream``
    are not, since a colon followed by a name is a stream separator.
    """
    if path is None:
        return False
    return _is_rooted(path)


__all__ = [
    "change_extension",
    "combine",
    "format_as_directory",
    "format_as_file",
    "get_directory_name",
    "get_extension",
    "get_file_name",
    "get_file_name_without_extension",
    "get_parent",
    "get_path_body",
    "get_path_label",
    "get_path_root",
    "get_path_segments",
    "has_extension",
    "is_formatted_as_directory",
    "is_path_rooted",
    "is_root",
    "normalize_path",
    "parse_or_none",
    "paths_equal",
    "to_string",
]

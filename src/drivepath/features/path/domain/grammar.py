"""
Summary: Split raw path strings into kind, label, body and stream.
Why: Keep the path grammar in one character scanner shared by every entry point.
"""

from __future__ import annotations

from typing import Final

from drivepath.features.path.domain.errors import MalformedPathError
from drivepath.features.path.domain.path_kind import PathKind
from drivepath.platform.logging import logger
from drivepath.shared.path_components import PathComponents

DIRECTORY_SEPARATOR: Final[str] = "/"
ALT_DIRECTORY_SEPARATOR: Final[str] = "\\"
PARTITION_SEPARATOR: Final[str] = ":"
STREAM_SEPARATOR: Final[str] = ":"
RELATIVE_ROOT: Final[str] = "/"

# Characters that never appear inside a label, body or stream name.
INVALID_CHARACTERS: Final[frozenset[str]] = frozenset({"\\", ":", "?", "*", "[", "]"})

_SHARE_PREFIX: Final[str] = DIRECTORY_SEPARATOR * 2


def prepare(raw: str) -> str:
    """Trim whitespace and convert alternate separators to ``/``."""

    return raw.strip().replace(ALT_DIRECTORY_SEPARATOR, DIRECTORY_SEPARATOR)


def is_label_character(char: str) -> bool:
    """Return whether ``char`` may appear in a share or partition label."""

    return char != DIRECTORY_SEPARATOR and char not in INVALID_CHARACTERS


def find_invalid_character(text: str, *, allow_separator: bool) -> str | None:
    """Return the first character of ``text`` that is not allowed, if any."""

    for char in text:
        if char in INVALID_CHARACTERS:
            return char
        if not allow_separator and char == DIRECTORY_SEPARATOR:
            return char
    return None


def _scan_label(text: str, start: int) -> int:
    """Return the index just past the run of label characters starting at ``start``."""

    index = start
    while index < len(text) and is_label_character(text[index]):
        index += 1
    return index


def _match_share(text: str) -> tuple[str, str] | None:
    if not text.startswith(_SHARE_PREFIX):
        return None
    end = _scan_label(text, len(_SHARE_PREFIX))
    if end == len(_SHARE_PREFIX):
        return None
    return text[len(_SHARE_PREFIX):end], text[end:]


def _match_partition(text: str) -> tuple[str, str] | None:
    end = _scan_label(text, 0)
    if end == 0 or end >= len(text) or text[end] != PARTITION_SEPARATOR:
        return None
    # The colon must close the label: either the string ends or the body starts.
    following = end + 1
    if following < len(text) and text[following] != DIRECTORY_SEPARATOR:
        return None
    return text[:end], text[following:]


def _split_stream(remainder: str, raw: str) -> tuple[str, str | None]:
    body, separator, stream = remainder.partition(STREAM_SEPARATOR)
    if not separator:
        return body, None
    if STREAM_SEPARATOR in stream:
        raise MalformedPathError(f"Path contains more than one stream separator: '{raw}'", raw)
    invalid = find_invalid_character(stream, allow_separator=False)
    if invalid is not None:
        raise MalformedPathError(f"Stream name contains invalid character '{invalid}': '{raw}'", raw)
    if not stream.strip():
        return body, None
    return body, stream


def split_path(raw: str) -> PathComponents:
    """Split ``raw`` into its components without normalizing the body.

    The alternatives are tried in order of specificity: a ``//share`` prefix,
    then a ``label:`` partition prefix whose colon is followed by ``/`` or the
    end of the string, then an unlabeled path. A single trailing ``:name``
    becomes the stream.

    Args:
        raw: Raw path text; backslashes are accepted as separators.

    Returns:
        PathComponents: Captured kind, trimmed label, raw body and stream.
        The body is at least ``/`` and always starts with ``/``.

    Raises:
        MalformedPathError: If the text contains invalid characters outside
            their structural role.
    """
    text = prepare(raw)

    kind = PathKind.NONE
    label = ""
    remainder = text

    share = _match_share(text)
    if share is not None:
        kind = PathKind.SHARE
        label, remainder = share
    else:
        partition = _match_partition(text)
        if partition is not None:
            kind = PathKind.PARTITION
            label, remainder = partition

    body, stream = _split_stream(remainder, raw)

    invalid = find_invalid_character(body, allow_separator=True)
    if invalid is not None:
        logger.debug(
            "Rejected path with invalid character %r",
            invalid,
            extra={"path_event": "path.parse.rejected", "drive_path": raw},
        )
        raise MalformedPathError(f"Path contains invalid character '{invalid}': '{raw}'", raw)

    label = label.strip()
    if not label:
        kind = PathKind.NONE

    body = body.strip()
    if not body.startswith(DIRECTORY_SEPARATOR):
        body = DIRECTORY_SEPARATOR + body

    return PathComponents(kind=kind, label=label, body=body, stream=stream)


def is_path_rooted(raw: str) -> bool:
    """Return whether ``raw`` starts at a root: ``/``, ``//share`` or ``label:``."""

    text = prepare(raw)
    if text.startswith(DIRECTORY_SEPARATOR):
        return True
    return _match_partition(text) is not None


__all__ = [
    "ALT_DIRECTORY_SEPARATOR",
    "DIRECTORY_SEPARATOR",
    "INVALID_CHARACTERS",
    "PARTITION_SEPARATOR",
    "RELATIVE_ROOT",
    "STREAM_SEPARATOR",
    "find_invalid_character",
    "is_label_character",
    "is_path_rooted",
    "prepare",
    "split_path",
]

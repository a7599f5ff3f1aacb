"""
Summary: Immutable drive path value with formatting and navigation helpers.
Why: Give callers one validated value type instead of ad-hoc path strings.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import reduce
from typing import final

from drivepath.config import settings
from drivepath.features.path.domain.errors import (
    EmptyPathError,
    LabelAlreadyAttachedError,
    MalformedPathError,
    NoParentOfRootError,
    RootNotAFileError,
    StreamAlreadyAttachedError,
    StreamDirectoryConflictError,
)
from drivepath.features.path.domain.grammar import (
    ALT_DIRECTORY_SEPARATOR,
    DIRECTORY_SEPARATOR,
    RELATIVE_ROOT,
    STREAM_SEPARATOR,
    find_invalid_character,
    split_path,
)
from drivepath.features.path.domain.normalizer import normalize_body
from drivepath.features.path.domain.path_kind import PathKind
from drivepath.shared.path_components import PathComponents

_EXTENSION_SEPARATOR = "."


@final
@dataclass(slots=True, frozen=True, eq=False)
class DrivePath:
    """A location in a virtual storage hierarchy.

    A path is an optional share or partition label, a ``/``-rooted body and an
    optional stream name. Bodies are normalized on construction and end with
    ``/`` exactly when the path denotes a directory. Instances never change;
    every transformation returns a new value.

    Raises:
        EmptyPathError: If ``body`` is ``None`` or blank.
        MalformedPathError: If the label, body or stream holds characters
            outside their structural role.
    """

    kind: PathKind
    label: str
    body: str
    stream: str | None = None

    def __post_init__(self) -> None:
        body = self.body
        if body is None or not body.strip():
            raise EmptyPathError(body)

        body = body.strip().replace(ALT_DIRECTORY_SEPARATOR, DIRECTORY_SEPARATOR)
        invalid = find_invalid_character(body, allow_separator=True)
        if invalid is not None:
            raise MalformedPathError(f"Path contains invalid character '{invalid}': '{body}'", body)
        if not body.startswith(DIRECTORY_SEPARATOR):
            body = DIRECTORY_SEPARATOR + body

        label = (self.label or "").strip()
        invalid = find_invalid_character(label, allow_separator=False)
        if invalid is not None:
            raise MalformedPathError(f"Label contains invalid character '{invalid}': '{label}'", label)

        kind = PathKind(self.kind)
        if not label:
            kind = PathKind.NONE
        elif kind is PathKind.NONE:
            raise MalformedPathError(f"Label '{label}' requires a share or partition kind", label)

        stream = self.stream
        if stream is not None:
            invalid = find_invalid_character(stream, allow_separator=False)
            if invalid is not None:
                raise MalformedPathError(
                    f"Stream name contains invalid character '{invalid}': '{stream}'", stream
                )
            if not stream.strip():
                stream = None

        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "label", label)
        object.__setattr__(self, "body", normalize_body(body))
        object.__setattr__(self, "stream", stream)

    # Construction -----------------------------------------------------------

    @classmethod
    def parse(cls, raw: str | None) -> DrivePath:
        """Parse a raw path string.

        Args:
            raw: Path text such as ``C:\\foo\\bar.txt:abcd`` or ``//share/dir/``.

        Returns:
            DrivePath: Parsed and normalized value.

        Raises:
            EmptyPathError: If ``raw`` is ``None`` or blank.
            MalformedPathError: If ``raw`` does not fit the path grammar.
        """
        if raw is None or not raw.strip():
            raise EmptyPathError(raw)
        return cls.from_components(split_path(raw))

    @classmethod
    def from_components(cls, components: PathComponents) -> DrivePath:
        """Build a value from grammar output."""
        return cls(components.kind, components.label, components.body, components.stream)

    @classmethod
    def root(cls) -> DrivePath:
        """Return the unlabeled root ``/``."""
        return cls(PathKind.NONE, "", RELATIVE_ROOT)

    @classmethod
    def combine(cls, *parts: DrivePath | str | None) -> DrivePath:
        """Join path values or strings left to right.

        Blank operands are skipped. Neighbouring operands are joined with a
        single ``/`` and the joined body is normalized afterwards, so ``..``
        in a later operand climbs out of an earlier one. The label of the
        first operand and the stream of the last operand are kept.

        Args:
            *parts: Values or raw strings to join.

        Returns:
            DrivePath: Combined value.

        Raises:
            EmptyPathError: If every operand is blank.
            LabelAlreadyAttachedError: If an operand after the first carries a label.
            StreamAlreadyAttachedError: If an operand before the last carries a stream.
        """
        operands = [part for part in parts if not _is_blank(part)]
        if not operands:
            raise EmptyPathError()

        components = [_components_of(part) for part in operands]
        for index, component in enumerate(components):
            if index > 0 and component.label:
                raise LabelAlreadyAttachedError(str(operands[index]))
            if index < len(components) - 1 and component.stream:
                raise StreamAlreadyAttachedError(str(operands[index]))

        body = reduce(_join_bodies, (component.body for component in components))
        first = components[0]
        return cls(first.kind, first.label, body, components[-1].stream)

    # Rendering --------------------------------------------------------------

    def to_string(self, include_stream: bool = True) -> str:
        """Render the path, optionally with its ``:stream`` suffix.

        Args:
            include_stream: Whether to append the stream name when present.

        Returns:
            str: ``//label`` or ``label:`` prefix, body, then the stream suffix.
        """
        suffix = f"{STREAM_SEPARATOR}{self.stream}" if include_stream and self.stream else ""
        return f"{self.get_path_root()}{self.body}{suffix}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"DrivePath({self.to_string()!r})"

    # Shape ------------------------------------------------------------------

    @property
    def is_directory(self) -> bool:
        """Whether the body ends with ``/``."""
        return self.body.endswith(DIRECTORY_SEPARATOR)

    @property
    def is_file(self) -> bool:
        return not self.is_directory

    @property
    def is_root(self) -> bool:
        """Whether the body is ``/``, whatever the label."""
        return self.body == RELATIVE_ROOT

    @property
    def has_stream(self) -> bool:
        return self.stream is not None

    def format_as_directory(self) -> DrivePath:
        """Return this path with a trailing ``/``.

        Raises:
            StreamDirectoryConflictError: If the path carries a stream.
        """
        if self.is_directory:
            return self
        if self.has_stream:
            raise StreamDirectoryConflictError(str(self))
        return replace(self, body=self.body + DIRECTORY_SEPARATOR)

    def format_as_file(self) -> DrivePath:
        """Return this path without its trailing ``/``.

        Raises:
            RootNotAFileError: If the path is the root.
        """
        if self.is_file:
            return self
        if self.is_root:
            raise RootNotAFileError(str(self))
        return replace(self, body=self.body.rstrip(DIRECTORY_SEPARATOR))

    # Names and extensions ---------------------------------------------------

    def get_file_name(self) -> str:
        """Return the text after the last ``/``; empty for directories."""
        return self.body[self.body.rfind(DIRECTORY_SEPARATOR) + 1:]

    def get_extension(self) -> str:
        """Return the extension of the file name including its leading dot.

        Returns:
            str: Text from the last ``.`` of the file name, or an empty string
            when the name has no dot or ends with one.
        """
        name = self.get_file_name()
        period_index = name.rfind(_EXTENSION_SEPARATOR)
        if period_index < 0 or period_index == len(name) - 1:
            return ""
        return name[period_index:]

    def get_file_name_without_extension(self) -> str:
        name = self.get_file_name()
        extension = self.get_extension()
        return name[: len(name) - len(extension)]

    def has_extension(self) -> bool:
        return bool(self.get_extension())

    def change_extension(self, extension: str | None) -> DrivePath:
        """Replace everything after the last ``.`` of the body.

        The whole body is searched, not just the file name. ``extension`` is
        stripped of leading dots and re-prefixed with one; ``None`` or an empty
        string removes the current extension. A body without a dot gets the
        extension appended.

        Args:
            extension: New extension, with or without its leading dot.

        Returns:
            DrivePath: Path with the same label and stream and a new extension.
        """
        suffix = (extension or "").lstrip(_EXTENSION_SEPARATOR)
        suffix = f"{_EXTENSION_SEPARATOR}{suffix}" if suffix.strip() else ""

        body = self.body
        period_index = body.rfind(_EXTENSION_SEPARATOR)
        if period_index < 0:
            new_body = f"{body}{suffix}"
        elif period_index == len(body) - 1:
            new_body = f"{body.rstrip(_EXTENSION_SEPARATOR)}{suffix}"
        else:
            new_body = f"{body[:period_index]}{suffix}"
        return replace(self, body=new_body)

    # Navigation -------------------------------------------------------------

    def get_parent(self) -> DrivePath:
        """Return the directory containing this path.

        The label is kept and the stream dropped, since a directory cannot
        carry one.

        Raises:
            NoParentOfRootError: If the path is the root.
        """
        if self.is_root:
            raise NoParentOfRootError(str(self))
        trimmed = self.body.rstrip(DIRECTORY_SEPARATOR)
        parent_body = trimmed[: trimmed.rfind(DIRECTORY_SEPARATOR) + 1]
        return replace(self, body=parent_body, stream=None)

    def get_path_segments(self) -> list[str]:
        """Return the non-empty body segments in order."""
        return [segment for segment in self.body.split(DIRECTORY_SEPARATOR) if segment]

    def get_directory_name(self) -> str | None:
        """Return the rendered path up to, not including, the last ``/``.

        Returns:
            str | None: Directory portion with its label prefix, or ``None``
            when the only separator is the leading one.
        """
        separator_index = self.body.rfind(DIRECTORY_SEPARATOR)
        if separator_index <= 0:
            return None
        return f"{self.get_path_root()}{self.body[:separator_index]}"

    def get_path_root(self) -> str:
        """Return ``//label`` for shares, ``label:`` for partitions, else ``""``."""
        return self.kind.format_root(self.label)

    # Attachments ------------------------------------------------------------

    def with_stream(self, stream: str) -> DrivePath:
        """Attach a stream name to a file path.

        Raises:
            StreamAlreadyAttachedError: If the path already carries a stream.
            StreamDirectoryConflictError: If the path denotes a directory.
        """
        if self.has_stream:
            raise StreamAlreadyAttachedError(str(self))
        if self.is_directory:
            raise StreamDirectoryConflictError(str(self))
        return replace(self, stream=stream)

    def without_stream(self) -> DrivePath:
        if not self.has_stream:
            return self
        return replace(self, stream=None)

    def with_partition(self, label: str) -> DrivePath:
        """Anchor an unlabeled path at the partition ``label``.

        Raises:
            LabelAlreadyAttachedError: If the path already has a label.
        """
        return self._with_label(PathKind.PARTITION, label)

    def with_share(self, label: str) -> DrivePath:
        """Anchor an unlabeled path at the share ``label``.

        Raises:
            LabelAlreadyAttachedError: If the path already has a label.
        """
        return self._with_label(PathKind.SHARE, label)

    def _with_label(self, kind: PathKind, label: str) -> DrivePath:
        if self.label:
            raise LabelAlreadyAttachedError(str(self))
        return replace(self, kind=kind, label=label)

    # Equality ---------------------------------------------------------------

    def _comparison_key(self) -> tuple[PathKind, str, str, str]:
        key = (self.label, self.body, self.stream or "")
        if settings.CASE_INSENSITIVE_EQUALITY:
            key = tuple(part.casefold() for part in key)
        return (self.kind, *key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DrivePath):
            return NotImplemented
        return self._comparison_key() == other._comparison_key()

    def __hash__(self) -> int:
        return hash(self._comparison_key())


def _is_blank(part: DrivePath | str | None) -> bool:
    if part is None:
        return True
    return isinstance(part, str) and not part.strip()


def _components_of(part: DrivePath | str) -> PathComponents:
    if isinstance(part, DrivePath):
        return PathComponents(kind=part.kind, label=part.label, body=part.body, stream=part.stream)
    return split_path(part)


def _join_bodies(left: str, right: str) -> str:
    return f"{left.rstrip(DIRECTORY_SEPARATOR)}{DIRECTORY_SEPARATOR}{right.lstrip(DIRECTORY_SEPARATOR)}"


__all__ = ["DrivePath"]

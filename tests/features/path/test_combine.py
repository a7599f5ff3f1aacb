"""
Summary: Tests for joining path strings and DrivePath values.
Why: Verify separator handling plus label and stream placement when combining.
"""

from __future__ import annotations

import pytest

from drivepath.features.path.domain.drive_path import DrivePath
from drivepath.features.path.domain.errors import (
    EmptyPathError,
    LabelAlreadyAttachedError,
    StreamAlreadyAttachedError,
)
from drivepath.features.path.domain.path_kind import PathKind
from drivepath.features.path.usecases.path_strings import combine


@pytest.mark.parametrize(
    ("parts", "expected"),
    [
        (("/foo/bar.txt", "test"), "/foo/bar.txt/test"),
        (("/", "test"), "/test"),
        (("/foo/", "/bar/", "baz.txt"), "/foo/bar/baz.txt"),
        (("/foo//", "//bar"), "/foo/bar"),
        (("/foo", "", "   ", None, "bar"), "/foo/bar"),
        (("/foo", "../bar"), "/foo/../bar"),
    ],
)
def test_combine_strings(parts: tuple[str | None, ...], expected: str) -> None:
    """Neighbouring fragments meet at exactly one separator."""

    assert combine(*parts) == expected


def test_combine_strings_edge_cases() -> None:
    """No arguments give ``None``; one argument is returned unchanged."""

    assert combine() is None
    assert combine("  odd  ") == "  odd  "
    assert combine("", "  ") is None


def test_combine_values_keeps_leading_label() -> None:
    """The first operand decides the kind and label."""

    result = DrivePath.combine(DrivePath.parse("C:/foo/"), "bar", DrivePath.parse("/baz.txt"))

    assert result.kind is PathKind.PARTITION
    assert result.label == "C"
    assert str(result) == "C:/foo/bar/baz.txt"


def test_combine_values_attaches_trailing_stream() -> None:
    """The last operand supplies the stream."""

    result = DrivePath.combine("//share/docs", "report.txt:summary")

    assert str(result) == "//share/docs/report.txt:summary"
    assert result.stream == "summary"


def test_combine_values_resolves_parent_segments_across_operands() -> None:
    """Relative operands can climb out of earlier ones."""

    result = DrivePath.combine(DrivePath.parse("/a/b/"), "../c/./d/")

    assert str(result) == "/a/c/d/"
    assert result.is_directory


def test_combine_values_skips_blank_operands() -> None:
    """Blank strings and ``None`` are ignored."""

    assert str(DrivePath.combine(None, "  ", "/foo", "", "bar")) == "/foo/bar"


def test_combine_values_rejects_all_blank() -> None:
    """Something has to be combined."""

    with pytest.raises(EmptyPathError):
        _ = DrivePath.combine("", None)


def test_combine_values_rejects_early_stream() -> None:
    """Only the last operand may carry a stream."""

    with pytest.raises(StreamAlreadyAttachedError):
        _ = DrivePath.combine("/foo.txt:abcd", "bar")


def test_combine_values_rejects_late_label() -> None:
    """Only the first operand may carry a label."""

    with pytest.raises(LabelAlreadyAttachedError):
        _ = DrivePath.combine("/foo", "D:/bar")

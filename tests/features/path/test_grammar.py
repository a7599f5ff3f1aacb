"""
Summary: Tests for splitting raw path strings into kind, label, body and stream.
Why: Lock down alternative ordering and stream capture of the path grammar.
"""

from __future__ import annotations

import pytest
from pytest_mock import MockerFixture

from drivepath.features.path.domain import grammar
from drivepath.features.path.domain.errors import MalformedPathError
from drivepath.features.path.domain.grammar import is_path_rooted, split_path
from drivepath.features.path.domain.path_kind import PathKind
from drivepath.shared.path_components import PathComponents


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("\\foo\\bar.txt", PathComponents(PathKind.NONE, "", "/foo/bar.txt", None)),
        ("   /foo/bar.txt   ", PathComponents(PathKind.NONE, "", "/foo/bar.txt", None)),
        ("\\foo\\bar.txt:abcd", PathComponents(PathKind.NONE, "", "/foo/bar.txt", "abcd")),
        ("C:\\foo\\bar.txt", PathComponents(PathKind.PARTITION, "C", "/foo/bar.txt", None)),
        ("C:\\foo\\bar.txt:abcd", PathComponents(PathKind.PARTITION, "C", "/foo/bar.txt", "abcd")),
        ("\\\\QQQ\\foo\\bar.txt", PathComponents(PathKind.SHARE, "QQQ", "/foo/bar.txt", None)),
        ("\\\\QQQ\\foo\\bar.txt:abcd", PathComponents(PathKind.SHARE, "QQQ", "/foo/bar.txt", "abcd")),
        ("C:", PathComponents(PathKind.PARTITION, "C", "/", None)),
        ("C:/", PathComponents(PathKind.PARTITION, "C", "/", None)),
        ("//share", PathComponents(PathKind.SHARE, "share", "/", None)),
        ("//share/", PathComponents(PathKind.SHARE, "share", "/", None)),
    ],
)
def test_split_path(raw: str, expected: PathComponents) -> None:
    """Each grammar alternative captures its label, body and stream."""

    assert split_path(raw) == expected


def test_split_path_keeps_dot_segments() -> None:
    """Splitting leaves normalization to the normalizer."""

    assert split_path("/foo/../bar/./baz").body == "/foo/../bar/./baz"


def test_split_path_prepends_separator_to_relative_body() -> None:
    """Relative text gains a leading separator."""

    assert split_path("foo/bar").body == "/foo/bar"


def test_partition_colon_must_close_label() -> None:
    """A colon followed by a name is a stream separator, not a partition."""

    components = split_path("bar.txt:abcd")

    assert components.kind is PathKind.NONE
    assert components.label == ""
    assert components.body == "/bar.txt"
    assert components.stream == "abcd"


def test_multi_character_partition_label() -> None:
    """Partition labels are not limited to drive letters."""

    components = split_path("archive:/2024/report.pdf")

    assert components.kind is PathKind.PARTITION
    assert components.label == "archive"
    assert components.body == "/2024/report.pdf"


def test_triple_slash_is_not_a_share() -> None:
    """A share label needs at least one non-separator character."""

    components = split_path("///foo")

    assert components.kind is PathKind.NONE
    assert components.body == "///foo"


def test_empty_stream_name_is_ignored() -> None:
    """A trailing colon without a name carries no stream."""

    components = split_path("/foo/bar.txt:")

    assert components.body == "/foo/bar.txt"
    assert components.stream is None


@pytest.mark.parametrize(
    "raw",
    [
        "/foo/bar.txt:a:b",
        "/foo:bar/baz",
        "/foo/*.txt",
        "/foo/[bar]",
        "/foo/bar?.txt",
        "/foo/bar.txt:ab?cd",
    ],
)
def test_malformed_paths_raise(raw: str) -> None:
    """Invalid characters outside their structural role are rejected."""

    with pytest.raises(MalformedPathError) as exc_info:
        _ = split_path(raw)

    assert exc_info.value.path == raw


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("/foo", True),
        ("\\foo\\bar", True),
        ("//share/foo", True),
        ("C:", True),
        ("C:/foo", True),
        ("C:\\foo", True),
        ("foo", False),
        ("foo/bar", False),
        ("foo.txt:stream", False),
    ],
)
def test_is_path_rooted(raw: str, expected: bool) -> None:
    """Rooted paths start with a separator, a share or a partition label."""

    assert is_path_rooted(raw) is expected


def test_rejected_paths_are_logged(mocker: MockerFixture) -> None:
    """Rejections emit a debug record tagged with the raw path."""

    debug = mocker.patch.object(grammar.logger, "debug")

    with pytest.raises(MalformedPathError):
        _ = split_path("/foo/*.txt")

    debug.assert_called_once()
    assert debug.call_args.kwargs["extra"] == {
        "path_event": "path.parse.rejected",
        "drive_path": "/foo/*.txt",
    }

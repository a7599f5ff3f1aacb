# Path: `src/drivepath/features/path/__init__.py`
# Summary: Export path feature domain and use case symbols.
# Why: Provide a stable import surface for callers and tests.

from .domain.path_kind import PathKind
from .domain.errors import (
    DrivePathError,
    EmptyPathError,
    LabelAlreadyAttachedError,
    MalformedPathError,
    NoParentOfRootError,
    PathTraversalError,
    RootNotAFileError,
    StreamAlreadyAttachedError,
    StreamDirectoryConflictError,
)
from .domain.grammar import (
    DIRECTORY_SEPARATOR,
    INVALID_CHARACTERS,
    PARTITION_SEPARATOR,
    RELATIVE_ROOT,
    STREAM_SEPARATOR,
    split_path,
)
from .domain.normalizer import normalize_body
from .domain.drive_path import DrivePath
from .usecases.path_strings import (
    change_extension,
    combine,
    format_as_directory,
    format_as_file,
    get_directory_name,
    get_extension,
    get_file_name,
    get_file_name_without_extension,
    get_parent,
    get_path_body,
    get_path_label,
    get_path_root,
    get_path_segments,
    has_extension,
    is_formatted_as_directory,
    is_path_rooted,
    is_root,
    normalize_path,
    parse_or_none,
    paths_equal,
    to_string,
)

__all__ = [
    "PathKind",
    "DrivePath",
    "DrivePathError",
    "EmptyPathError",
    "LabelAlreadyAttachedError",
    "MalformedPathError",
    "NoParentOfRootError",
    "PathTraversalError",
    "RootNotAFileError",
    "StreamAlreadyAttachedError",
    "StreamDirectoryConflictError",
    "DIRECTORY_SEPARATOR",
    "INVALID_CHARACTERS",
    "PARTITION_SEPARATOR",
    "RELATIVE_ROOT",
    "STREAM_SEPARATOR",
    "split_path",
    "normalize_body",
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

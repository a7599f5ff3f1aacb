"""drivepath: device-agnostic paths with share/partition labels and streams."""

from drivepath.features.path import (
    DrivePath,
    DrivePathError,
    EmptyPathError,
    LabelAlreadyAttachedError,
    MalformedPathError,
    NoParentOfRootError,
    PathKind,
    PathTraversalError,
    RootNotAFileError,
    StreamAlreadyAttachedError,
    StreamDirectoryConflictError,
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

__version__ = "0.1.0"

__all__ = [
    "DrivePath",
    "PathKind",
    "DrivePathError",
    "EmptyPathError",
    "LabelAlreadyAttachedError",
    "MalformedPathError",
    "NoParentOfRootError",
    "PathTraversalError",
    "RootNotAFileError",
    "StreamAlreadyAttachedError",
    "StreamDirectoryConflictError",
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
    "__version__",
]

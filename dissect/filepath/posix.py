"""Path manipulation for POSIX paths, where ``/`` is the only path separator.

Examples:
    >>> from dissect.filepath import posix
    >>> posix.combine("home", "bob")
    'home/bob'
    >>> posix.FilePath("home") / "bob" / "file.txt"
    FilePath('home/bob/file.txt')
"""

from __future__ import annotations

from dissect.filepath import generic
from dissect.filepath.generic import normalize_ext
from dissect.filepath.helpers.specialize import bind
from dissect.filepath.platform import Platform

PLATFORM = Platform.POSIX

path_separator = generic.path_separator(PLATFORM)
path_separators = generic.path_separators(PLATFORM)
ext_separator = generic.ext_separator(PLATFORM)

is_path_separator = bind(PLATFORM, generic.is_path_separator)
is_ext_separator = bind(PLATFORM, generic.is_ext_separator)

split_extension = bind(PLATFORM, generic.split_extension)
take_extension = bind(PLATFORM, generic.take_extension)
drop_extension = bind(PLATFORM, generic.drop_extension)
replace_extension = bind(PLATFORM, generic.replace_extension)
add_extension = bind(PLATFORM, generic.add_extension)
has_extension = bind(PLATFORM, generic.has_extension)
split_extensions = bind(PLATFORM, generic.split_extensions)
take_extensions = bind(PLATFORM, generic.take_extensions)
drop_extensions = bind(PLATFORM, generic.drop_extensions)

split_file_name = bind(PLATFORM, generic.split_file_name)
take_file_name = bind(PLATFORM, generic.take_file_name)
drop_file_name = bind(PLATFORM, generic.drop_file_name)
replace_file_name = bind(PLATFORM, generic.replace_file_name)
take_base_name = bind(PLATFORM, generic.take_base_name)
replace_base_name = bind(PLATFORM, generic.replace_base_name)
take_directory = bind(PLATFORM, generic.take_directory)
replace_directory = bind(PLATFORM, generic.replace_directory)

combine = bind(PLATFORM, generic.combine)
split_path = bind(PLATFORM, generic.split_path)
join_path = bind(PLATFORM, generic.join_path)

has_trailing_path_separator = bind(PLATFORM, generic.has_trailing_path_separator)
add_trailing_path_separator = bind(PLATFORM, generic.add_trailing_path_separator)
drop_trailing_path_separator = bind(PLATFORM, generic.drop_trailing_path_separator)


class FilePath(generic.PlatformPath):
    """A POSIX path string, ``FilePath(a) / b`` is :func:`combine` ``(a, b)``."""

    __slots__ = ()

    platform = PLATFORM


__all__ = [
    "PLATFORM",
    "FilePath",
    "add_extension",
    "add_trailing_path_separator",
    "combine",
    "drop_extension",
    "drop_extensions",
    "drop_file_name",
    "drop_trailing_path_separator",
    "ext_separator",
    "has_extension",
    "has_trailing_path_separator",
    "is_ext_separator",
    "is_path_separator",
    "join_path",
    "normalize_ext",
    "path_separator",
    "path_separators",
    "replace_base_name",
    "replace_directory",
    "replace_extension",
    "replace_file_name",
    "split_extension",
    "split_extensions",
    "split_file_name",
    "split_path",
    "take_base_name",
    "take_directory",
    "take_extension",
    "take_extensions",
    "take_file_name",
]

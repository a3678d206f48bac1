"""Platform independent path manipulation functions.

Paths are plain strings and every function is a pure string transformation, parameterized by the
:class:`~dissect.filepath.platform.Platform` that decides which characters act as path separators.
Nothing in here touches the filesystem.

All functions take the platform as their first argument, including the extension functions which
behave the same on every platform. The platform specific modules (:mod:`dissect.filepath.posix`,
:mod:`dissect.filepath.windows` and :mod:`dissect.filepath.url`) expose the same functions with the
platform already applied.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import TYPE_CHECKING, ClassVar

from dissect.filepath.helpers.specialize import bind
from dissect.filepath.platform import EXT_SEPARATOR, SEPARATORS, Platform

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = [
    "PlatformPath",
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
    "specialize",
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


# Separators


def path_separator(platform: Platform) -> str:
    """Return the canonical path separator of ``platform``."""
    return SEPARATORS[platform][0]


def path_separators(platform: Platform) -> tuple[str, ...]:
    """Return all path separators recognized on ``platform``, canonical separator first."""
    return SEPARATORS[platform]


def is_path_separator(platform: Platform, value: str) -> bool:
    return value in SEPARATORS[platform]


def ext_separator(platform: Platform) -> str:
    return EXT_SEPARATOR


def is_ext_separator(platform: Platform, value: str) -> bool:
    return value == EXT_SEPARATOR


def _rfind_separator(platform: Platform, path: str) -> int:
    return max(path.rfind(sep) for sep in SEPARATORS[platform])


def _starts_with_separator(platform: Platform, path: str) -> bool:
    return path.startswith(SEPARATORS[platform])


def _ends_with_separator(platform: Platform, path: str) -> bool:
    return path.endswith(SEPARATORS[platform])


# Extensions


def normalize_ext(ext: str) -> str:
    """Prefix ``ext`` with the extension separator if it doesn't start with one already."""
    if ext.startswith(EXT_SEPARATOR):
        return ext
    return EXT_SEPARATOR + ext


def split_extension(platform: Platform, path: str) -> tuple[str, str]:
    """Split ``path`` on the last extension separator.

    The separator is searched for in the entire string, not only in the last path segment, so a dot in a
    directory name is picked up when the file name has no extension of its own. The extension keeps its
    leading dot and both parts always add up to ``path`` again.

    Examples:
        >>> split_extension(Platform.POSIX, "file/path.txt.bob.fred")
        ('file/path.txt.bob', '.fred')
        >>> split_extension(Platform.POSIX, "file")
        ('file', '')
    """
    idx = path.rfind(EXT_SEPARATOR)
    if idx == -1:
        return path, ""
    return path[:idx], path[idx:]


def take_extension(platform: Platform, path: str) -> str:
    return split_extension(platform, path)[1]


def drop_extension(platform: Platform, path: str) -> str:
    return split_extension(platform, path)[0]


def replace_extension(platform: Platform, path: str, ext: str) -> str:
    """Replace the last extension of ``path`` with ``ext``, adding a leading dot to ``ext`` if needed."""
    return drop_extension(platform, path) + normalize_ext(ext)


def add_extension(platform: Platform, path: str, ext: str) -> str:
    """Append ``ext`` to ``path``, keeping any extension that is already there.

    Examples:
        >>> add_extension(Platform.POSIX, "file.tar", "gz")
        'file.tar.gz'
    """
    return path + normalize_ext(ext)


def has_extension(platform: Platform, path: str) -> bool:
    return take_extension(platform, path) != ""


def split_extensions(platform: Platform, path: str) -> tuple[str, str]:
    """Split ``path`` on the first extension separator, so all extensions end up in the second part.

    Examples:
        >>> split_extensions(Platform.POSIX, "file.tar.gz")
        ('file', '.tar.gz')
    """
    idx = path.find(EXT_SEPARATOR)
    if idx == -1:
        return path, ""
    return path[:idx], path[idx:]


def take_extensions(platform: Platform, path: str) -> str:
    return split_extensions(platform, path)[1]


def drop_extensions(platform: Platform, path: str) -> str:
    return split_extensions(platform, path)[0]


# File names and directories


def split_file_name(platform: Platform, path: str) -> tuple[str, str]:
    """Split ``path`` after its last path separator.

    The directory part keeps its trailing separator, or is empty if ``path`` contains no separator at
    all, so both parts always add up to ``path`` again.

    Examples:
        >>> split_file_name(Platform.POSIX, "/directory/file.ext")
        ('/directory/', 'file.ext')
        >>> split_file_name(Platform.WINDOWS, "C:\\\\dir/file")
        ('C:\\\\dir/', 'file')
    """
    idx = _rfind_separator(platform, path) + 1
    return path[:idx], path[idx:]


def take_file_name(platform: Platform, path: str) -> str:
    return split_file_name(platform, path)[1]


def drop_file_name(platform: Platform, path: str) -> str:
    return split_file_name(platform, path)[0]


def replace_file_name(platform: Platform, path: str, name: str) -> str:
    return drop_file_name(platform, path) + name


def take_base_name(platform: Platform, path: str) -> str:
    """Return the file name of ``path`` without its last extension."""
    return drop_extension(platform, take_file_name(platform, path))


def replace_base_name(platform: Platform, path: str, name: str) -> str:
    """Replace the file name of ``path`` with ``name`` while keeping the directory and last extension.

    Examples:
        >>> replace_base_name(Platform.POSIX, "/dave/fred/bob.gz.tar", "new")
        '/dave/fred/new.tar'
    """
    directory, filename = split_file_name(platform, path)
    _, ext = split_extension(platform, filename)
    return directory + name + ext


def take_directory(platform: Platform, path: str) -> str:
    """Return the directory of ``path`` without a trailing separator, unless the directory is the root."""
    return drop_trailing_path_separator(platform, drop_file_name(platform, path))


def replace_directory(platform: Platform, path: str, directory: str) -> str:
    return combine(platform, directory, take_file_name(platform, path))


def combine(platform: Platform, path1: str, path2: str) -> str:
    """Combine two paths with the canonical path separator of ``platform``.

    If ``path2`` starts with a path separator it is considered absolute and returned as is. A separator is
    only inserted when ``path1`` doesn't already end with one. Drive letters are not recognized as absolute.

    Examples:
        >>> combine(Platform.POSIX, "home", "bob")
        'home/bob'
        >>> combine(Platform.POSIX, "home", "/bob")
        '/bob'
        >>> combine(Platform.WINDOWS, "C:\\\\foo", "bar")
        'C:\\\\foo\\\\bar'
    """
    if _starts_with_separator(platform, path2) or not path1:
        return path2

    if not path2:
        return path1

    if _ends_with_separator(platform, path1):
        return path1 + path2

    return path1 + path_separator(platform) + path2


def split_path(platform: Platform, path: str) -> list[str]:
    """Split ``path`` into its segments, each keeping the separators that follow it.

    Leading separators form a single root segment. Runs of separators are kept as is, so joining the
    segments gives back the original path.

    Examples:
        >>> split_path(Platform.POSIX, "/directory/file.ext")
        ['/', 'directory/', 'file.ext']
        >>> split_path(Platform.POSIX, "test//item/")
        ['test//', 'item/']
        >>> split_path(Platform.POSIX, "")
        []
    """
    separators = SEPARATORS[platform]
    segments = []

    idx = 0
    length = len(path)
    while idx < length and path[idx] in separators:
        idx += 1

    if idx:
        segments.append(path[:idx])

    start = idx
    while start < length:
        end = start
        while end < length and path[end] not in separators:
            end += 1
        while end < length and path[end] in separators:
            end += 1
        segments.append(path[start:end])
        start = end

    return segments


def join_path(platform: Platform, segments: Iterable[str]) -> str:
    """Join path segments by folding :func:`combine` from the right.

    An absolute segment therefore discards all segments to the left of it.
    """
    result = ""
    for segment in reversed(list(segments)):
        result = combine(platform, segment, result)
    return result


def has_trailing_path_separator(platform: Platform, path: str) -> bool:
    """Return whether ``path`` ends with a path separator. A bare separator (the root) does not count."""
    return _ends_with_separator(platform, path) and path not in SEPARATORS[platform]


def add_trailing_path_separator(platform: Platform, path: str) -> str:
    if has_trailing_path_separator(platform, path):
        return path
    return path + path_separator(platform)


def drop_trailing_path_separator(platform: Platform, path: str) -> str:
    """Remove the trailing path separators from ``path``.

    A path consisting only of separators is reduced to a single separator, which makes the root a fixed
    point of this function.

    Examples:
        >>> drop_trailing_path_separator(Platform.POSIX, "file/test//")
        'file/test'
        >>> drop_trailing_path_separator(Platform.POSIX, "/")
        '/'
    """
    if not has_trailing_path_separator(platform, path):
        return path

    separators = SEPARATORS[platform]
    end = len(path)
    while end and path[end - 1] in separators:
        end -= 1

    return path[:end] or path[-1]


_PLATFORM_FUNCTIONS = (
    is_path_separator,
    is_ext_separator,
    split_extension,
    take_extension,
    drop_extension,
    replace_extension,
    add_extension,
    has_extension,
    split_extensions,
    take_extensions,
    drop_extensions,
    split_file_name,
    take_file_name,
    drop_file_name,
    replace_file_name,
    take_base_name,
    replace_base_name,
    take_directory,
    replace_directory,
    combine,
    split_path,
    join_path,
    has_trailing_path_separator,
    add_trailing_path_separator,
    drop_trailing_path_separator,
)


def specialize(platform: Platform) -> SimpleNamespace:
    """Return a namespace with every path function bound to ``platform``.

    Useful when the platform is only known at runtime. The separator accessors are included as values.

    Examples:
        >>> ops = specialize(Platform.WINDOWS)
        >>> ops.combine("C:\\\\foo", "bar")
        'C:\\\\foo\\\\bar'
    """
    namespace = SimpleNamespace(
        platform=platform,
        path_separator=path_separator(platform),
        path_separators=path_separators(platform),
        ext_separator=ext_separator(platform),
        normalize_ext=normalize_ext,
    )
    for func in _PLATFORM_FUNCTIONS:
        setattr(namespace, func.__name__, bind(platform, func))
    return namespace


class PlatformPath(str):
    """A path string that combines with ``/`` according to the separator rules of its platform.

    Subclasses set :attr:`platform`, see :class:`dissect.filepath.posix.FilePath` and friends.

    Examples:
        >>> from dissect.filepath.posix import FilePath
        >>> FilePath("home") / "bob"
        FilePath('home/bob')
    """

    __slots__ = ()

    platform: ClassVar[Platform]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str.__repr__(self)})"

    def __truediv__(self, other: str) -> PlatformPath:
        if not isinstance(other, str):
            return NotImplemented
        return type(self)(combine(self.platform, str(self), str(other)))

    def __rtruediv__(self, other: str) -> PlatformPath:
        if not isinstance(other, str):
            return NotImplemented
        return type(self)(combine(self.platform, str(other), str(self)))

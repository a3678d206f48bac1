"""Platforms and their separator conventions."""

from __future__ import annotations

from enum import Enum

from dissect.filepath.exceptions import PlatformError

EXT_SEPARATOR = "."


class Platform(str, Enum):
    """The closed set of platforms a path can be interpreted for."""

    POSIX = "posix"
    WINDOWS = "windows"
    URL = "url"

    def __str__(self) -> str:
        return self.value


# The first separator of each entry is the canonical one, used when joining
SEPARATORS: dict[Platform, tuple[str, ...]] = {
    Platform.POSIX: ("/",),
    Platform.WINDOWS: ("\\", "/"),
    Platform.URL: ("/",),
}


def platform_from_name(name: str | Platform) -> Platform:
    """Resolve a platform name (e.g. ``"Windows"``) to a :class:`Platform`.

    Raises:
        PlatformError: If the name does not refer to a known platform.
    """
    if isinstance(name, Platform):
        return name

    try:
        return Platform(name.strip().lower())
    except (AttributeError, ValueError) as e:
        known = ", ".join(p.value for p in Platform)
        raise PlatformError(f"Unknown platform {name!r}, expected one of: {known}", cause=e)

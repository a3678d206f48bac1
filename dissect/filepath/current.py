"""Detection of the platform the current process runs on."""

from __future__ import annotations

import logging
import os
import platform
import threading

from dissect.filepath.exceptions import PlatformError
from dissect.filepath.platform import Platform, platform_from_name

log = logging.getLogger(__name__)

PLATFORM_ENV = "DISSECT_FILEPATH_PLATFORM"

_current: Platform | None = None
_lock = threading.Lock()


def detect_platform(identifier: str | None) -> Platform:
    """Map a host platform identifier, such as the result of :func:`platform.system`, to a :class:`Platform`.

    Identifiers starting with ``Win`` are Windows, anything else (including no identifier at all) is POSIX.
    """
    if identifier and identifier.startswith("Win"):
        return Platform.WINDOWS
    return Platform.POSIX


def _host_identifier() -> str:
    try:
        return platform.system()
    except OSError as e:
        log.debug("Unable to query the host platform identifier", exc_info=e)
        return ""


def _detect() -> Platform:
    if override := os.getenv(PLATFORM_ENV):
        try:
            result = platform_from_name(override)
        except PlatformError as e:
            log.warning("Ignoring %s=%r: %s", PLATFORM_ENV, override, e)
        else:
            log.debug("Using platform %s from %s", result, PLATFORM_ENV)
            return result

    identifier = _host_identifier()
    if not identifier:
        log.debug("No host platform identifier available, falling back to %s", Platform.POSIX)

    result = detect_platform(identifier)
    log.debug("Detected platform %s (host identifier %r)", result, identifier)
    return result


def current_platform() -> Platform:
    """Return the platform of the current process.

    The host is only inspected on the first call, the result is kept for the lifetime of the process. The
    ``DISSECT_FILEPATH_PLATFORM`` environment variable can be used to force a platform.
    """
    global _current

    if _current is None:
        with _lock:
            if _current is None:
                _current = _detect()

    return _current


def _reset() -> None:
    """Forget the detected platform. Only meant for tests."""
    global _current

    with _lock:
        _current = None

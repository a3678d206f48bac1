import logging
import os

from dissect.filepath.current import current_platform
from dissect.filepath.exceptions import Error, PlatformError
from dissect.filepath.platform import Platform, platform_from_name

LOG_LEVEL_ENV = "DISSECT_LOG_FILEPATH"

log = logging.getLogger(__name__)


def _set_log_level() -> None:
    level = os.getenv(LOG_LEVEL_ENV, "WARNING")
    try:
        log.setLevel(level)
    except ValueError:
        log.setLevel(logging.WARNING)
        log.warning("Ignoring %s=%r: unknown log level", LOG_LEVEL_ENV, level)


if not log.root.handlers:
    _set_log_level()

__all__ = [
    "Error",
    "Platform",
    "PlatformError",
    "current_platform",
    "platform_from_name",
]

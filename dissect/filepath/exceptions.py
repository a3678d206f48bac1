from __future__ import annotations


class Error(Exception):
    """Generic dissect.filepath error"""

    def __init__(self, message: str | None = None, cause: Exception | None = None):
        super().__init__(message)
        self.__cause__ = cause


class PlatformError(Error, ValueError):
    """An unknown or unsupported platform was requested."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from dissect.filepath.platform import Platform


def bind(platform: Platform, func: Callable[..., Any]) -> functools.partial:
    """Bind ``platform`` as the first argument of ``func``, keeping its name and docstring."""
    bound = functools.partial(func, platform)
    bound.__name__ = func.__name__
    bound.__qualname__ = func.__qualname__
    bound.__module__ = func.__module__
    bound.__doc__ = func.__doc__
    return bound

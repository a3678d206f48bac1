from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dissect.filepath import current

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def fresh_platform(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Forget any previously detected platform and make sure the environment doesn't force one."""
    monkeypatch.delenv(current.PLATFORM_ENV, raising=False)
    current._reset()
    yield
    current._reset()

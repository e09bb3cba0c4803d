from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

import pytest

from pastebox.paste import NamingPolicy


class StubGenerator:
    """Returns queued names in order, then ``None``."""

    def __init__(self, names: Iterable[Optional[str]] = ()):
        self.names: List[Optional[str]] = list(names)
        self.calls = 0

    def generate(self) -> Optional[str]:
        self.calls += 1
        return self.names.pop(0) if self.names else None


@pytest.fixture
def upload_root(tmp_path: Path) -> Path:
    root = tmp_path / "upload"
    (root / "url").mkdir(parents=True)
    return root


@pytest.fixture
def make_policy():
    def _make(*names: Optional[str], default_extension: str = "txt") -> NamingPolicy:
        return NamingPolicy(default_extension=default_extension, generator=StubGenerator(names))

    return _make

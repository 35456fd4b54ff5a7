from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping, Union

import pytest


@pytest.fixture
def write_artifacts(tmp_path: Path) -> Callable[[Mapping[str, Union[str, bytes]]], Path]:
    """Write `name -> content` entries under a fresh build directory and return it."""

    root = tmp_path / "dist"
    root.mkdir()

    def _write(files: Mapping[str, Union[str, bytes]]) -> Path:
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _write

"""Artifact sources and sinks used to drive header generation."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Protocol, Sequence, Tuple

from .models import Artifact, RenderedHeader

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    "__pycache__",
}


class ArtifactSource(Protocol):
    """Supplies the artifacts of a build in a stable order."""

    def list_artifacts(self) -> Iterable[Artifact]:
        """Return every artifact available for header generation."""


class ArtifactSink(Protocol):
    """Receives generated headers."""

    def emit(self, name: str, text: str) -> None:
        """Store ``text`` under the derived artifact ``name``."""


class MemorySource:
    """Serves artifacts from an in-memory sequence."""

    def __init__(self, artifacts: Iterable[Artifact]) -> None:
        self._artifacts = list(artifacts)

    def list_artifacts(self) -> List[Artifact]:
        return list(self._artifacts)


class DirectorySource:
    """Reads every file below a build output directory as a binary artifact.

    Names are POSIX paths relative to ``root`` and are yielded in sorted order.
    Files ending in one of ``exclude_suffixes`` are skipped, which keeps headers
    from a previous run from being embedded again.
    """

    def __init__(self, root: Path | str, *, exclude_suffixes: Sequence[str] = ()) -> None:
        self.root = Path(root).expanduser().resolve()
        self.exclude_suffixes: Tuple[str, ...] = tuple(exclude_suffixes)

    def list_artifacts(self) -> Iterator[Artifact]:
        if not self.root.is_dir():
            raise FileNotFoundError(f"Artifact directory not found: {self.root}")
        for name in self._list_names():
            yield Artifact(name=name, content=(self.root / name).read_bytes())

    def _list_names(self) -> List[str]:
        names: List[str] = []
        for dirpath, dirnames, filenames in os.walk(self.root):
            dirnames[:] = [d for d in dirnames if d not in _EXCLUDED_DIRS]
            base = Path(dirpath)
            for filename in filenames:
                if self.exclude_suffixes and filename.endswith(self.exclude_suffixes):
                    continue
                names.append((base / filename).relative_to(self.root).as_posix())
        return sorted(names)


class MemorySink:
    """Collects emitted headers in order."""

    def __init__(self) -> None:
        self.headers: List[RenderedHeader] = []

    def emit(self, name: str, text: str) -> None:
        self.headers.append(RenderedHeader(name=name, text=text))


class DirectorySink:
    """Writes each emitted header below ``root``."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root).expanduser().resolve()
        self.written: List[Path] = []

    def emit(self, name: str, text: str) -> None:
        target = self.root / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8", newline="\n")
        self.written.append(target)


__all__ = [
    "ArtifactSink",
    "ArtifactSource",
    "DirectorySink",
    "DirectorySource",
    "MemorySink",
    "MemorySource",
]

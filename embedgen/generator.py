"""Per-artifact header generation and the driver loop around it."""

from __future__ import annotations

from typing import List, Optional

from .artifacts import ArtifactSink, ArtifactSource
from .composer import compose_header
from .emitters import render_body
from .encoding import encode_content
from .logging import get_logger
from .models import Artifact, RenderedHeader
from .options import Options


def render_file(options: Options, file_name: str, data: bytes) -> str:
    """Render the complete header text for one encoded artifact."""
    return compose_header(options, render_body(options, file_name, data))


class HeaderGenerator:
    """Turns artifacts into embeddable C/C++ headers using fixed options."""

    def __init__(self, options: Options) -> None:
        self.options = options
        self.logger = get_logger("generator")

    def header_name(self, artifact_name: str) -> str:
        return f"{artifact_name}{self.options.header_extension}"

    def render(self, artifact: Artifact) -> Optional[RenderedHeader]:
        """Return the header for ``artifact``, or ``None`` when the filter rejects it."""
        if not self.options.filter(artifact.name):
            self.logger.debug("Skipping %s (filtered)", artifact.name)
            return None
        data = encode_content(artifact.content)
        text = render_file(self.options, artifact.name, data)
        return RenderedHeader(name=self.header_name(artifact.name), text=text)

    def run(self, source: ArtifactSource, sink: ArtifactSink) -> List[RenderedHeader]:
        """Render every artifact from ``source`` in order and emit accepted headers."""
        rendered: List[RenderedHeader] = []
        skipped = 0
        for artifact in source.list_artifacts():
            header = self.render(artifact)
            if header is None:
                skipped += 1
                continue
            sink.emit(header.name, header.text)
            self.logger.debug("Emitted %s", header.name)
            rendered.append(header)
        self.logger.info(
            "Generated %d %s header(s), skipped %d",
            len(rendered),
            self.options.language,
            skipped,
        )
        return rendered


__all__ = ["HeaderGenerator", "render_file"]

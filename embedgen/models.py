"""Core data models shared across embedgen components."""

from dataclasses import dataclass
from typing import Union

Content = Union[str, bytes]


@dataclass(frozen=True)
class Artifact:
    """A named unit of build output, either text or raw bytes."""

    name: str
    content: Content


@dataclass(frozen=True)
class RenderedHeader:
    """Header text produced for one accepted artifact."""

    name: str
    text: str

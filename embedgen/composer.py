"""Assembly of the final header text."""

from __future__ import annotations

from typing import List

from .options import BaseOptions


def compose_header(options: BaseOptions, body: str) -> str:
    """Join prepend lines, ``#include`` directives and the emitted body.

    Include values are inserted as given, so callers supply the ``<...>`` or
    ``"..."`` delimiters themselves.
    """
    lines: List[str] = list(options.prepend)
    lines.extend(f"#include {header}" for header in options.include)
    lines.append(body)
    return "\n".join(lines)


__all__ = ["compose_header"]

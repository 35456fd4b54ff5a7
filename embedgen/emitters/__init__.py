"""Language emitters and dispatch by options variant."""

from __future__ import annotations

from ..options import COptions, CppOptions, Options
from .c import render_c_embed
from .cpp import render_cpp_embed, render_cpp_namespace


def render_body(options: Options, file_name: str, data: bytes) -> str:
    """Render the declarations for ``data`` in the language selected by ``options``."""
    if isinstance(options, CppOptions):
        return render_cpp_embed(options, file_name, data)
    if isinstance(options, COptions):
        return render_c_embed(options, file_name, data)
    raise TypeError(f"Unsupported options type: {type(options).__name__}")


__all__ = ["render_body", "render_c_embed", "render_cpp_embed", "render_cpp_namespace"]

"""C++ declarations wrapped in namespace blocks."""

from __future__ import annotations

from ..encoding import render_data
from ..options import CppOptions


def render_cpp_namespace(name: str, content: str) -> str:
    return f"namespace {name} {{\n{content}\n}}"


def render_cpp_embed(options: CppOptions, file_name: str, data: bytes) -> str:
    """Return ``data``/``length`` declarations inside the file's namespace.

    With a top-level namespace the ``c++17`` style emits a single
    ``namespace top::file`` block; ``legacy`` nests two blocks.
    """
    qualifier = "constexpr " if options.constexpr else ""
    body = "\n".join(
        [
            f"{qualifier}const {options.data_type} data[] = {render_data(data)};",
            f"{qualifier}const {options.length_type} length = {len(data)};",
        ]
    )

    file_namespace = options.namespace(file_name)
    top = options.top_level_namespace
    if not top:
        return render_cpp_namespace(file_namespace, body)
    if options.top_level_namespace_style == "c++17":
        return render_cpp_namespace(f"{top}::{file_namespace}", body)
    return render_cpp_namespace(top, render_cpp_namespace(file_namespace, body))


__all__ = ["render_cpp_embed", "render_cpp_namespace"]

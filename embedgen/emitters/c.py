"""Flat C declarations for an embedded artifact."""

from __future__ import annotations

from ..encoding import render_data
from ..options import COptions


def render_c_embed(options: COptions, file_name: str, data: bytes) -> str:
    """Return the ``<token>_data`` / ``<token>_length`` declaration pair.

    The top-level namespace, when set, is folded into the token as a prefix:
    ``proj`` and ``main.js`` give ``proj_main_js_data``.
    """
    prefix = f"{options.top_level_namespace}_" if options.top_level_namespace else ""
    token = f"{prefix}{options.namespace(file_name)}"
    return "\n".join(
        [
            f"const {options.data_type} {token}_data[] = {render_data(data)};",
            f"const {options.length_type} {token}_length = {len(data)};",
        ]
    )


__all__ = ["render_c_embed"]

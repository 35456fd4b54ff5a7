"""Byte encoding of artifact content and its C initializer literal."""

from __future__ import annotations

from typing import Union

TEXT_ENCODING = "utf-8"


def encode_content(content: Union[str, bytes, bytearray, memoryview]) -> bytes:
    """Return the bytes to embed: UTF-8 for text, unchanged for binary content."""
    if isinstance(content, str):
        return content.encode(TEXT_ENCODING)
    return bytes(content)


def render_data(data: bytes) -> str:
    """Render bytes as a brace-delimited decimal initializer, e.g. ``{97,98,99}``."""
    return "{" + ",".join(str(byte) for byte in data) + "}"


__all__ = ["TEXT_ENCODING", "encode_content", "render_data"]

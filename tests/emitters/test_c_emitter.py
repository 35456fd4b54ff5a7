"""Tests for the flat C emitter."""

from __future__ import annotations

from embedgen.emitters import render_body
from embedgen.emitters.c import render_c_embed
from embedgen.options import COptions, resolve_options


def test_c_body_without_top_level_namespace() -> None:
    options = resolve_options({"language": "c"})
    assert isinstance(options, COptions)

    body = render_c_embed(options, "main.js", b"abc")

    assert body == (
        "const unsigned char main_js_data[] = {97,98,99};\n"
        "const unsigned int main_js_length = 3;"
    )


def test_c_body_prefixes_top_level_namespace() -> None:
    options = resolve_options({"language": "c", "top_level_namespace": "proj"})

    body = render_body(options, "main.js", b"")

    assert body == (
        "const unsigned char proj_main_js_data[] = {};\n"
        "const unsigned int proj_main_js_length = 0;"
    )


def test_c_body_treats_empty_top_level_namespace_as_absent() -> None:
    options = resolve_options({"language": "c", "top_level_namespace": ""})

    assert render_body(options, "a.bin", b"\x01").startswith("const unsigned char a_bin_data[]")


def test_c_body_uses_configured_types_and_namespace() -> None:
    options = resolve_options(
        {
            "language": "c",
            "data_type": "uint8_t",
            "length_type": "size_t",
            "namespace": lambda name: "asset_" + name.split(".")[0],
        }
    )

    body = render_body(options, "logo.png", b"\x00\xff")

    assert body == (
        "const uint8_t asset_logo_data[] = {0,255};\n"
        "const size_t asset_logo_length = 2;"
    )

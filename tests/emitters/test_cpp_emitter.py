"""Tests for the namespaced C++ emitter."""

from __future__ import annotations

import pytest

from embedgen.emitters import render_body
from embedgen.emitters.cpp import render_cpp_embed, render_cpp_namespace
from embedgen.options import CppOptions, resolve_options

_CONSTEXPR_BODY = (
    "constexpr const unsigned char data[] = {};\n"
    "constexpr const unsigned int length = 0;"
)


def _options(**overrides: object) -> CppOptions:
    options = resolve_options({"language": "c++", **overrides})
    assert isinstance(options, CppOptions)
    return options


def test_cpp17_style_combines_namespaces() -> None:
    options = _options(top_level_namespace="proj")

    body = render_cpp_embed(options, "main.js", b"")

    assert body == f"namespace proj::main_js {{\n{_CONSTEXPR_BODY}\n}}"


def test_legacy_style_nests_namespaces() -> None:
    options = _options(top_level_namespace="proj", top_level_namespace_style="legacy")

    body = render_cpp_embed(options, "main.js", b"")

    assert body == f"namespace proj {{\nnamespace main_js {{\n{_CONSTEXPR_BODY}\n}}\n}}"


@pytest.mark.parametrize("style", ["c++17", "legacy"])
def test_style_ignored_without_top_level_namespace(style: str) -> None:
    options = _options(top_level_namespace_style=style)

    body = render_body(options, "main.js", b"")

    assert body == f"namespace main_js {{\n{_CONSTEXPR_BODY}\n}}"


def test_without_constexpr_uses_const_only() -> None:
    options = _options(constexpr=False)

    body = render_body(options, "main.js", b"abc")

    assert body == (
        "namespace main_js {\n"
        "const unsigned char data[] = {97,98,99};\n"
        "const unsigned int length = 3;\n"
        "}"
    )


def test_custom_types_are_used() -> None:
    options = _options(data_type="std::uint8_t", length_type="std::size_t")

    body = render_body(options, "x", b"\x02")

    assert "constexpr const std::uint8_t data[] = {2};" in body
    assert "constexpr const std::size_t length = 1;" in body


def test_render_cpp_namespace_wraps_without_indentation() -> None:
    assert render_cpp_namespace("a", "int x;") == "namespace a {\nint x;\n}"


def test_braces_balance_in_every_shape() -> None:
    for style in ("c++17", "legacy"):
        for top in (None, "proj"):
            body = render_body(_options(top_level_namespace=top, top_level_namespace_style=style), "f", b"\x01")
            assert body.count("{") == body.count("}")

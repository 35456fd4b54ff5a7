"""Option types and the resolver that fills in defaults."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Literal, Mapping, Optional, Protocol, Tuple, Union

from .logging import get_logger

LANGUAGE_C = "c"
LANGUAGE_CPP = "c++"

NamespaceStyle = Literal["legacy", "c++17"]

_NON_WORD = re.compile(r"[^\w\d]+", re.ASCII)
_LEADING_DIGIT = re.compile(r"^\d", re.ASCII)

# camelCase spellings accepted alongside the dataclass field names.
_KEY_ALIASES = {
    "topLevelNamespace": "top_level_namespace",
    "topLevelNamespaceStyle": "top_level_namespace_style",
    "dataType": "data_type",
    "lengthType": "length_type",
    "headerExtension": "header_extension",
}

_GENERAL_KEYS = (
    "top_level_namespace",
    "namespace",
    "prepend",
    "include",
    "data_type",
    "length_type",
    "header_extension",
    "filter",
)
_CPP_KEYS = ("top_level_namespace_style", "constexpr")

logger = get_logger("options")


class NamespaceStrategy(Protocol):
    """Maps a file name to the identifier fragment used for its symbols."""

    def __call__(self, file_name: str) -> str:
        ...


class FileFilter(Protocol):
    """Decides whether a file gets a header."""

    def __call__(self, file_name: str) -> bool:
        ...


def default_namespace(file_name: str) -> str:
    """Sanitize a file name into a lower-case identifier.

    Every run of non-alphanumeric characters becomes a single underscore and a
    leading digit is prefixed with an underscore, so ``"1 a-b.c"`` maps to
    ``"_1_a_b_c"``.
    """
    token = _NON_WORD.sub("_", file_name)
    token = _LEADING_DIGIT.sub(r"_\g<0>", token)
    return token.lower()


def accept_all(file_name: str) -> bool:
    return True


def coerce_bool(value: Any) -> Optional[bool]:
    """Interpret booleans, integers and yes/no style strings; anything else is ``None``."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


@dataclass(frozen=True)
class BaseOptions:
    """Settings shared by both language variants."""

    top_level_namespace: Optional[str] = None
    namespace: NamespaceStrategy = default_namespace
    prepend: Tuple[str, ...] = ()
    include: Tuple[str, ...] = ()
    data_type: str = "unsigned char"
    length_type: str = "unsigned int"
    header_extension: str = ".h"
    filter: FileFilter = accept_all


@dataclass(frozen=True)
class COptions(BaseOptions):
    """Flat C output: ``<token>_data`` / ``<token>_length``."""

    language: ClassVar[str] = LANGUAGE_C


@dataclass(frozen=True)
class CppOptions(BaseOptions):
    """C++ output nested in namespaces."""

    language: ClassVar[str] = LANGUAGE_CPP

    top_level_namespace_style: NamespaceStyle = "c++17"
    constexpr: bool = True


Options = Union[COptions, CppOptions]


def resolve_options(partial: Mapping[str, Any] | None = None, **overrides: Any) -> Options:
    """Merge user options with language defaults into a complete ``Options``.

    Keys may use either the field names or their camelCase spelling. ``None``
    values are treated as absent. An unknown or missing ``language`` falls back
    to C without raising.
    """
    values = _normalise_keys({**(partial or {}), **overrides})
    language = values.pop("language", None)

    general = _collect(values, _GENERAL_KEYS)
    if language == LANGUAGE_CPP:
        cpp = _collect(values, _CPP_KEYS)
        if "constexpr" in cpp:
            flag = coerce_bool(cpp.pop("constexpr"))
            if flag is not None:
                cpp["constexpr"] = flag
        return CppOptions(**general, **cpp)

    if language not in (None, LANGUAGE_C):
        logger.warning("Unsupported language %r; generating C headers instead", language)
    ignored = sorted(key for key in _CPP_KEYS if values.get(key) is not None)
    if ignored:
        logger.debug("Ignoring C++-only options for C output: %s", ", ".join(ignored))
    return COptions(**general)


def _normalise_keys(values: Mapping[str, Any]) -> Dict[str, Any]:
    normalised: Dict[str, Any] = {}
    for key, value in values.items():
        target = _KEY_ALIASES.get(key, key)
        if value is None and target in normalised:
            continue
        normalised[target] = value
    return normalised


def _collect(values: Mapping[str, Any], keys: Tuple[str, ...]) -> Dict[str, Any]:
    collected: Dict[str, Any] = {}
    for key in keys:
        value = values.get(key)
        if value is None:
            continue
        if key in ("prepend", "include"):
            value = (value,) if isinstance(value, str) else tuple(value)
        collected[key] = value
    return collected


__all__ = [
    "BaseOptions",
    "COptions",
    "CppOptions",
    "FileFilter",
    "LANGUAGE_C",
    "LANGUAGE_CPP",
    "NamespaceStrategy",
    "NamespaceStyle",
    "Options",
    "accept_all",
    "coerce_bool",
    "default_namespace",
    "resolve_options",
]

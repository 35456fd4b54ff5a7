"""Configuration loading for embedgen (.embedgen.yml)."""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

import yaml

from .options import FileFilter, coerce_bool

CONFIG_FILENAME = ".embedgen.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class FilterConfig:
    """Glob patterns selecting which artifacts get headers."""

    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)


@dataclass
class EmbedConfig:
    """Represents the settings defined in .embedgen.yml."""

    root: Path
    language: Optional[str] = None
    top_level_namespace: Optional[str] = None
    top_level_namespace_style: Optional[str] = None
    constexpr: Optional[bool] = None
    namespace: Optional[str] = None
    prepend: List[str] = field(default_factory=list)
    include: List[str] = field(default_factory=list)
    data_type: Optional[str] = None
    length_type: Optional[str] = None
    header_extension: Optional[str] = None
    filter: FilterConfig = field(default_factory=FilterConfig)

    def to_partial(self) -> Dict[str, Any]:
        """Return the options mapping understood by ``resolve_options``.

        Unset values are omitted so the resolver's defaults apply.
        """
        partial: Dict[str, Any] = {
            "language": self.language,
            "top_level_namespace": self.top_level_namespace,
            "top_level_namespace_style": self.top_level_namespace_style,
            "constexpr": self.constexpr,
            "data_type": self.data_type,
            "length_type": self.length_type,
            "header_extension": self.header_extension,
        }
        if self.prepend:
            partial["prepend"] = list(self.prepend)
        if self.include:
            partial["include"] = list(self.include)
        if self.namespace:
            partial["namespace"] = load_strategy(self.namespace)
        if self.filter.include or self.filter.exclude:
            partial["filter"] = glob_filter(self.filter.include, self.filter.exclude)
        return {key: value for key, value in partial.items() if value is not None}


def load_config(config_path: Path) -> EmbedConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return EmbedConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    filter_data = _as_dict(data.get("filter"))
    filters = FilterConfig(
        include=_as_str_list(filter_data.get("include")),
        exclude=_as_str_list(filter_data.get("exclude")),
    )

    return EmbedConfig(
        root=root,
        language=_as_str(data.get("language")),
        top_level_namespace=_as_str(data.get("top_level_namespace")),
        top_level_namespace_style=_as_str(data.get("top_level_namespace_style")),
        constexpr=coerce_bool(data.get("constexpr")),
        namespace=_as_str(data.get("namespace")),
        prepend=_as_str_list(data.get("prepend")),
        include=_as_str_list(data.get("include")),
        data_type=_as_str(data.get("data_type")),
        length_type=_as_str(data.get("length_type")),
        header_extension=_as_str(data.get("header_extension")),
        filter=filters,
    )


def load_strategy(reference: str) -> Callable[[str], Any]:
    """Import a callable given as ``"package.module:attribute"``."""
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise ConfigError(f"Expected 'module:attribute' reference, got {reference!r}")
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigError(f"Cannot import module '{module_name}': {exc}") from exc
    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ConfigError(f"'{module_name}' has no attribute '{attr_path}'") from exc
    if not callable(target):
        raise ConfigError(f"'{reference}' is not callable")
    return target


def glob_filter(include: Sequence[str] = (), exclude: Sequence[str] = ()) -> FileFilter:
    """Build a filter from glob patterns; exclusions win over inclusions."""
    include_patterns = tuple(include)
    exclude_patterns = tuple(exclude)

    def _matches(file_name: str) -> bool:
        if any(fnmatchcase(file_name, pattern) for pattern in exclude_patterns):
            return False
        if not include_patterns:
            return True
        return any(fnmatchcase(file_name, pattern) for pattern in include_patterns)

    return _matches


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "EmbedConfig",
    "FilterConfig",
    "glob_filter",
    "load_config",
    "load_strategy",
]

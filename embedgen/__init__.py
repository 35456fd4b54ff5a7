"""Embed build artifacts into C and C++ headers."""

from .encoding import encode_content, render_data
from .generator import HeaderGenerator, render_file
from .models import Artifact, RenderedHeader
from .options import COptions, CppOptions, Options, default_namespace, resolve_options

__all__ = [
    "Artifact",
    "COptions",
    "CppOptions",
    "HeaderGenerator",
    "Options",
    "RenderedHeader",
    "default_namespace",
    "encode_content",
    "render_data",
    "render_file",
    "resolve_options",
]

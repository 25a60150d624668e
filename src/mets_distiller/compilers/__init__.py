"""Compilers for writing object metadata manifests."""

from .compiler import Compiler
from .layouts import CurrentLayout, LegacyLayout, ManifestLayout, get_layout
from .manifest_compiler import ManifestCompiler, output_path

__all__ = [
    "Compiler",
    "CurrentLayout",
    "LegacyLayout",
    "ManifestCompiler",
    "ManifestLayout",
    "get_layout",
    "output_path",
]

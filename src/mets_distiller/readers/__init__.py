"""Readers for package descriptions."""

from .mets_reader import METSReader
from .reader import Reader

__all__ = ["METSReader", "Reader"]

"""Correlation engine joining METS subtrees by identifier."""

from .assembler import ManifestAssembler
from .descriptive import DescriptiveIndex, to_descriptive_md
from .file_locations import FileLocation, index_by_admid, resolve_file_locations
from .provenance import (
    Provenance,
    extract_provenance,
    find_tool_event,
    lookup_scan_info,
    parse_tool_detail,
)
from .struct_map import StructMapIndex, package_name, select_struct_map, walk_struct_map

__all__ = [
    "DescriptiveIndex",
    "FileLocation",
    "ManifestAssembler",
    "Provenance",
    "StructMapIndex",
    "extract_provenance",
    "find_tool_event",
    "index_by_admid",
    "lookup_scan_info",
    "package_name",
    "parse_tool_detail",
    "resolve_file_locations",
    "select_struct_map",
    "to_descriptive_md",
    "walk_struct_map",
]

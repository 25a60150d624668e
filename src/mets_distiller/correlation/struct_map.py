"""Structural map walker.

Recovers, from the "Archivematica default" structMap, the descriptive
metadata IDs of every file and of the transfer-level "objects" directory,
and the package name carried by the root directory label.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from mets_distiller.exceptions import StructMapError
from schemas.mets import Directory, Item, StructMap, StructuralNode

logger = logging.getLogger(__name__)

DEFAULT_STRUCT_MAP_LABEL = "Archivematica default"
OBJECTS_LABEL = "objects"
MAX_DEPTH = 512


@dataclass(frozen=True)
class StructMapIndex:
    """What the structural map says about the package.

    Attributes:
        file_dmd_ids: file ID → descriptive IDs, in structMap document order
        transfer_dmd_ids: descriptive IDs of the "objects" directory
        package_name: label of the root directory, or "" when absent
    """

    file_dmd_ids: dict[str, tuple[str, ...]] = field(default_factory=dict)
    transfer_dmd_ids: tuple[str, ...] = ()
    package_name: str = ""


def select_struct_map(
    struct_maps: Iterable[StructMap], label: str = DEFAULT_STRUCT_MAP_LABEL
) -> StructMap | None:
    """Return the structMap with the given LABEL; the last one wins if several match."""
    selected = None
    for struct_map in struct_maps:
        if struct_map.label == label:
            selected = struct_map
    return selected


def package_name(struct_map: StructMap | None) -> str:
    """Return the root directory label of a structMap, or "" if it has none."""
    if struct_map is not None and isinstance(struct_map.root, Directory):
        return struct_map.root.label
    return ""


def walk_struct_map(
    struct_maps: Iterable[StructMap], label: str = DEFAULT_STRUCT_MAP_LABEL
) -> StructMapIndex:
    """Index the structMap labelled ``label``.

    A package without such a structMap, or whose structMap root is not a
    directory, yields an empty package name and no transfer-level IDs.

    Args:
        struct_maps: All structMaps of the package
        label: LABEL of the structMap to consult

    Returns:
        StructMapIndex for the package

    Raises:
        StructMapError: If the tree revisits a node or exceeds MAX_DEPTH
    """
    struct_map = select_struct_map(struct_maps, label)
    if struct_map is None:
        logger.warning(f"No structMap labelled {label!r}; package name will be empty")
        return StructMapIndex()

    name = package_name(struct_map)
    if not name:
        logger.warning(f"structMap {label!r} has no root directory; package name will be empty")

    file_dmd_ids: dict[str, tuple[str, ...]] = {}
    transfer_dmd_ids: list[tuple[str, ...]] = []
    if struct_map.root is not None:
        _walk(struct_map.root, file_dmd_ids, transfer_dmd_ids, set(), 0)

    logger.debug(f"structMap {label!r}: {len(file_dmd_ids)} items, package {name!r}")
    return StructMapIndex(
        file_dmd_ids=file_dmd_ids,
        transfer_dmd_ids=transfer_dmd_ids[-1] if transfer_dmd_ids else (),
        package_name=name,
    )


def _walk(
    node: StructuralNode,
    file_dmd_ids: dict[str, tuple[str, ...]],
    transfer_dmd_ids: list[tuple[str, ...]],
    visited: set[int],
    depth: int,
) -> None:
    if depth > MAX_DEPTH:
        raise StructMapError(f"structMap is nested deeper than {MAX_DEPTH} levels")
    if id(node) in visited:
        raise StructMapError("structMap is not a tree: a div is reachable twice")
    visited.add(id(node))

    if isinstance(node, Item):
        file_dmd_ids[node.file_id] = node.dmd_ids
        return

    if node.label == OBJECTS_LABEL:
        transfer_dmd_ids.append(node.dmd_ids)
    for child in node.children:
        _walk(child, file_dmd_ids, transfer_dmd_ids, visited, depth + 1)

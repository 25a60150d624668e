"""File location resolver.

Joins the structMap index against the fileSec so that every declared file
carries its administrative ID, its descriptive IDs and its stored path.
"""

import logging
from dataclasses import dataclass
from typing import Iterable

from schemas.mets import FileGroup

from .struct_map import StructMapIndex

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileLocation:
    """A file declared in both the fileSec and the structMap.

    Attributes:
        file_id: fileSec file ID
        admid: ADMID of the file
        dmd_ids: descriptive IDs inherited from the structMap item
        path: FLocat href
    """

    file_id: str
    admid: str
    dmd_ids: tuple[str, ...]
    path: str


def resolve_file_locations(
    file_groups: Iterable[FileGroup], index: StructMapIndex
) -> dict[str, FileLocation]:
    """Map file ID → FileLocation for every fileSec entry found in the structMap.

    fileSec entries without a structMap item (e.g. auxiliary files) are
    dropped.

    Args:
        file_groups: fileSec groups in document order
        index: Result of walking the structMap

    Returns:
        Dict keyed by file ID, in fileSec document order
    """
    locations: dict[str, FileLocation] = {}
    for group in file_groups:
        for entry in group.files:
            dmd_ids = index.file_dmd_ids.get(entry.id)
            if dmd_ids is None:
                logger.debug(f"File {entry.id} in fileGrp {group.use!r} is not in the structMap")
                continue
            locations[entry.id] = FileLocation(
                file_id=entry.id,
                admid=entry.admid,
                dmd_ids=dmd_ids,
                path=entry.href,
            )
    return locations


def index_by_admid(locations: dict[str, FileLocation]) -> dict[str, FileLocation]:
    """Re-key file locations by ADMID; a later file with the same ADMID wins."""
    return {location.admid: location for location in locations.values()}

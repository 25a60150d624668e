"""Manifest Assembler for correlating a METS package into per-file records.

Drives the structMap walker, file location resolver, descriptive index and
provenance extractor, and merges their results into a PackageManifest.
"""

import logging

from mets_distiller.exceptions import MissingFieldError, MissingSectionError
from schemas.manifest import ManifestFile, Match, PackageManifest
from schemas.mets import AdministrativeSection, PackageTree

from .descriptive import DescriptiveIndex, element_value, to_descriptive_md
from .file_locations import FileLocation, index_by_admid, resolve_file_locations
from .provenance import DEFAULT_TOOL_NAME, extract_provenance, lookup_scan_info
from .struct_map import DEFAULT_STRUCT_MAP_LABEL, walk_struct_map

logger = logging.getLogger(__name__)

SHA256_ALGORITHM = "sha256"
MD5_ALGORITHM = "md5"


class ManifestAssembler:
    """Correlate a PackageTree into a PackageManifest.

    The ManifestAssembler:
    1. Rejects packages without any dmdSec
    2. Walks the structMap and joins it against the fileSec
    3. Indexes Dublin Core dmdSecs and picks the transfer-level record
    4. Builds one ManifestFile per amdSec that has a techMD ID, in amdSec
       document order
    5. Sets package-level title, identifier, description, dates and scan
       details

    Attributes:
        struct_map_label: LABEL of the structMap to walk
        tool_name: Identification tool to look for in event details
    """

    def __init__(
        self,
        struct_map_label: str = DEFAULT_STRUCT_MAP_LABEL,
        tool_name: str = DEFAULT_TOOL_NAME,
    ):
        self.struct_map_label = struct_map_label
        self.tool_name = tool_name

    def assemble(self, tree: PackageTree) -> PackageManifest:
        """Assemble the manifest for one package.

        Args:
            tree: Parsed METS package

        Returns:
            PackageManifest with one file per described amdSec

        Raises:
            MissingSectionError: If the package has no dmdSec
            MissingFieldError: If a described amdSec has no usable size
            ProvenanceFormatError: If the identification event detail is malformed
            StructMapError: If the structMap is not a tree
        """
        if not tree.descriptive:
            raise MissingSectionError("dmdSec", "Descriptive metadata (dmdSec) missing")

        index = walk_struct_map(tree.struct_maps, self.struct_map_label)
        locations = index_by_admid(resolve_file_locations(tree.file_groups, index))
        dublin_core = DescriptiveIndex.build(tree.descriptive)
        transfer = dublin_core.transfer_record(index.transfer_dmd_ids)

        files = []
        total_size = 0
        for section in tree.administrative:
            if not section.is_present:
                continue
            entry = self._build_file(section, locations.get(section.id), dublin_core)
            files.append(entry)
            total_size += entry.filesize

        title = element_value(transfer, "title") if transfer else ""
        manifest = PackageManifest(
            package_name=index.package_name,
            title=title or index.package_name,
            collection_call=element_value(transfer, "identifier") if transfer else "",
            description=element_value(transfer, "description") if transfer else "",
            bagging_date=tree.header.create_date,
            files=files,
            file_count=len(files),
            total_size=total_size,
            scan=lookup_scan_info(tree.administrative, self.tool_name),
        )
        logger.info(
            f"Assembled manifest for {manifest.package_name or '<unnamed package>'}: "
            f"{manifest.file_count} files, {manifest.total_size} bytes"
        )
        return manifest

    def _build_file(
        self,
        section: AdministrativeSection,
        location: FileLocation | None,
        dublin_core: DescriptiveIndex,
    ) -> ManifestFile:
        """Merge technical, provenance and descriptive facts for one amdSec."""
        technical = section.technical
        size = self._parse_size(section)

        md5 = technical.fits.md5
        if not md5 and technical.fixity_algorithm == MD5_ALGORITHM:
            md5 = technical.fixity_digest
        sha256 = technical.fixity_digest if technical.fixity_algorithm == SHA256_ALGORITHM else ""

        match = Match(
            ns=technical.registry_name,
            id=technical.registry_key,
            format=technical.format_name,
            version=technical.format_version,
            mime=technical.fits.identity.mimetype,
        )

        provenance = extract_provenance(section)
        descriptive_md = to_descriptive_md(None, provenance.events, provenance.agents)

        filename = ""
        if location is None:
            logger.warning(f"amdSec {section.id} is not referenced by any structMap file")
        else:
            filename = location.path
            # Later dmdSec IDs overwrite earlier ones
            for dmd_id in location.dmd_ids:
                record = dublin_core.get(dmd_id)
                if record is not None:
                    descriptive_md = to_descriptive_md(
                        record, provenance.events, provenance.agents
                    )

        return ManifestFile(
            filename=filename,
            filesize=size,
            modified=technical.date_created,
            md5=md5,
            sha256=sha256,
            matches=[match],
            descriptive_md=descriptive_md,
        )

    def _parse_size(self, section: AdministrativeSection) -> int:
        """Parse the PREMIS size of an amdSec as a non-negative integer."""
        raw = section.technical.size
        if not raw:
            raise MissingFieldError(section.id, "size", f"Empty size in amdSec {section.id}")
        if not raw.isascii() or not raw.isdigit():
            raise MissingFieldError(
                section.id, "size", f"Size {raw!r} in amdSec {section.id} is not a byte count"
            )
        return int(raw)

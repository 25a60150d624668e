"""METS Reader for deserializing Archivematica METS documents.

Elements are matched by local name, so METS documents using PREMIS v2 or v3,
Dublin Core elements or DCMI terms, and FITS output namespaces all resolve to
the same PackageTree.
"""

import logging
from pathlib import Path

from lxml import etree

from mets_distiller.correlation.struct_map import MAX_DEPTH
from mets_distiller.exceptions import ParseError, ReadError
from schemas.mets import (
    AdministrativeSection,
    DescriptiveSection,
    DigiprovBlock,
    Directory,
    FileEntry,
    FileGroup,
    FitsIdentity,
    FitsInfo,
    Item,
    MetsHeader,
    PackageTree,
    PremisAgent,
    PremisEvent,
    StructMap,
    StructuralNode,
    TechnicalCharacteristics,
)

from .reader import Reader

logger = logging.getLogger(__name__)

METS_NS = "http://www.loc.gov/METS/"


def _local(element: etree._Element) -> str:
    return etree.QName(element).localname


def _children(element: etree._Element, name: str) -> list[etree._Element]:
    return [c for c in element.iterchildren(tag=etree.Element) if _local(c) == name]


def _child(element: etree._Element | None, name: str) -> etree._Element | None:
    if element is None:
        return None
    for c in element.iterchildren(tag=etree.Element):
        if _local(c) == name:
            return c
    return None


def _find(element: etree._Element | None, path: str) -> etree._Element | None:
    """Follow a slash-separated path of local names, taking the first match."""
    for step in path.split("/"):
        element = _child(element, step)
        if element is None:
            return None
    return element


def _text(element: etree._Element | None, path: str | None = None) -> str:
    node = _find(element, path) if path else element
    if node is None:
        return ""
    return "".join(node.itertext()).strip()


def _attr(element: etree._Element | None, name: str) -> str:
    """Get an attribute by local name, whatever its namespace."""
    if element is None:
        return ""
    for key, value in element.attrib.items():
        if etree.QName(key).localname == name:
            return value
    return ""


def _ids(value: str | None) -> tuple[str, ...]:
    return tuple((value or "").split())


class METSReader(Reader):
    """Deserialize a METS document into a PackageTree.

    The METSReader:
    1. Reads and parses the XML with lxml
    2. Collects metsHdr dates, dmdSecs, amdSecs, fileSec groups and
       structMaps in document order
    3. Returns an immutable PackageTree
    """

    def read(self, path: Path) -> PackageTree:
        """Read a METS document from disk.

        Args:
            path: Path to the METS XML file

        Returns:
            PackageTree for the document

        Raises:
            ReadError: If the file cannot be read
            ParseError: If the file is not a well-formed METS document
        """
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            raise ReadError(f"Could not read METS file {path}: {e}", path) from e

        tree = self.parse(data, source=str(path))
        logger.info(
            f"Read METS {path}: {len(tree.descriptive)} dmdSec, "
            f"{len(tree.administrative)} amdSec, {len(tree.struct_maps)} structMap"
        )
        return tree

    def parse(self, data: bytes, source: str = "<bytes>") -> PackageTree:
        """Parse METS XML bytes.

        Args:
            data: Raw XML document
            source: Name used in error messages

        Returns:
            PackageTree for the document

        Raises:
            ParseError: If the bytes are not a well-formed METS document
        """
        parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=True)
        try:
            root = etree.fromstring(data, parser)
        except etree.XMLSyntaxError as e:
            raise ParseError(f"Could not parse METS document {source}: {e}", source) from e

        if _local(root) != "mets":
            raise ParseError(
                f"{source} is not a METS document (root element is {_local(root)!r})",
                source,
            )

        header_el = _child(root, "metsHdr")
        header = MetsHeader(
            create_date=header_el.get("CREATEDATE", "") if header_el is not None else "",
            last_modified=header_el.get("LASTMODDATE", "") if header_el is not None else "",
        )

        file_groups: list[FileGroup] = []
        for file_sec in _children(root, "fileSec"):
            for grp in _children(file_sec, "fileGrp"):
                self._collect_file_groups(grp, file_groups)

        return PackageTree(
            header=header,
            descriptive=tuple(self._parse_dmd_sec(d) for d in _children(root, "dmdSec")),
            administrative=tuple(self._parse_amd_sec(a) for a in _children(root, "amdSec")),
            file_groups=tuple(file_groups),
            struct_maps=tuple(self._parse_struct_map(s, source) for s in _children(root, "structMap")),
        )

    def _parse_dmd_sec(self, dmd: etree._Element) -> DescriptiveSection:
        """Build a DescriptiveSection, keeping Dublin Core elements in order."""
        md_wrap = _child(dmd, "mdWrap")
        fields: dict[str, list[str]] = {}
        dublin_core = _find(md_wrap, "xmlData/dublincore")
        if dublin_core is not None:
            for element in dublin_core.iterchildren(tag=etree.Element):
                fields.setdefault(_local(element), []).append(_text(element))

        return DescriptiveSection(
            id=dmd.get("ID", ""),
            md_type=md_wrap.get("MDTYPE", "") if md_wrap is not None else "",
            fields={name: tuple(values) for name, values in fields.items()},
        )

    def _parse_amd_sec(self, amd: etree._Element) -> AdministrativeSection:
        tech_md = _child(amd, "techMD")
        technical = (
            self._parse_tech_md(tech_md) if tech_md is not None else TechnicalCharacteristics()
        )
        provenance = tuple(self._parse_digiprov(d) for d in _children(amd, "digiprovMD"))
        return AdministrativeSection(
            id=amd.get("ID", ""),
            technical=technical,
            provenance=provenance,
        )

    def _parse_tech_md(self, tech_md: etree._Element) -> TechnicalCharacteristics:
        """Extract the PREMIS object characteristics of a techMD."""
        obj = _find(tech_md, "mdWrap/xmlData/object")
        characteristics = _child(obj, "objectCharacteristics")
        return TechnicalCharacteristics(
            id=tech_md.get("ID", ""),
            original_name=_text(obj, "originalName"),
            object_identifiers=tuple(
                _text(i, "objectIdentifierValue")
                for i in (_children(obj, "objectIdentifier") if obj is not None else [])
            ),
            fixity_algorithm=_text(characteristics, "fixity/messageDigestAlgorithm"),
            fixity_digest=_text(characteristics, "fixity/messageDigest"),
            size=_text(characteristics, "size"),
            format_name=_text(characteristics, "format/formatDesignation/formatName"),
            format_version=_text(characteristics, "format/formatDesignation/formatVersion"),
            registry_name=_text(characteristics, "format/formatRegistry/formatRegistryName"),
            registry_key=_text(characteristics, "format/formatRegistry/formatRegistryKey"),
            date_created=_text(characteristics, "creatingApplication/dateCreatedByApplication"),
            fits=self._parse_fits(
                _find(characteristics, "objectCharacteristicsExtension/fits")
            ),
        )

    def _parse_fits(self, fits: etree._Element | None) -> FitsInfo:
        if fits is None:
            return FitsInfo()
        identity = _find(fits, "identification/identity")
        return FitsInfo(
            md5=_text(fits, "fileinfo/md5checksum"),
            filepath=_text(fits, "fileinfo/filepath"),
            filename=_text(fits, "fileinfo/filename"),
            last_modified=_text(fits, "fileinfo/fslastmodified"),
            identity=FitsIdentity(
                format=_attr(identity, "format"),
                mimetype=_attr(identity, "mimetype"),
                toolname=_attr(identity, "toolname"),
                toolversion=_attr(identity, "toolversion"),
            ),
        )

    def _parse_digiprov(self, digiprov: etree._Element) -> DigiprovBlock:
        md_wrap = _child(digiprov, "mdWrap")
        event_el = _find(md_wrap, "xmlData/event")
        agent_el = _find(md_wrap, "xmlData/agent")

        event = None
        if event_el is not None:
            event = PremisEvent(
                identifier=_text(event_el, "eventIdentifier/eventIdentifierValue"),
                type=_text(event_el, "eventType"),
                datetime=_text(event_el, "eventDateTime"),
                detail=_text(event_el, "eventDetailInformation/eventDetail")
                or _text(event_el, "eventDetail"),
                outcome=_text(event_el, "eventOutcomeInformation/eventOutcome"),
                outcome_note=_text(
                    event_el,
                    "eventOutcomeInformation/eventOutcomeDetail/eventOutcomeDetailNote",
                ),
            )

        agent = None
        if agent_el is not None:
            agent = PremisAgent(
                identifier_type=_text(agent_el, "agentIdentifier/agentIdentifierType"),
                identifier_value=_text(agent_el, "agentIdentifier/agentIdentifierValue"),
                name=_text(agent_el, "agentName"),
                type=_text(agent_el, "agentType"),
            )

        return DigiprovBlock(
            id=digiprov.get("ID", ""),
            md_type=md_wrap.get("MDTYPE", "") if md_wrap is not None else "",
            event=event,
            agent=agent,
        )

    def _collect_file_groups(self, grp: etree._Element, groups: list[FileGroup]) -> None:
        """Append a fileGrp and any nested fileGrps to groups in document order."""
        files = tuple(
            FileEntry(
                id=f.get("ID", ""),
                admid=f.get("ADMID", ""),
                href=_attr(_child(f, "FLocat"), "href"),
            )
            for f in _children(grp, "file")
        )
        groups.append(FileGroup(use=grp.get("USE", ""), files=files))
        for nested in _children(grp, "fileGrp"):
            self._collect_file_groups(nested, groups)

    def _parse_struct_map(self, struct_map: etree._Element, source: str) -> StructMap:
        root_div = _child(struct_map, "div")
        return StructMap(
            label=struct_map.get("LABEL", ""),
            id=struct_map.get("ID", ""),
            type=struct_map.get("TYPE", ""),
            root=self._parse_div(root_div, source) if root_div is not None else None,
        )

    def _parse_div(
        self, div: etree._Element, source: str, depth: int = 0
    ) -> StructuralNode | None:
        """Convert a structMap div into a Directory or Item.

        Divs of any other TYPE are dropped along with their subtree.
        """
        if depth > MAX_DEPTH:
            raise ParseError(
                f"structMap in {source} is nested deeper than {MAX_DEPTH} levels", source
            )

        div_type = div.get("TYPE", "")
        if div_type == "Item":
            fptr = _child(div, "fptr")
            return Item(
                file_id=fptr.get("FILEID", "") if fptr is not None else "",
                label=div.get("LABEL", ""),
                dmd_ids=_ids(div.get("DMDID")),
                adm_ids=_ids(div.get("ADMID")),
            )
        if div_type == "Directory":
            children = []
            for child in _children(div, "div"):
                node = self._parse_div(child, source, depth + 1)
                if node is not None:
                    children.append(node)
            return Directory(
                label=div.get("LABEL", ""),
                dmd_ids=_ids(div.get("DMDID")),
                adm_ids=_ids(div.get("ADMID")),
                children=tuple(children),
            )

        logger.debug(f"Skipping structMap div of TYPE {div_type!r} in {source}")
        return None

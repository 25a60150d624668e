"""METS package tree schemas.

Typed, read-only view of an Archivematica METS document. The tree mirrors the
four METS subtrees that the correlation engine joins by identifier:

    mets
    ├── metsHdr               # MetsHeader
    ├── dmdSec*               # DescriptiveSection (Dublin Core / PREMIS object)
    ├── amdSec*               # AdministrativeSection
    │   ├── techMD            # TechnicalCharacteristics (PREMIS object + FITS)
    │   └── digiprovMD*       # DigiprovBlock (PREMIS event or agent)
    ├── fileSec
    │   └── fileGrp*          # FileGroup
    │       └── file*         # FileEntry
    └── structMap*            # StructMap
        └── div               # Directory | Item

All sequences keep document order.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MetsHeader:
    """The metsHdr element.

    Attributes:
        create_date: CREATEDATE attribute
        last_modified: LASTMODDATE attribute
    """

    create_date: str = ""
    last_modified: str = ""


@dataclass(frozen=True)
class DescriptiveSection:
    """A dmdSec element.

    Attributes:
        id: dmdSec ID
        md_type: MDTYPE of the wrapped metadata ("DC", "PREMIS:OBJECT", ...)
        fields: Dublin Core element local name mapped to its values in
            document order
    """

    id: str
    md_type: str = ""
    fields: dict[str, tuple[str, ...]] = field(default_factory=dict)

    @property
    def is_dublin_core(self) -> bool:
        return self.md_type == "DC"


@dataclass(frozen=True)
class FitsIdentity:
    """FITS identification/identity attributes."""

    format: str = ""
    mimetype: str = ""
    toolname: str = ""
    toolversion: str = ""


@dataclass(frozen=True)
class FitsInfo:
    """The subset of FITS output carried in a PREMIS object extension."""

    md5: str = ""
    filepath: str = ""
    filename: str = ""
    last_modified: str = ""
    identity: FitsIdentity = field(default_factory=FitsIdentity)


@dataclass(frozen=True)
class TechnicalCharacteristics:
    """A techMD element wrapping a PREMIS object.

    Attributes:
        id: techMD ID; empty when the amdSec carries no techMD
        original_name: PREMIS originalName
        object_identifiers: objectIdentifierValue entries
        fixity_algorithm: messageDigestAlgorithm, verbatim
        fixity_digest: messageDigest
        size: byte size as written in the document (unparsed)
        format_name: formatDesignation/formatName
        format_version: formatDesignation/formatVersion
        registry_name: formatRegistry/formatRegistryName (e.g. "PRONOM")
        registry_key: formatRegistry/formatRegistryKey (e.g. "fmt/353")
        date_created: creatingApplication/dateCreatedByApplication
        fits: embedded FITS result
    """

    id: str = ""
    original_name: str = ""
    object_identifiers: tuple[str, ...] = ()
    fixity_algorithm: str = ""
    fixity_digest: str = ""
    size: str = ""
    format_name: str = ""
    format_version: str = ""
    registry_name: str = ""
    registry_key: str = ""
    date_created: str = ""
    fits: FitsInfo = field(default_factory=FitsInfo)


@dataclass(frozen=True)
class PremisEvent:
    """A PREMIS event."""

    identifier: str = ""
    type: str = ""
    datetime: str = ""
    detail: str = ""
    outcome: str = ""
    outcome_note: str = ""


@dataclass(frozen=True)
class PremisAgent:
    """A PREMIS agent."""

    identifier_type: str = ""
    identifier_value: str = ""
    name: str = ""
    type: str = ""


@dataclass(frozen=True)
class DigiprovBlock:
    """A digiprovMD element.

    The MDTYPE tag decides whether the block is read as an event or an agent;
    both payloads are kept as parsed.
    """

    id: str = ""
    md_type: str = ""
    event: PremisEvent | None = None
    agent: PremisAgent | None = None


@dataclass(frozen=True)
class AdministrativeSection:
    """An amdSec element."""

    id: str
    technical: TechnicalCharacteristics = field(default_factory=TechnicalCharacteristics)
    provenance: tuple[DigiprovBlock, ...] = ()

    @property
    def is_present(self) -> bool:
        """True when this section describes a file (its techMD has an ID)."""
        return bool(self.technical.id)


@dataclass(frozen=True)
class FileEntry:
    """A fileSec file with its FLocat href."""

    id: str
    admid: str = ""
    href: str = ""


@dataclass(frozen=True)
class FileGroup:
    """A fileGrp element."""

    use: str = ""
    files: tuple[FileEntry, ...] = ()


@dataclass(frozen=True)
class Item:
    """A structMap div of TYPE "Item", pointing at one file."""

    file_id: str
    label: str = ""
    dmd_ids: tuple[str, ...] = ()
    adm_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class Directory:
    """A structMap div of TYPE "Directory"."""

    label: str
    dmd_ids: tuple[str, ...] = ()
    adm_ids: tuple[str, ...] = ()
    children: tuple["Directory | Item", ...] = ()


StructuralNode = Directory | Item


@dataclass(frozen=True)
class StructMap:
    """A structMap element with its root div (None if the root is neither kind)."""

    label: str = ""
    id: str = ""
    type: str = ""
    root: StructuralNode | None = None


@dataclass(frozen=True)
class PackageTree:
    """A whole METS document."""

    header: MetsHeader = field(default_factory=MetsHeader)
    descriptive: tuple[DescriptiveSection, ...] = ()
    administrative: tuple[AdministrativeSection, ...] = ()
    file_groups: tuple[FileGroup, ...] = ()
    struct_maps: tuple[StructMap, ...] = ()

"""Schema definitions for METS Distiller."""

from .manifest import (
    Agent,
    DescriptiveMD,
    Event,
    Identifier,
    ManifestFile,
    Match,
    ObjectManifest,
    PackageManifest,
    ScanInfo,
    ScanManifest,
)
from .mets import (
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

__all__ = [
    "AdministrativeSection",
    "Agent",
    "DescriptiveMD",
    "DescriptiveSection",
    "DigiprovBlock",
    "Directory",
    "Event",
    "FileEntry",
    "FileGroup",
    "FitsIdentity",
    "FitsInfo",
    "Identifier",
    "Item",
    "ManifestFile",
    "Match",
    "MetsHeader",
    "ObjectManifest",
    "PackageManifest",
    "PackageTree",
    "PremisAgent",
    "PremisEvent",
    "ScanInfo",
    "ScanManifest",
    "StructMap",
    "StructuralNode",
    "TechnicalCharacteristics",
]

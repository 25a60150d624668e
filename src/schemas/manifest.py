"""Object metadata manifest schemas.

A manifest flattens one METS package into a per-file record list. The
assembler produces a schema-neutral PackageManifest; an output layout then
renders it as the ObjectManifest document written to disk:

    {output_dir}/
    └── {package_name}_metadata.json     # ObjectManifest
"""

from pydantic import BaseModel, Field


class Match(BaseModel):
    """A format identification match.

    Attributes:
        ns: Format registry name (e.g., "PRONOM")
        id: Format registry key (e.g., "fmt/353")
        format: Format name
        version: Format version
        mime: MIME type reported by FITS
        basis: Identification basis
        warning: Identification warning
    """

    ns: str = ""
    id: str = ""
    format: str = ""
    version: str = ""
    mime: str = ""
    basis: str = ""
    warning: str = ""


class Identifier(BaseModel):
    """A signature identifier reported by the identification tool."""

    name: str = ""
    details: str = ""


class Event(BaseModel):
    """A PREMIS event attached to a file."""

    uuid: str = ""
    type: str = ""
    datetime: str = ""
    outcome: str = ""
    detail: str = ""
    detail_note: str = ""


class Agent(BaseModel):
    """A PREMIS agent attached to a file."""

    identifier_type: str = ""
    identifier_value: str = ""
    name: str = ""
    type: str = ""


class DescriptiveMD(BaseModel):
    """Dublin Core description of a file plus its provenance.

    The fifteen core elements are always present. DCMI terms are only
    serialized when the source record carries them. Field aliases match the
    Dublin Core element names so that a record can be validated directly from
    its element map.
    """

    identifier: str = ""
    title: str = ""
    creator: str = ""
    date: str = ""
    type: str = ""
    format: str = ""
    language: str = ""
    contributor: str = ""
    provenance: str = ""
    subject: str = ""
    description: str = ""
    publisher: str = ""
    source: str = ""
    relation: str = ""
    coverage: str = ""
    rights: str = ""

    is_part_of: str | None = Field(default=None, alias="isPartOf")
    abstract: str | None = None
    access_rights: str | None = Field(default=None, alias="accessRights")
    accrual_method: str | None = Field(default=None, alias="accrualMethod")
    accrual_periodicity: str | None = Field(default=None, alias="accrualPeriodicity")
    accrual_policy: str | None = Field(default=None, alias="accrualPolicy")
    alternative: str | None = None
    audience: str | None = None
    available: str | None = None
    bibliographic_citation: str | None = Field(default=None, alias="bibliographicCitation")
    conforms_to: str | None = Field(default=None, alias="conformsTo")
    created: str | None = None
    date_accepted: str | None = Field(default=None, alias="dateAccepted")
    date_copyrighted: str | None = Field(default=None, alias="dateCopyrighted")
    date_submitted: str | None = Field(default=None, alias="dateSubmitted")
    education_level: str | None = Field(default=None, alias="educationLevel")
    extent: str | None = None
    has_format: str | None = Field(default=None, alias="hasFormat")
    has_part: str | None = Field(default=None, alias="hasPart")
    has_version: str | None = Field(default=None, alias="hasVersion")
    instructional_method: str | None = Field(default=None, alias="instructionalMethod")
    is_format_of: str | None = Field(default=None, alias="isFormatOf")
    is_referenced_by: str | None = Field(default=None, alias="isReferencedBy")
    is_replaced_by: str | None = Field(default=None, alias="isReplacedBy")
    is_required_by: str | None = Field(default=None, alias="isRequiredBy")
    issued: str | None = None
    is_version_of: str | None = Field(default=None, alias="isVersionOf")
    license: str | None = None
    mediator: str | None = None
    modified: str | None = None
    references: str | None = None
    replaces: str | None = None
    requires: str | None = None
    rights_holder: str | None = Field(default=None, alias="rightsHolder")
    spatial: str | None = None
    table_of_contents: str | None = Field(default=None, alias="tableOfContents")
    temporal: str | None = None
    valid: str | None = None

    events: list[Event] = []
    agents: list[Agent] = []

    model_config = {"populate_by_name": True}


class ManifestFile(BaseModel):
    """One file of the package.

    Attributes:
        filename: Resolved path from the fileSec FLocat
        filesize: Size in bytes
        modified: Modification timestamp
        errors: Identification errors
        md5: MD5 checksum
        sha256: SHA-256 checksum, only when the PREMIS fixity is sha256
        matches: Format identification matches
        descriptive_md: Merged Dublin Core and provenance (omitted by the
            legacy layout)
    """

    filename: str = ""
    filesize: int = 0
    modified: str = ""
    errors: str = ""
    md5: str = ""
    sha256: str = ""
    matches: list[Match] = []
    descriptive_md: DescriptiveMD | None = Field(default=None, alias="descriptiveMD")

    model_config = {"populate_by_name": True}


class ScanInfo(BaseModel):
    """Format identification tool details recovered from provenance.

    Attributes:
        tool: Program name from the event detail
        version: Program version from the event detail
        scandate: Date of the identification event
    """

    tool: str = ""
    version: str = ""
    scandate: str = ""


class PackageManifest(BaseModel):
    """Schema-neutral result of correlating one METS package.

    Attributes:
        package_name: Label of the structural map's root directory
        title: Transfer-level title, or the package name
        collection_call: Transfer-level identifier
        description: Transfer-level description
        bagging_date: metsHdr CREATEDATE
        files: Per-file entries in amdSec document order
        file_count: Number of entries in files
        total_size: Sum of file sizes in bytes
        scan: Identification tool details, if any event names the tool
    """

    package_name: str = ""
    title: str = ""
    collection_call: str = ""
    description: str = ""
    bagging_date: str = ""
    files: list[ManifestFile] = []
    file_count: int = 0
    total_size: int = 0
    scan: ScanInfo | None = None


class ScanManifest(BaseModel):
    """The identification block of the output document."""

    siegfried: str = ""
    scandate: str = ""
    signature: str = ""
    created: str = ""
    identifiers: list[Identifier] = []
    files: list[ManifestFile] = []


class ObjectManifest(BaseModel):
    """The object metadata document written for a package.

    The legacy layout fills tar_tech_md only. The current layout fills
    manifest and writes an empty tar_tech_md next to it.
    """

    title: str = ""
    jira_ticket_number: str = ""
    department_or_library: str = ""
    collection_call: str = ""
    depositor_name: str = ""
    bagging_date: str = ""
    description: str = ""
    sf_errors: str = ""
    tar_tech_md: ScanManifest | None = Field(default=None, alias="tar_techMD")
    manifest_sha256: str = ""
    manifest_md5: str = ""
    manifest: ScanManifest | None = None
    storage_location: str = ""
    file_count: int = 0
    schema_version: str

    model_config = {"populate_by_name": True}

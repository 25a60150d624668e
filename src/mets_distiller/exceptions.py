"""Custom exceptions for METS manifest generation.

Every error raised while building a manifest is fatal. Helpers raise one of
these and the CLI reports it and exits non-zero; no partial manifest is ever
written.
"""

from pathlib import Path


class ManifestError(Exception):
    """Base exception for all manifest generation errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class UsageError(ManifestError):
    """Raised when a required input path or output directory is missing."""

    pass


class ReadError(ManifestError):
    """Raised when the METS document cannot be opened or read."""

    def __init__(self, message: str, path: Path | str | None = None, *args, **kwargs):
        self.path = path
        super().__init__(message, *args, **kwargs)


class ParseError(ReadError):
    """Raised when the METS document is not well-formed or not METS."""

    pass


class MissingSectionError(ManifestError):
    """Raised when a required METS section is absent."""

    def __init__(self, section: str, message: str | None = None):
        self.section = section
        super().__init__(message or f"Required section missing: {section}")


class MissingFieldError(ManifestError):
    """Raised when a required field of an administrative record is empty or invalid."""

    def __init__(self, record_id: str, field: str, message: str | None = None):
        self.record_id = record_id
        self.field = field
        super().__init__(
            message or f"Missing or invalid {field} in administrative record {record_id}"
        )


class ProvenanceFormatError(ManifestError):
    """Raised when a tool identification detail string is malformed."""

    def __init__(self, detail: str, message: str | None = None):
        self.detail = detail
        super().__init__(message or f"Malformed provenance detail: {detail!r}")


class StructMapError(ManifestError):
    """Raised when a structural map is cyclic or nested beyond the depth limit."""

    pass


class WriteError(ManifestError):
    """Raised when the manifest cannot be serialized or written."""

    def __init__(self, message: str, path: Path | str | None = None, *args, **kwargs):
        self.path = path
        super().__init__(message, *args, **kwargs)

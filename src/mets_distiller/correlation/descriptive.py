"""Descriptive metadata index.

Indexes Dublin Core dmdSecs by ID and converts them into the DescriptiveMD
block of a manifest file.
"""

import logging
from typing import Iterable

from schemas.manifest import Agent, DescriptiveMD, Event
from schemas.mets import DescriptiveSection

logger = logging.getLogger(__name__)

# Elements that may repeat and are joined rather than truncated
MULTI_VALUED_ELEMENTS = ("language", "subject")
MULTI_VALUE_SEPARATOR = ","

DC_ELEMENTS = frozenset(
    f.alias or name
    for name, f in DescriptiveMD.model_fields.items()
    if name not in ("events", "agents")
)


class DescriptiveIndex:
    """Dublin Core dmdSecs keyed by dmdSec ID.

    Attributes:
        records: dmdSec ID → DescriptiveSection, Dublin Core sections only
    """

    def __init__(self, records: dict[str, DescriptiveSection]):
        self.records = records

    @classmethod
    def build(cls, sections: Iterable[DescriptiveSection]) -> "DescriptiveIndex":
        """Index every Dublin Core section; other MDTYPEs are skipped."""
        records = {}
        for section in sections:
            if section.is_dublin_core:
                records[section.id] = section
            else:
                logger.debug(f"Skipping dmdSec {section.id} of MDTYPE {section.md_type!r}")
        return cls(records)

    def __len__(self) -> int:
        return len(self.records)

    def __contains__(self, dmd_id: str) -> bool:
        return dmd_id in self.records

    def get(self, dmd_id: str) -> DescriptiveSection | None:
        return self.records.get(dmd_id)

    def transfer_record(self, dmd_ids: Iterable[str]) -> DescriptiveSection | None:
        """Return the transfer-level record: the last of dmd_ids that is indexed."""
        found = None
        for dmd_id in dmd_ids:
            record = self.records.get(dmd_id)
            if record is not None:
                found = record
        return found


def element_value(record: DescriptiveSection, name: str) -> str:
    """Single string value of a Dublin Core element.

    Multi-valued elements are joined with MULTI_VALUE_SEPARATOR; any other
    repeated element keeps its first value.
    """
    values = record.fields.get(name, ())
    if not values:
        return ""
    if name in MULTI_VALUED_ELEMENTS:
        return MULTI_VALUE_SEPARATOR.join(values)
    return values[0]


def to_descriptive_md(
    record: DescriptiveSection | None,
    events: list[Event] | None = None,
    agents: list[Agent] | None = None,
) -> DescriptiveMD:
    """Build a DescriptiveMD from a Dublin Core record and provenance.

    Args:
        record: Dublin Core section, or None for provenance only
        events: PREMIS events of the file's amdSec
        agents: PREMIS agents of the file's amdSec

    Returns:
        DescriptiveMD with the record's elements and the given provenance
    """
    values: dict[str, str] = {}
    if record is not None:
        for name in record.fields:
            if name in DC_ELEMENTS:
                values[name] = element_value(record, name)
    return DescriptiveMD.model_validate(
        {**values, "events": events or [], "agents": agents or []}
    )

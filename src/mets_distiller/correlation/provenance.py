"""Administrative and provenance extraction.

Reads PREMIS events and agents out of amdSec digiprovMD blocks, and recovers
the format identification tool details recorded in an event detail such as
``program="Siegfried"; version="1.8.0"``.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable

from mets_distiller.exceptions import ProvenanceFormatError
from schemas.manifest import Agent, Event, ScanInfo
from schemas.mets import AdministrativeSection, PremisEvent

logger = logging.getLogger(__name__)

EVENT_MDTYPE = "PREMIS:EVENT"
AGENT_MDTYPE = "PREMIS:AGENT"
DEFAULT_TOOL_NAME = "Siegfried"

_DETAIL_PAIR = re.compile(r'\s*([A-Za-z][\w-]*)="([^"]*)"\s*')


@dataclass(frozen=True)
class Provenance:
    """Events and agents of one amdSec, in document order."""

    events: list[Event] = field(default_factory=list)
    agents: list[Agent] = field(default_factory=list)


def extract_provenance(section: AdministrativeSection) -> Provenance:
    """Classify an amdSec's digiprovMD blocks into events and agents.

    Blocks with any other MDTYPE, or without the matching payload, are
    ignored.
    """
    events = []
    agents = []
    for block in section.provenance:
        if block.md_type == EVENT_MDTYPE and block.event is not None:
            events.append(_to_event(block.event))
        elif block.md_type == AGENT_MDTYPE and block.agent is not None:
            agent = block.agent
            agents.append(
                Agent(
                    identifier_type=agent.identifier_type,
                    identifier_value=agent.identifier_value,
                    name=agent.name,
                    type=agent.type,
                )
            )
    return Provenance(events=events, agents=agents)


def _to_event(event: PremisEvent) -> Event:
    return Event(
        uuid=event.identifier,
        type=event.type,
        datetime=event.datetime,
        outcome=event.outcome,
        detail=event.detail,
        detail_note=event.outcome_note,
    )


def find_tool_event(
    sections: Iterable[AdministrativeSection], tool_name: str = DEFAULT_TOOL_NAME
) -> Event | None:
    """Return the first event, across amdSecs in order, whose detail names the tool."""
    for section in sections:
        for event in extract_provenance(section).events:
            if tool_name in event.detail:
                return event
    return None


def parse_tool_detail(detail: str) -> dict[str, str]:
    """Parse a ``key="value"; key="value"`` event detail.

    Args:
        detail: eventDetail string of an identification event

    Returns:
        Dict of keys to unquoted values; always contains "version"

    Raises:
        ProvenanceFormatError: If any segment is not a key="value" pair or no
            version is given
    """
    pairs: dict[str, str] = {}
    for segment in detail.split(";"):
        match = _DETAIL_PAIR.fullmatch(segment)
        if match is None:
            raise ProvenanceFormatError(
                detail, f"Malformed tool detail segment {segment.strip()!r} in {detail!r}"
            )
        pairs[match.group(1)] = match.group(2)

    if "version" not in pairs:
        raise ProvenanceFormatError(detail, f"Tool detail {detail!r} has no version")
    return pairs


def lookup_scan_info(
    sections: Iterable[AdministrativeSection], tool_name: str = DEFAULT_TOOL_NAME
) -> ScanInfo | None:
    """Recover identification tool details for the package.

    Returns:
        ScanInfo from the first matching event, or None if no event names
        the tool

    Raises:
        ProvenanceFormatError: If the matching event detail is malformed
    """
    event = find_tool_event(sections, tool_name)
    if event is None:
        logger.info(f"No provenance event mentions {tool_name}; scan details left empty")
        return None

    pairs = parse_tool_detail(event.detail)
    return ScanInfo(
        tool=pairs.get("program", tool_name),
        version=pairs["version"],
        scandate=event.datetime,
    )

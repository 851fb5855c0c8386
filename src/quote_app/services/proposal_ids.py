from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Iterator, Mapping, Optional

from ..errors import InvalidIdentifierError, ProposalIdParseError
from ..models.proposals import ProposalIdentifier, ProposalType

logger = logging.getLogger(__name__)

# Greedy prefix so the trailing "_NNN_vN" is always the last pair of numbers.
_ID_PATTERN = re.compile(r"^(?P<prefix>.+)_(?P<sequence>\d+)_v(?P<version>\d+)$")
_VERSION_SUFFIX = re.compile(r"_v\d+$")


def parse_proposal_id_strict(value: str) -> ProposalIdentifier:
    """Parse ``{prefix}_{N}_v{N}``; zero-padding is optional, both numbers must be >= 1."""
    match = _ID_PATTERN.match(value) if isinstance(value, str) else None
    if match is None:
        raise ProposalIdParseError(f"Malformed proposal identifier: {value!r}")

    proposal_type = ProposalType.from_prefix(match.group("prefix"))
    if proposal_type is None:
        raise ProposalIdParseError(f"Unknown proposal prefix in {value!r}")

    sequence = int(match.group("sequence"))
    version = int(match.group("version"))
    if sequence < 1 or version < 1:
        raise ProposalIdParseError(f"Sequence and version must be positive in {value!r}")

    return ProposalIdentifier(proposal_type=proposal_type, sequence=sequence, version=version)


def parse_proposal_id(value: str) -> Optional[ProposalIdentifier]:
    try:
        return parse_proposal_id_strict(value)
    except ProposalIdParseError:
        return None


def _raw_id(entry: Any) -> Any:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, Mapping):
        return entry.get("base_id")
    return getattr(entry, "base_id", None)


def _parsed(existing: Iterable[Any]) -> Iterator[ProposalIdentifier]:
    for entry in existing:
        raw = _raw_id(entry)
        parsed = parse_proposal_id(raw)
        if parsed is None:
            logger.warning("Skipping malformed proposal identifier %r", raw)
            continue
        yield parsed


class ProposalIdentifierAllocator:
    """Allocates, parses and versions proposal identifiers.

    ``existing`` is the snapshot of identifiers already persisted; entries may be
    plain strings, mappings with a ``base_id`` key or objects with a ``base_id``
    attribute. Two concurrent allocations over the same snapshot yield the same
    sequence, so the store must enforce uniqueness when persisting.
    """

    parse = staticmethod(parse_proposal_id)
    parse_strict = staticmethod(parse_proposal_id_strict)

    def next_sequence(self, existing: Iterable[Any], proposal_type: ProposalType | str) -> int:
        kind = ProposalType(proposal_type)
        sequences = [parsed.sequence for parsed in _parsed(existing) if parsed.proposal_type is kind]
        return max(sequences, default=0) + 1

    def generate_next_proposal_id(self, existing: Iterable[Any], proposal_type: ProposalType | str) -> str:
        kind = ProposalType(proposal_type)
        identifier = ProposalIdentifier(proposal_type=kind, sequence=self.next_sequence(existing, kind), version=1)
        logger.info("Allocated proposal id %s", identifier)
        return identifier.serialize()

    def generate_new_version(self, current_id: str, existing: Iterable[Any]) -> str:
        try:
            current = parse_proposal_id_strict(current_id)
        except ProposalIdParseError as exc:
            raise InvalidIdentifierError(f"Invalid proposal identifier: {current_id!r}") from exc

        versions = [
            parsed.version
            for parsed in _parsed(existing)
            if parsed.proposal_type is current.proposal_type and parsed.sequence == current.sequence
        ]
        new_version = max(versions + [current.version]) + 1
        # Keep the series spelling as stored, padded or not.
        new_id = f"{_VERSION_SUFFIX.sub('', current_id)}_v{new_version}"
        logger.info("New version %s for %s", new_id, current_id)
        return new_id


def generate_next_proposal_id(existing: Iterable[Any], proposal_type: ProposalType | str) -> str:
    return ProposalIdentifierAllocator().generate_next_proposal_id(existing, proposal_type)


def generate_new_version(current_id: str, existing: Iterable[Any]) -> str:
    return ProposalIdentifierAllocator().generate_new_version(current_id, existing)

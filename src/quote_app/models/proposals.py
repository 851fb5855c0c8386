from __future__ import annotations

from enum import Enum
from typing import Dict

from pydantic import conint

from .common import Snapshot


class ProposalType(str, Enum):
    PABX = "PABX"
    VM = "VM"
    FIBER = "FIBER"
    RADIO = "RADIO"
    DOUBLE = "DOUBLE"
    INTERNET_MAN_FIBRA = "INTERNET_MAN_FIBRA"
    MANRADIO = "MANRADIO"

    @property
    def prefix(self) -> str:
        return TYPE_PREFIXES[self]

    @classmethod
    def from_prefix(cls, prefix: str) -> "ProposalType | None":
        return _PREFIX_TO_TYPE.get(prefix)


# New proposal types need an entry here; call sites never format prefixes themselves.
TYPE_PREFIXES: Dict[ProposalType, str] = {
    ProposalType.PABX: "Prop_Pabx_Sip",
    ProposalType.VM: "Prop_MV",
    ProposalType.FIBER: "Prop_Inter_Fibra",
    ProposalType.RADIO: "Prop_Inter_Radio",
    ProposalType.DOUBLE: "Prop_Inter_Double",
    ProposalType.INTERNET_MAN_FIBRA: "Prop_Inter_Man",
    ProposalType.MANRADIO: "Prop_InterMan_Radio",
}

_PREFIX_TO_TYPE: Dict[str, ProposalType] = {prefix: kind for kind, prefix in TYPE_PREFIXES.items()}


class ProposalIdentifier(Snapshot):
    proposal_type: ProposalType
    sequence: conint(ge=1)
    version: conint(ge=1) = 1

    @property
    def prefix(self) -> str:
        return self.proposal_type.prefix

    @property
    def base_without_version(self) -> str:
        return f"{self.prefix}_{self.sequence:03d}"

    def serialize(self) -> str:
        return f"{self.base_without_version}_v{self.version}"

    def with_version(self, version: int) -> "ProposalIdentifier":
        return self.model_copy(update={"version": version})

    def __str__(self) -> str:
        return self.serialize()

from __future__ import annotations

from types import SimpleNamespace

import pytest

from quote_app.errors import InvalidIdentifierError, ProposalIdParseError
from quote_app.models.proposals import ProposalIdentifier, ProposalType, TYPE_PREFIXES
from quote_app.services.proposal_ids import (
    ProposalIdentifierAllocator,
    generate_new_version,
    generate_next_proposal_id,
    parse_proposal_id,
    parse_proposal_id_strict,
)


def test_first_id_of_a_type():
    assert generate_next_proposal_id([], "FIBER") == "Prop_Inter_Fibra_001_v1"
    assert generate_next_proposal_id([], ProposalType.PABX) == "Prop_Pabx_Sip_001_v1"


def test_next_sequence_only_counts_same_type():
    existing = [
        "Prop_Inter_Fibra_001_v1",
        "Prop_Inter_Fibra_004_v3",
        "Prop_Inter_Radio_009_v1",
        "Prop_Inter_Man_020_v1",
        "Prop_InterMan_Radio_030_v1",
    ]

    assert generate_next_proposal_id(existing, "FIBER") == "Prop_Inter_Fibra_005_v1"
    assert generate_next_proposal_id(existing, "INTERNET_MAN_FIBRA") == "Prop_Inter_Man_021_v1"
    assert generate_next_proposal_id(existing, "MANRADIO") == "Prop_InterMan_Radio_031_v1"
    assert generate_next_proposal_id(existing, "VM") == "Prop_MV_001_v1"


def test_existing_entries_may_be_records():
    existing = [{"base_id": "Prop_MV_002_v1"}, SimpleNamespace(base_id="Prop_MV_007_v2")]

    assert generate_next_proposal_id(existing, "VM") == "Prop_MV_008_v1"


def test_malformed_entries_are_skipped():
    existing = ["garbage", {"base_id": None}, {}, "Prop_MV_abc_v1", "Prop_MV_003_v1"]

    assert generate_next_proposal_id(existing, "VM") == "Prop_MV_004_v1"


def test_sequence_beyond_three_digits():
    assert generate_next_proposal_id(["Prop_MV_999_v1"], "VM") == "Prop_MV_1000_v1"
    assert generate_next_proposal_id(["Prop_MV_1000_v1"], "VM") == "Prop_MV_1001_v1"


def test_parse():
    parsed = parse_proposal_id("Prop_Inter_Double_012_v3")

    assert parsed == ProposalIdentifier(proposal_type=ProposalType.DOUBLE, sequence=12, version=3)
    assert parsed.base_without_version == "Prop_Inter_Double_012"


@pytest.mark.parametrize(
    "value",
    ["", "Prop_Inter_Fibra", "Prop_Inter_Fibra_001", "Prop_Unknown_001_v1", "Prop_MV_abc_v1",
     "Prop_MV_000_v1", "Prop_MV_0_v2", "Prop_MV_001_v0", "Prop_MV_001_v00", "Prop_MV_001_v1 "],
)
def test_parse_rejects_malformed(value):
    assert parse_proposal_id(value) is None
    with pytest.raises(ProposalIdParseError):
        parse_proposal_id_strict(value)


def test_canonical_ids_serialize_back_unchanged():
    samples = [f"{prefix}_{sequence:03d}_v{version}" for prefix in TYPE_PREFIXES.values()
               for sequence in (1, 42, 999, 1234) for version in (1, 2, 17)]

    for value in samples:
        assert parse_proposal_id(value).serialize() == value


def test_new_version_of_single_proposal():
    assert generate_new_version("Prop_Inter_Fibra_001_v1", [{"base_id": "Prop_Inter_Fibra_001_v1"}]) == "Prop_Inter_Fibra_001_v2"


def test_new_version_uses_highest_existing_version():
    existing = ["Prop_Inter_Fibra_001_v1", "Prop_Inter_Fibra_001_v4", "Prop_Inter_Fibra_0012_v9", "Prop_Inter_Fibra_010_v7"]

    assert generate_new_version("Prop_Inter_Fibra_001_v2", existing) == "Prop_Inter_Fibra_001_v5"


def test_new_version_without_history_bumps_current():
    assert generate_new_version("Prop_Pabx_Sip_003_v2", []) == "Prop_Pabx_Sip_003_v3"


def test_new_version_of_invalid_id():
    with pytest.raises(InvalidIdentifierError):
        ProposalIdentifierAllocator().generate_new_version("Prop_Inter_Fibra_v1", [])


def test_every_proposal_type_has_a_unique_prefix():
    assert set(TYPE_PREFIXES) == set(ProposalType)
    assert len(set(TYPE_PREFIXES.values())) == len(TYPE_PREFIXES)


def test_unpadded_ids_are_parsed():
    assert parse_proposal_id("Prop_MV_07_v1") == ProposalIdentifier(proposal_type=ProposalType.VM, sequence=7, version=1)
    assert parse_proposal_id("Prop_MV_0012_v03") == ProposalIdentifier(proposal_type=ProposalType.VM, sequence=12, version=3)
    assert parse_proposal_id("Prop_MV_7_v1").serialize() == "Prop_MV_007_v1"


def test_next_sequence_counts_unpadded_ids():
    assert generate_next_proposal_id(["Prop_MV_01_v1", "Prop_MV_07_v1"], "VM") == "Prop_MV_008_v1"
    assert generate_next_proposal_id(["Prop_MV_003_v1", "Prop_MV_0010_v2"], "VM") == "Prop_MV_011_v1"


def test_new_version_matches_series_regardless_of_padding():
    existing = ["Prop_MV_07_v1", "Prop_MV_007_v3", "Prop_MV_70_v9"]

    assert generate_new_version("Prop_MV_07_v1", existing) == "Prop_MV_07_v4"


def test_new_version_when_current_is_ahead_of_existing():
    existing = ["Prop_Inter_Radio_002_v1", "Prop_Inter_Radio_002_v2"]

    assert generate_new_version("Prop_Inter_Radio_002_v5", existing) == "Prop_Inter_Radio_002_v6"

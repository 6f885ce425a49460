from __future__ import annotations

import pytest

from skills.iban import register_tools as register_iban_tools
from skills.personal_id import register_tools as register_personal_id_tools


@pytest.fixture
def tools(fake_mcp, monkeypatch):
    monkeypatch.setenv("TESTDATA_SEED", "1234")
    monkeypatch.delenv("TESTDATA_MAX_COUNT", raising=False)
    register_iban_tools(fake_mcp)
    register_personal_id_tools(fake_mcp)
    return fake_mcp.tools


def test_all_tools_registered(tools) -> None:
    assert set(tools) == {
        "iban_list_countries",
        "iban_generate",
        "iban_validate",
        "personal_id_list_countries",
        "personal_id_generate",
        "personal_id_parse",
    }


def test_iban_generate_rows(tools) -> None:
    rows = tools["iban_generate"]("DE", 3, spaces=False).splitlines()[2:]
    assert len(rows) == 3
    for row in rows:
        code, valid = row.split()
        assert code.startswith("DE") and len(code) == 22
        assert valid == "Yes"


def test_iban_generate_with_spaces_and_random_country(tools) -> None:
    rows = tools["iban_generate"]("Random", 4).splitlines()[2:]
    assert len(rows) == 4
    assert all(row.rstrip().endswith("Yes") for row in rows)
    assert all(" " in row.split("  ")[0] for row in rows)


def test_iban_generate_is_reproducible_with_seed(tools) -> None:
    assert tools["iban_generate"]("FR", 2) == tools["iban_generate"]("FR", 2)


def test_iban_generate_unknown_country(tools) -> None:
    assert "Unsupported IBAN country: US" in tools["iban_generate"]("US", 2)


def test_iban_count_is_clamped(tools, monkeypatch) -> None:
    monkeypatch.setenv("TESTDATA_MAX_COUNT", "3")
    assert len(tools["iban_generate"]("AT", 50).splitlines()) == 2 + 3
    assert len(tools["iban_generate"]("AT", 0).splitlines()) == 2 + 1


def test_iban_validate(tools) -> None:
    assert tools["iban_validate"]("de89 3704 0044 0532 0130 00") == "DE89 3704 0044 0532 0130 00: valid"
    assert "checksum" in tools["iban_validate"]("DE89370400440532013001")


def test_iban_list_countries(tools) -> None:
    out = tools["iban_list_countries"]()
    assert "DE  22  Germany" in out


def test_personal_id_generate_with_constraints(tools) -> None:
    rows = tools["personal_id_generate"]("CZ", 4, "Female", 1980).splitlines()[2:]
    assert len(rows) == 4
    for row in rows:
        code, gender, dob, valid = row.split()
        assert gender == "Female"
        assert dob.startswith("1980-")
        assert valid == "Yes"


def test_personal_id_generate_infeasible_year(tools) -> None:
    out = tools["personal_id_generate"]("CZ", 3, "Any", 1900)
    assert out.startswith("No codes generated for CZ")


def test_personal_id_generate_rejects_bad_input(tools) -> None:
    assert "No personal-ID format for 'XX'" in tools["personal_id_generate"]("XX")
    assert "Unknown gender" in tools["personal_id_generate"]("EE", 1, "other")


def test_personal_id_parse(tools) -> None:
    out = tools["personal_id_parse"]("FI", "131052-308T")
    assert "Female" in out
    assert "1952-10-13" in out
    assert "Valid:  Yes" in out
    assert "does not have" in tools["personal_id_parse"]("FI", "12345")


def test_personal_id_list_countries(tools) -> None:
    assert "EE - Estonia" in tools["personal_id_list_countries"]()

import json

import pytest

from app.db.repositories.carrier_repo import CarrierDirectory
from app.db.seed import load_carriers
from app.exceptions import DirectoryLoadError
from app.models.carrier import Carrier
from conftest import CARRIERS


@pytest.fixture
def directory():
    return CarrierDirectory(Carrier.model_validate(c) for c in CARRIERS)


def test_find_by_pair_requires_an_identifier(directory):
    with pytest.raises(ValueError):
        directory.find_by_pair("", "  ")


def test_find_by_pair_ignores_missing_field(directory):
    assert directory.find_by_pair(mc_number="555").dot_number == "777"
    assert directory.find_by_pair(dot_number="666").carrier_name == "Acme West II"
    assert directory.find_by_pair("555", "000") is None


def test_find_by_id_checks_both_identifiers(directory):
    assert directory.find_by_id("444").carrier_name == "Blue Line Freight"
    assert directory.find_by_id("888").carrier_name == "Blue Line Freight"
    assert directory.find_by_id("") is None


def test_field_scoped_lookups(directory):
    assert directory.find_by_mc("999") is None
    assert directory.find_by_dot("999").mc_number == "111"


def test_filter_counts_before_limit(directory):
    results, total = directory.filter(name="acme", limit=2)
    assert total == 3
    assert [c.dot_number for c in results] == ["999", "777"]


def test_filter_status_is_exact(directory):
    # "inactive" contains "active" but must not match it
    results, _ = directory.filter(status="Active")
    assert all(c.is_active for c in results)
    assert "444" not in [c.mc_number for c in results]


def test_numeric_identifiers_are_stringified():
    d = CarrierDirectory([Carrier.model_validate({"mc_number": 42, "dot_number": 7})])
    assert d.find_by_pair("42", "7") is not None


def test_extra_fields_round_trip():
    record = {"mc_number": "1", "status": "active", "phone": "555-0100"}
    assert Carrier.model_validate(record).as_record() == record


def test_load_carriers(carriers_file):
    directory = load_carriers(carriers_file)
    assert len(directory) == len(CARRIERS)
    assert [c.as_record() for c in directory] == CARRIERS


@pytest.mark.parametrize(
    "content",
    ["{broken", json.dumps({"carriers": []}), json.dumps(["not a record"])],
)
def test_load_carriers_rejects_malformed(tmp_path, content):
    path = tmp_path / "carriers.json"
    path.write_text(content)
    with pytest.raises(DirectoryLoadError):
        load_carriers(path)


def test_load_carriers_missing_file(tmp_path):
    with pytest.raises(DirectoryLoadError):
        load_carriers(tmp_path / "missing.json")

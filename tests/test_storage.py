import json
import os

import pytest

from rirsync.folder import Folder
from rirsync.models import ASN, Domain, InetNum, Organization, Person, Route, Route6, to_json_dict
from rirsync.storage import KINDS, JsonStorage


@pytest.fixture
def folder(tmp_path):
    return Folder(tmp_path / "db")


def _load(folder, kind):
    with open(folder.get_path(f"{kind}.json"), encoding="utf-8") as handle:
        return json.load(handle)


def test_creates_one_file_per_kind(folder):
    with JsonStorage(folder):
        pass
    assert sorted(os.listdir(folder.path)) == sorted(f"{kind}.json" for kind in KINDS)
    for kind in KINDS:
        assert _load(folder, kind) == {}


def test_single_object_layout(folder):
    asn = ASN(as_number="AS64500", as_name="EXAMPLE")
    with JsonStorage(folder) as storage:
        storage.save_asn(asn)
    text = open(folder.get_path("asns.json"), encoding="utf-8").read()
    assert text.startswith('{\n  "AS64500": {')
    assert text.endswith("}\n}\n")
    assert '"Created":"0001-01-01T00:00:00Z"' in text


def test_round_trip_of_many_objects(folder):
    first = ASN(as_number="AS1", description=["one", "two"], mnt_by=["M1"])
    second = ASN(as_number="AS2", status="ASSIGNED")
    with JsonStorage(folder) as storage:
        storage.save_asn(first)
        storage.save_asn(second)
    loaded = _load(folder, "asns")
    assert list(loaded) == ["AS1", "AS2"]
    assert loaded["AS1"] == to_json_dict(first)
    assert loaded["AS2"] == to_json_dict(second)


@pytest.mark.parametrize(
    "method, kind, obj, key",
    [
        ("save_inetnum", "inetnums", InetNum(ip_range="192.0.2.0 - 192.0.2.255"), "192.0.2.0 - 192.0.2.255"),
        ("save_route", "routes", Route(prefix="192.0.2.0/24"), "192.0.2.0/24"),
        ("save_route6", "routes6", Route6(prefix="2001:db8::/32"), "2001:db8::/32"),
        ("save_person", "persons", Person(nic_hdl="JE1-TEST", email="jane@example.com"), "JE1-TEST"),
        ("save_organization", "organizations", Organization(org_id="ORG-EX1"), "ORG-EX1"),
        ("save_domain", "domains", Domain(domain="2.0.192.in-addr.arpa"), "2.0.192.in-addr.arpa"),
    ],
)
def test_each_kind_goes_to_its_file(folder, method, kind, obj, key):
    with JsonStorage(folder) as storage:
        getattr(storage, method)(obj)
    assert _load(folder, kind) == {key: to_json_dict(obj)}
    assert _load(folder, "asns") == {}


def test_html_characters_are_escaped_but_round_trip(folder):
    asn = ASN(as_number='AS"<1>', as_name="A & B")
    with JsonStorage(folder) as storage:
        storage.save_asn(asn)
    text = open(folder.get_path("asns.json"), encoding="utf-8").read()
    assert "<" not in text and "&" not in text
    assert "\\u003c" in text
    assert _load(folder, "asns") == {'AS"<1>': to_json_dict(asn)}


def test_save_after_close_raises(folder):
    storage = JsonStorage(folder)
    storage.close()
    with pytest.raises(ValueError):
        storage.save_asn(ASN(as_number="AS1"))


def test_close_twice_keeps_files_intact(folder):
    storage = JsonStorage(folder)
    storage.save_route(Route(prefix="10.0.0.0/8"))
    storage.close()
    storage.close()
    assert list(_load(folder, "routes")) == ["10.0.0.0/8"]


def test_unwritable_folder_raises(tmp_path):
    folder = Folder(tmp_path / "gone")
    folder.remove()
    with pytest.raises(OSError):
        JsonStorage(folder)
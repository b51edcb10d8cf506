import pytest

from lhc.header import extract_header
from lhc.licenses import LicenseReference, accepted_license, load_references
from lhc.registry import MIT_LICENSE


def test_load_registry_license():
    (ref,) = load_references(["MIT"])
    assert ref.name == "MIT"
    assert ref.spdx_id == "MIT"
    assert ref.text == extract_header("MIT")


def test_apache_registers_asf_variant():
    refs = load_references(["Apache-2.0"])
    assert [r.name for r in refs] == ["Apache-2.0", "Apache-2.0"]
    assert [r.spdx_id for r in refs] == ["Apache-2.0", "Apache-2.0"]
    assert refs[0].text == extract_header("Apache-2.0")
    assert refs[1].text == extract_header("Apache-2.0-ASF")


def test_blank_names_are_skipped():
    refs = load_references(["MIT", " ", "", "EPL-1.0"])
    assert [r.name for r in refs] == ["MIT", "EPL-1.0"]


def test_load_license_file(tmp_path):
    path = tmp_path / "license.txt"
    path.write_text("MIT License\n\nCopyright (c) 2017 Foo\n\n" + MIT_LICENSE)
    (ref,) = load_references([str(path)])
    assert ref.name == str(path)
    assert ref.spdx_id == str(path)
    assert ref.text == extract_header("MIT")


def test_missing_license_file(tmp_path):
    with pytest.raises(OSError):
        load_references([str(tmp_path / "license.txt")])


def test_accepted_license_by_containment():
    mit = LicenseReference("MIT", "PERMISSION", "MIT")
    epl = LicenseReference("EPL-1.0", "THISPROGRAM", "EPL-1.0")
    assert accepted_license("PERMISSION", [mit, epl]) is mit
    assert accepted_license("XXTHISPROGRAMYY", [mit, epl]) is epl
    assert accepted_license("SOMETHINGELSE", [mit, epl]) is None
    assert accepted_license("PERMISSION", []) is None


def test_empty_reference_never_matches(tmp_path, caplog):
    path = tmp_path / "empty.txt"
    path.write_text("")
    (ref,) = load_references([str(path)])
    assert ref.text == ""
    assert accepted_license("ANYTHING", [ref]) is None
    assert "never match" in caplog.text

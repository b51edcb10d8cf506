import pytest

from lhc.checks.base import IssueType
from lhc.checks.license_header import E_LICENSE_HEADER_MISSING, check_license_header
from lhc.licenses import load_references
from lhc.registry import EPL_10_LICENSE, MIT_LICENSE


def commented(text: str, prefix: str = "// ") -> str:
    return ''.join((prefix + line).rstrip() + "\n" for line in text.splitlines())


def test_mit_header_with_copyright_passes(tmp_path):
    path = tmp_path / "a.go"
    path.write_text(commented("Copyright (c) 2020, Jane Doe\n\n" + MIT_LICENSE) + "\npackage main\n")
    license, issues = check_license_header(path, load_references(["MIT"]))
    assert license is not None and license.name == "MIT"
    assert issues == []


def test_modified_header_fails(tmp_path):
    path = tmp_path / "a.go"
    path.write_text(commented(MIT_LICENSE.replace("free of charge", "for a fee")) + "\npackage main\n")
    license, (issue,) = check_license_header(path, load_references(["MIT", "EPL-1.0"]))
    assert license is None
    assert issue.issue_type == E_LICENSE_HEADER_MISSING
    assert "MIT, EPL-1.0" in str(issue)


def test_header_case_is_ignored(tmp_path):
    path = tmp_path / "a.py"
    path.write_text(commented(MIT_LICENSE.lower(), "# ") + "\nimport os\n")
    license, _ = check_license_header(path, load_references(["MIT"]))
    assert license is not None


def test_epl_header_with_contributors(tmp_path):
    path = tmp_path / "Foo.java"
    path.write_text(
        "/*\n"
        " * Copyright (c) 2015 Foo Inc. and others.  All rights reserved.\n"
        " *\n"
        + commented(EPL_10_LICENSE, " * ") +
        " *\n"
        " * Contributors:\n"
        " *   Jane Doe - initial implementation\n"
        " */\n"
        "package org.foo;\n")
    license, _ = check_license_header(path, load_references(["EPL-1.0"]))
    assert license is not None and license.spdx_id == "EPL-1.0"


def test_asf_header_is_accepted_for_apache(tmp_path):
    from lhc.registry import APACHE_20_LICENSE_ASF

    path = tmp_path / "a.sh"
    path.write_text("#!/bin/sh\n" + commented(APACHE_20_LICENSE_ASF, "# ") + "\necho hi\n")
    license, _ = check_license_header(path, load_references(["Apache-2.0"]))
    assert license is not None and license.name == "Apache-2.0"


def test_invalid_issue_type_id():
    with pytest.raises(ValueError):
        IssueType("not-a-uuid", "message")

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence
from pathlib import Path

from lhc.checks.base import Issue, IssueList
from lhc.checks.license_header import check_license_header
from lhc.checks.spdx import spdx_issues
from lhc.io import exclude, find_files
from lhc.licenses import LicenseReference, load_references
from lhc.messages import error, info, result


@dataclass(frozen=True)
class FileResult:
    path: Path
    ignored: bool = False
    license: Optional[LicenseReference] = None
    spdx_passed: Optional[bool] = None # None when SPDX is not checked
    issues: List[Issue] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.license is not None


@dataclass(frozen=True)
class Counters:
    total: int = 0
    ignored: int = 0
    missing: int = 0
    passed: int = 0
    spdx_missing: int = 0
    spdx_passed: int = 0

    def add(self, r: FileResult) -> Counters:
        c = replace(self, total=self.total + 1)
        if r.ignored:
            return replace(c, ignored=c.ignored + 1)

        if r.passed: c = replace(c, passed=c.passed + 1)
        else:        c = replace(c, missing=c.missing + 1)

        if r.spdx_passed is True:    c = replace(c, spdx_passed=c.spdx_passed + 1)
        elif r.spdx_passed is False: c = replace(c, spdx_missing=c.spdx_missing + 1)
        return c

    def failed(self, spdx: bool = True) -> bool:
        return self.missing != 0 or (spdx and self.spdx_missing != 0)


def check_file(path: Path, accepted: Sequence[LicenseReference], spdx: bool = True, excludes: Sequence[str] = ()) -> FileResult:
    """
    Checks one file. Raises OSError if the file cannot be read.
    """
    if exclude(path, excludes):
        return FileResult(path, ignored=True)

    issues = IssueList()
    license, header_issues = check_license_header(path, accepted)
    issues.extend(header_issues)

    spdx_passed = None
    if spdx:
        found = spdx_issues(path, license)
        issues.extend(found)
        spdx_passed = not found

    return FileResult(path, license=license, spdx_passed=spdx_passed, issues=list(issues))


def check_main(
    directory: Path,
    patterns: Sequence[str],
    licenses: Sequence[str],
    disable_spdx: bool = False,
    excludes: Sequence[str] = (),
    verbose: bool = False,
) -> int:
    """
    Checks every matching file under `directory` and prints the report.
    Returns the process exit code. OSError from reading a license or a
    candidate file propagates.
    """
    info(f"Search Patterns: {' '.join(patterns)}")

    accepted = load_references(licenses)
    spdx = not disable_spdx

    counters = Counters()
    for path in find_files(directory, patterns):
        r = check_file(path, accepted, spdx=spdx, excludes=excludes)
        counters = counters.add(r)
        if r.ignored:
            continue

        if spdx: result(path, r.passed, bool(r.spdx_passed))
        else:    result(path, r.passed)

        if verbose:
            for issue in r.issues:
                error(str(issue))

    print(f"License Total: {counters.total}, Ignored: {counters.ignored}, "
          f"Missing: {counters.missing}, Passed: {counters.passed}")
    if spdx:
        print(f"SPDX Total: {counters.total}, Missing: {counters.spdx_missing}, "
              f"Passed: {counters.spdx_passed}")

    return 1 if counters.failed(spdx) else 0

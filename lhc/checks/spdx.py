"""
SPDX identifier verification.

A file passes when the first `SPDX-License-Identifier:` line among its leading
lines names the license its header was matched against.
"""
from __future__ import annotations
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import List, Optional

from lhc.checks.base import Issue, IssueType
from lhc.comments import BLOCK_CLOSE
from lhc.header import LICENSE_HEADER_LINES_MAX, canonicalize
from lhc.licenses import LicenseReference

SPDX_TAG = "SPDX-LICENSE-IDENTIFIER:"

E_SPDX_MISSING  = IssueType("0f4b7a59-5c61-4d2e-9a0b-3f1e8c6d2a47", "No SPDX identifier found in the first {max_lines} lines.")
E_SPDX_MISMATCH = IssueType("b3e2d4c8-7a1f-4e6b-8c5d-2f9a0e1b7c36", "SPDX identifier '{found}' does not match '{expected}'.")


@dataclass(frozen=True)
class SpdxLine:
    line: int
    value: str


def find_spdx(path: Path) -> Optional[SpdxLine]:
    """
    Returns the first SPDX identifier line within the line budget, upper-cased.
    """
    with open(path, 'rt', encoding='utf-8', errors='replace') as f:
        for i, line in enumerate(islice(f, LICENSE_HEADER_LINES_MAX), start=1):
            s = line.upper()
            if SPDX_TAG in s:
                value = s.split(SPDX_TAG, 1)[1].split(BLOCK_CLOSE, 1)[0]
                return SpdxLine(i, canonicalize(value))
    return None


def _matches(found: SpdxLine, expected: str) -> bool:
    return found.value == expected.upper()


def check_spdx(expected: str, path: Path) -> bool:
    found = find_spdx(path)
    return found is not None and _matches(found, expected)


def spdx_issues(path: Path, license: LicenseReference | None) -> List[Issue]:
    """
    Returns the SPDX issues of a file given the license its header matched.
    Without a matched license no identifier can be correct.
    """
    found = find_spdx(path)
    if found is None:
        return [E_SPDX_MISSING.make(max_lines=LICENSE_HEADER_LINES_MAX).at(path)]

    expected = license.spdx_id if license is not None else None
    if expected is None or not _matches(found, expected):
        return [E_SPDX_MISMATCH.make(found=found.value, expected=expected or "<no matching license>").at(path, found.line)]
    return []

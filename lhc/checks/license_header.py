from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from lhc.checks.base import Issue, IssueType
from lhc.header import extract_header
from lhc.licenses import LicenseReference, accepted_license

E_LICENSE_HEADER_MISSING = IssueType(
    "6d1c9e2a-84b7-4f3d-a5e0-c27b19f4d863",
    "License header is missing or does not match any of: {accepted}.")


def check_license_header(path: Path, accepted: Sequence[LicenseReference]) -> Tuple[Optional[LicenseReference], List[Issue]]:
    """
    Compares the file's header with the accepted licenses. Returns the matched
    license (or None) and the issues found.
    """
    license = accepted_license(extract_header(path), accepted)
    if license is not None:
        return license, []

    names = ', '.join(dict.fromkeys(ref.name for ref in accepted)) or '<none>'
    return None, [E_LICENSE_HEADER_MISSING.make(accepted=names).at(path)]

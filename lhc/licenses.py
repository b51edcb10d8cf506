from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional
import logging

from lhc.header import extract_header
from lhc.registry import REGISTRY, VARIANTS


@dataclass(frozen=True)
class LicenseReference:
    name: str
    text: str
    spdx_id: str

    @classmethod
    def load(cls, name: str, source: str | None = None) -> 'LicenseReference':
        """
        Loads a reference from the registry or, failing that, from a file.
        `source` overrides where the text comes from while keeping `name`.
        """
        source = source or name
        entry = REGISTRY.get(source)
        spdx_id = entry.spdx_id if entry is not None else name
        text = extract_header(source)
        if not text:
            logging.warning(f"License reference '{source}' has no text and will never match.")
        return cls(name, text, spdx_id)


def load_references(names: Iterable[str]) -> List[LicenseReference]:
    """
    Loads every accepted license reference. Raises OSError if a license file
    cannot be read.
    """
    references: List[LicenseReference] = []
    for name in names:
        name = name.strip()
        if not name:
            continue
        references.append(LicenseReference.load(name))
        if name in VARIANTS:
            references.append(LicenseReference.load(name, VARIANTS[name]))

    for ref in references:
        logging.debug(f"Accepting license {ref.name} (SPDX: {ref.spdx_id})")
    return references


def accepted_license(header: str, accepted: Iterable[LicenseReference]) -> Optional[LicenseReference]:
    """
    Returns the first accepted license whose text the header contains, else None.
    """
    for ref in accepted:
        if ref.text and ref.text in header:
            return ref
    return None

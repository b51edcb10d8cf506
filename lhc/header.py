from __future__ import annotations
from typing import Iterable, List
from pathlib import Path
from itertools import islice
import enum

from lhc.comments import (
    BLOCK_CLOSE, BLOCK_OPEN, is_comment_opener, is_noise_line, strip_comment_markers,
)
from lhc.registry import REGISTRY

# Read only the first few lines so whole code files are never scanned
LICENSE_HEADER_LINES_MAX = 50

# Some projects do not print this statement, so it is normalized away
ALL_RIGHTS_RESERVED = "ALL RIGHTS RESERVED."


class ScanState(enum.Enum):
    OUTSIDE     = "outside"      # no comment line seen yet
    IN_LINE_RUN = "line_run"     # inside a run of comment lines
    IN_BLOCK    = "block"        # inside an open /* ... */ block
    DONE        = "done"         # the header has ended


def next_state(state: ScanState, line: str) -> ScanState:
    """
    Transition for one line of a comment-syntax file.
    """
    if state is ScanState.IN_BLOCK:
        return ScanState.IN_LINE_RUN if BLOCK_CLOSE in line else ScanState.IN_BLOCK
    if line.startswith(BLOCK_OPEN):
        closed = BLOCK_CLOSE in line[len(BLOCK_OPEN):]
        return ScanState.IN_LINE_RUN if closed else ScanState.IN_BLOCK
    if is_comment_opener(line):
        return ScanState.IN_LINE_RUN
    return ScanState.DONE


def canonicalize(text: str) -> str:
    """
    Removes every whitespace character.
    """
    return ''.join(text.split())


def scan_header(lines: Iterable[str], comment: bool) -> str:
    """
    Accumulates the header from the leading lines and returns its canonical form.

    With `comment` set, scanning stops at the first line that is neither
    noise, nor a comment, nor inside an open block, and comment markers are
    stripped from every kept line. Without it every line up to the budget is
    kept as is. Noise lines are skipped in both modes.
    """
    state = ScanState.OUTSIDE
    parts: List[str] = []

    for raw in islice(lines, LICENSE_HEADER_LINES_MAX):
        # We do not care about case sensitivity
        s = raw.rstrip('\r\n').upper()
        s = s.replace(ALL_RIGHTS_RESERVED, '')

        if comment:
            new_state = next_state(state, s)
            if is_noise_line(s):
                # Noise lines still open and close blocks but never end the header
                if new_state is not ScanState.DONE:
                    state = new_state
                continue
            state = new_state
            if state is ScanState.DONE:
                break
            s = strip_comment_markers(s)
        elif is_noise_line(s):
            continue

        parts.append(s)

    return canonicalize(''.join(parts))


def _decode(lines: Iterable[bytes]) -> Iterable[str]:
    for line in lines:
        yield line.decode('utf-8', errors='replace')


def extract_header(source: str | Path) -> str:
    """
    Returns the canonical header of a registry license or a file.

    Only a `str` source is looked up in the registry; a `Path` is always read
    from disk. Registry texts are bare text. A file is treated as comment
    syntax only when its first two bytes open a comment. Raises OSError if
    the file cannot be read.
    """
    entry = REGISTRY.get(source) if isinstance(source, str) else None
    if entry is not None:
        return scan_header(entry.text.splitlines(), comment=False)

    with open(source, 'rb') as f:
        # Read the first 2 bytes to decide if it is a comment string
        prefix = f.read(2).decode('utf-8', errors='replace')
        f.seek(0)
        return scan_header(_decode(f), comment=is_comment_opener(prefix))

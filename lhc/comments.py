import re
from typing import Tuple

COMMENT_OPENERS: Tuple[str, ...] = ("#", "//", "/*")

BLOCK_OPEN  = "/*"
BLOCK_CLOSE = "*/"

# Prefixes (after upper-casing) of lines that vary per file and are not part of the boilerplate
NOISE_PREFIXES: Tuple[str, ...] = (
    "COPYRIGHT",
    "SPDX-LICENSE-IDENTIFIER",
    # License names found in LICENSE files but not in source headers
    "MIT LICENSE",
    "THE MIT LICENSE",
)

SHEBANG = "#!"

# EPL headers can carry a contributor list
CONTRIBUTORS_MARKER = "* CONTRIBUTORS:"

_LEADING_MARKER = re.compile(r'^(?:#+|/{2,}|/\*+)')
_CONTINUATION   = re.compile(r'^\s*\*+(?!/)')


def is_comment_opener(prefix: str) -> bool:
    """
    Returns True if the string starts with one of the recognized comment openers.
    """
    return prefix.startswith(COMMENT_OPENERS)


def strip_comment_markers(line: str) -> str:
    """
    Removes comment syntax from a single line:

    * a leading ``#`` run, ``//`` run or ``/*`` opener,
    * a block continuation asterisk (`` * text``), unless it is part of ``*/``,
    * everything from the closing ``*/`` onward.
    """
    line = _LEADING_MARKER.sub('', line, count=1)
    line = _CONTINUATION.sub('', line, count=1)
    return line.split(BLOCK_CLOSE, 1)[0]


def is_noise_line(line: str) -> bool:
    """
    Returns True for header lines expected to vary from file to file (shebang,
    copyright, SPDX tag, bare license name, contributor list).
    """
    if line.startswith(SHEBANG):
        return True

    s = strip_comment_markers(line).strip().upper()
    if s.startswith(NOISE_PREFIXES):
        return True

    return CONTRIBUTORS_MARKER in line.upper()

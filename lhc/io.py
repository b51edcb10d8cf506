from typing import Callable, Iterable, List
import glob
import logging
import os
from pathlib import Path

##################################################################################################
# File discovery
##################################################################################################

def _log_walk_error(e: OSError) -> None:
    logging.debug(f"Skipping {e.filename}: {e.strerror}")


def find_files(directory: Path, patterns: Iterable[str], on_error: Callable[[OSError], None] | None = None) -> List[Path]:
    """
    Globs every pattern against every directory under `directory`.

    Enumeration is best effort: subtrees that cannot be walked are reported to
    `on_error` (logged by default) and skipped, the rest of the walk goes on.
    """
    patterns = list(patterns)
    files: List[Path] = []

    for root, dirs, _ in os.walk(directory, onerror=on_error or _log_walk_error):
        dirs.sort()
        for pattern in patterns:
            for match in sorted(glob.glob(os.path.join(glob.escape(root), pattern), include_hidden=True)):
                if os.path.isfile(match):
                    files.append(Path(os.path.normpath(match)))

    return files


def exclude(path: Path, excludes: Iterable[str]) -> bool:
    """
    Returns True if any exclude substring occurs anywhere in the path.
    """
    s = str(path)
    return any(e and e in s for e in excludes)

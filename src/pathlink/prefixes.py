"""Prefix catalog builder.

A prefix is an escaped literal that marks the start of a path worth
linking: a root-level system directory, an entry of the working
directory, or the home marker.
"""

import logging
import os
import re
from pathlib import Path

logger = logging.getLogger(__name__)

SYSTEM_DIRS = (
    "/bin",
    "/boot",
    "/dev",
    "/etc",
    "/home",
    "/lib",
    "/lib64",
    "/lost+found",
    "/mnt",
    "/opt",
    "/proc",
    "/root",
    "/run",
    "/sbin",
    "/srv",
    "/sys",
    "/tmp",
    "/usr",
    "/var",
)

HOME_MARKER = "~"


def list_entries(cwd: Path) -> list[str]:
    """List entry names of a directory, longest first.

    Args:
        cwd: Directory to list

    Returns:
        Entry names, or an empty list if the directory can't be read
    """
    try:
        names = os.listdir(cwd)
    except OSError as e:
        logger.debug(f"Could not list {cwd}: {e}")
        return []

    entries = []
    for name in names:
        try:
            name.encode("utf-8")
        except UnicodeEncodeError:
            logger.debug(f"Skipping undecodable entry name: {name!r}")
            continue
        entries.append(name)

    # Longer names first so "src2" wins over "src" in the alternation
    return sorted(entries, key=lambda name: (-len(name), name))


def build_prefixes(cwd: Path) -> list[str]:
    """Build the escaped prefix catalog for a working directory.

    Args:
        cwd: Working directory whose entries become relative prefixes

    Returns:
        Escaped prefixes, always ending with the home marker
    """
    prefixes = [re.escape(path) for path in SYSTEM_DIRS]
    prefixes.extend(re.escape(name) for name in list_entries(cwd))
    prefixes.append(re.escape(HOME_MARKER))
    logger.debug(f"Built {len(prefixes)} path prefixes from {cwd}")
    return prefixes

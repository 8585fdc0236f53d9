"""Startup environment for pathlink.

Hostname, home directory and working directory are read once when the
filter starts and reused for every line.
"""

import logging
import os
import socket
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_HOSTNAME = "localhost"


@dataclass(frozen=True)
class Environment:
    """Values used to expand and resolve matched paths."""

    hostname: str
    home: str
    cwd: Path

    @classmethod
    def detect(cls) -> "Environment":
        """Read hostname, HOME and the current directory.

        Returns:
            Environment instance

        Raises:
            OSError: If the current working directory cannot be determined
        """
        return cls(
            hostname=_detect_hostname(),
            home=os.environ.get("HOME", ""),
            cwd=Path.cwd(),
        )


def _detect_hostname() -> str:
    """Return the machine hostname, or localhost when unavailable."""
    try:
        hostname = socket.gethostname()
    except OSError as e:
        logger.debug(f"Hostname lookup failed: {e}")
        return DEFAULT_HOSTNAME
    return hostname or DEFAULT_HOSTNAME

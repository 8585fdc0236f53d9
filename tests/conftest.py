"""Shared test fixtures."""

import re
from pathlib import Path

import pytest
from pathlink.config import Environment
from pathlink.rewriter import PathRewriter, compile_pattern


@pytest.fixture
def environment() -> Environment:
    """Fixed environment matching a user working in /work."""
    return Environment(hostname="host", home="/home/user", cwd=Path("/work"))


@pytest.fixture
def rewriter(environment: Environment) -> PathRewriter:
    """Rewriter with a small hand-picked prefix catalog.

    Uses /tmp, /home, src and ~ so tests don't depend on the real
    working directory.
    """
    prefixes = [re.escape(p) for p in ("/tmp", "/home", "src", "~")]
    return PathRewriter(pattern=compile_pattern(prefixes), environment=environment)

"""Path rewriter.

Finds path-like substrings in a line of terminal output and wraps each one
in an OSC 8 hyperlink pointing at its absolute file:// URL. Everything else
in the line, including color escape sequences, is copied through unchanged.
"""

import logging
import os
import re
from dataclasses import dataclass

from pathlink.config import Environment
from pathlink.prefixes import build_prefixes

logger = logging.getLogger(__name__)

OSC = "\x1b]"
BEL = "\x07"
FILE_SCHEME = "file://"

# A slash followed by anything except whitespace, $ ; ~ : " and ESC
PATH_TAIL = r'(?:/[^$\s;~:"\x1b]+)?'


class PatternError(ValueError):
    """Raised when the prefix catalog can't be compiled into a pattern."""


def make_hyperlink(url: str, text: str) -> str:
    """Wrap text in an OSC 8 hyperlink escape sequence.

    Args:
        url: Link target
        text: Visible text

    Returns:
        Text enclosed in the hyperlink envelope
    """
    return f"{OSC}8;;{url}{BEL}{text}{OSC}8;;{BEL}"


def build_pattern(prefixes: list[str]) -> str:
    """Build the path-matching regular expression source."""
    return f"(?:{'|'.join(prefixes)}){PATH_TAIL}"


def compile_pattern(prefixes: list[str]) -> re.Pattern[str]:
    """Compile escaped prefixes into the path-matching pattern.

    Args:
        prefixes: Escaped literal prefixes

    Returns:
        Compiled pattern

    Raises:
        PatternError: If the catalog is empty or the pattern is invalid
    """
    if not prefixes:
        raise PatternError("Prefix catalog is empty")
    try:
        return re.compile(build_pattern(prefixes))
    except re.error as e:
        raise PatternError(f"Invalid path pattern: {e}") from e


@dataclass(frozen=True)
class PathRewriter:
    """Rewrites path-like substrings of a line into hyperlinks."""

    pattern: re.Pattern[str]
    environment: Environment

    @classmethod
    def from_environment(cls, environment: Environment) -> "PathRewriter":
        """Create a rewriter whose prefixes come from the working directory.

        Raises:
            PatternError: If the prefix catalog can't be compiled
        """
        prefixes = build_prefixes(environment.cwd)
        return cls(pattern=compile_pattern(prefixes), environment=environment)

    def resolve(self, matched: str) -> str:
        """Expand a leading ~/ and make the path absolute.

        Relative paths are joined onto the working directory as text, so
        trailing slashes and dot segments are kept and the filesystem is
        never touched.
        """
        expanded = matched
        if matched.startswith("~/"):
            expanded = self.environment.home + matched[1:]

        if os.path.isabs(expanded):
            return expanded
        return os.path.join(self.environment.cwd, expanded)

    def file_url(self, matched: str) -> str:
        """Build the file:// URL for a matched path.

        The path is not percent-encoded.
        """
        return f"{FILE_SCHEME}{self.environment.hostname}{self.resolve(matched)}"

    def rewrite_line(self, line: str) -> str:
        """Wrap every path-like substring of a line in a hyperlink."""
        return self.pattern.sub(self._replace, line)

    def _replace(self, match: re.Match[str]) -> str:
        matched = match.group(0)
        url = self.file_url(matched)
        logger.debug(f"Linking {matched!r} to {url}")
        return make_hyperlink(url, matched)

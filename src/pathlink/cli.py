"""CLI interface for pathlink.

Filters standard input to standard output, turning paths into terminal
hyperlinks.
"""

import logging
import os
import sys

import click

from pathlink import __version__
from pathlink.config import Environment
from pathlink.rewriter import PathRewriter, PatternError
from pathlink.stream import filter_lines

logger = logging.getLogger(__name__)

VERBOSE_ENVVAR = "PATHLINK_VERBOSE"


@click.command()
@click.option(
    "--verbose",
    envvar=VERBOSE_ENVVAR,
    is_flag=True,
    hidden=True,
    help="Log matched paths and startup details to stderr",
)
@click.version_option(__version__, prog_name="pathlink")
def cli(verbose: bool) -> None:
    """Make paths in piped output clickable.

    Reads lines from stdin and writes them to stdout with every path
    wrapped in an OSC 8 hyperlink. Example: git status | pathlink

    Set PATHLINK_VERBOSE=1 to log matched paths to stderr.
    """
    _configure_logging(verbose)

    try:
        environment = Environment.detect()
        rewriter = PathRewriter.from_environment(environment)
    except (OSError, PatternError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    logger.debug(
        f"Host: {environment.hostname}, home: {environment.home!r}, "
        f"cwd: {environment.cwd}",
    )

    source = click.get_binary_stream("stdin")
    sink = click.get_binary_stream("stdout")
    try:
        filter_lines(source, sink, rewriter)
    except BrokenPipeError:
        # Reader went away; keep the interpreter from flushing into it again
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr so stdout stays a clean text stream."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

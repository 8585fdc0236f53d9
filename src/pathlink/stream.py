"""Line-by-line filter loop."""

import logging
from collections.abc import Iterable
from typing import BinaryIO

from pathlink.rewriter import PathRewriter

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def filter_lines(source: Iterable[bytes], sink: BinaryIO, rewriter: PathRewriter) -> int:
    """Rewrite lines from source and write them to sink as they arrive.

    Lines are split on \\n only; a \\r is stripped only when it ends the
    line, so carriage returns inside a line pass through untouched. Each
    output line is terminated with a newline and flushed before the next
    line is read. Read, write and decode errors propagate to the caller.

    Args:
        source: Binary input lines, with or without line terminators
        sink: Binary output stream
        rewriter: Rewriter applied to each line

    Returns:
        Number of lines processed
    """
    count = 0
    for raw_line in source:
        line = raw_line.decode(ENCODING).removesuffix("\n").removesuffix("\r")
        sink.write((rewriter.rewrite_line(line) + "\n").encode(ENCODING))
        sink.flush()
        count += 1
    logger.debug(f"Processed {count} lines")
    return count

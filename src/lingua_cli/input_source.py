"""Select input units from positional arguments or a text stream."""

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO

from .errors import InputReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InputUnit:
    """A piece of text that is classified on its own."""

    text: str
    # True when the unit is one line of per-line input
    is_line: bool = False


def _strip_line_ending(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def read_lines(stream: TextIO) -> Iterator[InputUnit]:
    """
    Lazily yield one unit per line until the stream is exhausted.

    The generator is single-pass. A read failure raises InputReadError after
    the lines read so far have been yielded.
    """
    count = 0
    try:
        for line in stream:
            count += 1
            yield InputUnit(_strip_line_ending(line), is_line=True)
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(
            f"error reading stdin: {e}", technical_details={"lines_read": count}
        ) from e
    logger.debug(f"Read {count} lines from input stream")


def read_all(stream: TextIO) -> InputUnit:
    """Read the whole stream into a single unit."""
    try:
        text = stream.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"error reading stdin: {e}") from e
    logger.debug(f"Read {len(text)} characters from input stream")
    return InputUnit(text)


def select_input(
    arguments: Sequence[str], stream: TextIO, per_line: bool = False
) -> Iterator[InputUnit]:
    """
    Decide where input units come from.

    Args:
        arguments: Positional text arguments; when present they are joined with
            single spaces into one unit and ``per_line`` is ignored
        stream: Stream to read when there are no arguments
        per_line: Split the stream into one unit per line

    Returns:
        Iterator over the input units
    """
    if arguments:
        logger.debug("Using positional arguments as input")
        return iter([InputUnit(" ".join(arguments))])
    if per_line:
        logger.debug("Reading input line by line")
        return read_lines(stream)
    return _read_all_lazily(stream)


def _read_all_lazily(stream: TextIO) -> Iterator[InputUnit]:
    yield read_all(stream)

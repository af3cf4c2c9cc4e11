"""Interactive selection of a displayed search result."""

import logging
import re
from typing import TextIO

from rich.console import Console

logger = logging.getLogger(__name__)

PROMPT = "Install Package #: "

_DECIMAL = re.compile(r"[+-]?[0-9]+")


def prompt_selection(count: int, stream: TextIO, console: Console) -> int | None:
    """Asks the user which entry to install until a valid number is given.

    Input that is not a plain ASCII decimal integer, including a blank line
    or end of input, means the user declined and ends the loop without a
    selection. An integer outside ``1..count`` is reported and the prompt
    repeats. Read errors are reported and the prompt repeats.

    Args:
        count: Number of displayed entries.
        stream: Input stream to read lines from.
        console: Console the prompt and diagnostics are printed to.

    Returns:
        The selected 1-based index, or None if the user declined.
    """
    while True:
        console.print(PROMPT, end="", markup=False)
        try:
            line = stream.readline()
        except OSError as e:
            logger.warning("Error reading selection: %s", e)
            console.print("error reading from stdin")
            continue

        text = line.strip()
        if not _DECIMAL.fullmatch(text):
            logger.debug("Selection %r is not a number, aborting", line)
            return None
        selection = int(text)

        if selection < 1 or selection > count:
            console.print(f"No entry for {selection}", markup=False, highlight=False)
            continue

        return selection

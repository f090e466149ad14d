"""SVG path tokenizer — path string → ``[letter, *numbers]`` tuples.

Implicit repetition is expanded (``L1 2 3 4`` yields two L commands and extra
pairs after an M become L). Leftover arguments that do not fill a whole
command are logged and dropped.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# Arguments per command letter
ARG_COUNTS: dict[str, int] = {
    "a": 7,
    "c": 6,
    "h": 1,
    "l": 2,
    "m": 2,
    "q": 4,
    "s": 4,
    "t": 2,
    "v": 1,
    "z": 0,
}

_SEGMENT_RE = re.compile(r"([astvzqmhlc])([^astvzqmhlc]*)", re.IGNORECASE)
_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def tokenize_path(path: str) -> list[list]:
    """Split a path string into command tuples ``[letter, *args]``."""
    commands: list[list] = []
    for match in _SEGMENT_RE.finditer(path or ""):
        letter = match.group(1)
        args = [float(v) for v in _NUMBER_RE.findall(match.group(2))]
        kind = letter.lower()

        # Overloaded moveTo: pairs after the first are line-tos
        if kind == "m" and len(args) > 2:
            commands.append([letter, *args[:2]])
            args = args[2:]
            kind = "l"
            letter = "l" if letter == "m" else "L"

        n = ARG_COUNTS[kind]
        if n == 0:
            commands.append([letter])
            if args:
                logger.warning("Ignoring %d argument(s) after %r", len(args), letter)
            continue

        if not args:
            logger.warning("Command %r without arguments, skipping", letter)
            continue

        while len(args) >= n:
            commands.append([letter, *args[:n]])
            args = args[n:]

        if args:
            logger.warning("Malformed path data: %d dangling argument(s) for %r", len(args), letter)

    return commands

"""Grammar-level parsing of harmonica tabs.

This module turns raw multi-line tab text into ordered entries for the two
notations. Tokens that do not match a notation's grammar are skipped
silently; range validation of diatonic holes is left to the layout lookup.
"""

from __future__ import annotations

import logging
import re

from harp_converter.layouts import TREMOLO_HOLE_COUNT
from harp_converter.tab_parser.models import DiatonicEntry, TremoloEntry
from harp_converter.tab_parser.tokenizer import tokenize_line

logger = logging.getLogger(__name__)

# Optional sign (+ blow, - draw) followed by a hole number
DIATONIC_TOKEN_RE = re.compile(r"^([+-]?)([0-9]+)$")

# Bare hole number
TREMOLO_TOKEN_RE = re.compile(r"^[0-9]+$")


def preprocess(text: str) -> list[str]:
    """Preprocess input text into lines.

    Normalizes line endings and preserves original line content, including
    empty lines (only the newline character is stripped).

    Parameters
    ----------
    text : str
        The raw input text.

    Returns
    -------
    list[str]
        List of lines without trailing newlines.

    Examples
    --------
    >>> preprocess("+4 -4\\r\\n\\n+5")
    ['+4 -4', '', '+5']
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.split("\n")


def parse_diatonic_tab(text: str) -> list[DiatonicEntry]:
    """Parse diatonic notation into entries.

    Parameters
    ----------
    text : str
        Tab text; lines of whitespace-separated tokens like ``+4 -5``.

    Returns
    -------
    list[DiatonicEntry]
        Entries in reading order (top-to-bottom, left-to-right).

    Examples
    --------
    >>> entries = parse_diatonic_tab("+4 -5\\nla 6")
    >>> [(e.hole, e.action, e.line) for e in entries]
    [(4, 'blow', 0), (5, 'draw', 0), (6, 'blow', 1)]
    """
    entries: list[DiatonicEntry] = []
    for line_no, line in enumerate(preprocess(text)):
        for token in tokenize_line(line):
            match = DIATONIC_TOKEN_RE.match(token.text)
            if match is None:
                logger.debug("Skipping non-diatonic token %r at line %d, column %d", token.text, line_no, token.start)
                continue
            sign, digits = match.groups()
            entries.append(
                DiatonicEntry(
                    hole=int(digits),
                    action="draw" if sign == "-" else "blow",
                    token=token,
                    line=line_no,
                )
            )
    return entries


def parse_tremolo_tab(text: str) -> list[TremoloEntry]:
    """Parse tremolo notation into entries.

    Only bare integers in [1, 24] are accepted; everything else, including
    out-of-range numbers, is skipped.

    Parameters
    ----------
    text : str
        Tab text; lines of whitespace-separated hole numbers like ``9 11 13``.

    Returns
    -------
    list[TremoloEntry]
        Entries in reading order.

    Examples
    --------
    >>> [e.hole for e in parse_tremolo_tab("9 25 x 13")]
    [9, 13]
    """
    entries: list[TremoloEntry] = []
    for line_no, line in enumerate(preprocess(text)):
        for token in tokenize_line(line):
            if TREMOLO_TOKEN_RE.match(token.text) is None:
                logger.debug("Skipping non-tremolo token %r at line %d, column %d", token.text, line_no, token.start)
                continue
            hole = int(token.text)
            if not 1 <= hole <= TREMOLO_HOLE_COUNT:
                logger.debug("Skipping out-of-range tremolo hole %d at line %d, column %d", hole, line_no, token.start)
                continue
            entries.append(TremoloEntry(hole=hole, token=token, line=line_no))
    return entries

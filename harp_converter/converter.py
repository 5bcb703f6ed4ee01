"""Harmonica notation converter between diatonic and tremolo tabs.

This module converts tab text between the 10-hole diatonic notation
(e.g., "+4 -5") and the 24-hole tremolo notation (e.g., "9 12") by matching
pitches through the Key-of-C layout tables. Conversion is best-effort:
pitches the target instrument cannot play are kept as ``[token]``
placeholders and reported as warnings.

Examples
--------
>>> convert_diatonic_to_tremolo("+4 -5 +6").converted_tab
'9 12 13'
>>> convert_tremolo_to_diatonic("9 12 13").converted_tab
'+4 -5 +6'
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

from harp_converter.layouts import (
    DIATONIC_C_LAYOUT,
    TREMOLO_C_LAYOUT,
    find_hole_for_pitch,
    format_tab_token,
    lookup_pitch,
)
from harp_converter.models import ConversionResult, HarmonicaType
from harp_converter.tab_parser.models import DiatonicEntry, TabEntry, TremoloEntry
from harp_converter.tab_parser.parser import parse_diatonic_tab, parse_tremolo_tab, preprocess

logger = logging.getLogger(__name__)

EntryT = TypeVar("EntryT", bound=TabEntry)

HARMONICA_TYPES: tuple[HarmonicaType, ...] = ("diatonic", "tremolo")


class _Accumulator:
    """Collects errors and warnings during a single conversion."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def error(self, message: str, entry: TabEntry) -> None:
        logger.debug("Conversion error at line %d, column %d: %s", entry.line, entry.token.start, message)
        self.errors.append(message)

    def warning(self, message: str, entry: TabEntry) -> None:
        logger.debug("Conversion warning at line %d, column %d: %s", entry.line, entry.token.start, message)
        self.warnings.append(message)

    def result(self, converted_tab: str) -> ConversionResult:
        return ConversionResult(
            converted_tab=converted_tab,
            errors=tuple(self.errors),
            warnings=tuple(self.warnings),
        )


def _rebuild_lines(
    lines: Sequence[str],
    entries: Sequence[EntryT],
    convert_entry: Callable[[EntryT], str | None],
) -> str:
    """Reassemble output text line by line.

    Entries are consumed in parse order. ``convert_entry`` returns the output
    token for an entry, or None to drop it. Blank source lines stay blank;
    a non-blank line that emits no tokens is left out of the output.
    """
    by_line: dict[int, list[EntryT]] = {}
    for entry in entries:
        by_line.setdefault(entry.line, []).append(entry)

    output: list[str] = []
    for line_no, line in enumerate(lines):
        emitted: list[str] = []
        for entry in by_line.get(line_no, []):
            token = convert_entry(entry)
            if token is not None:
                emitted.append(token)
        if emitted:
            output.append(" ".join(emitted))
        elif not line.strip():
            output.append("")
    return "\n".join(output)


def convert_diatonic_to_tremolo(tab: str) -> ConversionResult:
    """Convert diatonic notation to tremolo notation.

    Each entry's pitch is looked up on the diatonic C harmonica and matched
    against a tremolo hole played with the same action.

    Parameters
    ----------
    tab : str
        Diatonic tab text (e.g., "+4 -4\\n+5 -5").

    Returns
    -------
    ConversionResult
        The converted tab with accumulated errors and warnings. Invalid
        holes are errors and are dropped from the output; pitches missing
        on the tremolo are warnings and become ``[token]`` placeholders.

    Examples
    --------
    >>> result = convert_diatonic_to_tremolo("+4 -2 +99")
    >>> result.converted_tab
    '9 [-2]'
    >>> result.errors
    ('Invalid diatonic hole: 99',)
    >>> result.warnings
    ('Note G4 (draw) from -2 not available on tremolo harmonica',)
    """
    entries = parse_diatonic_tab(tab)
    if not entries:
        return ConversionResult(converted_tab="", errors=("No valid diatonic notation found",))

    acc = _Accumulator()

    def convert_entry(entry: DiatonicEntry) -> str | None:
        pitch = lookup_pitch(DIATONIC_C_LAYOUT, entry.hole, entry.action)
        if pitch is None:
            acc.error(f"Invalid diatonic hole: {entry.hole}", entry)
            return None

        found = find_hole_for_pitch(TREMOLO_C_LAYOUT, pitch, required_action=entry.action)
        if found is None:
            acc.warning(f"Note {pitch} ({entry.action}) from {entry.raw} not available on tremolo harmonica", entry)
            return f"[{entry.raw}]"

        hole, action = found
        return format_tab_token("tremolo", hole, action)

    converted = _rebuild_lines(preprocess(tab), entries, convert_entry)
    logger.debug(
        "Converted %d diatonic entries (%d errors, %d warnings)",
        len(entries),
        len(acc.errors),
        len(acc.warnings),
    )
    return acc.result(converted)


def convert_tremolo_to_diatonic(tab: str) -> ConversionResult:
    """Convert tremolo notation to diatonic notation.

    Each tremolo hole's pitch is matched on the diatonic C harmonica by pitch
    alone: either blow or draw may produce it. A diatonic hole played with
    the tremolo hole's own action is preferred when both exist.

    Parameters
    ----------
    tab : str
        Tremolo tab text (e.g., "9 11 13").

    Returns
    -------
    ConversionResult
        The converted tab (``+N`` blow, ``-N`` draw) with accumulated errors
        and warnings.

    Examples
    --------
    >>> convert_tremolo_to_diatonic("7 14").converted_tab
    '+3 -6'
    >>> convert_tremolo_to_diatonic("1 9").warnings
    ('Note G3 from tremolo hole 1 not available on diatonic harmonica',)
    """
    entries = parse_tremolo_tab(tab)
    if not entries:
        return ConversionResult(converted_tab="", errors=("No valid tremolo notation found",))

    acc = _Accumulator()

    def convert_entry(entry: TremoloEntry) -> str | None:
        record = TREMOLO_C_LAYOUT.get(entry.hole)
        if record is None:
            acc.error(f"Invalid tremolo hole: {entry.hole}", entry)
            return None

        found = find_hole_for_pitch(DIATONIC_C_LAYOUT, record.pitch, preferred_action=record.action)
        if found is None:
            acc.warning(f"Note {record.pitch} from tremolo hole {entry.raw} not available on diatonic harmonica", entry)
            return f"[{entry.raw}]"

        hole, action = found
        return format_tab_token("diatonic", hole, action)

    converted = _rebuild_lines(preprocess(tab), entries, convert_entry)
    logger.debug(
        "Converted %d tremolo entries (%d errors, %d warnings)",
        len(entries),
        len(acc.errors),
        len(acc.warnings),
    )
    return acc.result(converted)


def convert_tab(tab: str, source: HarmonicaType, target: HarmonicaType) -> ConversionResult:
    """Convert a tab from one harmonica type's notation to another's.

    Parameters
    ----------
    tab : str
        The tab text.
    source : HarmonicaType
        Notation of ``tab``.
    target : HarmonicaType
        Desired notation.

    Returns
    -------
    ConversionResult
        The conversion result. When ``source == target`` the tab is
        returned unchanged.

    Raises
    ------
    ValueError
        If either harmonica type is unknown.

    Examples
    --------
    >>> convert_tab("+4", "diatonic", "tremolo").converted_tab
    '9'
    >>> convert_tab("+4", "diatonic", "diatonic").converted_tab
    '+4'
    """
    for harmonica_type in (source, target):
        if harmonica_type not in HARMONICA_TYPES:
            msg = f"Unknown harmonica type: {harmonica_type}"
            raise ValueError(msg)

    if source == target:
        return ConversionResult(converted_tab=tab)
    if source == "diatonic":
        return convert_diatonic_to_tremolo(tab)
    return convert_tremolo_to_diatonic(tab)


def display_tab(tab: str, stored_type: HarmonicaType, display_type: HarmonicaType) -> str:
    """Return a stored tab rendered in another notation for display.

    Falls back to the original text when the conversion produced nothing,
    so callers never show an empty tab.

    Examples
    --------
    >>> display_tab("9 12", "tremolo", "diatonic")
    '+4 -5'
    >>> display_tab("hello", "tremolo", "diatonic")
    'hello'
    """
    result = convert_tab(tab, stored_type, display_type)
    return result.converted_tab or tab

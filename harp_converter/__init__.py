"""Harmonica tab converter between diatonic and tremolo notations.

This library translates tab notation for a 10-hole diatonic harmonica
(signed hole numbers, e.g. "+4 -5") into notation for a 24-hole tremolo
harmonica (bare hole numbers, e.g. "9 12") and back, matching notes by pitch
on Key-of-C instruments.

Examples
--------
>>> from harp_converter import convert_diatonic_to_tremolo, convert_tremolo_to_diatonic

>>> result = convert_diatonic_to_tremolo("+4 -5 +6 -6 +7")
>>> result.converted_tab
'9 12 13 14 15'
>>> result.success
True

>>> convert_tremolo_to_diatonic("9 12 13 14 15").converted_tab
'+4 -5 +6 -6 +7'
"""

from harp_converter.converter import (
    convert_diatonic_to_tremolo,
    convert_tab,
    convert_tremolo_to_diatonic,
    display_tab,
)
from harp_converter.layouts import (
    DIATONIC_C_LAYOUT,
    HARMONICA_KEYS,
    TREMOLO_C_LAYOUT,
    find_hole_for_pitch,
    find_tab_for_note,
    get_layout,
    lookup_pitch,
)
from harp_converter.models import (
    ConversionResult,
    DiatonicHole,
    HarmonicaType,
    HoleAction,
    Pitch,
    TremoloHole,
)
from harp_converter.pitch import parse_pitch

__version__ = "0.1.0"

__all__ = [
    "DIATONIC_C_LAYOUT",
    "HARMONICA_KEYS",
    "TREMOLO_C_LAYOUT",
    "ConversionResult",
    "DiatonicHole",
    "HarmonicaType",
    "HoleAction",
    "Pitch",
    "TremoloHole",
    "convert_diatonic_to_tremolo",
    "convert_tab",
    "convert_tremolo_to_diatonic",
    "display_tab",
    "find_hole_for_pitch",
    "find_tab_for_note",
    "get_layout",
    "lookup_pitch",
    "parse_pitch",
]

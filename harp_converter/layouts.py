"""Harmonica layout tables and pitch lookups.

This module provides the Key-of-C pitch tables for the 10-hole diatonic
(Richter tuned) and 24-hole tremolo harmonicas, plus the lookups the
converter uses to move between them.

Examples
--------
>>> from harp_converter.layouts import DIATONIC_C_LAYOUT, TREMOLO_C_LAYOUT
>>> str(lookup_pitch(DIATONIC_C_LAYOUT, 4, "blow"))
'C5'
>>> find_hole_for_pitch(TREMOLO_C_LAYOUT, Pitch("C", 5), required_action="blow")
(9, 'blow')
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from harp_converter.models import DiatonicHole, HarmonicaType, HoleAction, Pitch, TremoloHole
from harp_converter.pitch import note_to_pc, parse_pitch, transpose_pitch

DiatonicLayout = Mapping[int, DiatonicHole]
TremoloLayout = Mapping[int, TremoloHole]
Layout = DiatonicLayout | TremoloLayout

HARMONICA_KEYS: tuple[str, ...] = ("G", "Ab", "A", "Bb", "B", "C", "Db", "D", "Eb", "E", "F", "F#")

TREMOLO_HOLE_COUNT = 24


def _diatonic(blow: str, draw: str) -> DiatonicHole:
    return DiatonicHole(blow=parse_pitch(blow), draw=parse_pitch(draw))


def _tremolo(note: str, action: HoleAction) -> TremoloHole:
    return TremoloHole(pitch=parse_pitch(note), action=action)


# Richter tuning, Key of C
DIATONIC_C_LAYOUT: DiatonicLayout = MappingProxyType(
    {
        1: _diatonic("C4", "D4"),
        2: _diatonic("E4", "G4"),
        3: _diatonic("G4", "B4"),
        4: _diatonic("C5", "D5"),
        5: _diatonic("E5", "F5"),
        6: _diatonic("G5", "A5"),
        7: _diatonic("C6", "B5"),
        8: _diatonic("E6", "D6"),
        9: _diatonic("G6", "F6"),
        10: _diatonic("C7", "A6"),
    }
)

# Odd holes blow, even holes draw
TREMOLO_C_LAYOUT: TremoloLayout = MappingProxyType(
    {
        1: _tremolo("G3", "blow"),
        2: _tremolo("D4", "draw"),
        3: _tremolo("C4", "blow"),
        4: _tremolo("F4", "draw"),
        5: _tremolo("E4", "blow"),
        6: _tremolo("A4", "draw"),
        7: _tremolo("G4", "blow"),
        8: _tremolo("B4", "draw"),
        9: _tremolo("C5", "blow"),
        10: _tremolo("D5", "draw"),
        11: _tremolo("E5", "blow"),
        12: _tremolo("F5", "draw"),
        13: _tremolo("G5", "blow"),
        14: _tremolo("A5", "draw"),
        15: _tremolo("C6", "blow"),
        16: _tremolo("B5", "draw"),
        17: _tremolo("E6", "blow"),
        18: _tremolo("D6", "draw"),
        19: _tremolo("G6", "blow"),
        20: _tremolo("F6", "draw"),
        21: _tremolo("C7", "blow"),
        22: _tremolo("A6", "draw"),
        23: _tremolo("E7", "blow"),
        24: _tremolo("B6", "draw"),
    }
)

ACTIONS: tuple[HoleAction, ...] = ("blow", "draw")


def lookup_pitch(layout: Layout, hole: int, action: HoleAction) -> Pitch | None:
    """Return the pitch a hole produces for an action.

    Parameters
    ----------
    layout : Layout
        A diatonic or tremolo layout.
    hole : int
        Hole number.
    action : HoleAction
        "blow" or "draw".

    Returns
    -------
    Pitch | None
        The pitch, or None if the hole is not in the layout or (tremolo
        only) the hole does not support ``action``.

    Examples
    --------
    >>> str(lookup_pitch(TREMOLO_C_LAYOUT, 7, "blow"))
    'G4'
    >>> lookup_pitch(TREMOLO_C_LAYOUT, 7, "draw") is None
    True
    >>> lookup_pitch(DIATONIC_C_LAYOUT, 11, "blow") is None
    True
    """
    record = layout.get(hole)
    if record is None:
        return None
    if isinstance(record, DiatonicHole):
        return record.pitch(action)
    if record.action != action:
        return None
    return record.pitch


def find_hole_for_pitch(
    layout: Layout,
    pitch: Pitch,
    *,
    required_action: HoleAction | None = None,
    preferred_action: HoleAction | None = None,
) -> tuple[int, HoleAction] | None:
    """Find the first hole (by ascending number) that sounds ``pitch``.

    Parameters
    ----------
    layout : Layout
        The layout to search.
    pitch : Pitch
        The pitch to find.
    required_action : HoleAction | None
        Only accept holes played with this action.
    preferred_action : HoleAction | None
        When no action is required, first look for a hole played with this
        action and fall back to any action. Ignored when ``required_action``
        is given.

    Returns
    -------
    tuple[int, HoleAction] | None
        The hole number and the action that produces ``pitch``, or None.

    Examples
    --------
    >>> find_hole_for_pitch(DIATONIC_C_LAYOUT, Pitch("G", 4))
    (2, 'draw')
    >>> find_hole_for_pitch(DIATONIC_C_LAYOUT, Pitch("G", 4), preferred_action="blow")
    (3, 'blow')
    >>> find_hole_for_pitch(TREMOLO_C_LAYOUT, Pitch("G", 4), required_action="draw") is None
    True
    """
    if required_action is not None:
        return _scan(layout, pitch, (required_action,))
    if preferred_action is not None:
        found = _scan(layout, pitch, (preferred_action,))
        if found is not None:
            return found
    return _scan(layout, pitch, ACTIONS)


def _scan(layout: Layout, pitch: Pitch, actions: tuple[HoleAction, ...]) -> tuple[int, HoleAction] | None:
    for hole in sorted(layout):
        record = layout[hole]
        if isinstance(record, DiatonicHole):
            for action in actions:
                if record.pitch(action) == pitch:
                    return hole, action
        elif record.action in actions and record.pitch == pitch:
            return hole, record.action
    return None


def transpose_layout(layout: Layout, semitones: int) -> Layout:
    """Return a copy of ``layout`` with every pitch shifted by ``semitones``.

    Hole numbers and actions are unchanged.
    """
    shifted: dict[int, DiatonicHole | TremoloHole] = {}
    for hole, record in layout.items():
        if isinstance(record, DiatonicHole):
            shifted[hole] = DiatonicHole(
                blow=transpose_pitch(record.blow, semitones),
                draw=transpose_pitch(record.draw, semitones),
            )
        else:
            shifted[hole] = TremoloHole(pitch=transpose_pitch(record.pitch, semitones), action=record.action)
    return MappingProxyType(shifted)


def get_layout(harmonica_type: HarmonicaType, key: str = "C") -> Layout:
    """Return the layout of a harmonica type in a given key.

    Keys other than C are derived by transposing the C table upward by the
    key's pitch-class distance from C.

    Parameters
    ----------
    harmonica_type : HarmonicaType
        "diatonic" or "tremolo".
    key : str
        One of ``HARMONICA_KEYS``.

    Returns
    -------
    Layout
        The (read-only) layout.

    Raises
    ------
    ValueError
        If the harmonica type or key is unknown.

    Examples
    --------
    >>> str(get_layout("diatonic", "D")[1].blow)
    'D4'
    """
    if harmonica_type == "diatonic":
        base: Layout = DIATONIC_C_LAYOUT
    elif harmonica_type == "tremolo":
        base = TREMOLO_C_LAYOUT
    else:
        msg = f"Unknown harmonica type: {harmonica_type}"
        raise ValueError(msg)

    if key not in HARMONICA_KEYS:
        msg = f"Unknown harmonica key: {key}"
        raise ValueError(msg)
    if key == "C":
        return base
    return transpose_layout(base, note_to_pc(key))


def find_tab_for_note(
    pitch: Pitch,
    harmonica_type: HarmonicaType = "diatonic",
    key: str = "C",
) -> tuple[int, HoleAction] | None:
    """Find where ``pitch`` is played on a harmonica.

    Examples
    --------
    >>> find_tab_for_note(Pitch("A", 5))
    (6, 'draw')
    >>> find_tab_for_note(Pitch("A", 5), "tremolo")
    (14, 'draw')
    """
    return find_hole_for_pitch(get_layout(harmonica_type, key), pitch)


def format_tab_token(harmonica_type: HarmonicaType, hole: int, action: HoleAction) -> str:
    """Render a hole as notation text: ``+4``/``-4`` diatonic, ``9`` tremolo.

    Examples
    --------
    >>> format_tab_token("diatonic", 4, "draw")
    '-4'
    >>> format_tab_token("tremolo", 9, "blow")
    '9'
    """
    if harmonica_type == "tremolo":
        return str(hole)
    sign = "+" if action == "blow" else "-"
    return f"{sign}{hole}"

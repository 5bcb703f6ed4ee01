"""Pitch operations for harmonica layouts.

This module converts between note names, pitch classes and MIDI numbers,
and provides the transposition used to derive layouts in other keys.
"""

from __future__ import annotations

import re

from pychord.utils import note_to_val

from harp_converter.models import NOTE_NAMES, Pitch

# Note name (with optional accidental) followed by a possibly negative octave
PITCH_RE = re.compile(r"^([A-Ga-g][#b]?)(-?\d+)$")

ACCIDENTAL_OFFSETS: dict[str, int] = {"#": 1, "b": -1}


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("C")
    0
    >>> note_to_pc("F#")
    6
    >>> note_to_pc("Bb")
    10
    """
    try:
        return note_to_val(note) % 12
    except (ValueError, KeyError):
        msg = f"Unknown note: {note}"
        raise ValueError(msg) from None


def pc_to_note(pc: int) -> str:
    """Return the sharp-spelled name for a pitch class.

    Examples
    --------
    >>> pc_to_note(10)
    'A#'
    """
    return NOTE_NAMES[pc % 12]


def parse_pitch(text: str) -> Pitch:
    """Parse a pitch string such as ``"C4"`` or ``"Bb3"``.

    Flats are respelled as sharps so the result compares equal to the
    entries of the layout tables.

    Parameters
    ----------
    text : str
        Note name followed by an octave number.

    Returns
    -------
    Pitch
        The parsed, sharp-spelled pitch.

    Raises
    ------
    ValueError
        If the text is not a note name followed by an octave.

    Examples
    --------
    >>> str(parse_pitch("Bb4"))
    'A#4'
    >>> str(parse_pitch("c5"))
    'C5'
    >>> str(parse_pitch("Cb4"))
    'B3'
    """
    match = PITCH_RE.match(text.strip())
    if match is None:
        msg = f"Invalid pitch: {text!r}"
        raise ValueError(msg)
    name, octave = match.groups()
    # Accidentals can cross the octave boundary (Cb4 is B3, B#3 is C4)
    raw = note_to_pc(name[0].upper()) + ACCIDENTAL_OFFSETS.get(name[1:], 0)
    return Pitch(pc_to_note(raw), int(octave) + raw // 12)


def pitch_to_midi(pitch: Pitch) -> int:
    """Return the MIDI note number of ``pitch`` (``C4`` is 60).

    Examples
    --------
    >>> pitch_to_midi(Pitch("C", 4))
    60
    >>> pitch_to_midi(Pitch("A", 4))
    69
    """
    return (pitch.octave + 1) * 12 + NOTE_NAMES.index(pitch.name)


def transpose_pitch(pitch: Pitch, semitones: int) -> Pitch:
    """Transpose a pitch by a number of semitones, carrying the octave.

    Parameters
    ----------
    pitch : Pitch
        The pitch to transpose.
    semitones : int
        Number of semitones to transpose (positive = up).

    Returns
    -------
    Pitch
        Transposed, sharp-spelled pitch.

    Examples
    --------
    >>> str(transpose_pitch(Pitch("B", 4), 1))
    'C5'
    >>> str(transpose_pitch(Pitch("C", 4), -1))
    'B3'
    """
    index = NOTE_NAMES.index(pitch.name) + semitones
    return Pitch(pc_to_note(index), pitch.octave + index // 12)


def note_options(low_octave: int = 3, high_octave: int = 7) -> list[Pitch]:
    """List every sharp-spelled pitch from ``low_octave`` to ``high_octave``.

    Examples
    --------
    >>> options = note_options(4, 4)
    >>> len(options), str(options[0]), str(options[-1])
    (12, 'C4', 'B4')
    """
    return [Pitch(name, octave) for octave in range(low_octave, high_octave + 1) for name in NOTE_NAMES]

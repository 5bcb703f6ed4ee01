"""Core data models for harp-converter.

This module defines the value types shared by the layout tables and the
notation converter: pitches, hole records and conversion results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

HoleAction = Literal["blow", "draw"]
HarmonicaType = Literal["diatonic", "tremolo"]

# Sharp-spelled chromatic note names (index 0 = C)
NOTE_NAMES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")


@dataclass(frozen=True)
class Pitch:
    """A note name plus octave, e.g. ``C4``.

    Two pitches are equal only when both the name and the octave match;
    enharmonic spellings are not folded (use ``parse_pitch`` to normalize
    flats before constructing).

    Parameters
    ----------
    name : str
        Sharp-spelled note name (one of ``NOTE_NAMES``).
    octave : int
        Scientific pitch notation octave (middle C is ``C4``).

    Raises
    ------
    ValueError
        If ``name`` is not a sharp-spelled chromatic name.

    Examples
    --------
    >>> str(Pitch("G", 4))
    'G4'
    >>> Pitch("C", 5) == Pitch("C", 5)
    True
    """

    name: str
    octave: int

    def __post_init__(self) -> None:
        if self.name not in NOTE_NAMES:
            msg = f"Unknown note name: {self.name}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f"{self.name}{self.octave}"


@dataclass(frozen=True)
class DiatonicHole:
    """A diatonic hole producing one pitch per action.

    Parameters
    ----------
    blow : Pitch
        Pitch sounded when exhaling.
    draw : Pitch
        Pitch sounded when inhaling.
    """

    blow: Pitch
    draw: Pitch

    def pitch(self, action: HoleAction) -> Pitch:
        """Return the pitch for ``action``."""
        return self.blow if action == "blow" else self.draw


@dataclass(frozen=True)
class TremoloHole:
    """A tremolo hole with a single fixed action.

    Parameters
    ----------
    pitch : Pitch
        The pitch sounded by this hole.
    action : HoleAction
        The only action the hole supports.
    """

    pitch: Pitch
    action: HoleAction


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a tab conversion.

    Errors and warnings are accumulated rather than raised. A conversion is
    successful when no errors were recorded; warnings mark tokens that were
    kept as ``[token]`` placeholders.

    Parameters
    ----------
    converted_tab : str
        The converted notation, or ``""`` when nothing could be parsed.
    errors : tuple[str, ...]
        Hard problems (invalid holes, no valid notation).
    warnings : tuple[str, ...]
        Pitches with no equivalent on the target instrument.
    """

    converted_tab: str
    errors: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def success(self) -> bool:
        """True when no errors were recorded."""
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase JSON shape used by API consumers.

        Examples
        --------
        >>> ConversionResult(converted_tab="9").to_dict()
        {'success': True, 'convertedTab': '9', 'errors': [], 'warnings': []}
        """
        return {
            "success": self.success,
            "convertedTab": self.converted_tab,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }

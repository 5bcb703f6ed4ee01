"""Data models for harmonica tab parsing.

This module defines the tokens produced by the tokenizer and the entries
produced by the diatonic and tremolo grammars.
"""

from __future__ import annotations

from dataclasses import dataclass

from harp_converter.models import HoleAction


@dataclass(frozen=True)
class TabToken:
    """A whitespace-delimited token with column span information.

    Parameters
    ----------
    text : str
        The token text content.
    start : int
        Inclusive start column (0-indexed).
    end : int
        Exclusive end column.

    Examples
    --------
    >>> token = TabToken(text="-4", start=0, end=2)
    >>> token.start, token.end
    (0, 2)
    """

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class DiatonicEntry:
    """A parsed diatonic play such as ``+4`` or ``-5``.

    Parameters
    ----------
    hole : int
        Hole number. Not range-checked at parse time.
    action : HoleAction
        "blow" for ``+`` or no sign, "draw" for ``-``.
    token : TabToken
        The source token.
    line : int
        Index of the source line (0-indexed).
    """

    hole: int
    action: HoleAction
    token: TabToken
    line: int

    @property
    def raw(self) -> str:
        """The original token text."""
        return self.token.text


@dataclass(frozen=True)
class TremoloEntry:
    """A parsed tremolo play (a bare hole number).

    Parameters
    ----------
    hole : int
        Hole number in [1, 24].
    token : TabToken
        The source token.
    line : int
        Index of the source line (0-indexed).
    """

    hole: int
    token: TabToken
    line: int

    @property
    def raw(self) -> str:
        """The original token text."""
        return self.token.text


TabEntry = DiatonicEntry | TremoloEntry

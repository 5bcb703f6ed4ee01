"""Harmonica tab parser.

This module provides functionality to tokenize plain-text harmonica tabs
and parse them into diatonic or tremolo entries that remember their line.
"""

from harp_converter.tab_parser.models import DiatonicEntry, TabEntry, TabToken, TremoloEntry
from harp_converter.tab_parser.parser import parse_diatonic_tab, parse_tremolo_tab, preprocess
from harp_converter.tab_parser.tokenizer import tokenize_line

__all__ = [
    "DiatonicEntry",
    "TabEntry",
    "TabToken",
    "TremoloEntry",
    "parse_diatonic_tab",
    "parse_tremolo_tab",
    "preprocess",
    "tokenize_line",
]

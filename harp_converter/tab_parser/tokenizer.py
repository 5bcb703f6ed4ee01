"""Column-aware tokenizer for harmonica tabs.

This module splits a tab line on runs of whitespace while keeping the column
span of every token, so diagnostics can point back at the source text.
"""

from harp_converter.tab_parser.models import TabToken


def tokenize_line(line: str) -> list[TabToken]:
    """Tokenize a line preserving column spans.

    Splits on whitespace while tracking the start and end column positions
    of each token. Does not strip the line.

    Parameters
    ----------
    line : str
        The line to tokenize. Should not include newline characters.

    Returns
    -------
    list[TabToken]
        List of tokens with text, start (inclusive) and end (exclusive).

    Examples
    --------
    >>> tokens = tokenize_line("+4  -5")
    >>> [(t.text, t.start, t.end) for t in tokens]
    [('+4', 0, 2), ('-5', 4, 6)]

    >>> tokens = tokenize_line("\\t9 11 ")
    >>> [(t.text, t.start, t.end) for t in tokens]
    [('9', 1, 2), ('11', 3, 5)]
    """
    tokens: list[TabToken] = []
    i = 0
    n = len(line)

    while i < n:
        # Skip whitespace
        if line[i].isspace():
            i += 1
            continue

        start = i

        # Capture maximal non-whitespace substring
        while i < n and not line[i].isspace():
            i += 1

        tokens.append(TabToken(text=line[start:i], start=start, end=i))

    return tokens

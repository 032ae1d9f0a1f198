"""Whitespace-preserving tokenizer for lyric text.

Unlike a plain ``str.split``, whitespace is kept as tokens of its own so
that a line can be rebuilt exactly from its tokens.
"""

from __future__ import annotations

from collections.abc import Iterable

from chord_editor.sheet.models import Line, Token


def split_lines(text: str) -> list[str]:
    """Split text into lines, normalizing line endings.

    Parameters
    ----------
    text : str
        The raw text.

    Returns
    -------
    list[str]
        Lines without their newline characters.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.split("\n")


def tokenize_line(line: str) -> tuple[Token, ...]:
    """Tokenize a line into word and space tokens.

    Each maximal whitespace run becomes one space token and each maximal
    non-whitespace run becomes one word token. Concatenating the token
    texts gives back *line* exactly.

    Parameters
    ----------
    line : str
        The line to tokenize. Should not include newline characters.

    Returns
    -------
    tuple[Token, ...]
        Tokens in order, without chords.

    Examples
    --------
    >>> tokens = tokenize_line("Hello  world")
    >>> [(t.text, t.is_space) for t in tokens]
    [('Hello', False), ('  ', True), ('world', False)]
    >>> tokenize_line("")
    ()
    """
    tokens: list[Token] = []
    i = 0
    n = len(line)

    while i < n:
        start = i
        is_space = line[i].isspace()

        # Capture the maximal run of the same kind
        while i < n and line[i].isspace() == is_space:
            i += 1

        tokens.append(Token(text=line[start:i], is_space=is_space))

    return tuple(tokens)


def tokenize_text(text: str) -> tuple[Line, ...]:
    """Tokenize multi-line text, one Line per source line.

    Blank lines are kept as lines without tokens.

    Examples
    --------
    >>> lines = tokenize_text("one two\\n\\nthree")
    >>> [len(line.tokens) for line in lines]
    [3, 0, 1]
    """
    return tuple(Line(tokens=tokenize_line(line)) for line in split_lines(text))


def lines_to_text(lines: Iterable[Line]) -> str:
    """Return the plain text of *lines*, chords stripped, joined by newlines."""
    return "\n".join(line.text for line in lines)

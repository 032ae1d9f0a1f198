"""ChordPro-style interchange codec.

Parses inline chord notation (``[Am]Hello [G]world``) and directive-based
documents (``{title: ...}``, ``{sov}`` ... ``{eov}``) into the song model,
and serializes songs back.

Directive mapping
-----------------

==============================  ====================================
Directive (aliases)             Effect
==============================  ====================================
``title`` / ``t``               song title
``artist`` / ``st``             song artist
``key``                         song key
``capo``                        capo fret (integer values only)
``sov`` / ``start_of_verse``    open a verse (``eov`` closes)
``soc`` / ``start_of_chorus``   open a chorus (``eoc`` closes)
``sob`` / ``start_of_bridge``   open a bridge (``eob`` closes)
``c`` / ``comment``             label of the open section
==============================  ====================================

Intro, outro and custom sections have no directive of their own and are
written with the verse pair, so their type does not survive a round trip
through text.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace

from chord_editor import config
from chord_editor.sheet.language import song_language
from chord_editor.sheet.models import Line, Section, SectionType, Song, Token
from chord_editor.sheet.tokenizer import split_lines, tokenize_line

logger = logging.getLogger(__name__)

# Inline chord marker, captured so re.split keeps it
CHORD_MARKER_RE = re.compile(r"(\[[^\]]*\])")
CHORD_PIECE_RE = re.compile(r"\[([^\]]*)\]")

# {name} or {name: value}
DIRECTIVE_RE = re.compile(r"^\{([^:}]+)(?::([^}]*))?\}$")

# Lyric content that opens a verse when no section is open
LYRIC_CONTENT_RE = re.compile(r"[\[A-Za-z\u0590-\u05FF]")

METADATA_DIRECTIVES: dict[str, str] = {
    "title": "title",
    "t": "title",
    "artist": "artist",
    "st": "artist",
    "key": "key",
    "capo": "capo",
}

START_DIRECTIVES: dict[str, SectionType] = {
    "sov": "verse",
    "start_of_verse": "verse",
    "soc": "chorus",
    "start_of_chorus": "chorus",
    "sob": "bridge",
    "start_of_bridge": "bridge",
}

END_DIRECTIVES: frozenset[str] = frozenset(
    {"eov", "end_of_verse", "eoc", "end_of_chorus", "eob", "end_of_bridge"}
)

LABEL_DIRECTIVES: frozenset[str] = frozenset({"c", "comment"})

# Section type -> (start, end) directive written on export
SECTION_DIRECTIVES: dict[SectionType, tuple[str, str]] = {
    "verse": ("sov", "eov"),
    "chorus": ("soc", "eoc"),
    "bridge": ("sob", "eob"),
    "intro": ("sov", "eov"),
    "outro": ("sov", "eov"),
    "custom": ("sov", "eov"),
}


@dataclass(frozen=True)
class ChordProDocument:
    """Result of parsing a ChordPro document.

    Parameters
    ----------
    title, artist, key : str | None
        Metadata directives, last occurrence wins.
    capo : int | None
        Capo fret from a ``{capo: N}`` directive.
    sections : tuple[Section, ...]
        Sections holding at least one non-blank line.
    """

    title: str | None = None
    artist: str | None = None
    key: str | None = None
    capo: int | None = None
    sections: tuple[Section, ...] = ()


def parse_line(text: str) -> tuple[Token, ...]:
    """Parse one line of inline chord notation into tokens.

    A chord marker applies to the next word. When markers are stacked
    (``[X][Y]word``) only the last one is kept, and a marker with no word
    after it becomes a trailing token with empty text. Empty markers
    (``[]``) are ignored.

    Parameters
    ----------
    text : str
        The line, without newline.

    Returns
    -------
    tuple[Token, ...]
        Word and space tokens; concatenating their texts gives the line
        with chord markers removed.

    Examples
    --------
    >>> tokens = parse_line("[Am]Hello [G]world")
    >>> [(t.text, t.chord) for t in tokens]
    [('Hello', 'Am'), (' ', None), ('world', 'G')]
    """
    tokens: list[Token] = []
    pending: str | None = None

    for piece in CHORD_MARKER_RE.split(text):
        if not piece:
            continue

        marker = CHORD_PIECE_RE.fullmatch(piece)
        if marker is not None:
            if marker.group(1):
                pending = marker.group(1)
            continue

        for token in tokenize_line(piece):
            if pending is not None and not token.is_space:
                token = token.with_chord(pending)
                pending = None
            tokens.append(token)

    # Dangling chord at end of line
    if pending is not None:
        tokens.append(Token(text="", chord=pending))

    return tuple(tokens)


def parse_lines(text: str) -> tuple[Line, ...]:
    """Parse a block of inline chord notation, one Line per source line."""
    return tuple(Line(tokens=parse_line(line)) for line in split_lines(text))


def parse_directive(line: str) -> tuple[str, str] | None:
    """Match a directive line.

    Parameters
    ----------
    line : str
        The line to check; surrounding whitespace is ignored.

    Returns
    -------
    tuple[str, str] | None
        Lower-cased directive name and trimmed value ("" when absent), or
        None if the line is not a directive.

    Examples
    --------
    >>> parse_directive("{title: Hallelujah}")
    ('title', 'Hallelujah')
    >>> parse_directive("{SOV}")
    ('sov', '')
    >>> parse_directive("[C]Hello") is None
    True
    """
    match = DIRECTIVE_RE.match(line.strip())
    if match is None:
        return None
    name, value = match.groups()
    return name.strip().lower(), (value or "").strip()


def _strip_blank_edges(lines: list[str]) -> list[str]:
    """Drop blank lines at the start and end of a section buffer."""
    start = 0
    end = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def _parse_capo(value: str) -> int | None:
    if value.isdigit():
        return int(value)
    logger.debug("Ignoring non-numeric capo value %r", value)
    return None


def parse_document(text: str) -> ChordProDocument:  # noqa: C901
    """Parse a ChordPro document.

    Unknown directives are ignored. Lines outside any section open a verse
    implicitly when they carry lyric content (a chord marker or a Latin or
    Hebrew letter). Sections without any non-blank line are dropped.

    Parameters
    ----------
    text : str
        The raw document text.

    Returns
    -------
    ChordProDocument
        Metadata and sections.

    Examples
    --------
    >>> doc = parse_document("{title: Test}\\n{sov}\\n[C]Hello [G]world\\n{eov}")
    >>> doc.title
    'Test'
    >>> [t.chord for t in doc.sections[0].lines[0].tokens]
    ['C', None, 'G']
    """
    metadata: dict[str, str | None] = {"title": None, "artist": None, "key": None}
    capo: int | None = None
    sections: list[Section] = []

    current: Section | None = None
    buffered: list[str] = []

    def flush() -> None:
        nonlocal current, buffered
        if current is not None:
            content = _strip_blank_edges(buffered)
            if content:
                lines = tuple(Line(tokens=parse_line(line)) for line in content)
                sections.append(replace(current, lines=lines))
            else:
                logger.debug("Dropping empty %s section", current.type)
        current = None
        buffered = []

    for raw in split_lines(text):
        directive = parse_directive(raw)

        if directive is not None:
            name, value = directive

            if name in METADATA_DIRECTIVES:
                field_name = METADATA_DIRECTIVES[name]
                if field_name == "capo":
                    capo = _parse_capo(value)
                else:
                    metadata[field_name] = value
            elif name in START_DIRECTIVES:
                flush()
                section_type = START_DIRECTIVES[name]
                label = value or config.DEFAULT_SECTION_LABELS[section_type]
                current = Section(type=section_type, label=label)
            elif name in END_DIRECTIVES:
                flush()
            elif name in LABEL_DIRECTIVES:
                if current is not None:
                    current = replace(current, label=value)
            else:
                logger.debug("Ignoring unknown directive %r", name)
            continue

        if current is None and LYRIC_CONTENT_RE.search(raw):
            current = Section(type="verse", label=config.DEFAULT_SECTION_LABELS["verse"])
        if current is not None:
            buffered.append(raw)

    flush()

    return ChordProDocument(
        title=metadata["title"],
        artist=metadata["artist"],
        key=metadata["key"],
        capo=capo,
        sections=tuple(sections),
    )


def parse_song(text: str) -> Song:
    """Parse a ChordPro document into a Song, tagging its language."""
    doc = parse_document(text)
    song = Song(
        title=doc.title or "",
        artist=doc.artist,
        key=doc.key,
        capo=doc.capo,
        sections=doc.sections,
    )
    return replace(song, language=song_language(song))


def serialize_line(tokens: tuple[Token, ...] | list[Token]) -> str:
    """Render tokens back to inline chord notation.

    Examples
    --------
    >>> serialize_line(parse_line("play [G]the song"))
    'play [G]the song'
    """
    return "".join(f"[{token.chord}]{token.text}" if token.chord else token.text for token in tokens)


def serialize_lines(lines: tuple[Line, ...] | list[Line]) -> str:
    """Render lines to inline chord notation, joined by newlines."""
    return "\n".join(serialize_line(line.tokens) for line in lines)


def _serialize_section(section: Section) -> list[str]:
    """Return the lines for one section, wrapped in its directive pair."""
    start, end = SECTION_DIRECTIVES[section.type]
    parts = [f"{{{start}}}"]
    if section.label:
        parts.append(f"{{c: {section.label}}}")
    parts.extend(serialize_line(line.tokens) for line in section.lines)
    parts.append(f"{{{end}}}")
    return parts


def serialize_song(song: Song) -> str:
    """Render a song as a ChordPro document.

    The returned string ends with a single newline and uses Unix line
    endings throughout.
    """
    parts: list[str] = [f"{{title: {song.title}}}"]
    if song.artist:
        parts.append(f"{{artist: {song.artist}}}")
    if song.key:
        parts.append(f"{{key: {song.key}}}")
    if song.capo is not None:
        parts.append(f"{{capo: {song.capo}}}")

    for section in song.sections:
        parts.append("")  # blank line before every section
        parts.extend(_serialize_section(section))

    return "\n".join(parts) + "\n"

"""Data models for chord-annotated songs.

This module defines the immutable song structure edited by the rest of
the package: tokens carrying optional chords, lines, sections and songs.
Every operation returns new instances; nothing here is mutated in place.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from typing import Literal

from chord_editor import config

SectionType = Literal["verse", "chorus", "bridge", "intro", "outro", "custom"]
Language = Literal["en", "he", "mixed"]

SECTION_TYPES: tuple[SectionType, ...] = ("verse", "chorus", "bridge", "intro", "outro", "custom")


def new_id() -> str:
    """Return a fresh short identifier for a token, line, section or song."""
    return uuid.uuid4().hex[:8]


@dataclass(frozen=True)
class Token:
    """A word or whitespace run within a line.

    Parameters
    ----------
    text : str
        The exact source text of the token.
    chord : str | None
        Chord symbol placed on this word, if any.
    is_space : bool
        True for whitespace runs. Space tokens never carry a chord.
    id : str
        Identifier, regenerated whenever the line is retokenized.

    Examples
    --------
    >>> token = Token(text="Hello", chord="Am")
    >>> token.chord
    'Am'
    """

    text: str
    chord: str | None = None
    is_space: bool = False
    id: str = field(default_factory=new_id)

    def __post_init__(self) -> None:
        if self.is_space and self.chord is not None:
            object.__setattr__(self, "chord", None)

    def with_chord(self, chord: str | None) -> Token:
        """Return a copy of this token carrying *chord*."""
        return replace(self, chord=chord)


@dataclass(frozen=True)
class Line:
    """An ordered run of tokens.

    Parameters
    ----------
    tokens : tuple[Token, ...]
        The tokens of the line; their texts concatenate to the line text.
    id : str
        Identifier.
    """

    tokens: tuple[Token, ...] = ()
    id: str = field(default_factory=new_id)

    @property
    def text(self) -> str:
        """The plain line text, without chords."""
        return "".join(token.text for token in self.tokens)

    @property
    def words(self) -> tuple[Token, ...]:
        """The non-space tokens of the line."""
        return tuple(token for token in self.tokens if not token.is_space)


@dataclass(frozen=True)
class Section:
    """A song section such as a verse or chorus.

    Parameters
    ----------
    type : SectionType
        The section kind.
    label : str | None
        Display label (e.g., "Verse 2"), or None.
    lines : tuple[Line, ...]
        The lines of the section.
    id : str
        Identifier, stable across lyric edits.
    """

    type: SectionType = "verse"
    label: str | None = None
    lines: tuple[Line, ...] = ()
    id: str = field(default_factory=new_id)

    @property
    def tokens(self) -> tuple[Token, ...]:
        """All tokens of the section in reading order."""
        return tuple(token for line in self.lines for token in line.tokens)


@dataclass(frozen=True)
class Song:
    """A complete song.

    Parameters
    ----------
    title : str
        Song title.
    artist : str | None
        Performing artist or writer.
    key : str | None
        Key as a chord-like symbol (e.g., "G", "F#m").
    capo : int | None
        Capo fret, if any.
    language : Language
        Script used by the lyrics: "en", "he" or "mixed".
    sections : tuple[Section, ...]
        The sections in order.
    id : str
        Identifier.
    """

    title: str = ""
    artist: str | None = None
    key: str | None = None
    capo: int | None = None
    language: Language = config.DEFAULT_LANGUAGE  # type: ignore[assignment]
    sections: tuple[Section, ...] = ()
    id: str = field(default_factory=new_id)

    def find_section(self, section_id: str) -> Section | None:
        """Return the section with *section_id*, or None."""
        for section in self.sections:
            if section.id == section_id:
                return section
        return None

    def replace_section(self, section: Section) -> Song:
        """Return a copy of this song with the section of the same id swapped in."""
        sections = tuple(section if s.id == section.id else s for s in self.sections)
        return replace(self, sections=sections)


MappingStrategy = Literal["exact", "proximity"]


@dataclass(frozen=True)
class WordMapping:
    """Links a word of the edited lyrics to a word of the previous version.

    Parameters
    ----------
    old_index : int
        Position among the non-space tokens of the previous section.
    new_index : int
        Position among the non-space tokens of the edited text.
    strategy : MappingStrategy
        "exact" for identical words in the common subsequence, "proximity"
        for a nearby word recovered after a small edit.
    """

    old_index: int
    new_index: int
    strategy: MappingStrategy


@dataclass(frozen=True)
class AlignmentResult:
    """Outcome of re-aligning chords onto edited lyrics.

    Parameters
    ----------
    section : Section
        The rebuilt section with chords carried forward.
    mappings : tuple[WordMapping, ...]
        All word mappings found, ordered by new index.
    carried : int
        Number of chords carried onto the new words.
    dropped : int
        Number of chords of the previous version that found no word.
    """

    section: Section
    mappings: tuple[WordMapping, ...]
    carried: int
    dropped: int

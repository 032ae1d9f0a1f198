"""Pure editing operations on songs.

Each function takes a song and returns an updated copy, so a host editor
can keep previous versions around for undo without copying anything.
"""

from __future__ import annotations

from dataclasses import replace

from chord_editor import config
from chord_editor.exceptions import InvalidEditError, SectionNotFoundError, TokenNotFoundError
from chord_editor.sheet.models import SECTION_TYPES, Section, SectionType, Song

SONG_METADATA_FIELDS = frozenset({"title", "artist", "key", "capo", "language"})


def _get_section(song: Song, section_id: str) -> Section:
    section = song.find_section(section_id)
    if section is None:
        raise SectionNotFoundError(section_id)
    return section


def _set_token_chord(song: Song, section_id: str, line_id: str, token_id: str, chord: str | None) -> Song:
    section = _get_section(song, section_id)

    line = next((line for line in section.lines if line.id == line_id), None)
    if line is None:
        raise TokenNotFoundError(line_id)
    token = next((token for token in line.tokens if token.id == token_id), None)
    if token is None:
        raise TokenNotFoundError(line_id, token_id)
    if token.is_space and chord is not None:
        raise InvalidEditError("Chords cannot be placed on whitespace")

    tokens = tuple(token.with_chord(chord) if token.id == token_id else token for token in line.tokens)
    lines = tuple(replace(line, tokens=tokens) if line.id == line_id else line for line in section.lines)
    return song.replace_section(replace(section, lines=lines))


def add_chord(song: Song, section_id: str, line_id: str, token_id: str, chord: str) -> Song:
    """Place *chord* on a word, replacing any chord already there.

    Raises
    ------
    SectionNotFoundError, TokenNotFoundError
        If an id does not exist.
    InvalidEditError
        If the token is whitespace or *chord* is empty.
    """
    if not chord:
        raise InvalidEditError("Chord symbol must not be empty")
    return _set_token_chord(song, section_id, line_id, token_id, chord)


def remove_chord(song: Song, section_id: str, line_id: str, token_id: str) -> Song:
    """Remove the chord from a word."""
    return _set_token_chord(song, section_id, line_id, token_id, None)


def update_section_label(song: Song, section_id: str, label: str | None) -> Song:
    """Set the display label of a section."""
    section = _get_section(song, section_id)
    return song.replace_section(replace(section, label=label))


def update_section_type(song: Song, section_id: str, section_type: SectionType) -> Song:
    """Change the kind of a section."""
    if section_type not in SECTION_TYPES:
        raise InvalidEditError(f"Unknown section type: {section_type!r}")
    section = _get_section(song, section_id)
    return song.replace_section(replace(section, type=section_type))


def add_section(song: Song, section_type: SectionType = "verse", label: str | None = None) -> Song:
    """Append an empty section, labelled after its type unless *label* is given."""
    if section_type not in SECTION_TYPES:
        raise InvalidEditError(f"Unknown section type: {section_type!r}")
    section = Section(
        type=section_type,
        label=label if label is not None else config.DEFAULT_SECTION_LABELS[section_type],
    )
    return replace(song, sections=(*song.sections, section))


def remove_section(song: Song, section_id: str) -> Song:
    """Remove a section. The last remaining section is kept."""
    _get_section(song, section_id)
    if len(song.sections) <= 1:
        return song
    return replace(song, sections=tuple(s for s in song.sections if s.id != section_id))


def update_metadata(song: Song, **fields: object) -> Song:
    """Update title, artist, key, capo or language.

    Raises
    ------
    InvalidEditError
        For unknown field names or an unknown language tag.
    """
    unknown = set(fields) - SONG_METADATA_FIELDS
    if unknown:
        raise InvalidEditError(f"Unknown song field(s): {', '.join(sorted(unknown))}")
    if "language" in fields and fields["language"] not in config.LANGUAGES:
        raise InvalidEditError(f"Unknown language: {fields['language']!r}")
    return replace(song, **fields)  # type: ignore[arg-type]

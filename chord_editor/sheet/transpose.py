"""Song-level transposition."""

from __future__ import annotations

from dataclasses import replace

from chord_editor.pitch_class import transpose_chord
from chord_editor.sheet.models import Line, Section, Song


def _transpose_line(line: Line, semitones: int) -> Line:
    tokens = tuple(
        token.with_chord(transpose_chord(token.chord, semitones)) if token.chord else token
        for token in line.tokens
    )
    return replace(line, tokens=tokens)


def transpose_section(section: Section, semitones: int) -> Section:
    """Transpose every chord of a section; text and ids are untouched."""
    return replace(section, lines=tuple(_transpose_line(line, semitones) for line in section.lines))


def transpose_song(song: Song, semitones: int) -> Song:
    """Transpose the key and every chord of a song.

    Parameters
    ----------
    song : Song
        The song to transpose.
    semitones : int
        Number of semitones (positive = up). Zero returns an equal song.

    Returns
    -------
    Song
        A new song; lyrics, ids and metadata other than the key are kept.
    """
    key = transpose_chord(song.key, semitones) if song.key else song.key
    sections = tuple(transpose_section(section, semitones) for section in song.sections)
    return replace(song, key=key, sections=sections)

"""Chord-annotated song sheets.

This module provides the song model, a whitespace-preserving tokenizer,
the ChordPro interchange codec and the engine that carries chords forward
when lyrics are retyped.
"""

from chord_editor.sheet.alignment import align_section, reattach_chords, set_lyrics
from chord_editor.sheet.chordpro import (
    ChordProDocument,
    parse_document,
    parse_line,
    parse_lines,
    parse_song,
    serialize_line,
    serialize_lines,
    serialize_song,
)
from chord_editor.sheet.language import detect_language, song_language, text_direction
from chord_editor.sheet.models import (
    AlignmentResult,
    Language,
    Line,
    Section,
    SectionType,
    Song,
    Token,
    WordMapping,
)
from chord_editor.sheet.tokenizer import lines_to_text, tokenize_line, tokenize_text
from chord_editor.sheet.transpose import transpose_section, transpose_song

__all__ = [
    "AlignmentResult",
    "ChordProDocument",
    "Language",
    "Line",
    "Section",
    "SectionType",
    "Song",
    "Token",
    "WordMapping",
    "align_section",
    "detect_language",
    "lines_to_text",
    "parse_document",
    "parse_line",
    "parse_lines",
    "parse_song",
    "reattach_chords",
    "serialize_line",
    "serialize_lines",
    "serialize_song",
    "set_lyrics",
    "song_language",
    "text_direction",
    "tokenize_line",
    "tokenize_text",
    "transpose_section",
    "transpose_song",
]

"""Chord-annotated lyric editing core.

This library keeps chords attached to words while lyrics are freely
retyped, reads and writes ChordPro-style text, and transposes chords with
sensible enharmonic spelling.

Examples
--------
>>> from chord_editor import transpose_chord, parse_chord_symbol

>>> transpose_chord("Bbmaj7", 2)
'Cmaj7'
>>> parse_chord_symbol("F#m7/E")
ChordSymbol(root='F#', quality='m7', bass='E')

>>> from chord_editor.sheet import parse_song, set_lyrics
>>> song = parse_song("{sov}\\nplay [G]the song\\n{eov}")
>>> song = set_lyrics(song, song.sections[0].id, "play the song")
>>> [t.chord for t in song.sections[0].lines[0].words]
[None, 'G', None]
"""

from chord_editor.converter import chord_components, chord_to_harte
from chord_editor.models import ChordSymbol
from chord_editor.pitch_class import (
    ALL_KEYS,
    capo_position,
    enharmonic,
    parse_chord_symbol,
    pitch_equivalent,
    transpose_chord,
    transpose_note,
)

__all__ = [
    "ALL_KEYS",
    "ChordSymbol",
    "capo_position",
    "chord_components",
    "chord_to_harte",
    "enharmonic",
    "parse_chord_symbol",
    "pitch_equivalent",
    "transpose_chord",
    "transpose_note",
]

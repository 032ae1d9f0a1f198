"""Pitch class operations for chord symbols.

This module parses chord symbols into root, quality and bass, and
transposes them by semitones with enharmonic spelling: keys that are
customarily written with flats keep flats, and transposing downward
flips the preference.
"""

from __future__ import annotations

import re

from chord_editor.models import ChordSymbol

# Note name to pitch class (0-11, where C=0)
NOTE_TO_PC: dict[str, int] = {
    "C": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "Fb": 4,
    "E#": 5,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
    "Cb": 11,
    "B#": 0,
}

# Pitch class to note name, one table per spelling preference
SHARP_NOTES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
FLAT_NOTES: tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

# Roots whose keys are customarily spelled with flats
FLAT_KEYS: frozenset[str] = frozenset({"F", "Bb", "Eb", "Ab", "Db", "Gb"})

ENHARMONIC: dict[str, str] = {
    "C#": "Db",
    "Db": "C#",
    "D#": "Eb",
    "Eb": "D#",
    "F#": "Gb",
    "Gb": "F#",
    "G#": "Ab",
    "Ab": "G#",
    "A#": "Bb",
    "Bb": "A#",
}

ALL_KEYS: tuple[str, ...] = (
    "C", "G", "D", "A", "E", "B", "F#", "Db", "Ab", "Eb", "Bb", "F",
    "Am", "Em", "Bm", "F#m", "C#m", "G#m", "D#m", "Bbm", "Fm", "Cm", "Gm", "Dm",
)  # fmt: skip

# Root, opaque quality, optional slash bass
CHORD_SYMBOL_RE = re.compile(r"([A-G][#b]?)(.*?)(?:/([A-G][#b]?))?", re.DOTALL)


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("C")
    0
    >>> note_to_pc("F#")
    6
    >>> note_to_pc("Bb")
    10
    """
    if note in NOTE_TO_PC:
        return NOTE_TO_PC[note]
    msg = f"Unknown note: {note}"
    raise ValueError(msg)


def parse_chord_symbol(text: str) -> ChordSymbol | None:
    """Parse a chord symbol string.

    The grammar is permissive: a root letter A-G, an optional ``#`` or
    ``b``, any quality suffix, and an optional ``/`` plus bass note.

    Parameters
    ----------
    text : str
        The chord symbol (e.g., "Am7", "F#m7b5/E", "Cwhatever").

    Returns
    -------
    ChordSymbol | None
        The parsed symbol, or None if the text does not start with a root.

    Examples
    --------
    >>> parse_chord_symbol("Bbmaj7/D")
    ChordSymbol(root='Bb', quality='maj7', bass='D')
    >>> parse_chord_symbol("N.C.") is None
    True
    """
    match = CHORD_SYMBOL_RE.fullmatch(text)
    if match is None:
        return None
    root, quality, bass = match.groups()
    return ChordSymbol(root=root, quality=quality, bass=bass)


def prefers_flats(root: str, semitones: int) -> bool:
    """Decide whether a transposition of *root* should be spelled with flats.

    Flat keys keep flats when moving up; any other key switches to flats
    when moving down.

    Examples
    --------
    >>> prefers_flats("Bb", 2)
    True
    >>> prefers_flats("G", -1)
    True
    >>> prefers_flats("Bb", -1)
    False
    """
    return (root in FLAT_KEYS) != (semitones < 0)


def transpose_note(note: str, semitones: int, *, flats: bool | None = None) -> str:
    """Transpose a single note name.

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#").
    semitones : int
        Number of semitones to transpose (positive = up).
    flats : bool | None
        Spelling table to use. None decides from the note itself.

    Returns
    -------
    str
        The transposed note, or *note* unchanged if it is not a note name.

    Examples
    --------
    >>> transpose_note("C", 1)
    'C#'
    >>> transpose_note("F", 1)
    'Gb'
    """
    if note not in NOTE_TO_PC:
        return note
    if flats is None:
        flats = prefers_flats(note, semitones)
    table = FLAT_NOTES if flats else SHARP_NOTES
    return table[(note_to_pc(note) + semitones) % 12]


def transpose_symbol(chord: ChordSymbol, semitones: int) -> ChordSymbol:
    """Transpose a parsed chord symbol.

    The spelling table is chosen from the root and applied to the bass as
    well, so a slash chord is spelled consistently.

    Examples
    --------
    >>> transpose_symbol(ChordSymbol("D", "", "F#"), -2)
    ChordSymbol(root='C', quality='', bass='E')
    """
    flats = prefers_flats(chord.root, semitones)
    bass = transpose_note(chord.bass, semitones, flats=flats) if chord.bass else None
    return ChordSymbol(
        root=transpose_note(chord.root, semitones, flats=flats),
        quality=chord.quality,
        bass=bass,
    )


def transpose_chord(chord: str, semitones: int) -> str:
    """Transpose a chord symbol string by a number of semitones.

    Never raises: empty or unparseable input is returned unchanged, and a
    zero offset returns the original string exactly.

    Parameters
    ----------
    chord : str
        The chord symbol (e.g., "Am7", "C/E").
    semitones : int
        Number of semitones to transpose (positive = up).

    Returns
    -------
    str
        The transposed chord symbol.

    Examples
    --------
    >>> transpose_chord("Am7", 2)
    'Bm7'
    >>> transpose_chord("Eb", 1)
    'E'
    >>> transpose_chord("C", -1)
    'B'
    >>> transpose_chord("Ab", -1)
    'G'
    >>> transpose_chord("hello", 3)
    'hello'
    """
    if not chord or semitones == 0:
        return chord
    parsed = parse_chord_symbol(chord)
    if parsed is None:
        return chord
    return str(transpose_symbol(parsed, semitones))


def enharmonic(note: str) -> str:
    """Return the enharmonic spelling of a black-key note, or *note* itself.

    Examples
    --------
    >>> enharmonic("C#")
    'Db'
    >>> enharmonic("E")
    'E'
    """
    return ENHARMONIC.get(note, note)


def capo_position(from_key: str, to_key: str) -> int:
    """Return the capo fret that makes shapes in *from_key* sound in *to_key*.

    Only the roots of the keys are compared; unparseable keys give 0.

    Examples
    --------
    >>> capo_position("C", "D")
    2
    >>> capo_position("Am", "G")
    10
    """
    source = parse_chord_symbol(from_key)
    target = parse_chord_symbol(to_key)
    if source is None or target is None:
        return 0
    return (note_to_pc(target.root) - note_to_pc(source.root)) % 12


def pitch_equivalent(chord1: str, chord2: str) -> bool:
    """Check whether two chord symbols name the same pitches.

    Roots and bass notes are compared by pitch class, qualities verbatim.
    Unparseable symbols are only equivalent to identical strings.

    Examples
    --------
    >>> pitch_equivalent("C#m7", "Dbm7")
    True
    >>> pitch_equivalent("C#m7", "C#m")
    False
    """
    parsed1 = parse_chord_symbol(chord1)
    parsed2 = parse_chord_symbol(chord2)
    if parsed1 is None or parsed2 is None:
        return chord1 == chord2
    if parsed1.quality != parsed2.quality:
        return False
    if note_to_pc(parsed1.root) != note_to_pc(parsed2.root):
        return False
    if parsed1.bass is None or parsed2.bass is None:
        return parsed1.bass == parsed2.bass
    return note_to_pc(parsed1.bass) == note_to_pc(parsed2.bass)

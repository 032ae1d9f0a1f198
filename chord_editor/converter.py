"""Interop between chord symbols and pychord / Harte notation.

Chord symbols in a song are open-ended: any root plus any suffix is
accepted. pychord understands a fixed vocabulary of qualities, so the
functions here return None instead of failing when a symbol falls outside
it.
"""

from __future__ import annotations

from pychord import Chord as PyChord

from chord_editor.models import ChordSymbol
from chord_editor.pitch_class import parse_chord_symbol

# Mapping from pychord quality names to Harte shorthand
PYCHORD_TO_HARTE_QUALITY: dict[str, str] = {
    "": "maj",
    "m": "min",
    "m7": "min7",
    "7": "7",
    "maj7": "maj7",
    "M7": "maj7",
    "dim": "dim",
    "dim7": "dim7",
    "dim6": "dim6",
    "aug": "aug",
    "aug7": "aug7",
    "m7-5": "hdim7",
    "m7b5": "hdim7",
    "sus4": "sus4",
    "sus2": "sus2",
    "7sus4": "7sus4",
    "7sus2": "7sus2",
    "sus47": "sus4(b7)",
    "sus27": "sus2(b7)",
    "add9": "maj(9)",
    "madd9": "min(9)",
    "9": "9",
    "m9": "min9",
    "maj9": "maj9",
    "11": "11",
    "m11": "min11",
    "maj11": "maj11",
    "13": "13",
    "m13": "min13",
    "maj13": "maj13",
    "6": "maj6",
    "m6": "min6",
    "mmaj7": "minmaj7",
    "mM7": "minmaj7",
    "5": "5",
}


def pychord_quality_to_harte(pychord_quality: str) -> str:
    """Convert a pychord quality string to Harte shorthand.

    Parameters
    ----------
    pychord_quality : str
        The pychord quality (e.g., "m7", "maj7", "dim").

    Returns
    -------
    str
        The equivalent Harte shorthand (e.g., "min7", "maj7", "dim").

    Raises
    ------
    ValueError
        If the quality is not recognized.

    Examples
    --------
    >>> pychord_quality_to_harte("m7")
    'min7'
    >>> pychord_quality_to_harte("")
    'maj'
    """
    if pychord_quality in PYCHORD_TO_HARTE_QUALITY:
        return PYCHORD_TO_HARTE_QUALITY[pychord_quality]
    msg = f"Unknown pychord quality: {pychord_quality}"
    raise ValueError(msg)


def _to_pychord(chord: ChordSymbol | str) -> PyChord | None:
    """Build a pychord Chord, or None if the symbol is outside its vocabulary."""
    symbol = parse_chord_symbol(chord) if isinstance(chord, str) else chord
    if symbol is None:
        return None
    try:
        return PyChord(str(symbol))
    except (ValueError, KeyError):  # pychord rejects unknown qualities and notes
        return None


def chord_to_harte(chord: ChordSymbol | str) -> str | None:
    """Convert a chord symbol to Harte notation.

    Parameters
    ----------
    chord : ChordSymbol | str
        The chord symbol (e.g., "Gm7", "C/E").

    Returns
    -------
    str | None
        Chord in Harte notation (e.g., "G:min7", "C:maj/E"), or None when
        the symbol cannot be expressed.

    Examples
    --------
    >>> chord_to_harte("Gm7")
    'G:min7'
    >>> chord_to_harte("C/E")
    'C:maj/E'
    >>> chord_to_harte("Hello") is None
    True
    """
    pc = _to_pychord(chord)
    if pc is None:
        return None
    quality = PYCHORD_TO_HARTE_QUALITY.get(str(pc.quality))
    if quality is None:
        return None
    result = f"{pc.root}:{quality}"
    if pc.on:
        result = f"{result}/{pc.on}"
    return result


def chord_components(chord: ChordSymbol | str) -> tuple[str, ...] | None:
    """Return the note names making up a chord.

    Parameters
    ----------
    chord : ChordSymbol | str
        The chord symbol.

    Returns
    -------
    tuple[str, ...] | None
        Component notes, bass first for slash chords, or None when pychord
        does not know the quality.

    Examples
    --------
    >>> chord_components("Am")
    ('A', 'C', 'E')
    """
    pc = _to_pychord(chord)
    if pc is None:
        return None
    return tuple(pc.components())

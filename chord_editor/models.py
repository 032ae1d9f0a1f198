"""Chord symbol model for chord-editor.

A chord symbol is kept as close to what the songwriter typed as possible:
the root and optional bass note are understood, the quality suffix is
carried verbatim.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChordSymbol:
    """Parsed chord symbol.

    Parameters
    ----------
    root : str
        The root note, a letter A-G with an optional ``#`` or ``b``.
    quality : str
        Everything between the root and the optional slash bass, verbatim
        (e.g., "m7", "sus4", "maj7#11"). Empty for a plain major chord.
    bass : str | None
        The bass note of a slash chord, or None.

    Examples
    --------
    >>> chord = ChordSymbol(root="C", quality="maj7", bass="E")
    >>> str(chord)
    'Cmaj7/E'
    """

    root: str
    quality: str = ""
    bass: str | None = None

    def to_harte(self) -> str | None:
        """Convert to Harte notation when pychord knows the quality.

        Returns
        -------
        str | None
            Chord in Harte notation (e.g., "G:min7"), or None for qualities
            outside the pychord vocabulary.
        """
        from chord_editor.converter import chord_to_harte

        return chord_to_harte(self)

    def components(self) -> tuple[str, ...] | None:
        """Return the note names of the chord, or None if pychord cannot spell it."""
        from chord_editor.converter import chord_components

        return chord_components(self)

    def __str__(self) -> str:
        """Return the chord symbol as it would be written in a song."""
        result = f"{self.root}{self.quality}"
        if self.bass:
            result = f"{result}/{self.bass}"
        return result

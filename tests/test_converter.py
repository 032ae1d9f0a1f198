import pytest

from chord_editor import ChordSymbol, chord_components, chord_to_harte
from chord_editor.converter import pychord_quality_to_harte


class TestQualityMapping:
    def test_pychord_major_to_harte(self):
        assert pychord_quality_to_harte("") == "maj"

    def test_pychord_minor7_to_harte(self):
        assert pychord_quality_to_harte("m7") == "min7"

    def test_pychord_hdim_to_harte(self):
        assert pychord_quality_to_harte("m7-5") == "hdim7"

    def test_unknown_pychord_quality_raises(self):
        with pytest.raises(ValueError, match="Unknown pychord quality"):
            pychord_quality_to_harte("unknown_quality")


class TestChordToHarte:
    @pytest.mark.parametrize(
        ("chord", "expected"),
        [
            ("C", "C:maj"),
            ("Gm7", "G:min7"),
            ("Bbm7", "Bb:min7"),
            ("F#dim7", "F#:dim7"),
            ("C/E", "C:maj/E"),
            ("Dsus4", "D:sus4"),
        ],
    )
    def test_known_chords(self, chord, expected):
        assert chord_to_harte(chord) == expected

    def test_symbol_method(self):
        assert ChordSymbol(root="A", quality="m").to_harte() == "A:min"

    @pytest.mark.parametrize("chord", ["Cwhatever", "hello", "", "N.C."])
    def test_unknown_returns_none(self, chord):
        assert chord_to_harte(chord) is None


class TestChordComponents:
    def test_minor_triad(self):
        assert chord_components("Am") == ("A", "C", "E")

    def test_major_triad(self):
        assert chord_components(ChordSymbol(root="C")) == ("C", "E", "G")

    def test_symbol_method(self):
        assert ChordSymbol(root="G", quality="7").components() == ("G", "B", "D", "F")

    def test_unknown_returns_none(self):
        assert chord_components("Cwhatever") is None

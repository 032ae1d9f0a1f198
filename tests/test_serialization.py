"""Tests for JSON value shapes."""

import json

import pytest

from chord_editor.exceptions import SongFormatError
from chord_editor.sheet import parse_song, serialize_song
from chord_editor.sheet.serialization import song_from_dict, song_to_dict, token_to_dict
from chord_editor.sheet.models import Token


class TestSongToDict:
    """Export to the host's value shapes."""

    def test_token_shapes(self) -> None:
        """Optional token keys are omitted when empty."""
        assert token_to_dict(Token(text="la", id="t1")) == {"id": "t1", "text": "la"}
        assert token_to_dict(Token(text=" ", is_space=True, id="t2")) == {"id": "t2", "text": " ", "isSpace": True}
        assert token_to_dict(Token(text="la", chord="C", id="t3")) == {"id": "t3", "text": "la", "chord": "C"}

    def test_song_shape(self) -> None:
        """The song dict carries metadata and nested sections."""
        song = parse_song("{title: T}\n{key: G}\n{soc}\n[G]la\n{eoc}")
        data = song_to_dict(song)
        assert data["title"] == "T"
        assert data["key"] == "G"
        assert "artist" not in data
        assert data["language"] == "en"
        section = data["sections"][0]
        assert section["type"] == "chorus"
        assert section["label"] == "Chorus"
        assert section["lines"][0]["tokens"][0]["chord"] == "G"

    def test_json_compatible(self) -> None:
        """The dict survives a JSON round trip."""
        song = parse_song("{title: שיר}\n{sov}\n[Am]שלום world\n{eov}")
        data = song_to_dict(song)
        assert json.loads(json.dumps(data)) == data


class TestSongFromDict:
    """Import from the host's value shapes."""

    def test_round_trip(self) -> None:
        """A song survives export and import unchanged."""
        song = parse_song("{title: T}\n{artist: A}\n{key: C}\n{capo: 1}\n{sov}\n[C]one  [G]two\n\nthree\n{eov}")
        assert song_from_dict(song_to_dict(song)) == song

    def test_missing_ids_generated(self) -> None:
        """Ids are generated when absent."""
        song = song_from_dict(
            {
                "title": "T",
                "sections": [{"type": "verse", "lines": [{"tokens": [{"text": "la", "chord": "C"}]}]}],
            }
        )
        assert song.sections[0].id
        assert song.sections[0].lines[0].tokens[0].chord == "C"
        assert song.language == "en"
        assert "[C]la" in serialize_song(song)

    @pytest.mark.parametrize(
        "data",
        [
            None,
            {},
            {"title": "T"},
            {"title": 1, "sections": []},
            {"title": "T", "sections": [{"type": "coda", "lines": []}]},
            {"title": "T", "sections": [{"type": "verse"}]},
            {"title": "T", "sections": [{"type": "verse", "lines": [{"tokens": [{"chord": "C"}]}]}]},
            {"title": "T", "sections": [], "language": "fr"},
            {"title": "T", "sections": [], "capo": "2"},
        ],
    )
    def test_malformed(self, data) -> None:
        """Malformed data raises SongFormatError."""
        with pytest.raises(SongFormatError):
            song_from_dict(data)

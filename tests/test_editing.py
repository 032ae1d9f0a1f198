"""Tests for pure song editing operations."""

import pytest

from chord_editor.exceptions import InvalidEditError, SectionNotFoundError, TokenNotFoundError
from chord_editor.sheet import Song, parse_song, serialize_lines
from chord_editor.sheet.editing import (
    add_chord,
    add_section,
    remove_chord,
    remove_section,
    update_metadata,
    update_section_label,
    update_section_type,
)


@pytest.fixture
def song() -> Song:
    """A two-section song."""
    return parse_song("{title: T}\n{sov}\nHello [G]world\n{eov}\n{soc}\nla\n{eoc}")


class TestChordEdits:
    """Placing and removing chords."""

    def test_add_chord(self, song: Song) -> None:
        """A chord is placed on the chosen word."""
        section = song.sections[0]
        line = section.lines[0]
        updated = add_chord(song, section.id, line.id, line.tokens[0].id, "C")
        assert serialize_lines(updated.sections[0].lines) == "[C]Hello [G]world"
        assert serialize_lines(song.sections[0].lines) == "Hello [G]world"

    def test_replace_chord(self, song: Song) -> None:
        """Placing a chord on a chorded word replaces it."""
        section = song.sections[0]
        line = section.lines[0]
        updated = add_chord(song, section.id, line.id, line.tokens[2].id, "Em")
        assert serialize_lines(updated.sections[0].lines) == "Hello [Em]world"

    def test_remove_chord(self, song: Song) -> None:
        """Removing a chord leaves the word."""
        section = song.sections[0]
        line = section.lines[0]
        updated = remove_chord(song, section.id, line.id, line.tokens[2].id)
        assert serialize_lines(updated.sections[0].lines) == "Hello world"

    def test_chord_on_space_refused(self, song: Song) -> None:
        """Whitespace cannot carry a chord."""
        section = song.sections[0]
        line = section.lines[0]
        with pytest.raises(InvalidEditError):
            add_chord(song, section.id, line.id, line.tokens[1].id, "C")

    def test_empty_chord_refused(self, song: Song) -> None:
        """An empty chord symbol is refused."""
        section = song.sections[0]
        line = section.lines[0]
        with pytest.raises(InvalidEditError):
            add_chord(song, section.id, line.id, line.tokens[0].id, "")

    def test_unknown_ids(self, song: Song) -> None:
        """Unknown ids raise lookup errors."""
        section = song.sections[0]
        line = section.lines[0]
        with pytest.raises(SectionNotFoundError):
            add_chord(song, "nope", line.id, line.tokens[0].id, "C")
        with pytest.raises(TokenNotFoundError):
            add_chord(song, section.id, "nope", line.tokens[0].id, "C")
        with pytest.raises(TokenNotFoundError):
            add_chord(song, section.id, line.id, "nope", "C")


class TestSectionEdits:
    """Section-level edits."""

    def test_update_label(self, song: Song) -> None:
        """The label of a section changes."""
        updated = update_section_label(song, song.sections[1].id, "Refrain")
        assert updated.sections[1].label == "Refrain"

    def test_update_type(self, song: Song) -> None:
        """The type of a section changes."""
        updated = update_section_type(song, song.sections[0].id, "intro")
        assert updated.sections[0].type == "intro"

    def test_update_type_unknown(self, song: Song) -> None:
        """Unknown section types are refused."""
        with pytest.raises(InvalidEditError):
            update_section_type(song, song.sections[0].id, "coda")  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        ("section_type", "label"),
        [("verse", "Verse"), ("bridge", "Bridge"), ("outro", "Outro"), ("custom", "Section")],
    )
    def test_add_section_default_label(self, song: Song, section_type: str, label: str) -> None:
        """New sections are labelled after their type."""
        updated = add_section(song, section_type)  # type: ignore[arg-type]
        assert len(updated.sections) == 3
        assert updated.sections[-1].type == section_type
        assert updated.sections[-1].label == label
        assert updated.sections[-1].lines == ()

    def test_remove_section(self, song: Song) -> None:
        """A section can be removed."""
        updated = remove_section(song, song.sections[0].id)
        assert [s.type for s in updated.sections] == ["chorus"]

    def test_last_section_kept(self, song: Song) -> None:
        """The last remaining section cannot be removed."""
        single = remove_section(song, song.sections[0].id)
        assert remove_section(single, single.sections[0].id) == single

    def test_remove_unknown_section(self, song: Song) -> None:
        """Removing an unknown section raises."""
        with pytest.raises(SectionNotFoundError):
            remove_section(song, "nope")


class TestMetadataEdits:
    """Song metadata edits."""

    def test_update_fields(self, song: Song) -> None:
        """Several fields can change at once."""
        updated = update_metadata(song, title="New", artist="Someone", key="Am", capo=2)
        assert (updated.title, updated.artist, updated.key, updated.capo) == ("New", "Someone", "Am", 2)

    def test_unknown_field(self, song: Song) -> None:
        """Unknown fields are refused."""
        with pytest.raises(InvalidEditError):
            update_metadata(song, sections=())

    def test_unknown_language(self, song: Song) -> None:
        """Only known language tags are accepted."""
        with pytest.raises(InvalidEditError):
            update_metadata(song, language="fr")
        assert update_metadata(song, language="he").language == "he"

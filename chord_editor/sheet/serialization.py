"""Conversion between songs and JSON-compatible dicts.

The dict layout is the one exchanged with the host application::

    Token   { id, text, chord?, isSpace? }
    Line    { id, tokens: Token[] }
    Section { id, type, label?, lines: Line[] }
    Song    { id, title, artist?, key?, capo?, language, sections: Section[] }

Optional keys are omitted when empty.
"""

from __future__ import annotations

from typing import Any

from chord_editor import config
from chord_editor.exceptions import SongFormatError
from chord_editor.sheet.models import SECTION_TYPES, Line, Section, Song, Token, new_id


def token_to_dict(token: Token) -> dict[str, Any]:
    """Convert a Token to a JSON-serializable dict."""
    result: dict[str, Any] = {"id": token.id, "text": token.text}
    if token.chord:
        result["chord"] = token.chord
    if token.is_space:
        result["isSpace"] = True
    return result


def line_to_dict(line: Line) -> dict[str, Any]:
    """Convert a Line to a JSON-serializable dict."""
    return {"id": line.id, "tokens": [token_to_dict(token) for token in line.tokens]}


def section_to_dict(section: Section) -> dict[str, Any]:
    """Convert a Section to a JSON-serializable dict."""
    result: dict[str, Any] = {"id": section.id, "type": section.type}
    if section.label:
        result["label"] = section.label
    result["lines"] = [line_to_dict(line) for line in section.lines]
    return result


def song_to_dict(song: Song) -> dict[str, Any]:
    """Convert a Song to a JSON-serializable dict.

    Examples
    --------
    >>> song_to_dict(Song(title="Test", id="s1"))
    {'id': 's1', 'title': 'Test', 'language': 'en', 'sections': []}
    """
    result: dict[str, Any] = {"id": song.id, "title": song.title}
    if song.artist:
        result["artist"] = song.artist
    if song.key:
        result["key"] = song.key
    if song.capo is not None:
        result["capo"] = song.capo
    result["language"] = song.language
    result["sections"] = [section_to_dict(section) for section in song.sections]
    return result


def _require(data: Any, key: str, kind: type, path: str) -> Any:
    if not isinstance(data, dict):
        raise SongFormatError(path, "expected an object")
    if key not in data:
        raise SongFormatError(path, f"missing {key!r}")
    value = data[key]
    if not isinstance(value, kind):
        raise SongFormatError(f"{path}.{key}", f"expected {kind.__name__}")
    return value


def _optional(data: dict[str, Any], key: str, kind: type, path: str) -> Any:
    value = data.get(key)
    if value is not None and not isinstance(value, kind):
        raise SongFormatError(f"{path}.{key}", f"expected {kind.__name__}")
    return value


def token_from_dict(data: Any, path: str = "token") -> Token:
    """Build a Token from its dict form."""
    text = _require(data, "text", str, path)
    is_space = bool(data.get("isSpace", False))
    chord = _optional(data, "chord", str, path)
    return Token(text=text, chord=chord or None, is_space=is_space, id=str(data.get("id") or new_id()))


def line_from_dict(data: Any, path: str = "line") -> Line:
    """Build a Line from its dict form."""
    tokens = _require(data, "tokens", list, path)
    return Line(
        tokens=tuple(token_from_dict(token, f"{path}.tokens[{i}]") for i, token in enumerate(tokens)),
        id=str(data.get("id") or new_id()),
    )


def section_from_dict(data: Any, path: str = "section") -> Section:
    """Build a Section from its dict form."""
    section_type = _require(data, "type", str, path)
    if section_type not in SECTION_TYPES:
        raise SongFormatError(f"{path}.type", f"unknown section type {section_type!r}")
    lines = _require(data, "lines", list, path)
    return Section(
        type=section_type,  # type: ignore[arg-type]
        label=_optional(data, "label", str, path),
        lines=tuple(line_from_dict(line, f"{path}.lines[{i}]") for i, line in enumerate(lines)),
        id=str(data.get("id") or new_id()),
    )


def song_from_dict(data: Any) -> Song:
    """Build a Song from its dict form.

    Raises
    ------
    SongFormatError
        If a required key is missing or has the wrong type.
    """
    path = "song"
    title = _require(data, "title", str, path)
    sections = _require(data, "sections", list, path)
    language = data.get("language", config.DEFAULT_LANGUAGE)
    if language not in config.LANGUAGES:
        raise SongFormatError(f"{path}.language", f"unknown language {language!r}")
    capo = _optional(data, "capo", int, path)

    return Song(
        title=title,
        artist=_optional(data, "artist", str, path),
        key=_optional(data, "key", str, path),
        capo=capo,
        language=language,
        sections=tuple(section_from_dict(section, f"{path}.sections[{i}]") for i, section in enumerate(sections)),
        id=str(data.get("id") or new_id()),
    )

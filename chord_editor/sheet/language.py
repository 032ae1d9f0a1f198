"""Script detection for bilingual Hebrew/English lyrics."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from chord_editor.sheet.models import Language, Song

HEBREW_RE = re.compile(r"[\u0590-\u05FF]")
LATIN_RE = re.compile(r"[A-Za-z]")

HEBREW_SECTION_LABELS: dict[str, str] = {
    "verse": "בית",
    "chorus": "פזמון",
    "bridge": "גשר",
    "intro": "הקדמה",
    "outro": "אאוטרו",
    "custom": "קטע",
}


def is_hebrew(text: str) -> bool:
    """Return True if *text* contains any Hebrew-block character."""
    return HEBREW_RE.search(text) is not None


def detect_language(text: str) -> Language:
    """Tag text by the scripts it uses.

    Parameters
    ----------
    text : str
        Lyric text.

    Returns
    -------
    Language
        "mixed" when both Hebrew and Latin letters occur, "he" for Hebrew
        only, "en" otherwise (including empty text).

    Examples
    --------
    >>> detect_language("hello")
    'en'
    >>> detect_language("שלום")
    'he'
    >>> detect_language("שלום hello")
    'mixed'
    """
    has_hebrew = is_hebrew(text)
    has_latin = LATIN_RE.search(text) is not None
    if has_hebrew and has_latin:
        return "mixed"
    if has_hebrew:
        return "he"
    return "en"


def song_language(song: Song) -> Language:
    """Tag a song by the scripts used in its lyrics. Chords are not scanned."""
    text = "\n".join(token.text for section in song.sections for token in section.tokens)
    return detect_language(text)


def is_rtl_line(text: str) -> bool:
    """Return True if Hebrew characters outnumber Latin letters in *text*."""
    return len(HEBREW_RE.findall(text)) > len(LATIN_RE.findall(text))


def text_direction(text: str) -> Literal["rtl", "ltr"]:
    """Return the writing direction a line should be displayed in."""
    return "rtl" if is_rtl_line(text) else "ltr"

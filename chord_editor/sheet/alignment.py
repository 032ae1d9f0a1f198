"""Carry chords forward across free-text lyric edits.

When a section's lyrics are retyped, the text is tokenized from scratch
and chords of the previous version are re-attached to "the same" words:

1. Words of both versions are matched exactly through their longest
   common subsequence (dynamic programming over a numpy table).
2. Chord-bearing old words left unmatched are paired with an unmatched
   new word at nearly the same position, provided the two words differ by
   a small edit (a typo fix such as "songd" -> "songs").

Anything else loses its chord. Dropping a chord is a valid outcome, so
none of these functions raise on user data.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

import numpy as np

from chord_editor import config
from chord_editor.exceptions import SectionNotFoundError
from chord_editor.sheet.language import song_language
from chord_editor.sheet.models import (
    AlignmentResult,
    Line,
    Section,
    Song,
    Token,
    WordMapping,
)
from chord_editor.sheet.tokenizer import tokenize_text

logger = logging.getLogger(__name__)


def lcs_pairs(old: Sequence[str], new: Sequence[str]) -> list[tuple[int, int]]:
    """Match two word sequences through their longest common subsequence.

    Parameters
    ----------
    old : Sequence[str]
        Words of the previous version.
    new : Sequence[str]
        Words of the edited version.

    Returns
    -------
    list[tuple[int, int]]
        Index pairs ``(i, j)`` with ``old[i] == new[j]``, increasing in
        both indices.

    Examples
    --------
    >>> lcs_pairs(["a", "b", "c"], ["a", "x", "c"])
    [(0, 0), (2, 2)]
    """
    m = len(old)
    n = len(new)
    if m == 0 or n == 0:
        return []

    # table[i, j] = LCS length of old[i:] and new[j:]
    table = np.zeros((m + 1, n + 1), dtype=np.int32)
    for i in range(m - 1, -1, -1):
        for j in range(n - 1, -1, -1):
            if old[i] == new[j]:
                table[i, j] = table[i + 1, j + 1] + 1
            else:
                table[i, j] = max(table[i + 1, j], table[i, j + 1])

    # Walk forward; on a tie skip the old word
    pairs: list[tuple[int, int]] = []
    i = j = 0
    while i < m and j < n:
        if old[i] == new[j]:
            pairs.append((i, j))
            i += 1
            j += 1
        elif table[i, j + 1] > table[i + 1, j]:
            j += 1
        else:
            i += 1

    return pairs


def edit_distance(a: str, b: str, limit: int | None = None) -> int:
    """Compute the Levenshtein distance between two words.

    Parameters
    ----------
    a, b : str
        The words to compare.
    limit : int | None
        Stop early once the distance is known to exceed *limit*; the
        returned value is then ``limit + 1``.

    Examples
    --------
    >>> edit_distance("songd", "songs")
    1
    >>> edit_distance("la", "different", limit=1)
    2
    """
    if limit is not None and abs(len(a) - len(b)) > limit:
        return limit + 1

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        if limit is not None and min(current) > limit:
            return limit + 1
        previous = current

    return previous[-1]


def proximity_pairs(
    old: Sequence[str],
    new: Sequence[str],
    candidates: Sequence[int],
    matched_new: set[int],
    *,
    max_distance: int = config.PROXIMITY_DISTANCE,
    max_edits: int = config.MAX_WORD_EDITS,
) -> list[tuple[int, int]]:
    """Pair leftover old words with nearby, similar new words.

    Parameters
    ----------
    old, new : Sequence[str]
        Words of the previous and edited versions.
    candidates : Sequence[int]
        Old indices to place, typically the chord-bearing words that found
        no exact match. Processed earliest first.
    matched_new : set[int]
        New indices already taken.
    max_distance : int
        Largest allowed difference between old and new index.
    max_edits : int
        Largest allowed edit distance between the two words.

    Returns
    -------
    list[tuple[int, int]]
        Index pairs ``(i, j)``; each new index is used at most once.

    Examples
    --------
    >>> proximity_pairs(["sing", "songd"], ["sing", "songs"], [1], {0})
    [(1, 1)]
    >>> proximity_pairs(["la", "la"], ["completely", "different", "text"], [1], set())
    []
    """
    taken = set(matched_new)
    pairs: list[tuple[int, int]] = []

    for i in sorted(candidates):
        best: int | None = None
        best_distance = max_distance + 1

        for j in range(max(0, i - max_distance), min(len(new), i + max_distance + 1)):
            if j in taken or abs(i - j) >= best_distance:
                continue
            if edit_distance(old[i], new[j], limit=max_edits) > max_edits:
                continue
            best = j
            best_distance = abs(i - j)

        if best is not None:
            pairs.append((i, best))
            taken.add(best)

    return pairs


def map_words(old_tokens: Sequence[Token], new_tokens: Sequence[Token]) -> tuple[WordMapping, ...]:
    """Map new words onto old words.

    Parameters
    ----------
    old_tokens : Sequence[Token]
        Non-space tokens of the previous version.
    new_tokens : Sequence[Token]
        Non-space tokens of the edited version.

    Returns
    -------
    tuple[WordMapping, ...]
        Mappings ordered by new index.
    """
    old_words = [token.text for token in old_tokens]
    new_words = [token.text for token in new_tokens]

    cells = (len(old_words) + 1) * (len(new_words) + 1)
    if cells > config.MAX_ALIGNMENT_CELLS:
        logger.warning(
            "Skipping exact word matching for %d x %d words (limit %d cells)",
            len(old_words),
            len(new_words),
            config.MAX_ALIGNMENT_CELLS,
        )
        exact: list[tuple[int, int]] = []
    else:
        exact = lcs_pairs(old_words, new_words)

    matched_old = {i for i, _ in exact}
    matched_new = {j for _, j in exact}
    leftovers = [i for i, token in enumerate(old_tokens) if token.chord and i not in matched_old]
    nearby = proximity_pairs(old_words, new_words, leftovers, matched_new)

    mappings = [WordMapping(i, j, "exact") for i, j in exact]
    mappings.extend(WordMapping(i, j, "proximity") for i, j in nearby)
    return tuple(sorted(mappings, key=lambda mapping: mapping.new_index))


def align_section(old_section: Section, text: str) -> AlignmentResult:
    """Rebuild a section from edited text, carrying chords forward.

    Parameters
    ----------
    old_section : Section
        The section before the edit.
    text : str
        The complete new lyric text of the section, without chords.

    Returns
    -------
    AlignmentResult
        The new section (same id, type and label) and mapping details.

    Examples
    --------
    >>> from chord_editor.sheet.chordpro import parse_lines
    >>> old = Section(lines=parse_lines("play [G]the song"))
    >>> result = align_section(old, "play the song")
    >>> [t.chord for t in result.section.lines[0].words]
    [None, 'G', None]
    """
    old_tokens = [token for token in old_section.tokens if not token.is_space]
    new_lines = tokenize_text(text)
    new_tokens = [token for line in new_lines for token in line.tokens if not token.is_space]

    mappings = map_words(old_tokens, new_tokens)
    chord_for = {m.new_index: old_tokens[m.old_index].chord for m in mappings if old_tokens[m.old_index].chord}

    lines: list[Line] = []
    position = 0
    for line in new_lines:
        tokens: list[Token] = []
        for token in line.tokens:
            if not token.is_space:
                chord = chord_for.get(position)
                if chord is not None:
                    token = token.with_chord(chord)
                position += 1
            tokens.append(token)
        lines.append(replace(line, tokens=tuple(tokens)))

    carried = len(chord_for)
    dropped = sum(1 for token in old_tokens if token.chord) - carried
    if dropped:
        logger.debug("Dropped %d chord(s) while re-aligning section %s", dropped, old_section.id)

    return AlignmentResult(
        section=replace(old_section, lines=tuple(lines)),
        mappings=mappings,
        carried=carried,
        dropped=dropped,
    )


def reattach_chords(old_section: Section, text: str) -> Section:
    """Return the section rebuilt from *text* with chords carried forward."""
    return align_section(old_section, text).section


def set_lyrics(song: Song, section_id: str, text: str) -> Song:
    """Replace the lyrics of one section and retag the song's language.

    Parameters
    ----------
    song : Song
        The song being edited.
    section_id : str
        Id of the section whose lyrics changed.
    text : str
        The new lyric text of the section.

    Returns
    -------
    Song
        A new song with the section rebuilt and ``language`` recomputed.

    Raises
    ------
    SectionNotFoundError
        If *section_id* is not a section of *song*.
    """
    section = song.find_section(section_id)
    if section is None:
        raise SectionNotFoundError(section_id)

    updated = song.replace_section(reattach_chords(section, text))
    return replace(updated, language=song_language(updated))

"""Exceptions raised by chord-editor.

User data (lyrics, chord symbols, ChordPro text) never raises: malformed
input degrades to a well-formed result. The exceptions below signal
programming errors made by a caller, such as referring to a section that
is not part of the song.
"""


class ChordEditorError(Exception):
    """Base exception for chord-editor."""


class SectionNotFoundError(ChordEditorError, LookupError):
    """Raised when a section id is not present in the song."""

    def __init__(self, section_id: str):
        self.section_id = section_id
        super().__init__(f"No section with id {section_id!r}")


class TokenNotFoundError(ChordEditorError, LookupError):
    """Raised when a line or token id is not present in a section."""

    def __init__(self, line_id: str, token_id: str | None = None):
        self.line_id = line_id
        self.token_id = token_id
        if token_id is None:
            msg = f"No line with id {line_id!r}"
        else:
            msg = f"No token with id {token_id!r} in line {line_id!r}"
        super().__init__(msg)


class InvalidEditError(ChordEditorError, ValueError):
    """Raised when an edit would break a model invariant."""


class SongFormatError(ChordEditorError, ValueError):
    """Raised when a serialized song does not have the expected shape."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid song data at {path}: {reason}")


class ConfigError(ChordEditorError):
    """Raised when an environment override has an invalid value."""

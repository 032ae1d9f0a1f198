"""Configuration settings for chord-editor.

Values can be overridden through environment variables, read once at
import time.
"""

import os

from .exceptions import ConfigError

# Alignment
PROXIMITY_DISTANCE = int(os.getenv("CHORD_EDITOR_PROXIMITY_DISTANCE", "1"))
MAX_WORD_EDITS = int(os.getenv("CHORD_EDITOR_MAX_WORD_EDITS", "1"))
MAX_ALIGNMENT_CELLS = int(os.getenv("CHORD_EDITOR_MAX_ALIGNMENT_CELLS", "4000000"))

# Song defaults
LANGUAGES = ("en", "he", "mixed")
DEFAULT_LANGUAGE = os.getenv("CHORD_EDITOR_DEFAULT_LANGUAGE", "en")

DEFAULT_SECTION_LABELS = {
    "verse": "Verse",
    "chorus": "Chorus",
    "bridge": "Bridge",
    "intro": "Intro",
    "outro": "Outro",
    "custom": "Section",
}

if DEFAULT_LANGUAGE not in LANGUAGES:
    raise ConfigError(f"CHORD_EDITOR_DEFAULT_LANGUAGE must be one of {LANGUAGES}, got {DEFAULT_LANGUAGE!r}")
if PROXIMITY_DISTANCE < 0:
    raise ConfigError(f"CHORD_EDITOR_PROXIMITY_DISTANCE must be >= 0, got {PROXIMITY_DISTANCE}")

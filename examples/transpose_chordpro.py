#!/usr/bin/env python3
"""CLI tool to transpose a ChordPro file and export it as ChordPro or JSON.

Usage:
    python examples/transpose_chordpro.py <input_file> [-s SEMITONES] [--json]

Examples:
    python examples/transpose_chordpro.py song.cho -s 2
    python examples/transpose_chordpro.py song.cho -s -3 --json --pretty
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from chord_editor import parse_chord_symbol
from chord_editor.sheet import Song, parse_song, serialize_song, transpose_song
from chord_editor.sheet.serialization import song_to_dict


def chord_summary(song: Song) -> list[dict[str, Any]]:
    """List the distinct chords of a song with their Harte spelling and notes."""
    seen: list[str] = []
    for section in song.sections:
        for token in section.tokens:
            if token.chord and token.chord not in seen:
                seen.append(token.chord)

    summary = []
    for chord in seen:
        symbol = parse_chord_symbol(chord)
        summary.append({
            "chord": chord,
            "harte": symbol.to_harte() if symbol else None,
            "notes": list(symbol.components() or ()) if symbol else None,
        })
    return summary


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Transpose a ChordPro file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s song.cho -s 2
  %(prog)s song.cho -s -3 -o lower.cho
  %(prog)s song.cho --json --pretty
        """,
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Input ChordPro file",
    )
    parser.add_argument(
        "-s", "--semitones",
        type=int,
        default=0,
        help="Semitones to transpose by (default: 0)",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Export the song model as JSON instead of ChordPro",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log parsing details to stderr",
    )

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    song = transpose_song(parse_song(args.input.read_text(encoding="utf-8")), args.semitones)

    if args.json:
        data = song_to_dict(song)
        data["chords"] = chord_summary(song)
        output = json.dumps(data, indent=2 if args.pretty else None, ensure_ascii=False) + "\n"
    else:
        output = serialize_song(song)

    if args.output:
        args.output.write_text(output, encoding="utf-8")
        print(f"Written to {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())

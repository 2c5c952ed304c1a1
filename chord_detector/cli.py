"""Command line interface.

Examples
--------
    $ chord-detector D F# A C
    D7
    $ chord-detector F A C D --weights
    1.0  F6
    0.5  Dm7/F
    $ chord-detector --chord Am7
    Am7
    C6/A
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from chord_detector.detector import detect_chords
from chord_detector.models import DetectOptions
from chord_detector.pitch_class import is_note
from chord_detector.symbols import chord_notes

if TYPE_CHECKING:
    from collections.abc import Sequence


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chord-detector",
        description="Name the chords formed by a set of notes. The first note is the bass.",
    )
    parser.add_argument(
        "notes",
        nargs="*",
        help="Note names (e.g. D F# A C)",
    )
    parser.add_argument(
        "--chord",
        metavar="SYMBOL",
        help="Take the notes from a chord symbol instead (e.g. Am7, C/E)",
    )
    parser.add_argument(
        "--assume-perfect-fifth",
        action="store_true",
        help="Match seventh chords whose perfect fifth is missing",
    )
    parser.add_argument(
        "--weights",
        action="store_true",
        help="Print the weight of each chord (1.0 root position, 0.5 inversion)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.chord and args.notes:
        parser.error("give either notes or --chord, not both")

    if args.chord:
        try:
            notes = chord_notes(args.chord)
        except ValueError as e:
            parser.error(f"invalid chord symbol {args.chord!r}: {e}")
    else:
        notes = list(args.notes)
        unknown = [note for note in notes if not is_note(note)]
        if unknown:
            parser.error(f"unknown notes: {', '.join(unknown)}")
        if not notes:
            parser.error("no notes given")

    options = DetectOptions(assume_perfect_fifth=args.assume_perfect_fifth)
    for chord in detect_chords(notes, options):
        if args.weights:
            sys.stdout.write(f"{chord.weight:.1f}  {chord.name}\n")
        else:
            sys.stdout.write(f"{chord.name}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())

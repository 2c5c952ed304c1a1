"""Chord detection from a collection of notes.

Every pitch class is tried as the root: the note set is rotated so that
pitch class lands on position 0 and the rotation is matched against the
chord type dictionary. Matches on the first note given are named in root
position ("D7"); matches on any other root are inversions over that first
note ("D7/F#") and weigh half as much.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chord_detector.chord_type import ChordDictionary, default_dictionary
from chord_detector.models import DetectOptions, FoundChord
from chord_detector.pcset import PcsetCache, chroma_to_number, modes
from chord_detector.pitch_class import is_note, note_to_pc, pc_to_note

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chord_detector.models import ChordType
    from chord_detector.pcset import Note

logger = logging.getLogger(__name__)

# Weight of an inversion relative to root position
INVERSION_WEIGHT = 0.5

# 3m 000100000000, 3M 000010000000
ANY_THIRDS_MASK = 0b000110000000
# 5P 000000010000
PERFECT_FIFTH_MASK = 0b000000010000
# 5d 000000100000, 5A 000000001000
NON_PERFECT_FIFTHS_MASK = 0b000000101000
# 7m 000000000010, 7M 000000000001
ANY_SEVENTH_MASK = 0b000000000011


def has_third_fifth_and_seventh(mask: int) -> bool:
    """Check for any third, a perfect fifth and any seventh.

    Examples
    --------
    >>> has_third_fifth_and_seventh(0b100100010010)  # m7
    True
    >>> has_third_fifth_and_seventh(0b100100010000)  # m
    False
    """
    return bool(mask & ANY_THIRDS_MASK and mask & PERFECT_FIFTH_MASK and mask & ANY_SEVENTH_MASK)


def with_perfect_fifth(mask: int) -> int:
    """Add a perfect fifth unless the set already has a diminished or augmented one.

    Examples
    --------
    >>> format(with_perfect_fifth(0b100100000010), "012b")
    '100100010010'
    >>> format(with_perfect_fifth(0b100100100010), "012b")
    '100100100010'
    """
    if mask & NON_PERFECT_FIFTHS_MASK:
        return mask
    return mask | PERFECT_FIFTH_MASK


def _recognized(notes: Iterable[Note]) -> list[Note]:
    result: list[Note] = []
    for note in notes:
        if isinstance(note, int):
            result.append(note)
            continue
        if not isinstance(note, str) or not is_note(note):
            logger.debug("Ignoring unknown note %r", note)
            continue
        result.append(note)
    return result


def _pitch_class(note: Note) -> int:
    return note % 12 if isinstance(note, int) else note_to_pc(note)


def find_matches(
    notes: Iterable[Note],
    weight: float = 1.0,
    options: DetectOptions | None = None,
    *,
    dictionary: ChordDictionary | None = None,
    cache: PcsetCache | None = None,
) -> list[FoundChord]:
    """Find every chord type matching the notes on any root.

    Parameters
    ----------
    notes : Iterable[str | int]
        Note names or pitch classes; the first one is the tonic.
    weight : float
        Weight of a root position match; inversions get half.
    options : DetectOptions | None
        Detection options, defaults when None.
    dictionary : ChordDictionary | None
        Chord types to match, the default dictionary when None.
    cache : PcsetCache | None
        Pitch class set cache, the shared default when None.

    Returns
    -------
    list[FoundChord]
        Matches in discovery order: by root pitch class, then by
        dictionary order.
    """
    notes = _recognized(notes)
    if not notes:
        return []
    options = options or DetectOptions()
    if dictionary is None:
        dictionary = default_dictionary()
    chord_types: list[ChordType] = dictionary.all()

    tonic_chroma = _pitch_class(notes[0])
    tonic_name = pc_to_note(tonic_chroma)

    found: list[FoundChord] = []
    for root, mode in enumerate(modes(notes, cache=cache)):
        mode_mask = chroma_to_number(mode)
        fifth_mask = with_perfect_fifth(mode_mask) if options.assume_perfect_fifth else mode_mask

        # Different interval spellings may share a chroma; all of them match
        for chord_type in chord_types:
            if options.assume_perfect_fifth and has_third_fifth_and_seventh(chord_type.set_num):
                matched = chord_type.set_num == fifth_mask
            else:
                matched = chord_type.set_num == mode_mask
            if not matched:
                continue

            if root >= 12:
                continue
            base_note = pc_to_note(root)
            symbol = chord_type.symbol
            if root != tonic_chroma:
                found.append(
                    FoundChord(
                        weight=INVERSION_WEIGHT * weight,
                        name=f"{base_note}{symbol}/{tonic_name}",
                        root=base_note,
                        symbol=symbol,
                        bass=tonic_name,
                    )
                )
            else:
                found.append(
                    FoundChord(
                        weight=1.0 * weight,
                        name=f"{base_note}{symbol}",
                        root=base_note,
                        symbol=symbol,
                    )
                )

    logger.debug("Found %d chord candidates for %s", len(found), notes)
    return found


def detect_chords(
    notes: Iterable[Note],
    options: DetectOptions | None = None,
    *,
    dictionary: ChordDictionary | None = None,
    cache: PcsetCache | None = None,
) -> list[FoundChord]:
    """Detect chords and return the scored candidates, best first.

    Candidates with the same weight keep their discovery order.

    Examples
    --------
    >>> [(c.name, c.weight) for c in detect_chords(["C", "E", "G"])]
    [('CM', 1.0), ('Em#5/C', 0.5)]
    """
    found = find_matches(notes, 1.0, options, dictionary=dictionary, cache=cache)
    found = [chord for chord in found if chord.weight > 0]
    # sorted() is stable, ties stay in discovery order
    return sorted(found, key=lambda chord: -chord.weight)


def detect_with_options(
    notes: Iterable[Note],
    options: DetectOptions | None = None,
    *,
    dictionary: ChordDictionary | None = None,
    cache: PcsetCache | None = None,
) -> list[str]:
    """Detect chord names with explicit options.

    Parameters
    ----------
    notes : Iterable[str | int]
        Note names or pitch classes; the first one is the tonic.
    options : DetectOptions | None
        Detection options, defaults when None.
    dictionary : ChordDictionary | None
        Chord types to match, the default dictionary when None.
    cache : PcsetCache | None
        Pitch class set cache, the shared default when None.

    Returns
    -------
    list[str]
        Chord names, root position first.

    Examples
    --------
    >>> detect_with_options(["D", "F", "C"], DetectOptions(assume_perfect_fifth=True))
    ['Dm7']
    >>> detect_with_options(["D", "F", "C"], DetectOptions(assume_perfect_fifth=False))
    []
    """
    return [chord.name for chord in detect_chords(notes, options, dictionary=dictionary, cache=cache)]


def detect(
    notes: Iterable[Note],
    *,
    dictionary: ChordDictionary | None = None,
    cache: PcsetCache | None = None,
) -> list[str]:
    """Detect chord names from notes.

    Examples
    --------
    >>> detect(["D", "F#", "A", "C"])
    ['D7']
    >>> detect(["F#", "A", "C", "D"])
    ['D7/F#']
    >>> detect([])
    []
    """
    return detect_with_options(notes, DetectOptions(), dictionary=dictionary, cache=cache)

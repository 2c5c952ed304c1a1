"""Chord detection from unordered notes.

This library names the chords implied by a collection of notes, including
inversions, by matching every rotation of the notes' pitch class set
against a dictionary of chord types.

Examples
--------
>>> from chord_detector import detect, detect_with_options, DetectOptions

>>> detect(["D", "F#", "A", "C"])
['D7']
>>> detect(["E", "G#", "B", "C#"])
['E6', 'C#m7/E']

>>> # Let seventh chords match without their perfect fifth
>>> detect_with_options(["D", "F", "C"], DetectOptions(assume_perfect_fifth=True))
['Dm7']

>>> # Chord type dictionary
>>> from chord_detector import get_chord_type
>>> get_chord_type("maj7").intervals
('1P', '3M', '5P', '7M')
"""

from chord_detector.chord_type import (
    ChordDictionary,
    add_chord_type,
    all_chord_types,
    chord_type_names,
    chord_type_symbols,
    clear_chord_types,
    default_dictionary,
    get_chord_type,
    reset_default_dictionary,
)
from chord_detector.detector import detect, detect_chords, detect_with_options
from chord_detector.interval import parse_interval
from chord_detector.models import (
    EMPTY_PCSET,
    NO_CHORD_TYPE,
    NO_INTERVAL,
    ChordType,
    DetectOptions,
    FoundChord,
    Interval,
    Pcset,
)
from chord_detector.pcset import PcsetCache, intervals_to_pcset, modes, notes_to_pcset
from chord_detector.symbols import chord_notes, detect_symbol

__all__ = [
    "EMPTY_PCSET",
    "NO_CHORD_TYPE",
    "NO_INTERVAL",
    "ChordDictionary",
    "ChordType",
    "DetectOptions",
    "FoundChord",
    "Interval",
    "Pcset",
    "PcsetCache",
    "add_chord_type",
    "all_chord_types",
    "chord_notes",
    "chord_type_names",
    "chord_type_symbols",
    "clear_chord_types",
    "default_dictionary",
    "detect",
    "detect_chords",
    "detect_symbol",
    "detect_with_options",
    "get_chord_type",
    "intervals_to_pcset",
    "modes",
    "notes_to_pcset",
    "parse_interval",
    "reset_default_dictionary",
]

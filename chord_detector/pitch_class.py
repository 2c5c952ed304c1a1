"""Note name to pitch class conversion.

This module maps spelled note names ("C", "F#", "Bb4") to pitch classes
(0-11, where C=0) and pitch classes back to note names.
"""

from __future__ import annotations

import re

# Natural note letter to pitch class
LETTER_TO_PC: dict[str, int] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}

# Pitch class to note name
PC_TO_SHARP = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
PC_TO_FLAT = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

# Letter, accidentals, optional octave (e.g. "C", "f#", "Bbb", "Eb4", "C-1")
NOTE_RE = re.compile(r"([A-Ga-g])(#+|b+|)(-?[0-9]+)?")


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb", "Ebb", "G4").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("C")
    0
    >>> note_to_pc("F#")
    6
    >>> note_to_pc("Bb3")
    10
    >>> note_to_pc("B#")
    0
    """
    match = NOTE_RE.fullmatch(note.strip()) if isinstance(note, str) else None
    if match is None:
        msg = f"Unknown note: {note}"
        raise ValueError(msg)
    letter, accidentals, _octave = match.groups()
    alteration = accidentals.count("#") - accidentals.count("b")
    return (LETTER_TO_PC[letter.upper()] + alteration) % 12


def is_note(note: str) -> bool:
    """Check whether a string is a note name ``note_to_pc`` accepts.

    Examples
    --------
    >>> is_note("Ab")
    True
    >>> is_note("H")
    False
    """
    return isinstance(note, str) and NOTE_RE.fullmatch(note.strip()) is not None


def pc_to_note(pc: int, prefer_sharp: bool = True) -> str:
    """Convert a pitch class to a note name.

    Parameters
    ----------
    pc : int
        Pitch class; values outside 0-11 are reduced modulo 12.
    prefer_sharp : bool
        Spell black keys with sharps (default) or flats.

    Returns
    -------
    str
        Note name without octave.

    Examples
    --------
    >>> pc_to_note(6)
    'F#'
    >>> pc_to_note(6, prefer_sharp=False)
    'Gb'
    """
    names = PC_TO_SHARP if prefer_sharp else PC_TO_FLAT
    return names[pc % 12]

"""Chord symbol expansion.

This module spells a chord symbol out into notes with pychord and runs the
detector on them, which lists every name the same notes can carry
("Am7" is also "C6/A").
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_detector.detector import detect_with_options

if TYPE_CHECKING:
    from chord_detector.chord_type import ChordDictionary
    from chord_detector.models import DetectOptions
    from chord_detector.pcset import PcsetCache


def chord_notes(symbol: str) -> list[str]:
    """Spell a chord symbol as note names.

    Parameters
    ----------
    symbol : str
        Chord in pychord notation (e.g., "Am7", "C/E", "F#dim7").

    Returns
    -------
    list[str]
        Note names, bass note first for slash chords.

    Raises
    ------
    ValueError
        If pychord cannot parse the symbol.

    Examples
    --------
    >>> chord_notes("D7")
    ['D', 'F#', 'A', 'C']
    >>> chord_notes("C/E")
    ['E', 'C', 'G']
    """
    from pychord import Chord as PyChord

    return list(PyChord(symbol).components())


def detect_symbol(
    symbol: str,
    options: DetectOptions | None = None,
    *,
    dictionary: ChordDictionary | None = None,
    cache: PcsetCache | None = None,
) -> list[str]:
    """Detect every chord name for the notes of a chord symbol.

    Parameters
    ----------
    symbol : str
        Chord in pychord notation.
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

    Raises
    ------
    ValueError
        If pychord cannot parse the symbol.

    Examples
    --------
    >>> detect_symbol("Am7")
    ['Am7', 'C6/A']
    """
    return detect_with_options(chord_notes(symbol), options, dictionary=dictionary, cache=cache)

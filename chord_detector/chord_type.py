"""Dictionary of chord types.

A :class:`ChordDictionary` holds chord types in ascending set number order
and indexes each one by full name, alias, chroma and set number. All four
kinds of key share one lookup table; catalog chords always contain the root,
so their set numbers (2048 and up) never coincide with the short numeric
aliases ("5", "7", "13").

The module level functions work on a default dictionary built from
:data:`chord_detector.chord_data.CHORDS` on first use.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from chord_detector.chord_data import CHORDS, ChordRow
from chord_detector.models import NO_CHORD_TYPE, ChordQuality, ChordType
from chord_detector.pcset import PcsetCache, default_cache

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

logger = logging.getLogger(__name__)

# First characteristic interval found decides the quality
QUALITY_INTERVALS: dict[str, ChordQuality] = {
    "5A": "Augmented",
    "3M": "Major",
    "5d": "Diminished",
    "3m": "Minor",
}


def get_quality(intervals: Iterable[str]) -> ChordQuality:
    """Derive a chord quality from its intervals.

    Examples
    --------
    >>> get_quality(["1P", "3m", "5d"])
    'Minor'
    >>> get_quality(["1P", "4P", "5P"])
    'Unknown'
    """
    for interval in intervals:
        if interval in QUALITY_INTERVALS:
            return QUALITY_INTERVALS[interval]
    return "Unknown"


class ChordDictionary:
    """Catalog of chord types with a name/alias/chroma/set number index.

    Parameters
    ----------
    rows : Sequence[ChordRow]
        ``(intervals, full_name, aliases)`` rows to load. Rows with fewer
        than three fields or without aliases are skipped.
    cache : PcsetCache | None
        Pitch class set cache, the shared default when None.

    Examples
    --------
    >>> dictionary = ChordDictionary()
    >>> dictionary.get("m7").name
    'minor seventh'
    >>> dictionary.get("nope").empty
    True
    """

    def __init__(self, rows: Sequence[ChordRow] = CHORDS, cache: PcsetCache | None = None) -> None:
        self._cache = default_cache if cache is None else cache
        self._lock = threading.Lock()
        self._chords: list[ChordType] = []
        self._index: dict[str, ChordType] = {}

        for row in rows:
            if len(row) < 3 or not row[2].strip():
                logger.debug("Skipping malformed chord row %r", row)
                continue
            intervals, full_name, aliases = row[:3]
            self.add(intervals.split(" "), aliases.split(" "), full_name)

        self._chords.sort(key=lambda chord: chord.set_num)
        logger.debug("Loaded %d chord types", len(self._chords))

    def get(self, key: str) -> ChordType:
        """Look up a chord type by name, alias, chroma or set number.

        Returns ``NO_CHORD_TYPE`` when nothing matches.
        """
        return self._index.get(key, NO_CHORD_TYPE)

    def find(self, key: str) -> ChordType | None:
        """Like :meth:`get`, returning None when nothing matches."""
        return self._index.get(key)

    def names(self) -> list[str]:
        """Full names of all chord types that have one."""
        return [chord.name for chord in self._chords if chord.name]

    def symbols(self) -> list[str]:
        """Primary alias of every chord type."""
        return [chord.aliases[0] for chord in self._chords if chord.aliases]

    def keys(self) -> list[str]:
        """Every key of the lookup index."""
        return list(self._index)

    def all(self) -> list[ChordType]:
        """All chord types, in catalog order."""
        return list(self._chords)

    def add(self, intervals: Iterable[str], aliases: Iterable[str], full_name: str = "") -> ChordType:
        """Add a chord type and index it.

        Parameters
        ----------
        intervals : Iterable[str]
            Intervals of the chord, ascending from "1P".
        aliases : Iterable[str]
            Symbols, canonical one first.
        full_name : str
            Descriptive name, indexed only when not empty.

        Returns
        -------
        ChordType
            The new entry. Keys it shares with earlier entries now point to it.
        """
        intervals = tuple(intervals)
        chord = ChordType(
            pcset=self._cache.from_intervals(intervals),
            name=full_name,
            quality=get_quality(intervals),
            intervals=intervals,
            aliases=tuple(aliases),
        )
        with self._lock:
            self._chords.append(chord)
            if chord.name:
                self._index[chord.name] = chord
            self._index[str(chord.set_num)] = chord
            self._index[chord.chroma] = chord
            for alias in chord.aliases:
                self._index[alias] = chord
        return chord

    def add_alias(self, chord: ChordType, alias: str) -> None:
        """Index an existing chord type under one more key."""
        with self._lock:
            self._index[alias] = chord

    def remove_all(self) -> None:
        """Empty the catalog and the index."""
        with self._lock:
            self._chords = []
            self._index = {}

    def __len__(self) -> int:
        return len(self._chords)

    def __iter__(self) -> Iterator[ChordType]:
        return iter(self._chords)

    def __contains__(self, key: object) -> bool:
        return key in self._index


_default_dictionary: ChordDictionary | None = None
_default_lock = threading.Lock()


def default_dictionary() -> ChordDictionary:
    """The shared dictionary, built from the static table on first use."""
    global _default_dictionary
    if _default_dictionary is None:
        with _default_lock:
            if _default_dictionary is None:
                _default_dictionary = ChordDictionary()
    return _default_dictionary


def reset_default_dictionary() -> ChordDictionary:
    """Rebuild the shared dictionary from the static table."""
    global _default_dictionary
    with _default_lock:
        _default_dictionary = ChordDictionary()
    return _default_dictionary


def get_chord_type(key: str) -> ChordType:
    """Look up a chord type in the default dictionary.

    Examples
    --------
    >>> get_chord_type("100010010000").name
    'major'
    >>> get_chord_type("2192").aliases
    ('M', '^', '', 'maj')
    """
    return default_dictionary().get(key)


def chord_type_names() -> list[str]:
    """Full names in the default dictionary, in set number order."""
    return default_dictionary().names()


def chord_type_symbols() -> list[str]:
    """Primary symbols in the default dictionary, in set number order."""
    return default_dictionary().symbols()


def all_chord_types() -> list[ChordType]:
    """All chord types of the default dictionary."""
    return default_dictionary().all()


def add_chord_type(intervals: Iterable[str], aliases: Iterable[str], full_name: str = "") -> ChordType:
    """Add a chord type to the default dictionary."""
    return default_dictionary().add(intervals, aliases, full_name)


def clear_chord_types() -> None:
    """Remove every chord type from the default dictionary."""
    default_dictionary().remove_all()

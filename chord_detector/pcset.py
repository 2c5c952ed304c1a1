"""Pitch class sets.

A pitch class set is a set (no repeats) of pitch classes, notes without
octave. Each set is encoded as a 12-bit mask where pitch class 0 (C) is the
most significant bit, so the mask printed in binary is the set's chroma
string: "100010010000" is {C, E, G}.

Sets are memoized by chroma in a :class:`PcsetCache`. Functions that accept
a ``cache`` argument fall back to a shared default instance.
"""

from __future__ import annotations

import logging
import re
import threading
from typing import TYPE_CHECKING

from chord_detector.interval import parse_interval
from chord_detector.models import EMPTY_PCSET, Pcset
from chord_detector.pitch_class import note_to_pc

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

Note = str | int

FULL_MASK = 0xFFF
# Value of the mask bit for pitch class 0; rotations at or above it start with "1"
ROOT_BIT = 0b100000000000

# Interval name from C to each pitch class
IVLS = ("1P", "2m", "2M", "3m", "3M", "4P", "5d", "5P", "6m", "6M", "7m", "7M")

CHROMA_RE = re.compile(r"[01]{12}")


def chroma_to_number(chroma: str) -> int:
    """Read a chroma string as a binary number.

    Examples
    --------
    >>> chroma_to_number("100010010000")
    2192
    """
    return int(chroma, 2)


def number_to_chroma(num: int) -> str:
    """Format a 12-bit mask as a chroma string.

    Examples
    --------
    >>> number_to_chroma(2192)
    '100010010000'
    """
    return format(num & FULL_MASK, "012b")


def pc_bit(pc: int) -> int:
    """Mask bit of a pitch class (pitch class 0 is the most significant)."""
    return 1 << (11 - pc % 12)


def rotate_mask(mask: int, k: int) -> int:
    """Rotate a 12-bit mask left by ``k`` positions.

    Rotating the mask left is the same as moving the first ``k``
    characters of the chroma string to its end.

    Examples
    --------
    >>> number_to_chroma(rotate_mask(chroma_to_number("100010010000"), 4))
    '100100001000'
    """
    k %= 12
    return ((mask << k) | (mask >> (12 - k))) & FULL_MASK


def mask_rotations(mask: int) -> list[int]:
    """All 12 left rotations of a mask, rotation 0 first."""
    return [rotate_mask(mask, k) for k in range(12)]


def chroma_rotations(chroma: str) -> list[str]:
    """All 12 left rotations of a chroma string, rotation 0 first."""
    return [number_to_chroma(r) for r in mask_rotations(chroma_to_number(chroma))]


def normalize_mask(set_num: int) -> int:
    """Pick the canonical rotation of a set.

    Among the rotations that start with "1", the smallest one wins, except
    that any rotation replaces a current value still below ``ROOT_BIT``.
    The scan starts from the set itself, so a set that does not start with
    "1" takes its first "1"-rotation unconditionally. If no rotation starts
    with "1" the set is its own representative.
    """
    normalized = set_num
    for rotation in mask_rotations(set_num):
        if rotation >= ROOT_BIT and (rotation < normalized or normalized < ROOT_BIT):
            normalized = rotation
    if normalized < ROOT_BIT:
        normalized = set_num
    return normalized


def mask_intervals(mask: int) -> tuple[str, ...]:
    """Intervals from C to every pitch class present in the mask."""
    return tuple(IVLS[pc] for pc in range(12) if mask & pc_bit(pc))


def chroma_to_pcset(chroma: str) -> Pcset:
    """Build a :class:`Pcset` from its chroma, bypassing the cache.

    Examples
    --------
    >>> chroma_to_pcset("100010010000").normalized
    '100001000100'
    """
    set_num = chroma_to_number(chroma)
    return Pcset(
        empty=False,
        set_num=set_num,
        chroma=number_to_chroma(set_num),
        normalized=number_to_chroma(normalize_mask(set_num)),
        intervals=mask_intervals(set_num),
    )


def notes_to_mask(notes: Iterable[Note]) -> int:
    """Encode notes (names or pitch classes) as a 12-bit mask.

    Note names that cannot be read are left out of the mask.
    """
    mask = 0
    for note in notes:
        if isinstance(note, int):
            mask |= pc_bit(note)
            continue
        try:
            mask |= pc_bit(note_to_pc(note))
        except ValueError:
            logger.debug("Skipping unknown note %r", note)
    return mask


def intervals_to_mask(intervals: Iterable[str]) -> int:
    """Encode intervals as a 12-bit mask.

    Intervals that fail to parse are left out of the mask.
    """
    mask = 0
    for name in intervals:
        interval = parse_interval(name)
        if interval.empty:
            logger.debug("Skipping invalid interval %r", name)
            continue
        mask |= pc_bit(interval.chroma)
    return mask


class PcsetCache:
    """Memo of :class:`Pcset` values keyed by chroma.

    The cache always holds the empty set. Insertion is locked so one cache
    can be shared between threads; reads are not.

    Examples
    --------
    >>> cache = PcsetCache()
    >>> cache.from_notes(["C", "E", "G"]) is cache.from_intervals(["1P", "3M", "5P"])
    True
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sets: dict[str, Pcset] = {EMPTY_PCSET.chroma: EMPTY_PCSET}

    def from_chroma(self, chroma: str) -> Pcset:
        """Get the set of a 12-character chroma; anything else gives ``EMPTY_PCSET``."""
        if not isinstance(chroma, str) or CHROMA_RE.fullmatch(chroma) is None:
            logger.debug("Invalid chroma %r", chroma)
            return EMPTY_PCSET
        cached = self._sets.get(chroma)
        if cached is not None:
            return cached
        with self._lock:
            return self._sets.setdefault(chroma, chroma_to_pcset(chroma))

    def from_mask(self, mask: int) -> Pcset:
        return self.from_chroma(number_to_chroma(mask))

    def from_notes(self, notes: Iterable[Note]) -> Pcset:
        return self.from_mask(notes_to_mask(notes))

    def from_intervals(self, intervals: Iterable[str]) -> Pcset:
        return self.from_mask(intervals_to_mask(intervals))

    def clear(self) -> None:
        with self._lock:
            self._sets = {EMPTY_PCSET.chroma: EMPTY_PCSET}

    def __contains__(self, chroma: object) -> bool:
        return chroma in self._sets

    def __len__(self) -> int:
        return len(self._sets)


default_cache = PcsetCache()


def notes_to_pcset(notes: Iterable[Note], cache: PcsetCache | None = None) -> Pcset:
    """Get the pitch class set of a collection of notes.

    Parameters
    ----------
    notes : Iterable[str | int]
        Note names ("C", "F#", "Bb4") or pitch classes.
    cache : PcsetCache | None
        Cache to use, the shared default when None.

    Returns
    -------
    Pcset
        The set; ``EMPTY_PCSET`` when no note is recognized.

    Examples
    --------
    >>> notes_to_pcset(["D", "F#", "A", "C"]).chroma
    '101000100100'
    """
    return (default_cache if cache is None else cache).from_notes(notes)


def intervals_to_pcset(intervals: Iterable[str], cache: PcsetCache | None = None) -> Pcset:
    """Get the pitch class set of a collection of intervals measured from C.

    Examples
    --------
    >>> intervals_to_pcset(["1P", "3M", "5P"]).set_num
    2192
    """
    return (default_cache if cache is None else cache).from_intervals(intervals)


def chroma_modes(chroma: str, normalize: bool = False) -> list[str]:
    """Rotations of a chroma, optionally only those that start with "1".

    Examples
    --------
    >>> chroma_modes("100010010000", normalize=True)
    ['100010010000', '100100001000', '100001000100']
    """
    return [
        number_to_chroma(rotation)
        for rotation in mask_rotations(chroma_to_number(chroma))
        if not normalize or rotation >= ROOT_BIT
    ]


def modes(notes: Iterable[Note], normalize: bool = False, cache: PcsetCache | None = None) -> list[str]:
    """All rotations of the chroma of a note collection.

    Rotation ``k`` treats pitch class ``k`` as the root.

    Parameters
    ----------
    notes : Iterable[str | int]
        Note names or pitch classes.
    normalize : bool
        Drop rotations that start with "0" (rotations whose root is not in
        the set).
    cache : PcsetCache | None
        Cache to use, the shared default when None.

    Returns
    -------
    list[str]
        Chroma strings in rotation order.
    """
    return chroma_modes(notes_to_pcset(notes, cache).chroma, normalize)

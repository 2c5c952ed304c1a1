"""Data models for chord detection.

This module defines the immutable records shared by the interval parser,
the pitch class set engine, the chord type dictionary and the detector,
together with the "empty" sentinels each of them returns on failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

IntervalQuality = Literal["dddd", "ddd", "dd", "d", "m", "M", "P", "A", "AA", "AAA", "AAAA"]
IntervalType = Literal["perfectable", "majorable"]
ChordQuality = Literal["Major", "Minor", "Augmented", "Diminished", "Unknown"]


@dataclass(frozen=True)
class Interval:
    """A parsed interval.

    Parameters
    ----------
    empty : bool
        True only for the ``NO_INTERVAL`` sentinel.
    name : str
        Canonical name, number first (e.g. "4d", "-2M").
    number : int
        Signed scale-degree distance, never zero.
    quality : IntervalQuality | str
        Quality letters ("" for the sentinel).
    type : IntervalType | str
        "perfectable" for degrees 1, 4, 5, 8 and "majorable" for 2, 3, 6, 7.
    step : int
        Scale step 0-6.
    alteration : int
        Signed alteration, 0 for P on perfectable and M on majorable.
    simple : int
        Octave-reduced number keeping the sign (8 stays 8).
    semitones : int
        Signed size in semitones.
    chroma : int
        Direction-aware pitch class distance 0-11.
    octave : int
        Number of whole octaves spanned.

    Examples
    --------
    >>> from chord_detector.interval import parse_interval
    >>> parse_interval("P5").semitones
    7
    """

    empty: bool
    name: str
    number: int
    quality: IntervalQuality | str
    type: IntervalType | str
    step: int
    alteration: int
    simple: int
    semitones: int
    chroma: int
    octave: int


NO_INTERVAL = Interval(
    empty=True,
    name="",
    number=0,
    quality="",
    type="",
    step=0,
    alteration=0,
    simple=0,
    semitones=0,
    chroma=0,
    octave=0,
)


@dataclass(frozen=True)
class Pcset:
    """A pitch class set.

    Parameters
    ----------
    empty : bool
        True only for ``EMPTY_PCSET``.
    set_num : int
        The chroma read as a 12-bit binary number (pitch class 0 is the
        most significant bit).
    chroma : str
        12 characters of "0"/"1", position i is pitch class i.
    normalized : str
        The chroma rotated to its canonical representative.
    intervals : tuple[str, ...]
        Interval names from C to every pitch class in the set.
    """

    empty: bool
    set_num: int
    chroma: str
    normalized: str
    intervals: tuple[str, ...]

    @property
    def mask(self) -> int:
        """The set as a native 12-bit mask (same value as ``set_num``)."""
        return self.set_num


EMPTY_PCSET = Pcset(
    empty=True,
    set_num=0,
    chroma="000000000000",
    normalized="000000000000",
    intervals=(),
)


@dataclass(frozen=True)
class ChordType:
    """An entry of the chord type dictionary.

    Parameters
    ----------
    pcset : Pcset
        Pitch class set built from ``intervals``.
    name : str
        Full descriptive name, may be empty.
    quality : ChordQuality
        Derived from the characteristic intervals.
    intervals : tuple[str, ...]
        Defining intervals, ascending, starting at "1P".
    aliases : tuple[str, ...]
        Symbols; the first one is the canonical short symbol.

    Examples
    --------
    >>> from chord_detector.chord_type import get_chord_type
    >>> major = get_chord_type("major")
    >>> major.chroma, major.symbol
    ('100010010000', 'M')
    """

    pcset: Pcset
    name: str
    quality: ChordQuality
    intervals: tuple[str, ...]
    aliases: tuple[str, ...]

    @property
    def empty(self) -> bool:
        return self.pcset.empty

    @property
    def set_num(self) -> int:
        return self.pcset.set_num

    @property
    def chroma(self) -> str:
        return self.pcset.chroma

    @property
    def normalized(self) -> str:
        return self.pcset.normalized

    @property
    def symbol(self) -> str:
        """The primary alias, or "" when the entry has none."""
        return self.aliases[0] if self.aliases else ""


NO_CHORD_TYPE = ChordType(
    pcset=EMPTY_PCSET,
    name="",
    quality="Unknown",
    intervals=(),
    aliases=(),
)


@dataclass(frozen=True)
class FoundChord:
    """A scored chord candidate produced during detection.

    Parameters
    ----------
    weight : float
        1.0 for root position, 0.5 for inversions (times the source weight).
    name : str
        Display name, "D7" or "D7/F#".
    root : str
        Sharp-spelled root note.
    symbol : str
        Chord type symbol (primary alias).
    bass : str | None
        Tonic note for inversions, None in root position.

    Examples
    --------
    >>> chord = FoundChord(weight=0.5, name="D7/F#", root="D", symbol="7", bass="F#")
    >>> chord.is_inversion
    True
    """

    weight: float
    name: str
    root: str
    symbol: str
    bass: str | None = None

    @property
    def is_inversion(self) -> bool:
        return self.bass is not None


@dataclass(frozen=True)
class DetectOptions:
    """Detection options.

    Parameters
    ----------
    assume_perfect_fifth : bool
        Let chords with a third, a perfect fifth and a seventh match note
        sets that leave the fifth out (default False).
    """

    assume_perfect_fifth: bool = False

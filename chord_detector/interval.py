"""Interval parsing.

This module turns interval notation into :class:`Interval` records. Two
notations are accepted: tonal, with the number first ("3M", "-2m"), and
shorthand, with the quality first ("M3", "m-2").
"""

from __future__ import annotations

import re
from functools import lru_cache

from chord_detector.models import NO_INTERVAL, Interval, IntervalType

# Tonal notation: number then quality
INTERVAL_TONAL_RE = r"([-+]?[0-9]+)(d{1,4}|m|M|P|A{1,4})"

# Shorthand notation: quality then number
INTERVAL_SHORTHAND_RE = r"(d{1,4}|m|M|P|A{1,4})([-+]?[0-9]+)"

INTERVAL_RE = re.compile(rf"(?:{INTERVAL_TONAL_RE}|{INTERVAL_SHORTHAND_RE})")

# Size in semitones of the natural interval on each step
SIZES = (0, 2, 4, 5, 7, 9, 11)

# Natural quality of each step: P for 1st, 4th, 5th and M for 2nd, 3rd, 6th, 7th
STEP_TYPES: tuple[IntervalType, ...] = (
    "perfectable",
    "majorable",
    "majorable",
    "perfectable",
    "perfectable",
    "majorable",
    "majorable",
)


def tokenize_interval(text: str) -> tuple[str, str]:
    """Split interval notation into its number and quality.

    Parameters
    ----------
    text : str
        Interval in tonal ("-2M") or shorthand ("M-2") notation.

    Returns
    -------
    tuple[str, str]
        ``(number, quality)``, or ``("", "")`` if the text is not an interval.

    Examples
    --------
    >>> tokenize_interval("-2M")
    ('-2', 'M')
    >>> tokenize_interval("M-3")
    ('-3', 'M')
    >>> tokenize_interval("invalid")
    ('', '')
    """
    match = INTERVAL_RE.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        return ("", "")
    tonal_num, tonal_q, short_q, short_num = match.groups()
    if tonal_num is not None:
        return (tonal_num, tonal_q)
    return (short_num, short_q)


def quality_to_alteration(interval_type: IntervalType | str, quality: str) -> int:
    """Return the alteration a quality applies to an interval type.

    Parameters
    ----------
    interval_type : IntervalType
        "perfectable" or "majorable".
    quality : str
        Quality letters (e.g. "P", "m", "dd", "AA").

    Returns
    -------
    int
        0 for the natural quality, negative for smaller intervals.

    Examples
    --------
    >>> quality_to_alteration("perfectable", "dd")
    -2
    >>> quality_to_alteration("majorable", "dd")
    -3
    """
    if (quality == "M" and interval_type == "majorable") or (quality == "P" and interval_type == "perfectable"):
        return 0
    if quality == "m" and interval_type == "majorable":
        return -1
    if quality and set(quality) == {"A"}:
        return len(quality)
    if quality and set(quality) == {"d"}:
        if interval_type == "perfectable":
            return -len(quality)
        return -(len(quality) + 1)
    return 0


@lru_cache(maxsize=1024)
def parse_interval(text: str) -> Interval:
    """Parse interval notation.

    Parameters
    ----------
    text : str
        Interval in tonal ("3M") or shorthand ("M3") notation.

    Returns
    -------
    Interval
        The parsed interval, or ``NO_INTERVAL`` when the text is not a valid
        interval (unknown notation, number 0, or a quality the step cannot
        take such as "2P" or "5M").

    Examples
    --------
    >>> parse_interval("M-3").name
    '-3M'
    >>> parse_interval("2P").empty
    True
    """
    num_text, quality = tokenize_interval(text)
    if not num_text:
        return NO_INTERVAL
    number = int(num_text)
    if number == 0:
        return NO_INTERVAL

    step = (abs(number) - 1) % 7
    interval_type = STEP_TYPES[step]
    # There is no major perfect interval, nor a perfect third
    if interval_type == "majorable" and quality == "P":
        return NO_INTERVAL
    if interval_type == "perfectable" and quality in ("M", "m"):
        return NO_INTERVAL

    direction = -1 if number < 0 else 1
    simple = number if abs(number) == 8 else direction * (step + 1)
    alteration = quality_to_alteration(interval_type, quality)
    octave = (abs(number) - 1) // 7
    semitones = direction * (SIZES[step] + alteration + 12 * octave)
    chroma = (direction * (SIZES[step] + alteration)) % 12

    return Interval(
        empty=False,
        name=f"{number}{quality}",
        number=number,
        quality=quality,
        type=interval_type,
        step=step,
        alteration=alteration,
        simple=simple,
        semitones=semitones,
        chroma=chroma,
        octave=octave,
    )

"""Tests for interval parsing."""

import pytest

from chord_detector.interval import parse_interval, quality_to_alteration, tokenize_interval
from chord_detector.models import NO_INTERVAL, Interval


class TestTokenizeInterval:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("-2M", ("-2", "M")),
            ("M-3", ("-3", "M")),
            ("4d", ("4", "d")),
            ("P5", ("5", "P")),
            ("1P", ("1", "P")),
            ("+5P", ("+5", "P")),
            ("AA4", ("4", "AA")),
            ("invalid", ("", "")),
            ("", ("", "")),
            ("3MM", ("", "")),
            ("3M\n", ("", "")),
            ("٣M", ("", "")),
        ],
    )
    def test_tokenize(self, text, expected):
        assert tokenize_interval(text) == expected


class TestParseInterval:
    def test_has_all_properties(self):
        assert parse_interval("4d") == Interval(
            empty=False,
            name="4d",
            number=4,
            quality="d",
            type="perfectable",
            step=3,
            alteration=-1,
            simple=4,
            semitones=4,
            chroma=4,
            octave=0,
        )

    def test_same_string_gives_equal_interval(self):
        assert parse_interval("5P") == parse_interval("5P")

    @pytest.mark.parametrize("name", ["1P", "2M", "3M", "4P", "5P", "6M", "7M"])
    def test_name_round_trip(self, name):
        assert parse_interval(name).name == name
        assert parse_interval(f"-{name}").name == f"-{name}"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("P1", "1P"),
            ("M2", "2M"),
            ("M3", "3M"),
            ("P4", "4P"),
            ("M7", "7M"),
            ("P-1", "-1P"),
            ("M-2", "-2M"),
            ("P-5", "-5P"),
            ("M-7", "-7M"),
            ("+3m", "3m"),
        ],
    )
    def test_shorthand_names(self, text, expected):
        assert parse_interval(text).name == expected

    @pytest.mark.parametrize(
        "text",
        ["not-an-interval", "garbage", "2P", "3P", "5M", "4m", "0P", "-0M", "P", "3M\n", "٣M"],
    )
    def test_invalid_intervals(self, text):
        interval = parse_interval(text)
        assert interval.empty
        assert interval == NO_INTERVAL

    @pytest.mark.parametrize(
        ("text", "quality"),
        [
            ("1dd", "dd"),
            ("1d", "d"),
            ("1P", "P"),
            ("1A", "A"),
            ("1AA", "AA"),
            ("2dd", "dd"),
            ("2d", "d"),
            ("2m", "m"),
            ("2M", "M"),
            ("2A", "A"),
            ("2AA", "AA"),
        ],
    )
    def test_quality(self, text, quality):
        assert parse_interval(text).quality == quality

    @pytest.mark.parametrize(
        ("text", "alteration"),
        [("1dd", -2), ("2dd", -3), ("3dd", -3), ("4dd", -2), ("3m", -1), ("5AAA", 3)],
    )
    def test_alteration(self, text, alteration):
        assert parse_interval(text).alteration == alteration

    @pytest.mark.parametrize(
        ("text", "simple"),
        [
            ("1P", 1),
            ("2M", 2),
            ("3M", 3),
            ("4P", 4),
            ("8P", 8),
            ("9M", 2),
            ("10M", 3),
            ("11P", 4),
            ("-8P", -8),
            ("-9M", -2),
            ("-10M", -3),
            ("-11P", -4),
        ],
    )
    def test_simple(self, text, simple):
        assert parse_interval(text).simple == simple

    @pytest.mark.parametrize(
        ("text", "semitones", "chroma", "octave"),
        [
            ("3M", 4, 4, 0),
            ("-3M", -4, 8, 0),
            ("9m", 13, 1, 1),
            ("13M", 21, 9, 1),
            ("8P", 12, 0, 1),
            ("-2m", -1, 11, 0),
            ("7d", 9, 9, 0),
            ("15P", 24, 0, 2),
        ],
    )
    def test_sizes(self, text, semitones, chroma, octave):
        interval = parse_interval(text)
        assert interval.semitones == semitones
        assert interval.chroma == chroma
        assert interval.octave == octave

    @pytest.mark.parametrize(
        ("text", "interval_type"),
        [("1P", "perfectable"), ("4A", "perfectable"), ("8P", "perfectable"), ("2m", "majorable"), ("7M", "majorable")],
    )
    def test_type(self, text, interval_type):
        assert parse_interval(text).type == interval_type


class TestQualityToAlteration:
    def test_perfect_intervals(self):
        assert quality_to_alteration("perfectable", "P") == 0
        assert quality_to_alteration("perfectable", "d") == -1
        assert quality_to_alteration("perfectable", "dd") == -2
        assert quality_to_alteration("perfectable", "A") == 1
        assert quality_to_alteration("perfectable", "AA") == 2

    def test_major_intervals(self):
        assert quality_to_alteration("majorable", "M") == 0
        assert quality_to_alteration("majorable", "m") == -1
        assert quality_to_alteration("majorable", "d") == -2
        assert quality_to_alteration("majorable", "dd") == -3
        assert quality_to_alteration("majorable", "A") == 1
        assert quality_to_alteration("majorable", "AA") == 2


class TestNoInterval:
    def test_empty_interval_properties(self):
        assert NO_INTERVAL.empty
        assert NO_INTERVAL.name == ""
        assert NO_INTERVAL.quality == ""
        assert NO_INTERVAL.type == ""
        for field in ("number", "step", "alteration", "simple", "semitones", "chroma", "octave"):
            assert getattr(NO_INTERVAL, field) == 0

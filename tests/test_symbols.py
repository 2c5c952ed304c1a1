"""Tests for chord symbol expansion."""

import pytest

from chord_detector.models import DetectOptions
from chord_detector.symbols import chord_notes, detect_symbol


class TestChordNotes:
    def test_dominant_seventh(self):
        assert chord_notes("D7") == ["D", "F#", "A", "C"]

    def test_slash_chord_puts_bass_first(self):
        assert chord_notes("C/E")[0] == "E"

    def test_invalid_symbol_raises(self):
        with pytest.raises(ValueError):
            chord_notes("Hmaj7")


class TestDetectSymbol:
    @pytest.mark.parametrize(
        ("symbol", "expected"),
        [
            ("C", "CM"),
            ("Am", "Am"),
            ("G7", "G7"),
            ("Fmaj7", "Fmaj7"),
            ("Em7", "Em7"),
            ("Bdim", "Bdim"),
            ("Dsus4", "Dsus4"),
        ],
    )
    def test_root_position_name_comes_first(self, symbol, expected):
        assert detect_symbol(symbol)[0] == expected

    def test_relative_sixth(self):
        assert detect_symbol("Am7") == ["Am7", "C6/A"]

    def test_slash_chord(self):
        assert "CM/E" in detect_symbol("C/E")

    def test_options(self):
        assert detect_symbol("Dm7", DetectOptions(assume_perfect_fifth=True))[0] == "Dm7"

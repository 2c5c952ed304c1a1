"""Tests for chord detection."""

import pytest

from chord_detector.chord_type import ChordDictionary
from chord_detector.detector import (
    PERFECT_FIFTH_MASK,
    detect,
    detect_chords,
    detect_with_options,
    find_matches,
    has_third_fifth_and_seventh,
    with_perfect_fifth,
)
from chord_detector.models import DetectOptions, FoundChord
from chord_detector.pcset import PcsetCache

ASSUME_FIFTH = DetectOptions(assume_perfect_fifth=True)
NO_ASSUME_FIFTH = DetectOptions(assume_perfect_fifth=False)


class TestDetect:
    def test_dominant_seventh(self):
        assert "D7" in detect(["D", "F#", "A", "C"])

    def test_first_inversion(self):
        assert "D7/F#" in detect(["F#", "A", "C", "D"])

    def test_second_inversion(self):
        assert "D7/A" in detect(["A", "C", "D", "F#"])

    def test_sixth_and_minor_seventh(self):
        result = detect(["E", "G#", "B", "C#"])
        assert "E6" in result
        assert "C#m7/E" in result

    def test_augmented(self):
        assert detect(["C", "E", "G#"]) == ["Caug", "Eaug/C", "G#aug/C"]

    def test_major_triad(self):
        assert detect(["C", "E", "G"]) == ["CM", "Em#5/C"]

    def test_empty(self):
        assert detect([]) == []

    def test_no_match(self):
        assert detect(["C", "C#", "D"]) == []

    def test_idempotent(self):
        notes = ["E", "G#", "B", "C#"]
        assert detect(notes) == detect(notes)

    def test_accepts_pitch_classes(self):
        assert detect([2, 6, 9, 0]) == ["D7"]

    def test_accepts_generators(self):
        assert detect(note for note in ["D", "F#", "A", "C"]) == ["D7"]

    def test_unknown_notes_are_ignored(self):
        assert detect(["H", "D", "F#", "A", "C"]) == ["D7"]
        assert detect(["H", "X"]) == []

    def test_non_string_notes_are_ignored(self):
        assert detect([None, "D", "F#", "A", "C"]) == ["D7"]
        assert detect([None]) == []

    def test_octaves_are_ignored(self):
        assert detect(["D3", "F#4", "A4", "C5"]) == ["D7"]


class TestOrdering:
    def test_root_position_first(self):
        assert detect(["F", "A", "C", "D"]) == ["F6", "Dm7/F"]

    def test_inversions_keep_discovery_order(self):
        # Both inversions weigh 0.5; roots come out in pitch class order
        assert detect(["C", "E", "G#"])[1:] == ["Eaug/C", "G#aug/C"]

    def test_found_chord_parts(self):
        assert detect_chords(["F#", "A", "C", "D"]) == [
            FoundChord(weight=0.5, name="D7/F#", root="D", symbol="7", bass="F#"),
        ]
        root_position = detect_chords(["D", "F#", "A", "C"])[0]
        assert root_position.weight == 1.0
        assert not root_position.is_inversion


class TestAssumePerfectFifth:
    def test_missing_fifth(self):
        assert "Dm7" in detect_with_options(["D", "F", "C"], ASSUME_FIFTH)
        assert detect_with_options(["D", "F", "C"], NO_ASSUME_FIFTH) == []

    def test_complete_chord(self):
        assert detect_with_options(["D", "F", "A", "C"], ASSUME_FIFTH) == ["Dm7", "F6/D"]
        assert detect_with_options(["D", "F", "A", "C"], NO_ASSUME_FIFTH) == ["Dm7", "F6/D"]

    def test_diminished_fifth_is_kept(self):
        result = detect_with_options(["D", "F", "Ab", "C"], ASSUME_FIFTH)
        assert "Dm7b5" in result
        assert "Fm6/D" in result

    def test_triads_do_not_gain_a_fifth(self):
        assert detect_with_options(["C", "E"], ASSUME_FIFTH) == []

    def test_both_spellings_match(self):
        assert detect_with_options(["C", "E", "Bb"], ASSUME_FIFTH) == ["C7no5", "C7"]
        assert detect_with_options(["C", "E", "Bb"], NO_ASSUME_FIFTH) == ["C7no5"]

    def test_default_options(self):
        assert detect_with_options(["D", "F", "C"]) == []


class TestMasks:
    def test_with_perfect_fifth(self):
        assert with_perfect_fifth(0b100100000010) == 0b100100010010
        # diminished or augmented fifth present: unchanged
        assert with_perfect_fifth(0b100100100010) == 0b100100100010
        assert with_perfect_fifth(0b100010001000) == 0b100010001000
        assert with_perfect_fifth(0b100010010000) & PERFECT_FIFTH_MASK

    @pytest.mark.parametrize(
        ("mask", "expected"),
        [
            (0b100010010010, True),  # 7
            (0b100010010001, True),  # maj7
            (0b100010010000, False),  # M
            (0b100010000010, False),  # 7no5
            (0b100001010010, False),  # 7sus4
        ],
    )
    def test_has_third_fifth_and_seventh(self, mask, expected):
        assert has_third_fifth_and_seventh(mask) is expected


class TestFindMatches:
    def test_weight_scaling(self):
        found = find_matches(["F", "A", "C", "D"], 2.0)
        assert [(chord.name, chord.weight) for chord in found] == [("Dm7/F", 1.0), ("F6", 2.0)]

    def test_empty(self):
        assert find_matches([]) == []


class TestCustomDictionary:
    @pytest.fixture
    def triads(self) -> ChordDictionary:
        return ChordDictionary(
            [("1P 3M 5P", "major", "M"), ("1P 3m 5P", "minor", "m")],
            cache=PcsetCache(),
        )

    def test_only_given_chord_types_match(self, triads):
        assert detect(["C", "E", "G"], dictionary=triads) == ["CM"]
        assert detect(["E", "G", "C"], dictionary=triads) == ["CM/E"]
        assert detect(["A", "C", "E"], dictionary=triads) == ["Am"]

    def test_empty_dictionary(self, triads):
        triads.remove_all()
        assert detect(["C", "E", "G"], dictionary=triads) == []

    def test_private_cache(self, triads):
        cache = PcsetCache()
        assert detect(["C", "E", "G"], dictionary=triads, cache=cache) == ["CM"]
        assert "100010010000" in cache

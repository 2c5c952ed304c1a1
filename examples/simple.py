import sys

from chord_detector import DetectOptions, detect, detect_chords, detect_with_options, get_chord_type

# Root position and inversions
for notes in (["D", "F#", "A", "C"], ["F#", "A", "C", "D"], ["E", "G#", "B", "C#"]):
    sys.stdout.write(f"{' '.join(notes)}: {', '.join(detect(notes))}\n")

# Seventh chords without their fifth
notes = ["D", "F", "C"]
sys.stdout.write(f"{' '.join(notes)}: {detect_with_options(notes, DetectOptions(assume_perfect_fifth=True))}\n")

# Scored candidates
for chord in detect_chords(["F", "A", "C", "D"]):
    sys.stdout.write(f"{chord.weight:.1f} {chord.name} (root {chord.root}, bass {chord.bass})\n")

# Chord type lookup
maj7 = get_chord_type("maj7")
sys.stdout.write(f"{maj7.name}: {' '.join(maj7.intervals)} [{maj7.chroma}]\n")

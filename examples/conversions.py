import logging

import music_note_utils
import music_note_utils.midi_utils

from music_note_utils import Note, accidentals

logging.basicConfig(level=logging.INFO)

# Spell a few notes and show every representation.
for name in ["A", "A#3", "Bb3", "C4", "C-1", "G9"]:
	note = Note.from_string(name)
	print(f"{name:<5} -> {note}  index={note.index()}  midi={note.midi_number()}  {note.frequency():.2f} Hz")

# A#3 and Bb3 are the same pitch.
print(Note.from_string("A#3") == Note.from_string("Bb3"))

# Walk up a chromatic octave from C4; black keys are spelled as sharps.
c4 = Note.C()
print(" ".join(str(c4.transpose(step)) for step in range(13)))

# Baroque pitch.
music_note_utils.tuning.set_reference_pitch(415)
print(Note.A().frequency(), Note.from_frequency(440))
music_note_utils.tuning.reset_reference_pitch()

# MIDI messages for an E major triad.
for note in (Note.E(), Note.G(accidentals.SHARP), Note.B()):
	print(music_note_utils.midi_utils.note_on(note, velocity=90))

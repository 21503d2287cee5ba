"""
music_note_utils - musical notes and the conversions between their representations.

A note (pitch class, accidental, octave) can be built from, or turned into,
four representations:

- **Half-step index.** Signed semitones from A4. Every conversion goes
  through the index, which is why notes compare by index: ``A#4 == Bb4``.
- **Frequency.** Equal temperament against a process-wide reference pitch
  (440 Hz by default, see ``tuning.set_reference_pitch()``).
- **MIDI number.** A4 = 69, C4 = 60. ``midi_utils`` turns notes into
  ``mido`` note_on / note_off messages and back.
- **Text.** ``"A"``, ``"Bb"``, ``"C#5"``, ``"G-1"``; octave 4 when omitted.

Minimal example:

    ```python
    from music_note_utils import Note, accidentals

    Note.from_frequency(445)             # Note('A4')
    Note.from_string("Bb4") == Note.A().sharp()   # True
    Note.C(accidentals.SHARP, 5).midi_number()    # 73
    str(Note.from_midi_number(59))       # 'B3'
    ```

Command line: ``python -m music_note_utils C4 A#3 --from name``.

Package-level exports: ``Note``, ``PitchClass``, ``Accidental``, ``accidentals``,
``pitch_classes``, ``note_index``, ``tuning``.
"""

import music_note_utils.accidentals
import music_note_utils.note
import music_note_utils.note_index
import music_note_utils.pitch_classes
import music_note_utils.tuning


Note = music_note_utils.note.Note
PitchClass = music_note_utils.pitch_classes.PitchClass
Accidental = music_note_utils.accidentals.Accidental

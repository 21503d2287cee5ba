"""Numeric constants shared by the note conversion modules.

Convention: index 0 is A4, which is also MIDI note 69 and (by default) 440 Hz.
Octave numbers change at C, so C4 sits 9 semitones below A4.
"""

SEMITONES_PER_OCTAVE = 12

# Reference note
DEFAULT_REFERENCE_PITCH = 440.0  # Hz, A4
REFERENCE_OCTAVE = 4
REFERENCE_MIDI_NUMBER = 69       # MIDI number of index 0 (A4)
C4_OFFSET = 9                    # Semitones from C4 up to A4

# Note defaults
DEFAULT_OCTAVE = 4

# MIDI standard range
MIN_MIDI_NUMBER = 0
MAX_MIDI_NUMBER = 127
DEFAULT_VELOCITY = 100

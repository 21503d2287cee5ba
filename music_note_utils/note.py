"""The `Note` value object.

A note is a pitch class, an accidental and an octave. Its half-step index
(semitones from A4) is derived from those three fields, and every other
representation - MIDI number, frequency - is derived from the index.

Notes compare, sort and hash by index, not by spelling, so ``A#4`` and ``Bb4``
are equal while still printing differently.

Example:
	```python
	from music_note_utils import Note, accidentals

	a4 = Note.A()
	a4.frequency()                      # → 440.0
	Note.from_string("Bb4") == a4.sharp()   # → True (enharmonic)
	str(a4.transpose(3))                # → "C5"
	Note.from_midi_number(72) == Note.C(accidentals.NONE, 5)   # → True
	```
"""

import dataclasses
import re
import typing

import music_note_utils.accidentals
import music_note_utils.constants
import music_note_utils.note_index
import music_note_utils.pitch_classes


_NOTE_PATTERN = re.compile(r"([A-G])([#b]?)([+-]?[0-9]+)?")


@dataclasses.dataclass(frozen=True, eq=False)
class Note:

	"""
	A musical note: pitch class, accidental and octave.

	Parameters:
		pitch_class: One of the natural pitch classes A–G.
		accidental: None (default), sharp or flat.
		octave: Octave number (default 4). Octaves change at C.
	"""

	pitch_class: music_note_utils.pitch_classes.PitchClass
	accidental: music_note_utils.accidentals.Accidental = music_note_utils.accidentals.NONE
	octave: int = music_note_utils.constants.DEFAULT_OCTAVE

	def __post_init__ (self) -> None:
		if not isinstance(self.pitch_class, music_note_utils.pitch_classes.PitchClass):
			raise ValueError(f"pitch_class must be a PitchClass, got {self.pitch_class!r}")
		if not isinstance(self.accidental, music_note_utils.accidentals.Accidental):
			raise ValueError(f"accidental must be an Accidental, got {self.accidental!r}")
		if isinstance(self.octave, bool) or not isinstance(self.octave, int):
			raise ValueError(f"octave must be an integer, got {self.octave!r}")


	# -- Alternate constructors --

	@staticmethod
	def from_index (index: float) -> "Note":

		"""Build the note at a half-step index.

		Non-integer indices are rounded to the nearest integer first (halves
		round up). Black keys are always spelled as sharps.

		Example:
			```python
			str(Note.from_index(0))    # → "A4"
			str(Note.from_index(1))    # → "A#4"
			str(Note.from_index(3))    # → "C5"
			str(Note.from_index(-10))  # → "B3"
			```
		"""

		index = music_note_utils.note_index.round_index(index)

		if music_note_utils.note_index.is_accidental(index):
			accidental = music_note_utils.accidentals.SHARP
		else:
			accidental = music_note_utils.accidentals.NONE

		return Note(
			pitch_class = music_note_utils.note_index.to_pitch_class(index),
			accidental = accidental,
			octave = music_note_utils.note_index.to_octave(index),
		)


	@staticmethod
	def from_frequency (frequency: float) -> "Note":

		"""
		Build the note nearest to a frequency in Hz, using the current reference pitch.
		"""

		return Note.from_index(music_note_utils.note_index.from_frequency(frequency))


	@staticmethod
	def from_midi_number (midi_number: int) -> "Note":

		"""
		Build the note for a MIDI note number (69 = A4). Values outside 0–127 are allowed.
		"""

		return Note.from_index(midi_number - music_note_utils.constants.REFERENCE_MIDI_NUMBER)


	@staticmethod
	def from_string (text: str) -> typing.Optional["Note"]:

		"""Parse a note name such as ``"A"``, ``"Bb"``, ``"C#5"`` or ``"G-1"``.

		The grammar is an upper-case letter A–G, an optional ``#`` or ``b``, and an
		optional signed octave number of any size. A missing octave defaults to 4.

		Parameters:
			text: The note name.

		Returns:
			The parsed `Note`, or ``None`` if *text* does not match the grammar.
			Parse failures never raise.

		Example:
			```python
			Note.from_string("A")         # → A4
			Note.from_string("A#12345")   # → A#12345
			Note.from_string("a4")        # → None (letters are case-sensitive)
			Note.from_string("")          # → None
			```
		"""

		if not isinstance(text, str):
			return None

		match = _NOTE_PATTERN.fullmatch(text)

		if match is None:
			return None

		letter, symbol, octave = match.groups()

		pitch_class = music_note_utils.pitch_classes.with_letter(letter)
		accidental = music_note_utils.accidentals.with_symbol(symbol)

		if pitch_class is None or accidental is None:
			return None

		return Note(
			pitch_class = pitch_class,
			accidental = accidental,
			octave = int(octave) if octave is not None else music_note_utils.constants.DEFAULT_OCTAVE,
		)


	@staticmethod
	def A (accidental: music_note_utils.accidentals.Accidental = music_note_utils.accidentals.NONE, octave: int = music_note_utils.constants.DEFAULT_OCTAVE) -> "Note":
		return Note(music_note_utils.pitch_classes.A, accidental, octave)

	@staticmethod
	def B (accidental: music_note_utils.accidentals.Accidental = music_note_utils.accidentals.NONE, octave: int = music_note_utils.constants.DEFAULT_OCTAVE) -> "Note":
		return Note(music_note_utils.pitch_classes.B, accidental, octave)

	@staticmethod
	def C (accidental: music_note_utils.accidentals.Accidental = music_note_utils.accidentals.NONE, octave: int = music_note_utils.constants.DEFAULT_OCTAVE) -> "Note":
		return Note(music_note_utils.pitch_classes.C, accidental, octave)

	@staticmethod
	def D (accidental: music_note_utils.accidentals.Accidental = music_note_utils.accidentals.NONE, octave: int = music_note_utils.constants.DEFAULT_OCTAVE) -> "Note":
		return Note(music_note_utils.pitch_classes.D, accidental, octave)

	@staticmethod
	def E (accidental: music_note_utils.accidentals.Accidental = music_note_utils.accidentals.NONE, octave: int = music_note_utils.constants.DEFAULT_OCTAVE) -> "Note":
		return Note(music_note_utils.pitch_classes.E, accidental, octave)

	@staticmethod
	def F (accidental: music_note_utils.accidentals.Accidental = music_note_utils.accidentals.NONE, octave: int = music_note_utils.constants.DEFAULT_OCTAVE) -> "Note":
		return Note(music_note_utils.pitch_classes.F, accidental, octave)

	@staticmethod
	def G (accidental: music_note_utils.accidentals.Accidental = music_note_utils.accidentals.NONE, octave: int = music_note_utils.constants.DEFAULT_OCTAVE) -> "Note":
		return Note(music_note_utils.pitch_classes.G, accidental, octave)


	# -- Derived values --

	def index (self) -> int:

		"""Return the half-step index: semitones from A4.

		Example:
			```python
			Note.A().index()                          # → 0
			Note.C(octave=5).index()                  # → 3
			Note.B(music_note_utils.accidentals.FLAT).index()   # → 1
			```
		"""

		c4_relative = (
			(self.octave - music_note_utils.constants.REFERENCE_OCTAVE) * music_note_utils.constants.SEMITONES_PER_OCTAVE
			+ self.pitch_class.semitone_offset_from_c
			+ self.accidental.shift
		)

		return c4_relative - music_note_utils.constants.C4_OFFSET


	def midi_number (self) -> int:

		"""
		Return the MIDI note number (A4 = 69, C4 = 60).
		"""

		return self.index() + music_note_utils.constants.REFERENCE_MIDI_NUMBER


	def frequency (self) -> float:

		"""
		Return the equal-tempered frequency in Hz, using the current reference pitch.
		"""

		return music_note_utils.note_index.to_frequency(self.index())


	def is_accidental (self) -> bool:
		return self.accidental is not music_note_utils.accidentals.NONE


	def is_natural (self) -> bool:
		return self.accidental is music_note_utils.accidentals.NONE


	# -- Variants --

	def transpose (self, semitones: int) -> "Note":

		"""Return the note *semitones* above (or below, if negative) this one.

		The result is rebuilt from its index, so it may be spelled differently:
		``Bb4`` transposed by 0 semitones becomes ``A#4``.
		"""

		return Note.from_index(self.index() + semitones)


	def sharp (self) -> "Note":

		"""
		Return the same letter and octave with a sharp (``A4`` → ``A#4``, never ``Bb4``).
		"""

		return dataclasses.replace(self, accidental=music_note_utils.accidentals.SHARP)


	def flat (self) -> "Note":
		return dataclasses.replace(self, accidental=music_note_utils.accidentals.FLAT)


	def natural (self) -> "Note":
		return dataclasses.replace(self, accidental=music_note_utils.accidentals.NONE)


	def clone (self) -> "Note":

		"""
		Return a new note with identical fields.
		"""

		return Note(self.pitch_class, self.accidental, self.octave)


	# -- Comparison --

	def equals (self, other: "Note") -> bool:

		"""
		Return whether two notes share an index (enharmonic equality). Same as ``==``.
		"""

		return self.index() == other.index()


	def __eq__ (self, other: object) -> bool:

		if not isinstance(other, Note):
			return NotImplemented

		return self.equals(other)


	def __hash__ (self) -> int:
		return hash(self.index())


	def __lt__ (self, other: "Note") -> bool:

		if not isinstance(other, Note):
			return NotImplemented

		return self.index() < other.index()


	def __le__ (self, other: "Note") -> bool:

		if not isinstance(other, Note):
			return NotImplemented

		return self.index() <= other.index()


	def __gt__ (self, other: "Note") -> bool:

		if not isinstance(other, Note):
			return NotImplemented

		return self.index() > other.index()


	def __ge__ (self, other: "Note") -> bool:

		if not isinstance(other, Note):
			return NotImplemented

		return self.index() >= other.index()


	# -- Formatting --

	def __str__ (self) -> str:

		"""
		Return the note name, always including the octave (``"A4"``, ``"Bb3"``).
		"""

		return f"{self.pitch_class.letter}{self.accidental.symbol}{self.octave}"


	def __repr__ (self) -> str:
		return f"Note({str(self)!r})"

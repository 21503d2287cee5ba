"""Half-step index arithmetic.

Every conversion in this package goes through a half-step index: the signed
number of semitones from the reference note A4 (index 0). This module holds
the pure functions that derive pitch class, octave, accidental presence and
frequency from an index, and the index from a frequency.

Where a semitone slot can be spelled two ways (A# or Bb), the sharp spelling
wins: the slot is assigned to the natural note below it.
"""

import math
import typing

import music_note_utils.constants
import music_note_utils.pitch_classes
import music_note_utils.tuning


_SEMITONES = music_note_utils.constants.SEMITONES_PER_OCTAVE

# Pitch class ordinal for each normalized index (0 = A).
_PITCH_CLASS_ORDINALS: typing.List[int] = [
	0,  # A
	0,  # A#
	1,  # B
	2,  # C
	2,  # C#
	3,  # D
	3,  # D#
	4,  # E
	5,  # F
	5,  # F#
	6,  # G
	6,  # G#
]

ACCIDENTAL_SLOTS: typing.FrozenSet[int] = frozenset({1, 4, 6, 9, 11})


def round_index (value: float) -> int:

	"""Round a real-valued index to the nearest integer.

	Integers are returned unchanged, whatever their size. Floats round halves
	upwards (``-0.5`` → ``0``, ``0.5`` → ``1``) rather than to the nearest even
	number, so rounding is the same on both sides of zero.

	Raises:
		ValueError: If *value* is NaN.
		OverflowError: If *value* is infinite.
	"""

	if isinstance(value, int) and not isinstance(value, bool):
		return value

	return math.floor(value + 0.5)


def normalize (index: int) -> int:

	"""
	Reduce an index into 0–11 (``-1`` → ``11``).
	"""

	return index % _SEMITONES


def to_pitch_class (index: int) -> music_note_utils.pitch_classes.PitchClass:

	"""Return the pitch class for an index.

	Accidental slots resolve to the natural note below them, so index 1 gives
	A (for A#) rather than B (for Bb).

	Example:
		```python
		to_pitch_class(0)    # → A
		to_pitch_class(3)    # → C
		to_pitch_class(-9)   # → C
		```
	"""

	return music_note_utils.pitch_classes.with_ordinal(_PITCH_CLASS_ORDINALS[normalize(index)])


def is_accidental (index: int) -> bool:

	"""
	Return whether an index falls on a black key.
	"""

	return normalize(index) in ACCIDENTAL_SLOTS


def to_octave (index: int) -> int:

	"""Return the octave number for an index.

	Octaves change at C: index 2 (B4) is in octave 4 and index 3 (C5) is in
	octave 5.
	"""

	c4_relative = index + music_note_utils.constants.C4_OFFSET

	return music_note_utils.constants.REFERENCE_OCTAVE + c4_relative // _SEMITONES


def to_frequency (index: float) -> float:

	"""Return the equal-tempered frequency of an index in Hz.

	Uses the current reference pitch; a NaN reference pitch gives NaN. Indices
	too high for a float give infinity (with the sign of the reference pitch)
	and indices too low give zero.

	Example:
		```python
		to_frequency(0)    # → 440.0
		to_frequency(12)   # → 880.0
		```
	"""

	reference = music_note_utils.tuning.get_reference_pitch()

	try:
		return reference * 2 ** (index / _SEMITONES)
	except OverflowError:
		return reference * (math.inf if index > 0 else 0.0)


def from_frequency (frequency: float) -> int:

	"""Return the index nearest to a frequency.

	The result is always rounded, never an exact match only: 445 Hz with a
	440 Hz reference gives index 0.

	Parameters:
		frequency: Frequency in Hz.

	Returns:
		The nearest half-step index.

	Raises:
		ValueError: If the frequency or the reference pitch is not a finite
			positive number (for example when the reference pitch is NaN).
	"""

	reference = music_note_utils.tuning.get_reference_pitch()

	# NaN fails every comparison.
	if not (0 < frequency < math.inf and 0 < reference < math.inf):
		raise ValueError(
			f"Cannot convert frequency {frequency!r} Hz to an index with reference pitch {reference!r} Hz."
		)

	return round_index(_SEMITONES * math.log2(frequency / reference))

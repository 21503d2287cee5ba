"""The seven natural pitch classes.

Each pitch class carries its letter, its ordinal (A = 0 through G = 6) and its
semitone offset above C. The offsets leave gaps at E-F and B-C, which is what
gives the natural notes their uneven spacing within a 12-semitone octave.

Module-level constants:
- `A` .. `G`: The pitch class instances. Compare them by identity.
- `PITCH_CLASSES`: All seven, ordered by ordinal.

Module-level helpers:
- `with_ordinal(ordinal)`: Look up by ordinal. Raises `ValueError` outside 0–6.
- `with_letter(letter)`: Look up by letter. Returns `None` when not found.
"""

import dataclasses
import typing


@dataclasses.dataclass(frozen=True)
class PitchClass:

	"""
	A natural note letter with its fixed position within an octave.
	"""

	letter: str
	ordinal: int
	semitone_offset_from_c: int


A = PitchClass(letter="A", ordinal=0, semitone_offset_from_c=9)
B = PitchClass(letter="B", ordinal=1, semitone_offset_from_c=11)
C = PitchClass(letter="C", ordinal=2, semitone_offset_from_c=0)
D = PitchClass(letter="D", ordinal=3, semitone_offset_from_c=2)
E = PitchClass(letter="E", ordinal=4, semitone_offset_from_c=4)
F = PitchClass(letter="F", ordinal=5, semitone_offset_from_c=5)
G = PitchClass(letter="G", ordinal=6, semitone_offset_from_c=7)

PITCH_CLASSES: typing.Tuple[PitchClass, ...] = (A, B, C, D, E, F, G)

_BY_LETTER: typing.Dict[str, PitchClass] = {pc.letter: pc for pc in PITCH_CLASSES}


def with_ordinal (ordinal: int) -> PitchClass:

	"""Return the pitch class at a given ordinal.

	Parameters:
		ordinal: Position in the A–G sequence (0 = A, 6 = G).

	Returns:
		The matching `PitchClass`.

	Raises:
		ValueError: If the ordinal is outside 0–6.

	Example:
		```python
		with_ordinal(0)   # → A
		with_ordinal(2)   # → C
		```
	"""

	if not 0 <= ordinal < len(PITCH_CLASSES):
		raise ValueError(
			f"Pitch class ordinal out of range: {ordinal!r}. Expected 0-{len(PITCH_CLASSES) - 1}."
		)

	return PITCH_CLASSES[ordinal]


def with_letter (letter: str) -> typing.Optional[PitchClass]:

	"""
	Return the pitch class for an upper-case letter, or ``None`` if there is none.
	"""

	return _BY_LETTER.get(letter)

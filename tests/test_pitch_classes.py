import unittest

import music_note_utils.accidentals
import music_note_utils.pitch_classes


class PitchClassTests (unittest.TestCase):

	"""
	Tests for the natural pitch class table.
	"""

	def test_all_seven_letters (self) -> None:

		"""
		The table should hold A–G in ordinal order.
		"""

		for ordinal, letter in enumerate("ABCDEFG"):
			pitch_class = getattr(music_note_utils.pitch_classes, letter)
			self.assertEqual(pitch_class.letter, letter)
			self.assertEqual(pitch_class.ordinal, ordinal)
			self.assertIs(music_note_utils.pitch_classes.PITCH_CLASSES[ordinal], pitch_class)


	def test_semitone_offsets (self) -> None:

		"""
		Offsets above C should leave gaps at E-F and B-C.
		"""

		offsets = {pc.letter: pc.semitone_offset_from_c for pc in music_note_utils.pitch_classes.PITCH_CLASSES}

		self.assertEqual(offsets, {"A": 9, "B": 11, "C": 0, "D": 2, "E": 4, "F": 5, "G": 7})


	def test_with_ordinal (self) -> None:

		"""
		Lookup by ordinal should return the same instances.
		"""

		for i in range(7):
			pitch_class = music_note_utils.pitch_classes.with_ordinal(i)
			self.assertEqual(pitch_class.ordinal, i)
			self.assertEqual(pitch_class.letter, "ABCDEFG"[i])


	def test_with_ordinal_out_of_range (self) -> None:

		"""
		Ordinals outside 0–6 should raise.
		"""

		for ordinal in (-1, 7, 100):
			with self.assertRaises(ValueError):
				music_note_utils.pitch_classes.with_ordinal(ordinal)


	def test_with_letter (self) -> None:

		"""
		Lookup by letter is case-sensitive and returns None when not found.
		"""

		self.assertIs(music_note_utils.pitch_classes.with_letter("C"), music_note_utils.pitch_classes.C)
		self.assertIsNone(music_note_utils.pitch_classes.with_letter("c"))
		self.assertIsNone(music_note_utils.pitch_classes.with_letter("H"))
		self.assertIsNone(music_note_utils.pitch_classes.with_letter(""))


class AccidentalTests (unittest.TestCase):

	"""
	Tests for the accidental constants.
	"""

	def test_shifts_and_symbols (self) -> None:

		"""
		Each accidental should map to its semitone shift and symbol.
		"""

		self.assertEqual(music_note_utils.accidentals.NONE.shift, 0)
		self.assertEqual(music_note_utils.accidentals.SHARP.shift, 1)
		self.assertEqual(music_note_utils.accidentals.FLAT.shift, -1)

		self.assertEqual(music_note_utils.accidentals.NONE.symbol, "")
		self.assertEqual(music_note_utils.accidentals.SHARP.symbol, "#")
		self.assertEqual(music_note_utils.accidentals.FLAT.symbol, "b")


	def test_with_symbol (self) -> None:

		"""
		Symbol lookup should return the constants themselves.
		"""

		self.assertIs(music_note_utils.accidentals.with_symbol("#"), music_note_utils.accidentals.SHARP)
		self.assertIs(music_note_utils.accidentals.with_symbol("b"), music_note_utils.accidentals.FLAT)
		self.assertIs(music_note_utils.accidentals.with_symbol(""), music_note_utils.accidentals.NONE)
		self.assertIsNone(music_note_utils.accidentals.with_symbol("x"))

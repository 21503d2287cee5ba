import logging
import math
import threading

import pytest

import music_note_utils.note_index
import music_note_utils.tuning


def test_default_reference_pitch () -> None:

	"""The reference pitch starts at 440 Hz."""

	assert music_note_utils.tuning.get_reference_pitch() == 440


def test_numeric_strings_are_coerced () -> None:

	"""Strings holding numbers are stored as floats."""

	assert music_note_utils.tuning.set_reference_pitch("445") == 445
	assert music_note_utils.tuning.get_reference_pitch() == 445

	music_note_utils.tuning.set_reference_pitch("440")
	assert music_note_utils.tuning.get_reference_pitch() == 440


def test_setting_changes_later_conversions () -> None:

	"""A new reference pitch applies immediately to frequency conversions."""

	music_note_utils.tuning.set_reference_pitch(432)

	assert music_note_utils.note_index.to_frequency(0) == 432
	assert music_note_utils.note_index.from_frequency(432) == 0


@pytest.mark.parametrize("value", ["not a number", None, object()])
def test_invalid_values_become_nan (value: object, caplog: pytest.LogCaptureFixture) -> None:

	"""Invalid values are stored as NaN, logged, and poison frequency conversions."""

	with caplog.at_level(logging.WARNING, logger="music_note_utils.tuning"):
		stored = music_note_utils.tuning.set_reference_pitch(value)

	assert math.isnan(stored)
	assert math.isnan(music_note_utils.tuning.get_reference_pitch())
	assert math.isnan(music_note_utils.note_index.to_frequency(0))
	assert "not numeric" in caplog.text


def test_reset_restores_default () -> None:

	"""reset_reference_pitch() returns to 440 Hz, even from NaN."""

	music_note_utils.tuning.set_reference_pitch("bogus")
	music_note_utils.tuning.reset_reference_pitch()

	assert music_note_utils.tuning.get_reference_pitch() == 440


def test_concurrent_setters () -> None:

	"""Concurrent writes leave one of the written values in place."""

	values = [400.0 + i for i in range(20)]
	threads = [threading.Thread(target=music_note_utils.tuning.set_reference_pitch, args=(v,)) for v in values]

	for thread in threads:
		thread.start()
	for thread in threads:
		thread.join()

	assert music_note_utils.tuning.get_reference_pitch() in values

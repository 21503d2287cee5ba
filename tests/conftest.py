import typing

import pytest

import music_note_utils.tuning


@pytest.fixture(autouse=True)
def default_reference_pitch () -> typing.Iterator[None]:

	"""Run every test at 440 Hz and restore it afterwards, whatever the test set."""

	music_note_utils.tuning.reset_reference_pitch()
	yield
	music_note_utils.tuning.reset_reference_pitch()

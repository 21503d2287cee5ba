"""Conversion between notes and ``mido`` MIDI messages.

Only message objects are built here; opening ports and sending is left to
the caller.

Example:
	```python
	import mido
	import music_note_utils.midi_utils
	from music_note_utils import Note

	message = music_note_utils.midi_utils.note_on(Note.from_string("C4"), velocity=90)
	# <message note_on channel=0 note=60 velocity=90 time=0>

	with mido.open_output() as port:
		port.send(message)
	```
"""

import logging
import typing

import mido

import music_note_utils.constants
import music_note_utils.note

logger = logging.getLogger(__name__)


def _midi_number (note: music_note_utils.note.Note) -> int:

	midi_number = note.midi_number()

	if not music_note_utils.constants.MIN_MIDI_NUMBER <= midi_number <= music_note_utils.constants.MAX_MIDI_NUMBER:
		raise ValueError(
			f"{note} has MIDI number {midi_number}, outside the MIDI range "
			f"{music_note_utils.constants.MIN_MIDI_NUMBER}-{music_note_utils.constants.MAX_MIDI_NUMBER}."
		)

	return midi_number


def note_on (note: music_note_utils.note.Note, velocity: int = music_note_utils.constants.DEFAULT_VELOCITY, channel: int = 0) -> mido.Message:

	"""Build a note_on message for a note.

	Parameters:
		note: The note to play. Its MIDI number must be within 0–127.
		velocity: Attack velocity (0–127).
		channel: MIDI channel (0–15).

	Raises:
		ValueError: If the note, velocity or channel is out of range.
	"""

	return mido.Message("note_on", note=_midi_number(note), velocity=velocity, channel=channel)


def note_off (note: music_note_utils.note.Note, velocity: int = 0, channel: int = 0) -> mido.Message:

	"""
	Build a note_off message for a note.
	"""

	return mido.Message("note_off", note=_midi_number(note), velocity=velocity, channel=channel)


def note_from_message (message: mido.Message) -> music_note_utils.note.Note:

	"""Return the note carried by a note_on or note_off message.

	Black keys come back spelled as sharps, as with `Note.from_midi_number`.

	Raises:
		ValueError: If the message is not a note_on or note_off.
	"""

	if message.type not in ("note_on", "note_off"):
		raise ValueError(f"Expected a note_on or note_off message, got {message.type!r}")

	return music_note_utils.note.Note.from_midi_number(message.note)


def notes_from_messages (messages: typing.Iterable[mido.Message]) -> typing.List[music_note_utils.note.Note]:

	"""
	Return the notes of every note_on message with a non-zero velocity, skipping everything else.
	"""

	notes: typing.List[music_note_utils.note.Note] = []

	for message in messages:

		if message.type != "note_on" or message.velocity == 0:
			logger.debug(f"Skipping message: {message}")
			continue

		notes.append(note_from_message(message))

	return notes

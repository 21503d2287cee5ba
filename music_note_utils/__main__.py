import argparse
import logging
import os
import sys
import typing

import yaml

import music_note_utils.note
import music_note_utils.tuning


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		config = yaml.safe_load(f) or {}

	if not isinstance(config, dict):
		logger.warning(f"Config file {config_path} is not a mapping. Using defaults.")
		return {}

	return config


def _to_number (value: str) -> float:

	"""
	Read an integer exactly, or fall back to a float.
	"""

	try:
		return int(value)
	except ValueError:
		return float(value)


def parse_value (value: str, source: str) -> typing.Optional[music_note_utils.note.Note]:

	"""
	Convert one command-line value to a note, or ``None`` if it cannot be read as *source*.
	"""

	if source == "name":
		return music_note_utils.note.Note.from_string(value)

	try:
		if source == "frequency":
			return music_note_utils.note.Note.from_frequency(float(value))
		if source == "midi":
			return music_note_utils.note.Note.from_midi_number(int(value))
		if source == "index":
			return music_note_utils.note.Note.from_index(_to_number(value))
	except (ValueError, OverflowError) as exc:
		logger.debug(f"Could not read {value!r} as {source}: {exc}")
		return None

	raise ValueError(f"Unknown source: {source!r}")


def describe (note: music_note_utils.note.Note) -> str:

	"""
	Format a note with all of its representations on one line.
	"""

	return f"{str(note):<6} index={note.index():<4} midi={note.midi_number():<4} frequency={note.frequency():.2f} Hz"


def build_parser () -> argparse.ArgumentParser:

	parser = argparse.ArgumentParser(
		prog="music_note_utils",
		description="Convert notes between names, frequencies, MIDI numbers and half-step indices.",
	)
	parser.add_argument("values", nargs="+", help="Values to convert")
	parser.add_argument("--from", dest="source", choices=["name", "frequency", "midi", "index"], default="name", help="How to read the values (default: name)")
	parser.add_argument("--reference-pitch", type=float, default=None, help="Frequency of A4 in Hz (overrides the config file)")
	parser.add_argument("--config", default="config.yaml", help="Path to a YAML config file")

	return parser


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the music_note_utils command line.
	"""

	args = build_parser().parse_args(argv)

	config = load_config(args.config)

	tuning = config.get('tuning') or {}

	if not isinstance(tuning, dict):
		logger.warning(f"Ignoring tuning settings {tuning!r}: expected a mapping.")
		tuning = {}

	reference_pitch = tuning.get('reference_pitch')

	if args.reference_pitch is not None:
		reference_pitch = args.reference_pitch

	if reference_pitch is not None:
		music_note_utils.tuning.set_reference_pitch(reference_pitch)
		logger.info(f"Reference pitch: {music_note_utils.tuning.get_reference_pitch()} Hz")

	status = 0

	for value in args.values:

		note = parse_value(value, args.source)

		if note is None:
			logger.error(f"Cannot read {value!r} as a {args.source}.")
			status = 1
			continue

		print(describe(note))

	return status


if __name__ == "__main__":
	sys.exit(main())

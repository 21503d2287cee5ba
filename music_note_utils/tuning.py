"""Process-wide reference pitch.

The reference pitch is the frequency, in Hz, of half-step index 0 (A4). It
defaults to 440 Hz and can be changed at any time; every later frequency
conversion reads the current value.

Values are coerced with ``float()``, so numeric strings such as ``"445"`` are
accepted. Anything that cannot be coerced is stored as NaN rather than
rejected, and every frequency computed afterwards is NaN as well. A warning is
logged when this happens.

Example:
	```python
	import music_note_utils.tuning

	music_note_utils.tuning.set_reference_pitch(432)
	music_note_utils.tuning.get_reference_pitch()  # → 432.0
	music_note_utils.tuning.reset_reference_pitch()
	```
"""

import logging
import math
import threading
import typing

import music_note_utils.constants


logger = logging.getLogger(__name__)

_lock = threading.Lock()
_reference_pitch: float = music_note_utils.constants.DEFAULT_REFERENCE_PITCH


def _coerce (value: typing.Any) -> float:

	"""
	Convert *value* to a float, or NaN if it is not numeric.
	"""

	try:
		return float(value)
	except (TypeError, ValueError):
		return math.nan


def get_reference_pitch () -> float:

	"""
	Return the current reference pitch in Hz.
	"""

	with _lock:
		return _reference_pitch


def set_reference_pitch (value: typing.Any) -> float:

	"""Set the reference pitch and return the stored value.

	Parameters:
		value: Frequency of A4 in Hz. Anything ``float()`` accepts is valid.

	Returns:
		The coerced value that was stored (NaN if *value* was not numeric).
	"""

	global _reference_pitch

	pitch = _coerce(value)

	if math.isnan(pitch):
		logger.warning(f"Reference pitch {value!r} is not numeric; frequency conversions will return NaN.")

	with _lock:
		_reference_pitch = pitch

	return pitch


def reset_reference_pitch () -> None:

	"""
	Restore the default reference pitch (440 Hz).
	"""

	set_reference_pitch(music_note_utils.constants.DEFAULT_REFERENCE_PITCH)

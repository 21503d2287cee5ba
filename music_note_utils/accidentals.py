"""Accidentals: none, sharp and flat.

The three instances are module-level constants and should be compared by
identity (``note.accidental is accidentals.SHARP``).
"""

import dataclasses
import typing


@dataclasses.dataclass(frozen=True)
class Accidental:

	"""
	A semitone shift applied to a pitch class, with its display symbol.
	"""

	shift: int
	symbol: str


NONE = Accidental(shift=0, symbol="")
SHARP = Accidental(shift=1, symbol="#")
FLAT = Accidental(shift=-1, symbol="b")

ACCIDENTALS: typing.Tuple[Accidental, ...] = (NONE, SHARP, FLAT)

_BY_SYMBOL: typing.Dict[str, Accidental] = {a.symbol: a for a in ACCIDENTALS}


def with_symbol (symbol: str) -> typing.Optional[Accidental]:

	"""
	Return the accidental written as *symbol* (``""``, ``"#"`` or ``"b"``), or ``None``.
	"""

	return _BY_SYMBOL.get(symbol)

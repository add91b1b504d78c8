"""Keyboard index and note name conversion.

Keyboard indices count half steps from the lowest C of the keyboard, which
is named ``C1``. Index 40 is ``E4``, index 83 the ``B7`` at the top of the
default 84-key range.

Module-level constants:
- `NOTE_NAMES`: Pitch-class names using flats (``"Db"``, ``"Eb"``, ...)
- `NOTE_NAME_TO_PC`: Maps flat and sharp spellings to pitch classes (0-11)
"""

import re
import typing


NOTE_NAMES: typing.List[str] = [
	"C",
	"Db",
	"D",
	"Eb",
	"E",
	"F",
	"Gb",
	"G",
	"Ab",
	"A",
	"Bb",
	"B",
]

NOTE_NAME_TO_PC: typing.Dict[str, int] = {
	"C": 0,
	"C#": 1,
	"Db": 1,
	"D": 2,
	"D#": 3,
	"Eb": 3,
	"E": 4,
	"F": 5,
	"F#": 6,
	"Gb": 6,
	"G": 7,
	"G#": 8,
	"Ab": 8,
	"A": 9,
	"A#": 10,
	"Bb": 10,
	"B": 11,
}

FIRST_OCTAVE: int = 1

_NOTE_PATTERN = re.compile(r"^([A-G][#b]?)(-?\d+)$")


def note_name (index: int) -> str:

	"""Return the name of a keyboard index (e.g. ``40`` -> ``"E4"``)."""

	if index < 0:
		raise ValueError(f"Keyboard index must not be negative, got {index}")

	return f"{NOTE_NAMES[index % 12]}{index // 12 + FIRST_OCTAVE}"


def note_index (name: str) -> int:

	"""Return the keyboard index of a note name.

	Parameters:
		name: Pitch name and octave, e.g. ``"C4"``, ``"F#2"``, ``"Bb5"``.

	Raises:
		ValueError: If the name cannot be parsed or lies below the keyboard.

	Example:
		```python
		note_index("C1")   # -> 0
		note_index("E4")   # -> 40
		note_index("C#4")  # -> 37
		```
	"""

	match = _NOTE_PATTERN.match(name.strip())

	if match is None or match.group(1) not in NOTE_NAME_TO_PC:
		raise ValueError(f"Unknown note name: {name!r}. Expected e.g. 'C4', 'F#2', 'Bb5'.")

	index = NOTE_NAME_TO_PC[match.group(1)] + (int(match.group(2)) - FIRST_OCTAVE) * 12

	if index < 0:
		raise ValueError(f"Note {name!r} is below the keyboard")

	return index

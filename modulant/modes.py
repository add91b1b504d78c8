"""Scale modes and triad construction.

A mode is stored as the seven half-step intervals between successive scale
degrees, so ``IONIAN[0] == 2`` means two half steps from the 1st to the 2nd
note and ``IONIAN[2] == 1`` means one half step from the 3rd to the 4th.
Every mode spans exactly one octave (the intervals sum to 12).

Example:
	```python
	import modulant.modes

	ionian = modulant.modes.MODES[modulant.modes.mode_index("ionian")]
	modulant.modes.triad(40, ionian, 4)  # (47, 51, 54) - the V chord
	```
"""

import typing


Mode = typing.Tuple[int, int, int, int, int, int, int]
Triad = typing.Tuple[int, int, int]


DEGREES_PER_MODE: int = 7

IONIAN: Mode = (2, 2, 1, 2, 2, 2, 1)
DORIAN: Mode = (2, 1, 2, 2, 2, 1, 2)
PHRYGIAN: Mode = (1, 2, 2, 2, 1, 2, 2)
LYDIAN: Mode = (2, 2, 2, 1, 2, 2, 1)
MIXOLYDIAN: Mode = (2, 2, 1, 2, 2, 1, 2)
AEOLIAN: Mode = (2, 1, 2, 2, 1, 2, 2)
LOCRIAN: Mode = (1, 2, 2, 1, 2, 2, 2)


MODES: typing.Tuple[Mode, ...] = (
	IONIAN,
	DORIAN,
	PHRYGIAN,
	LYDIAN,
	MIXOLYDIAN,
	AEOLIAN,
	LOCRIAN,
)

MODE_NAMES: typing.Tuple[str, ...] = (
	"ionian",
	"dorian",
	"phrygian",
	"lydian",
	"mixolydian",
	"aeolian",
	"locrian",
)

MODE_ALIASES: typing.Dict[str, str] = {
	"major": "ionian",
	"minor": "aeolian",
}

ROMAN_NUMERALS: typing.Tuple[str, ...] = ("I", "II", "III", "IV", "V", "VI", "VII")


def mode_index (name: str) -> int:

	"""Return the catalog index for a mode name.

	Parameters:
		name: Mode name (e.g. ``"dorian"``), case-insensitive. ``"major"`` and
			``"minor"`` are accepted as aliases for ionian and aeolian.

	Raises:
		ValueError: If the name is not a known mode.
	"""

	key = name.lower()
	key = MODE_ALIASES.get(key, key)

	if key not in MODE_NAMES:
		raise ValueError(f"Unknown mode '{name}'. Available: {list(MODE_NAMES)}")

	return MODE_NAMES.index(key)


def mode_name (index: int) -> str:

	"""Return the name of the mode at a catalog index."""

	if index < 0 or index >= len(MODES):
		raise ValueError(f"Mode index must be between 0 and {len(MODES) - 1}")

	return MODE_NAMES[index]


def triad (start: int, mode: typing.Sequence[int], degree: int) -> Triad:

	"""Stack two thirds on a scale degree.

	The chord root is found by walking the mode's intervals up from
	``start``; the third and fifth are each two scale steps higher. Interval
	indices wrap modulo 7 so chords on upper degrees continue into the next
	octave.

	Parameters:
		start: Keyboard index of the scale's first degree.
		mode: Seven half-step intervals.
		degree: Scale degree of the chord root (0 = I, 6 = VII).

	Returns:
		Absolute ``(root, third, fifth)``, not reduced to pitch classes.
	"""

	n = len(mode)

	note1 = start + sum(mode[:degree])
	note2 = note1 + mode[degree % n] + mode[(degree + 1) % n]
	note3 = note2 + mode[(degree + 2) % n] + mode[(degree + 3) % n]

	return note1, note2, note3

"""Chord voicing selection.

A triad's three pitch classes can be played in any octave on the keyboard.
``invert`` picks between two and six concrete keys for a chord, sampled
without replacement from every position of those pitch classes. Positions
near a target pitch (usually the current key's root) are strongly
preferred, so voicings stay in one register while still varying their
inversion and spread.

Example:
	```python
	import random
	import modulant.voicings

	# C major around keyboard index 40 on an 84-key keyboard
	notes = modulant.voicings.invert(40, 44, 47, mean=40, num_keys=84, rng=random.Random(1))
	```
"""

import logging
import math
import typing

import modulant.markov_chain


logger = logging.getLogger(__name__)


MEAN_DEVIATION: float = 6.0
MIN_NOTES: int = 2
MAX_NOTES: int = 6


def gaussian (x: float, center: float, deviation: float, amplitude: float = 1.0) -> float:

	"""Evaluate an unnormalised Gaussian bell at ``x``."""

	return amplitude * math.exp(-0.5 * (x - center) ** 2 / deviation ** 2)


def keyboard_positions (note1: int, note2: int, note3: int, num_keys: int) -> typing.List[int]:

	"""
	List every keyboard index that shares a pitch class with one of the notes.

	Positions are grouped by octave and keep the note order inside each
	octave: ``pc1, pc2, pc3, pc1 + 12, pc2 + 12, ...``. Positions at or above
	``num_keys`` are left out.
	"""

	base_notes = [note1 % 12, note2 % 12, note3 % 12]
	positions: typing.List[int] = []
	octave = 0

	while min(base_notes) + octave < num_keys:

		for base in base_notes:
			if base + octave < num_keys:
				positions.append(base + octave)

		octave += 12

	return positions


def centre_weight (num_keys: int) -> float:

	"""
	Return the keyboard-centre term added to every candidate's weight.

	The bell is centred on the middle of the keyboard with a deviation of a
	sixth of its width, but it is evaluated at the fixed distance
	``num_keys // 2`` rather than at each candidate, so every candidate gets
	the same value and the term never changes which notes are favoured.
	"""

	return gaussian(num_keys // 2, 0, num_keys / 6.0)


def invert (
	note1: int,
	note2: int,
	note3: int,
	mean: int,
	num_keys: int,
	rng: typing.Optional[modulant.markov_chain.RandomSource] = None
) -> typing.List[int]:

	"""
	Choose a concrete voicing for a triad.

	Parameters:
		note1: Chord root (any octave).
		note2: Chord third (any octave).
		note3: Chord fifth (any octave).
		mean: Keyboard index the voicing should gather around.
		num_keys: Size of the keyboard; every result lies in ``[0, num_keys)``.
		rng: Source of uniform draws.

	Returns:
		Between two and six distinct keyboard indices, in the order they were
		drawn (not sorted).
	"""

	rng = modulant.markov_chain.default_rng(rng)

	positions = keyboard_positions(note1, note2, note3, num_keys)
	flat = centre_weight(num_keys)
	weights = [gaussian(p, mean, MEAN_DEVIATION) + flat for p in positions]

	# Round half up: 2.5 gives 3 notes.
	num_notes = math.floor(MIN_NOTES + (MAX_NOTES - MIN_NOTES) * rng.random() + 0.5)
	num_notes = min(num_notes, len(positions))

	output: typing.List[int] = []

	while len(output) < num_notes:

		total = sum(weights)
		weights = [w / total for w in weights]

		index = modulant.markov_chain.choose_index(weights, rng.random())
		output.append(positions[index])
		weights[index] = 0.0

	logger.debug(f"Inversion {output}")

	return output

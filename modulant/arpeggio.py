import math
import typing

import modulant.markov_chain


def arpeggiate (num_notes: int, rng: typing.Optional[modulant.markov_chain.RandomSource] = None) -> typing.List[int]:

	"""
	Split a voicing into groups of notes that sound together.

	Each group takes a random share of the notes still left, between one and
	all of them, so a chord may be struck at once, fully broken into single
	notes, or anything in between. Larger groups tend to come first.

	Parameters:
		num_notes: Length of the voicing.
		rng: Source of uniform draws.

	Returns:
		Positive group sizes that add up to ``num_notes``.

	Example:
		```python
		arpeggiate(1)  # [1]
		arpeggiate(4)  # e.g. [3, 1] or [1, 1, 2] or [4]
		```
	"""

	rng = modulant.markov_chain.default_rng(rng)

	counts: typing.List[int] = []
	remaining = num_notes

	while remaining > 0:
		group = max(1, math.ceil(remaining * rng.random()))
		counts.append(group)
		remaining -= group

	return counts

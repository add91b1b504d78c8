import random

import conftest
import modulant.arpeggio


def test_single_note () -> None:

	"""One note is always a single group of one."""

	assert modulant.arpeggio.arpeggiate(1, random.Random(3)) == [1]


def test_no_notes () -> None:

	"""An empty voicing has no groups."""

	assert modulant.arpeggio.arpeggiate(0, random.Random(3)) == []


def test_scripted_split () -> None:

	"""Each group takes ceil(remaining * u) notes."""

	# 6 * 0.5 -> 3, then 3 * 0.9 -> ceil(2.7) = 3
	assert modulant.arpeggio.arpeggiate(6, conftest.ScriptedRandom([0.5, 0.9])) == [3, 3]

	# 4 * 0.1 -> 1, 3 * 0.6 -> 2, then the last note alone
	assert modulant.arpeggio.arpeggiate(4, conftest.ScriptedRandom([0.1, 0.6, 0.3])) == [1, 2, 1]


def test_zero_draw_still_advances () -> None:

	"""A draw of exactly 0.0 yields a group of one rather than stalling."""

	assert modulant.arpeggio.arpeggiate(3, conftest.ScriptedRandom([], default=0.0)) == [1, 1, 1]


def test_whole_chord_at_once () -> None:

	"""A draw near 1.0 strikes every note together."""

	assert modulant.arpeggio.arpeggiate(5, conftest.ScriptedRandom([0.99])) == [5]


def test_groups_always_sum_to_length () -> None:

	"""For any length, the groups are positive and add up exactly."""

	rng = random.Random(42)

	for n in range(1, 13):
		for _ in range(50):
			counts = modulant.arpeggio.arpeggiate(n, rng)
			assert sum(counts) == n
			assert all(c >= 1 for c in counts)

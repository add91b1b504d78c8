"""
Modulant - Terminal Piano Roll

Streams generated harmony to the terminal as a scrolling piano roll. Each
tick prints one row: a mark for every key struck on that tick, with the
current key and degree alongside. Modulations are announced as they happen.

How it works
────────────
A ``Player`` owns the ``HarmonicState`` and asks it for chords whenever
the note queue runs low. Instead of sounding notes, the ``PianoRoll``
collaborator below collects them, and a "notes" listener draws a row once
the whole group for that tick has been triggered.

How to run
──────────
1. Run: python examples/piano_roll.py
2. Press Ctrl+C to stop.

Tweakable parameters
────────────────────
- MODULATION_PROBABILITY: Higher values change key more often.
- SYMMETRIC: Allow modulations downward as well as upward.
- SEED: Set to an integer to hear the same piece every time.
"""

import asyncio
import random
import typing

import modulant
import modulant.modes
import modulant.notes


NUM_KEYS = 84
ROOT = "E4"
MODE = "ionian"
INTERVAL = 0.25
MODULATION_PROBABILITY = 0.15
SYMMETRIC = True
SEED: typing.Optional[int] = None


class PianoRoll:

	"""Collects triggered notes so they can be drawn one row per tick."""

	def __init__ (self) -> None:

		self.pending: typing.List[int] = []

	def trigger (self, note: int) -> None:

		self.pending.append(note)


def main () -> None:

	rng = random.Random(SEED)

	state = modulant.HarmonicState(
		root = modulant.notes.note_index(ROOT),
		mode = modulant.mode_index(MODE),
		degree = 0,
		num_keys = NUM_KEYS,
		rng = rng,
		symmetric_modulation = SYMMETRIC
	)

	roll = PianoRoll()
	player = modulant.Player(state, roll, rng=rng, modulation_probability=MODULATION_PROBABILITY)

	def draw (fired: typing.List[int]) -> None:

		row = ["·"] * NUM_KEYS
		for note in roll.pending:
			row[note] = "█"
		roll.pending.clear()

		key = f"{modulant.notes.note_name(state.root)} {modulant.modes.mode_name(state.mode)}"
		degree = modulant.modes.ROMAN_NUMERALS[state.degree]
		print(f"{''.join(row)}  {key:<16} {degree}")

	def announce (notes: typing.List[int], counts: typing.List[int]) -> None:

		print(f"── modulating through {len(counts)} groups ──")

	player.events.on("notes", draw)
	player.events.on("modulate", announce)

	try:
		asyncio.run(player.run(interval=INTERVAL))
	except KeyboardInterrupt:
		pass


if __name__ == "__main__":
	main()

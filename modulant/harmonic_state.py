import dataclasses
import logging
import math
import typing

import modulant.arpeggio
import modulant.markov_chain
import modulant.modes
import modulant.progressions
import modulant.voicings


logger = logging.getLogger(__name__)


MIN_KEYS: int = 24
MAX_MODULATION_OFFSET: int = 11

Voicing = typing.List[int]
GroupCounts = typing.List[int]
Output = typing.Tuple[Voicing, GroupCounts]


@dataclasses.dataclass(frozen=True)
class PivotChord:

	"""A triad shared by two keys, tagged with its degree in the new key."""

	notes: modulant.modes.Triad
	degree: int


@dataclasses.dataclass
class CommonChords:

	"""
	Pivot chords found between an old and a new key.

	``old_altered`` and ``new_altered`` hold the two spellings of the same
	half-step-altered triads, index for index.
	"""

	old_altered: typing.List[PivotChord] = dataclasses.field(default_factory=list)
	diatonic: typing.List[PivotChord] = dataclasses.field(default_factory=list)
	new_altered: typing.List[PivotChord] = dataclasses.field(default_factory=list)


	def __bool__ (self) -> bool:

		"""True when at least one pivot chord was found."""

		return bool(self.old_altered or self.diatonic or self.new_altered)


def _require_int (label: str, value: typing.Any) -> None:

	"""Raise ValueError unless ``value`` is a plain integer (bools are refused)."""

	if isinstance(value, bool) or not isinstance(value, int):
		raise ValueError(f"{label} must be an integer, got {value!r}")


def find_common_chords (root: int, mode: int, new_root: int, new_mode: int) -> CommonChords:

	"""
	Compare every triad of one key with every triad of another.

	Triads are compared by pitch class. Identical triads are diatonic pivots.
	Triads with the same root whose third and fifth differ by a single half
	step in total are altered pivots, recorded in both spellings. Matches are
	listed in discovery order: old-key degree first, then new-key degree.

	Parameters:
		root: Keyboard index of the old key's first degree.
		mode: Catalog index of the old mode.
		new_root: Keyboard index of the new key's first degree.
		new_mode: Catalog index of the new mode.
	"""

	old_intervals = modulant.modes.MODES[mode]
	new_intervals = modulant.modes.MODES[new_mode]

	found = CommonChords()

	for i in range(len(old_intervals)):

		old_notes = modulant.modes.triad(root, old_intervals, i)

		for j in range(len(new_intervals)):

			new_notes = modulant.modes.triad(new_root, new_intervals, j)

			# Octaves are ignored.
			diff1, diff2, diff3 = (abs(n % 12 - o % 12) for n, o in zip(new_notes, old_notes))

			if diff1 + diff2 + diff3 == 0:
				found.diatonic.append(PivotChord(new_notes, j))

			elif diff1 == 0 and diff2 + diff3 == 1:
				found.old_altered.append(PivotChord(old_notes, j))
				found.new_altered.append(PivotChord(new_notes, j))

	return found


class HarmonicState:

	"""
	Holds the current key and scale degree, and generates the next chords.

	``progress()`` moves to another chord in the current key; ``modulate()``
	moves to a new key through the chords the two keys have in common. Both
	return a voicing (keyboard indices) and the group sizes it should be
	played in, and both update the state in place.

	Example:
		```python
		import random
		import modulant.harmonic_state
		import modulant.modes

		state = modulant.harmonic_state.HarmonicState(
			root = 40,
			mode = modulant.modes.mode_index("ionian"),
			degree = 0,
			num_keys = 84,
			rng = random.Random(7)
		)

		notes, counts = state.progress()
		```
	"""

	def __init__ (
		self,
		root: int,
		mode: int,
		degree: int,
		num_keys: int,
		*,
		progressions: typing.Optional[typing.Sequence[typing.Sequence[float]]] = None,
		rng: typing.Optional[modulant.markov_chain.RandomSource] = None,
		symmetric_modulation: bool = False
	) -> None:

		"""
		Initialize the harmonic state.

		Parameters:
			root: Keyboard index of the scale's first degree.
			mode: Catalog index into ``modulant.modes.MODES``.
			degree: Starting scale degree (0 = I, 6 = VII).
			num_keys: Number of addressable keys; at least two octaves.
			progressions: Optional 7x7 progression table. Rows that do not
				sum to 1.0 are logged and used as given.
			rng: Source of uniform draws, for deterministic playback.
			symmetric_modulation: When False (default) a modulation that fits
				either way on the keyboard always moves up (legacy
				behaviour). When True it moves up or down with equal odds.
		"""

		_require_int("Keyboard size", num_keys)
		_require_int("Root", root)
		_require_int("Mode", mode)
		_require_int("Degree", degree)

		if num_keys < MIN_KEYS:
			raise ValueError(f"Keyboard must have at least {MIN_KEYS} keys, got {num_keys}")

		if root < 0 or root >= num_keys:
			raise ValueError(f"Root must be between 0 and {num_keys - 1}, got {root}")

		if mode < 0 or mode >= len(modulant.modes.MODES):
			raise ValueError(f"Mode must be between 0 and {len(modulant.modes.MODES) - 1}, got {mode}")

		if degree < 0 or degree >= modulant.modes.DEGREES_PER_MODE:
			raise ValueError(f"Degree must be between 0 and {modulant.modes.DEGREES_PER_MODE - 1}, got {degree}")

		self.root = root
		self.mode = mode
		self.num_keys = num_keys
		self.symmetric_modulation = symmetric_modulation
		self.rng = modulant.markov_chain.default_rng(rng)
		self.progressions = modulant.progressions.build_table(progressions)

		self._chain = modulant.markov_chain.MarkovChain(self.progressions, initial_state=degree, rng=self.rng)


	@property
	def degree (self) -> int:

		"""Current scale degree (0 = I, 6 = VII)."""

		return self._chain.get_state()


	@degree.setter
	def degree (self, value: int) -> None:

		_require_int("Degree", value)

		if value < 0 or value >= modulant.modes.DEGREES_PER_MODE:
			raise ValueError(f"Degree must be between 0 and {modulant.modes.DEGREES_PER_MODE - 1}, got {value}")

		self._chain.state = value


	def _voice (self, notes: modulant.modes.Triad, mean: int) -> Output:

		"""Voice a triad around ``mean`` and split it into groups."""

		voicing = modulant.voicings.invert(notes[0], notes[1], notes[2], mean, self.num_keys, self.rng)
		counts = modulant.arpeggio.arpeggiate(len(voicing), self.rng)

		return voicing, counts


	def progress (self) -> Output:

		"""Advance to the next chord in the current key."""

		new_degree = self._chain.step()

		logger.debug(f"New degree: {modulant.modes.ROMAN_NUMERALS[new_degree]}")

		notes = modulant.modes.triad(self.root, modulant.modes.MODES[self.mode], new_degree)

		return self._voice(notes, self.root)


	def _choose_new_root (self) -> int:

		"""Pick a root up to eleven half steps away that stays on the keyboard."""

		offset = math.ceil(MAX_MODULATION_OFFSET * self.rng.random())
		offset = min(max(offset, 1), MAX_MODULATION_OFFSET)

		sign_roll = self.rng.random()

		if self.symmetric_modulation:
			sign = -1 if sign_roll < 0.5 else 1

		else:
			# Legacy behaviour: the free choice always goes up. The roll is still
			# consumed so seeded streams match the symmetric setting.
			sign = 1

		if self.root + offset >= self.num_keys:
			return self.root - offset

		if self.root - offset < 0:
			return self.root + offset

		return self.root + sign * offset


	def modulate (self) -> Output:

		"""
		Move to a new key through the chords it shares with the current one.

		Plays the old spellings of any altered pivots first, then the diatonic
		pivots, then the new spellings of the altered pivots, and lands on
		the degree of the last pivot played. When the two keys share no
		chord this falls back to ``progress()`` and the key is unchanged.
		"""

		new_root = self._choose_new_root()
		new_mode = min(math.floor(self.rng.random() * len(modulant.modes.MODES)), len(modulant.modes.MODES) - 1)

		logger.debug(
			f"Modulation candidate: {self.root} {modulant.modes.mode_name(self.mode)} -> "
			f"{new_root} {modulant.modes.mode_name(new_mode)}"
		)

		common = find_common_chords(self.root, self.mode, new_root, new_mode)

		if not common:
			logger.info("No common chord found, switching to progression")
			return self.progress()

		output_notes: Voicing = []
		output_counts: GroupCounts = []

		passes = (
			("old altered", common.old_altered, self.root),
			("diatonic", common.diatonic, new_root),
			("new altered", common.new_altered, new_root),
		)

		for label, pivots, mean in passes:

			for pivot in pivots:

				logger.debug(f"{label} {pivot.notes[0]} {pivot.notes[1]} {pivot.notes[2]}")

				voicing, counts = self._voice(pivot.notes, mean)
				output_notes.extend(voicing)
				output_counts.extend(counts)

				self.degree = pivot.degree

		logger.info(
			f"Modulated from {self.root} {modulant.modes.mode_name(self.mode)} to "
			f"{new_root} {modulant.modes.mode_name(new_mode)} "
			f"({len(common.diatonic)} diatonic, {len(common.old_altered)} altered pivots)"
		)

		self.root = new_root
		self.mode = new_mode

		return output_notes, output_counts

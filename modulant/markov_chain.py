import random
import typing


@typing.runtime_checkable
class RandomSource (typing.Protocol):

	"""
	Anything that can produce uniform floats in ``[0, 1)``.

	``random.Random`` satisfies this, and tests can pass a scripted source.
	"""

	def random (self) -> float:

		"""
		Return the next uniform draw.
		"""

		...


def default_rng (rng: typing.Optional[RandomSource] = None) -> RandomSource:

	"""
	Return ``rng`` or a fresh unseeded ``random.Random``.
	"""

	return rng if rng is not None else random.Random()


def choose_index (
	weights: typing.Sequence[float],
	roll: float,
	default: typing.Optional[int] = None
) -> int:

	"""
	Walk cumulative weights and return the first index whose running total exceeds ``roll``.

	Weights are expected to be normalised so that ``roll`` is drawn from the
	same range. When rounding leaves the total just below ``roll`` the last
	index with a positive weight is returned instead. When no weight is
	positive ``default`` is returned, or ``ValueError`` is raised if there is
	no default.
	"""

	accum = 0.0
	last_positive: typing.Optional[int] = None

	for index, weight in enumerate(weights):

		if weight < 0:
			raise ValueError("Weights must not be negative")

		if weight > 0:
			last_positive = index

		accum += weight
		if roll < accum:
			return index

	if last_positive is not None:
		# Decision path: floating-point shortfall, settle on the last reachable option.
		return last_positive

	if default is not None:
		return default

	raise ValueError("At least one weight must be positive")


class MarkovChain:

	"""
	A Markov chain over integer states driven by a row-stochastic table.
	"""

	def __init__ (
		self,
		table: typing.Sequence[typing.Sequence[float]],
		initial_state: int = 0,
		rng: typing.Optional[RandomSource] = None
	) -> None:

		"""
		Initialize the chain with a transition table and an initial state.
		"""

		if not table:
			raise ValueError("Transition table cannot be empty")

		if initial_state < 0 or initial_state >= len(table):
			raise ValueError("Initial state must exist in the transition table")

		self.table = table
		self.rng = default_rng(rng)
		self.state = initial_state


	def peek (self) -> int:

		"""
		Draw the next state without moving to it.

		A state whose row has no positive probability stays where it is.
		"""

		return choose_index(self.table[self.state], self.rng.random(), default=self.state)


	def step (self) -> int:

		"""
		Advance to the next state and return it.
		"""

		self.state = self.peek()

		return self.state


	def get_state (self) -> int:

		"""
		Return the current state.
		"""

		return self.state

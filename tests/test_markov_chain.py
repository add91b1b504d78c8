import random
import unittest

import conftest
import modulant.markov_chain


class ChooseIndexTests (unittest.TestCase):

	"""
	Tests for the cumulative weighted walk.
	"""

	def test_first_crossing_wins (self) -> None:

		"""
		The first index whose running total exceeds the roll is chosen.
		"""

		weights = [0.2, 0.3, 0.5]

		self.assertEqual(modulant.markov_chain.choose_index(weights, 0.0), 0)
		self.assertEqual(modulant.markov_chain.choose_index(weights, 0.1), 0)
		self.assertEqual(modulant.markov_chain.choose_index(weights, 0.2), 1)
		self.assertEqual(modulant.markov_chain.choose_index(weights, 0.99), 2)


	def test_zero_weights_are_never_chosen (self) -> None:

		"""
		An index with no weight cannot be crossed into.
		"""

		self.assertEqual(modulant.markov_chain.choose_index([0.0, 1.0, 0.0], 0.0), 1)


	def test_shortfall_falls_back_to_last_positive (self) -> None:

		"""
		When the weights add up to less than the roll, the last reachable index is used.
		"""

		self.assertEqual(modulant.markov_chain.choose_index([0.5, 0.5, 0.0], 1.0), 1)
		self.assertEqual(modulant.markov_chain.choose_index([0.1, 0.1], 0.9), 1)


	def test_no_positive_weight_uses_default (self) -> None:

		"""
		All-zero weights return the default when one is given.
		"""

		self.assertEqual(modulant.markov_chain.choose_index([0.0, 0.0], 0.5, default=3), 3)


	def test_no_positive_weight_without_default_raises (self) -> None:

		"""
		All-zero weights without a default are an error.
		"""

		with self.assertRaises(ValueError):
			modulant.markov_chain.choose_index([0.0, 0.0], 0.5)


	def test_negative_weight_raises (self) -> None:

		"""
		Negative weights are rejected.
		"""

		with self.assertRaises(ValueError):
			modulant.markov_chain.choose_index([0.5, -0.1], 0.9)


class MarkovChainTests (unittest.TestCase):

	"""
	Tests for the table-driven Markov chain.
	"""

	def test_single_transition (self) -> None:

		"""
		A certain transition should always be taken.
		"""

		chain = modulant.markov_chain.MarkovChain([[0.0, 1.0], [1.0, 0.0]], initial_state=0, rng=random.Random(1))

		self.assertEqual(chain.step(), 1)
		self.assertEqual(chain.step(), 0)
		self.assertEqual(chain.get_state(), 0)


	def test_peek_does_not_move (self) -> None:

		"""
		peek() draws a state without changing the current one.
		"""

		chain = modulant.markov_chain.MarkovChain([[0.0, 1.0], [1.0, 0.0]], rng=conftest.ScriptedRandom([0.5]))

		self.assertEqual(chain.peek(), 1)
		self.assertEqual(chain.get_state(), 0)


	def test_dead_row_stays_put (self) -> None:

		"""
		A state with no outgoing probability remains the current state.
		"""

		chain = modulant.markov_chain.MarkovChain([[1.0, 0.0], [0.0, 0.0]], initial_state=1, rng=random.Random(1))

		self.assertEqual(chain.step(), 1)


	def test_invalid_initial_state_raises (self) -> None:

		"""
		The initial state must be a row of the table.
		"""

		with self.assertRaises(ValueError):
			modulant.markov_chain.MarkovChain([[1.0]], initial_state=1)

		with self.assertRaises(ValueError):
			modulant.markov_chain.MarkovChain([])


	def test_random_is_a_random_source (self) -> None:

		"""
		The standard library generator satisfies the RandomSource protocol.
		"""

		self.assertIsInstance(random.Random(), modulant.markov_chain.RandomSource)
		self.assertIsInstance(conftest.ScriptedRandom([]), modulant.markov_chain.RandomSource)

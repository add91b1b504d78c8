"""Chord progression probabilities between scale degrees.

Row ``i``, column ``j`` of a progression table is the chance of moving from
degree ``i`` to degree ``j`` (0 = I, 6 = VII). The default table follows the
common major/minor progression charts: V goes home to I most of the time,
II prepares V, III moves to VI, and so on.
"""

import logging
import typing

import modulant.modes


logger = logging.getLogger(__name__)


ProgressionTable = typing.Tuple[typing.Tuple[float, ...], ...]

ROW_SUM_TOLERANCE: float = 0.001


DEFAULT_PROGRESSIONS: ProgressionTable = (
	(0.00, 0.15, 0.15, 0.20, 0.20, 0.15, 0.15),
	(0.00, 0.00, 0.00, 0.00, 0.70, 0.00, 0.30),
	(0.00, 0.00, 0.00, 0.20, 0.00, 0.80, 0.00),
	(0.20, 0.20, 0.00, 0.00, 0.50, 0.00, 0.10),
	(0.60, 0.00, 0.00, 0.00, 0.00, 0.40, 0.00),
	(0.00, 0.45, 0.00, 0.30, 0.25, 0.00, 0.00),
	(0.70, 0.00, 0.00, 0.00, 0.30, 0.00, 0.00),
)


def unbalanced_rows (table: typing.Sequence[typing.Sequence[float]]) -> typing.List[int]:

	"""Return the indices of rows whose probabilities do not add up to 1.0."""

	return [
		i for i, row in enumerate(table)
		if abs(1.0 - sum(row)) > ROW_SUM_TOLERANCE
	]


def build_table (rows: typing.Optional[typing.Sequence[typing.Sequence[float]]] = None) -> ProgressionTable:

	"""
	Validate a progression table and return an immutable copy.

	The table must be 7 rows of 7 non-negative numbers; anything else raises
	``ValueError``. A row that does not sum to 1.0 is only reported through
	the logger and kept as given, so generation carries on with the
	under- or over-weighted distribution.

	Parameters:
		rows: Progression probabilities, or ``None`` for ``DEFAULT_PROGRESSIONS``.
	"""

	if rows is None:
		rows = DEFAULT_PROGRESSIONS

	size = modulant.modes.DEGREES_PER_MODE

	if len(rows) != size:
		raise ValueError(f"Progression table must have {size} rows, got {len(rows)}")

	table: typing.List[typing.Tuple[float, ...]] = []

	for i, row in enumerate(rows):

		if len(row) != size:
			raise ValueError(f"Progression row {i} must have {size} entries, got {len(row)}")

		if any(p < 0 for p in row):
			raise ValueError(f"Progression row {i} contains a negative probability")

		table.append(tuple(float(p) for p in row))

	for i in unbalanced_rows(table):
		logger.warning(f"Progression probability for row {i} does not add up to 1.0 (sum {sum(table[i]):.3f})")

	return tuple(table)

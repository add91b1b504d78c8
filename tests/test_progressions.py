import logging

import pytest

import modulant.progressions


def test_default_rows_sum_to_one () -> None:

	"""Every row of the default table should be a probability distribution."""

	table = modulant.progressions.DEFAULT_PROGRESSIONS

	assert len(table) == 7

	for row in table:
		assert len(row) == 7
		assert sum(row) == pytest.approx(1.0, abs=modulant.progressions.ROW_SUM_TOLERANCE)

	assert modulant.progressions.unbalanced_rows(table) == []


def test_default_table_builds_without_warnings (caplog: pytest.LogCaptureFixture) -> None:

	"""Building the default table should not report anything."""

	with caplog.at_level(logging.WARNING, logger="modulant.progressions"):
		table = modulant.progressions.build_table()

	assert table == modulant.progressions.DEFAULT_PROGRESSIONS
	assert caplog.records == []


def test_dominant_resolves_home () -> None:

	"""V should most often move to I."""

	dominant_row = modulant.progressions.DEFAULT_PROGRESSIONS[4]

	assert max(range(7), key=lambda j: dominant_row[j]) == 0


def test_unbalanced_row_warns_but_is_kept (caplog: pytest.LogCaptureFixture) -> None:

	"""A row that does not sum to 1.0 is logged and used as given."""

	rows = [list(row) for row in modulant.progressions.DEFAULT_PROGRESSIONS]
	rows[2] = [0.0, 0.0, 0.0, 0.2, 0.0, 0.3, 0.0]

	with caplog.at_level(logging.WARNING, logger="modulant.progressions"):
		table = modulant.progressions.build_table(rows)

	assert "row 2" in caplog.text
	assert table[2] == (0.0, 0.0, 0.0, 0.2, 0.0, 0.3, 0.0)


def test_built_table_is_immutable_copy () -> None:

	"""Changing the source rows afterwards does not affect the table."""

	rows = [list(row) for row in modulant.progressions.DEFAULT_PROGRESSIONS]
	table = modulant.progressions.build_table(rows)
	rows[0][0] = 1.0

	assert table[0][0] == 0.0
	assert isinstance(table, tuple)
	assert all(isinstance(row, tuple) for row in table)


def test_wrong_shape_raises () -> None:

	"""Tables must be 7 rows of 7 entries."""

	with pytest.raises(ValueError, match="7 rows"):
		modulant.progressions.build_table([[1.0] * 7] * 6)

	with pytest.raises(ValueError, match="row 3"):
		modulant.progressions.build_table([[1.0 / 7] * 7] * 3 + [[1.0]] + [[1.0 / 7] * 7] * 3)


def test_negative_probability_raises () -> None:

	"""Negative probabilities are a configuration error."""

	rows = [list(row) for row in modulant.progressions.DEFAULT_PROGRESSIONS]
	rows[0][0] = -0.1

	with pytest.raises(ValueError, match="negative"):
		modulant.progressions.build_table(rows)

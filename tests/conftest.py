import typing

import pytest


class ScriptedRandom:

	"""Random source that replays a fixed list of uniform draws."""

	def __init__ (self, values: typing.Sequence[float], default: typing.Optional[float] = None) -> None:

		"""Store the draws; ``default`` is returned once they run out."""

		self.values = list(values)
		self.default = default
		self.calls = 0

	def random (self) -> float:

		"""Return the next scripted draw."""

		self.calls += 1

		if self.values:
			return self.values.pop(0)

		if self.default is None:
			raise AssertionError("Scripted random source ran out of values")

		return self.default


class RecordingPlayback:

	"""Playback collaborator stub that remembers every triggered note."""

	def __init__ (self) -> None:

		"""Start with nothing played."""

		self.played: typing.List[int] = []

	def trigger (self, note: int) -> None:

		"""Record the note instead of sounding it."""

		self.played.append(note)


@pytest.fixture
def recording_playback () -> RecordingPlayback:

	"""A fresh recording playback collaborator."""

	return RecordingPlayback()

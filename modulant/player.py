"""The driving loop that turns harmonic output into timed note triggers.

``HarmonicState`` only returns data. ``Player`` queues that data and, on
every tick, fires the next group of notes through a playback collaborator.
Whenever the note queue runs low it asks the harmonic state for more,
choosing between a progression and a modulation at random.

Example:
	```python
	import asyncio
	import modulant.harmonic_state
	import modulant.player

	state = modulant.harmonic_state.HarmonicState(root=40, mode=0, degree=0, num_keys=84)
	player = modulant.player.Player(state, modulant.player.LoggingPlayback())

	asyncio.run(player.run(interval=0.5, ticks=16))
	```
"""

import asyncio
import collections
import logging
import typing

import modulant.event_emitter
import modulant.harmonic_state
import modulant.markov_chain
import modulant.notes


logger = logging.getLogger(__name__)


DEFAULT_INTERVAL: float = 0.5
DEFAULT_MODULATION_PROBABILITY: float = 0.2
DEFAULT_QUEUE_THRESHOLD: int = 100


@typing.runtime_checkable
class PlaybackCollaborator (typing.Protocol):

	"""
	Something that can sound a keyboard index right now.

	If the note is already sounding it should stop and restart it. The
	player never waits for playback to finish.
	"""

	def trigger (self, note: int) -> None:

		"""
		Start playing a keyboard index.
		"""

		...


class LoggingPlayback:

	"""Playback collaborator that writes each note name to the log."""

	def __init__ (self, level: int = logging.INFO) -> None:

		self.level = level


	def trigger (self, note: int) -> None:

		"""Log the note instead of sounding it."""

		logger.log(self.level, f"Play {modulant.notes.note_name(note)} ({note})")


class Player:

	"""
	Queues generated chords and fires them one group per tick.
	"""

	def __init__ (
		self,
		state: modulant.harmonic_state.HarmonicState,
		playback: PlaybackCollaborator,
		rng: typing.Optional[modulant.markov_chain.RandomSource] = None,
		modulation_probability: float = DEFAULT_MODULATION_PROBABILITY,
		queue_threshold: int = DEFAULT_QUEUE_THRESHOLD
	) -> None:

		"""
		Initialize the player.

		Parameters:
			state: Harmonic state owned by this player; nothing else should
				call it while the player runs.
			playback: Collaborator that sounds each note.
			rng: Source of uniform draws for choosing progression or
				modulation. Defaults to the state's own source.
			modulation_probability: Chance of modulating each time new
				chords are generated (0.0 to 1.0).
			queue_threshold: Generate more chords after a tick whenever fewer
				notes than this are queued.
		"""

		if modulation_probability < 0 or modulation_probability > 1:
			raise ValueError("Modulation probability must be between 0 and 1")

		if queue_threshold < 0:
			raise ValueError("Queue threshold must not be negative")

		self.state = state
		self.playback = playback
		self.rng = rng if rng is not None else state.rng
		self.modulation_probability = modulation_probability
		self.queue_threshold = queue_threshold

		self.events = modulant.event_emitter.EventEmitter()
		self.note_queue: typing.Deque[int] = collections.deque()
		self.count_queue: typing.Deque[int] = collections.deque()


	def generate (self) -> modulant.harmonic_state.Output:

		"""Ask the harmonic state for more chords and queue them."""

		if self.rng.random() < self.modulation_probability:
			event_name = "modulate"
			notes, counts = self.state.modulate()

		else:
			event_name = "progress"
			notes, counts = self.state.progress()

		self.note_queue.extend(notes)
		self.count_queue.extend(counts)

		self.events.emit_sync(event_name, notes, counts)

		return notes, counts


	def tick (self) -> typing.List[int]:

		"""
		Fire the next group of notes.

		Returns:
			The keyboard indices that were triggered, in queue order.
		"""

		if not self.count_queue:
			self.generate()

		count = self.count_queue.popleft()
		fired: typing.List[int] = []

		for _ in range(count):
			note = self.note_queue.popleft()
			self.playback.trigger(note)
			fired.append(note)

		while len(self.note_queue) < self.queue_threshold:
			self.generate()

		self.events.emit_sync("notes", fired)

		return fired


	async def run (self, interval: float = DEFAULT_INTERVAL, ticks: typing.Optional[int] = None) -> None:

		"""
		Tick at a fixed interval until cancelled or ``ticks`` have elapsed.

		Parameters:
			interval: Seconds between ticks.
			ticks: Number of ticks to play, or ``None`` to play forever.
		"""

		if interval < 0:
			raise ValueError("Interval must not be negative")

		played = 0

		while ticks is None or played < ticks:

			fired = self.tick()
			played += 1

			await self.events.emit_async("tick", fired)

			if ticks is None or played < ticks:
				await asyncio.sleep(interval)

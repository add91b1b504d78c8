import asyncio
import inspect
import typing


CallbackType = typing.Callable[..., typing.Any]


# Events published by the player.
PLAYER_EVENTS: typing.Tuple[str, ...] = (
	"progress",		# (notes, counts) from HarmonicState.progress()
	"modulate",		# (notes, counts) from HarmonicState.modulate()
	"notes",		# list of keyboard indices fired on one tick
	"tick",			# same list, emitted asynchronously from Player.run()
)


class EventEmitter:

	"""
	Publishes player events to sync and async listeners.

	Only the names in ``events`` may be subscribed to, so a typo in a
	listener registration fails immediately instead of never firing.
	"""

	def __init__ (self, events: typing.Sequence[str] = PLAYER_EVENTS) -> None:

		"""
		Initialize an empty listener registry for the given event names.
		"""

		self._listeners: typing.Dict[str, typing.List[CallbackType]] = {name: [] for name in events}


	def _callbacks (self, event_name: str) -> typing.List[CallbackType]:

		if event_name not in self._listeners:
			raise ValueError(f"Unknown event {event_name!r}. Available: {list(self._listeners)}")

		return self._listeners[event_name]


	def on (self, event_name: str, callback: CallbackType) -> None:

		"""
		Register a callback for an event name.
		"""

		self._callbacks(event_name).append(callback)


	def off (self, event_name: str, callback: CallbackType) -> None:

		"""
		Unregister a previously registered callback.

		Raises ``ValueError`` if the callback is not registered for the event.
		"""

		callbacks = self._callbacks(event_name)

		if callback not in callbacks:
			raise ValueError(f"Callback not registered for event {event_name!r}")

		callbacks.remove(callback)


	def emit_sync (self, event_name: str, *args: typing.Any) -> None:

		"""
		Call every listener for an event immediately.

		Async listeners cannot be awaited here and raise ``ValueError``.
		"""

		for callback in list(self._callbacks(event_name)):

			if inspect.iscoroutinefunction(callback):
				raise ValueError(f"Async listener registered for synchronous event {event_name!r}")

			callback(*args)


	async def emit_async (self, event_name: str, *args: typing.Any) -> None:

		"""
		Call sync listeners in order, then await all async listeners together.
		"""

		pending: typing.List[typing.Awaitable[typing.Any]] = []

		for callback in list(self._callbacks(event_name)):

			if inspect.iscoroutinefunction(callback):
				pending.append(callback(*args))

			else:
				callback(*args)

		if pending:
			await asyncio.gather(*pending)

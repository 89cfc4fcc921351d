import typing


CallbackType = typing.Callable[..., typing.Any]


class EventEmitter:

	"""
	A small synchronous event emitter, used to fan decoded MIDI notes out to listeners.
	"""

	def __init__ (self) -> None:

		"""
		Initialize an empty event registry.
		"""

		self._listeners: typing.Dict[str, typing.List[CallbackType]] = {}


	def on (self, event_name: str, callback: CallbackType) -> None:

		"""
		Register a callback for an event name.
		"""

		self._listeners.setdefault(event_name, []).append(callback)


	def off (self, event_name: str, callback: CallbackType) -> None:

		"""
		Unregister a previously registered callback.

		Raises ``ValueError`` if the callback is not registered for the event.
		"""

		if callback not in self._listeners.get(event_name, []):
			raise ValueError(f"Callback not registered for event {event_name!r}")

		self._listeners[event_name].remove(callback)


	def emit (self, event_name: str, *args: typing.Any, **kwargs: typing.Any) -> None:

		"""
		Call every listener of an event, in registration order.
		"""

		for callback in list(self._listeners.get(event_name, [])):
			callback(*args, **kwargs)


	def listener_count (self, event_name: str) -> int:

		"""
		Return how many callbacks are registered for an event.
		"""

		return len(self._listeners.get(event_name, []))

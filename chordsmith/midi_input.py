"""MIDI keyboard input.

Opens an input port with ``mido`` and turns incoming messages into
``chordsmith.midi.NoteEvent`` objects. Listeners subscribe to
``"note_on"`` and ``"note_off"``; both forms of note-off (status 0x80, or
note-on with velocity 0) arrive as ``"note_off"``. The set of held notes is
tracked so a chord played on the keyboard can be passed straight to
``chordsmith.recognition.identify_chord``.

Example:
	```python
	import chordsmith.midi_input
	import chordsmith.recognition

	keyboard = chordsmith.midi_input.NoteInput()
	keyboard.events.on("note_on", lambda event: print(event.note))
	keyboard.open("My Keyboard")

	chord = chordsmith.recognition.identify_chord(keyboard.held_notes())
	```
"""

import logging
import threading
import typing

import mido

import chordsmith.errors
import chordsmith.event_emitter
import chordsmith.midi
import chordsmith.pitches


logger = logging.getLogger(__name__)

NOTE_ON_EVENT: str = "note_on"
NOTE_OFF_EVENT: str = "note_off"


def select_input_device (device_name: typing.Optional[str] = None, callback: typing.Optional[typing.Callable] = None) -> typing.Tuple[typing.Optional[str], typing.Optional[typing.Any]]:

	"""
	Select and open a MIDI input device.

	If ``device_name`` is None, the first available input is used. If the
	named device is missing, falls back to the first available input and logs
	a warning.

	Returns:
		A tuple of (device_name, midi_in_object) or (None, None) on failure.
	"""

	try:
		inputs = mido.get_input_names()
		logger.info(f"Available MIDI inputs: {inputs}")

		if not inputs:
			logger.error("No MIDI input devices found.")
			return None, None

		target = device_name if device_name is not None else inputs[0]

		if target not in inputs:
			logger.warning(f"MIDI input device '{target}' not found.")
			target = inputs[0]
			logger.warning(f"Fallback to: {target}")

		midi_in = mido.open_input(target, callback=callback)
		logger.info(f"Opened MIDI input: {target}")
		return target, midi_in

	except Exception as e:
		logger.error(f"Failed to open MIDI input: {e}")
		return None, None


class NoteInput:

	"""Decodes note messages from a MIDI input and tracks which notes are held."""

	def __init__ (self, events: typing.Optional[chordsmith.event_emitter.EventEmitter] = None) -> None:

		self.events = events if events is not None else chordsmith.event_emitter.EventEmitter()
		self.device_name: typing.Optional[str] = None
		self.midi_in: typing.Optional[typing.Any] = None
		self._held: typing.Set[chordsmith.pitches.PitchedNote] = set()
		self._lock = threading.Lock()

	def open (self, device_name: typing.Optional[str] = None) -> bool:

		"""Open an input port and start handling its messages. Returns True on success."""

		self.device_name, self.midi_in = select_input_device(device_name, callback=self.handle_message)

		return self.midi_in is not None

	def close (self) -> None:

		"""Close the input port, if open, and forget held notes."""

		if self.midi_in is not None:
			self.midi_in.close()
			self.midi_in = None

		with self._lock:
			self._held.clear()

	def handle_message (self, message: chordsmith.midi.MessageLike) -> typing.Optional[chordsmith.midi.NoteEvent]:

		"""Decode one incoming message and emit it if it is a playable note.

		Non-note messages are ignored. Notes outside octaves 1-8 are logged
		and dropped.

		Returns:
			The emitted ``NoteEvent``, or ``None``.
		"""

		try:
			event = chordsmith.midi.decode_note_event(message)
		except chordsmith.errors.OutOfPlayableRange as e:
			logger.warning(f"Ignoring note outside the playable range: {e}")
			return None

		if event is None:
			return None

		with self._lock:
			if event.is_on:
				self._held.add(event.note)
			else:
				self._held.discard(event.note)

		self.events.emit(NOTE_ON_EVENT if event.is_on else NOTE_OFF_EVENT, event)

		return event

	def held_notes (self) -> typing.List[chordsmith.pitches.PitchedNote]:

		"""Return the notes currently held down, lowest first."""

		with self._lock:
			return chordsmith.pitches.sort_notes(self._held)

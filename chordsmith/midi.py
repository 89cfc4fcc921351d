"""Conversion between pitched notes and MIDI note numbers.

Octave numbering here starts at 1 for MIDI 12, so **C5 = 60** (Middle C)::

	MIDI 12 = C1, 24 = C2, 36 = C3, 48 = C4, 60 = C5, 96 = C8, 107 = B8

Validation has two tiers. A number outside 0-127 (or not an integer) is
not MIDI at all and raises ``InvalidMidiNumber``. A number inside 0-127
whose octave falls outside 1-8 is valid MIDI that no key in our range can
play, and raises ``OutOfPlayableRange``.

Incoming messages are interpreted only when they are channel-voice note
messages. A note-on with velocity 0 counts as a note-off, exactly like a
real note-off. Everything else (control change, clock, ...) is neither.
"""

import dataclasses
import typing

import mido

import chordsmith.errors
import chordsmith.pitches


MIN_MIDI_NOTE: int = 0
MAX_MIDI_NOTE: int = 127
MIN_PLAYABLE_NOTE: int = chordsmith.pitches.MIN_OCTAVE * 12
MAX_PLAYABLE_NOTE: int = chordsmith.pitches.MAX_OCTAVE * 12 + 11

STATUS_MASK: int = 0xF0
CHANNEL_MASK: int = 0x0F
NOTE_OFF: int = 0x80
NOTE_ON: int = 0x90

DEFAULT_VELOCITY: int = 100


def is_valid_midi_note (number: typing.Any) -> bool:

	"""Return True for an integer in 0-127."""

	return isinstance(number, int) and not isinstance(number, bool) and MIN_MIDI_NOTE <= number <= MAX_MIDI_NOTE


def is_playable_midi_note (number: typing.Any) -> bool:

	"""Return True for a valid MIDI number whose octave is 1-8 (MIDI 12-107)."""

	return is_valid_midi_note(number) and MIN_PLAYABLE_NOTE <= number <= MAX_PLAYABLE_NOTE


def to_midi (note: chordsmith.pitches.PitchedNote) -> int:

	"""Return the MIDI note number for a pitched note (``octave * 12 + pitch_class``).

	Example:
		```python
		to_midi(PitchedNote.from_name("C", 5))  # → 60
		to_midi(PitchedNote.from_name("A", 5))  # → 69
		```
	"""

	number = note.octave * 12 + note.pitch_class

	if not is_valid_midi_note(number):
		raise chordsmith.errors.InvalidMidiNumber(f"{note} maps to MIDI note {number}, outside 0-127")

	return number


def from_midi (number: int) -> chordsmith.pitches.PitchedNote:

	"""Return the pitched note for a MIDI note number.

	Raises:
		InvalidMidiNumber: If ``number`` is not an integer in 0-127.
		OutOfPlayableRange: If ``number`` is valid but its octave is outside 1-8.

	Example:
		```python
		from_midi(60)  # → C5
		from_midi(5)   # raises OutOfPlayableRange
		```
	"""

	if not is_valid_midi_note(number):
		raise chordsmith.errors.InvalidMidiNumber(f"MIDI note number must be an integer in 0-127, got {number!r}")

	octave, pitch_class = divmod(number, 12)

	if not chordsmith.pitches.MIN_OCTAVE <= octave <= chordsmith.pitches.MAX_OCTAVE:
		raise chordsmith.errors.OutOfPlayableRange(
			f"MIDI note {number} maps to octave {octave}, outside "
			f"{chordsmith.pitches.MIN_OCTAVE}-{chordsmith.pitches.MAX_OCTAVE}"
		)

	return chordsmith.pitches.PitchedNote(pitch_class=pitch_class, octave=octave)


@dataclasses.dataclass(frozen=True)
class MidiMessage:

	"""A raw message as delivered by a MIDI input: status byte and up to two data bytes."""

	status: int
	data1: int = 0
	data2: typing.Optional[int] = None

	@classmethod
	def from_bytes (cls, data: typing.Sequence[int]) -> "MidiMessage":

		"""Build a message from a byte sequence such as ``[0x90, 60, 100]``."""

		if not data:
			raise ValueError("A MIDI message needs at least a status byte")

		return cls(
			status = data[0],
			data1 = data[1] if len(data) > 1 else 0,
			data2 = data[2] if len(data) > 2 else None
		)

	@classmethod
	def from_mido (cls, message: mido.Message) -> "MidiMessage":

		"""Build a message from a ``mido.Message``."""

		return cls.from_bytes(message.bytes())

	@property
	def kind (self) -> int:

		"""The status byte without its channel nibble (e.g. ``0x90``)."""

		return self.status & STATUS_MASK

	@property
	def channel (self) -> int:

		"""The channel nibble (0-15)."""

		return self.status & CHANNEL_MASK


MessageLike = typing.Union[MidiMessage, mido.Message, typing.Sequence[int]]


def as_midi_message (message: MessageLike) -> MidiMessage:

	"""Accept a ``MidiMessage``, a ``mido.Message`` or raw bytes and return a ``MidiMessage``."""

	if isinstance(message, MidiMessage):
		return message

	if isinstance(message, mido.Message):
		return MidiMessage.from_mido(message)

	return MidiMessage.from_bytes(message)


def is_note_on (message: MessageLike) -> bool:

	"""Return True for a note-on with non-zero velocity, on any channel."""

	msg = as_midi_message(message)

	return msg.kind == NOTE_ON and (msg.data2 or 0) > 0


def is_note_off (message: MessageLike) -> bool:

	"""Return True for a note-off, or a note-on with velocity 0, on any channel."""

	msg = as_midi_message(message)

	return msg.kind == NOTE_OFF or (msg.kind == NOTE_ON and (msg.data2 or 0) == 0)


def note_number_from_message (message: MessageLike) -> typing.Optional[int]:

	"""Return the note number (first data byte) if it is valid MIDI, else ``None``."""

	number = as_midi_message(message).data1

	return number if is_valid_midi_note(number) else None


def velocity_from_message (message: MessageLike) -> typing.Optional[int]:

	"""Return the velocity (second data byte), or ``None`` if missing or outside 0-127."""

	velocity = as_midi_message(message).data2

	if velocity is None or not 0 <= velocity <= 127:
		return None

	return velocity


@dataclasses.dataclass(frozen=True)
class NoteEvent:

	"""A decoded note-on or note-off."""

	note: chordsmith.pitches.PitchedNote
	midi_note: int
	velocity: int
	is_on: bool
	channel: int = 0


def decode_note_event (message: MessageLike) -> typing.Optional[NoteEvent]:

	"""Decode a note message into a ``NoteEvent``.

	Returns ``None`` for anything that is not a note-on or note-off, or
	whose note number is not valid MIDI.

	Raises:
		OutOfPlayableRange: If the note number is valid but outside octaves 1-8.
	"""

	msg = as_midi_message(message)
	on = is_note_on(msg)

	if not on and not is_note_off(msg):
		return None

	number = note_number_from_message(msg)

	if number is None:
		return None

	return NoteEvent(
		note = from_midi(number),
		midi_note = number,
		velocity = velocity_from_message(msg) or 0,
		is_on = on,
		channel = msg.channel
	)


def note_message (
	note: chordsmith.pitches.PitchedNote,
	velocity: int = DEFAULT_VELOCITY,
	channel: int = 0,
	on: bool = True
) -> mido.Message:

	"""Return a ``mido`` note-on (or note-off) message for a pitched note, ready to send."""

	return mido.Message(
		"note_on" if on else "note_off",
		channel = channel,
		note = to_midi(note),
		velocity = velocity if on else 0
	)

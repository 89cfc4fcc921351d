import logging

import mido
import pytest

import chordsmith.midi_input
import chordsmith.recognition
import conftest


def test_select_first_device_by_default (patch_midi: None) -> None:

	"""Without a name the first available input is opened."""

	name, midi_in = chordsmith.midi_input.select_input_device()

	assert name == "Dummy MIDI"
	assert isinstance(midi_in, conftest.FakeMidiIn)


def test_select_missing_device_falls_back (patch_midi: None, caplog: pytest.LogCaptureFixture) -> None:

	"""A missing device name falls back to the first input with a warning."""

	with caplog.at_level(logging.WARNING, logger="chordsmith.midi_input"):
		name, midi_in = chordsmith.midi_input.select_input_device("Nonexistent")

	assert name == "Dummy MIDI"
	assert midi_in is not None
	assert "not found" in caplog.text


def test_select_with_no_devices (monkeypatch: pytest.MonkeyPatch) -> None:

	"""No inputs at all gives (None, None)."""

	monkeypatch.setattr(mido, "get_input_names", lambda: [])

	assert chordsmith.midi_input.select_input_device() == (None, None)


def test_select_open_failure (monkeypatch: pytest.MonkeyPatch) -> None:

	"""A backend failure while opening is logged and gives (None, None)."""

	def broken_open (name, callback=None):
		raise OSError("port busy")

	monkeypatch.setattr(mido, "get_input_names", lambda: ["Dummy MIDI"])
	monkeypatch.setattr(mido, "open_input", broken_open)

	assert chordsmith.midi_input.select_input_device() == (None, None)


def test_open_and_close (patch_midi: None) -> None:

	"""open() wires the port callback; close() closes the port."""

	keyboard = chordsmith.midi_input.NoteInput()

	assert keyboard.open("Dummy MIDI")
	assert keyboard.device_name == "Dummy MIDI"

	fake = conftest._current_fake_input
	assert fake is not None
	assert fake.callback == keyboard.handle_message

	keyboard.close()

	assert fake.closed
	assert keyboard.midi_in is None


def test_injected_notes_are_emitted (patch_midi: None) -> None:

	"""Note messages from the port reach note_on and note_off listeners."""

	keyboard = chordsmith.midi_input.NoteInput()
	ons: list = []
	offs: list = []

	keyboard.events.on("note_on", ons.append)
	keyboard.events.on("note_off", offs.append)
	keyboard.open()

	fake = conftest._current_fake_input
	fake.inject(mido.Message("note_on", note=60, velocity=100))
	fake.inject(mido.Message("note_on", note=60, velocity=0))
	fake.inject(mido.Message("control_change", control=64, value=127))

	assert [str(event.note) for event in ons] == ["C5"]
	assert [str(event.note) for event in offs] == ["C5"]


def test_held_notes_identify_a_chord (patch_midi: None) -> None:

	"""Notes held on the keyboard can be passed to chord recognition."""

	keyboard = chordsmith.midi_input.NoteInput()
	keyboard.open()

	fake = conftest._current_fake_input

	# E5 G5 C6, then release a note that was never pressed.
	for number in (64, 67, 72):
		fake.inject(mido.Message("note_on", note=number, velocity=90))

	fake.inject(mido.Message("note_off", note=50))

	assert keyboard.held_notes() == conftest.notes("E5", "G5", "C6")

	chord = chordsmith.recognition.identify_chord(keyboard.held_notes())

	assert chord is not None
	assert chord.name == "C/E"

	fake.inject(mido.Message("note_off", note=67))

	assert keyboard.held_notes() == conftest.notes("E5", "C6")


def test_out_of_range_note_dropped (caplog: pytest.LogCaptureFixture) -> None:

	"""Notes below C1 are logged and ignored."""

	keyboard = chordsmith.midi_input.NoteInput()
	received: list = []
	keyboard.events.on("note_on", received.append)

	with caplog.at_level(logging.WARNING, logger="chordsmith.midi_input"):
		result = keyboard.handle_message([0x90, 3, 100])

	assert result is None
	assert received == []
	assert keyboard.held_notes() == []
	assert "playable range" in caplog.text


def test_close_clears_held_notes () -> None:

	"""close() forgets held notes even when no port was opened."""

	keyboard = chordsmith.midi_input.NoteInput()
	keyboard.handle_message([0x90, 60, 100])

	assert len(keyboard.held_notes()) == 1

	keyboard.close()

	assert keyboard.held_notes() == []

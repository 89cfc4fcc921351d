"""Exceptions raised by chordsmith.

Every error is a ``ValueError`` subclass: they all describe input that can
never succeed, so callers should fix the input rather than retry.
"""


class ChordsmithError (ValueError):

	"""Base class for all chordsmith errors."""


class InvalidQuality (ChordsmithError):

	"""An unknown chord quality name was given."""


class OctaveOutOfRange (ChordsmithError):

	"""A requested or derived octave falls outside 1-8."""


class InvalidInversion (ChordsmithError):

	"""An inversion index is outside the range allowed for the chord."""


class InversionOutOfRange (InvalidInversion, OctaveOutOfRange):

	"""An inversion step would raise a note above octave 8."""


class NoValidChords (ChordsmithError):

	"""A chord filter enumerates to an empty candidate set."""


class InvalidMidiNumber (ChordsmithError):

	"""A MIDI note number is not an integer in 0-127."""


class OutOfPlayableRange (ChordsmithError):

	"""A valid MIDI note number maps to an octave outside 1-8."""

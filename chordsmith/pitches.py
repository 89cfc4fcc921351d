"""Pitch classes, octaves and pitched notes.

Module-level constants:
- `PC_TO_NOTE_NAME`: Canonical (sharp-based) names for pitch classes 0-11
- `NOTE_NAME_TO_PC`: Maps canonical names back to pitch classes
- `OCTAVES`: The playable octaves, 1-8
- `WHITE_KEYS` / `BLACK_KEYS`: Pitch classes of the natural and sharp keys

Flat spellings are deliberately absent here. They are only understood by
`chordsmith.naming`, which converts them to these canonical names.
"""

import dataclasses
import typing

import chordsmith.errors


PC_TO_NOTE_NAME: typing.List[str] = [
	"C",
	"C#",
	"D",
	"D#",
	"E",
	"F",
	"F#",
	"G",
	"G#",
	"A",
	"A#",
	"B",
]

NOTE_NAME_TO_PC: typing.Dict[str, int] = {name: pc for pc, name in enumerate(PC_TO_NOTE_NAME)}

MIN_OCTAVE: int = 1
MAX_OCTAVE: int = 8
OCTAVES: typing.Tuple[int, ...] = tuple(range(MIN_OCTAVE, MAX_OCTAVE + 1))

WHITE_KEYS: typing.Tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)
BLACK_KEYS: typing.Tuple[int, ...] = (1, 3, 6, 8, 10)

PitchLike = typing.Union[str, int]


def pitch_class_of (pitch: PitchLike) -> int:

	"""Return the pitch class (0-11) for a canonical note name or integer.

	Parameters:
		pitch: Canonical note name (``"C"``, ``"F#"``) or pitch class integer.

	Raises:
		ValueError: If the name is not canonical or the integer is not 0-11.

	Example:
		```python
		pitch_class_of("F#")  # → 6
		pitch_class_of(11)    # → 11
		```
	"""

	if isinstance(pitch, bool):
		raise ValueError(f"Invalid pitch class: {pitch!r}")

	if isinstance(pitch, int):
		if not 0 <= pitch <= 11:
			raise ValueError(f"Pitch class must be 0-11, got {pitch}")
		return pitch

	if pitch not in NOTE_NAME_TO_PC:
		raise ValueError(
			f"Unknown note name: {pitch!r}. Expected one of {', '.join(PC_TO_NOTE_NAME)}."
		)

	return NOTE_NAME_TO_PC[pitch]


def note_name (pitch_class: int) -> str:

	"""Return the canonical name of a pitch class, wrapping modulo 12."""

	return PC_TO_NOTE_NAME[pitch_class % 12]


def validate_octave (octave: int) -> int:

	"""Return ``octave`` unchanged, or raise ``OctaveOutOfRange`` if it is outside 1-8."""

	if isinstance(octave, bool) or not isinstance(octave, int) or not MIN_OCTAVE <= octave <= MAX_OCTAVE:
		raise chordsmith.errors.OctaveOutOfRange(
			f"Octave must be between {MIN_OCTAVE} and {MAX_OCTAVE}, got {octave!r}"
		)

	return octave


@dataclasses.dataclass(frozen=True, order=True)
class PitchedNote:

	"""A pitch class in a specific octave.

	Notes sort by octave first, then by pitch class, so sorting a list of
	notes orders them from lowest to highest pitch.

	Example:
		```python
		middle = PitchedNote(pitch_class=0, octave=5)
		PitchedNote.from_name("E", 4) < middle  # → True
		str(middle)                             # → "C5"
		```
	"""

	octave: int
	pitch_class: int

	def __post_init__ (self) -> None:

		"""Reject pitch classes outside 0-11 and octaves outside 1-8."""

		# Names are converted by from_name(); the field itself holds an integer.
		if isinstance(self.pitch_class, bool) or not isinstance(self.pitch_class, int):
			raise ValueError(f"Pitch class must be an integer 0-11, got {self.pitch_class!r}")

		pitch_class_of(self.pitch_class)
		validate_octave(self.octave)

	@classmethod
	def from_name (cls, name: PitchLike, octave: int) -> "PitchedNote":

		"""Build a note from a canonical name (or pitch class) and an octave."""

		return cls(pitch_class=pitch_class_of(name), octave=octave)

	@property
	def name (self) -> str:

		"""The pitch class name without the octave, e.g. ``"C#"``."""

		return PC_TO_NOTE_NAME[self.pitch_class]

	@property
	def number (self) -> int:

		"""Absolute semitone position: ``octave * 12 + pitch_class``."""

		return self.octave * 12 + self.pitch_class

	def __str__ (self) -> str:

		return f"{self.name}{self.octave}"


def sort_notes (notes: typing.Iterable[PitchedNote]) -> typing.List[PitchedNote]:

	"""Return the notes sorted from lowest to highest pitch."""

	return sorted(notes)


def move_note_up_octave (note: PitchedNote) -> PitchedNote:

	"""Return the note one octave higher. A note already in octave 8 is returned unchanged."""

	return PitchedNote(pitch_class=note.pitch_class, octave=min(MAX_OCTAVE, note.octave + 1))


def move_note_down_octave (note: PitchedNote) -> PitchedNote:

	"""Return the note one octave lower. A note already in octave 1 is returned unchanged."""

	return PitchedNote(pitch_class=note.pitch_class, octave=max(MIN_OCTAVE, note.octave - 1))

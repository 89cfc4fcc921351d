import typing

import chordsmith.chords
import chordsmith.pitches


SCALE_INTERVALS: typing.Dict[str, typing.Tuple[int, ...]] = {
	"major": (0, 2, 4, 5, 7, 9, 11),
	"minor": (0, 2, 3, 5, 7, 8, 10),
	"dorian": (0, 2, 3, 5, 7, 9, 10),
	"phrygian": (0, 1, 3, 5, 7, 8, 10),
	"lydian": (0, 2, 4, 6, 7, 9, 11),
	"mixolydian": (0, 2, 4, 5, 7, 9, 10),
	"locrian": (0, 1, 3, 5, 6, 8, 10),
	"harmonic_minor": (0, 2, 3, 5, 7, 8, 11),
	"melodic_minor": (0, 2, 3, 5, 7, 9, 11),
}

# Church-mode names for the two scales the key filter is usually set to.
SCALE_ALIASES: typing.Dict[str, str] = {
	"ionian": "major",
	"aeolian": "minor",
	"natural_minor": "minor",
}


def get_scale_intervals (scale: str) -> typing.Tuple[int, ...]:

	"""
	Return the semitone steps of a named scale, resolving aliases.
	"""

	name = SCALE_ALIASES.get(scale, scale)

	if name not in SCALE_INTERVALS:
		available = ", ".join(sorted(list(SCALE_INTERVALS) + list(SCALE_ALIASES)))
		raise ValueError(f"Unknown scale: {scale!r}. Available: {available}")

	return SCALE_INTERVALS[name]


def scale_pitch_classes (tonic: chordsmith.pitches.PitchLike, scale: str = "major") -> typing.FrozenSet[int]:

	"""
	Return the pitch classes (0-11) that belong to a key.

	Parameters:
		tonic: Canonical note name or pitch class of the key's tonic.
		scale: ``"major"``, ``"minor"`` or another name in ``SCALE_INTERVALS``.

	Example:
		```python
		sorted(scale_pitch_classes("A", "minor"))  # → [0, 2, 4, 5, 7, 9, 11]
		```
	"""

	tonic_pc = chordsmith.pitches.pitch_class_of(tonic)

	return frozenset((tonic_pc + step) % 12 for step in get_scale_intervals(scale))


def chord_tones (root_pc: int, quality: str) -> typing.FrozenSet[int]:

	"""
	Return the pitch classes of a chord, independent of voicing.
	"""

	return frozenset((root_pc + interval) % 12 for interval in chordsmith.chords.get_intervals(quality))


def chord_fits_scale (root_pc: int, quality: str, scale_pcs: typing.AbstractSet[int]) -> bool:

	"""
	Return True if every tone of the chord lies in the scale.
	"""

	return chord_tones(root_pc, quality) <= scale_pcs

"""Chord formula table and the chord builder.

Module-level constants:
- `CHORD_INTERVALS`: Maps each chord quality to its ascending semitone intervals from the root
- `CHORD_SUFFIX`: Maps each chord quality to the suffix used in chord names (e.g. `"m7"`)
- `QUALITY_DISPLAY_NAMES`: Readable names for settings screens (e.g. `"Dominant 7th"`)
- `CHORD_CATEGORIES`: Qualities grouped as triads, sevenths, extended, suspended and added-tone
- `ALL_QUALITIES`: Every quality, in the priority order used by chord recognition

Extended chords carry intervals above the octave (14 = 9th, 17 = 11th,
21 = 13th), so their upper notes land in the next octave up.

Example:
	```python
	import chordsmith.chords

	chord = chordsmith.chords.build_chord("G", "dominant_7th", 3, inversion=1)
	chord.name                          # → "G7/B"
	[str(n) for n in chord.notes]       # → ["B3", "D4", "F4", "G4"]
	```
"""

import dataclasses
import typing

import chordsmith.errors
import chordsmith.pitches
import chordsmith.voicings


# Recognition tries qualities in this order; simpler chords win ties.
ALL_QUALITIES: typing.Tuple[str, ...] = (
	"major",
	"minor",
	"diminished",
	"augmented",
	"sus2",
	"sus4",
	"dominant_7th",
	"major_7th",
	"minor_7th",
	"half_diminished_7th",
	"diminished_7th",
	"add9",
	"add11",
	"dominant_9th",
	"major_9th",
	"minor_9th",
	"dominant_11th",
	"major_11th",
	"minor_11th",
	"dominant_13th",
	"major_13th",
)

CHORD_INTERVALS: typing.Dict[str, typing.Tuple[int, ...]] = {
	"major": (0, 4, 7),
	"minor": (0, 3, 7),
	"diminished": (0, 3, 6),
	"augmented": (0, 4, 8),
	"sus2": (0, 2, 7),
	"sus4": (0, 5, 7),
	"dominant_7th": (0, 4, 7, 10),
	"major_7th": (0, 4, 7, 11),
	"minor_7th": (0, 3, 7, 10),
	"half_diminished_7th": (0, 3, 6, 10),
	"diminished_7th": (0, 3, 6, 9),
	"add9": (0, 4, 7, 14),
	"add11": (0, 4, 7, 17),
	"dominant_9th": (0, 4, 7, 10, 14),
	"major_9th": (0, 4, 7, 11, 14),
	"minor_9th": (0, 3, 7, 10, 14),
	"dominant_11th": (0, 4, 7, 10, 14, 17),
	"major_11th": (0, 4, 7, 11, 14, 17),
	"minor_11th": (0, 3, 7, 10, 14, 17),
	# 13ths omit the 11th.
	"dominant_13th": (0, 4, 7, 10, 14, 21),
	"major_13th": (0, 4, 7, 11, 14, 21),
}

CHORD_SUFFIX: typing.Dict[str, str] = {
	"major": "",
	"minor": "m",
	"diminished": "dim",
	"augmented": "aug",
	"sus2": "sus2",
	"sus4": "sus4",
	"dominant_7th": "7",
	"major_7th": "maj7",
	"minor_7th": "m7",
	"half_diminished_7th": "m7♭5",
	"diminished_7th": "dim7",
	"add9": "add9",
	"add11": "add11",
	"dominant_9th": "9",
	"major_9th": "maj9",
	"minor_9th": "m9",
	"dominant_11th": "11",
	"major_11th": "maj11",
	"minor_11th": "m11",
	"dominant_13th": "13",
	"major_13th": "maj13",
}

QUALITY_DISPLAY_NAMES: typing.Dict[str, str] = {
	"major": "Major",
	"minor": "Minor",
	"diminished": "Diminished",
	"augmented": "Augmented",
	"sus2": "Sus2",
	"sus4": "Sus4",
	"dominant_7th": "Dominant 7th",
	"major_7th": "Major 7th",
	"minor_7th": "Minor 7th",
	"half_diminished_7th": "Half Diminished 7th",
	"diminished_7th": "Diminished 7th",
	"add9": "Add9",
	"add11": "Add11",
	"dominant_9th": "Dominant 9th",
	"major_9th": "Major 9th",
	"minor_9th": "Minor 9th",
	"dominant_11th": "Dominant 11th",
	"major_11th": "Major 11th",
	"minor_11th": "Minor 11th",
	"dominant_13th": "Dominant 13th",
	"major_13th": "Major 13th",
}

CHORD_CATEGORIES: typing.Dict[str, typing.Tuple[str, ...]] = {
	"triads": ("major", "minor", "diminished", "augmented"),
	"seventh_chords": ("major_7th", "minor_7th", "dominant_7th", "half_diminished_7th", "diminished_7th"),
	"extended_chords": (
		"major_9th", "minor_9th", "dominant_9th",
		"major_11th", "minor_11th", "dominant_11th",
		"major_13th", "dominant_13th",
	),
	"suspended": ("sus2", "sus4"),
	"added_tones": ("add9", "add11"),
}

for _table in (CHORD_INTERVALS, CHORD_SUFFIX, QUALITY_DISPLAY_NAMES):
	assert set(_table) == set(ALL_QUALITIES), "Chord tables must cover every quality"

assert sorted(q for group in CHORD_CATEGORIES.values() for q in group) == sorted(ALL_QUALITIES)


def get_intervals (quality: str) -> typing.Tuple[int, ...]:

	"""Return the semitone intervals for a quality, raising ``InvalidQuality`` if unknown."""

	if quality not in CHORD_INTERVALS:
		raise chordsmith.errors.InvalidQuality(f"Unknown chord quality: {quality!r}")

	return CHORD_INTERVALS[quality]


def get_suffix (quality: str) -> str:

	"""Return the chord-name suffix for a quality, raising ``InvalidQuality`` if unknown."""

	if quality not in CHORD_SUFFIX:
		raise chordsmith.errors.InvalidQuality(f"Unknown chord quality: {quality!r}")

	return CHORD_SUFFIX[quality]


def formula_length (quality: str) -> int:

	"""Return the number of notes in a chord of this quality."""

	return len(get_intervals(quality))


def chord_name (
	root: chordsmith.pitches.PitchLike,
	quality: str,
	inversion: int = 0,
	notes: typing.Sequence[chordsmith.pitches.PitchedNote] = ()
) -> str:

	"""Return the display name for a chord.

	The root is followed by the quality suffix. When the chord is inverted
	and notes are given, ``/<bass>`` is appended, where the bass is the
	lowest note's pitch class (never its octave).

	Example:
		```python
		chord_name("C", "major")           # → "C"
		chord_name("F#", "minor_7th")      # → "F#m7"
		chord_name("C", "major", 1, notes) # → "C/E" when notes[0] is an E
		```
	"""

	name = chordsmith.pitches.note_name(chordsmith.pitches.pitch_class_of(root)) + get_suffix(quality)

	if inversion > 0 and notes:
		name += f"/{min(notes).name}"

	return name


@dataclasses.dataclass(frozen=True)
class Chord:

	"""
	A concrete chord: root, quality and its notes sorted from lowest to highest.
	"""

	root_pc: int
	quality: str
	notes: typing.Tuple[chordsmith.pitches.PitchedNote, ...]
	inversion: int = 0
	name: str = ""

	@property
	def root (self) -> str:

		"""Canonical name of the root pitch class."""

		return chordsmith.pitches.note_name(self.root_pc)

	@property
	def bass (self) -> chordsmith.pitches.PitchedNote:

		"""The lowest sounding note."""

		return self.notes[0]

	def intervals (self) -> typing.Tuple[int, ...]:

		"""
		Return the formula intervals for this chord's quality.
		"""

		return get_intervals(self.quality)

	def pitch_classes (self) -> typing.FrozenSet[int]:

		"""Return the set of pitch classes sounding in the chord."""

		return frozenset(note.pitch_class for note in self.notes)


def build_chord (
	root: chordsmith.pitches.PitchLike,
	quality: str,
	octave: int,
	inversion: int = 0
) -> Chord:

	"""Build a chord from a root, quality, octave and inversion.

	Each formula interval is added to the root's pitch class; intervals that
	pass B carry into the next octave. Inversions then raise the lowest note
	by an octave, one step at a time, re-sorting after each step.

	Parameters:
		root: Canonical note name (``"C"``, ``"F#"``) or pitch class 0-11.
		quality: One of ``ALL_QUALITIES``.
		octave: Octave of the root, 1-8.
		inversion: 0 for root position, up to ``formula_length(quality) - 1``.

	Returns:
		A ``Chord`` with notes sorted from lowest to highest.

	Raises:
		InvalidQuality: If the quality is unknown.
		OctaveOutOfRange: If the octave, or any derived note octave, is outside 1-8.
		InvalidInversion: If the inversion is outside the range for the quality.
		InversionOutOfRange: If an inversion step would raise a note above octave 8.

	Example:
		```python
		build_chord("C", "major", 4).name        # → "C"
		build_chord("C", "major_9th", 4).notes[-1] # → D5
		```
	"""

	intervals = get_intervals(quality)
	chordsmith.pitches.validate_octave(octave)

	if isinstance(inversion, bool) or not isinstance(inversion, int) or not 0 <= inversion < len(intervals):
		raise chordsmith.errors.InvalidInversion(
			f"Inversion must be between 0 and {len(intervals) - 1} for {quality} chord, got {inversion!r}"
		)

	root_pc = chordsmith.pitches.pitch_class_of(root)
	notes: typing.List[chordsmith.pitches.PitchedNote] = []

	for interval in intervals:
		note_octave = octave + (root_pc + interval) // 12

		if note_octave > chordsmith.pitches.MAX_OCTAVE:
			raise chordsmith.errors.OctaveOutOfRange(
				f"{chordsmith.pitches.note_name(root_pc)}{get_suffix(quality)} in octave {octave} "
				f"would contain notes above octave {chordsmith.pitches.MAX_OCTAVE}"
			)

		notes.append(chordsmith.pitches.PitchedNote(pitch_class=(root_pc + interval) % 12, octave=note_octave))

	for _ in range(inversion):
		notes = chordsmith.voicings.raise_lowest_note(notes, strict=True)

	return Chord(
		root_pc = root_pc,
		quality = quality,
		notes = tuple(notes),
		inversion = inversion,
		name = chord_name(root_pc, quality, inversion, notes)
	)


def is_valid_chord (chord: Chord) -> bool:

	"""Return True if a chord's notes are consistent with its quality.

	Checks the note count, strictly ascending order, the inversion range and
	that the root is present. Octave range is already guaranteed by
	``PitchedNote``.
	"""

	if chord.quality not in CHORD_INTERVALS or not chord.notes:
		return False

	if len(chord.notes) != len(CHORD_INTERVALS[chord.quality]):
		return False

	if any(later <= earlier for earlier, later in zip(chord.notes, chord.notes[1:])):
		return False

	if not 0 <= chord.inversion < len(chord.notes):
		return False

	return chord.root_pc in chord.pitch_classes()

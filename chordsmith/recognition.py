"""Chord recognition from an unordered set of notes.

The search is a brute force over every candidate root and every quality.
Note sets are small (at most six notes for the qualities we know), so the
quadratic cost per quality does not matter.

Resolution order is fixed, so the same notes always give the same chord:

1. Candidate roots are tried from the lowest note upwards, so a root
   position reading always beats an inverted one.
2. For each candidate root, qualities are tried in
   ``chordsmith.chords.ALL_QUALITIES`` order.

Example:
	```python
	import chordsmith.pitches
	import chordsmith.recognition

	notes = [chordsmith.pitches.PitchedNote.from_name(n, o) for n, o in (("E", 4), ("G", 4), ("C", 5))]
	chord = chordsmith.recognition.identify_chord(notes)
	chord.name       # → "C/E"
	chord.inversion  # → 1
	```
"""

import typing

import chordsmith.chords
import chordsmith.pitches


def _normalized_formula (quality: str) -> typing.Tuple[int, ...]:

	return tuple(sorted(interval % 12 for interval in chordsmith.chords.CHORD_INTERVALS[quality]))


NORMALIZED_FORMULAS: typing.Dict[str, typing.Tuple[int, ...]] = {
	quality: _normalized_formula(quality) for quality in chordsmith.chords.ALL_QUALITIES
}


def interval_signature (
	notes: typing.Sequence[chordsmith.pitches.PitchedNote],
	root_index: int
) -> typing.Tuple[int, ...]:

	"""Return the sorted mod-12 intervals of every note above ``notes[root_index]``.

	Parameters:
		notes: Notes sorted from lowest to highest.
		root_index: Position of the hypothetical root.
	"""

	root_pc = notes[root_index].pitch_class
	count = len(notes)

	return tuple(sorted(
		(notes[(root_index + i) % count].pitch_class - root_pc) % 12
		for i in range(count)
	))


def identify_chord (notes: typing.Iterable[chordsmith.pitches.PitchedNote]) -> typing.Optional[chordsmith.chords.Chord]:

	"""Identify the chord formed by a set of notes.

	Parameters:
		notes: Notes in any order. Duplicates are kept, so a doubled note
			only matches a quality with that many notes.

	Returns:
		The matching ``Chord`` (notes sorted, inversion set from the bass),
		or ``None`` for empty input or an unrecognised set.

	The inversion is the number of notes from the root upwards
	(``len(notes) - root_index``), or 0 when the root is the bass. For
	chords spanning one octave this matches ``build_chord``. For wider
	chords it can differ: the builder's first inversion of Cmaj9
	(E4 G4 B4 C5 D5) is reported here as inversion 2. The name, with its
	``/E`` bass, is the same either way.
	"""

	ordered = chordsmith.pitches.sort_notes(notes)
	count = len(ordered)

	if count == 0:
		return None

	for root_index in range(count):

		signature = interval_signature(ordered, root_index)

		for quality in chordsmith.chords.ALL_QUALITIES:

			if signature != NORMALIZED_FORMULAS[quality]:
				continue

			inversion = 0 if root_index == 0 else count - root_index
			root_pc = ordered[root_index].pitch_class

			return chordsmith.chords.Chord(
				root_pc = root_pc,
				quality = quality,
				notes = tuple(ordered),
				inversion = inversion,
				name = chordsmith.chords.chord_name(root_pc, quality, inversion, ordered)
			)

	return None

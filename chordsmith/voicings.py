"""Chord inversions.

An inversion raises the lowest note of a voicing by one octave and
re-sorts, so a different chord tone ends up in the bass.

Example:
	```python
	from chordsmith.voicings import generate_inversions

	generate_inversions(c_major_notes, 2)
	# → [[C4, E4, G4], [E4, G4, C5], [G4, C5, E5]]
	```
"""

import typing

import chordsmith.errors
import chordsmith.pitches


def max_inversions (notes: typing.Sequence[chordsmith.pitches.PitchedNote]) -> int:

	"""Return the highest inversion a voicing supports (note count - 1, never negative)."""

	return max(0, len(notes) - 1)


def raise_lowest_note (
	notes: typing.Sequence[chordsmith.pitches.PitchedNote],
	strict: bool = False
) -> typing.List[chordsmith.pitches.PitchedNote]:

	"""Move the lowest note up an octave and return the re-sorted voicing.

	Parameters:
		notes: The current voicing, in any order.
		strict: What to do when the lowest note is already in octave 8.
			When False the note stays where it is. When True,
			``InversionOutOfRange`` is raised.

	Returns:
		A new list sorted from lowest to highest.
	"""

	ordered = chordsmith.pitches.sort_notes(notes)

	if not ordered:
		return []

	lowest = ordered[0]

	if strict and lowest.octave >= chordsmith.pitches.MAX_OCTAVE:
		raise chordsmith.errors.InversionOutOfRange(
			f"Inversion would raise {lowest} above octave {chordsmith.pitches.MAX_OCTAVE}"
		)

	return chordsmith.pitches.sort_notes(ordered[1:] + [chordsmith.pitches.move_note_up_octave(lowest)])


def generate_inversions (
	root_position: typing.Sequence[chordsmith.pitches.PitchedNote],
	inversions: int
) -> typing.List[typing.List[chordsmith.pitches.PitchedNote]]:

	"""Return the root position voicing followed by successive inversions.

	The requested count is capped at ``max_inversions(root_position)``
	without complaint. A note that is already in octave 8 stays in octave 8
	when its turn to move comes.

	Parameters:
		root_position: Notes of the root position voicing.
		inversions: How many inversions to generate after the root position.

	Returns:
		A list of voicings; index 0 is the sorted root position. Empty input
		gives an empty list.

	Example:
		```python
		generate_inversions(c_major, 10)  # only 3 voicings for a triad
		generate_inversions(c_major, 0)   # → [[C4, E4, G4]]
		```
	"""

	if not root_position:
		return []

	current = chordsmith.pitches.sort_notes(root_position)
	result = [list(current)]

	for _ in range(min(max(0, inversions), max_inversions(current))):
		current = raise_lowest_note(current)
		result.append(list(current))

	return result

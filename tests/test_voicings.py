import pytest

import chordsmith.errors
import chordsmith.pitches
import chordsmith.voicings
import conftest


def test_root_position_first () -> None:

	"""Index 0 is the root position, sorted."""

	result = chordsmith.voicings.generate_inversions(conftest.notes("G4", "C4", "E4"), 0)

	assert result == [conftest.notes("C4", "E4", "G4")]


def test_triad_inversions () -> None:

	"""Each inversion moves the lowest note up an octave."""

	result = chordsmith.voicings.generate_inversions(conftest.notes("C4", "E4", "G4"), 2)

	assert result == [
		conftest.notes("C4", "E4", "G4"),
		conftest.notes("E4", "G4", "C5"),
		conftest.notes("G4", "C5", "E5"),
	]


def test_count_is_capped () -> None:

	"""Asking for more inversions than notes allow returns len(notes) voicings."""

	result = chordsmith.voicings.generate_inversions(conftest.notes("C4", "E4", "G4", "B4"), 10)

	assert len(result) == 4
	assert result[-1] == conftest.notes("B4", "C5", "E5", "G5")


def test_negative_count () -> None:

	"""A negative count gives only the root position."""

	result = chordsmith.voicings.generate_inversions(conftest.notes("C4", "E4", "G4"), -1)

	assert len(result) == 1


def test_empty_input () -> None:

	"""No notes, no voicings."""

	assert chordsmith.voicings.generate_inversions([], 3) == []


def test_top_octave_note_stays_put () -> None:

	"""Notes already in octave 8 are not moved past the top of the range."""

	result = chordsmith.voicings.generate_inversions(conftest.notes("C8", "E8", "G8"), 1)

	assert result[1] == conftest.notes("C8", "E8", "G8")


def test_inversions_keep_pitch_classes () -> None:

	"""Every voicing keeps the same multiset of pitch classes."""

	root_position = conftest.notes("D3", "F#3", "A3", "C4", "E4")

	for voicing in chordsmith.voicings.generate_inversions(root_position, 4):
		assert sorted(n.pitch_class for n in voicing) == sorted(n.pitch_class for n in root_position)
		assert voicing == sorted(voicing)


def test_max_inversions () -> None:

	"""Triads have two inversions; empty input has none."""

	assert chordsmith.voicings.max_inversions(conftest.notes("C4", "E4", "G4")) == 2
	assert chordsmith.voicings.max_inversions([]) == 0


def test_raise_lowest_note_strict () -> None:

	"""Strict mode refuses to raise a note beyond octave 8."""

	with pytest.raises(chordsmith.errors.InversionOutOfRange):
		chordsmith.voicings.raise_lowest_note(conftest.notes("C8", "E8"), strict=True)

	assert chordsmith.voicings.raise_lowest_note(conftest.notes("C7", "E7"), strict=True) == conftest.notes("E7", "C8")

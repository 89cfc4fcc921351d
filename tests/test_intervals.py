import unittest

import chordsmith.intervals


class ScaleTests (unittest.TestCase):

	"""
	Tests for scale definitions and key membership.
	"""

	def test_major_scale (self) -> None:

		"""
		C major contains only the white keys.
		"""

		self.assertEqual(
			chordsmith.intervals.scale_pitch_classes("C", "major"),
			frozenset({0, 2, 4, 5, 7, 9, 11})
		)


	def test_relative_minor (self) -> None:

		"""
		A minor shares its pitch classes with C major.
		"""

		self.assertEqual(
			chordsmith.intervals.scale_pitch_classes("A", "minor"),
			chordsmith.intervals.scale_pitch_classes("C", "major")
		)


	def test_aliases (self) -> None:

		"""
		Mode names resolve to the matching scale.
		"""

		self.assertEqual(
			chordsmith.intervals.get_scale_intervals("aeolian"),
			chordsmith.intervals.SCALE_INTERVALS["minor"]
		)
		self.assertEqual(
			chordsmith.intervals.get_scale_intervals("ionian"),
			chordsmith.intervals.SCALE_INTERVALS["major"]
		)


	def test_unknown_scale (self) -> None:

		"""
		An unknown scale name raises ValueError.
		"""

		with self.assertRaises(ValueError):
			chordsmith.intervals.get_scale_intervals("bebop")


	def test_every_scale_has_seven_notes (self) -> None:

		"""
		All built-in scales are heptatonic and start on the tonic.
		"""

		for name, steps in chordsmith.intervals.SCALE_INTERVALS.items():
			self.assertEqual(len(steps), 7, name)
			self.assertEqual(steps[0], 0, name)


class ChordFitTests (unittest.TestCase):

	"""
	Tests for checking chords against a key.
	"""

	def test_chord_tones (self) -> None:

		"""
		Chord tones are pitch classes, with extensions folded into one octave.
		"""

		self.assertEqual(chordsmith.intervals.chord_tones(7, "dominant_7th"), frozenset({7, 11, 2, 5}))
		self.assertEqual(chordsmith.intervals.chord_tones(0, "add9"), frozenset({0, 2, 4, 7}))


	def test_diatonic_chord_fits (self) -> None:

		"""
		G7 and Bm7♭5 belong to C major; D major does not.
		"""

		c_major = chordsmith.intervals.scale_pitch_classes("C")

		self.assertTrue(chordsmith.intervals.chord_fits_scale(7, "dominant_7th", c_major))
		self.assertTrue(chordsmith.intervals.chord_fits_scale(11, "half_diminished_7th", c_major))
		self.assertFalse(chordsmith.intervals.chord_fits_scale(2, "major", c_major))

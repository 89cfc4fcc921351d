"""Random chord selection under user-chosen constraints.

A ``ChordFilter`` describes which chords a training round may ask for. The
``ChordSampler`` enumerates every chord the filter allows, caches that list
per distinct filter and draws from it uniformly, so every allowed chord is
equally likely.

Example:
	```python
	import random

	import chordsmith.sampler

	sampler = chordsmith.sampler.ChordSampler(rng=random.Random(42))

	chord_filter = chordsmith.sampler.ChordFilter(
		qualities = ["major", "minor", "dominant_7th"],
		octaves = [3, 4],
		include_inversions = True,
		key_filter = chordsmith.sampler.KeyFilter(key="G", scale="major"),
	)

	chord = sampler.sample_random(chord_filter)
	```
"""

import dataclasses
import logging
import random
import threading
import typing

import chordsmith.chords
import chordsmith.errors
import chordsmith.intervals
import chordsmith.pitches


logger = logging.getLogger(__name__)

CacheKey = typing.Tuple[
	typing.Tuple[str, ...],
	typing.Optional[typing.Tuple[int, ...]],
	typing.Tuple[int, ...],
	bool,
	typing.Optional[typing.Tuple[int, str]],
]


@dataclasses.dataclass(frozen=True)
class KeyFilter:

	"""Restrict chords to those whose every tone is diatonic to a key."""

	key: chordsmith.pitches.PitchLike
	scale: str = "major"

	def __post_init__ (self) -> None:

		chordsmith.pitches.pitch_class_of(self.key)
		chordsmith.intervals.get_scale_intervals(self.scale)

	def pitch_classes (self) -> typing.FrozenSet[int]:

		"""Return the pitch classes of the key's scale."""

		return chordsmith.intervals.scale_pitch_classes(self.key, self.scale)


@dataclasses.dataclass(frozen=True)
class ChordFilter:

	"""Constraints on the chords the sampler may return.

	Parameters:
		qualities: Allowed chord qualities.
		root_notes: Allowed roots (names or pitch classes), or ``None`` for all 12.
		octaves: Allowed root octaves, each 1-8.
		include_inversions: When False only root position chords are produced.
		key_filter: Optional key every chord tone must belong to.

	Raises:
		InvalidQuality: If a quality is unknown.
		OctaveOutOfRange: If an octave is outside 1-8.
		ValueError: If a root name is not canonical.
	"""

	qualities: typing.Sequence[str]
	root_notes: typing.Optional[typing.Sequence[chordsmith.pitches.PitchLike]] = None
	octaves: typing.Sequence[int] = (4,)
	include_inversions: bool = False
	key_filter: typing.Optional[KeyFilter] = None

	def __post_init__ (self) -> None:

		if isinstance(self.qualities, str):
			raise ValueError(f"qualities must be a list of quality names, got the string {self.qualities!r}")

		for quality in self.qualities:
			chordsmith.chords.get_intervals(quality)

		for octave in self.octaves:
			chordsmith.pitches.validate_octave(octave)

		if self.root_notes is not None:
			for root in self.root_notes:
				chordsmith.pitches.pitch_class_of(root)

	def root_pitch_classes (self) -> typing.Tuple[int, ...]:

		"""Return the allowed root pitch classes in ascending order."""

		if self.root_notes is None:
			return tuple(range(12))

		return tuple(sorted({chordsmith.pitches.pitch_class_of(root) for root in self.root_notes}))

	def cache_key (self) -> CacheKey:

		"""Return a hashable key that ignores the order of list fields.

		``root_notes=None`` keeps a key of its own, distinct even from an
		explicit list of all 12 roots.
		"""

		roots = None if self.root_notes is None else self.root_pitch_classes()
		key = None

		if self.key_filter is not None:
			key = (
				chordsmith.pitches.pitch_class_of(self.key_filter.key),
				chordsmith.intervals.SCALE_ALIASES.get(self.key_filter.scale, self.key_filter.scale),
			)

		return (
			tuple(sorted(set(self.qualities))),
			roots,
			tuple(sorted(set(self.octaves))),
			bool(self.include_inversions),
			key,
		)

	def allows (self, chord: chordsmith.chords.Chord, root_octave: typing.Optional[int] = None) -> bool:

		"""Return True if a chord satisfies every constraint of this filter.

		Parameters:
			chord: The chord to check.
			root_octave: The octave the chord was built from, when known.
		"""

		if chord.quality not in self.qualities:
			return False

		if chord.root_pc not in self.root_pitch_classes():
			return False

		if root_octave is not None and root_octave not in self.octaves:
			return False

		if chord.inversion != 0 and not self.include_inversions:
			return False

		if self.key_filter is not None and not chord.pitch_classes() <= self.key_filter.pitch_classes():
			return False

		return True


def enumerate_chords (chord_filter: ChordFilter) -> typing.List[chordsmith.chords.Chord]:

	"""Return every chord a filter allows, in a stable order.

	Combinations the builder rejects (notes pushed past octave 8) are
	skipped. The order depends only on the filter's cache key, so
	filters that differ only in list order produce identical lists.
	"""

	qualities = [quality for quality in chordsmith.chords.ALL_QUALITIES if quality in chord_filter.qualities]
	roots = chord_filter.root_pitch_classes()
	octaves = sorted(set(chord_filter.octaves))
	scale_pcs = chord_filter.key_filter.pitch_classes() if chord_filter.key_filter is not None else None

	candidates: typing.List[chordsmith.chords.Chord] = []

	for quality in qualities:

		inversions = range(chordsmith.chords.formula_length(quality)) if chord_filter.include_inversions else range(1)

		for root_pc in roots:

			if scale_pcs is not None and not chordsmith.intervals.chord_fits_scale(root_pc, quality, scale_pcs):
				continue

			for octave in octaves:
				for inversion in inversions:

					try:
						chord = chordsmith.chords.build_chord(root_pc, quality, octave, inversion)
					except chordsmith.errors.OctaveOutOfRange:
						continue

					candidates.append(chord)

	return candidates


class ChordSampler:

	"""Draws random chords from filters, caching the enumerated candidates.

	The cache maps each distinct filter (see ``ChordFilter.cache_key``) to
	its candidate tuple. Population happens under a lock, so concurrent
	callers with the same filter never see a partial or divergent entry.
	Entries live until ``clear_cache()`` is called.
	"""

	def __init__ (self, rng: typing.Optional[random.Random] = None) -> None:

		"""
		Parameters:
			rng: Random source for draws. Pass a seeded ``random.Random``
				for repeatable results.
		"""

		self.rng = rng if rng is not None else random.Random()
		self._cache: typing.Dict[CacheKey, typing.Tuple[chordsmith.chords.Chord, ...]] = {}
		self._lock = threading.Lock()

	def candidates (self, chord_filter: ChordFilter) -> typing.Tuple[chordsmith.chords.Chord, ...]:

		"""Return the cached candidate chords for a filter, enumerating on first use.

		Empty results are not cached.
		"""

		key = chord_filter.cache_key()

		with self._lock:

			cached = self._cache.get(key)

			if cached is not None:
				logger.debug(f"Chord cache hit ({len(cached)} candidates)")
				return cached

			candidates = tuple(enumerate_chords(chord_filter))
			logger.debug(f"Chord cache miss: enumerated {len(candidates)} candidates")

			if candidates:
				self._cache[key] = candidates

			return candidates

	def sample_random (self, chord_filter: ChordFilter) -> chordsmith.chords.Chord:

		"""Return one chord chosen uniformly from those the filter allows.

		Raises:
			NoValidChords: If no chord satisfies the filter.
		"""

		candidates = self.candidates(chord_filter)

		if not candidates:
			logger.warning(f"No chords match filter {chord_filter}")
			raise chordsmith.errors.NoValidChords("No chords match the current filter. Adjust your filters.")

		return self.rng.choice(candidates)

	def clear_cache (self) -> None:

		"""Forget every cached candidate list."""

		with self._lock:
			self._cache.clear()

	@property
	def cache_size (self) -> int:

		"""Number of filters currently cached."""

		with self._lock:
			return len(self._cache)

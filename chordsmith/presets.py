"""Ready-made chord filters for common training scenarios.

Example:
	```python
	import chordsmith.presets

	preset = chordsmith.presets.get_preset("JAZZ_CHORDS")
	chord_filter = chordsmith.presets.apply_preset(preset, merge_with=current_filter)
	```
"""

import dataclasses
import typing

import chordsmith.chords
import chordsmith.pitches
import chordsmith.sampler


@dataclasses.dataclass(frozen=True)
class ChordFilterPreset:

	"""A named chord filter shown in the settings screen."""

	name: str
	description: str
	chord_filter: chordsmith.sampler.ChordFilter


CHORD_FILTER_PRESETS: typing.Dict[str, ChordFilterPreset] = {
	"ALL_MAJOR_MINOR_TRIADS": ChordFilterPreset(
		name = "All Major & Minor Triads",
		description = "Practice all major and minor triads across all notes",
		chord_filter = chordsmith.sampler.ChordFilter(
			qualities = ("major", "minor"),
			octaves = (3, 4),
		),
	),
	"ALL_7TH_CHORDS": ChordFilterPreset(
		name = "All 7th Chords",
		description = "Practice all seventh chord types",
		chord_filter = chordsmith.sampler.ChordFilter(
			qualities = chordsmith.chords.CHORD_CATEGORIES["seventh_chords"],
			octaves = (3, 4),
		),
	),
	"ALL_CHORDS_C_MAJOR": ChordFilterPreset(
		name = "All Chords in C Major",
		description = "Practice diatonic chords in the key of C major",
		chord_filter = chordsmith.sampler.ChordFilter(
			qualities = chordsmith.chords.ALL_QUALITIES,
			octaves = (3, 4),
			key_filter = chordsmith.sampler.KeyFilter(key="C", scale="major"),
		),
	),
	"JAZZ_CHORDS": ChordFilterPreset(
		name = "Jazz Chords",
		description = "Practice jazz chords: 7ths, 9ths, 11ths, and 13ths with inversions",
		chord_filter = chordsmith.sampler.ChordFilter(
			qualities = chordsmith.chords.CHORD_CATEGORIES["seventh_chords"] + chordsmith.chords.CHORD_CATEGORIES["extended_chords"],
			octaves = (3, 4),
			include_inversions = True,
		),
	),
	"BASIC_TRIADS": ChordFilterPreset(
		name = "Basic Triads",
		description = "Beginner-friendly: major and minor triads on white keys only",
		chord_filter = chordsmith.sampler.ChordFilter(
			qualities = ("major", "minor"),
			root_notes = chordsmith.pitches.WHITE_KEYS,
			octaves = (4,),
		),
	),
}


def get_preset (preset_key: str) -> ChordFilterPreset:

	"""Return a preset by its key (e.g. ``"BASIC_TRIADS"``), raising ``ValueError`` if unknown."""

	if preset_key not in CHORD_FILTER_PRESETS:
		available = ", ".join(sorted(CHORD_FILTER_PRESETS))
		raise ValueError(f"Unknown preset: {preset_key!r}. Available: {available}")

	return CHORD_FILTER_PRESETS[preset_key]


def get_preset_by_name (name: str) -> typing.Optional[ChordFilterPreset]:

	"""Return the preset with this display name, or ``None``."""

	for preset in CHORD_FILTER_PRESETS.values():
		if preset.name == name:
			return preset

	return None


def apply_preset (
	preset: ChordFilterPreset,
	merge_with: typing.Optional[chordsmith.sampler.ChordFilter] = None
) -> chordsmith.sampler.ChordFilter:

	"""Return the filter a preset selects.

	When ``merge_with`` is given, the preset's qualities, roots, octaves and
	inversion flag replace the current ones, and the current key filter is
	kept unless the preset brings its own.
	"""

	if merge_with is None:
		return preset.chord_filter

	key_filter = preset.chord_filter.key_filter

	if key_filter is None:
		key_filter = merge_with.key_filter

	return dataclasses.replace(preset.chord_filter, key_filter=key_filter)

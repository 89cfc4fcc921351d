import pathlib

import pytest

import chordsmith.config
import chordsmith.errors
import chordsmith.sampler


def _write (tmp_path: pathlib.Path, text: str) -> str:

	path = tmp_path / "chordsmith.yaml"
	path.write_text(text, encoding="utf-8")

	return str(path)


def test_missing_file_gives_empty_config (tmp_path: pathlib.Path) -> None:

	"""A missing file is not an error."""

	assert chordsmith.config.load_config(str(tmp_path / "absent.yaml")) == {}


def test_empty_file_gives_empty_config (tmp_path: pathlib.Path) -> None:

	"""An empty YAML document loads as an empty mapping."""

	assert chordsmith.config.load_config(_write(tmp_path, "")) == {}


def test_non_mapping_rejected (tmp_path: pathlib.Path) -> None:

	"""The top level must be a mapping."""

	with pytest.raises(ValueError):
		chordsmith.config.load_config(_write(tmp_path, "- major\n- minor\n"))


def test_default_filter () -> None:

	"""No filter section gives the default filter."""

	assert chordsmith.config.filter_from_config({}) == chordsmith.config.DEFAULT_FILTER


def test_explicit_filter (tmp_path: pathlib.Path) -> None:

	"""Every filter field can be set from YAML."""

	path = _write(tmp_path, (
		"filter:\n"
		"  qualities: [major, dominant_7th]\n"
		"  roots: [C, Bb, 7]\n"
		"  octaves: [3, 4]\n"
		"  include_inversions: true\n"
		"  key: Eb\n"
		"  scale: major\n"
	))

	chord_filter = chordsmith.config.filter_from_config(chordsmith.config.load_config(path))

	assert tuple(chord_filter.qualities) == ("major", "dominant_7th")
	assert chord_filter.root_pitch_classes() == (0, 7, 10)
	assert tuple(chord_filter.octaves) == (3, 4)
	assert chord_filter.include_inversions
	assert chord_filter.key_filter == chordsmith.sampler.KeyFilter(key="D#", scale="major")


def test_preset_with_override () -> None:

	"""Fields given next to a preset override it."""

	chord_filter = chordsmith.config.filter_from_config({"filter": {"preset": "JAZZ_CHORDS", "octaves": [2]}})

	assert chord_filter.include_inversions
	assert tuple(chord_filter.octaves) == (2,)


def test_bad_values () -> None:

	"""Unknown notes, presets and qualities are reported."""

	with pytest.raises(ValueError):
		chordsmith.config.filter_from_config({"filter": {"roots": ["H"]}})

	with pytest.raises(ValueError):
		chordsmith.config.filter_from_config({"filter": {"preset": "POLKA"}})

	with pytest.raises(chordsmith.errors.InvalidQuality):
		chordsmith.config.filter_from_config({"filter": {"qualities": ["power"]}})

	with pytest.raises(ValueError):
		chordsmith.config.filter_from_config({"filter": ["major"]})


def test_single_quality_string_rejected () -> None:

	"""A scalar qualities value in YAML is reported, not read letter by letter."""

	with pytest.raises(ValueError, match="list of quality names"):
		chordsmith.config.filter_from_config({"filter": {"qualities": "major"}})

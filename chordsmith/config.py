"""YAML configuration for chord filters.

A settings file may name a preset, spell out a filter, or both (explicit
fields then override the preset)::

	filter:
	  preset: JAZZ_CHORDS
	  octaves: [4]
	  key: Bb
	  scale: major

Root and key names in the file go through ``chordsmith.naming`` first, so
flat spellings such as ``Bb`` are accepted here.
"""

import dataclasses
import logging
import os
import typing

import yaml

import chordsmith.naming
import chordsmith.presets
import chordsmith.sampler


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH: str = "chordsmith.yaml"

DEFAULT_FILTER = chordsmith.sampler.ChordFilter(
	qualities = ("major", "minor"),
	octaves = (4,),
)


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> typing.Dict[str, typing.Any]:

	"""
	Load configuration from a YAML file. A missing or empty file gives ``{}``.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, "r", encoding="utf-8") as f:
		data = yaml.safe_load(f)

	if data is None:
		return {}

	if not isinstance(data, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

	return data


def _canonical_note (name: typing.Any) -> typing.Any:

	"""Turn a note name such as ``"Bb"`` into its canonical spelling; pass integers through."""

	if isinstance(name, int):
		return name

	canonical = chordsmith.naming.normalize_note(str(name))

	if canonical is None:
		raise ValueError(f"Unknown note name in config: {name!r}")

	return canonical


def filter_from_config (config: typing.Mapping[str, typing.Any]) -> chordsmith.sampler.ChordFilter:

	"""Build a ``ChordFilter`` from the ``filter`` section of a loaded config.

	Without a ``filter`` section, ``DEFAULT_FILTER`` is returned.
	"""

	section = config.get("filter") or {}

	if not isinstance(section, dict):
		raise ValueError("The 'filter' section must be a mapping")

	base = DEFAULT_FILTER

	if "preset" in section:
		base = chordsmith.presets.get_preset(section["preset"]).chord_filter

	changes: typing.Dict[str, typing.Any] = {}

	if "qualities" in section:
		qualities = section["qualities"]
		changes["qualities"] = qualities if isinstance(qualities, str) else tuple(qualities)

	if "roots" in section:
		roots = section["roots"]
		changes["root_notes"] = None if roots is None else tuple(_canonical_note(root) for root in roots)

	if "octaves" in section:
		changes["octaves"] = tuple(section["octaves"])

	if "include_inversions" in section:
		changes["include_inversions"] = bool(section["include_inversions"])

	if "key" in section:
		key = section["key"]
		changes["key_filter"] = None if key is None else chordsmith.sampler.KeyFilter(
			key = _canonical_note(key),
			scale = section.get("scale", "major")
		)

	chord_filter = dataclasses.replace(base, **changes)
	logger.debug(f"Chord filter from config: {chord_filter}")

	return chord_filter

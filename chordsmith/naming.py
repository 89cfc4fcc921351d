"""Chord-name normalization and guess validation.

Users type chord names in many ways: ``"Db maj7"``, ``"C#M7"``, ``"c# major 7"``.
This module reduces them all to one canonical spelling (sharp roots and the
suffixes from ``chordsmith.chords.CHORD_SUFFIX``) so a guess can be compared
with the chord that was played.

Module-level constants:
- `SUFFIX_ALIASES`: Accepted spellings, grouped by the canonical suffix they mean
- `NOTE_ALIASES`: Every accepted root spelling (naturals, ``#``/``♯``, ``b``/``♭``)
- `SHARP_TO_FLAT`: The five standard enharmonic pairs

Example:
	```python
	import chordsmith.chords
	import chordsmith.naming

	chordsmith.naming.normalize_chord_name("Db maj7")  # → "C#maj7"
	chordsmith.naming.normalize_chord_name("f# minor") # → "F#m"

	target = chordsmith.chords.build_chord("C#", "major_7th", 4)
	result = chordsmith.naming.validate_chord_guess("Db maj7", target)
	result.is_correct, result.is_enharmonic  # → (True, True)
	```
"""

import dataclasses
import re
import typing

import chordsmith.chords
import chordsmith.pitches


SUFFIX_ALIASES: typing.Dict[str, typing.Tuple[str, ...]] = {
	"": ("major", "maj", "M"),
	"m": ("minor", "min", "-"),
	"dim": ("diminished", "dimin", "o", "°"),
	"aug": ("augmented", "+"),
	"maj7": ("major7", "major 7", "M7", "Δ", "Δ7"),
	"m7": ("min7", "minor7", "minor 7", "-7"),
	"7": ("dom7", "dominant7", "dominant 7"),
	"dim7": ("diminished7", "diminished 7", "o7", "°7"),
	"m7♭5": ("m7b5", "min7b5", "-7b5", "-7♭5", "halfdiminished7", "half diminished 7", "half diminished", "ø7", "ø"),
	"maj9": ("major9", "major 9", "M9"),
	"m9": ("min9", "minor9", "minor 9", "-9"),
	"9": ("dom9", "dominant9", "dominant 9"),
	"maj11": ("major11", "major 11", "M11"),
	"m11": ("min11", "minor11", "minor 11", "-11"),
	"11": ("dom11", "dominant11", "dominant 11"),
	"maj13": ("major13", "major 13", "M13"),
	"m13": ("min13", "minor13", "minor 13", "-13"),
	"13": ("dom13", "dominant13", "dominant 13"),
	"sus2": ("suspended2", "suspended 2", "sus 2"),
	"sus4": ("suspended4", "suspended 4", "sus 4", "sus"),
	"add9": ("add 9",),
	"add11": ("add 11",),
	"madd9": ("minoradd9", "minor add9", "minor add 9", "m add9"),
}

# Aliases whose meaning depends on case ("M" is major, "m" is minor).
CASE_SENSITIVE_ALIASES: typing.FrozenSet[str] = frozenset({"M", "M7", "M9", "M11", "M13"})

SHARP_TO_FLAT: typing.Dict[str, str] = {
	"C#": "Db",
	"D#": "Eb",
	"F#": "Gb",
	"G#": "Ab",
	"A#": "Bb",
}

SHARP_SIGNS: typing.Tuple[str, ...] = ("#", "♯")
FLAT_SIGNS: typing.Tuple[str, ...] = ("b", "♭")

_FLAT_NOTATION = re.compile(r"[A-Ga-g][b♭]")

_NATURAL_PCS: typing.Dict[str, int] = {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11}


def _build_note_aliases () -> typing.Dict[str, str]:

	"""Spell every natural, sharp and flat root, including B#, Cb, E# and Fb."""

	aliases: typing.Dict[str, str] = {}

	for letter, pc in _NATURAL_PCS.items():
		aliases[letter] = chordsmith.pitches.note_name(pc)

		for sign in SHARP_SIGNS:
			aliases[letter + sign] = chordsmith.pitches.note_name(pc + 1)

		for sign in FLAT_SIGNS:
			aliases[letter + sign] = chordsmith.pitches.note_name(pc - 1)

	return aliases


def _build_suffix_tables () -> typing.Tuple[typing.Dict[str, str], typing.Dict[str, str]]:

	"""Return (exact, case-folded) alias lookups, each canonical suffix mapping to itself."""

	exact: typing.Dict[str, str] = {}
	folded: typing.Dict[str, str] = {}

	for canonical, aliases in SUFFIX_ALIASES.items():
		for alias in (canonical,) + aliases:
			for spelling in {alias, alias.replace(" ", "")}:
				exact.setdefault(spelling, canonical)

				if spelling not in CASE_SENSITIVE_ALIASES:
					folded.setdefault(spelling.lower(), canonical)

	return exact, folded


NOTE_ALIASES: typing.Dict[str, str] = _build_note_aliases()

_EXACT_SUFFIXES, _FOLDED_SUFFIXES = _build_suffix_tables()


def _lookup_note (token: str) -> typing.Optional[str]:

	if not token:
		return None

	return NOTE_ALIASES.get(token[0].upper() + token[1:].lower())


def normalize_note (note: str) -> typing.Optional[str]:

	"""Return the canonical name of a single note (``"Db"`` → ``"C#"``), or ``None``."""

	if not isinstance(note, str):
		return None

	return _lookup_note(note.strip())


def normalize_suffix (suffix: str) -> typing.Optional[str]:

	"""Return the canonical chord suffix for an alias, or ``None`` if it is not recognised.

	Exact spellings are tried first so ``"M7"`` (major) and ``"m7"`` (minor)
	stay distinct; anything else is matched case-insensitively.
	"""

	cleaned = " ".join(suffix.split())

	if cleaned in _EXACT_SUFFIXES:
		return _EXACT_SUFFIXES[cleaned]

	return _FOLDED_SUFFIXES.get(cleaned.lower())


def get_enharmonic_equivalents (note: str) -> typing.List[str]:

	"""Return a canonical note and its flat spelling, if it has one.

	Example:
		```python
		get_enharmonic_equivalents("C#")  # → ["C#", "Db"]
		get_enharmonic_equivalents("C")   # → ["C"]
		```
	"""

	flat = SHARP_TO_FLAT.get(note)

	return [note, flat] if flat else [note]


def parse_chord_name (chord_name: str) -> typing.Optional[typing.Tuple[str, str]]:

	"""Split a chord name into a canonical root and the remaining suffix.

	A two-character root (``"C#"``, ``"Db"``, ``"D♭"``) is tried before a
	one-character one. The suffix is returned trimmed but otherwise untouched.

	Example:
		```python
		parse_chord_name("Dbmaj7")  # → ("C#", "maj7")
		parse_chord_name("xyz")     # → None
		```
	"""

	trimmed = chord_name.strip()

	for size in (2, 1):

		if len(trimmed) < size:
			continue

		root = _lookup_note(trimmed[:size])

		if root is not None:
			return root, trimmed[size:].strip()

	return None


def normalize_chord_name (chord_name: str) -> str:

	"""Return the canonical spelling of a chord name, or ``""`` if it cannot be parsed.

	Flat and theoretical roots become sharps or naturals, known suffix
	aliases become canonical suffixes and slash chords are normalized on both
	sides. Unknown suffixes are kept as typed. Applying the function twice
	gives the same result as applying it once.

	Example:
		```python
		normalize_chord_name("C Major")   # → "C"
		normalize_chord_name("Bb-7")      # → "A#m7"
		normalize_chord_name("C/Eb")      # → "C/D#"
		```
	"""

	if not isinstance(chord_name, str):
		return ""

	trimmed = chord_name.strip()

	if not trimmed:
		return ""

	if "/" in trimmed:
		chord_part, _, bass_part = trimmed.partition("/")
		normalized_chord = normalize_chord_name(chord_part)
		normalized_bass = normalize_note(bass_part)

		if normalized_chord and normalized_bass:
			return f"{normalized_chord}/{normalized_bass}"

	parsed = parse_chord_name(trimmed)

	if parsed is None:
		return ""

	root, suffix = parsed
	canonical = normalize_suffix(suffix)

	if canonical is not None:
		return root + canonical

	# Keep "E" + "#x" apart, otherwise the next pass would read an "E#" root.
	if len(root) == 1 and suffix[:1].lower() in SHARP_SIGNS + FLAT_SIGNS:
		return f"{root} {suffix}"

	return root + suffix


def contains_flat_notation (text: str) -> bool:

	"""Return True if a note letter is immediately followed by ``b`` or ``♭``."""

	return _FLAT_NOTATION.search(text) is not None


@dataclasses.dataclass(frozen=True)
class ChordValidationResult:

	"""Outcome of checking a typed guess against the chord that was played."""

	is_correct: bool
	normalized_guess: str
	normalized_answer: str
	is_enharmonic: bool = False
	original_guess: str = ""
	feedback: typing.Optional[str] = None


def validate_chord_guess (guess: str, target: chordsmith.chords.Chord) -> ChordValidationResult:

	"""Judge a typed chord name against a target chord.

	The target's name is built the same way the chord builder names chords
	(suffix, plus ``/<bass>`` when inverted). A guess is correct when it
	normalizes to the same string. Failing that, it is still correct when
	its root is an enharmonic equivalent of the target's root and the
	suffixes match exactly.

	``is_enharmonic`` is set when the guess used flat notation, the answer
	is spelled with a sharp and both normalize to the same name.

	Empty or unparseable guesses are simply incorrect.
	"""

	original_guess = guess.strip() if isinstance(guess, str) else ""

	answer_name = chordsmith.chords.chord_name(target.root_pc, target.quality, target.inversion, target.notes)

	normalized_guess = normalize_chord_name(original_guess)
	normalized_answer = normalize_chord_name(answer_name)

	is_enharmonic = (
		contains_flat_notation(original_guess)
		and "#" in answer_name
		and normalized_guess == normalized_answer
	)

	if normalized_guess and normalized_guess == normalized_answer:
		return ChordValidationResult(
			is_correct = True,
			normalized_guess = normalized_guess,
			normalized_answer = normalized_answer,
			is_enharmonic = is_enharmonic,
			original_guess = original_guess,
		)

	guess_parts = parse_chord_name(normalized_guess)
	answer_parts = parse_chord_name(normalized_answer)

	if guess_parts is not None and answer_parts is not None:

		guess_root, guess_suffix = guess_parts
		answer_root, answer_suffix = answer_parts

		enharmonic_roots = set(get_enharmonic_equivalents(guess_root)) & set(get_enharmonic_equivalents(answer_root))

		if enharmonic_roots and guess_suffix == answer_suffix:
			return ChordValidationResult(
				is_correct = True,
				normalized_guess = normalized_guess,
				normalized_answer = normalized_answer,
				is_enharmonic = True,
				original_guess = original_guess,
			)

	return ChordValidationResult(
		is_correct = False,
		normalized_guess = normalized_guess,
		normalized_answer = normalized_answer,
		is_enharmonic = False,
		original_guess = original_guess,
		feedback = f"Incorrect. The correct answer is {answer_name}.",
	)

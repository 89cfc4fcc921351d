"""
chordsmith - chord construction, recognition and naming for ear-training tools.

Given a root, a quality, an octave and an inversion, chordsmith builds the
exact notes of the chord. Given any set of notes, it tells you which chord
they form and in which inversion. It also reads chord names the way people
type them ("Db maj7", "f# minor", "C/E") and judges them against the chord
that was played, and it converts between notes and MIDI note numbers.

What it provides:

- **Chord builder.** ``build_chord("G", "dominant_7th", 3, inversion=1)``
  gives ``G7/B`` as B3 D4 F4 G4. Twenty-one qualities from triads to 13ths.
- **Chord recognizer.** ``identify_chord(notes)`` finds root, quality and
  inversion for an unordered note set, with a fixed tie-breaking order.
- **Inversions.** ``generate_inversions(notes, n)`` lists successive
  voicings, raising the lowest note an octave each step.
- **Random chords on demand.** ``ChordSampler`` draws uniformly from every
  chord a ``ChordFilter`` allows (qualities, roots, octaves, inversions,
  "diatonic to G major"), caching the candidate list per filter.
- **Chord names.** ``normalize_chord_name`` and ``validate_chord_guess``
  understand flats, unicode accidentals and dozens of suffix spellings.
- **MIDI.** ``to_midi`` / ``from_midi`` (C5 = 60), note-on / note-off
  decoding of raw or ``mido`` messages, and a ``NoteInput`` keyboard reader.

Minimal example:

    ```python
    import chordsmith

    chord = chordsmith.build_chord("C", "major", 4)
    chord.name                                   # "C"

    chordsmith.identify_chord(chord.notes) == chord   # True

    result = chordsmith.validate_chord_guess("C Major", chord)
    result.is_correct                            # True
    ```

Package-level exports: ``build_chord``, ``identify_chord``,
``generate_inversions``, ``ChordFilter``, ``KeyFilter``, ``ChordSampler``,
``normalize_chord_name``, ``validate_chord_guess``, ``to_midi``,
``from_midi``, ``PitchedNote``, ``Chord``.
"""

import chordsmith.chords
import chordsmith.midi
import chordsmith.naming
import chordsmith.pitches
import chordsmith.recognition
import chordsmith.sampler
import chordsmith.voicings


Chord = chordsmith.chords.Chord
PitchedNote = chordsmith.pitches.PitchedNote
build_chord = chordsmith.chords.build_chord
identify_chord = chordsmith.recognition.identify_chord
generate_inversions = chordsmith.voicings.generate_inversions
ChordFilter = chordsmith.sampler.ChordFilter
KeyFilter = chordsmith.sampler.KeyFilter
ChordSampler = chordsmith.sampler.ChordSampler
normalize_chord_name = chordsmith.naming.normalize_chord_name
validate_chord_guess = chordsmith.naming.validate_chord_guess
to_midi = chordsmith.midi.to_midi
from_midi = chordsmith.midi.from_midi

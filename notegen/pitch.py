"""Note name tables and the note number <-> name mapping.

This module owns the pitch class table and the two directions of the mapping
between MIDI note numbers (0-127) and their textual names.

Names are ``<PitchClass><Octave>``, where sharps are spelled with a trailing
``s`` (``Cs``, ``Fs``) and the octave token is ``n`` for the sub-octave notes
0-11 and ``(note - 12) // 12`` otherwise, so **C0 = 12** and **G9 = 127**.

Module-level constants:
- `PITCH_CLASSES`: The 12 pitch class symbols, indexed by pitch class (0-11)
- `NOTE_COUNT`: Number of MIDI note numbers (128)
- `SUB_OCTAVE_TOKEN`: Octave token used for notes below C0
- `COMMENT_MARKER`: Leading character that makes a note name unparseable

Module-level helpers:
- `identifier_to_name(identifier)`: Note number to name (``60`` -> ``"C4"``)
- `note_names()`: All 128 names in ascending note order
- `prefix_table()`: Ordered ``(lower-cased name, note)`` pairs used for parsing
- `parse_note_name(text)`: Name to note number, raising `Unparseable` on failure
"""

import typing


PITCH_CLASSES: typing.Tuple[str, ...] = (
	"C",
	"Cs",
	"D",
	"Ds",
	"E",
	"F",
	"Fs",
	"G",
	"Gs",
	"A",
	"As",
	"B",
)

NOTE_COUNT = 128
SUB_OCTAVE_TOKEN = "n"
COMMENT_MARKER = "#"


class Unparseable (ValueError):

	"""
	Raised when text cannot be resolved to a note number.
	"""

	def __init__ (self, text: str) -> None:

		self.text = text
		super().__init__(f"Unparseable note name: {text!r}")


def identifier_to_name (identifier: int) -> str:

	"""Return the note name for a MIDI note number.

	Parameters:
		identifier: MIDI note number (0-127). Values outside that range are
			not rejected, but the result is meaningless.

	Example:
		```python
		identifier_to_name(0)    # → "Cn"
		identifier_to_name(60)   # → "C4"
		identifier_to_name(127)  # → "G9"
		```
	"""

	pitch_class = PITCH_CLASSES[identifier % 12]

	if identifier < 12:
		return pitch_class + SUB_OCTAVE_TOKEN

	return pitch_class + str((identifier - 12) // 12)


def note_names () -> typing.List[str]:

	"""Return all note names in ascending note order."""

	return [identifier_to_name(identifier) for identifier in range(NOTE_COUNT)]


def prefix_table () -> typing.List[typing.Tuple[str, int]]:

	"""
	Return ``(lower-cased name, note)`` pairs in ascending note order.

	Parsing tests input against these entries in order and takes the first
	one the input starts with, so the order must not change.
	"""

	return [(name.lower(), identifier) for identifier, name in enumerate(note_names())]


_PREFIX_TABLE = prefix_table()


def parse_note_name (text: str) -> int:

	"""Resolve a note name to its MIDI note number.

	Matching is case-insensitive and by prefix: the input only has to start
	with a known name, so trailing text after the octave is ignored. Input
	starting with ``#`` is treated as commented out.

	Raises:
		Unparseable: If the text starts with ``#`` or matches no note name.

	Example:
		```python
		parse_note_name("C4")    # → 60
		parse_note_name("fs2")   # → 42
		parse_note_name("#C4")   # raises Unparseable
		```
	"""

	lowered = text.lower()

	if lowered.startswith(COMMENT_MARKER):
		raise Unparseable(text)

	for prefix, identifier in _PREFIX_TABLE:
		if lowered.startswith(prefix):
			return identifier

	raise Unparseable(text)


"""
notegen - generate MIDI note name enumerations and parsers as source code.

Every MIDI note number 0-127 gets a name built from its pitch class and
octave (``Cn`` ... ``Bn`` for 0-11, then ``C0`` = 12 up to ``G9`` = 127).
notegen writes that table out as an enumeration, together with a parser
that resolves note text back to a member and the list of key names notes
can be bound to. Rust output is the default; Python output is available
with ``--target python``.

Quick start::

	python -m notegen > midi_notes.rs

	import notegen
	notegen.identifier_to_name(60)   # "C4"
	notegen.parse_note_name("fs2")   # 42

Package-level exports: ``identifier_to_name``, ``note_names``,
``parse_note_name``, ``Unparseable``.
"""

import notegen.pitch


identifier_to_name = notegen.pitch.identifier_to_name
note_names = notegen.pitch.note_names
parse_note_name = notegen.pitch.parse_note_name
Unparseable = notegen.pitch.Unparseable

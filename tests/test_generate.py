import io

import pytest

import notegen.emitters
import notegen.generate
import notegen.keys


def test_full_rust_output (rust_emitter: notegen.emitters.Emitter) -> None:

	"""Enumeration, parser and key list are written in that order."""

	stream = io.StringIO()
	count = notegen.generate.generate(rust_emitter, stream)
	lines = stream.getvalue().split("\n")

	# Trailing newline leaves an empty final element.
	assert lines[-1] == ""
	lines = lines[:-1]

	assert count == len(lines) == 130 + 1 + 398 + 1 + 32
	assert lines[0] == "pub enum MidiNote {"
	assert lines[129] == "}"
	assert lines[131] == "#[derive(Debug, PartialEq)]"
	assert lines[136] == "impl MidiNote {"
	assert lines[-32:] == list(notegen.keys.KEY_NAMES)


def test_output_is_idempotent (rust_emitter: notegen.emitters.Emitter, python_emitter: notegen.emitters.Emitter) -> None:

	"""Two generations give byte-identical output."""

	assert notegen.generate.render(rust_emitter) == notegen.generate.render(rust_emitter)
	assert notegen.generate.render(python_emitter) == notegen.generate.render(python_emitter)


def test_single_section (rust_emitter: notegen.emitters.Emitter) -> None:

	"""Selecting one section writes only that section, without separators."""

	text = notegen.generate.render(rust_emitter, sections=["enum"])
	lines = text.splitlines()

	assert len(lines) == 130
	assert lines[-1] == "}"


def test_sections_keep_output_order (rust_emitter: notegen.emitters.Emitter) -> None:

	"""Requested order does not change the order sections are written in."""

	forward = notegen.generate.render(rust_emitter, sections=["enum", "keys"])
	backward = notegen.generate.render(rust_emitter, sections=["keys", "enum"])

	assert forward == backward
	assert forward.startswith("pub enum MidiNote {")


def test_python_preamble_written_once (python_emitter: notegen.emitters.Emitter) -> None:

	"""The import line precedes the first section."""

	text = notegen.generate.render(python_emitter, sections=["keys"])

	assert text.startswith("import enum\n\nKEY_NAMES = (\n")
	assert text.count("import enum") == 1


def test_unknown_section (rust_emitter: notegen.emitters.Emitter) -> None:

	"""An unknown section name is rejected before anything is written."""

	stream = io.StringIO()

	with pytest.raises(ValueError, match="Unknown section"):
		notegen.generate.generate(rust_emitter, stream, sections=["enum", "footer"])

	assert stream.getvalue() == ""


def test_defaults_to_stdout (rust_emitter: notegen.emitters.Emitter, capsys: pytest.CaptureFixture) -> None:

	"""Without a stream the output goes to standard output."""

	notegen.generate.generate(rust_emitter, sections=["keys"])

	assert capsys.readouterr().out == "\n".join(notegen.keys.KEY_NAMES) + "\n"

"""
Write emitter output to a text stream.

Sections are always written in the same order (enumeration, parser, keys)
regardless of the order they are requested in.
"""

import io
import logging
import sys
import typing

import notegen.emitters


logger = logging.getLogger(__name__)


SECTION_ENUM = "enum"
SECTION_PARSER = "parser"
SECTION_KEYS = "keys"

SECTIONS: typing.Tuple[str, ...] = (SECTION_ENUM, SECTION_PARSER, SECTION_KEYS)


def _section_lines (emitter: notegen.emitters.Emitter, section: str) -> typing.Iterator[str]:

	if section == SECTION_ENUM:
		return emitter.enumeration_lines()

	if section == SECTION_PARSER:
		return emitter.parser_lines()

	return emitter.key_name_lines()


def validate_sections (sections: typing.Iterable[str]) -> typing.List[str]:

	"""Return the requested sections in output order.

	Raises:
		ValueError: If any section name is unknown.
	"""

	requested = list(sections)

	for section in requested:
		if section not in SECTIONS:
			available = ", ".join(f'"{k}"' for k in SECTIONS)
			raise ValueError(f"Unknown section {section!r}. Available sections: {available}")

	return [section for section in SECTIONS if section in requested]


def iter_lines (emitter: notegen.emitters.Emitter, sections: typing.Iterable[str] = SECTIONS) -> typing.Iterator[str]:

	"""Return every output line for the selected sections, separators included.

	Raises:
		ValueError: If any section name is unknown. Raised here, before
			any line is produced.
	"""

	return _iter_lines(emitter, validate_sections(sections))


def _iter_lines (emitter: notegen.emitters.Emitter, sections: typing.List[str]) -> typing.Iterator[str]:

	yield from emitter.preamble_lines()

	for index, section in enumerate(sections):

		if index > 0:
			yield from emitter.section_separator

		yield from _section_lines(emitter, section)


def generate (
	emitter: notegen.emitters.Emitter,
	stream: typing.Optional[typing.TextIO] = None,
	sections: typing.Iterable[str] = SECTIONS
) -> int:

	"""
	Write the generated source to *stream* (standard output by default).

	Parameters:
		emitter: Target-language emitter.
		stream: Text stream to append to.
		sections: Section names to write, see `SECTIONS`.

	Returns:
		The number of lines written.
	"""

	if stream is None:
		stream = sys.stdout

	count = 0

	for line in iter_lines(emitter, sections):
		stream.write(line + "\n")
		count += 1

	logger.debug(f"Wrote {count} lines of {emitter.name} source")

	return count


def render (emitter: notegen.emitters.Emitter, sections: typing.Iterable[str] = SECTIONS) -> str:

	"""Return the generated source as a string."""

	buffer = io.StringIO()
	generate(emitter, buffer, sections)

	return buffer.getvalue()

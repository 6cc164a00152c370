"""Note mapping files.

A mapping file binds a note on a channel to the keys pressed and released
when that note sounds. Each line holds four fields separated by single
spaces::

	C4 0 q q
	Fs4 9 z z

Fields are the note name (see `notegen.pitch.parse_note_name`), the MIDI
channel (0-15), the key sent on note-on and the key sent on note-off. Only
the first character of each key field is used. Lines without exactly four
fields are skipped with a warning.
"""

import dataclasses
import logging
import typing

import mido.messages.checks

import notegen.pitch


logger = logging.getLogger(__name__)


FIELD_COUNT = 4


class MappingError (Exception):
	pass


@dataclasses.dataclass
class NoteMapping:

	"""
	Keys bound to a single note on a single channel.
	"""

	note: int
	channel: int
	key_down: str
	key_up: str
	instrument_name: typing.Optional[str] = None

	def __post_init__ (self) -> None:

		try:
			mido.messages.checks.check_data_byte(self.note)
			mido.messages.checks.check_channel(self.channel)
		except (TypeError, ValueError) as exc:
			raise MappingError(str(exc)) from exc

	@property
	def note_name (self) -> str:
		return notegen.pitch.identifier_to_name(self.note)


def parse_mapping_line (line: str, instrument_name: typing.Optional[str] = None) -> typing.Optional[NoteMapping]:

	"""Parse one mapping line.

	Returns:
		The mapping, or None if the line does not have exactly four fields.

	Raises:
		MappingError: If the note is unparseable, the channel is not a MIDI
			channel or a key field is empty.
	"""

	fields = line.rstrip("\r\n").split(" ")

	if len(fields) != FIELD_COUNT:
		logger.warning(f"Skipping mapping line with {len(fields)} fields (expected {FIELD_COUNT}): {line!r}")
		return None

	note_text, channel_text, key_down_text, key_up_text = fields

	try:
		note = notegen.pitch.parse_note_name(note_text)
	except notegen.pitch.Unparseable as exc:
		raise MappingError(str(exc)) from exc

	# Plain decimal digits only: int() would also take "+1" and "1_0".
	if not (channel_text.isascii() and channel_text.isdigit()):
		raise MappingError(f"Invalid channel: {channel_text!r}")

	channel = int(channel_text)

	if not key_down_text or not key_up_text:
		raise MappingError(f"Empty key field in mapping line: {line!r}")

	return NoteMapping(
		note=note,
		channel=channel,
		key_down=key_down_text[0],
		key_up=key_up_text[0],
		instrument_name=instrument_name
	)


class NoteMappings:

	"""
	Ordered collection of note mappings.

	Mappings are kept in insertion order and `find` returns the first match.
	"""

	def __init__ (self) -> None:

		self._mappings: typing.List[NoteMapping] = []

	def __len__ (self) -> int:
		return len(self._mappings)

	def __iter__ (self) -> typing.Iterator[NoteMapping]:
		return iter(self._mappings)

	def add (self, mapping: NoteMapping) -> None:

		"""Append a mapping. Earlier mappings for the same note take precedence."""

		self._mappings.append(mapping)

	def find (self, note: int, channel: int, instrument_name: typing.Optional[str] = None) -> typing.Optional[NoteMapping]:

		"""Return the first mapping for this note, channel and instrument, if any."""

		for mapping in self._mappings:
			if mapping.note == note and mapping.channel == channel and mapping.instrument_name == instrument_name:
				return mapping

		return None

	def import_lines (self, lines: typing.Iterable[str], instrument_name: typing.Optional[str] = None) -> int:

		"""
		Parse and add every valid line, returning the number of mappings added.
		"""

		added = 0

		for line in lines:
			mapping = parse_mapping_line(line, instrument_name=instrument_name)

			if mapping is None:
				continue

			logger.debug(f"Mapping {mapping.note_name} on channel {mapping.channel}: {mapping.key_down!r} / {mapping.key_up!r}")
			self.add(mapping)
			added += 1

		return added

	def import_file (self, path: str, instrument_name: typing.Optional[str] = None) -> int:

		"""Read mappings from a file, see `import_lines`."""

		with open(path, 'r') as f:
			added = self.import_lines(f, instrument_name=instrument_name)

		logger.info(f"Loaded {added} note mappings from {path}")

		return added


def load_mappings (path: str, instrument_name: typing.Optional[str] = None) -> NoteMappings:

	"""Return a new `NoteMappings` populated from *path*."""

	mappings = NoteMappings()
	mappings.import_file(path, instrument_name=instrument_name)

	return mappings

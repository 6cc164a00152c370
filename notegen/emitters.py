"""
Source emitters for the note enumeration, the note name parser and the key list.

Each emitter renders the same tables into one target language. Every method
returns a fresh generator, so emitting twice always reproduces the same text.
"""

import abc
import typing

import notegen.keys
import notegen.pitch


INDENT = "    "


class Emitter (abc.ABC):

	"""Abstract base for target-language emitters."""

	name: str = ""

	# Lines written between two sections of output.
	section_separator: typing.Tuple[str, ...] = ("",)

	def __init__ (self, enum_name: str = "MidiNote", error_name: typing.Optional[str] = None) -> None:

		"""
		Store the names used in the generated source.

		Parameters:
			enum_name: Name of the generated note enumeration.
			error_name: Name of the generated error type. Each target
				supplies its own default.
		"""

		self.enum_name = enum_name
		self.error_name = error_name if error_name is not None else self.default_error_name()

	@abc.abstractmethod
	def default_error_name (self) -> str:
		...

	def preamble_lines (self) -> typing.Iterator[str]:

		"""Lines written once before any section (imports and the like)."""

		return iter(())

	def enumeration_lines (self) -> typing.Iterator[str]:

		"""Yield the opening marker, one line per note in ascending order, then the closing marker."""

		yield self.enumeration_open()

		for identifier, name in enumerate(notegen.pitch.note_names()):
			yield INDENT + self.enumeration_member(name, identifier)

		yield self.enumeration_close()

	@abc.abstractmethod
	def enumeration_open (self) -> str:
		...

	@abc.abstractmethod
	def enumeration_member (self, name: str, identifier: int) -> str:
		...

	@abc.abstractmethod
	def enumeration_close (self) -> str:
		...

	@abc.abstractmethod
	def parser_lines (self) -> typing.Iterator[str]:

		"""Yield the source of a function resolving note text to an enumeration member."""

		...

	@abc.abstractmethod
	def key_name_lines (self) -> typing.Iterator[str]:

		"""Yield the key name list."""

		...

	def _name_for (self, identifier: int) -> str:
		return notegen.pitch.identifier_to_name(identifier)


class RustEmitter (Emitter):

	"""
	Emit a Rust ``enum`` with explicit discriminants and a ``new_from_text`` constructor.

	The parser section declares its own error enum holding the single
	``Unparseable`` variant, so it compiles without an existing error type.
	Pick a fresh ``error_name`` when pasting next to an existing ``MidiError``.

	The key names are written one per line, untransformed, for pasting into
	an existing ``enum`` body.
	"""

	name = "rust"

	def default_error_name (self) -> str:
		return "MidiError"

	def enumeration_open (self) -> str:
		return f"pub enum {self.enum_name} {{"

	def enumeration_member (self, name: str, identifier: int) -> str:
		return f"{name} = {identifier},"

	def enumeration_close (self) -> str:
		return "}"

	def parser_lines (self) -> typing.Iterator[str]:

		body = INDENT * 2
		unparseable = f"{self.error_name}::Unparseable"

		yield "#[derive(Debug, PartialEq)]"
		yield f"pub enum {self.error_name} {{"
		yield f"{INDENT}Unparseable,"
		yield "}"
		yield ""
		yield f"impl {self.enum_name} {{"
		yield f"{INDENT}pub fn new_from_text(text: &str) -> Result<{self.enum_name}, {self.error_name}> {{"
		yield f"{body}let lower = text.to_lowercase();"
		yield f"{body}if lower.starts_with(\"{notegen.pitch.COMMENT_MARKER}\") {{"
		yield f"{body}{INDENT}return Err({unparseable});"
		yield f"{body}}}"

		for prefix, identifier in notegen.pitch.prefix_table():
			yield f"{body}if lower.starts_with(\"{prefix}\") {{"
			yield f"{body}{INDENT}return Ok({self.enum_name}::{self._name_for(identifier)});"
			yield f"{body}}}"

		yield f"{body}Err({unparseable})"
		yield f"{INDENT}}}"
		yield "}"

	def key_name_lines (self) -> typing.Iterator[str]:

		for key_name in notegen.keys.KEY_NAMES:
			yield key_name


class PythonEmitter (Emitter):

	"""
	Emit a self-contained Python module: an ``enum.IntEnum``, a parser and a key tuple.

	The parser raises the generated error class, a ``ValueError`` subclass.
	"""

	name = "python"

	def default_error_name (self) -> str:
		return "Unparseable"

	def preamble_lines (self) -> typing.Iterator[str]:

		yield "import enum"
		yield ""

	def enumeration_open (self) -> str:
		return f"class {self.enum_name} (enum.IntEnum):"

	def enumeration_member (self, name: str, identifier: int) -> str:
		# No trailing comma: it would turn the member value into a tuple.
		return f"{name} = {identifier}"

	def enumeration_close (self) -> str:
		return ""

	def parser_lines (self) -> typing.Iterator[str]:

		yield f"class {self.error_name} (ValueError):"
		yield f"{INDENT}pass"
		yield ""
		yield ""
		yield f"def parse_note (text: str) -> {self.enum_name}:"
		yield f"{INDENT}lowered = text.lower()"
		yield f"{INDENT}if lowered.startswith(\"{notegen.pitch.COMMENT_MARKER}\"):"
		yield f"{INDENT * 2}raise {self.error_name}(text)"

		for prefix, identifier in notegen.pitch.prefix_table():
			yield f"{INDENT}if lowered.startswith(\"{prefix}\"):"
			yield f"{INDENT * 2}return {self.enum_name}.{self._name_for(identifier)}"

		yield f"{INDENT}raise {self.error_name}(text)"

	def key_name_lines (self) -> typing.Iterator[str]:

		yield "KEY_NAMES = ("

		for key_name in notegen.keys.KEY_NAMES:
			yield f"{INDENT}\"{key_name}\","

		yield ")"


EMITTERS: typing.Dict[str, typing.Type[Emitter]] = {
	RustEmitter.name: RustEmitter,
	PythonEmitter.name: PythonEmitter,
}

DEFAULT_TARGET = RustEmitter.name


def get_emitter (target: str, enum_name: str = "MidiNote", error_name: typing.Optional[str] = None) -> Emitter:

	"""Return an emitter instance for *target*.

	Raises:
		ValueError: If the target is not one of `EMITTERS`.
	"""

	if target not in EMITTERS:
		available = ", ".join(f'"{k}"' for k in sorted(EMITTERS))
		raise ValueError(f"Unknown target {target!r}. Available targets: {available}")

	return EMITTERS[target](enum_name=enum_name, error_name=error_name)

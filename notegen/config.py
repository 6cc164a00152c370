"""
Configuration loading.

Settings live under an ``output`` key in a YAML file::

	output:
	  target: python
	  enum_name: Note
	  sections: [enum, parser]

A missing file is not an error; defaults are used instead.
"""

import dataclasses
import logging
import os
import typing

import yaml

import notegen.emitters
import notegen.generate


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "notegen.yaml"


class ConfigError (Exception):
	pass


@dataclasses.dataclass
class GeneratorOptions:

	"""
	Resolved generator settings.
	"""

	target: str = notegen.emitters.DEFAULT_TARGET
	enum_name: str = "MidiNote"
	error_name: typing.Optional[str] = None
	sections: typing.List[str] = dataclasses.field(default_factory=lambda: list(notegen.generate.SECTIONS))

	def emitter (self) -> notegen.emitters.Emitter:

		"""Build the emitter these options describe."""

		return notegen.emitters.get_emitter(self.target, enum_name=self.enum_name, error_name=self.error_name)


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	try:
		with open(config_path, 'r') as f:
			data = yaml.safe_load(f)
	except yaml.YAMLError as exc:
		raise ConfigError(f"Config file {config_path} is not valid YAML: {exc}") from exc

	if data is None:
		return {}

	if not isinstance(data, dict):
		raise ConfigError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

	return data


def resolve_options (config: dict, **overrides: typing.Any) -> GeneratorOptions:

	"""
	Merge the ``output`` section of *config* and any non-None *overrides* over the defaults.

	Raises:
		ConfigError: If a value is of the wrong type or names an unknown target or section.
	"""

	output = config.get('output', {}) or {}

	if not isinstance(output, dict):
		raise ConfigError("'output' must be a mapping")

	values = dict(output)
	values.update({key: value for key, value in overrides.items() if value is not None})

	known = {field.name for field in dataclasses.fields(GeneratorOptions)}
	unknown = sorted(set(values) - known)

	if unknown:
		raise ConfigError(f"Unknown output settings: {', '.join(unknown)}")

	for key in ('target', 'enum_name', 'error_name'):
		if key in values and not isinstance(values[key], str) and not (key == 'error_name' and values[key] is None):
			raise ConfigError(f"{key!r} must be a string, got {type(values[key]).__name__}")

	if isinstance(values.get('sections'), str):
		values['sections'] = [values['sections']]

	if 'sections' in values:
		sections = values['sections']
		if not isinstance(sections, list) or not all(isinstance(section, str) for section in sections):
			raise ConfigError("'sections' must be a section name or a list of section names")

	options = GeneratorOptions(**values)

	if options.target not in notegen.emitters.EMITTERS:
		raise ConfigError(f"Unknown target {options.target!r}")

	try:
		options.sections = notegen.generate.validate_sections(options.sections)
	except ValueError as exc:
		raise ConfigError(str(exc)) from exc

	return options

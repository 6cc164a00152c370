"""Command-line entry point.

Usage::

    python -m notegen
    python -m notegen --target python --section enum --section parser
    python -m notegen --mappings keys.txt

With no arguments the Rust note enumeration, its ``new_from_text`` parser and
the key name list are written to standard output. Log messages go to
standard error.
"""

import argparse
import logging
import sys
import typing

import notegen.config
import notegen.emitters
import notegen.generate
import notegen.mappings


logger = logging.getLogger(__name__)


def build_parser () -> argparse.ArgumentParser:

	"""Build the argument parser."""

	parser = argparse.ArgumentParser(prog="notegen", description="Generate MIDI note name source code.")

	parser.add_argument(
		"--target",
		choices=sorted(notegen.emitters.EMITTERS),
		default=None,
		help=f"Target language (default: {notegen.emitters.DEFAULT_TARGET})"
	)
	parser.add_argument(
		"--section",
		dest="sections",
		action="append",
		choices=notegen.generate.SECTIONS,
		default=None,
		help="Section to write; repeat for several (default: all)"
	)
	parser.add_argument("--enum-name", default=None, help="Name of the generated enumeration")
	parser.add_argument("--error-name", default=None, help="Name of the generated error type")
	parser.add_argument(
		"--config",
		default=notegen.config.DEFAULT_CONFIG_PATH,
		help=f"YAML config file (default: {notegen.config.DEFAULT_CONFIG_PATH})"
	)
	parser.add_argument("--mappings", default=None, help="Validate a note mapping file before generating")
	parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

	return parser


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the notegen command.
	"""

	args = build_parser().parse_args(argv)

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, stream=sys.stderr)

	try:
		config = notegen.config.load_config(args.config)
		options = notegen.config.resolve_options(
			config,
			target=args.target,
			enum_name=args.enum_name,
			error_name=args.error_name,
			sections=args.sections
		)

		if args.mappings is not None:
			mappings = notegen.mappings.load_mappings(args.mappings)
			logger.info(f"{len(mappings)} mappings in {args.mappings} are valid")

	except notegen.config.ConfigError as exc:
		logger.error(f"Invalid configuration: {exc}")
		return 1

	except notegen.mappings.MappingError as exc:
		logger.error(f"Invalid mapping file: {exc}")
		return 1

	except OSError as exc:
		logger.error(f"Cannot read file: {exc}")
		return 1

	notegen.generate.generate(options.emitter(), sys.stdout, options.sections)

	return 0


if __name__ == "__main__":
	sys.exit(main())

import types
import typing

import pytest

import notegen.emitters
import notegen.generate


def load_generated_module (source: str, name: str = "generated_notes") -> types.ModuleType:

	"""Execute generated Python source and return it as a module."""

	module = types.ModuleType(name)
	exec(compile(source, f"<{name}>", "exec"), module.__dict__)
	return module


@pytest.fixture
def rust_emitter () -> notegen.emitters.Emitter:

	"""Rust emitter with default names."""

	return notegen.emitters.get_emitter("rust")


@pytest.fixture
def python_emitter () -> notegen.emitters.Emitter:

	"""Python emitter with default names."""

	return notegen.emitters.get_emitter("python")


@pytest.fixture
def generated_module (python_emitter: notegen.emitters.Emitter) -> types.ModuleType:

	"""The full Python output, imported."""

	return load_generated_module(notegen.generate.render(python_emitter))


@pytest.fixture
def isolated_cwd (tmp_path: typing.Any, monkeypatch: pytest.MonkeyPatch) -> typing.Any:

	"""Run the test from an empty directory so no stray config file is picked up."""

	monkeypatch.chdir(tmp_path)
	return tmp_path

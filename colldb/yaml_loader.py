"""YAML helpers for species and transport database files."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .exceptions import ConfigurationException, UnopenedFileException

DATA_DIRECTORY_ENV = "COLLDB_DATA_DIRECTORY"

_TRUE_STRINGS = {"yes", "true", "on", "1"}
_FALSE_STRINGS = {"no", "false", "off", "0"}


class NoBoolSafeLoader(yaml.SafeLoader):
    """YAML loader that avoids implicit boolean conversion (species 'NO' must stay a string)."""


for first, mappings in list(NoBoolSafeLoader.yaml_implicit_resolvers.items()):
    NoBoolSafeLoader.yaml_implicit_resolvers[first] = [
        (tag, regexp) for tag, regexp in mappings if tag != "tag:yaml.org,2002:bool"
    ]


def safe_load_no_bool(text: str):
    """Load YAML text without implicit bool conversions."""
    return yaml.load(text, Loader=NoBoolSafeLoader)


def load_yaml_file(filename: str | os.PathLike) -> Mapping[str, Any]:
    path = Path(filename)
    if not path.exists():
        raise UnopenedFileException(f"Could not load database file {filename}")
    try:
        content = safe_load_no_bool(path.read_text().replace("\t", " "))
    except yaml.YAMLError as exc:
        raise UnopenedFileException(f"Failed to parse {filename}: {exc}") from exc
    if content is None:
        return {}
    if not isinstance(content, Mapping):
        raise UnopenedFileException(f"Database file {filename} must contain a mapping at its root")
    return content


def parse_bool(value: Any, name: str) -> bool:
    """Interpret a boolean attribute that the loader kept as a plain scalar."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ConfigurationException(f"Attribute '{name}' must be a boolean, got {value!r}")


def data_directory() -> Path:
    return Path(os.environ.get(DATA_DIRECTORY_ENV, "data"))


def database_file_name(name: str | os.PathLike, directory: str) -> Path:
    """Resolve a database name to a file.

    An existing path is returned untouched, otherwise the name is looked up as
    ``<data dir>/<directory>/<name>.yaml``.
    """
    path = Path(name)
    if path.exists():
        return path
    if path.suffix not in (".yaml", ".yml"):
        path = path.with_name(path.name + ".yaml")
    return data_directory() / directory / path

"""Utility functions for enumerated-attribute."""

import logging
import os
import re
from collections.abc import Iterable
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .exceptions import SchemaFileInvalidError
from .exceptions import SchemaFileNotFoundError
from .exceptions import SchemaFileNotReadableError

logger = logging.getLogger(__name__)

PROJECT_ROOT_MARKERS = ("pyproject.toml",)

_ACRONYM_BOUNDARY = re.compile(r"([A-Z\d]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")
_NAMESPACE_SEPARATOR = re.compile(r"::|\.")


def check_schema_file(value: str | os.PathLike) -> Path:
    """Validate that ``value`` points to a readable regular file.

    Args:
        value: Candidate schema file path

    Returns:
        ``value`` as a Path

    Raises:
        SchemaFileNotFoundError: If ``value`` is not an existing regular file
        SchemaFileNotReadableError: If the file exists but cannot be read
    """
    path = Path(value)
    if not path.is_file():
        raise SchemaFileNotFoundError(value)
    if not os.access(path, os.R_OK):
        raise SchemaFileNotReadableError(value)
    return path


def load_schema_file(path: Path) -> dict[str, Any]:
    """Validate and parse a YAML schema file.

    Args:
        path: Path to the schema file

    Returns:
        Parsed document, empty dict for an empty file

    Raises:
        SchemaFileNotFoundError: If the file is missing
        SchemaFileNotReadableError: If the file cannot be read
        SchemaFileInvalidError: If the file is not YAML or not a mapping
    """
    check_schema_file(path)

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SchemaFileInvalidError(path, str(e)) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SchemaFileInvalidError(path, f"expected a mapping at the top level, got {type(data).__name__}")

    logger.debug(f"Loaded enumerated attribute schema from {path}")
    return data


def find_project_root(start: Path) -> Path | None:
    """Find the nearest directory at or above ``start`` holding a project marker.

    Args:
        start: Directory to start searching from

    Returns:
        Project root directory or None if no marker was found
    """
    for directory in (start, *start.parents):
        if any((directory / marker).is_file() for marker in PROJECT_ROOT_MARKERS):
            return directory
    return None


def underscore(word: str) -> str:
    """Convert a CamelCase name to snake_case.

    Examples:
        >>> underscore("FakeUser")
        'fake_user'

        >>> underscore("HTTPRequest")
        'http_request'
    """
    word = _ACRONYM_BOUNDARY.sub(r"\1_\2", word)
    word = _WORD_BOUNDARY.sub(r"\1_\2", word)
    return word.replace("-", "_").lower()


def scope_path(name: str) -> tuple[str, ...]:
    """Derive the schema scope path from a qualified class name.

    Nested class names become nested keys. Anything up to a function-local
    ``<locals>`` segment is dropped.

    Examples:
        >>> scope_path("Shop.User")
        ('shop', 'user')

        >>> scope_path("Shop::AdminUser")
        ('shop', 'admin_user')

        >>> scope_path("test_declare.<locals>.FakeUser")
        ('fake_user',)
    """
    segments = _NAMESPACE_SEPARATOR.split(name)
    if "<locals>" in segments:
        segments = segments[len(segments) - segments[::-1].index("<locals>") :]
    return tuple(underscore(segment) for segment in segments if segment)


def dig(data: Any, *keys: str) -> Any:
    """Look up a nested value, returning None when any step is missing.

    Examples:
        >>> dig({"shop": {"user": {"role": ["member"]}}}, "shop", "user", "role")
        ['member']

        >>> dig({"shop": "closed"}, "shop", "user") is None
        True
    """
    for key in keys:
        if not isinstance(data, Mapping):
            return None
        data = data.get(key)
    return data


def to_value_list(value: Any) -> list[Any]:
    """Coerce a schema entry to a list of enum values.

    ``None`` and mappings are not value lists and yield an empty list; a
    single scalar or string yields a one-item list. Other iterables are
    consumed once, in order.
    """
    if value is None or isinstance(value, Mapping):
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        return [value]
    return list(value)

"""Configuration holder for the default enumerated attribute schema."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .utils import check_schema_file
from .utils import find_project_root
from .utils import load_schema_file

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_FILENAME = "enumerated_attributes.yml"


class Configuration:
    """Holds the default schema file shared by every extended class.

    Construct one at application start and pass it to the root class
    extended with :class:`~enumerated_attribute.EnumeratedAttributes`.

    Args:
        schema_file: Path to the default schema file. When omitted the
            default is ``enumerated_attributes.yml`` in the project root
            (nearest directory holding ``pyproject.toml``), or in the current
            working directory when no project root is found.

    Raises:
        SchemaFileNotFoundError: If ``schema_file`` is not a file
        SchemaFileNotReadableError: If ``schema_file`` is not readable
    """

    def __init__(self, schema_file: str | os.PathLike | None = None):
        self._default_config: Mapping[str, Any] | None = None
        self._schema_file: Path | None = None
        self._schema: dict[str, Any] | None = None
        if schema_file:
            self.schema_file = schema_file

    @property
    def default_config(self) -> Mapping[str, Any]:
        """Read-only default settings, computed once."""
        if self._default_config is None:
            cwd = Path.cwd()
            root = find_project_root(cwd) or cwd
            self._default_config = MappingProxyType({"schema_file": root / DEFAULT_SCHEMA_FILENAME})
        return self._default_config

    @property
    def schema_file(self) -> Path:
        """Path to the schema file holding the default enum values."""
        if self._schema_file is None:
            return self.default_config["schema_file"]
        return self._schema_file

    @schema_file.setter
    def schema_file(self, value: str | os.PathLike | None) -> None:
        if not value:
            self._schema_file = None
            logger.info("Reset default enumerated attribute schema file")
        else:
            self._schema_file = check_schema_file(value)
            logger.info(f"Set default enumerated attribute schema file to {self._schema_file}")
        self._schema = None

    @property
    def schema(self) -> dict[str, Any]:
        """Parsed default schema document, loaded at most once.

        Raises:
            SchemaFileNotFoundError: If the schema file does not exist
            SchemaFileNotReadableError: If the schema file is not readable
            SchemaFileInvalidError: If the schema file cannot be parsed
        """
        if self._schema is None:
            self._schema = load_schema_file(self.schema_file)
        return self._schema

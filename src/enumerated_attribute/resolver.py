"""Per-class schema resolution and enumerated attribute registration."""

import logging
import os
from pathlib import Path
from typing import Any

from .configuration import Configuration
from .exceptions import MissingValuesError
from .models import UNSET
from .models import AttributeDeclaration
from .models import EnumEngine
from .models import Unset
from .utils import check_schema_file
from .utils import dig
from .utils import load_schema_file
from .utils import scope_path
from .utils import to_value_list

logger = logging.getLogger(__name__)


class SchemaResolver:
    """Resolves the schema of one class and registers its enumerated attributes.

    Resolvers form a chain mirroring class inheritance. A class without its
    own schema file override uses the override of the nearest ancestor that
    has one; if none does, the configuration's default schema file applies.

    Override values:
    - UNSET: never assigned anywhere in the chain
    - None: explicitly cleared, the default schema file applies
    - Path: custom schema file for this class

    Args:
        name: Qualified class name, used to derive the scope path
        configuration: Configuration holding the default schema file
        engine: Enumeration engine receiving the declarations
        parent: Resolver of the nearest extended base class
        owner: Class this resolver belongs to
    """

    def __init__(
        self,
        name: str,
        configuration: Configuration,
        engine: EnumEngine,
        parent: "SchemaResolver | None" = None,
        owner: type | None = None,
    ):
        self.name = name
        self.configuration = configuration
        self.engine = engine
        self.parent = parent
        self.owner = owner
        self.declarations: dict[str, AttributeDeclaration] = {}
        self._override: Path | None | Unset = UNSET
        self._schema: dict[str, Any] | None = None
        self._schema_source: Path | None = None
        self._scope: tuple[str, ...] | None = None

    # ===== Schema File =====

    @property
    def schema_file_override(self) -> Path | None | Unset:
        """Custom schema file for this class.

        Returns the first explicit value found walking up the chain, which
        may be None. The inherited value is remembered, so later changes to
        an ancestor do not reach a class that already resolved it.
        """
        if self._override is not UNSET:
            return self._override

        resolver = self.parent
        while resolver is not None:
            if resolver._override is not UNSET:
                self._override = resolver._override
                return self._override
            resolver = resolver.parent

        return UNSET

    @schema_file_override.setter
    def schema_file_override(self, value: str | os.PathLike | None) -> None:
        if not value:
            self._override = None
            logger.info(f"Cleared schema file override for {self.name}")
        else:
            self._override = check_schema_file(value)
            logger.info(f"Set schema file override for {self.name} to {self._override}")

    @property
    def schema_file(self) -> Path:
        """Schema file in effect for this class."""
        override = self.schema_file_override
        if isinstance(override, Path):
            return override
        return self.configuration.schema_file

    # ===== Schema Document =====

    @property
    def schema(self) -> dict[str, Any]:
        """Parsed schema document in effect for this class, loaded once.

        Classes without an override share the configuration's document.
        The override chain is resolved on every access, so the document
        always matches :attr:`schema_file`.
        """
        override = self.schema_file_override
        if not isinstance(override, Path):
            return self.configuration.schema

        if self._schema is None or self._schema_source != override:
            self._schema = load_schema_file(override)
            self._schema_source = override
        return self._schema

    @property
    def scope(self) -> tuple[str, ...]:
        """Keys leading to this class's section of the schema document."""
        if self._scope is None:
            self._scope = scope_path(self.name)
        return self._scope

    def values_for(self, attribute_name: str) -> list[Any]:
        """Look up the enum values of an attribute in the schema document.

        Args:
            attribute_name: Name of the attribute

        Returns:
            Values in schema order, empty list if none are defined
        """
        return to_value_list(dig(self.schema, *self.scope, str(attribute_name)))

    # ===== Registration =====

    def declare(self, attribute_name: str, **options: Any) -> AttributeDeclaration:
        """Declare an enumerated attribute and forward it to the engine.

        An inline ``values`` option bypasses the schema; it is collected into
        a list once and forwarded with the other options. Otherwise the values
        come from the schema document and are merged into the options.
        Nothing reaches the engine when the value list is empty.

        Args:
            attribute_name: Name of the attribute
            **options: Options forwarded to the engine

        Returns:
            Record of the forwarded declaration

        Raises:
            MissingValuesError: If no values are found for the attribute
        """
        if "values" in options:
            values = to_value_list(options["values"])
        else:
            values = self.values_for(attribute_name)
        if not values:
            raise MissingValuesError(class_name=self.name, attribute_name=str(attribute_name))
        options = {**options, "values": values}

        self.engine.register(self.owner, attribute_name, options)
        logger.debug(f"Registered enumerated attribute {self.name}#{attribute_name}: {values!r}")

        declaration = AttributeDeclaration(
            attribute_name=attribute_name,
            values=tuple(values),
            options=options,
        )
        self.declarations[attribute_name] = declaration
        return declaration

"""Class extension mechanism for declaring enumerated attributes."""

import logging
import os
from typing import Any

from .configuration import Configuration
from .models import UNSET
from .models import AttributeDeclaration
from .models import EnumEngine
from .models import Unset
from .resolver import SchemaResolver

logger = logging.getLogger(__name__)

_RESOLVER_ATTR = "__enum_resolver__"


class EnumAttribute:
    """Class-body marker for an enumerated attribute.

    Created by :func:`attr_enum`. Declared when the owning class is created;
    the engine may replace it with its own descriptor.
    """

    def __init__(self, **options: Any):
        self.options = options
        self.name: str | None = None
        self.declaration: AttributeDeclaration | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"EnumAttribute(name={self.name!r}, options={self.options!r})"


def attr_enum(**options: Any) -> EnumAttribute:
    """Declare an enumerated attribute in a class body.

    Values come from the schema file unless ``values`` is given.

    Example:
        ```python
        class User(ApplicationModel):
            role = attr_enum(default="member")
            plan = attr_enum(values=["free", "pro"])
        ```
    """
    return EnumAttribute(**options)


def _parent_resolver(cls: type) -> SchemaResolver | None:
    for base in cls.__mro__[1:]:
        resolver = base.__dict__.get(_RESOLVER_ATTR)
        if resolver is not None:
            return resolver
    return None


def _markers(cls: type) -> list[EnumAttribute]:
    return [value for value in list(cls.__dict__.values()) if isinstance(value, EnumAttribute)]


def _attr_enum(cls: type, attribute_name: str, **options: Any) -> AttributeDeclaration:
    """Declare an enumerated attribute from within the class's own methods."""
    return resolver_for(cls).declare(attribute_name, **options)


def extend(
    cls: type,
    *,
    configuration: Configuration | None = None,
    engine: EnumEngine | None = None,
    schema_file: str | os.PathLike | None | Unset = UNSET,
) -> SchemaResolver:
    """Extend a class with enumerated attribute support.

    Attaches a resolver linked to the nearest extended base class, applies
    the schema file override and declares the class's ``attr_enum`` markers.
    Extending an already extended class returns its resolver unchanged.
    If any step fails the class is left unextended. Classes that do not use
    the mixin also get the protected ``_attr_enum`` classmethod.

    Args:
        cls: Class to extend
        configuration: Configuration (default: inherited from the base class)
        engine: Enumeration engine (default: inherited from the base class)
        schema_file: Schema file override; None clears an inherited one

    Returns:
        The class's resolver

    Raises:
        TypeError: If no configuration or engine is available
        SchemaFileNotFoundError: If ``schema_file`` is not a file
        SchemaFileNotReadableError: If ``schema_file`` is not readable
        MissingValuesError: If a marker has no values in the schema
    """
    resolver = cls.__dict__.get(_RESOLVER_ATTR)
    if resolver is not None:
        return resolver

    parent = _parent_resolver(cls)
    if parent is not None:
        if configuration is None:
            configuration = parent.configuration
        if engine is None:
            engine = parent.engine
    if configuration is None or engine is None:
        raise TypeError(
            f"{cls.__qualname__} needs a configuration and an engine to declare enumerated attributes"
        )

    resolver = SchemaResolver(cls.__qualname__, configuration, engine, parent=parent, owner=cls)

    if schema_file is not UNSET:
        resolver.schema_file_override = schema_file

    for marker in _markers(cls):
        marker.declaration = resolver.declare(marker.name, **marker.options)

    # Attach only after the override and every marker succeeded
    setattr(cls, _RESOLVER_ATTR, resolver)
    if not hasattr(cls, "_attr_enum"):
        cls._attr_enum = classmethod(_attr_enum)
    logger.debug(f"Extended {cls.__qualname__} with enumerated attributes")

    return resolver


def resolver_for(cls: type) -> SchemaResolver:
    """Get the resolver of an extended class, creating it on first use."""
    return extend(cls)


class EnumeratedAttributes:
    """Mixin giving a class hierarchy enumerated attributes.

    The root class supplies the configuration and engine as class keywords;
    subclasses inherit them and may set their own ``schema_file``.

    Example:
        ```python
        class ApplicationModel(EnumeratedAttributes, configuration=config, engine=engine):
            pass

        class User(ApplicationModel, schema_file="config/user.yml"):
            role = attr_enum(default="member")
        ```
    """

    def __init_subclass__(
        cls,
        *,
        configuration: Configuration | None = None,
        engine: EnumEngine | None = None,
        schema_file: str | os.PathLike | None | Unset = UNSET,
        **kwargs: Any,
    ):
        super().__init_subclass__(**kwargs)

        # Abstract bases may leave the configuration to a subclass
        if configuration is None and engine is None and schema_file is UNSET and not _markers(cls):
            if _parent_resolver(cls) is None:
                return

        extend(cls, configuration=configuration, engine=engine, schema_file=schema_file)

    _attr_enum = classmethod(_attr_enum)

"""enumerated-attribute: Enumerated attributes with values from a YAML schema.

This library lets a class declare enumerated attributes whose allowed values
live in a YAML schema file instead of the source code. Values are scoped by
class name and attribute name:

    shop:
      user:
        role: [member, admin]

The schema file for a class is its own override, else the override of the
nearest base class that has one, else the configuration's default file.
The resolved values are forwarded to an application-supplied enumeration
engine, which stores and validates the attribute.

Public API:
    Configuration: Holder for the default schema file
    EnumeratedAttributes: Mixin enabling enumerated attributes on a class
    attr_enum: Class-body declaration of an enumerated attribute
    extend: Extend a class without the mixin (idempotent)
    resolver_for: Access a class's SchemaResolver (schema file override etc.)
    SchemaResolver: Per-class schema resolution and registration
    EnumEngine: Protocol for the enumeration engine
    AttributeDeclaration, UNSET: Data models
    EnumeratedAttributeError, SchemaFileError, SchemaFileNotFoundError,
    SchemaFileNotReadableError, SchemaFileInvalidError, MissingValuesError:
    Exception types

Example:
    ```python
    from enumerated_attribute import Configuration
    from enumerated_attribute import EnumeratedAttributes
    from enumerated_attribute import attr_enum

    config = Configuration(schema_file="config/enumerated_attributes.yml")

    class ApplicationModel(EnumeratedAttributes, configuration=config, engine=engine):
        pass

    class Shop:
        class User(ApplicationModel):
            role = attr_enum(default="member")  # values from shop.user.role
    ```
"""

from .configuration import Configuration
from .exceptions import EnumeratedAttributeError
from .exceptions import MissingValuesError
from .exceptions import SchemaFileError
from .exceptions import SchemaFileInvalidError
from .exceptions import SchemaFileNotFoundError
from .exceptions import SchemaFileNotReadableError
from .extension import EnumeratedAttributes
from .extension import attr_enum
from .extension import extend
from .extension import resolver_for
from .models import UNSET
from .models import AttributeDeclaration
from .models import EnumEngine
from .resolver import SchemaResolver

__version__ = "0.1.0"

__all__ = [
    "Configuration",
    "EnumeratedAttributes",
    "attr_enum",
    "extend",
    "resolver_for",
    "SchemaResolver",
    "EnumEngine",
    "AttributeDeclaration",
    "UNSET",
    "EnumeratedAttributeError",
    "SchemaFileError",
    "SchemaFileNotFoundError",
    "SchemaFileNotReadableError",
    "SchemaFileInvalidError",
    "MissingValuesError",
]

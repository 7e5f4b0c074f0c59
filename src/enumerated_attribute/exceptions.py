"""Exceptions for enumerated-attribute."""

from os import PathLike


class EnumeratedAttributeError(Exception):
    """Base exception for enumerated attribute errors."""

    pass


class SchemaFileError(EnumeratedAttributeError):
    """Error locating, reading or parsing a schema file.

    Attributes:
        schema_file: The value that caused the error, exactly as it was given
    """

    def __init__(self, message: str, schema_file: str | PathLike | None):
        self.schema_file = schema_file
        super().__init__(message)


class SchemaFileNotFoundError(SchemaFileError):
    """Schema file does not exist or is not a regular file."""

    def __init__(self, schema_file: str | PathLike | None):
        super().__init__(f"Unable to locate the schema file: {str(schema_file)!r}", schema_file)


class SchemaFileNotReadableError(SchemaFileError):
    """Schema file exists but cannot be read by this process."""

    def __init__(self, schema_file: str | PathLike | None):
        super().__init__(f"Unable to read the schema file {str(schema_file)!r}", schema_file)


class SchemaFileInvalidError(SchemaFileError):
    """Schema file is not valid YAML or its top level is not a mapping."""

    def __init__(self, schema_file: str | PathLike | None, reason: str):
        self.reason = reason
        super().__init__(f"Invalid schema file {str(schema_file)!r}: {reason}", schema_file)


class MissingValuesError(EnumeratedAttributeError, KeyError):
    """No enumerated values were found for an attribute.

    Attributes:
        class_name: Name of the class declaring the attribute
        attribute_name: Name of the enumerated attribute
    """

    def __init__(self, class_name: str, attribute_name: str):
        self.class_name = class_name
        self.attribute_name = attribute_name
        super().__init__(f"Enumerated values missing for attribute: {class_name}#{attribute_name}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]

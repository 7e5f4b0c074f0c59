"""Data models for enumerated-attribute."""

from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import Any
from typing import Protocol


class Unset(Enum):
    """Marker for a schema file override that was never assigned.

    Distinct from ``None``, which means the override was explicitly cleared.
    """

    UNSET = "unset"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = Unset.UNSET


class EnumEngine(Protocol):
    """Enumeration engine that stores and enforces enumerated attributes.

    The library only decides which values to pass; storage, coercion,
    defaults and validation belong to the engine.
    """

    def register(self, owner: type, attribute_name: str, options: dict[str, Any]) -> Any:
        """Register an enumerated attribute on ``owner``.

        Args:
            owner: Class declaring the attribute
            attribute_name: Name of the attribute
            options: Engine options; ``values`` holds the allowed values
        """
        ...


@dataclass(frozen=True)
class AttributeDeclaration:
    """Record of an enumerated attribute forwarded to the engine.

    Attributes:
        attribute_name: Name of the declared attribute
        values: Allowed values, in schema (or inline) order
        options: Options exactly as forwarded to the engine
    """

    attribute_name: str
    values: tuple[Any, ...]
    options: dict[str, Any] = field(default_factory=dict)

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Attribute definitions for record schemas.

An `AttributeDefinition` describes one declared attribute of an entity kind:
how it is read and written, its optional default, and how it is projected by
`Model.to_json()`. Definitions are immutable; redeclaring a name in a schema
replaces the whole definition.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from .base import FrozenModel
from .enums import AccessMode, SerializeRule

# Option keys accepted by the schema builder, mapped to definition fields
OPTION_ALIASES = {"get": "getter", "set": "setter"}


def storage_getter(name: str) -> Callable[[Any], Any]:
    """Standard getter reading ``name`` from a record's attribute storage."""

    def getter(record: Any) -> Any:
        return record.attributes.get(name)

    getter.__name__ = f"get_{name}"
    return getter


def storage_setter(name: str) -> Callable[[Any, Any], None]:
    """Standard setter writing ``name`` into a record's attribute storage."""

    def setter(record: Any, value: Any) -> None:
        record.attributes[name] = value

    setter.__name__ = f"set_{name}"
    return setter


class AttributeDefinition(FrozenModel):
    """
    Definition of a single declared attribute.

    Attributes:
        name: Attribute name, unique within a schema
        enumerable: Whether the attribute is listed by `Model.keys()` and
            `repr()`
        default: Initial stored value. Only meaningful when explicitly
            given, see `has_default`
        serialize: Serialization option. ``False`` omits the attribute from
            JSON projection, a callable transforms the value, anything else
            includes the value as-is
        getter: ``get(record)`` returning the attribute value
        setter: ``set(record, value)`` storing the attribute value
    """

    name: str
    enumerable: bool = True
    default: Any = None
    serialize: Any = True
    getter: Optional[Callable[[Any], Any]] = None
    setter: Optional[Callable[[Any, Any], Any]] = None

    @classmethod
    def from_options(cls, name: str, options: Mapping[str, Any]) -> "AttributeDefinition":
        """
        Build a definition from builder options.

        Accepts the ``get``/``set`` option keys as well as the field names.
        Unknown option keys fail validation.
        """
        fields: Dict[str, Any] = {}
        for key, value in options.items():
            fields[OPTION_ALIASES.get(key, key)] = value
        return cls(name=name, **fields)

    @property
    def has_default(self) -> bool:
        """True when a default was declared, including falsy defaults."""
        return "default" in self.model_fields_set

    @property
    def readable(self) -> bool:
        return self.getter is not None

    @property
    def writable(self) -> bool:
        return self.setter is not None

    @property
    def access(self) -> AccessMode:
        return AccessMode.from_capabilities(self.readable, self.writable)

    @property
    def serialize_rule(self) -> SerializeRule:
        if not self.serialize:
            return SerializeRule.OMIT
        if callable(self.serialize):
            return SerializeRule.TRANSFORM
        return SerializeRule.AS_IS

    def serialized(self, value: Any) -> Any:
        """Apply the serialization transform, if any, to ``value``."""
        if self.serialize_rule is SerializeRule.TRANSFORM:
            return self.serialize(value)
        return value

    def as_property(self) -> property:
        """Python property exposing this attribute on an entity kind."""
        return property(self.getter, self.setter, doc=f"Declared attribute '{self.name}'.")

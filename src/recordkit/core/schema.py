# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Record schemas.

A `Schema` holds the ordered attribute definitions of one entity kind. It is
populated exactly once by a declaration callback which receives a
`SchemaBuilder`:

    schema = Schema(lambda attr: attr.reader("name"))

The builder offers `property`, `reader`, `writer` and `accessor`. The last
three layer caller options over the standard storage getter and/or setter
and then route through `property`, so any option can replace the standard
behavior. Once the callback returns the builder is closed and the schema is
read-only.
"""

from __future__ import annotations

import copy
import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Tuple

from .attribute import AttributeDefinition, storage_getter, storage_setter
from .errors import SchemaFrozenError, UnknownAttributeError

logger = logging.getLogger(__name__)

Declaration = Callable[["SchemaBuilder"], Any]

# Base options every declared attribute starts from
PROPERTY_DEFAULTS: Dict[str, Any] = {"enumerable": True, "serialize": True}


class SchemaBuilder:
    """Declaration interface handed to a schema's declaration callback."""

    def __init__(self, attributes: Dict[str, AttributeDefinition]):
        self._attributes = attributes
        self._closed = False

    def property(self, name: str, **options: Any) -> AttributeDefinition:
        """
        Declare a generic attribute.

        Options are merged over ``enumerable=True, serialize=True``. A prior
        definition under the same name is replaced and keeps its position.

        Args:
            name: Attribute name
            **options: ``default``, ``serialize``, ``enumerable``, ``get``
                and ``set``

        Returns:
            The stored definition

        Raises:
            SchemaFrozenError: If the schema has already been built
            pydantic.ValidationError: If an option is unknown or invalid
        """
        if self._closed:
            raise SchemaFrozenError(name)
        definition = AttributeDefinition.from_options(
            name, {**PROPERTY_DEFAULTS, **options}
        )
        self._attributes[name] = definition
        return definition

    def reader(self, name: str, **options: Any) -> AttributeDefinition:
        """Declare a read-only attribute backed by record storage."""
        return self.property(name, **{"get": storage_getter(name), **options})

    def writer(self, name: str, **options: Any) -> AttributeDefinition:
        """Declare a write-only attribute backed by record storage."""
        return self.property(name, **{"set": storage_setter(name), **options})

    def accessor(self, name: str, **options: Any) -> AttributeDefinition:
        """Declare a read/write attribute backed by record storage."""
        return self.property(
            name,
            **{"get": storage_getter(name), "set": storage_setter(name), **options},
        )

    def close(self) -> None:
        self._closed = True


class Schema:
    """
    Ordered, read-only mapping of attribute names to definitions.

    Args:
        declaration: Callback invoked once with a `SchemaBuilder`
        parent: Schema whose definitions are copied, in order, before the
            callback runs. Used when extending an existing entity kind

    Errors raised by ``declaration`` propagate unchanged; no partial schema
    is kept.
    """

    def __init__(self, declaration: Declaration, parent: Optional["Schema"] = None):
        attributes: Dict[str, AttributeDefinition] = (
            dict(parent.attributes) if parent is not None else {}
        )
        builder = SchemaBuilder(attributes)
        try:
            declaration(builder)
        finally:
            builder.close()
        self._attributes: Mapping[str, AttributeDefinition] = MappingProxyType(attributes)
        logger.debug(f"Built schema with {len(attributes)} attribute(s): {list(attributes)}")

    @property
    def attributes(self) -> Mapping[str, AttributeDefinition]:
        return self._attributes

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    def get(self, name: str) -> Optional[AttributeDefinition]:
        return self._attributes.get(name)

    def for_each(self, visit: Callable[[str, AttributeDefinition], Any]) -> None:
        """Call ``visit(name, definition)`` for each attribute in declaration order."""
        for name, definition in self._attributes.items():
            visit(name, definition)

    def items(self) -> Iterator[Tuple[str, AttributeDefinition]]:
        return iter(self._attributes.items())

    def attributes_with_defaults(self, copy_values: bool = True) -> Dict[str, Any]:
        """
        Fresh storage mapping pre-filled with declared defaults.

        Attributes without a default are absent from the result.

        Args:
            copy_values: Deep-copy each default so records never share
                mutable default values

        Returns:
            New dict of attribute name to default value
        """
        defaults: Dict[str, Any] = {}
        for name, definition in self._attributes.items():
            if definition.has_default:
                value = definition.default
                defaults[name] = copy.deepcopy(value) if copy_values else value
        return defaults

    def __getitem__(self, name: str) -> AttributeDefinition:
        try:
            return self._attributes[name]
        except KeyError:
            raise UnknownAttributeError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._attributes

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"Schema({', '.join(self._attributes)})"

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Record base class and entity kind declaration.

An entity kind is a subclass of `Model` carrying a `Schema`. Every declared
attribute is exposed on the kind as a Python property that either calls the
custom ``get``/``set`` functions of the definition or delegates to the
record's ``attributes`` storage.

Example:
    ```python
    def set_age(record, value):
        record.attributes["age"] = int(value)

    def declare_person(attr):
        attr.accessor("first_name")
        attr.accessor("last_name")
        attr.accessor("age", default=10, serialize=lambda v: v * 2, set=set_age)
        attr.property(
            "full_name",
            serialize=False,
            get=lambda r: f"{r.first_name} {r.last_name}",
        )

    Person = Model.extend(declare_person, name="Person")

    john = Person(first_name="John", last_name="Cleese")
    john.full_name  # 'John Cleese'
    john.to_json()  # {'first_name': 'John', 'last_name': 'Cleese', 'age': 20}
    ```

Kinds can also be declared with a class statement, which allows adding
ordinary methods:

    ```python
    class Person(Model, declare=declare_person):
        def greeting(self):
            return f"Hello, {self.first_name}"
    ```
"""

from __future__ import annotations

import logging
import types
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Type, TypeVar

from .enums import SerializeRule
from .errors import UnknownAttributeError
from .schema import Declaration, Schema
from .settings import ModelSettings

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound="Model")

STORAGE_SLOT = "attributes"


def _shadows_machinery(name: str) -> bool:
    """True for names that would replace a `Model` member or private hook."""
    return name.startswith("_") or hasattr(Model, name)


class Model:
    """
    Base class for records.

    Subclasses declared through `extend` (or ``declare=`` in a class
    statement) get a shared, read-only `schema`. Records only accept
    assignment to declared attributes.
    """

    __slots__ = ("attributes",)

    schema: ClassVar[Optional[Schema]] = None
    settings: ClassVar[ModelSettings] = ModelSettings()

    def __init_subclass__(
        cls,
        declare: Optional[Declaration] = None,
        settings: Optional[ModelSettings] = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if settings is not None:
            cls.settings = settings
        if declare is None:
            # Plain subclass: reuse the parent kind's schema and properties
            return

        schema = Schema(declare, parent=cls.schema)
        reserved = [name for name in schema if _shadows_machinery(name)]
        if reserved:
            raise ValueError(
                f"Cannot declare reserved attribute name(s) on {cls.__name__}: "
                f"{sorted(reserved)}"
            )
        # Members defined in a class statement body would be replaced silently
        clashes = [name for name in schema if name in cls.__dict__]
        if clashes:
            raise ValueError(
                f"Declared attribute(s) {sorted(clashes)} clash with members "
                f"defined on {cls.__name__}"
            )
        cls.schema = schema
        for name, definition in schema.items():
            setattr(cls, name, definition.as_property())
        logger.debug(f"Declared entity kind {cls.__name__} with attributes {list(schema)}")

    @classmethod
    def extend(
        cls: Type[ModelT],
        declare: Declaration,
        name: Optional[str] = None,
        settings: Optional[ModelSettings] = None,
    ) -> Type[ModelT]:
        """
        Create a new entity kind from a declaration callback.

        Args:
            declare: Callback receiving a `SchemaBuilder`
            name: Class name of the new kind, defaults to this class's name
            settings: Settings for the new kind, defaults to this class's

        Returns:
            New subclass of this class. When this class is itself an entity
            kind, its attributes are carried over and may be redeclared.

        Raises:
            ValueError: If a declared name starts with an underscore, names a
                `Model` member, or clashes with a member defined in a class
                statement body
        """
        kwargs: Dict[str, Any] = {"declare": declare}
        if settings is not None:
            kwargs["settings"] = settings
        return types.new_class(
            name or cls.__name__,
            (cls,),
            kwargs,
            lambda ns: ns.update({"__slots__": (), "__module__": cls.__module__}),
        )

    def __init__(self, values: Optional[Mapping[str, Any]] = None, /, **kwargs: Any):
        schema = type(self).schema
        if schema is None:
            raise TypeError(
                f"{type(self).__name__} has no schema; create an entity kind "
                f"with {type(self).__name__}.extend()"
            )
        object.__setattr__(
            self,
            "attributes",
            schema.attributes_with_defaults(copy_values=self.settings.copy_defaults),
        )
        if values is not None or kwargs:
            self.update(values, **kwargs)

    def update(
        self: ModelT, values: Optional[Mapping[str, Any]] = None, /, **kwargs: Any
    ) -> ModelT:
        """
        Assign several declared attributes at once.

        Every key is checked against the schema before anything is assigned.
        Values are then assigned through the attributes' properties in the
        order given, keyword arguments last.

        Raises:
            UnknownAttributeError: If any key is not declared. Nothing is
                assigned in that case
            AttributeError: If an attribute has no setter
        """
        pending: Dict[str, Any] = dict(values) if values is not None else {}
        pending.update(kwargs)
        for key in pending:
            if not self.schema.has_attribute(key):
                raise UnknownAttributeError(key)

        if not self.settings.atomic_update:
            self._assign(pending)
            return self

        snapshot = dict(self.attributes)
        try:
            self._assign(pending)
        except Exception:
            logger.debug(f"Rolling back failed update on {type(self).__name__}")
            self.attributes.clear()
            self.attributes.update(snapshot)
            raise
        return self

    def _assign(self, pending: Mapping[str, Any]) -> None:
        for key, value in pending.items():
            setattr(self, key, value)

    def to_json(self) -> Dict[str, Any]:
        """
        Project the record into a plain dict ready for JSON encoding.

        Attributes are visited in declaration order. ``serialize=False``
        attributes and attributes without a getter are skipped; callable
        ``serialize`` options transform the current value.
        """
        json: Dict[str, Any] = {}
        for name, definition in self.schema.items():
            if definition.serialize_rule is SerializeRule.OMIT or not definition.readable:
                continue
            json[name] = definition.serialized(getattr(self, name))
        return json

    def keys(self) -> List[str]:
        """Names of enumerable, readable attributes in declaration order."""
        return [
            name
            for name, definition in self.schema.items()
            if definition.enumerable and definition.readable
        ]

    def __setattr__(self, name: str, value: Any) -> None:
        if name != STORAGE_SLOT and not self.schema.has_attribute(name):
            raise UnknownAttributeError(name)
        object.__setattr__(self, name, value)

    def __copy__(self: ModelT) -> ModelT:
        # Copies get their own storage mapping; stored values are shared
        clone = object.__new__(type(self))
        object.__setattr__(clone, STORAGE_SLOT, dict(self.attributes))
        return clone

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.attributes == other.attributes

    # Records are mutable and compare by value, so they are unhashable
    __hash__ = None

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.keys())
        return f"{type(self).__name__}({fields})"

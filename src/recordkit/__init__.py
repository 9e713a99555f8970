# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
recordkit - Declarative records with schema-driven JSON projection

Declare the attributes of an entity kind once, then create lightweight,
mutable records from it:

    ```python
    from recordkit import Model

    Point = Model.extend(
        lambda attr: (attr.accessor("x", default=0), attr.accessor("y", default=0)),
        name="Point",
    )
    p = Point(x=3)
    p.to_json()  # {'x': 3, 'y': 0}
    ```
"""

import logging

from .core import (
    AccessMode,
    AttributeDefinition,
    Model,
    ModelSettings,
    Schema,
    SchemaBuilder,
    SchemaFrozenError,
    SerializeRule,
    UnknownAttributeError,
)

# Libraries leave handler configuration to the application
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AccessMode",
    "AttributeDefinition",
    "Model",
    "ModelSettings",
    "Schema",
    "SchemaBuilder",
    "SchemaFrozenError",
    "SerializeRule",
    "UnknownAttributeError",
]

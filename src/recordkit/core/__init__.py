# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
recordkit Core

Schemas, attribute definitions and the record base class.
"""

from .attribute import AttributeDefinition, storage_getter, storage_setter
from .enums import AccessMode, SerializeRule
from .errors import SchemaFrozenError, UnknownAttributeError
from .model import Model
from .schema import Schema, SchemaBuilder
from .settings import ModelSettings

__all__ = [
    # Records
    "Model",
    "ModelSettings",
    # Schemas
    "Schema",
    "SchemaBuilder",
    "AttributeDefinition",
    "storage_getter",
    "storage_setter",
    # Enums
    "AccessMode",
    "SerializeRule",
    # Errors
    "SchemaFrozenError",
    "UnknownAttributeError",
]

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Exceptions raised by record schemas and models.

Both derive from built-in exception types so callers can catch them the way
they would catch any attribute or runtime failure.
"""

from __future__ import annotations


class UnknownAttributeError(AttributeError):
    """Raised when a name is not declared in an entity kind's schema."""

    def __init__(self, name: str):
        super().__init__(f"No such attribute: {name}")
        self.name = name


class SchemaFrozenError(RuntimeError):
    """Raised when a schema builder is used after its schema was built."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Cannot declare attribute '{name}': schema is already built"
        )

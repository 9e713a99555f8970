# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class SerializeRule(str, Enum):
    """
    How an attribute appears in a record's JSON projection.

    Derived from the attribute's ``serialize`` option:
    - falsy (``False``, ``None``) → OMIT
    - callable → TRANSFORM (projected value is ``serialize(value)``)
    - any other truthy value → AS_IS
    """

    OMIT = "omit"
    AS_IS = "as-is"
    TRANSFORM = "transform"


class AccessMode(str, Enum):
    """Read/write capability of a declared attribute."""

    NONE = "none"  # Neither getter nor setter
    READ = "read"
    WRITE = "write"
    READ_WRITE = "read-write"

    @classmethod
    def from_capabilities(cls, readable: bool, writable: bool) -> "AccessMode":
        if readable and writable:
            return cls.READ_WRITE
        if readable:
            return cls.READ
        if writable:
            return cls.WRITE
        return cls.NONE

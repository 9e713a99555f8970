# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field

from .base import FrozenModel


class ModelSettings(FrozenModel):
    """
    Per entity kind configuration for record construction and updates.

    Settings are attached when a kind is declared and inherited by kinds
    extended from it unless they pass their own.

    Usage Examples:
        # Defaults: isolated defaults, no rollback on setter failure
        Person = Model.extend(declare_person)

        # Restore storage if a custom setter fails part way through update()
        Person = Model.extend(
            declare_person,
            settings=ModelSettings(atomic_update=True),
        )
    """

    copy_defaults: bool = Field(
        default=True,
        description=(
            "Deep-copy default values for every new record so compound "
            "defaults (lists, dicts) are never shared between records."
        ),
    )
    atomic_update: bool = Field(
        default=False,
        description=(
            "If True, snapshot attribute storage before update() assigns "
            "values and restore it when a setter raises. Only storage in "
            "the record's `attributes` mapping is restored."
        ),
    )
